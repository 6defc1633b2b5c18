"""Domain error codes for ticket purchases."""

from dataclasses import dataclass
from enum import Enum
from typing import Self


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_ACCOUNT_ID = "INVALID_ACCOUNT_ID"
    NO_TICKETS_REQUESTED = "NO_TICKETS_REQUESTED"
    INVALID_TICKET_REQUEST = "INVALID_TICKET_REQUEST"
    TICKET_LIMIT_EXCEEDED = "TICKET_LIMIT_EXCEEDED"
    ADULT_REQUIRED = "ADULT_REQUIRED"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidPurchaseError(DomainError):
    """Raised when a purchase breaks a business rule.

    Every rejection uses this one type; ``code`` says which rule failed.
    """

    def __init__(self, code: ErrorCode, message: str) -> None:
        super().__init__(code=code, message=message)

    @classmethod
    def invalid_account(cls) -> Self:
        return cls(ErrorCode.INVALID_ACCOUNT_ID, "Account ID must be a positive integer")

    @classmethod
    def no_tickets(cls) -> Self:
        return cls(ErrorCode.NO_TICKETS_REQUESTED, "At least one ticket request is required")

    @classmethod
    def invalid_request(cls) -> Self:
        return cls(ErrorCode.INVALID_TICKET_REQUEST, "Ticket request is missing or malformed")

    @classmethod
    def limit_exceeded(cls, limit: int) -> Self:
        return cls(
            ErrorCode.TICKET_LIMIT_EXCEEDED,
            f"No more than {limit} tickets may be purchased at once",
        )

    @classmethod
    def adult_required(cls) -> Self:
        return cls(
            ErrorCode.ADULT_REQUIRED,
            "Child and infant tickets require at least one adult ticket",
        )
