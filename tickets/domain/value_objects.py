"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from enum import Enum


class TicketType(Enum):
    """Ticket categories sold at the box office."""

    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"


def is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class AccountId:
    """Positive integer identifying the purchasing account."""

    value: int

    def __post_init__(self) -> None:
        if not is_int(self.value):
            raise ValueError("Account ID must be an integer")
        if self.value <= 0:
            raise ValueError("Account ID must be greater than 0")


@dataclass(frozen=True)
class TicketTypeRequest:
    """A number of tickets of one type. Immutable once built."""

    ticket_type: TicketType
    no_of_tickets: int

    def __post_init__(self) -> None:
        if self.ticket_type is None:
            raise ValueError("Ticket type is required")
        if not isinstance(self.ticket_type, TicketType):
            raise ValueError(f"Unknown ticket type: {self.ticket_type!r}")
        if not is_int(self.no_of_tickets):
            raise ValueError("Number of tickets must be an integer")
        if self.no_of_tickets <= 0:
            raise ValueError("Number of tickets must be greater than 0")
