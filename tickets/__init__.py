from tickets.domain import PurchaseSummary, TicketType, TicketTypeRequest
from tickets.domain.errors import DomainError, ErrorCode, InvalidPurchaseError
from tickets.policy import PricingPolicy
from tickets.services import TicketService

__all__ = [
    "TicketService",
    "TicketType",
    "TicketTypeRequest",
    "PurchaseSummary",
    "PricingPolicy",
    "DomainError",
    "ErrorCode",
    "InvalidPurchaseError",
]
