from tickets.domain.models import PurchaseSummary, TicketTally
from tickets.domain.value_objects import AccountId, TicketType, TicketTypeRequest

__all__ = [
    "AccountId",
    "TicketType",
    "TicketTypeRequest",
    "TicketTally",
    "PurchaseSummary",
]
