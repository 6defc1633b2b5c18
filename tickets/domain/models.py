"""Domain models computed during a single purchase.

Nothing here is persisted; a tally lives for one ``purchase_tickets`` call.
"""

from dataclasses import dataclass
from typing import Iterable, Self

from tickets.domain.value_objects import TicketType, TicketTypeRequest


@dataclass(frozen=True)
class TicketTally:
    """Ticket counts per type, summed across all requests of a purchase."""

    adults: int = 0
    children: int = 0
    infants: int = 0

    @classmethod
    def from_requests(cls, requests: Iterable[TicketTypeRequest]) -> Self:
        counts = {ticket_type: 0 for ticket_type in TicketType}
        for request in requests:
            counts[request.ticket_type] += request.no_of_tickets
        return cls(
            adults=counts[TicketType.ADULT],
            children=counts[TicketType.CHILD],
            infants=counts[TicketType.INFANT],
        )

    @property
    def total(self) -> int:
        return self.adults + self.children + self.infants

    @property
    def seats(self) -> int:
        """Infants sit on an adult's lap and take no seat."""
        return self.adults + self.children

    def count(self, ticket_type: TicketType) -> int:
        match ticket_type:
            case TicketType.ADULT:
                return self.adults
            case TicketType.CHILD:
                return self.children
            case TicketType.INFANT:
                return self.infants


@dataclass(frozen=True)
class PurchaseSummary:
    """Outcome of a successful purchase."""

    account_id: int
    total_price: int
    seats_reserved: int
