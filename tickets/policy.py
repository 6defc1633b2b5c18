"""Business constants for pricing and purchase limits."""

from dataclasses import dataclass

from tickets.domain.value_objects import TicketType, is_int

MAX_TICKETS_PER_PURCHASE = 25
ADULT_PRICE = 25
CHILD_PRICE = 15
INFANT_PRICE = 0


@dataclass(frozen=True)
class PricingPolicy:
    """Ticket prices (whole pounds) and the per-purchase ticket cap."""

    adult_price: int = ADULT_PRICE
    child_price: int = CHILD_PRICE
    infant_price: int = INFANT_PRICE
    max_tickets: int = MAX_TICKETS_PER_PURCHASE

    def __post_init__(self) -> None:
        for price in (self.adult_price, self.child_price, self.infant_price):
            if not is_int(price):
                raise ValueError("Ticket price must be an integer")
            if price < 0:
                raise ValueError("Ticket price cannot be negative")
        if not is_int(self.max_tickets):
            raise ValueError("Ticket limit must be an integer")
        if self.max_tickets < 1:
            raise ValueError("Ticket limit must be at least 1")

    def price_of(self, ticket_type: TicketType) -> int:
        match ticket_type:
            case TicketType.ADULT:
                return self.adult_price
            case TicketType.CHILD:
                return self.child_price
            case TicketType.INFANT:
                return self.infant_price
