"""Gateway interfaces for the third-party payment and seat booking systems.

Gateways must be swappable. Both are assumed to always succeed.
"""

from abc import ABC, abstractmethod


class TicketPaymentService(ABC):
    """Interface to the payment provider."""

    @abstractmethod
    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        """Charge the account the given amount."""
        ...


class SeatReservationService(ABC):
    """Interface to the seat booking system."""

    @abstractmethod
    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        """Reserve the given number of seats for the account."""
        ...
