"""Gateways that record each call in the log and always succeed.

Used where no real payment provider or booking system is wired in.
"""

import logging

from tickets.gateways.interfaces import SeatReservationService, TicketPaymentService

logger = logging.getLogger(__name__)


class LoggingPaymentService(TicketPaymentService):
    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        logger.info("Charged account %s: %s", account_id, total_amount_to_pay)


class LoggingReservationService(SeatReservationService):
    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        logger.info("Reserved %s seat(s) for account %s", total_seats_to_allocate, account_id)
