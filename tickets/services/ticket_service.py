"""Ticket service - all purchase rules live here.

Services:
- Depend only on interfaces (gateways)
- Validate purchase rules before any side effect
- Return domain models or raise domain errors
"""

import logging
from collections.abc import Sequence

from tickets.domain.errors import InvalidPurchaseError
from tickets.domain.models import PurchaseSummary, TicketTally
from tickets.domain.value_objects import AccountId, TicketType, TicketTypeRequest
from tickets.gateways.interfaces import SeatReservationService, TicketPaymentService
from tickets.policy import PricingPolicy

logger = logging.getLogger(__name__)


class TicketService:
    """Validates, prices and books ticket purchases."""

    def __init__(
        self,
        payment_service: TicketPaymentService,
        reservation_service: SeatReservationService,
        policy: PricingPolicy | None = None,
    ) -> None:
        if payment_service is None:
            raise ValueError("payment_service is required")
        if reservation_service is None:
            raise ValueError("reservation_service is required")
        self._payment_service = payment_service
        self._reservation_service = reservation_service
        self._policy = policy or PricingPolicy()

    def purchase_tickets(
        self,
        account_id: int | None,
        ticket_requests: Sequence[TicketTypeRequest] | None,
    ) -> PurchaseSummary:
        """Charge the account and reserve seats for the requested tickets.

        Payment is taken before seats are reserved. Neither gateway is
        called unless every rule passes.

        Raises:
            InvalidPurchaseError: If the account, the requests, the ticket
                limit or the adult accompaniment rule is violated.
        """
        try:
            account = self._validate_account(account_id)
            tally = self._tally(ticket_requests)
        except InvalidPurchaseError as exc:
            logger.warning("Rejected purchase for account %r: %s", account_id, exc.code.value)
            raise

        total_price = self._price(tally)
        seats = tally.seats

        self._payment_service.make_payment(account.value, total_price)
        self._reservation_service.reserve_seat(account.value, seats)

        logger.info(
            "Purchase completed for account %s: %d ticket(s), paid %d, %d seat(s)",
            account.value,
            tally.total,
            total_price,
            seats,
        )
        return PurchaseSummary(
            account_id=account.value,
            total_price=total_price,
            seats_reserved=seats,
        )

    def _validate_account(self, account_id: int | None) -> AccountId:
        try:
            return AccountId(account_id)
        except ValueError as exc:
            raise InvalidPurchaseError.invalid_account() from exc

    def _tally(self, ticket_requests: Sequence[TicketTypeRequest] | None) -> TicketTally:
        if ticket_requests is None:
            raise InvalidPurchaseError.no_tickets()
        if not isinstance(ticket_requests, Sequence):
            raise InvalidPurchaseError.invalid_request()

        requests = tuple(ticket_requests)
        if not requests:
            raise InvalidPurchaseError.no_tickets()

        for request in requests:
            if not isinstance(request, TicketTypeRequest):
                raise InvalidPurchaseError.invalid_request()
            if not isinstance(request.ticket_type, TicketType):
                raise InvalidPurchaseError.invalid_request()

        tally = TicketTally.from_requests(requests)

        if tally.total > self._policy.max_tickets:
            raise InvalidPurchaseError.limit_exceeded(self._policy.max_tickets)

        # Children and infants must be accompanied by an adult
        if tally.adults == 0 and (tally.children > 0 or tally.infants > 0):
            raise InvalidPurchaseError.adult_required()

        return tally

    def _price(self, tally: TicketTally) -> int:
        return sum(
            self._policy.price_of(ticket_type) * tally.count(ticket_type)
            for ticket_type in TicketType
        )
