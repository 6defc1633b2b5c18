"""Pytest configuration and shared fixtures."""

import pytest

from tickets.services import TicketService

from tests.fakes import RecordingPaymentService, RecordingReservationService


@pytest.fixture
def payment_service() -> RecordingPaymentService:
    return RecordingPaymentService()


@pytest.fixture
def reservation_service() -> RecordingReservationService:
    return RecordingReservationService()


@pytest.fixture
def service(
    payment_service: RecordingPaymentService,
    reservation_service: RecordingReservationService,
) -> TicketService:
    return TicketService(payment_service, reservation_service)
