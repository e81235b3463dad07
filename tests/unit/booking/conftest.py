from dataclasses import dataclass
from datetime import date
from unittest.mock import MagicMock

import pytest

from hotel_booking.booking.applications.booking_service import BookingService
from hotel_booking.booking.domain.gateway import (
    CurrencyConverter,
    Inventory,
    Notifier,
    PaymentGateway,
)
from hotel_booking.booking.domain.repository import BookingStore
from hotel_booking.booking.domain.value_object import BookingId, BookingRequest


@dataclass
class FakeLambdaContext:
    function_name: str = "test"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = "arn:aws:lambda:ap-northeast-1:123456789012:function:test"
    aws_request_id: str = "da658bd3-2d6f-4e7b-8ec2-937234644fdc"


@pytest.fixture
def lambda_context():
    return FakeLambdaContext()


@pytest.fixture
def create_booking_request():
    """BookingRequest を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        room_id: str | None = "1",
        date_from: date = date(2023, 1, 1),
        date_to: date = date(2023, 1, 5),
        guest_count: int = 2,
        prepaid: bool = False,
    ) -> BookingRequest:
        return BookingRequest(
            room_id=room_id,
            date_from=date_from,
            date_to=date_to,
            guest_count=guest_count,
            prepaid=prepaid,
        )

    return _factory


@pytest.fixture
def inventory():
    mock = MagicMock(spec=Inventory)
    mock.get_available_rooms.return_value = []
    mock.find_available_room.return_value = "1.3"
    return mock


@pytest.fixture
def payment_gateway():
    return MagicMock(spec=PaymentGateway)


@pytest.fixture
def booking_store():
    mock = MagicMock(spec=BookingStore)
    mock.save.return_value = BookingId(value="booking-123")
    return mock


@pytest.fixture
def notifier():
    return MagicMock(spec=Notifier)


@pytest.fixture
def currency_converter():
    mock = MagicMock(spec=CurrencyConverter)
    mock.to_reference_currency.side_effect = lambda amount: amount
    return mock


@pytest.fixture
def booking_service(
    inventory, payment_gateway, booking_store, notifier, currency_converter
):
    return BookingService(
        inventory=inventory,
        payment_gateway=payment_gateway,
        booking_store=booking_store,
        notifier=notifier,
        currency_converter=currency_converter,
    )
