from datetime import date
from unittest.mock import patch

import pytest

from hotel_booking.booking.domain.value_object import BookingId, BookingRequest
from hotel_booking.booking.handlers import make_booking
from hotel_booking.shared.domain.exception import (
    PaymentDeclinedException,
    RateUnavailableException,
)


class TestMakeBookingHandler:
    @pytest.fixture
    def event(self):
        return {
            "date_from": "2023-01-01",
            "date_to": "2023-01-05",
            "guest_count": 2,
            "prepaid": True,
        }

    @pytest.fixture
    def service(self, booking_service):
        with patch.object(
            make_booking, "get_booking_service", return_value=booking_service
        ):
            yield booking_service

    def test_returns_booking_data(
        self, service, event, lambda_context, payment_gateway
    ):
        response = make_booking.lambda_handler(event, lambda_context)

        assert response["status"] == "success"
        assert response["data"] == {
            "booking_id": "booking-123",
            "price": 400.0,
            "price_in_reference_currency": 400.0,
        }
        payment_gateway.charge.assert_called_once_with(
            BookingRequest(
                room_id=None,
                date_from=date(2023, 1, 1),
                date_to=date(2023, 1, 5),
                guest_count=2,
                prepaid=True,
            ),
            400.0,
        )

    def test_accepts_step_functions_payload(self, service, event, lambda_context):
        response = make_booking.lambda_handler({"Payload": event}, lambda_context)

        assert response["data"]["booking_id"] == str(BookingId(value="booking-123"))

    def test_invalid_dates_return_error(self, service, event, lambda_context):
        event["date_to"] = "2023-01-01"

        response = make_booking.lambda_handler(event, lambda_context)

        assert response["status"] == "error"
        assert response["error_type"] == "INVALID_REQUEST"

    def test_zero_guests_return_error(self, service, event, lambda_context):
        event["guest_count"] = 0

        response = make_booking.lambda_handler(event, lambda_context)

        assert response["error_type"] == "INVALID_REQUEST"

    def test_business_error_returns_error(
        self, service, event, lambda_context, payment_gateway, booking_store
    ):
        payment_gateway.charge.side_effect = PaymentDeclinedException("declined")

        response = make_booking.lambda_handler(event, lambda_context)

        assert response == {
            "status": "error",
            "error_type": "BUSINESS_ERROR",
            "message": "declined",
        }
        booking_store.save.assert_not_called()

    def test_rate_unavailable_returns_error_without_booking(
        self,
        service,
        event,
        lambda_context,
        currency_converter,
        inventory,
        payment_gateway,
        booking_store,
    ):
        currency_converter.to_reference_currency.side_effect = (
            RateUnavailableException("Reference currency rate is not configured")
        )

        response = make_booking.lambda_handler(event, lambda_context)

        assert response == {
            "status": "error",
            "error_type": "RATE_UNAVAILABLE",
            "message": "Reference currency rate is not configured",
        }
        inventory.find_available_room.assert_not_called()
        payment_gateway.charge.assert_not_called()
        booking_store.save.assert_not_called()
