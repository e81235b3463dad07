from unittest.mock import patch

import pytest

from hotel_booking.booking.domain.entity import BookingRecord
from hotel_booking.booking.domain.value_object import BookingId
from hotel_booking.booking.handlers import cancel_booking
from hotel_booking.shared.domain.exception import ResourceNotFoundException


class TestCancelBookingHandler:
    @pytest.fixture
    def service(self, booking_service):
        with patch.object(
            cancel_booking, "get_booking_service", return_value=booking_service
        ):
            yield booking_service

    def test_cancels_booking(
        self, service, lambda_context, booking_store, inventory, create_booking_request
    ):
        booking_id = BookingId(value="booking-123")
        booking_store.get.return_value = BookingRecord(
            booking_id=booking_id, request=create_booking_request(room_id="1.3")
        )

        response = cancel_booking.lambda_handler(
            {"Payload": {"booking_id": "booking-123"}}, lambda_context
        )

        assert response["status"] == "success"
        assert response["message"] == "Booking cancelled: booking-123"
        booking_store.get.assert_called_once_with(booking_id)
        inventory.release_room.assert_called_once_with("1.3")

    def test_not_found_returns_error(self, service, lambda_context, booking_store):
        booking_store.get.side_effect = ResourceNotFoundException("Booking not found")

        response = cancel_booking.lambda_handler(
            {"booking_id": "missing"}, lambda_context
        )

        assert response["error_type"] == "NOT_FOUND"

    def test_missing_booking_id_returns_error(self, service, lambda_context):
        response = cancel_booking.lambda_handler({}, lambda_context)

        assert response["error_type"] == "INVALID_REQUEST"
