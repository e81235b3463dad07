from aws_lambda_powertools.utilities.typing import LambdaContext

from hotel_booking.booking.domain.value_object import BookingRequest
from hotel_booking.booking.handlers.container import get_booking_service
from hotel_booking.booking.handlers.errors import HANDLED_ERRORS, to_error_response
from hotel_booking.booking.handlers.request_models import MakeBookingRequest
from hotel_booking.booking.handlers.response_models import (
    BookingData,
    SuccessResponse,
)
from hotel_booking.shared.utils import get_logger

logger = get_logger()


@logger.inject_lambda_context
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """予約作成 Lambda ハンドラ"""
    logger.info("Received make booking request")

    payload = event.get("Payload", event)
    service = get_booking_service()
    try:
        request = MakeBookingRequest.model_validate(payload)
        booking_request = BookingRequest(
            room_id=request.room_id,
            date_from=request.date_from,
            date_to=request.date_to,
            guest_count=request.guest_count,
            prepaid=request.prepaid,
        )
        price = service.calculate_price(booking_request)
        price_in_reference_currency = service.calculate_price_in_reference_currency(
            booking_request
        )
        booking_id = service.make_booking(booking_request)
    except HANDLED_ERRORS as e:
        logger.warning("Booking failed", extra={"error": str(e)})
        return to_error_response(e)

    return SuccessResponse(
        data=BookingData(
            booking_id=str(booking_id),
            price=price,
            price_in_reference_currency=price_in_reference_currency,
        )
    ).model_dump()
