from aws_lambda_powertools.utilities.typing import LambdaContext

from hotel_booking.booking.domain.value_object import BookingId
from hotel_booking.booking.handlers.container import get_booking_service
from hotel_booking.booking.handlers.errors import HANDLED_ERRORS, to_error_response
from hotel_booking.booking.handlers.request_models import CancelBookingRequest
from hotel_booking.booking.handlers.response_models import SuccessResponse
from hotel_booking.shared.utils import get_logger

logger = get_logger()


@logger.inject_lambda_context
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """予約キャンセル Lambda ハンドラ"""
    logger.info("Received cancel booking request")

    payload = event.get("Payload", event)
    try:
        request = CancelBookingRequest.model_validate(payload)
        get_booking_service().cancel_booking(BookingId(value=request.booking_id))
    except HANDLED_ERRORS as e:
        logger.warning("Cancellation failed", extra={"error": str(e)})
        return to_error_response(e)

    return SuccessResponse(message=f"Booking cancelled: {request.booking_id}").model_dump()
