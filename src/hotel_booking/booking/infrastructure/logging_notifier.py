from hotel_booking.booking.domain.gateway import Notifier
from hotel_booking.booking.domain.value_object import BookingRequest
from hotel_booking.shared.domain.exception import NotificationFailedException
from hotel_booking.shared.utils import get_logger

logger = get_logger(child=True)


class LoggingNotifier(Notifier):
    """予約確認をログに出力する Notifier"""

    def __init__(self, ready: bool = True) -> None:
        self._ready = ready

    def send_booking_confirmation(self, request: BookingRequest) -> None:
        if not self._ready:
            raise NotificationFailedException("Mail server is not ready")
        logger.info(
            "Booking confirmation sent",
            extra={
                "room_id": request.room_id,
                "date_from": request.date_from.isoformat(),
                "date_to": request.date_to.isoformat(),
            },
        )
