from hotel_booking.booking.domain.gateway import PaymentGateway
from hotel_booking.booking.domain.value_object import BookingRequest
from hotel_booking.shared.domain.exception import PaymentDeclinedException
from hotel_booking.shared.utils import get_logger

logger = get_logger(child=True)

DEFAULT_PRICE_LIMIT = 200.0


class PriceLimitPaymentGateway(PaymentGateway):
    """上限額を超える請求を拒否する PaymentGateway"""

    def __init__(self, limit: float = DEFAULT_PRICE_LIMIT) -> None:
        self._limit = limit

    @property
    def limit(self) -> float:
        return self._limit

    def charge(self, request: BookingRequest, amount: float) -> None:
        if amount > self._limit:
            raise PaymentDeclinedException(
                f"Amount {amount} exceeds limit {self._limit}"
            )
        logger.info(
            "Payment accepted",
            extra={"amount": amount, "room_id": request.room_id},
        )
