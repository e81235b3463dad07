from abc import ABC, abstractmethod

from hotel_booking.booking.domain.value_object.booking_request import BookingRequest


class PaymentGateway(ABC):
    """決済のインターフェース"""

    @abstractmethod
    def charge(self, request: BookingRequest, amount: float) -> None:
        """予約代金を請求する（拒否時は BusinessRuleViolationException）"""
        raise NotImplementedError
