from abc import ABC, abstractmethod

from hotel_booking.booking.domain.value_object.booking_request import BookingRequest


class Notifier(ABC):
    """予約確認通知のインターフェース"""

    @abstractmethod
    def send_booking_confirmation(self, request: BookingRequest) -> None:
        """予約確認を送信する"""
        raise NotImplementedError
