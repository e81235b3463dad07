from abc import ABC, abstractmethod

from hotel_booking.booking.domain.entity.booking_record import BookingRecord
from hotel_booking.booking.domain.value_object.booking_id import BookingId
from hotel_booking.booking.domain.value_object.booking_request import BookingRequest


class BookingStore(ABC):
    """予約レポジトリのインターフェース"""

    @abstractmethod
    def save(self, request: BookingRequest) -> BookingId:
        """予約を保存し、採番した予約IDを返す"""
        raise NotImplementedError

    @abstractmethod
    def get(self, booking_id: BookingId) -> BookingRecord:
        """予約IDで検索する（存在しない場合は ResourceNotFoundException）"""
        raise NotImplementedError

    @abstractmethod
    def delete(self, booking_id: BookingId) -> None:
        """予約を削除する"""
        raise NotImplementedError
