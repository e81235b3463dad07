from abc import ABC, abstractmethod
from collections.abc import Sequence

from hotel_booking.booking.domain.value_object.booking_request import BookingRequest
from hotel_booking.booking.domain.value_object.room import Room


class Inventory(ABC):
    """客室在庫のインターフェース"""

    @abstractmethod
    def get_available_rooms(self) -> Sequence[Room]:
        """現在の空室一覧を返す（呼び出しごとに結果が変わりうる）"""
        raise NotImplementedError

    @abstractmethod
    def find_available_room(self, request: BookingRequest) -> str:
        """リクエストに合う空室を確保し、その部屋IDを返す

        空室がない場合は NoRoomAvailableException を送出する。
        """
        raise NotImplementedError

    @abstractmethod
    def release_room(self, room_id: str) -> None:
        """確保済みの部屋を解放する"""
        raise NotImplementedError
