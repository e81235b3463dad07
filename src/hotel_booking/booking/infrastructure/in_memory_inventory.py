import threading
from collections.abc import Mapping

from hotel_booking.booking.domain.gateway import Inventory
from hotel_booking.booking.domain.value_object import BookingRequest, Room
from hotel_booking.shared.domain.exception import NoRoomAvailableException
from hotel_booking.shared.utils import get_logger

logger = get_logger(child=True)


class InMemoryInventory(Inventory):
    """メモリ上で客室を管理する Inventory の具象実装"""

    def __init__(self, rooms: Mapping[str, Room]) -> None:
        self._rooms = dict(rooms)
        self._booked: set[str] = set()
        self._lock = threading.Lock()

    def get_available_rooms(self) -> list[Room]:
        with self._lock:
            return [
                room
                for room_id, room in self._rooms.items()
                if room_id not in self._booked
            ]

    def find_available_room(self, request: BookingRequest) -> str:
        """定員を満たす最初の空室を確保する"""
        with self._lock:
            for room_id, room in self._rooms.items():
                if room_id in self._booked:
                    continue
                if room.capacity >= request.guest_count:
                    self._booked.add(room_id)
                    return room_id
        raise NoRoomAvailableException(
            f"No room available for {request.guest_count} guests"
        )

    def release_room(self, room_id: str) -> None:
        """確保済みの部屋を解放する（このプロセスで確保していない部屋は警告のみ）"""
        with self._lock:
            if room_id not in self._booked:
                logger.warning(
                    "Room is not reserved in this process", extra={"room_id": room_id}
                )
                return
            self._booked.remove(room_id)
