from dataclasses import dataclass

from hotel_booking.booking.domain.value_object.booking_id import BookingId
from hotel_booking.booking.domain.value_object.booking_request import BookingRequest


@dataclass(frozen=True)
class BookingRecord:
    """永続化された予約（予約ID + 予約リクエスト）"""

    booking_id: BookingId
    request: BookingRequest

    @property
    def room_id(self) -> str | None:
        return self.request.room_id
