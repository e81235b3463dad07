from hotel_booking.booking.domain.entity import BookingRecord
from hotel_booking.booking.domain.repository import BookingStore
from hotel_booking.booking.domain.value_object import BookingId, BookingRequest
from hotel_booking.shared.domain.exception import ResourceNotFoundException


class InMemoryBookingStore(BookingStore):
    """メモリ上に予約を保持する BookingStore の具象実装"""

    def __init__(self) -> None:
        self._records: dict[BookingId, BookingRecord] = {}

    def save(self, request: BookingRequest) -> BookingId:
        booking_id = BookingId.generate()
        self._records[booking_id] = BookingRecord(booking_id=booking_id, request=request)
        return booking_id

    def get(self, booking_id: BookingId) -> BookingRecord:
        try:
            return self._records[booking_id]
        except KeyError:
            raise ResourceNotFoundException(f"Booking not found: {booking_id}")

    def delete(self, booking_id: BookingId) -> None:
        if self._records.pop(booking_id, None) is None:
            raise ResourceNotFoundException(f"Booking not found: {booking_id}")
