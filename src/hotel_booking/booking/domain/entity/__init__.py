from .booking_record import BookingRecord as BookingRecord
