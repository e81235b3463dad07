from .booking_store import BookingStore as BookingStore
