from .booking_id import BookingId as BookingId
from .booking_request import BookingRequest as BookingRequest
from .room import Room as Room
