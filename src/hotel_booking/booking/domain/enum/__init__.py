from .booking_stage import BookingStage as BookingStage
