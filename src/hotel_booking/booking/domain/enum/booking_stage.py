from enum import Enum


class BookingStage(str, Enum):
    """予約処理の進行段階"""

    CREATED = "CREATED"
    ROOM_RESOLVED = "ROOM_RESOLVED"
    PRICED = "PRICED"
    PAID = "PAID"
    PAYMENT_SKIPPED = "PAYMENT_SKIPPED"
    PERSISTED = "PERSISTED"
    CONFIRMED = "CONFIRMED"
