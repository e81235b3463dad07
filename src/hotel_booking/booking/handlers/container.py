from functools import lru_cache

from hotel_booking.booking.applications.booking_service import BookingService
from hotel_booking.booking.domain.value_object import Room
from hotel_booking.booking.infrastructure import (
    DynamoDBBookingStore,
    FixedRateCurrencyConverter,
    InMemoryInventory,
    LoggingNotifier,
    PriceLimitPaymentGateway,
)
from hotel_booking.shared.config import Settings

DEFAULT_ROOMS = {
    "1.1": Room("Room 1.1", 2),
    "1.2": Room("Room 1.2", 2),
    "1.3": Room("Room 1.3", 5),
    "2.1": Room("Room 2.1", 3),
    "2.2": Room("Room 2.2", 4),
}


def build_booking_service(settings: Settings) -> BookingService:
    """設定から BookingService を組み立てる

    InMemoryInventory の確保状態はプロセス内にしか存在しない。
    コールドスタートで失われ、別コンテナで処理されたキャンセルは部屋を解放しないため、
    単一プロセスでの利用に限る。
    """
    return BookingService(
        inventory=InMemoryInventory(DEFAULT_ROOMS),
        payment_gateway=PriceLimitPaymentGateway(limit=settings.payment_price_limit),
        booking_store=DynamoDBBookingStore(table_name=settings.table_name),
        notifier=LoggingNotifier(),
        currency_converter=FixedRateCurrencyConverter(
            settings.reference_currency_rate
        ),
    )


@lru_cache(maxsize=1)
def get_booking_service() -> BookingService:
    """プロセス内で共有する BookingService を返す"""
    return build_booking_service(Settings.from_env())
