from .dynamodb_booking_store import DynamoDBBookingStore as DynamoDBBookingStore
from .fixed_rate_currency_converter import (
    FixedRateCurrencyConverter as FixedRateCurrencyConverter,
)
from .in_memory_booking_store import InMemoryBookingStore as InMemoryBookingStore
from .in_memory_inventory import InMemoryInventory as InMemoryInventory
from .logging_notifier import LoggingNotifier as LoggingNotifier
from .price_limit_payment_gateway import (
    PriceLimitPaymentGateway as PriceLimitPaymentGateway,
)
