from hotel_booking.booking.domain.gateway import CurrencyConverter
from hotel_booking.shared.domain.exception import RateUnavailableException


class FixedRateCurrencyConverter(CurrencyConverter):
    """固定レートで基準通貨に換算する CurrencyConverter"""

    def __init__(self, rate: float | None) -> None:
        if rate is not None and rate <= 0:
            raise ValueError("Currency rate must be positive")
        self._rate = rate

    def to_reference_currency(self, amount: float) -> float:
        if self._rate is None:
            raise RateUnavailableException("Reference currency rate is not configured")
        return amount * self._rate
