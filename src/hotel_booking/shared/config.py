from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_SERVICE_NAME = "hotel-booking"
DEFAULT_REFERENCE_CURRENCY_RATE = 0.8
DEFAULT_PAYMENT_PRICE_LIMIT = 1000.0


def _float_from_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ValueError(f"Invalid {name}: {raw}") from e


@dataclass(frozen=True)
class Settings:
    """環境変数から読み込むアプリケーション設定"""

    table_name: str | None
    reference_currency_rate: float = DEFAULT_REFERENCE_CURRENCY_RATE
    payment_price_limit: float = DEFAULT_PAYMENT_PRICE_LIMIT

    def __post_init__(self) -> None:
        if self.reference_currency_rate <= 0:
            raise ValueError("Reference currency rate must be positive")
        if self.payment_price_limit <= 0:
            raise ValueError("Payment price limit must be positive")

    @classmethod
    def from_env(cls) -> Settings:
        """環境変数から Settings を生成する"""
        return cls(
            table_name=os.getenv("TABLE_NAME"),
            reference_currency_rate=_float_from_env(
                "REFERENCE_CURRENCY_RATE", DEFAULT_REFERENCE_CURRENCY_RATE
            ),
            payment_price_limit=_float_from_env(
                "PAYMENT_PRICE_LIMIT", DEFAULT_PAYMENT_PRICE_LIMIT
            ),
        )
