from abc import ABC, abstractmethod


class CurrencyConverter(ABC):
    """基準通貨への換算"""

    @abstractmethod
    def to_reference_currency(self, amount: float) -> float:
        """現地通貨の金額を基準通貨に換算する

        レートが取得できない場合は RateUnavailableException を送出する。
        """
        raise NotImplementedError
