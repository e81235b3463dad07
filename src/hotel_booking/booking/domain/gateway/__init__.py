from .currency_converter import CurrencyConverter as CurrencyConverter
from .inventory import Inventory as Inventory
from .notifier import Notifier as Notifier
from .payment_gateway import PaymentGateway as PaymentGateway
