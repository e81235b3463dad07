from .value_object import BookingId as BookingId
from .value_object import BookingRequest as BookingRequest
from .value_object import Room as Room
from .entity import BookingRecord as BookingRecord
from .enum import BookingStage as BookingStage
from .gateway import CurrencyConverter as CurrencyConverter
from .gateway import Inventory as Inventory
from .gateway import Notifier as Notifier
from .gateway import PaymentGateway as PaymentGateway
from .repository import BookingStore as BookingStore
