from hotel_booking.booking.domain.enum import BookingStage
from hotel_booking.booking.domain.gateway import (
    CurrencyConverter,
    Inventory,
    Notifier,
    PaymentGateway,
)
from hotel_booking.booking.domain.repository import BookingStore
from hotel_booking.booking.domain.value_object import BookingId, BookingRequest
from hotel_booking.shared.domain import InvalidRequestException
from hotel_booking.shared.utils import get_logger

logger = get_logger(child=True)

NIGHTLY_RATE_PER_GUEST = 50.0


class BookingService:
    """客室予約のユースケース

    在庫確保 → 料金計算 → 事前決済 → 保存 → 確認通知 の順に実行する。
    各ステップの例外はそのまま呼び出し元へ伝播し、先行ステップの取り消しは行わない。
    """

    def __init__(
        self,
        inventory: Inventory,
        payment_gateway: PaymentGateway,
        booking_store: BookingStore,
        notifier: Notifier,
        currency_converter: CurrencyConverter,
    ) -> None:
        self._inventory = inventory
        self._payment_gateway = payment_gateway
        self._booking_store = booking_store
        self._notifier = notifier
        self._currency_converter = currency_converter

    def calculate_price(self, request: BookingRequest) -> float:
        """宿泊料金を計算する（泊数 × 人数 × 1人1泊あたりの料金）"""
        nights = request.nights()
        if nights <= 0:
            raise InvalidRequestException(
                f"Check-out date must be after check-in date: "
                f"{request.date_from} - {request.date_to}"
            )
        if request.guest_count <= 0:
            raise InvalidRequestException(
                f"Guest count must be positive: {request.guest_count}"
            )
        return nights * request.guest_count * NIGHTLY_RATE_PER_GUEST

    def calculate_price_in_reference_currency(self, request: BookingRequest) -> float:
        """基準通貨に換算した宿泊料金を計算する"""
        return self._currency_converter.to_reference_currency(
            self.calculate_price(request)
        )

    def get_available_place_count(self) -> int:
        """空室の定員合計を返す"""
        rooms = self._inventory.get_available_rooms()
        return sum(room.capacity for room in rooms)

    def make_booking(self, request: BookingRequest) -> BookingId:
        """予約を作成し、予約IDを返す"""
        logger.info("Booking started", extra={"stage": BookingStage.CREATED.value})

        room_id = self._inventory.find_available_room(request)
        logger.info(
            "Room resolved",
            extra={"stage": BookingStage.ROOM_RESOLVED.value, "room_id": room_id},
        )

        price = self.calculate_price(request)
        logger.info(
            "Booking priced", extra={"stage": BookingStage.PRICED.value, "price": price}
        )

        if request.prepaid:
            self._payment_gateway.charge(request, price)
            logger.info("Payment charged", extra={"stage": BookingStage.PAID.value})
        else:
            logger.info(
                "Payment skipped", extra={"stage": BookingStage.PAYMENT_SKIPPED.value}
            )

        booked_request = request.with_room(room_id)
        booking_id = self._booking_store.save(booked_request)
        logger.info(
            "Booking persisted",
            extra={
                "stage": BookingStage.PERSISTED.value,
                "booking_id": str(booking_id),
            },
        )

        try:
            self._notifier.send_booking_confirmation(booked_request)
        except Exception:
            # 保存済みの予約は残る
            logger.warning(
                "Booking persisted but confirmation failed",
                extra={"booking_id": str(booking_id)},
            )
            raise

        logger.info(
            "Booking confirmed",
            extra={
                "stage": BookingStage.CONFIRMED.value,
                "booking_id": str(booking_id),
            },
        )
        return booking_id

    def cancel_booking(self, booking_id: BookingId) -> None:
        """予約をキャンセルする（部屋を解放し、予約を削除する）"""
        record = self._booking_store.get(booking_id)
        if record.room_id is not None:
            self._inventory.release_room(record.room_id)
        self._booking_store.delete(booking_id)
        logger.info(
            "Booking cancelled",
            extra={"booking_id": str(booking_id), "room_id": record.room_id},
        )
