import os
from datetime import date

import boto3
from boto3.dynamodb.conditions import Attr
from botocore.exceptions import ClientError

from hotel_booking.booking.domain.entity import BookingRecord
from hotel_booking.booking.domain.repository import BookingStore
from hotel_booking.booking.domain.value_object import BookingId, BookingRequest
from hotel_booking.shared.domain.exception import (
    DuplicateResourceException,
    ResourceNotFoundException,
)


class DynamoDBBookingStore(BookingStore):
    """DynamoDBを使用したBookingStore の具象実装"""

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def save(self, request: BookingRequest) -> BookingId:
        """予約をDBに保存する"""
        booking_id = BookingId.generate()
        item = {
            "PK": f"BOOKING#{booking_id}",
            "SK": "BOOKING",
            "entity_type": "BOOKING",
            "booking_id": str(booking_id),
            "date_from": request.date_from.isoformat(),
            "date_to": request.date_to.isoformat(),
            "guest_count": request.guest_count,
            "prepaid": request.prepaid,
        }
        if request.room_id is not None:
            item["room_id"] = request.room_id
        try:
            self.table.put_item(Item=item, ConditionExpression=Attr("PK").not_exists())
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise DuplicateResourceException(
                    f"Booking already exists: {booking_id}"
                )
            raise
        return booking_id

    def get(self, booking_id: BookingId) -> BookingRecord:
        """予約IDで検索"""
        response = self.table.get_item(
            Key={"PK": f"BOOKING#{booking_id}", "SK": "BOOKING"},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            raise ResourceNotFoundException(f"Booking not found: {booking_id}")
        return self._to_record(item)

    def delete(self, booking_id: BookingId) -> None:
        """予約を削除する"""
        try:
            self.table.delete_item(
                Key={"PK": f"BOOKING#{booking_id}", "SK": "BOOKING"},
                ConditionExpression=Attr("PK").exists(),
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise ResourceNotFoundException(f"Booking not found: {booking_id}")
            raise

    def _to_record(self, item: dict) -> BookingRecord:
        """DynamoDB アイテムをドメインオブジェクトに変換する"""
        return BookingRecord(
            booking_id=BookingId(value=item["booking_id"]),
            request=BookingRequest(
                room_id=item.get("room_id"),
                date_from=date.fromisoformat(item["date_from"]),
                date_to=date.fromisoformat(item["date_to"]),
                guest_count=int(item["guest_count"]),
                prepaid=bool(item["prepaid"]),
            ),
        )
