import os
from decimal import Decimal, InvalidOperation
from typing import Any

import boto3
from aws_lambda_powertools import Logger
from boto3.dynamodb.conditions import Attr, ConditionBase, Key
from botocore.exceptions import BotoCoreError, ClientError

from services.booking.domain.entity import Booking
from services.booking.domain.enum import BookingStatus
from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import (
    BookingId,
    Itinerary,
    Leg,
    OneWay,
    Passenger,
    RoundTrip,
    join_seat_list,
    parse_seat_list,
)
from services.shared.domain import IsoDateTime
from services.shared.domain.exception import (
    BusinessRuleViolationException,
    OptimisticLockException,
    StoreFailureException,
)

logger = Logger(child=True)

USER_BOOKINGS_INDEX = "UserBookingsIndex"
FLIGHT_BOOKINGS_INDEX = "FlightBookingsIndex"


class DynamoDBBookingRepository(BookingRepository):
    """DynamoDBを使用したBookingRepository の具象実装

    往復予約も 1 アイテムで保存する（復路は return_* 属性）。
    """

    def __init__(self, table: Any = None, table_name: str | None = None) -> None:
        if table is None:
            self.table_name = table_name or os.getenv("BOOKINGS_TABLE")
            self.dynamodb = boto3.resource("dynamodb")
            table = self.dynamodb.Table(self.table_name)
        self.table = table

    def save(self, booking: Booking) -> None:
        """予約をDBに保存する"""
        try:
            self.table.put_item(Item=self.to_item(booking))
        except (ClientError, BotoCoreError) as e:
            raise StoreFailureException(f"Failed to save booking: {booking.id}") from e

    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        """予約IDで検索"""
        try:
            response = self.table.get_item(Key={"id": str(booking_id)})
        except (ClientError, BotoCoreError) as e:
            raise StoreFailureException(f"Failed to get booking: {booking_id}") from e

        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def find_by_user(self, user_id: str) -> list[Booking]:
        """UserBookingsIndex を予約日時の降順で引く"""
        items = self._collect(
            self.table.query,
            IndexName=USER_BOOKINGS_INDEX,
            KeyConditionExpression=Key("user_id").eq(user_id),
            ScanIndexForward=False,
        )
        return [self._to_entity(item) for item in items]

    def find_by_flight(
        self, flight_id: str, departure_date: str | None = None
    ) -> list[Booking]:
        """FlightBookingsIndex を引き、出発日が指定されていれば絞り込む"""
        kwargs: dict = {
            "IndexName": FLIGHT_BOOKINGS_INDEX,
            "KeyConditionExpression": Key("flight_id").eq(flight_id),
        }
        if departure_date:
            kwargs["FilterExpression"] = Attr("flight_details.departure_date").eq(
                departure_date
            )

        items = self._collect(self.table.query, **kwargs)
        return self._to_occupying_entities(items)

    def find_by_return_flight(
        self, flight_id: str, departure_date: str | None = None
    ) -> list[Booking]:
        """復路の便は GSI を持たないため、フィルタ付きスキャンで探す"""
        condition: ConditionBase = Attr("return_flight_id").eq(flight_id)
        if departure_date:
            condition = condition & Attr("return_flight_details.departure_date").eq(
                departure_date
            )

        items = self._collect(self.table.scan, FilterExpression=condition)
        return self._to_occupying_entities(items)

    def update_status(
        self, booking: Booking, expected_status: BookingStatus | None = None
    ) -> None:
        """予約のステータスを更新する"""
        kwargs: dict = {
            "Key": {"id": str(booking.id)},
            "UpdateExpression": "SET booking_status = :status",
            "ExpressionAttributeValues": {":status": booking.status.value},
        }

        if expected_status is not None:
            kwargs["ConditionExpression"] = Attr("booking_status").eq(
                expected_status.value
            )

        try:
            self.table.update_item(**kwargs)
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise OptimisticLockException(
                    f"Booking status conflict: "
                    f"expected {expected_status}, "
                    f"booking_id={booking.id}"
                ) from e
            raise StoreFailureException(
                f"Failed to update booking: {booking.id}"
            ) from e
        except BotoCoreError as e:
            raise StoreFailureException(
                f"Failed to update booking: {booking.id}"
            ) from e

    def _collect(self, operation, **kwargs) -> list[dict]:
        """LastEvaluatedKey を辿って全ページのアイテムを集める"""
        items: list[dict] = []
        try:
            while True:
                response = operation(**kwargs)
                items.extend(response.get("Items", []))
                last_key = response.get("LastEvaluatedKey")
                if not last_key:
                    return items
                kwargs["ExclusiveStartKey"] = last_key
        except (ClientError, BotoCoreError) as e:
            raise StoreFailureException("Failed to read bookings") from e

    @staticmethod
    def to_item(booking: Booking) -> dict:
        """ドメインエンティティを DynamoDB アイテム（API の応答形式と同じ）に変換する"""
        outbound = booking.outbound
        item: dict = {
            "id": str(booking.id),
            "user_id": booking.user_id,
            "flight_id": outbound.flight_id,
            "passenger_name": booking.passenger.name,
            "passenger_email": booking.passenger.email,
            "seat_number": join_seat_list(outbound.seats),
            "booking_status": booking.status.value,
            "total_amount": booking.total_amount,
            "booking_date": str(booking.booking_date),
            "created_at": str(booking.created_at),
        }
        if outbound.details is not None:
            item["flight_details"] = _to_attribute(outbound.details)

        inbound = booking.inbound
        if inbound is not None:
            item["return_flight_id"] = inbound.flight_id
            item["return_seat_number"] = join_seat_list(inbound.seats)
            if inbound.details is not None:
                item["return_flight_details"] = _to_attribute(inbound.details)

        return item

    def _to_occupying_entities(self, items: list[dict]) -> list[Booking]:
        """便ごとの照会用。復元できない行は警告を出して読み飛ばす"""
        bookings: list[Booking] = []
        for item in items:
            try:
                bookings.append(self._to_entity(item))
            except (
                KeyError,
                ValueError,
                InvalidOperation,
                BusinessRuleViolationException,
            ) as e:
                logger.warning(
                    "Skipping unreadable booking item",
                    extra={"booking_id": item.get("id"), "error": str(e)},
                )
        return bookings

    def _to_entity(self, item: dict) -> Booking:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        outbound = Leg(
            flight_id=item["flight_id"],
            seats=parse_seat_list(item["seat_number"]),
            details=item.get("flight_details"),
        )

        itinerary: Itinerary
        if item.get("return_flight_id"):
            inbound = Leg(
                flight_id=item["return_flight_id"],
                seats=parse_seat_list(item["return_seat_number"]),
                details=item.get("return_flight_details"),
            )
            itinerary = RoundTrip(outbound=outbound, inbound=inbound)
        else:
            itinerary = OneWay(outbound=outbound)

        return Booking(
            id=BookingId(value=item["id"]),
            user_id=item["user_id"],
            passenger=Passenger(
                name=item["passenger_name"], email=item["passenger_email"]
            ),
            itinerary=itinerary,
            total_amount=Decimal(str(item["total_amount"])),
            booking_date=IsoDateTime.from_string(item["booking_date"]),
            created_at=IsoDateTime.from_string(item["created_at"]),
            status=BookingStatus(item.get("booking_status", "confirmed")),
        )


def _to_attribute(value: Any) -> Any:
    """DynamoDB は float を受け付けないため、入れ子の数値を Decimal にする"""
    if isinstance(value, bool):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    if isinstance(value, dict):
        return {k: _to_attribute(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_attribute(v) for v in value]
    return value
