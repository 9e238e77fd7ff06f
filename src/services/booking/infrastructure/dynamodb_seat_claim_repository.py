import os
from typing import Any

import boto3
from boto3.dynamodb.conditions import Attr
from botocore.exceptions import BotoCoreError, ClientError

from services.booking.domain.repository import SeatClaimRepository
from services.booking.domain.value_object import BookingId, Leg, SeatLabel
from services.shared.domain.exception import (
    SeatAlreadyTakenException,
    StoreFailureException,
)


def claim_key(flight_id: str, departure_date: str | None, seat: SeatLabel) -> str:
    """便・出発日・座席の組を 1 つのキーにする（出発日不明は ANY）"""
    return f"{flight_id}#{departure_date or 'ANY'}#{seat}"


class DynamoDBSeatClaimRepository(SeatClaimRepository):
    """座席クレームテーブル（PK: claim_key）を使った排他的な座席確保"""

    def __init__(self, table: Any = None, table_name: str | None = None) -> None:
        if table is None:
            self.table_name = table_name or os.getenv("SEAT_CLAIMS_TABLE")
            self.dynamodb = boto3.resource("dynamodb")
            table = self.dynamodb.Table(self.table_name)
        self.table = table

    def claim(self, booking_id: BookingId, leg: Leg) -> None:
        claimed: list[SeatLabel] = []
        for seat in leg.seats:
            try:
                self.table.put_item(
                    Item={
                        "claim_key": claim_key(leg.flight_id, leg.departure_date, seat),
                        "booking_id": str(booking_id),
                        "flight_id": leg.flight_id,
                        "seat_number": str(seat),
                    },
                    ConditionExpression=Attr("claim_key").not_exists(),
                )
            except ClientError as e:
                self._release_seats(booking_id, leg, claimed)
                if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                    raise SeatAlreadyTakenException(leg.flight_id, str(seat)) from e
                raise StoreFailureException(
                    f"Failed to claim seat {seat} on flight {leg.flight_id}"
                ) from e
            except BotoCoreError as e:
                self._release_seats(booking_id, leg, claimed)
                raise StoreFailureException(
                    f"Failed to claim seat {seat} on flight {leg.flight_id}"
                ) from e
            claimed.append(seat)

    def release(self, booking_id: BookingId, leg: Leg) -> None:
        self._release_seats(booking_id, leg, leg.seats)

    def _release_seats(self, booking_id: BookingId, leg: Leg, seats) -> None:
        """この予約が持っているクレームだけを削除する"""
        for seat in seats:
            try:
                self.table.delete_item(
                    Key={"claim_key": claim_key(leg.flight_id, leg.departure_date, seat)},
                    ConditionExpression=Attr("booking_id").eq(str(booking_id)),
                )
            except ClientError as e:
                if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                    continue
                raise StoreFailureException(
                    f"Failed to release seat {seat} on flight {leg.flight_id}"
                ) from e
