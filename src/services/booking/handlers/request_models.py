from typing import Any

from pydantic import BaseModel, Field

from services.booking.domain.factory import BookingDetails


class CreateBookingRequest(BaseModel):
    """予約作成リクエストスキーマ

    必須項目の判定は BookingFactory が行うため、ここでは全項目を任意にして
    型の大枠だけを検証する（欠落時に項目名付きで 400 を返すため）。
    """

    user_id: str | None = Field(default=None, description="ユーザーID")
    flight_id: str | None = Field(
        default=None, description="往路の便", examples=["SW100"]
    )
    passenger_name: str | None = None
    passenger_email: str | None = None
    seat_number: str | None = Field(
        default=None,
        description="座席番号（複数はカンマ区切り）",
        examples=["12C", "12C,12D"],
    )
    total_amount: str | int | float | None = Field(
        default=None, description="合計金額", examples=[450.5, "450.50"]
    )
    booking_status: str | None = Field(
        default=None, description="予約ステータス", examples=["confirmed"]
    )
    booking_date: str | None = Field(
        default=None,
        description="予約日時（ISO 8601形式）",
        examples=["2025-03-01T09:30:00.000Z"],
    )
    flight_details: dict[str, Any] | None = None
    return_flight_id: str | None = None
    return_seat_number: str | None = None
    return_flight_details: dict[str, Any] | None = None

    model_config = {
        "extra": "ignore",
        "json_schema_extra": {
            "examples": [
                {
                    "user_id": "u1",
                    "flight_id": "SW100",
                    "passenger_name": "Ana Silva",
                    "passenger_email": "ana@example.com",
                    "seat_number": "12C",
                    "total_amount": "450.50",
                    "flight_details": {
                        "from": "LIS",
                        "to": "OPO",
                        "departure_date": "2025-03-14",
                    },
                }
            ]
        },
    }

    def to_details(self) -> BookingDetails:
        """ファクトリへの入力に変換する（未指定の項目は含めない）"""
        return BookingDetails(**self.model_dump(exclude_none=True))


class OccupiedSeatsQuery(BaseModel):
    """使用済み座席照会のクエリパラメータ"""

    flight_id: str | None = None
    departure_date: str | None = Field(
        default=None, description="出発日（YYYY-MM-DD）", examples=["2025-03-14"]
    )

    model_config = {"extra": "ignore"}
