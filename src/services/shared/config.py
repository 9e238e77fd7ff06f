from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    """Lambda 環境変数から読み込む設定

    - BOOKINGS_TABLE: 予約テーブル名（必須）
    - SEAT_CLAIMS_TABLE: 座席クレームテーブル名（指定時のみ二重予約ガードを有効化）
    - CORS_ALLOW_ORIGIN: Access-Control-Allow-Origin の値
    """

    bookings_table: str
    seat_claims_table: str | None = None
    cors_allow_origin: str = "*"

    @classmethod
    def from_env(cls) -> Settings:
        bookings_table = os.getenv("BOOKINGS_TABLE")
        if not bookings_table:
            raise RuntimeError("BOOKINGS_TABLE environment variable is not set")
        return cls(
            bookings_table=bookings_table,
            seat_claims_table=os.getenv("SEAT_CLAIMS_TABLE") or None,
            cors_allow_origin=os.getenv("CORS_ALLOW_ORIGIN", "*"),
        )

    @property
    def seat_claims_enabled(self) -> bool:
        return self.seat_claims_table is not None
