from __future__ import annotations

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class BookingId:
    """予約ID

    呼び出し側からは受け取らず、作成時に毎回ランダムに採番する。
    例: "3f0c1a9e-8a55-4a7e-9d8a-2f1d8f3b6c10"
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("BookingId cannot be empty")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> BookingId:
        """新しい予約IDを採番する"""
        return cls(value=str(uuid.uuid4()))
