from abc import ABC, abstractmethod

from services.booking.domain.value_object import BookingId, Leg


class SeatClaimRepository(ABC):
    """座席クレーム（便・出発日・座席ごとの排他的な確保）のインターフェース

    同じ座席への同時予約を、条件付き書き込みで 1 件だけ成功させる。
    """

    @abstractmethod
    def claim(self, booking_id: BookingId, leg: Leg) -> None:
        """区間の全座席を確保する

        Raises:
            SeatAlreadyTakenException: いずれかの座席が他の予約で確保済みの場合
                （この呼び出しで確保した座席は解放してから送出する）
        """
        raise NotImplementedError

    @abstractmethod
    def release(self, booking_id: BookingId, leg: Leg) -> None:
        """この予約が確保した区間の座席を解放する"""
        raise NotImplementedError
