from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import OccupancySet


class OccupiedSeatsService:
    """使用済み座席の照会

    ある便は「誰かの往路」としても「誰かの復路」としても予約されうるため、
    両方の経路を走査して和集合を取る。片方だけでは同じ座席の二重割り当てが起きる。
    """

    def __init__(self, repository: BookingRepository) -> None:
        self._repository = repository

    def occupied_seats(
        self, flight_id: str, departure_date: str | None = None
    ) -> OccupancySet:
        """便（・出発日）の使用済み座席を返す（読み取りのみ・冪等）"""
        outbound = OccupancySet.of(
            seat
            for booking in self._repository.find_by_flight(flight_id, departure_date)
            if booking.holds_seats
            for seat in booking.outbound.seats
        )

        inbound = OccupancySet.of(
            seat
            for booking in self._repository.find_by_return_flight(
                flight_id, departure_date
            )
            if booking.holds_seats and booking.inbound is not None
            for seat in booking.inbound.seats
        )

        return outbound.union(inbound)
