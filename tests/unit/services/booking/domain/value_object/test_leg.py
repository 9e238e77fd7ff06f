import pytest

from services.booking.domain.value_object import Leg, OccupancySet, parse_seat_list


class TestLeg:
    """Leg のテスト"""

    def test_departure_date_from_details(self):
        """スナップショットの departure_date を返す"""
        leg = Leg(
            flight_id="SW100",
            seats=parse_seat_list("12C"),
            details={"from": "LIS", "to": "OPO", "departure_date": "2025-03-14"},
        )
        assert leg.departure_date == "2025-03-14"
        assert leg.departs_on("2025-03-14")
        assert not leg.departs_on("2025-03-15")

    def test_departs_on_without_date_matches_any(self):
        """日付指定なしなら常に一致する"""
        leg = Leg(flight_id="SW100", seats=parse_seat_list("12C"))
        assert leg.departure_date is None
        assert leg.departs_on(None)
        assert leg.departs_on("")

    def test_empty_seats_raises_error(self):
        """座席なしの区間は作れない"""
        with pytest.raises(ValueError, match="at least one seat"):
            Leg(flight_id="SW100", seats=())

    def test_blank_flight_id_raises_error(self):
        """便の指定が空の区間は作れない"""
        with pytest.raises(ValueError):
            Leg(flight_id=" ", seats=parse_seat_list("12C"))


class TestOccupancySet:
    """OccupancySet のテスト"""

    def test_union_deduplicates(self):
        """和集合で重複が除かれる"""
        a = OccupancySet.of(parse_seat_list("12C,14D"))
        b = OccupancySet.of(parse_seat_list("14D,1A"))

        result = a.union(b)

        assert len(result) == 3
        assert result.labels() == ["1A", "12C", "14D"]

    def test_contains(self):
        seats = OccupancySet.of(parse_seat_list("12C"))
        assert parse_seat_list("12C")[0] in seats
        assert parse_seat_list("12D")[0] not in seats

    def test_empty(self):
        assert len(OccupancySet.empty()) == 0
        assert OccupancySet.empty().labels() == []
