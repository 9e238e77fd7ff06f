from .booking_id import BookingId
from .itinerary import Itinerary, OneWay, RoundTrip
from .leg import Leg
from .occupancy_set import OccupancySet
from .passenger import Passenger
from .seat_label import (
    COLUMNS,
    ROW_COUNT,
    SeatLabel,
    join_seat_list,
    parse_seat_list,
)

__all__ = [
    "BookingId",
    "Itinerary",
    "OneWay",
    "RoundTrip",
    "Leg",
    "OccupancySet",
    "Passenger",
    "SeatLabel",
    "ROW_COUNT",
    "COLUMNS",
    "join_seat_list",
    "parse_seat_list",
]
