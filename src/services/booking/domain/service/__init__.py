from .seat_map import AISLE_AFTER, SeatMap, SeatRow

__all__ = ["AISLE_AFTER", "SeatMap", "SeatRow"]
