from .iso_date_time import IsoDateTime

__all__ = ["IsoDateTime"]
