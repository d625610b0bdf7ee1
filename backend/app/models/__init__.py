from app.models.enums import HolidayField, HolidayType, StateCode
from app.models.holiday import HolidayRecord

__all__ = [
    "HolidayField",
    "HolidayRecord",
    "HolidayType",
    "StateCode",
]
