from __future__ import annotations

import enum


class StateCode(str, enum.Enum):
    BW = "BW"
    BY = "BY"
    BE = "BE"
    BB = "BB"
    HB = "HB"
    HH = "HH"
    HE = "HE"
    MV = "MV"
    NI = "NI"
    NW = "NW"
    RP = "RP"
    SL = "SL"
    SN = "SN"
    ST = "ST"
    SH = "SH"
    TH = "TH"


class HolidayType(str, enum.Enum):
    winterferien = "winterferien"
    osterferien = "osterferien"
    pfingstferien = "pfingstferien"
    sommerferien = "sommerferien"
    herbstferien = "herbstferien"
    weihnachtsferien = "weihnachtsferien"
    # Hamburg names its spring break separately.
    fruehjahrsferien = "fruehjahrsferien"


class HolidayField(str, enum.Enum):
    start = "start"
    end = "end"
    year = "year"
    stateCode = "stateCode"
    name = "name"
    slug = "slug"


STATE_CODES: tuple[str, ...] = tuple(member.value for member in StateCode)
HOLIDAY_TYPES: tuple[str, ...] = tuple(member.value for member in HolidayType)
HOLIDAY_FIELDS: tuple[str, ...] = tuple(member.value for member in HolidayField)
