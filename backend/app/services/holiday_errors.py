from __future__ import annotations

import enum
from typing import Any


class ErrorKind(str, enum.Enum):
    INVALID_YEAR = "InvalidYear"
    INVALID_DATE = "InvalidDate"
    INVALID_RANGE = "InvalidRange"
    INVALID_TYPE = "InvalidType"
    INVALID_STATE = "InvalidState"
    INVALID_FIELD = "InvalidField"
    MISSING_PARAMETER = "MissingParameter"
    DATA_UNAVAILABLE = "DataUnavailable"
    NOT_FOUND = "NotFound"


class HolidayQueryError(Exception):
    """
    Base error for holiday lookups.

    Every error carries a machine-readable ``kind`` and a human-readable
    ``message``. The HTTP layer decides the status code from the kind.
    """

    kind: ErrorKind = ErrorKind.NOT_FOUND

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "message": self.message}


class InvalidYear(HolidayQueryError):
    kind = ErrorKind.INVALID_YEAR


class InvalidDate(HolidayQueryError):
    kind = ErrorKind.INVALID_DATE


class InvalidRange(HolidayQueryError):
    kind = ErrorKind.INVALID_RANGE


class InvalidType(HolidayQueryError):
    kind = ErrorKind.INVALID_TYPE


class InvalidState(HolidayQueryError):
    kind = ErrorKind.INVALID_STATE


class InvalidField(HolidayQueryError):
    kind = ErrorKind.INVALID_FIELD


class MissingParameter(HolidayQueryError):
    kind = ErrorKind.MISSING_PARAMETER


class DataUnavailable(HolidayQueryError):
    kind = ErrorKind.DATA_UNAVAILABLE

    def __init__(self, message: str, *, year: int | None = None, missing: bool = True) -> None:
        super().__init__(message)
        self.year = year
        # False when the backing file exists but could not be parsed.
        self.missing = missing


class NotFound(HolidayQueryError):
    kind = ErrorKind.NOT_FOUND
