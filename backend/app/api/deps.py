from __future__ import annotations

from datetime import datetime, timezone

from fastapi import HTTPException, Request, status

from app.services.holiday_store import RecordStore


def get_store(request: Request) -> RecordStore:
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Holiday data not configured")
    return store


def get_now() -> datetime:
    return datetime.now(timezone.utc)
