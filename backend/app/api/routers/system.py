from __future__ import annotations

import time
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, status
from fastapi.responses import ORJSONResponse

from app.api.deps import get_now, get_store
from app.config import settings
from app.schemas.system import HealthOut, ReadyOut, ServiceStatusOut
from app.services.holiday_store import RecordStore


router = APIRouter()

_started = time.monotonic()


def _uptime() -> int:
    return int(time.monotonic() - _started)


def _timestamp(now: datetime) -> str:
    return now.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


@router.get("/health", response_model=HealthOut)
async def health(now: datetime = Depends(get_now)) -> HealthOut:
    return HealthOut(status="ok", uptime=_uptime(), timestamp=_timestamp(now), version=settings.APP_VERSION)


@router.get("/ready", response_model=ReadyOut, responses={503: {"description": "Holiday data not available"}})
async def ready(store: RecordStore = Depends(get_store)):
    available_years = store.available_years()
    if not available_years or not await store.is_healthy():
        return ORJSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not ready",
                "error": "Data not available",
                "availableYears": len(available_years),
            },
        )
    return ReadyOut(status="ready", availableYears=available_years, cacheStatus="warm")


@router.get("/status", response_model=ServiceStatusOut)
async def service_status(
    store: RecordStore = Depends(get_store),
    now: datetime = Depends(get_now),
) -> ServiceStatusOut:
    healthy = await store.is_healthy()
    available_years = store.available_years()
    year_range = f"{available_years[0]} - {available_years[-1]}" if available_years else "None"
    return ServiceStatusOut(
        service=settings.SERVICE_NAME,
        version=settings.APP_VERSION,
        status="operational" if healthy else "degraded",
        uptime=_uptime(),
        timestamp=_timestamp(now),
        endpoints={
            "v1": {"status": "operational", "description": "Legacy API endpoints"},
            "v2": {
                "status": "operational" if healthy else "degraded",
                "description": "Enhanced API endpoints with advanced filtering",
            },
        },
        data={
            "availableYears": available_years,
            "totalYears": len(available_years),
            "yearRange": year_range,
            "cachedYears": store.cached_years(),
            "cacheStatus": "enabled",
        },
    )
