from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse

from app.api.routers import api_router, system_router
from app.config import settings
from app.services.holiday_errors import DataUnavailable, ErrorKind, HolidayQueryError
from app.services.holiday_store import RecordStore


logging.getLogger("app").setLevel(settings.LOG_LEVEL.upper())
logger = logging.getLogger(__name__)

ERROR_STATUS: dict[ErrorKind, int] = {
    ErrorKind.INVALID_YEAR: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_DATE: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_RANGE: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_TYPE: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_STATE: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_FIELD: status.HTTP_400_BAD_REQUEST,
    ErrorKind.MISSING_PARAMETER: status.HTTP_400_BAD_REQUEST,
    ErrorKind.DATA_UNAVAILABLE: status.HTTP_404_NOT_FOUND,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


def status_for(exc: HolidayQueryError) -> int:
    if isinstance(exc, DataUnavailable) and not exc.missing:
        return status.HTTP_500_INTERNAL_SERVER_ERROR
    return ERROR_STATUS.get(exc.kind, status.HTTP_500_INTERNAL_SERVER_ERROR)


app = FastAPI(title=settings.SERVICE_NAME, version=settings.APP_VERSION, default_response_class=ORJSONResponse)
app.state.store = RecordStore(settings.HOLIDAY_DATA_DIR)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api")
app.include_router(system_router, tags=["system"])


@app.exception_handler(HolidayQueryError)
async def holiday_query_error_handler(request: Request, exc: HolidayQueryError) -> ORJSONResponse:
    code = status_for(exc)
    if code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return ORJSONResponse(status_code=code, content={"error": exc.to_dict()})


@app.on_event("startup")
async def _startup() -> None:
    store: RecordStore = app.state.store
    logger.info("Serving holidays for years %s from %s", store.available_years(), store.data_dir)
