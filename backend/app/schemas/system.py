from __future__ import annotations

from pydantic import BaseModel


class HealthOut(BaseModel):
    status: str
    uptime: int
    timestamp: str
    version: str


class ReadyOut(BaseModel):
    status: str
    availableYears: list[int]
    cacheStatus: str


class EndpointStatusOut(BaseModel):
    status: str
    description: str


class DataStatusOut(BaseModel):
    availableYears: list[int]
    totalYears: int
    yearRange: str
    cachedYears: list[int]
    cacheStatus: str


class ServiceStatusOut(BaseModel):
    service: str
    version: str
    status: str
    uptime: int
    timestamp: str
    endpoints: dict[str, EndpointStatusOut]
    data: DataStatusOut
