# backend/app/schemas/__init__.py
"""Pydantic Schema 模組"""

from app.schemas.temperature import (
    ApiResponse,
    AverageResponse,
    DaySummaryInfo,
    LocalitiesResponse,
    RangeExtremesResponse,
    ThresholdMatchInfo,
    ThresholdResponse,
    WeeklySummaryResponse,
)

__all__ = [
    "ApiResponse",
    "AverageResponse",
    "DaySummaryInfo",
    "LocalitiesResponse",
    "RangeExtremesResponse",
    "ThresholdMatchInfo",
    "ThresholdResponse",
    "WeeklySummaryResponse",
]
