"""Use cases - core business operations."""

from .build_buoy_uri import BuildBuoyUriUseCase
from .normalize_records import NormalizeRecordsUseCase
from .aggregate_daily import AggregateDailyUseCase

__all__ = [
    "BuildBuoyUriUseCase",
    "NormalizeRecordsUseCase",
    "AggregateDailyUseCase",
]
