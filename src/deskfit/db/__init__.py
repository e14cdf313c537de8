"""Storage layer for deskfit."""

from .engine import atomic_write_json, read_json
from .repositories import (
    AnalysisReportStore,
    InsightCacheRepository,
    ProfileRepository,
    ProgressRepository,
)

__all__ = [
    "AnalysisReportStore",
    "atomic_write_json",
    "InsightCacheRepository",
    "ProfileRepository",
    "ProgressRepository",
    "read_json",
]
