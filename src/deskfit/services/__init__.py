"""Scoring, analysis and insight services for deskfit."""

from .analysis import AnalysisEngine
from .analytics import AnalyticsSink, LoggingAnalytics, RecordingAnalytics
from .insights import DailyInsightEngine, DailyInsightService
from .plan import PlanGenerator

__all__ = [
    "AnalysisEngine",
    "AnalyticsSink",
    "DailyInsightEngine",
    "DailyInsightService",
    "LoggingAnalytics",
    "PlanGenerator",
    "RecordingAnalytics",
]
