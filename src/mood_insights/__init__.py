"""
Mood Insights Module.

Contextual check-in messages, mood trend analysis, streak tracking and
mood statistics for the DayClose mood journal.
"""

from .models import (
    MoodLevel,
    HealthSignals,
    MoodRecord,
    StreakState,
    Trend,
    TrendResult,
)
from .insight_engine import InsightEngine
from .streak_tracker import StreakTracker
from .checkin import CheckInService, CheckInResult
from .diagnostics import DiagnosticsLog, DiagnosticsHandler, DiagnosticsLevel
from .strings import get_translator

__all__ = [
    "MoodLevel",
    "HealthSignals",
    "MoodRecord",
    "StreakState",
    "Trend",
    "TrendResult",
    "InsightEngine",
    "StreakTracker",
    "CheckInService",
    "CheckInResult",
    "DiagnosticsLog",
    "DiagnosticsHandler",
    "DiagnosticsLevel",
    "get_translator",
]
