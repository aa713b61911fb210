"""
Daily Check-in Flow.

Combines message generation and the streak update for one logged mood,
and records what happened in the diagnostics log.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Union

from .diagnostics import DiagnosticsLevel, DiagnosticsLog
from .insight_engine import InsightEngine
from .models import HealthSignals, MoodLevel, StreakState
from .streak_tracker import StreakTracker

logger = logging.getLogger(__name__)


@dataclass
class CheckInResult:
    """Outputs of one check-in, to be stored by the caller."""

    mood: MoodLevel
    message: str
    streak: StreakState
    signals: HealthSignals

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "mood": self.mood.value,
            "message": self.message,
            "streak": self.streak.to_dict(),
            "signals": self.signals.to_dict(),
        }


class CheckInService:
    """Runs a check-in against explicitly supplied engine and tracker."""

    def __init__(
        self,
        engine: InsightEngine,
        tracker: Optional[StreakTracker] = None,
        diagnostics: Optional[DiagnosticsLog] = None,
    ):
        self.engine = engine
        self.tracker = tracker or StreakTracker()
        self.diagnostics = diagnostics

    def check_in(
        self,
        mood: MoodLevel,
        signals: Optional[HealthSignals],
        streak_state: Optional[StreakState],
        today: Union[date, datetime],
    ) -> CheckInResult:
        """
        Log a mood for today.

        Args:
            mood: Selected mood
            signals: Today's health signals, or None
            streak_state: Previously stored streak state, or None
            today: Date of the check-in

        Returns:
            CheckInResult with the message and updated streak
        """
        mood = MoodLevel(mood)
        signals = signals or HealthSignals.none()

        message = self.engine.generate_message(mood, signals)
        streak = self.tracker.record_check_in(streak_state, today)

        logger.info(
            f"[CHECKIN] Recorded {mood.value} "
            f"(hrv={'yes' if signals.has_hrv else 'no'}, "
            f"activity={'yes' if signals.has_activity else 'no'})"
        )

        if self.diagnostics is not None:
            self.diagnostics.log(
                DiagnosticsLevel.INFO,
                "Mood entry recorded",
                {
                    "mood": mood.value,
                    "hasHRV": "true" if signals.has_hrv else "false",
                    "hasActivity": "true" if signals.has_activity else "false",
                },
            )
            self.diagnostics.log(
                DiagnosticsLevel.INFO,
                "Streak updated",
                {
                    "currentStreak": str(streak.current_streak),
                    "longestStreak": str(streak.longest_streak),
                },
            )

        return CheckInResult(mood=mood, message=message, streak=streak, signals=signals)
