"""
Mood Journal Value Types.

Moods, optional health signals, dated mood records, streak counters
and trend results shared by the insight engine and streak tracker.
"""

from dataclasses import dataclass, field, replace
from datetime import date, datetime
from enum import Enum
from typing import Optional, Dict, Any


class MoodLevel(str, Enum):
    """Daily mood, ordered worst to best."""

    BAD = "bad"
    DIFFICULT = "difficult"
    NEUTRAL = "neutral"
    GOOD = "good"
    GREAT = "great"

    @property
    def score(self) -> int:
        """Fixed 1..5 score used for every numeric aggregation."""
        return MOOD_SCORES[self]

    @property
    def emoji(self) -> str:
        return MOOD_EMOJIS[self]

    @property
    def color_name(self) -> str:
        return MOOD_COLORS[self]

    @property
    def label_key(self) -> str:
        return f"mood.label.{self.value}"

    @classmethod
    def from_score(cls, score: int) -> "MoodLevel":
        """Map a 1..5 score back to its mood level."""
        for mood, mood_score in MOOD_SCORES.items():
            if mood_score == score:
                return mood
        raise ValueError(f"No mood level for score {score!r} (expected 1-5)")

    def __lt__(self, other):
        if isinstance(other, MoodLevel):
            return self.score < other.score
        return NotImplemented

    def __le__(self, other):
        if isinstance(other, MoodLevel):
            return self.score <= other.score
        return NotImplemented

    def __gt__(self, other):
        if isinstance(other, MoodLevel):
            return self.score > other.score
        return NotImplemented

    def __ge__(self, other):
        if isinstance(other, MoodLevel):
            return self.score >= other.score
        return NotImplemented


# Persisted histories compare against these values; never renumber in place.
MOOD_SCORES: Dict[MoodLevel, int] = {
    MoodLevel.BAD: 1,
    MoodLevel.DIFFICULT: 2,
    MoodLevel.NEUTRAL: 3,
    MoodLevel.GOOD: 4,
    MoodLevel.GREAT: 5,
}

MOOD_EMOJIS: Dict[MoodLevel, str] = {
    MoodLevel.BAD: "😢",
    MoodLevel.DIFFICULT: "😔",
    MoodLevel.NEUTRAL: "😐",
    MoodLevel.GOOD: "😊",
    MoodLevel.GREAT: "🤩",
}

MOOD_COLORS: Dict[MoodLevel, str] = {
    MoodLevel.BAD: "MoodRed",
    MoodLevel.DIFFICULT: "MoodOrange",
    MoodLevel.NEUTRAL: "MoodYellow",
    MoodLevel.GOOD: "MoodGreen",
    MoodLevel.GREAT: "MoodTeal",
}


class Trend(str, Enum):
    """Direction of recent mood scores."""

    IMPROVING = "improving"
    STABLE = "stable"
    DECLINING = "declining"


def as_calendar_date(value) -> date:
    """Normalize a date or datetime to its calendar day."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise TypeError(f"Expected date or datetime, got {type(value).__name__}")


@dataclass(frozen=True)
class HealthSignals:
    """
    Optional physiological context for a check-in.

    None means no data: permission denied or nothing recorded today.
    """

    hrv: Optional[float] = None  # SDNN, milliseconds
    activity: Optional[float] = None  # Fraction of daily ring goal, 0..1

    def __post_init__(self):
        # Stored as float; numeric text is accepted
        for name in ("hrv", "activity"):
            value = getattr(self, name)
            if value is None:
                continue
            try:
                object.__setattr__(self, name, float(value))
            except (TypeError, ValueError):
                raise ValueError(f"{name} must be a number, got {value!r}") from None

        if self.hrv is not None and self.hrv < 0:
            raise ValueError(f"hrv must be >= 0, got {self.hrv}")
        if self.activity is not None and not 0.0 <= self.activity <= 1.0:
            raise ValueError(f"activity must be within [0, 1], got {self.activity}")

    @classmethod
    def none(cls) -> "HealthSignals":
        return cls()

    @property
    def has_hrv(self) -> bool:
        return self.hrv is not None

    @property
    def has_activity(self) -> bool:
        return self.activity is not None

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {"hrv": self.hrv, "activity": self.activity}


@dataclass(frozen=True)
class MoodRecord:
    """A dated mood entry. mood is None when the stored value was unreadable."""

    date: date
    mood: Optional[MoodLevel]

    def __post_init__(self):
        # Frozen dataclass: bypass __setattr__ to normalize datetimes
        object.__setattr__(self, "date", as_calendar_date(self.date))

    @property
    def score(self) -> Optional[int]:
        return self.mood.score if self.mood is not None else None

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "date": self.date.isoformat(),
            "mood": self.mood.value if self.mood is not None else None,
        }


@dataclass
class StreakState:
    """Consecutive-day check-in counters, persisted by the caller."""

    current_streak: int = 0
    longest_streak: int = 0
    last_check_in_date: Optional[date] = None

    def copy_with(self, **changes) -> "StreakState":
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the stored representation (ISO full date, "" for never)."""
        return {
            "current_streak": self.current_streak,
            "longest_streak": self.longest_streak,
            "last_check_in_date": (
                self.last_check_in_date.isoformat() if self.last_check_in_date else ""
            ),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StreakState":
        """Build from the stored representation."""
        raw_date = data.get("last_check_in_date") or ""
        last_date = date.fromisoformat(raw_date[:10]) if raw_date else None
        return cls(
            current_streak=int(data.get("current_streak", 0)),
            longest_streak=int(data.get("longest_streak", 0)),
            last_check_in_date=last_date,
        )


@dataclass
class TrendResult:
    """Outcome of a trend analysis."""

    trend: Trend
    message: str
    recent_average: Optional[float] = None
    older_average: Optional[float] = None
    sample_size: int = 0
    insufficient_data: bool = field(default=False)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "trend": self.trend.value,
            "message": self.message,
            "recent_average": self.recent_average,
            "older_average": self.older_average,
            "sample_size": self.sample_size,
            "insufficient_data": self.insufficient_data,
        }
