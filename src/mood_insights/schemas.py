"""Pydantic models handed to the presentation layer."""
from datetime import date, datetime
from typing import Optional, Literal

from pydantic import BaseModel, Field, ConfigDict, field_validator

from .models import MoodLevel, MoodRecord, StreakState, TrendResult
from .mood_stats import ChartPoint, average_score, chart_series, mood_distribution

TrendName = Literal["improving", "stable", "declining"]
MoodName = Literal["bad", "difficult", "neutral", "good", "great"]


class MoodEntryModel(BaseModel):
    """A dated mood entry as exchanged with the persistence layer."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    date: date
    mood: Optional[MoodName] = None

    @field_validator("date", mode="before")
    @classmethod
    def normalize_to_calendar_day(cls, value):
        """Stored entries carry full timestamps; keep only the calendar day."""
        if isinstance(value, str) and len(value) > 10:
            value = datetime.fromisoformat(value.replace("Z", "+00:00"))
        if isinstance(value, datetime):
            return value.date()
        return value

    def to_record(self) -> MoodRecord:
        return MoodRecord(date=self.date, mood=MoodLevel(self.mood) if self.mood else None)


class TrendSummary(BaseModel):
    """Trend classification for display."""

    model_config = ConfigDict(populate_by_name=True)

    trend: TrendName
    message: str
    recent_average: Optional[float] = Field(default=None, serialization_alias="recentAverage")
    older_average: Optional[float] = Field(default=None, serialization_alias="olderAverage")
    sample_size: int = Field(ge=0, serialization_alias="sampleSize")
    insufficient_data: bool = Field(default=False, serialization_alias="insufficientData")

    @classmethod
    def from_result(cls, result: TrendResult) -> "TrendSummary":
        return cls(
            trend=result.trend.value,
            message=result.message,
            recent_average=result.recent_average,
            older_average=result.older_average,
            sample_size=result.sample_size,
            insufficient_data=result.insufficient_data,
        )


class StreakSummary(BaseModel):
    """Streak counters for display."""

    model_config = ConfigDict(populate_by_name=True)

    current_streak: int = Field(ge=0, serialization_alias="currentStreak")
    longest_streak: int = Field(ge=0, serialization_alias="longestStreak")
    last_check_in_date: Optional[date] = Field(default=None, serialization_alias="lastCheckInDate")

    @classmethod
    def from_state(cls, state: StreakState) -> "StreakSummary":
        return cls(
            current_streak=state.current_streak,
            longest_streak=state.longest_streak,
            last_check_in_date=state.last_check_in_date,
        )


class ChartPointModel(BaseModel):
    """One bar of the 7-day chart."""

    model_config = ConfigDict(populate_by_name=True)

    day: date
    label: str
    score: int = Field(ge=1, le=5)
    emoji: str
    filled: bool = False

    @classmethod
    def from_point(cls, point: ChartPoint) -> "ChartPointModel":
        return cls(
            day=point.day,
            label=point.label,
            score=point.score,
            emoji=point.emoji,
            filled=point.filled,
        )


class MoodSummary(BaseModel):
    """Everything the trends screen shows."""

    model_config = ConfigDict(populate_by_name=True)

    trend: TrendSummary
    distribution: dict[MoodName, int]
    average_score: Optional[float] = Field(default=None, serialization_alias="averageScore")
    chart: list[ChartPointModel]
    streak: Optional[StreakSummary] = None


def build_mood_summary(engine, entries, today, streak: Optional[StreakState] = None) -> MoodSummary:
    """
    Assemble the trends screen summary.

    Args:
        engine: InsightEngine used for trend classification
        entries: MoodRecords ordered most recent first
        today: Date the chart ends on
        streak: Stored streak state, if any
    """
    entries = list(entries)
    distribution = mood_distribution(entries, limit=engine.settings.trend_window)
    return MoodSummary(
        trend=TrendSummary.from_result(engine.analyze_trend(entries)),
        distribution={mood.value: count for mood, count in distribution.items()},
        average_score=average_score(entries[: engine.settings.trend_window]),
        chart=[
            ChartPointModel.from_point(p)
            for p in chart_series(entries, today, translate=engine.translate)
        ],
        streak=StreakSummary.from_state(streak) if streak is not None else None,
    )
