"""Mood distribution, averages and the 7-day chart series."""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Dict, List, Optional, Sequence, Union

from .models import MoodLevel, MoodRecord, as_calendar_date
from .strings import Translator, get_translator

# Score plotted for days without a check-in
MISSING_DAY_SCORE = MoodLevel.NEUTRAL.score


@dataclass
class ChartPoint:
    """One day of the trend chart."""

    day: date
    label: str
    score: int
    filled: bool = False  # True when no entry existed and the neutral score was used

    @property
    def emoji(self) -> str:
        return MoodLevel.from_score(self.score).emoji

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "day": self.day.isoformat(),
            "label": self.label,
            "score": self.score,
            "filled": self.filled,
        }


def mood_distribution(entries: Sequence[MoodRecord], limit: int = 7) -> Dict[MoodLevel, int]:
    """
    Count moods among the most recent entries.

    Args:
        entries: Records ordered most recent first
        limit: Number of leading records to consider

    Returns:
        Mapping of mood -> count, containing only moods that occur
    """
    distribution: Dict[MoodLevel, int] = {}
    for entry in list(entries)[:limit]:
        if entry.mood is None:
            continue
        distribution[entry.mood] = distribution.get(entry.mood, 0) + 1
    return distribution


def average_score(entries: Sequence[MoodRecord]) -> Optional[float]:
    """Mean score of records that have a mood, or None if there are none."""
    scores = [e.score for e in entries if e.mood is not None]
    if not scores:
        return None
    return sum(scores) / len(scores)


def weekday_label(day: date, translate: Translator) -> str:
    """Short localized weekday name, Monday first."""
    return translate(f"day.short.{day.weekday()}")


def chart_series(
    entries: Sequence[MoodRecord],
    today: Union[date, datetime],
    days: int = 7,
    translate: Optional[Translator] = None,
) -> List[ChartPoint]:
    """
    Build one chart point per calendar day, oldest first, ending today.

    The first record found for a day decides it. Days without a record,
    or whose first record has no readable mood, are plotted at the
    neutral score.
    """
    translate = translate or get_translator()
    today = as_calendar_date(today)
    by_day: Dict[date, MoodRecord] = {}
    for entry in entries:
        if entry.date not in by_day:
            by_day[entry.date] = entry

    points = []
    for offset in range(days - 1, -1, -1):
        day = today - timedelta(days=offset)
        entry = by_day.get(day)
        missing = entry is None or entry.mood is None
        points.append(
            ChartPoint(
                day=day,
                label=weekday_label(day, translate),
                score=MISSING_DAY_SCORE if missing else entry.score,
                filled=missing,
            )
        )
    return points


def relative_day_label(
    day: Union[date, datetime],
    today: Union[date, datetime],
    translate: Translator,
) -> str:
    """Localized today/yesterday, or a short weekday/month/day label."""
    day = as_calendar_date(day)
    today = as_calendar_date(today)
    delta = (today - day).days
    if delta == 0:
        return translate("trend.today")
    if delta == 1:
        return translate("trend.yesterday")
    return translate("date.short").format(
        weekday=weekday_label(day, translate),
        month=translate(f"month.short.{day.month}"),
        day=day.day,
    )
