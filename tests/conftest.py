"""
Pytest fixtures for Mood Insights tests.
"""
import sys
import random
import pytest
from pathlib import Path
from datetime import date, timedelta
from dotenv import load_dotenv

# Ensure src/ is on sys.path so tests can import mood_insights.
ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

# Load environment variables
load_dotenv()

from mood_insights.config import Settings  # noqa: E402
from mood_insights.insight_engine import InsightEngine  # noqa: E402
from mood_insights.models import MoodLevel, MoodRecord  # noqa: E402
from mood_insights.streak_tracker import StreakTracker  # noqa: E402
from mood_insights.strings import get_translator  # noqa: E402


TODAY = date(2025, 3, 14)


@pytest.fixture
def settings():
    """Default settings, ignoring any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def translate():
    """English translator."""
    return get_translator("en")


@pytest.fixture
def engine(settings, translate):
    """Insight engine with a seeded random source."""
    return InsightEngine(translate=translate, rng=random.Random(42), settings=settings)


@pytest.fixture
def key_engine(settings):
    """Deterministic engine whose translator returns the message key itself."""
    return InsightEngine(translate=lambda key: key, settings=settings, deterministic=True)


@pytest.fixture
def tracker():
    return StreakTracker()


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def make_records():
    """
    Factory fixture building MoodRecords from scores, most recent first.

    None in the score list produces a record without a mood.
    """

    def _make(scores, start: date = TODAY):
        return [
            MoodRecord(
                date=start - timedelta(days=i),
                mood=MoodLevel.from_score(s) if s is not None else None,
            )
            for i, s in enumerate(scores)
        ]

    return _make
