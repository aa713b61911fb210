"""
Mood Journal Tools.

Async entry points for voice shortcuts and assistant agents: quick mood
logging, trend lookup and mood suggestions.

Conventions:
- All tools are async functions
- Optional tool_context and tool_config parameters
- Dict results carry a status field ("success" or "error")

tool_config keys: language, seed (int), deterministic (bool).
"""

import logging
import random
from datetime import date
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from .checkin import CheckInService
from .config import get_settings
from .insight_engine import InsightEngine
from .models import HealthSignals, MoodLevel, StreakState
from .schemas import MoodEntryModel, build_mood_summary
from .strings import get_translator

logger = logging.getLogger(__name__)

# Mood used when a shortcut passes an unrecognized identifier
FALLBACK_MOOD = MoodLevel.NEUTRAL


def _build_engine(tool_config: Optional[Dict[str, Any]], language: Optional[str]) -> InsightEngine:
    config = tool_config or {}
    settings = get_settings()
    seed = config.get("seed")
    return InsightEngine(
        translate=get_translator(language or config.get("language") or settings.language),
        rng=random.Random(seed) if seed is not None else None,
        settings=settings,
        deterministic=bool(config.get("deterministic", False)),
    )


def _resolve_mood(mood_id: str) -> MoodLevel:
    try:
        return MoodLevel((mood_id or "").strip().lower())
    except ValueError:
        logger.info(f"[TOOLS] Unknown mood '{mood_id}', using {FALLBACK_MOOD.value}")
        return FALLBACK_MOOD


def _parse_date(value: Optional[str]) -> date:
    return date.fromisoformat(value[:10]) if value else date.today()


async def log_mood(
    mood_id: str,
    hrv: Optional[float] = None,
    activity: Optional[float] = None,
    streak_state: Optional[Dict[str, Any]] = None,
    today: Optional[str] = None,
    language: Optional[str] = None,
    tool_context: Optional[Any] = None,
    tool_config: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Log today's mood and produce the contextual message.

    Args:
        mood_id: Mood identifier (bad, difficult, neutral, good, great)
        hrv: Today's HRV in milliseconds, if available
        activity: Activity ring completion 0..1, if available
        streak_state: Stored streak state dict (see StreakState.to_dict)
        today: ISO date of the check-in (defaults to today)
        language: Message language override
        tool_context: Agent tool context (optional)
        tool_config: Agent tool configuration (optional)

    Returns:
        Dict containing:
        - status: "success" or "error"
        - mood: Resolved mood identifier
        - message: Contextual message to store with the entry
        - dialog: Confirmation sentence for the shortcut
        - streak: Updated streak state to store
    """
    try:
        engine = _build_engine(tool_config, language)
        mood = _resolve_mood(mood_id)
        signals = HealthSignals(hrv=hrv, activity=activity)
        previous = StreakState.from_dict(streak_state) if streak_state else None
        check_in_date = _parse_date(today)
    except ValueError as e:
        logger.warning(f"[TOOLS] log_mood rejected arguments: {e}")
        return {"status": "error", "message": str(e)}

    result = CheckInService(engine).check_in(mood, signals, previous, check_in_date)
    translate = engine.translate

    return {
        "status": "success",
        "mood": result.mood.value,
        "message": result.message,
        "dialog": translate("checkin.dialog").format(mood=translate(mood.label_key)),
        "streak": result.streak.to_dict(),
    }


async def get_mood_trend(
    entries: List[Dict[str, Any]],
    today: Optional[str] = None,
    streak_state: Optional[Dict[str, Any]] = None,
    language: Optional[str] = None,
    tool_context: Optional[Any] = None,
    tool_config: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Summarize recent moods: trend, distribution, average and 7-day chart.

    Args:
        entries: Mood entry dicts ({"date": "YYYY-MM-DD", "mood": "good"}),
            most recent first
        today: ISO date the chart ends on (defaults to today)
        streak_state: Stored streak state dict, if any
        language: Message language override

    Returns:
        Dict with status and a camelCase summary payload
    """
    try:
        engine = _build_engine(tool_config, language)
        records = [MoodEntryModel.model_validate(e).to_record() for e in entries]
        streak = StreakState.from_dict(streak_state) if streak_state else None
        end_date = _parse_date(today)
    except (ValidationError, ValueError) as e:
        logger.warning(f"[TOOLS] get_mood_trend rejected entries: {e}")
        return {"status": "error", "message": str(e)}

    summary = build_mood_summary(engine, records, end_date, streak)

    return {
        "status": "success",
        "summary": summary.model_dump(by_alias=True, mode="json"),
        "message": summary.trend.message,
    }


async def suggested_moods(
    language: Optional[str] = None,
    tool_context: Optional[Any] = None,
    tool_config: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    List selectable moods, best first, with localized names.

    Returns:
        Dict with status, moods list and the default mood id
    """
    translate = get_translator(language or (tool_config or {}).get("language") or get_settings().language)
    moods = [
        {
            "id": mood.value,
            "name": translate(mood.label_key),
            "emoji": mood.emoji,
            "score": mood.score,
        }
        for mood in sorted(MoodLevel, reverse=True)
    ]
    return {
        "status": "success",
        "moods": moods,
        "default": FALLBACK_MOOD.value,
    }


async def format_check_in_dialog(
    mood_id: str,
    streak_count: int = 0,
    language: Optional[str] = None,
    tool_context: Optional[Any] = None,
    tool_config: Optional[Dict[str, Any]] = None,
) -> str:
    """
    Format the spoken confirmation after a check-in.

    Args:
        mood_id: Logged mood identifier
        streak_count: Current streak; mentioned when above one day

    Returns:
        Confirmation text suitable for a shortcut dialog
    """
    translate = get_translator(language or (tool_config or {}).get("language") or get_settings().language)
    mood = _resolve_mood(mood_id)
    text = translate("checkin.dialog").format(mood=translate(mood.label_key))
    if streak_count > 1:
        text += f" {mood.emoji} " + translate("checkin.streak").format(count=streak_count)
    return text
