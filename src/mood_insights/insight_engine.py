"""
Contextual Insight Engine.

Picks a short message for a check-in from a fixed rule table keyed on
mood tier and the day's health signals, and classifies the direction
of recent mood scores.
"""

import logging
import random
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .config import Settings, get_settings
from .models import HealthSignals, MoodLevel, MoodRecord, Trend, TrendResult
from .strings import Translator, get_translator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SignalFlags:
    """Threshold checks for one set of signals. Absent signals fail every check."""

    high_activity: bool
    low_activity: bool
    good_hrv: bool
    low_hrv: bool


@dataclass(frozen=True)
class MessageRule:
    """One row of the rule table."""

    category: str
    condition: Callable[[SignalFlags], bool]
    keys: Tuple[str, ...]


def _always(flags: SignalFlags) -> bool:
    return True


POSITIVE_RULES: List[MessageRule] = [
    MessageRule(
        "active_balanced",
        lambda f: f.high_activity and f.good_hrv,
        ("insight.good.active.high", "insight.good.balanced"),
    ),
    MessageRule("active", lambda f: f.high_activity, ("insight.good.active",)),
    MessageRule("grateful", _always, ("insight.good.default", "insight.good.grateful")),
]

NEUTRAL_RULES: List[MessageRule] = [
    MessageRule("rest", lambda f: f.low_activity, ("insight.neutral.inactive", "insight.neutral.rest")),
    MessageRule("steady", _always, ("insight.neutral.default", "insight.neutral.steady")),
]

NEGATIVE_RULES: List[MessageRule] = [
    MessageRule(
        "self_care",
        lambda f: f.low_activity and f.low_hrv,
        ("insight.difficult.rest.needed", "insight.difficult.selfcare"),
    ),
    MessageRule("tomorrow", _always, ("insight.difficult.default", "insight.difficult.tomorrow")),
]

RULES_BY_MOOD: Dict[MoodLevel, List[MessageRule]] = {
    MoodLevel.GREAT: POSITIVE_RULES,
    MoodLevel.GOOD: POSITIVE_RULES,
    MoodLevel.NEUTRAL: NEUTRAL_RULES,
    MoodLevel.DIFFICULT: NEGATIVE_RULES,
    MoodLevel.BAD: NEGATIVE_RULES,
}

DEFAULT_MESSAGE_KEYS: Dict[MoodLevel, str] = {
    MoodLevel.GREAT: "insight.good.default",
    MoodLevel.GOOD: "insight.good.default",
    MoodLevel.NEUTRAL: "insight.neutral.default",
    MoodLevel.DIFFICULT: "insight.difficult.default",
    MoodLevel.BAD: "insight.difficult.default",
}

TREND_MESSAGE_KEYS: Dict[Trend, str] = {
    Trend.IMPROVING: "trend.improving",
    Trend.STABLE: "trend.stable",
    Trend.DECLINING: "trend.declining",
}

INSUFFICIENT_DATA_KEY = "trend.insufficient.data"


class InsightEngine:
    """
    Rule-based contextual messages and mood trend classification.

    Stateless per call: instances hold only configuration, the translator
    and the random source, so one engine may be shared across threads.

    Args:
        translate: key -> text lookup (defaults to the configured language)
        rng: random source used to pick among a rule's candidate messages.
            Pass a seeded random.Random for reproducible output.
        settings: thresholds and trend window (defaults to get_settings())
        deterministic: always pick the first candidate instead of sampling
    """

    def __init__(
        self,
        translate: Optional[Translator] = None,
        rng: Optional[random.Random] = None,
        settings: Optional[Settings] = None,
        deterministic: bool = False,
    ):
        self.settings = settings or get_settings()
        self.translate = translate or get_translator(self.settings.language)
        self.rng = rng or random.Random()
        self.deterministic = deterministic

    # ------------------------------------------------------------------
    # Contextual messages
    # ------------------------------------------------------------------

    def evaluate_signals(self, signals: Optional[HealthSignals]) -> SignalFlags:
        """Apply the fixed thresholds to a set of signals."""
        signals = signals or HealthSignals.none()
        activity = signals.activity
        hrv = signals.hrv
        s = self.settings
        return SignalFlags(
            high_activity=activity is not None and activity >= s.activity_high,
            low_activity=activity is not None and activity < s.activity_low,
            good_hrv=hrv is not None and hrv >= s.hrv_good,
            low_hrv=hrv is not None and hrv < s.hrv_good,
        )

    def match_rule(self, mood: MoodLevel, signals: Optional[HealthSignals] = None) -> MessageRule:
        """Return the first rule for the mood's tier whose condition holds."""
        flags = self.evaluate_signals(signals)
        rules = RULES_BY_MOOD[mood]
        for rule in rules:
            if rule.condition(flags):
                return rule
        # Every tier ends with an unconditional rule
        return rules[-1]

    def generate_message(self, mood: MoodLevel, signals: Optional[HealthSignals] = None) -> str:
        """
        Pick a contextual message for a check-in.

        Args:
            mood: The mood being logged
            signals: Today's health signals, or None when unavailable

        Returns:
            Localized message text
        """
        mood = MoodLevel(mood)
        rule = self.match_rule(mood, signals)

        if not rule.keys:
            key = DEFAULT_MESSAGE_KEYS[mood]
        elif self.deterministic:
            key = rule.keys[0]
        else:
            key = self.rng.choice(rule.keys)

        logger.debug(f"[INSIGHTS] mood={mood.value} rule={rule.category} key={key}")
        return self.translate(key)

    # ------------------------------------------------------------------
    # Trend analysis
    # ------------------------------------------------------------------

    def analyze_trend(self, entries: Sequence[MoodRecord]) -> TrendResult:
        """
        Classify recent mood direction.

        Entries must be ordered most recent first; they are not re-sorted.
        The newest `trend_recent_count` scores are compared against the
        rest of the `trend_window` most recent entries.

        Returns:
            TrendResult with classification and localized message
        """
        s = self.settings
        window = list(entries)[: s.trend_window]
        scores = [entry.score for entry in window if entry.mood is not None]

        if len(scores) < s.trend_min_entries:
            logger.debug(
                f"[INSIGHTS] Not enough mood scores for a trend: "
                f"{len(scores)}/{s.trend_min_entries}"
            )
            return TrendResult(
                trend=Trend.STABLE,
                message=self.translate(INSUFFICIENT_DATA_KEY),
                sample_size=len(scores),
                insufficient_data=True,
            )

        recent = scores[: s.trend_recent_count]
        older = scores[s.trend_recent_count:]
        recent_avg = sum(recent) / len(recent)

        if not older:
            # Nothing to compare the recent scores against
            return TrendResult(
                trend=Trend.STABLE,
                message=self.translate(TREND_MESSAGE_KEYS[Trend.STABLE]),
                recent_average=recent_avg,
                sample_size=len(scores),
            )

        older_avg = sum(older) / len(older)

        if recent_avg > older_avg + s.trend_delta:
            trend = Trend.IMPROVING
        elif recent_avg < older_avg - s.trend_delta:
            trend = Trend.DECLINING
        else:
            trend = Trend.STABLE

        logger.debug(
            f"[INSIGHTS] Trend {trend.value}: recent={recent_avg:.2f} "
            f"older={older_avg:.2f} n={len(scores)}"
        )

        return TrendResult(
            trend=trend,
            message=self.translate(TREND_MESSAGE_KEYS[trend]),
            recent_average=recent_avg,
            older_average=older_avg,
            sample_size=len(scores),
        )
