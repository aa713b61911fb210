"""
Localized message tables.

The engine never looks up text itself; it receives a translator,
a plain callable mapping a key to display text.
"""

import logging
from typing import Callable, Dict, Optional

logger = logging.getLogger(__name__)

Translator = Callable[[str], str]

DEFAULT_LANGUAGE = "en"

STRING_TABLES: Dict[str, Dict[str, str]] = {
    "en": {
        # Contextual messages
        "insight.good.active.high": "You moved a lot and your body is well recovered. Great balance today!",
        "insight.good.balanced": "Activity and recovery are in sync. Keep this rhythm going.",
        "insight.good.active": "All that movement paid off. Enjoy the good feeling!",
        "insight.good.default": "Glad today went well. Take a moment to savor it.",
        "insight.good.grateful": "A good day is worth remembering. What are you grateful for?",
        "insight.neutral.inactive": "A quiet day. A short walk tomorrow might lift your energy.",
        "insight.neutral.rest": "Low activity today. Rest is fine, just listen to your body.",
        "insight.neutral.default": "An ordinary day is still a day well lived.",
        "insight.neutral.steady": "Steady days build strong habits. Nice consistency.",
        "insight.difficult.rest.needed": "Your body seems tired too. An early night could help a lot.",
        "insight.difficult.selfcare": "Be gentle with yourself tonight. Small comforts count.",
        "insight.difficult.default": "Hard days happen. Thanks for checking in anyway.",
        "insight.difficult.tomorrow": "Tomorrow is a fresh start. You got through today.",
        # Trends
        "trend.insufficient.data": "Log a few more days to see your trend.",
        "trend.improving": "Your mood has been improving lately. Keep it up!",
        "trend.stable": "Your mood has been steady over the past days.",
        "trend.declining": "Your mood has dipped recently. Consider taking extra care of yourself.",
        "trend.today": "Today",
        "trend.yesterday": "Yesterday",
        # Calendar
        "day.short.0": "Mon",
        "day.short.1": "Tue",
        "day.short.2": "Wed",
        "day.short.3": "Thu",
        "day.short.4": "Fri",
        "day.short.5": "Sat",
        "day.short.6": "Sun",
        "month.short.1": "Jan",
        "month.short.2": "Feb",
        "month.short.3": "Mar",
        "month.short.4": "Apr",
        "month.short.5": "May",
        "month.short.6": "Jun",
        "month.short.7": "Jul",
        "month.short.8": "Aug",
        "month.short.9": "Sep",
        "month.short.10": "Oct",
        "month.short.11": "Nov",
        "month.short.12": "Dec",
        "date.short": "{weekday}, {month} {day}",
        # Mood labels
        "mood.label.bad": "Bad",
        "mood.label.difficult": "Difficult",
        "mood.label.neutral": "Neutral",
        "mood.label.good": "Good",
        "mood.label.great": "Great",
        # Shortcuts
        "checkin.dialog": "Mood logged as {mood}",
        "checkin.streak": "{count}-day streak",
    },
    "tr": {
        "insight.good.active.high": "Bugün çok hareket ettin ve vücudun iyi toparlanmış. Harika bir denge!",
        "insight.good.balanced": "Aktivite ve toparlanma uyum içinde. Bu ritmi koru.",
        "insight.good.active": "Tüm o hareket karşılığını verdi. İyi hissetmenin tadını çıkar!",
        "insight.good.default": "Bugünün iyi geçmesine sevindim. Bir an durup tadını çıkar.",
        "insight.good.grateful": "İyi bir gün hatırlanmaya değer. Neye minnettarsın?",
        "insight.neutral.inactive": "Sakin bir gün. Yarın kısa bir yürüyüş enerjini artırabilir.",
        "insight.neutral.rest": "Bugün aktivite az. Dinlenmek de olur, vücudunu dinle.",
        "insight.neutral.default": "Sıradan bir gün de iyi yaşanmış bir gündür.",
        "insight.neutral.steady": "İstikrarlı günler güçlü alışkanlıklar kurar.",
        "insight.difficult.rest.needed": "Vücudun da yorgun görünüyor. Erken yatmak çok iyi gelebilir.",
        "insight.difficult.selfcare": "Bu akşam kendine nazik ol. Küçük rahatlıklar da önemli.",
        "insight.difficult.default": "Zor günler olur. Yine de kaydettiğin için teşekkürler.",
        "insight.difficult.tomorrow": "Yarın yeni bir başlangıç. Bugünü atlattın.",
        "trend.insufficient.data": "Eğilimini görmek için birkaç gün daha kaydet.",
        "trend.improving": "Ruh halin son günlerde iyileşiyor. Böyle devam!",
        "trend.stable": "Ruh halin son günlerde dengeli.",
        "trend.declining": "Ruh halin son zamanlarda düştü. Kendine biraz daha özen göster.",
        "trend.today": "Bugün",
        "trend.yesterday": "Dün",
        "day.short.0": "Pzt",
        "day.short.1": "Sal",
        "day.short.2": "Çar",
        "day.short.3": "Per",
        "day.short.4": "Cum",
        "day.short.5": "Cmt",
        "day.short.6": "Paz",
        "month.short.1": "Oca",
        "month.short.2": "Şub",
        "month.short.3": "Mar",
        "month.short.4": "Nis",
        "month.short.5": "May",
        "month.short.6": "Haz",
        "month.short.7": "Tem",
        "month.short.8": "Ağu",
        "month.short.9": "Eyl",
        "month.short.10": "Eki",
        "month.short.11": "Kas",
        "month.short.12": "Ara",
        "date.short": "{day} {month}, {weekday}",
        "mood.label.bad": "Kötü",
        "mood.label.difficult": "Zor",
        "mood.label.neutral": "Normal",
        "mood.label.good": "İyi",
        "mood.label.great": "Harika",
        "checkin.dialog": "Ruh halin {mood} olarak kaydedildi",
        "checkin.streak": "{count} günlük seri",
    },
}


class StringTable:
    """
    Callable key -> text lookup over one language's table.

    Missing keys fall back to English, then to the key itself.
    """

    def __init__(self, language: str = DEFAULT_LANGUAGE, overrides: Optional[Dict[str, str]] = None):
        if language not in STRING_TABLES:
            logger.info(f"[STRINGS] Unknown language '{language}', using {DEFAULT_LANGUAGE}")
            language = DEFAULT_LANGUAGE
        self.language = language
        self._table = dict(STRING_TABLES[language])
        if overrides:
            self._table.update(overrides)

    def __call__(self, key: str) -> str:
        text = self._table.get(key)
        if text is None:
            text = STRING_TABLES[DEFAULT_LANGUAGE].get(key, key)
        return text


def get_translator(language: str = DEFAULT_LANGUAGE) -> Translator:
    """Return the translator for a language code."""
    return StringTable(language)


def available_languages() -> list:
    return sorted(STRING_TABLES)
