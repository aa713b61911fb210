"""Engine configuration loaded from environment variables."""
import os
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Insight, trend and diagnostics settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="MOOD_INSIGHTS_",
        env_file=".env",
        extra="ignore",
    )

    # Message language (en, tr)
    language: str = "en"

    # Contextual message thresholds
    activity_high: float = 0.7
    activity_low: float = 0.3
    hrv_good: float = 50.0  # SDNN, milliseconds

    # Trend analysis
    trend_window: int = 7
    trend_recent_count: int = 3
    trend_min_entries: int = 3
    trend_delta: float = 0.5

    # Diagnostics log
    diagnostics_max_entries: int = 500
    diagnostics_metadata_max_length: int = 200
    diagnostics_export_dir: Optional[str] = None

    @property
    def export_dir(self) -> str:
        return self.diagnostics_export_dir or os.path.join(os.getcwd(), "DiagnosticsExports")


@lru_cache
def get_settings() -> Settings:
    return Settings()
