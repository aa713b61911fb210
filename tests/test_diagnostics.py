"""
Unit tests for the diagnostics log.

Usage:
    pytest tests/test_diagnostics.py -v
"""
import json
import logging

from mood_insights.diagnostics import DiagnosticsHandler, DiagnosticsLevel, DiagnosticsLog


class TestDiagnosticsLog:
    """Test event recording, trimming and export."""

    def test_log_and_recent_events(self):
        log = DiagnosticsLog()
        log.log(DiagnosticsLevel.INFO, "Test event", {"source": "unit-test"})
        events = log.recent_events(limit=10)
        assert len(events) == 1
        assert events[0].message == "Test event"
        assert events[0].metadata == {"source": "unit-test"}

    def test_metadata_truncated(self):
        log = DiagnosticsLog(metadata_max_length=200)
        event = log.log("warning", "big", {"payload": "x" * 500, "count": 3})
        assert len(event.metadata["payload"]) == 200
        assert event.metadata["count"] == "3"
        assert event.level == DiagnosticsLevel.WARNING

    def test_oldest_events_dropped(self):
        log = DiagnosticsLog(max_entries=3)
        for i in range(5):
            log.log(DiagnosticsLevel.INFO, f"event {i}")
        assert [e.message for e in log.recent_events()] == ["event 2", "event 3", "event 4"]

    def test_recent_events_limit(self):
        log = DiagnosticsLog()
        for i in range(5):
            log.log(DiagnosticsLevel.INFO, f"event {i}")
        assert [e.message for e in log.recent_events(limit=2)] == ["event 3", "event 4"]
        assert log.recent_events(limit=0) == []

    def test_clear(self):
        log = DiagnosticsLog()
        log.log(DiagnosticsLevel.ERROR, "oops")
        log.clear()
        assert len(log) == 0

    def test_export_writes_json(self, tmp_path):
        log = DiagnosticsLog()
        log.log(DiagnosticsLevel.INFO, "Test event", {"source": "unit-test"})

        path = log.export("test-user", tmp_path / "exports")

        assert path is not None
        assert path.exists()
        assert path.name.startswith("diagnostics-test-user-")
        payload = json.loads(path.read_text(encoding="utf-8"))
        assert payload["user_identifier"] == "test-user"
        assert payload["events"][0]["message"] == "Test event"
        assert payload["events"][0]["level"] == "info"

    def test_export_empty_returns_none(self, tmp_path):
        assert DiagnosticsLog().export("test-user", tmp_path) is None

    def test_export_failure_returns_none(self, tmp_path):
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("file")
        log = DiagnosticsLog()
        log.log(DiagnosticsLevel.INFO, "event")
        assert log.export("test-user", blocker / "sub") is None


class TestDiagnosticsHandler:
    """Test forwarding of log records."""

    def test_levels_mapped(self):
        log = DiagnosticsLog()
        logger = logging.getLogger("mood_insights.test_handler")
        logger.setLevel(logging.INFO)
        handler = DiagnosticsHandler(log)
        logger.addHandler(handler)
        try:
            logger.info("hello %s", "world")
            logger.warning("careful")
            logger.error("broken")
            logger.debug("ignored")
        finally:
            logger.removeHandler(handler)

        events = log.recent_events()
        assert [e.message for e in events] == ["hello world", "careful", "broken"]
        assert [e.level for e in events] == [
            DiagnosticsLevel.INFO,
            DiagnosticsLevel.WARNING,
            DiagnosticsLevel.ERROR,
        ]
        assert events[0].metadata == {"logger": "mood_insights.test_handler"}

    def test_streak_warning_reaches_diagnostics(self, tracker, today):
        """A backwards check-in date shows up as a diagnostics warning."""
        from datetime import timedelta

        from mood_insights.models import StreakState

        log = DiagnosticsLog()
        streak_logger = logging.getLogger("mood_insights.streak_tracker")
        handler = DiagnosticsHandler(log, level=logging.WARNING)
        streak_logger.addHandler(handler)
        previous_level = streak_logger.level
        streak_logger.setLevel(logging.INFO)
        try:
            tracker.record_check_in(
                StreakState(current_streak=2, longest_streak=2, last_check_in_date=today),
                today - timedelta(days=1),
            )
        finally:
            streak_logger.removeHandler(handler)
            streak_logger.setLevel(previous_level)

        warnings = [e for e in log.recent_events() if e.level == DiagnosticsLevel.WARNING]
        assert len(warnings) == 1
        assert "[STREAK]" in warnings[0].message


class TestDiagnosticsSettings:
    """Test settings-driven construction."""

    def test_from_settings(self, settings):
        custom = settings.model_copy(
            update={"diagnostics_max_entries": 2, "diagnostics_metadata_max_length": 5}
        )
        log = DiagnosticsLog.from_settings(custom)
        for i in range(3):
            event = log.log(DiagnosticsLevel.INFO, f"event {i}", {"k": "abcdefgh"})
        assert len(log) == 2
        assert event.metadata == {"k": "abcde"}

    def test_export_uses_directory_from_given_settings(self, settings, tmp_path):
        custom = settings.model_copy(
            update={"diagnostics_export_dir": str(tmp_path / "custom-exports")}
        )
        log = DiagnosticsLog.from_settings(custom)
        log.log(DiagnosticsLevel.INFO, "event")

        path = log.export("someone")

        assert path is not None
        assert path.parent == tmp_path / "custom-exports"

    def test_export_uses_configured_directory(self, tmp_path, monkeypatch):
        from mood_insights.config import get_settings

        monkeypatch.setenv("MOOD_INSIGHTS_DIAGNOSTICS_EXPORT_DIR", str(tmp_path / "configured"))
        get_settings.cache_clear()
        try:
            log = DiagnosticsLog()
            log.log(DiagnosticsLevel.INFO, "event")
            path = log.export("someone")
        finally:
            get_settings.cache_clear()

        assert path is not None
        assert path.parent == tmp_path / "configured"
