"""
On-device Diagnostics Log.

Keeps a bounded in-memory list of diagnostic events. Nothing leaves the
process unless the user explicitly exports it.
"""

import json
import logging
import os
import threading
import time
import uuid
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional

from .config import Settings, get_settings

logger = logging.getLogger(__name__)


class DiagnosticsLevel(str, Enum):
    """Severity of a diagnostic event."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class DiagnosticsEvent:
    """A single diagnostic event."""

    level: DiagnosticsLevel
    message: str
    metadata: Optional[Dict[str, str]] = None
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "timestamp": self.timestamp.isoformat(),
            "level": self.level.value,
            "message": self.message,
            "metadata": self.metadata,
        }


class DiagnosticsLog:
    """
    Bounded diagnostics event log with user-controlled export.

    Metadata values are truncated to keep large payloads out of the log.
    Oldest events are dropped once max_entries is reached.
    """

    def __init__(
        self,
        max_entries: int = 500,
        metadata_max_length: int = 200,
        export_dir: Optional[os.PathLike] = None,
    ):
        self.max_entries = max_entries
        self.metadata_max_length = metadata_max_length
        self.export_dir = Path(export_dir) if export_dir is not None else None
        self._events: deque = deque(maxlen=max_entries)
        self._lock = threading.Lock()

    def log(
        self,
        level: DiagnosticsLevel,
        message: str,
        metadata: Optional[Dict[str, object]] = None,
    ) -> DiagnosticsEvent:
        """
        Record an event.

        Args:
            level: Event severity
            message: Short description
            metadata: Optional string-keyed details; values are stringified
                and truncated

        Returns:
            The stored event
        """
        sanitized = None
        if metadata is not None:
            sanitized = {
                str(k): str(v)[: self.metadata_max_length] for k, v in metadata.items()
            }

        event = DiagnosticsEvent(
            level=DiagnosticsLevel(level),
            message=message,
            metadata=sanitized,
        )
        with self._lock:
            self._events.append(event)
        return event

    def recent_events(self, limit: int = 100) -> List[DiagnosticsEvent]:
        """Return up to `limit` most recent events, oldest first."""
        with self._lock:
            events = list(self._events)
        if limit <= 0:
            return []
        return events[-limit:]

    def clear(self) -> None:
        """Remove all events."""
        with self._lock:
            self._events.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "DiagnosticsLog":
        settings = settings or get_settings()
        return cls(
            max_entries=settings.diagnostics_max_entries,
            metadata_max_length=settings.diagnostics_metadata_max_length,
            export_dir=settings.export_dir,
        )

    def export(self, user_identifier: str, directory: Optional[os.PathLike] = None) -> Optional[Path]:
        """
        Write all events to a JSON file for sharing.

        Files go to `directory`, else the log's own export_dir, else the
        configured export directory.

        The caller is responsible for deleting the file after sharing.

        Returns:
            Path of the export file, or None if there was nothing to export
            or the file could not be written
        """
        with self._lock:
            events = list(self._events)

        if not events:
            return None

        if directory is not None:
            export_dir = Path(directory)
        elif self.export_dir is not None:
            export_dir = self.export_dir
        else:
            export_dir = Path(get_settings().export_dir)
        filename = f"diagnostics-{user_identifier}-{int(time.time())}.json"
        export_path = export_dir / filename

        payload = {
            "generated_at": datetime.now(timezone.utc).isoformat(),
            "user_identifier": user_identifier,
            "events": [e.to_dict() for e in events],
        }

        try:
            export_dir.mkdir(parents=True, exist_ok=True)
            tmp_path = export_path.with_suffix(".json.tmp")
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(payload, f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, export_path)
        except OSError as e:
            logger.error(f"[DIAGNOSTICS] Export failed: {e}")
            return None

        logger.info(f"[DIAGNOSTICS] Exported {len(events)} events to {export_path}")
        return export_path


class DiagnosticsHandler(logging.Handler):
    """logging.Handler that copies records into a DiagnosticsLog."""

    def __init__(self, diagnostics: DiagnosticsLog, level: int = logging.INFO):
        super().__init__(level)
        self.diagnostics = diagnostics

    def emit(self, record: logging.LogRecord) -> None:
        if record.levelno >= logging.ERROR:
            level = DiagnosticsLevel.ERROR
        elif record.levelno >= logging.WARNING:
            level = DiagnosticsLevel.WARNING
        else:
            level = DiagnosticsLevel.INFO
        try:
            self.diagnostics.log(level, record.getMessage(), {"logger": record.name})
        except Exception:
            self.handleError(record)
