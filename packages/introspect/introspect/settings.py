"""Introspect settings — local configuration persistence."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from pydantic import BaseModel, Field

from introspect.schemas.query import DEFAULT_MAX_RESULTS, MAX_PAGE_SIZE

logger = logging.getLogger(__name__)

_DEFAULT_DIR = os.path.expanduser("~/.config/introspect")
_SETTINGS_FILE = "settings.json"


class IntrospectSettings(BaseModel):
    """User-configurable settings, persisted to the local filesystem."""

    config_dir: str = Field(default_factory=lambda: _DEFAULT_DIR)
    history_file: str = "tool-history.jsonl"

    # Retention of the queryable window; the on-disk log keeps everything
    max_entries: int = Field(gt=0, default=1000)

    default_page_size: int = Field(ge=0, le=MAX_PAGE_SIZE, default=DEFAULT_MAX_RESULTS)

    # fsync after every append
    durable_writes: bool = True

    log_level: str = "INFO"

    @property
    def history_path(self) -> Path:
        return Path(self.config_dir).expanduser() / self.history_file


class SettingsManager:
    """Manages loading and saving settings from the local filesystem."""

    def __init__(self, config_dir: str | None = None) -> None:
        self._config_dir = Path(config_dir or _DEFAULT_DIR)

    @property
    def config_dir(self) -> Path:
        return self._config_dir

    @property
    def _settings_path(self) -> Path:
        return self._config_dir / _SETTINGS_FILE

    def _defaults(self) -> IntrospectSettings:
        return IntrospectSettings(config_dir=str(self._config_dir))

    def load(self) -> IntrospectSettings:
        """Load settings from disk. Returns defaults if the file doesn't exist."""
        if not self._settings_path.exists():
            return self._defaults()
        try:
            data = json.loads(self._settings_path.read_text())
            data.setdefault("config_dir", str(self._config_dir))
            return IntrospectSettings.model_validate(data)
        except Exception as exc:
            logger.warning("Failed to load settings from %s: %s", self._settings_path, exc)
            return self._defaults()

    def save(self, settings: IntrospectSettings) -> None:
        """Save settings to disk."""
        self._config_dir.mkdir(parents=True, exist_ok=True)
        self._settings_path.write_text(
            settings.model_dump_json(indent=2) + "\n"
        )

    def update(self, updates: dict) -> IntrospectSettings:
        """Load current settings, apply updates, save, and return."""
        settings = self.load()
        updated = settings.model_copy(update={
            k: v for k, v in updates.items() if v is not None
        })
        self.save(updated)
        return updated
