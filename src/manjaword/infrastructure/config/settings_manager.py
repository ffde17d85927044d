"""Settings manager: loads/saves AppSettings to the OS config dir.

Implements ``SettingsPort`` and persists preferences as JSON to
``~/.config/manjaword/settings.json`` (Linux) or the equivalent platform
directory via ``platformdirs``. Grammar service settings can be overridden
from the environment (or a ``.env`` file) with ``MANJAWORD_GRAMMAR_URL``
and ``MANJAWORD_GRAMMAR_LANGUAGE``.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

import platformdirs
from dotenv import load_dotenv
from pydantic import ValidationError

from manjaword.domain.models.settings import AppSettings
from manjaword.domain.ports.settings_port import SettingsPort
from manjaword.domain.rules.constants import APP_NAME

logger = logging.getLogger(__name__)

_SETTINGS_FILENAME = "settings.json"
_ENV_GRAMMAR_URL = "MANJAWORD_GRAMMAR_URL"
_ENV_GRAMMAR_LANGUAGE = "MANJAWORD_GRAMMAR_LANGUAGE"


class SettingsManager(SettingsPort):
    """Concrete implementation of :class:`SettingsPort`.

    Parameters
    ----------
    config_dir : Path | None
        Override the default config directory (useful for testing).
    use_env : bool
        Apply environment overrides on load.
    """

    def __init__(self, config_dir: Path | None = None, use_env: bool = True) -> None:
        self._config_dir = config_dir or Path(platformdirs.user_config_dir(APP_NAME))
        self._settings_path = self._config_dir / _SETTINGS_FILENAME
        self._use_env = use_env

    # -- Public API ----------------------------------------------------------

    def load(self) -> AppSettings:
        """Load settings from disk, falling back to defaults."""
        settings = self._load_file()
        if self._use_env:
            settings = self._apply_env(settings)
        return settings

    def save(self, settings: AppSettings) -> None:
        """Persist settings atomically (write to temp, then rename)."""
        self._config_dir.mkdir(parents=True, exist_ok=True)

        data = settings.model_dump(mode="json")
        tmp_fd, tmp_path = tempfile.mkstemp(
            dir=self._config_dir,
            suffix=".tmp",
        )
        try:
            with open(tmp_fd, "w", encoding="utf-8") as fh:
                json.dump(data, fh, indent=2, ensure_ascii=False)
            Path(tmp_path).replace(self._settings_path)
        except Exception:
            Path(tmp_path).unlink(missing_ok=True)
            raise

    def reset_to_defaults(self) -> AppSettings:
        """Delete the persisted file and return factory defaults."""
        self._settings_path.unlink(missing_ok=True)
        return AppSettings()

    def set_value(self, key: str, value: str) -> AppSettings:
        """Update one ``section.field`` entry from its text form and save it.

        The value is validated by the settings model, so ``"true"`` becomes a
        boolean and ``"30"`` a number. Environment overrides are never
        written back to the file.

        Raises:
            ValueError: Unknown key, or a value the field does not accept.
        """
        section, _, name = key.partition(".")
        data = self._load_file().model_dump(mode="json")
        if not isinstance(data.get(section), dict) or name not in data[section]:
            raise ValueError(f"Unknown setting: {key}")

        data[section][name] = value
        settings = AppSettings.model_validate(data)
        self.save(settings)
        logger.info("Setting %s updated", key)
        return settings

    @property
    def settings_path(self) -> Path:
        """Absolute path to the settings JSON file."""
        return self._settings_path

    # -- Internals -----------------------------------------------------------

    def _load_file(self) -> AppSettings:
        if not self._settings_path.exists():
            return AppSettings()

        try:
            raw = json.loads(self._settings_path.read_text(encoding="utf-8"))
            return AppSettings.model_validate(raw)
        except (OSError, ValueError, ValidationError) as exc:
            logger.warning("Ignoring unreadable settings file %s: %s", self._settings_path, exc)
            return AppSettings()

    @staticmethod
    def _apply_env(settings: AppSettings) -> AppSettings:
        load_dotenv()
        overrides: dict[str, str] = {}
        if url := os.environ.get(_ENV_GRAMMAR_URL):
            overrides["base_url"] = url
        if language := os.environ.get(_ENV_GRAMMAR_LANGUAGE):
            overrides["language"] = language
        if not overrides:
            return settings
        grammar = settings.grammar.model_copy(update=overrides)
        return settings.model_copy(update={"grammar": grammar})
