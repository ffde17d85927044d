"""User settings persistence."""

from manjaword.infrastructure.config.settings_manager import SettingsManager

__all__ = ["SettingsManager"]
