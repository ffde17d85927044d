"""Port (ABC) for user settings persistence.

Domain layer interface; infrastructure provides the concrete implementation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from manjaword.domain.models.settings import AppSettings


class SettingsPort(ABC):
    """Abstract interface for loading / saving user preferences."""

    @abstractmethod
    def load(self) -> AppSettings:
        """Load persisted settings (or defaults if none exist)."""

    @abstractmethod
    def save(self, settings: AppSettings) -> None:
        """Persist the given settings."""

    @abstractmethod
    def reset_to_defaults(self) -> AppSettings:
        """Delete persisted settings and return factory defaults."""

    @abstractmethod
    def set_value(self, key: str, value: str) -> AppSettings:
        """Persist one ``section.field`` setting given as text; return the result."""
