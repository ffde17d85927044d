"""Shared fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from manjaword.bootstrap import Container
from manjaword.domain.models.settings import AppSettings


@pytest.fixture()
def container(tmp_path: Path) -> Container:
    """Container with settings and autosave data isolated in *tmp_path*."""
    return Container(
        config_dir=tmp_path / "config",
        data_dir=tmp_path / "data",
        settings=AppSettings(),
    )
