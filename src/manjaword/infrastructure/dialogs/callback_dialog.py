"""Callback dialog: adapt callback-style toolkit dialogs to a blocking call.

Toolkits such as Qt or a webview bridge report the user's choice through a
callback. Each request here creates one ``Future``, hands the toolkit a
``deliver`` callback and blocks until that single result arrives. Only the
first delivery counts.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from concurrent.futures import Future, InvalidStateError
from pathlib import Path

from manjaword.domain.ports.file_dialog import FileDialogPort, FileFilter

logger = logging.getLogger(__name__)

Deliver = Callable[["str | Path | None"], None]
OpenDialogFn = Callable[[list[FileFilter], Deliver], None]
SaveDialogFn = Callable[[list[FileFilter], str, Deliver], None]


class CallbackFileDialog(FileDialogPort):
    """Bridge a callback-based dialog API to ``FileDialogPort``.

    Parameters
    ----------
    open_fn:
        Called as ``open_fn(filters, deliver)``; must eventually call
        ``deliver(path_or_none)`` once, from any thread.
    save_fn:
        Called as ``save_fn(filters, default_name, deliver)``.
    """

    def __init__(self, open_fn: OpenDialogFn, save_fn: SaveDialogFn) -> None:
        self._open_fn = open_fn
        self._save_fn = save_fn

    def pick_open_path(self, filters: list[FileFilter]) -> Path | None:
        return self._wait(lambda deliver: self._open_fn(filters, deliver))

    def pick_save_path(self, filters: list[FileFilter], default_name: str) -> Path | None:
        return self._wait(lambda deliver: self._save_fn(filters, default_name, deliver))

    @staticmethod
    def _wait(start: Callable[[Deliver], None]) -> Path | None:
        future: Future[Path | None] = Future()

        def deliver(result: str | Path | None) -> None:
            try:
                future.set_result(Path(result) if result is not None else None)
            except InvalidStateError:
                logger.debug("Ignoring repeated dialog result: %r", result)

        start(deliver)
        return future.result()
