"""Flatten a Quill delta into plain text lines.

A delta is ``{"ops": [{"insert": "Hello\\n", "attributes": {...}}, ...]}``.
Only string inserts carry text; embeds (images, formulas) are objects and
are skipped. Formatting attributes are ignored.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def flatten_delta(content: Any) -> list[str]:
    """Return the text lines of *content*, in document order.

    Each string insert is split on ``"\\n"`` on its own, so
    ``[{"insert": "a\\nb"}, {"insert": "c"}]`` gives ``["a", "b", "c"]``.
    Empty lines are kept; renderers decide what to do with them.

    Anything that is not shaped like a delta yields an empty list.
    """
    if not isinstance(content, Mapping):
        return []
    ops = content.get("ops")
    if not isinstance(ops, list):
        return []

    lines: list[str] = []
    for op in ops:
        if not isinstance(op, Mapping):
            continue
        insert = op.get("insert")
        if isinstance(insert, str):
            lines.extend(insert.split("\n"))
    return lines
