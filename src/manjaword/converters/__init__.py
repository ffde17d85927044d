"""Converters from editor payloads to exportable text."""

from manjaword.converters.delta import flatten_delta

__all__ = ["flatten_delta"]
