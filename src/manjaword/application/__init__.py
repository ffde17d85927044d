"""Application layer: use cases and user-facing error messages."""
