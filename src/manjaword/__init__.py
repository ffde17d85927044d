"""ManjaWord: native backend for the ManjaWord desktop word processor."""

__version__ = "0.1.0"
