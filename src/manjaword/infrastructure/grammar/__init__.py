"""Grammar checking backends."""

from manjaword.infrastructure.grammar.languagetool_client import LanguageToolClient

__all__ = ["LanguageToolClient"]
