"""Use Case: Check Grammar."""

from manjaword.domain.models.grammar import GrammarResponse
from manjaword.domain.ports.grammar_checker import GrammarCheckerPort


class CheckGrammarUseCase:
    """Forward text to the configured grammar checker."""

    def __init__(self, checker: GrammarCheckerPort) -> None:
        self._checker = checker

    def execute(self, text: str) -> GrammarResponse:
        """Return the matches for *text*.

        Raises:
            GrammarServiceUnavailableError: If the service fails in any way.
        """
        return self._checker.check(text)
