"""Port: grammar checker. Delegates text checking to an external service."""

from abc import ABC, abstractmethod

from manjaword.domain.models.grammar import GrammarResponse


class GrammarCheckerPort(ABC):
    """Contract for grammar checking backends."""

    @abstractmethod
    def check(self, text: str) -> GrammarResponse:
        """Check *text* and return the matches found.

        Raises:
            GrammarServiceUnavailableError: For any failure of the service.
        """
        ...
