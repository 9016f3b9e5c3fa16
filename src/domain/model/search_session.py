"""Search session domain model — current search state for a presenter."""

import logging
from dataclasses import dataclass, field
from enum import Enum

from domain.model.definition import Definition
from domain.model.errors import DictionaryError

logger = logging.getLogger(__name__)


class SearchState(str, Enum):
    IDLE = "idle"
    PENDING = "pending"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass
class SearchSession:
    """Result slot for the most recent search.

    Each search gets a generation number from begin(). Completions carrying
    an older generation are dropped, so only the latest search is ever shown.
    A failure keeps the previous definitions next to the new error; only a
    success replaces them.
    """

    state: SearchState = SearchState.IDLE
    query: str = ""
    generation: int = 0
    definitions: list[Definition] = field(default_factory=list)
    error: DictionaryError | None = None

    def begin(self, query: str) -> int:
        """Enter PENDING for a new search and return its generation."""
        self.generation += 1
        self.query = query
        self.state = SearchState.PENDING
        return self.generation

    def is_current(self, generation: int) -> bool:
        return generation == self.generation

    def succeed(self, generation: int, definitions: list[Definition]) -> bool:
        """Store definitions for ``generation``. Returns False if stale."""
        if not self._accepts(generation):
            return False
        self.definitions = definitions
        self.error = None
        self.state = SearchState.SUCCESS
        return True

    def fail(self, generation: int, error: DictionaryError) -> bool:
        """Record the error for ``generation``. Returns False if stale."""
        if not self._accepts(generation):
            return False
        self.error = error
        self.state = SearchState.FAILED
        return True

    def abandon(self) -> bool:
        """Drop the pending search, if any, and return to IDLE.

        Bumps the generation so a late completion of the abandoned search
        is discarded. Previous definitions and error are kept.
        """
        if self.state is not SearchState.PENDING:
            return False
        self.generation += 1
        self.state = SearchState.IDLE
        return True

    @property
    def is_terminal(self) -> bool:
        return self.state in (SearchState.SUCCESS, SearchState.FAILED)

    @property
    def user_message(self) -> str | None:
        """Error banner text, or None when there is nothing to show."""
        return self.error.user_message if self.error else None

    def _accepts(self, generation: int) -> bool:
        if not self.is_current(generation) or self.state is not SearchState.PENDING:
            logger.debug(
                "Discarding stale search completion",
                extra={"generation": generation, "current_generation": self.generation, "state": self.state.value},
            )
            return False
        return True
