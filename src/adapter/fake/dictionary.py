"""In-memory implementation of DictionaryPort for testing."""

import asyncio

from adapter.external.free_dictionary import build_request_target
from domain.model.definition import Definition
from domain.model.errors import DictionaryError
from domain.model.request_target import RequestTarget


class FakeDictionaryAdapter:
    """Fake dictionary adapter that returns preconfigured responses.

    ``responses`` maps a word to its entries or to an error to raise; words
    not in the map fall back to ``definitions`` / ``error``. ``delays`` holds
    per-word sleeps so tests can overlap lookups.
    """

    def __init__(
        self,
        definitions: list[Definition] | None = None,
        error: DictionaryError | None = None,
        responses: dict[str, list[Definition] | DictionaryError] | None = None,
        delays: dict[str, float] | None = None,
    ):
        self.definitions = definitions or []
        self.error = error
        self.responses = responses or {}
        self.delays = delays or {}
        self.looked_up: list[str] = []
        self.cancelled: list[str] = []

    def build_target(self, raw_word: str) -> RequestTarget:
        return build_request_target(raw_word)

    async def lookup(self, target: RequestTarget) -> list[Definition]:
        self.looked_up.append(target.word)
        try:
            await asyncio.sleep(self.delays.get(target.word, 0))
        except asyncio.CancelledError:
            self.cancelled.append(target.word)
            raise

        outcome = self.responses.get(target.word)
        if outcome is None:
            if self.error is not None:
                raise self.error
            return self.definitions
        if isinstance(outcome, DictionaryError):
            raise outcome
        return outcome
