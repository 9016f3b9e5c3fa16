"""Dictionary port — outbound interface for dictionary data sources."""

from typing import Protocol

from domain.model.definition import Definition
from domain.model.request_target import RequestTarget


class DictionaryPort(Protocol):
    """Port for looking up dictionary entries.

    build_target() validates the raw word and composes the request without
    touching the network. lookup() performs exactly one request and returns
    decoded entries or raises a DictionaryError subclass.
    """

    def build_target(self, raw_word: str) -> RequestTarget: ...

    async def lookup(self, target: RequestTarget) -> list[Definition]: ...
