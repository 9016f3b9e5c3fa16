"""Dictionary search service — word in, entries or a classified error out.

search() is the stateless path used by the HTTP API. SearchController
drives a SearchSession for presenters that show one search at a time
(the interactive CLI): at most one lookup is in flight, and starting a new
search cancels the previous one.
"""

import asyncio
import logging

from domain.model.definition import Definition
from domain.model.errors import DictionaryError
from domain.model.search_session import SearchSession
from port.dictionary import DictionaryPort

logger = logging.getLogger(__name__)


async def search(dictionary: DictionaryPort, raw_word: str) -> list[Definition]:
    """Build the request for ``raw_word`` and look it up.

    Raises:
        DictionaryError: Any classified failure, before or after the network call.
    """
    target = dictionary.build_target(raw_word)
    logger.info("Dictionary search started", extra={"word": target.word})

    try:
        definitions = await dictionary.lookup(target)
    except DictionaryError as e:
        logger.info(
            "Dictionary search failed",
            extra={"word": target.word, "error_kind": e.kind.value, "error": str(e)},
        )
        raise

    logger.info(
        "Dictionary search completed",
        extra={"word": target.word, "entry_count": len(definitions)},
    )
    return definitions


class SearchController:
    """Runs searches against a session with a cancel-and-replace policy."""

    def __init__(self, dictionary: DictionaryPort, session: SearchSession | None = None):
        self.dictionary = dictionary
        self.session = session or SearchSession()
        self._task: asyncio.Task | None = None

    @property
    def in_flight(self) -> bool:
        return self._task is not None and not self._task.done()

    async def submit(self, raw_word: str) -> SearchSession:
        """Start a search, superseding any search still in flight.

        Returns the session once this search reaches a terminal state, or
        immediately after being superseded (the session then belongs to the
        newer search and is left untouched). Unexpected exceptions from the
        port return the session to IDLE and propagate.
        """
        self.cancel()
        generation = self.session.begin(raw_word)
        task = asyncio.create_task(search(self.dictionary, raw_word))
        self._task = task

        try:
            definitions = await task
        except asyncio.CancelledError:
            if self.session.is_current(generation):
                self.session.abandon()
                raise
            logger.debug("Search superseded", extra={"query": raw_word, "generation": generation})
            return self.session
        except DictionaryError as e:
            self.session.fail(generation, e)
            return self.session
        except Exception:
            if self.session.is_current(generation):
                self.session.abandon()
            raise
        finally:
            if self._task is task:
                self._task = None

        self.session.succeed(generation, definitions)
        return self.session

    def cancel(self) -> None:
        """Cancel the in-flight search, if any."""
        if self.in_flight:
            self._task.cancel()
            self.session.abandon()
