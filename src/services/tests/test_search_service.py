"""Tests for search() and SearchController.

Tests cover the stateless search path and the cancel-and-replace policy:
only the latest search ever reaches the session, failures keep stale
results, and cancellation is never swallowed.
"""

import asyncio
import unittest

from adapter.external.free_dictionary import build_request_target
from adapter.fake.dictionary import FakeDictionaryAdapter
from domain.model.definition import Definition
from domain.model.errors import BadStatusError, EmptyInputError, ErrorKind, TransportError
from domain.model.request_target import RequestTarget
from domain.model.search_session import SearchState
from services.search_service import SearchController, search


def _definition(word: str) -> Definition:
    return Definition.model_validate({
        "word": word,
        "phonetics": [],
        "meanings": [],
        "license": {"name": "CC BY-SA 3.0", "url": "https://creativecommons.org/licenses/by-sa/3.0"},
        "sourceUrls": [f"https://en.wiktionary.org/wiki/{word}"],
    })


class _BrokenDictionary:
    """Dictionary whose lookups fail with an unclassified error."""

    def build_target(self, raw_word: str) -> RequestTarget:
        return build_request_target(raw_word)

    async def lookup(self, target: RequestTarget) -> list[Definition]:
        raise RuntimeError("adapter bug")


async def _wait_for_lookup(fake: FakeDictionaryAdapter, word: str):
    while word not in fake.looked_up:
        await asyncio.sleep(0)


class TestSearch(unittest.IsolatedAsyncioTestCase):
    """Test the stateless search() function."""

    async def test_returns_definitions_unmodified(self):
        entries = [_definition("run"), _definition("Run")]
        fake = FakeDictionaryAdapter(definitions=entries)

        result = await search(fake, "  run ")

        self.assertEqual(result, entries)
        self.assertEqual(fake.looked_up, ["run"])

    async def test_empty_input_skips_network(self):
        """Test empty input fails before any lookup."""
        fake = FakeDictionaryAdapter(definitions=[_definition("run")])

        with self.assertRaises(EmptyInputError):
            await search(fake, "   ")

        self.assertEqual(fake.looked_up, [])

    async def test_lookup_error_propagates(self):
        fake = FakeDictionaryAdapter(error=BadStatusError(404))

        with self.assertRaises(BadStatusError):
            await search(fake, "qwxz")

    async def test_logs_outcome(self):
        fake = FakeDictionaryAdapter(definitions=[_definition("run")])

        with self.assertLogs("services.search_service", level="INFO") as logs:
            await search(fake, "run")

        self.assertTrue(any("completed" in line for line in logs.output))


class TestSearchController(unittest.IsolatedAsyncioTestCase):
    """Test SearchController state transitions and cancellation."""

    async def test_success(self):
        controller = SearchController(FakeDictionaryAdapter(definitions=[_definition("run")]))

        session = await controller.submit("run")

        self.assertEqual(session.state, SearchState.SUCCESS)
        self.assertEqual([d.word for d in session.definitions], ["run"])
        self.assertFalse(controller.in_flight)

    async def test_failure_keeps_previous_results(self):
        """Test a failed second search leaves the first results with an error."""
        fake = FakeDictionaryAdapter(responses={
            "run": [_definition("run")],
            "qwxz": BadStatusError(404),
        })
        controller = SearchController(fake)

        await controller.submit("run")
        session = await controller.submit("qwxz")

        self.assertEqual(session.state, SearchState.FAILED)
        self.assertEqual(session.error.kind, ErrorKind.BAD_STATUS)
        self.assertEqual([d.word for d in session.definitions], ["run"])

    async def test_success_clears_previous_error(self):
        fake = FakeDictionaryAdapter(responses={
            "run": [_definition("run")],
            "down": TransportError("offline"),
        })
        controller = SearchController(fake)

        await controller.submit("down")
        session = await controller.submit("run")

        self.assertIsNone(session.error)
        self.assertEqual(session.state, SearchState.SUCCESS)

    async def test_empty_input_fails_session(self):
        fake = FakeDictionaryAdapter()
        session = await SearchController(fake).submit("")

        self.assertEqual(session.state, SearchState.FAILED)
        self.assertEqual(session.user_message, "Please enter a word")
        self.assertEqual(fake.looked_up, [])

    async def test_new_search_cancels_in_flight(self):
        """Test submitting while pending cancels the older lookup."""
        fake = FakeDictionaryAdapter(
            responses={"slow": [_definition("slow")], "fast": [_definition("fast")]},
            delays={"slow": 10},
        )
        controller = SearchController(fake)

        first = asyncio.create_task(controller.submit("slow"))
        await _wait_for_lookup(fake, "slow")

        session = await controller.submit("fast")
        first_session = await first

        self.assertIs(first_session, session)
        self.assertEqual(session.state, SearchState.SUCCESS)
        self.assertEqual(session.query, "fast")
        self.assertEqual([d.word for d in session.definitions], ["fast"])
        self.assertEqual(fake.cancelled, ["slow"])

    async def test_superseded_failure_not_applied(self):
        """Test an older search's error never reaches the session."""
        fake = FakeDictionaryAdapter(
            responses={"slow": TransportError("late"), "fast": [_definition("fast")]},
            delays={"slow": 10},
        )
        controller = SearchController(fake)

        first = asyncio.create_task(controller.submit("slow"))
        await _wait_for_lookup(fake, "slow")
        await controller.submit("fast")
        session = await first

        self.assertIsNone(session.error)
        self.assertEqual([d.word for d in session.definitions], ["fast"])

    async def test_cancel_returns_to_idle(self):
        fake = FakeDictionaryAdapter(definitions=[_definition("slow")], delays={"slow": 10})
        controller = SearchController(fake)

        pending = asyncio.create_task(controller.submit("slow"))
        await _wait_for_lookup(fake, "slow")
        controller.cancel()
        session = await pending

        self.assertEqual(session.state, SearchState.IDLE)
        self.assertEqual(session.definitions, [])
        self.assertEqual(fake.cancelled, ["slow"])

    async def test_caller_cancellation_propagates(self):
        """Test cancelling the caller's task cancels the lookup and re-raises."""
        fake = FakeDictionaryAdapter(definitions=[_definition("slow")], delays={"slow": 10})
        controller = SearchController(fake)

        pending = asyncio.create_task(controller.submit("slow"))
        await _wait_for_lookup(fake, "slow")
        pending.cancel()

        with self.assertRaises(asyncio.CancelledError):
            await pending

        self.assertEqual(controller.session.state, SearchState.IDLE)
        self.assertEqual(fake.cancelled, ["slow"])

    async def test_unexpected_error_returns_to_idle(self):
        """Test an unclassified adapter error propagates and leaves no pending search."""
        controller = SearchController(_BrokenDictionary())

        with self.assertRaises(RuntimeError):
            await controller.submit("run")

        self.assertEqual(controller.session.state, SearchState.IDLE)
        self.assertFalse(controller.in_flight)
        self.assertEqual(controller.session.definitions, [])

    async def test_cancel_without_search_is_noop(self):
        controller = SearchController(FakeDictionaryAdapter())
        controller.cancel()
        self.assertEqual(controller.session.state, SearchState.IDLE)


if __name__ == '__main__':
    unittest.main()
