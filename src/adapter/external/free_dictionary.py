"""Free Dictionary API adapter.

Implements DictionaryPort against the public English dictionary endpoint.
One GET per lookup, no retries. Failures are raised as DictionaryError
subclasses so callers can tell "word not found" from a network outage.

API Documentation: https://dictionaryapi.dev
"""

import logging
import os
from urllib.parse import quote

import httpx

from domain.model.definition import Definition, decode_definitions
from domain.model.errors import (
    BadStatusError,
    DecodeError,
    EmptyBodyError,
    EmptyInputError,
    MalformedURLError,
    TransportError,
)
from domain.model.request_target import RequestTarget

logger = logging.getLogger(__name__)

FREE_DICTIONARY_API_BASE_URL = "https://api.dictionaryapi.dev/api/v2/entries/en"


# ── Query building ───────────────────────────────────────────


def build_request_target(raw_word: str, base_url: str = FREE_DICTIONARY_API_BASE_URL) -> RequestTarget:
    """Validate a user-entered word and compose its lookup URL.

    Args:
        raw_word: Word as typed by the user.
        base_url: Endpoint the encoded word is appended to.

    Returns:
        RequestTarget with the trimmed word and the full URL.

    Raises:
        EmptyInputError: Word is empty after trimming.
        MalformedURLError: Word cannot be encoded or the URL is not absolute.
    """
    word = (raw_word or "").strip()
    if not word:
        raise EmptyInputError()

    try:
        encoded = quote(word, safe="")
    except UnicodeEncodeError as e:
        raise MalformedURLError() from e

    url = f"{base_url.rstrip('/')}/{encoded}"
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as e:
        raise MalformedURLError(url) from e
    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise MalformedURLError(url)

    return RequestTarget(word=word, url=url)


# ── Adapter ──────────────────────────────────────────────────


class FreeDictionaryAdapter:
    """Adapter that fetches English entries from the Free Dictionary API."""

    def __init__(self, base_url: str | None = None, timeout: float | None = None):
        self.base_url = base_url or os.getenv("DICTIONARY_API_BASE_URL", FREE_DICTIONARY_API_BASE_URL)
        if timeout is None and os.getenv("DICTIONARY_API_TIMEOUT_SECONDS"):
            timeout = float(os.environ["DICTIONARY_API_TIMEOUT_SECONDS"])
        self.timeout = timeout

    def build_target(self, raw_word: str) -> RequestTarget:
        return build_request_target(raw_word, self.base_url)

    async def lookup(self, target: RequestTarget) -> list[Definition]:
        """Fetch and decode entries for a built target.

        Args:
            target: Output of build_target().

        Returns:
            Decoded entries in the order the service returned them.

        Raises:
            TransportError: The request never produced a response.
            BadStatusError: Status other than 200 (404 for unknown words).
            EmptyBodyError: 200 without a body.
            DecodeError: Body does not match the entry schema.
        """
        client_kwargs = {"timeout": self.timeout} if self.timeout is not None else {}
        try:
            async with httpx.AsyncClient(**client_kwargs) as client:
                response = await client.get(target.url)
        except httpx.RequestError as e:
            logger.warning(
                "Free Dictionary API request error",
                extra={"word": target.word, "error_type": type(e).__name__},
            )
            raise TransportError(str(e) or type(e).__name__) from e

        if response.status_code != 200:
            log = logger.debug if response.status_code == 404 else logger.warning
            log(
                "Free Dictionary API returned non-200 status",
                extra={"word": target.word, "status_code": response.status_code},
            )
            raise BadStatusError(response.status_code)

        if not response.content:
            logger.warning("Free Dictionary API returned empty body", extra={"word": target.word})
            raise EmptyBodyError()

        try:
            definitions = decode_definitions(response.content)
        except DecodeError as e:
            logger.warning(
                "Failed to decode Free Dictionary API response",
                extra={"word": target.word, "error": e.message},
            )
            raise

        logger.debug(
            "Free Dictionary API lookup successful",
            extra={"word": target.word, "entry_count": len(definitions)},
        )
        return definitions
