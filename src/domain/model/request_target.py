"""Request target value object."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RequestTarget:
    """Validated lookup request: the trimmed word and the URL to fetch."""
    word: str
    url: str
