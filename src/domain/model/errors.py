"""Domain-level exceptions.

The dictionary adapter raises these errors to classify why a lookup failed.
Route handlers map them to HTTP status codes; the CLI maps them to exit codes.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Classification of a failed lookup."""
    EMPTY_INPUT = "empty_input"
    MALFORMED_URL = "malformed_url"
    TRANSPORT = "transport"
    BAD_STATUS = "bad_status"
    EMPTY_BODY = "empty_body"
    DECODE = "decode"


class DictionaryError(Exception):
    """Base class for all lookup errors."""

    kind: ErrorKind

    @property
    def user_message(self) -> str:
        """Human-readable message for display."""
        return str(self)


class EmptyInputError(DictionaryError):
    """Search word is empty or whitespace only."""

    kind = ErrorKind.EMPTY_INPUT

    def __init__(self):
        super().__init__("Please enter a word")


class MalformedURLError(DictionaryError):
    """Request URL could not be composed."""

    kind = ErrorKind.MALFORMED_URL

    def __init__(self, url: str | None = None):
        self.url = url
        super().__init__("Invalid API URL")


class TransportError(DictionaryError):
    """Connection, DNS, TLS or timeout failure."""

    kind = ErrorKind.TRANSPORT

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Error: {message}")


class BadStatusError(DictionaryError):
    """Dictionary service answered with a status other than 200."""

    kind = ErrorKind.BAD_STATUS

    def __init__(self, status_code: int):
        self.status_code = status_code
        if status_code == 404:
            message = "No definitions found"
        else:
            message = f"Bad server response (HTTP {status_code})"
        super().__init__(message)

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404


class EmptyBodyError(DictionaryError):
    """200 response without a body."""

    kind = ErrorKind.EMPTY_BODY

    def __init__(self):
        super().__init__("No data received")


class DecodeError(DictionaryError):
    """Response body does not match the entry schema."""

    kind = ErrorKind.DECODE

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Failed to decode data: {message}")
