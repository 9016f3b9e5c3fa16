"""Dictionary API routes.

Endpoints:
- POST /dictionary/search: Look up a word given in the request body
- GET /dictionary/entries/{word}: Same lookup with the word in the path
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_dictionary_port
from api.models import ErrorDetail, SearchRequest, SearchResponse
from domain.model.errors import BadStatusError, DictionaryError, ErrorKind
from port.dictionary import DictionaryPort
from services import search_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/dictionary", tags=["dictionary"])

_STATUS_BY_KIND = {
    ErrorKind.EMPTY_INPUT: 422,
    ErrorKind.MALFORMED_URL: 422,
    ErrorKind.TRANSPORT: 503,
    ErrorKind.BAD_STATUS: 502,
    ErrorKind.EMPTY_BODY: 502,
    ErrorKind.DECODE: 502,
}


def _to_http_exception(error: DictionaryError) -> HTTPException:
    """Map a lookup error to the status the client sees."""
    status_code = _STATUS_BY_KIND[error.kind]
    upstream_status = None
    if isinstance(error, BadStatusError):
        upstream_status = error.status_code
        if error.is_not_found:
            status_code = 404
    detail = ErrorDetail(kind=error.kind, message=error.user_message, status_code=upstream_status)
    return HTTPException(status_code=status_code, detail=detail.model_dump(mode="json"))


async def _search(word: str, dictionary: DictionaryPort) -> SearchResponse:
    try:
        definitions = await search_service.search(dictionary, word)
    except DictionaryError as e:
        raise _to_http_exception(e)
    return SearchResponse(
        query=word.strip(),
        definitions=[definition.to_wire(include_ids=True) for definition in definitions],
    )


@router.post("/search", response_model=SearchResponse)
async def search_word(
    request: SearchRequest,
    dictionary: DictionaryPort = Depends(get_dictionary_port),
):
    """Look up a word and return its dictionary entries.

    Errors come back as ``{"detail": {"kind", "message", "status_code"}}``:
    404 when the word is unknown, 422 for empty input, 502 when the upstream
    response is unusable and 503 when it cannot be reached.
    """
    return await _search(request.word, dictionary)


@router.get("/entries/{word}", response_model=SearchResponse)
async def get_entries(
    word: str,
    dictionary: DictionaryPort = Depends(get_dictionary_port),
):
    """Look up a word given in the path."""
    return await _search(word, dictionary)
