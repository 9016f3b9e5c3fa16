"""Pydantic models for API request/response."""

from typing import Any

from pydantic import BaseModel, Field

from domain.model.errors import ErrorKind


class SearchRequest(BaseModel):
    """Request model for word search."""
    word: str = Field(..., description="Word to look up")


class SearchResponse(BaseModel):
    """Response model for word search."""
    query: str = Field(..., description="Trimmed word that was looked up")
    definitions: list[dict[str, Any]] = Field(
        ...,
        description="Entries in the dictionary's JSON shape, in the order it returned them, "
                    "with a local ``id`` on each entry and meaning for list rendering",
    )


class ErrorDetail(BaseModel):
    """Body of a failed search (under FastAPI's ``detail`` key)."""
    kind: ErrorKind
    message: str
    status_code: int | None = Field(None, description="Upstream HTTP status for bad_status errors")
