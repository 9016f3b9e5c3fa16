"""Dictionary entry models.

Mirrors the JSON returned by the Free Dictionary API
(https://dictionaryapi.dev). Field names follow Python conventions; the
camelCase wire names are aliases, and only the aliases are accepted when
validating, so a body using the Python names is a schema mismatch.
"""

import uuid
from collections.abc import Iterator

from pydantic import BaseModel, Field, HttpUrl, PrivateAttr, TypeAdapter, ValidationError

from domain.model.errors import DecodeError


class Phonetic(BaseModel):
    """Pronunciation transcription with an optional audio URL."""
    text: str
    audio: str | None = None


class DefinitionItem(BaseModel):
    """A single sense of a meaning."""
    definition: str
    synonyms: list[str]
    antonyms: list[str]
    example: str | None = None


class Meaning(BaseModel):
    """Senses grouped under one part of speech."""
    part_of_speech: str = Field(..., alias="partOfSpeech")
    definitions: list[DefinitionItem]
    synonyms: list[str]
    antonyms: list[str]

    _id: uuid.UUID = PrivateAttr(default_factory=uuid.uuid4)

    @property
    def id(self) -> uuid.UUID:
        """Local list identity, generated on decode. Not persisted."""
        return self._id

    def all_synonyms(self) -> list[str]:
        """Meaning-level synonyms followed by any new ones from its senses."""
        return _ordered_union(self.synonyms, *(item.synonyms for item in self.definitions))

    def all_antonyms(self) -> list[str]:
        """Meaning-level antonyms followed by any new ones from its senses."""
        return _ordered_union(self.antonyms, *(item.antonyms for item in self.definitions))


class License(BaseModel):
    name: str
    url: HttpUrl


class Definition(BaseModel):
    """One dictionary entry for a headword.

    ``id`` is generated on every decode so list renderers can tell entries
    apart. It is never read from or sent over the wire and carries no
    meaning across fetches.
    """
    word: str
    phonetics: list[Phonetic]
    meanings: list[Meaning]
    license: License
    source_urls: list[str] = Field(..., alias="sourceUrls")

    _id: uuid.UUID = PrivateAttr(default_factory=uuid.uuid4)

    @property
    def id(self) -> uuid.UUID:
        return self._id

    def definition_items(self) -> Iterator[DefinitionItem]:
        """Yield every sense across all meanings, in source order."""
        for meaning in self.meanings:
            yield from meaning.definitions

    def to_wire(self, include_ids: bool = False) -> dict:
        """Dump to the service's JSON shape.

        With ``include_ids`` the local identifiers are added as ``id`` on the
        entry and on each meaning, for list rendering by a presenter.
        """
        data = self.model_dump(mode="json", by_alias=True)
        if include_ids:
            data["id"] = str(self.id)
            for meaning, dumped in zip(self.meanings, data["meanings"]):
                dumped["id"] = str(meaning.id)
        return data


_definitions_adapter = TypeAdapter(list[Definition])


def decode_definitions(payload: bytes | str) -> list[Definition]:
    """Decode a JSON array of entries.

    Raises:
        DecodeError: Body is not valid JSON or does not match the schema.
            Nothing is returned on failure, so callers never see a
            partially populated entry.
    """
    try:
        return _definitions_adapter.validate_json(payload)
    except ValidationError as e:
        raise DecodeError(_summarize(e)) from e


def _summarize(error: ValidationError) -> str:
    """Compress pydantic's error list into one line."""
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "body"
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)


def _ordered_union(*groups: list[str]) -> list[str]:
    seen: set[str] = set()
    result: list[str] = []
    for group in groups:
        for value in group:
            if value not in seen:
                seen.add(value)
                result.append(value)
    return result
