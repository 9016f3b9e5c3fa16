"""Plain-text rendering of dictionary entries."""

from domain.model.definition import Definition, Meaning
from domain.model.search_session import SearchSession

INDENT = "   "


def render_meaning(meaning: Meaning) -> list[str]:
    """Part of speech, numbered senses with examples, then synonyms/antonyms.

    Sense-level synonyms and antonyms are shown under their sense; the
    meaning-level lists are shown once after all senses.
    """
    lines = [meaning.part_of_speech]
    for number, item in enumerate(meaning.definitions, start=1):
        lines.append(f"{number}. {item.definition}")
        if item.example:
            lines.append(f'{INDENT}"{item.example}"')
        if item.synonyms:
            lines.append(f"{INDENT}Synonyms: {', '.join(item.synonyms)}")
        if item.antonyms:
            lines.append(f"{INDENT}Antonyms: {', '.join(item.antonyms)}")
    if meaning.synonyms:
        lines.append("Synonyms: " + ", ".join(f"• {synonym}" for synonym in meaning.synonyms))
    if meaning.antonyms:
        lines.append(f"Antonyms: {', '.join(meaning.antonyms)}")
    return lines


def render_definition(definition: Definition) -> str:
    lines = [definition.word]
    transcriptions = [phonetic.text for phonetic in definition.phonetics if phonetic.text]
    if transcriptions:
        lines.append("  ".join(transcriptions))
    for meaning in definition.meanings:
        lines.append("")
        lines.extend(render_meaning(meaning))
    if definition.source_urls:
        lines.append("")
        lines.append(f"Source: {', '.join(definition.source_urls)}")
    lines.append(f"License: {definition.license.name} ({definition.license.url})")
    return "\n".join(lines)


def render_definitions(definitions: list[Definition]) -> str:
    return "\n\n".join(render_definition(definition) for definition in definitions)


def render_session(session: SearchSession) -> str:
    """Error banner (if any) above the current definitions.

    After a failed search the definitions are those of the last successful
    one.
    """
    parts = []
    if session.user_message:
        parts.append(f"! {session.user_message}")
    if session.definitions:
        parts.append(render_definitions(session.definitions))
    return "\n\n".join(parts)
