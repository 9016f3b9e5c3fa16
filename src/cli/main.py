"""Command line entry point.

Usage:
    dictionary-lookup run
    dictionary-lookup --json hot dog
    dictionary-lookup --interactive
"""

import argparse
import asyncio
import json
import sys
from typing import Iterable, TextIO

from dotenv import load_dotenv

from adapter.external.free_dictionary import FreeDictionaryAdapter
from cli.render import render_definitions, render_session
from domain.model.errors import DictionaryError
from port.dictionary import DictionaryPort
from services.search_service import SearchController, search
from utils.logging import setup_structured_logging

EXIT_OK = 0
EXIT_LOOKUP_FAILED = 1

PROMPT = "word> "


async def lookup_once(dictionary: DictionaryPort, word: str, as_json: bool, out: TextIO, err: TextIO) -> int:
    """Look up one word and print it. Returns the process exit code."""
    try:
        definitions = await search(dictionary, word)
    except DictionaryError as e:
        print(e.user_message, file=err)
        return EXIT_LOOKUP_FAILED

    if as_json:
        print(json.dumps([d.to_wire() for d in definitions], indent=2, ensure_ascii=False), file=out)
    else:
        print(render_definitions(definitions), file=out)
    return EXIT_OK


async def run_interactive(dictionary: DictionaryPort, lines: Iterable[str], out: TextIO) -> int:
    """Search for each input line until EOF or ``:q``.

    A failed search prints its error banner above the results of the last
    successful one, which stay on screen.
    """
    controller = SearchController(dictionary)
    print(PROMPT, end="", file=out, flush=True)
    for line in lines:
        word = line.rstrip("\n")
        if word.strip() == ":q":
            break
        session = await controller.submit(word)
        if session.is_terminal:
            print(render_session(session), file=out)
        print(PROMPT, end="", file=out, flush=True)
    print(file=out)
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    load_dotenv()

    parser = argparse.ArgumentParser(description="Look up English words in the Free Dictionary API")
    parser.add_argument("word", nargs="*", help="Word or phrase to look up")
    parser.add_argument("--json", action="store_true", help="Print entries as JSON")
    parser.add_argument("--interactive", "-i", action="store_true", help="Read one word per line from stdin")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log debug output to stderr")
    args = parser.parse_args(argv)

    setup_structured_logging(level="DEBUG" if args.verbose else "WARNING")

    if not args.interactive and not args.word:
        parser.error("a word is required unless --interactive is given")

    dictionary = FreeDictionaryAdapter()
    if args.interactive:
        return asyncio.run(run_interactive(dictionary, sys.stdin, sys.stdout))
    return asyncio.run(lookup_once(dictionary, " ".join(args.word), args.json, sys.stdout, sys.stderr))


if __name__ == "__main__":
    sys.exit(main())
