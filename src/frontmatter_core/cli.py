"""``frontmatter-core`` command-line entry point.

    frontmatter-core decode note.md        # frontmatter as JSON
    frontmatter-core encode data.json      # JSON object as markup
    frontmatter-core check note.md         # exit 0 if valid, 1 if not
    frontmatter-core performers note.md    # one "name<TAB>image" per line

Input is read from stdin when no path (or ``-``) is given.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import IO

from .document import Document
from .errors import FrontmatterError
from .tools import FrontmatterTools

logger = logging.getLogger(__name__)


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as fh:
        return fh.read()


def _load(tools: FrontmatterTools, text: str, raw: bool) -> Document:
    if raw:
        return tools.parse(text)
    document, _body = tools.read_note(text)
    return document


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def _cmd_decode(tools: FrontmatterTools, args: argparse.Namespace, dest: IO[str]) -> int:
    document = _load(tools, _read_input(args.path), args.raw)
    print(json.dumps(document.to_python(), indent=2, ensure_ascii=False), file=dest)
    return 0


def _cmd_encode(tools: FrontmatterTools, args: argparse.Namespace, dest: IO[str]) -> int:
    data = json.loads(_read_input(args.path))
    if not isinstance(data, dict):
        raise FrontmatterError("encode expects a JSON object")
    print(tools.stringify(data), file=dest)
    return 0


def _cmd_check(tools: FrontmatterTools, args: argparse.Namespace, dest: IO[str]) -> int:
    document = _load(tools, _read_input(args.path), args.raw)
    if tools.is_valid(document):
        print("valid", file=dest)
        return 0
    print("invalid", file=dest)
    return 1


def _cmd_performers(tools: FrontmatterTools, args: argparse.Namespace, dest: IO[str]) -> int:
    document = _load(tools, _read_input(args.path), args.raw)
    for performer in tools.get_performers(document):
        print(f"{performer.name}\t{performer.image}", file=dest)
    return 0


_COMMANDS = {
    "decode": _cmd_decode,
    "encode": _cmd_encode,
    "check": _cmd_check,
    "performers": _cmd_performers,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="frontmatter-core", description="Read and write note frontmatter.")
    parser.add_argument("-v", "--verbose", action="store_true", help="log skipped lines")
    parser.add_argument("--strict", action="store_true", help="fail on lines the decoder would skip")
    sub = parser.add_subparsers(dest="command", required=True)
    for name, help_text in (
        ("decode", "print frontmatter as JSON"),
        ("encode", "print a JSON object as frontmatter markup"),
        ("check", "exit 0 when the frontmatter is valid, 1 otherwise"),
        ("performers", "list performers as name<TAB>image"),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("path", nargs="?", default="-")
        if name != "encode":
            cmd.add_argument("--raw", action="store_true", help="input is bare frontmatter, not a fenced note")
    return parser


def main(argv: list[str] | None = None, dest: IO[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    tools = FrontmatterTools(strict=args.strict)
    try:
        return _COMMANDS[args.command](tools, args, dest or sys.stdout)
    except (OSError, ValueError, FrontmatterError) as exc:
        # json.JSONDecodeError is a ValueError
        logger.debug("command %s failed", args.command, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
