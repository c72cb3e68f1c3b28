"""Split a command into program + argument tokens."""

from collections.abc import Sequence

from shellproc.errors import ArgumentError
from shellproc.osinfo import OSKind

QUOTES = ('"', "'")
BACKTICK = "`"


def _closes(token: str, char: str, opener: bool) -> bool:
    if opener:
        return len(token) > 1 and token.endswith(char)
    return token.endswith(char)


def group_tokens(tokens: Sequence[str]) -> list[str]:
    """Merge quote and backtick spans into single tokens.

    A token starting with " or ' absorbs following tokens until one ends with
    the same character; the merged token loses its outer quotes. Backtick
    spans are merged the same way but keep their backticks.
    """
    grouped = []
    i = 0
    while i < len(tokens):
        token = tokens[i]
        char = token[0]
        if char not in QUOTES and char != BACKTICK:
            grouped.append(token)
            i += 1
            continue

        span = [token]
        closed = _closes(token, char, opener=True)
        i += 1
        while not closed and i < len(tokens):
            span.append(tokens[i])
            closed = _closes(tokens[i], char, opener=False)
            i += 1
        if not closed:
            raise ArgumentError(f"unterminated quoted argument: {' '.join(span)}")

        merged = " ".join(span)
        if char in QUOTES:
            merged = merged[1:-1]
        if not merged:
            raise ArgumentError(f"Empty argument: {' '.join(span)}")
        grouped.append(merged)
    return grouped


def split_command(command: str) -> list[str]:
    """Split a free-form command string on whitespace and group quoted spans."""
    return group_tokens([t.strip() for t in command.split() if t.strip()])


def normalize_program(name: str, os_kind: OSKind) -> str:
    """Drop a trailing .exe on Windows; it is added back at lookup time."""
    if os_kind is OSKind.WINDOWS and name.lower().endswith(".exe") and len(name) > 4:
        return name[:-4]
    return name


def parse(command: str | Sequence[str], os_kind: OSKind) -> tuple[str, list[str]]:
    """Return (program, arguments).

    A string is tokenized; a sequence is taken as already split, one element
    per argument.
    """
    if isinstance(command, str):
        tokens = split_command(command)
    else:
        tokens = [str(t) for t in command]
    if not tokens or not tokens[0]:
        raise ArgumentError("No program specified")
    if any(t == "" for t in tokens[1:]):
        raise ArgumentError("Empty argument")
    return normalize_program(tokens[0], os_kind), tokens[1:]
