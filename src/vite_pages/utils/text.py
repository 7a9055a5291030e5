"""Line-oriented text utilities."""

import re

_INDENT_RE = re.compile(r"^[ \t]*")
_NEWLINE_RE = re.compile(r"(\r\n|\r|\n)")


def split_document(text: str) -> tuple[list[str], list[str]]:
    """Split text into lines without terminators.

    Returns a tuple of (lines, endings) where ``endings[i]`` is the
    terminator that followed ``lines[i]`` (``""`` for a final line with no
    newline). Each line keeps its own terminator, so files with mixed line
    endings reassemble byte-for-byte with :func:`join_document`.
    """
    parts = _NEWLINE_RE.split(text)
    lines = parts[0::2]
    endings = parts[1::2] + [""]
    if lines[-1] == "":
        lines.pop()
        endings.pop()
    return lines, endings


def join_document(lines: list[str], endings: list[str]) -> str:
    """Inverse of :func:`split_document`."""
    if len(lines) != len(endings):
        raise ValueError(f"{len(lines)} lines but {len(endings)} line endings")
    return "".join(line + ending for line, ending in zip(lines, endings))


def default_newline(endings: list[str]) -> str:
    """The first terminator used in a document, or ``\\n``."""
    for ending in endings:
        if ending:
            return ending
    return "\n"


def leading_whitespace(line: str) -> str:
    """Return the indentation prefix of a line."""
    match = _INDENT_RE.match(line)
    return match.group(0) if match else ""
