"""Line-oriented removal of SQL comments from loaded query text."""

from __future__ import annotations

import os
from typing import Iterable, Iterator

LINE_COMMENT = "--"
BLOCK_OPEN = "/*"
BLOCK_CLOSE = "*/"


def _leaves_block_open(line: str) -> bool:
    """Check whether ``line`` ends inside a ``/* ... */`` comment.

    Comment markers inside single-quoted literals are ignored, and a ``--``
    outside of a literal ends the scan.
    """

    in_string = False
    in_block = False
    index = 0
    while index < len(line):
        pair = line[index : index + 2]
        if in_block:
            if pair == BLOCK_CLOSE:
                in_block = False
                index += 2
                continue
        elif in_string:
            if line[index] == "'":
                in_string = False
        elif line[index] == "'":
            in_string = True
        elif pair == LINE_COMMENT:
            return False
        elif pair == BLOCK_OPEN:
            in_block = True
            index += 2
            continue
        index += 1
    return in_block


def strip_comments(lines: Iterable[str]) -> Iterator[str]:
    """Yield the lines of a SQL script that are not comments.

    Empty lines, ``--`` comment lines and every line of a block comment that
    starts a line are dropped. Text following a closing ``*/`` is kept.
    Everything else is yielded verbatim, without its line terminator.
    """

    in_block = False
    for raw in lines:
        line = raw.rstrip("\r\n")

        if in_block:
            end = line.find(BLOCK_CLOSE)
            if end < 0:
                continue
            in_block = False
            line = line[end + len(BLOCK_CLOSE) :].lstrip()

        while line.lstrip().startswith(BLOCK_OPEN):
            stripped = line.lstrip()
            end = stripped.find(BLOCK_CLOSE, len(BLOCK_OPEN))
            if end < 0:
                in_block = True
                line = ""
                break
            line = stripped[end + len(BLOCK_CLOSE) :].lstrip()

        if not line or line.lstrip().startswith(LINE_COMMENT):
            continue

        if _leaves_block_open(line):
            in_block = True
        yield line


def clean_sql(text: str, line_separator: str = os.linesep) -> str:
    return line_separator.join(strip_comments(text.splitlines()))


__all__ = ["clean_sql", "strip_comments"]
