"""Block parser for response files.

Both response files share one shape: blocks of non-blank lines separated by
blank lines. The keyed variant treats the first line of a block as a
comma-separated keyword header; the default variant keeps every block whole.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List, Optional


class ParserState(Enum):
    AWAITING_HEADER = "awaiting_header"
    ACCUMULATING_BODY = "accumulating_body"


@dataclass(frozen=True)
class KeywordEntry:
    raw_key: str
    response: str


def is_blank(line: str) -> bool:
    return not line.strip()


def _chomp(line: str) -> str:
    return line.rstrip("\r\n")


def parse_keyed_entries(lines: Iterable[str]) -> Iterator[KeywordEntry]:
    """Yield one KeywordEntry per header/body block.

    A blank line closes the open block even if its body is empty; at end of
    input the open block is only emitted when it has a body.
    """
    state = ParserState.AWAITING_HEADER
    header: Optional[str] = None
    body: List[str] = []

    for raw in lines:
        line = _chomp(raw)
        if state is ParserState.AWAITING_HEADER:
            if is_blank(line):
                continue
            header = line.strip()
            state = ParserState.ACCUMULATING_BODY
        elif is_blank(line):
            yield KeywordEntry(raw_key=header, response="".join(body))
            header = None
            body = []
            state = ParserState.AWAITING_HEADER
        else:
            body.append(line + "\n")

    if header is not None and body:
        yield KeywordEntry(raw_key=header, response="".join(body))


def parse_default_entries(lines: Iterable[str]) -> Iterator[str]:
    """Yield every contiguous run of non-blank lines as one response."""
    block: List[str] = []
    for raw in lines:
        line = _chomp(raw)
        if is_blank(line):
            if block:
                yield "".join(block)
                block = []
        else:
            block.append(line + "\n")

    if block:
        yield "".join(block)
