"""Load keyword and default response tables from text files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Dict, Iterable, Iterator, List, TypeVar, Union

from .parser import KeywordEntry, parse_default_entries, parse_keyed_entries

logger = logging.getLogger(__name__)

FALLBACK_RESPONSE = "Could you elaborate on that?"

T = TypeVar("T")


def _stream(
    path: Path,
    encoding: str,
    parse: Callable[[Iterable[str]], Iterator[T]],
) -> Iterator[T]:
    """Yield parsed entries from ``path``, logging instead of raising on I/O errors.

    Entries already yielded stay with the caller when reading fails part way;
    the block being accumulated at that point is dropped.
    """
    try:
        with path.open("r", encoding=encoding) as handle:
            yield from parse(handle)
    except FileNotFoundError:
        logger.error("Unable to open %s", path)
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("A problem was encountered reading %s: %s", path, exc)


def load_keyword_table(path: Union[str, Path], encoding: str = "ascii") -> Dict[str, str]:
    path = Path(path)
    table: Dict[str, str] = {}
    entry: KeywordEntry
    for entry in _stream(path, encoding, parse_keyed_entries):
        table[entry.raw_key] = entry.response
    logger.info("Loaded %d keyword responses from %s", len(table), path)
    return table


def load_default_responses(
    path: Union[str, Path],
    encoding: str = "ascii",
    fallback: str = FALLBACK_RESPONSE,
) -> List[str]:
    path = Path(path)
    responses: List[str] = list(_stream(path, encoding, parse_default_entries))
    if not responses:
        responses.append(fallback)
    logger.info("Loaded %d default responses from %s", len(responses), path)
    return responses
