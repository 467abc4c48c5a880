"""Response generator: keyword lookup with random default fallback."""

from __future__ import annotations

import logging
from typing import Iterable, Mapping, Optional, Sequence, Tuple

from .config import ResponderConfig
from .keywords import KeywordTable
from .loader import load_default_responses, load_keyword_table
from .observability import ReplyLogRecord
from .picker import DefaultResponsePicker, RandomSource

logger = logging.getLogger(__name__)


class ResponseGenerator:
    """
    Generates an automatic reply for a set of input words.

    Both tables are loaded once at construction and never change afterwards.
    If any input word is a keyword, the matching response is returned;
    otherwise one of the default responses is chosen at random.

    Words are tried in the iteration order of the collection passed in. With a
    ``set`` that order is arbitrary, so when several words hit different
    entries the entry returned may vary between runs. Whether the reply is a
    keyword or a default response does not depend on that order.
    """

    def __init__(
        self,
        config: Optional[ResponderConfig] = None,
        rng: Optional[RandomSource] = None,
    ) -> None:
        self.config = config or ResponderConfig()
        keyed = load_keyword_table(self.config.responses_path, self.config.encoding)
        defaults = load_default_responses(
            self.config.default_responses_path,
            self.config.encoding,
            self.config.fallback_response,
        )
        self._init_tables(keyed, defaults, rng)

    @classmethod
    def from_tables(
        cls,
        keyed: Mapping[str, str],
        defaults: Sequence[str],
        rng: Optional[RandomSource] = None,
    ) -> "ResponseGenerator":
        """Build a generator from in-memory tables, skipping file loads."""
        generator = cls.__new__(cls)
        generator.config = ResponderConfig()
        generator._init_tables(keyed, list(defaults) or [generator.config.fallback_response], rng)
        return generator

    def _init_tables(
        self,
        keyed: Mapping[str, str],
        defaults: Sequence[str],
        rng: Optional[RandomSource],
    ) -> None:
        self._keywords = KeywordTable(keyed)
        self._picker = DefaultResponsePicker(defaults, rng)

    @property
    def keyword_count(self) -> int:
        return len(self._keywords)

    @property
    def default_responses(self) -> Tuple[str, ...]:
        return self._picker.responses

    def generate_response(self, words: Iterable[str]) -> str:
        words = list(words)
        for word in words:
            entry = self._keywords.match(word)
            if entry is not None:
                self._log_reply("keyword", len(words), entry.raw_key, word)
                return entry.response

        self._log_reply("default", len(words))
        return self.pick_default_response()

    def pick_default_response(self) -> str:
        return self._picker.pick()

    def _log_reply(
        self,
        layer: str,
        word_count: int,
        keyword_hit: Optional[str] = None,
        matched_word: Optional[str] = None,
    ) -> None:
        if not logger.isEnabledFor(logging.DEBUG):
            return
        record = ReplyLogRecord(
            layer=layer,
            input_word_count=word_count,
            keyword_hit=keyword_hit,
            matched_word=matched_word,
        )
        logger.debug("reply %s", record.to_dict())
