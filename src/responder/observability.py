"""Reply log schema enforcement."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from jsonschema import Draft7Validator

REPLY_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "required": [
        "replied_at",
        "layer",
        "keyword_hit",
        "matched_word",
        "input_word_count",
    ],
    "properties": {
        "replied_at": {"type": "string", "format": "date-time"},
        "layer": {"type": "string", "enum": ["keyword", "default"]},
        "keyword_hit": {"type": ["string", "null"]},
        "matched_word": {"type": ["string", "null"]},
        "input_word_count": {"type": "integer", "minimum": 0},
    },
    "if": {"properties": {"layer": {"const": "keyword"}}},
    "then": {"properties": {"keyword_hit": {"type": "string"}, "matched_word": {"type": "string"}}},
    "else": {"properties": {"keyword_hit": {"type": "null"}, "matched_word": {"type": "null"}}},
}

_validator = Draft7Validator(REPLY_SCHEMA)


def validate_reply(payload: Dict[str, Any]) -> None:
    errors = sorted(_validator.iter_errors(payload), key=lambda e: e.path)
    if errors:
        messages = ", ".join(error.message for error in errors)
        raise ValueError(f"reply log validation failed: {messages}")


@dataclass
class ReplyLogRecord:
    layer: str
    input_word_count: int
    keyword_hit: Optional[str] = None
    matched_word: Optional[str] = None
    replied_at: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())

    def to_dict(self) -> Dict[str, Any]:
        payload = {
            "replied_at": self.replied_at,
            "layer": self.layer,
            "keyword_hit": self.keyword_hit,
            "matched_word": self.matched_word,
            "input_word_count": self.input_word_count,
        }
        validate_reply(payload)
        return payload
