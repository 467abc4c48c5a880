"""Configuration loader for the responder."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

import yaml

from .loader import FALLBACK_RESPONSE


@dataclass(frozen=True)
class ResponderConfig:
    responses_path: Path = Path("responses.txt")
    default_responses_path: Path = Path("default.txt")
    encoding: str = "ascii"
    fallback_response: str = FALLBACK_RESPONSE

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ResponderConfig":
        files = data.get("files", {})
        return cls(
            responses_path=Path(files.get("responses", "responses.txt")),
            default_responses_path=Path(files.get("default_responses", "default.txt")),
            encoding=data.get("encoding", "ascii"),
            fallback_response=data.get("fallback_response", FALLBACK_RESPONSE),
        )


ENV_MAP = {
    "files.responses": "RESPONDER_RESPONSES_PATH",
    "files.default_responses": "RESPONDER_DEFAULT_RESPONSES_PATH",
    "encoding": "RESPONDER_ENCODING",
    "fallback_response": "RESPONDER_FALLBACK_RESPONSE",
}


def load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def merge_env_overrides(config_data: Dict[str, Any]) -> Dict[str, Any]:
    merged = json.loads(json.dumps(config_data))  # deep copy via json

    for dotted_key, env_name in ENV_MAP.items():
        if env_name not in os.environ:
            continue
        target = merged
        parts = dotted_key.split(".")
        for part in parts[:-1]:
            target = target.setdefault(part, {})
        target[parts[-1]] = os.environ[env_name]

    return merged


def load_config(config_path: str | Path = "config/responder.defaults.yml") -> ResponderConfig:
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    data = load_yaml(path)
    data = merge_env_overrides(data)
    return ResponderConfig.from_dict(data)
