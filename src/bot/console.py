#!/usr/bin/env python3
"""
Responder console

Reads lines from the terminal, splits them into a word set and prints the
generator's reply. Type "bye" to leave.

Usage:
  RESPONDER_CONFIG=config/responder.defaults.yml python -m bot.console
"""

import logging
import os
from pathlib import Path
from typing import Callable, Set

from responder import ResponderConfig, ResponseGenerator, load_config

logger = logging.getLogger(__name__)

GREETING = (
    "Welcome to the technical support system.\n"
    "Please tell us about your problem.\n"
    'We will assist you with any problem you might have.\n'
    'Please type "bye" to exit our system.'
)
FAREWELL = "Nice talking to you. Bye..."


def tokenize(line: str) -> Set[str]:
    """Split an input line into a set of lower-cased words."""
    return set(line.strip().lower().split())


def run(
    generator: ResponseGenerator,
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print,
) -> None:
    """Reply to each line until the user types "bye" or input ends."""
    output_fn(GREETING)
    while True:
        try:
            line = input_fn("> ")
        except EOFError:
            break
        words = tokenize(line)
        if "bye" in words:
            break
        output_fn(generator.generate_response(words))
    output_fn(FAREWELL)


def build_generator() -> ResponseGenerator:
    config_path = Path(os.environ.get("RESPONDER_CONFIG", "config/responder.defaults.yml"))
    if config_path.exists():
        config = load_config(config_path)
    else:
        logger.warning("Config %s not found, using built-in defaults", config_path)
        config = ResponderConfig()
    return ResponseGenerator(config)


def main():
    """Start the console."""
    logging.basicConfig(
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        level=os.environ.get("RESPONDER_LOG_LEVEL", "WARNING"),
    )
    generator = build_generator()
    logger.info(
        "Loaded %d keyword entries, %d default responses",
        generator.keyword_count, len(generator.default_responses),
    )
    run(generator)


if __name__ == "__main__":
    main()
