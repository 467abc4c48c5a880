"""
Responder
Keyword-matched canned replies with a random default fallback.
"""

from .config import ResponderConfig, load_config
from .generator import ResponseGenerator

__all__ = ['ResponderConfig', 'load_config', 'ResponseGenerator']
