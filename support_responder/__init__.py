"""
Support Responder

Keyword-triggered canned responses for a technical-support console.
"""

from .config import ResponderConfig, load_config
from .default_pool import DefaultResponsePool, load_default_responses, parse_records
from .exceptions import (
    DefaultResponsesError,
    DefaultResponsesMissing,
    DefaultResponsesUnreadable,
    KeywordTableError,
    ResponderError,
)
from .input_reader import InputReader, split_words
from .keyword_table import KeywordTable
from .responder import ResponseGenerator
from .support_system import SupportSystem

__version__ = "1.0.0"

__all__ = [
    "DefaultResponsePool",
    "DefaultResponsesError",
    "DefaultResponsesMissing",
    "DefaultResponsesUnreadable",
    "InputReader",
    "KeywordTable",
    "KeywordTableError",
    "ResponderConfig",
    "ResponderError",
    "ResponseGenerator",
    "SupportSystem",
    "load_config",
    "load_default_responses",
    "parse_records",
    "split_words",
]
