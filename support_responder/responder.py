"""
Response Generator

The responder is used to generate an automatic response based on a set of
input words. If any of the words is a known keyword, the corresponding
canned response is returned. Otherwise one of the default responses is
chosen at random.

Construction never fails: problems building the keyword table or loading
the default responses are logged and compensated for, so a caller always
gets a usable response.
"""

import random
from typing import Iterable, Optional

from pydantic import ValidationError

from .config import ResponderConfig
from .default_pool import DefaultResponsePool
from .keyword_table import KeywordTable
from .logging_config import get_logger

class ResponseGenerator:
    """Keyword-triggered response generator with random default responses."""

    def __init__(self, config: Optional[ResponderConfig] = None,
                 rng: Optional[random.Random] = None,
                 keyword_table: Optional[KeywordTable] = None,
                 default_pool: Optional[DefaultResponsePool] = None):
        self.logger = get_logger(__name__)
        self.config = config or self._load_config()
        self._rng = rng or random.Random()
        self.keyword_table = keyword_table if keyword_table is not None else self._build_keyword_table()
        self.default_pool = default_pool if default_pool is not None else self._load_default_pool()

    def _load_config(self) -> ResponderConfig:
        try:
            return ResponderConfig()
        except ValidationError as e:
            self.logger.error("Invalid responder configuration, using defaults", errors=e.errors())
        except Exception:
            self.logger.exception("Failed to load responder configuration, using defaults")
        return ResponderConfig.model_construct()

    def _build_keyword_table(self) -> KeywordTable:
        try:
            table, error = KeywordTable.build()
        except Exception:
            self.logger.exception("Failed to populate keyword table")
            return KeywordTable()
        if error is not None:
            self.logger.error("Keyword table is incomplete", error=str(error), keywords=len(table))
        else:
            self.logger.debug("Keyword table built", keywords=len(table))
        return table

    def _load_default_pool(self) -> DefaultResponsePool:
        path = self.config.default_responses_path
        fallback = self.config.fallback_response
        try:
            pool, error = DefaultResponsePool.load(path, fallback=fallback, rng=self._rng)
        except Exception:
            self.logger.exception("Failed to populate default responses", path=path)
            return DefaultResponsePool(fallback=fallback, rng=self._rng)
        if error is not None:
            self.logger.warning("Default responses not fully loaded", path=path,
                           error=str(error), responses=len(pool))
        else:
            self.logger.debug("Default responses loaded", path=path, responses=len(pool))
        return pool

    def generate(self, words: Optional[Iterable[str]]) -> str:
        """
        Generate a response from a given set of input words.

        The first word, in the iteration order of ``words``, that is a known
        keyword selects the response. Pass an ordered sequence to make that
        choice deterministic when several keywords are present.

        Args:
            words: Words entered by the user; None or empty is allowed

        Returns:
            A response to display to the user
        """
        for word in words or ():
            response = self.keyword_table.lookup(word)
            if response is not None:
                return response
        return self.default_pool.pick_random()
