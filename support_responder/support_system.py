"""
Support System

A console technical-support session: prints a greeting, answers each line
the user types with a generated response, and stops on the exit word.
"""

import sys
from typing import Optional, TextIO

from .input_reader import InputReader
from .logging_config import get_logger
from .responder import ResponseGenerator

class SupportSystem:
    """Runs a conversation between the user and a ResponseGenerator."""

    def __init__(self, responder: Optional[ResponseGenerator] = None,
                 reader: Optional[InputReader] = None,
                 output: Optional[TextIO] = None):
        self.logger = get_logger(__name__)
        self.responder = responder or ResponseGenerator()
        self.output = output or sys.stdout
        self.reader = reader or InputReader(output=self.output)
        self.config = self.responder.config

    def start(self) -> int:
        """
        Run the session until the user types the exit word or input ends.

        Returns:
            Number of responses given
        """
        self._print(self.config.greeting)
        turns = 0
        while True:
            words = self.reader.get_input()
            if words is None or self.config.exit_word in words:
                break
            self._print(self.responder.generate(words))
            turns += 1
        self._print(self.config.farewell)
        self.logger.info("Support session finished", turns=turns)
        return turns

    def _print(self, text: str):
        self.output.write(text + "\n")
        self.output.flush()
