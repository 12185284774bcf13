"""
Input Reader

Reads lines of user text and splits them into the set of words the
response generator works on.
"""

import sys
from typing import Optional, Set, TextIO


def split_words(text: Optional[str]) -> Set[str]:
    """Return the lowercase, whitespace separated words of ``text``."""
    return set((text or "").strip().lower().split())


class InputReader:
    """Reads user input from a text stream."""

    def __init__(self, stream: Optional[TextIO] = None, prompt: str = "> ",
                 output: Optional[TextIO] = None):
        self._stream = stream or sys.stdin
        self._output = output or sys.stdout
        self.prompt = prompt

    def get_input(self) -> Optional[Set[str]]:
        """
        Read one line and return its words.

        Returns:
            The set of words, or None when the input stream is exhausted
        """
        if self.prompt:
            self._output.write(self.prompt)
            self._output.flush()
        line = self._stream.readline()
        if not line:
            return None
        return split_words(line)
