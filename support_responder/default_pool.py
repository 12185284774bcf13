"""
Default Response Pool

This module loads the fallback responses used when no keyword matches and
selects one of them at random.

The responses file is plain UTF-8 text. Records are separated by one or
more blank lines; the lines of a record are stripped and joined with a
single newline.
"""

import random
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from .config import FALLBACK_RESPONSE
from .exceptions import (
    DefaultResponsesError,
    DefaultResponsesMissing,
    DefaultResponsesUnreadable,
)

PathLike = Union[str, Path]

# Control characters and space; other Unicode whitespace such as NBSP is content
_TRIM_CHARS = "".join(chr(c) for c in range(0x21))


def parse_records(lines: Iterable[str]) -> Iterator[str]:
    """Yield the blank-line separated records found in ``lines``."""
    current: List[str] = []
    for line in lines:
        line = line.strip(_TRIM_CHARS)
        if line:
            current.append(line)
        elif current:
            yield "\n".join(current)
            current = []
    # File may end without a blank line
    if current:
        yield "\n".join(current)


def load_default_responses(path: PathLike) -> Tuple[List[str], Optional[DefaultResponsesError]]:
    """
    Read default responses from ``path``.

    Never raises for file problems. A missing file yields no records; a
    failure part way through keeps the records completed before it.

    Returns:
        A ``(records, error)`` tuple where ``error`` is None on success
    """
    records: List[str] = []
    try:
        with open(path, "r", encoding="utf-8") as f:
            for record in parse_records(f):
                records.append(record)
    except FileNotFoundError:
        return records, DefaultResponsesMissing(path)
    except (OSError, UnicodeDecodeError) as e:
        return records, DefaultResponsesUnreadable(path, cause=e)
    return records, None


class DefaultResponsePool:
    """Non-empty, read-only sequence of fallback responses."""

    def __init__(self, responses: Sequence[str] = (), fallback: str = FALLBACK_RESPONSE,
                 rng: Optional[random.Random] = None):
        responses = tuple(responses)
        if not responses:
            responses = (fallback,)
        self._responses = responses
        self._rng = rng or random.Random()

    @classmethod
    def load(cls, path: PathLike, fallback: str = FALLBACK_RESPONSE,
             rng: Optional[random.Random] = None):
        """
        Load a pool from a responses file.

        Returns:
            A ``(pool, error)`` tuple. The pool always holds at least one
            response, the fallback when nothing could be read.
        """
        records, error = load_default_responses(path)
        return cls(records, fallback=fallback, rng=rng), error

    @property
    def responses(self) -> Tuple[str, ...]:
        return self._responses

    def pick_random(self) -> str:
        """Randomly select one of the default responses."""
        return self._rng.choice(self._responses)

    def __contains__(self, response) -> bool:
        return response in self._responses

    def __iter__(self):
        return iter(self._responses)

    def __len__(self) -> int:
        return len(self._responses)
