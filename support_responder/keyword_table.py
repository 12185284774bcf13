"""
Keyword Table

Static association of single trigger words with canned support responses.
"""

from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional, Tuple

from .exceptions import KeywordTableError

_CRASH = ("Well, it never crashes on our system. It must have something\n"
          "to do with your system. Tell me more about your configuration.")
_BUG = ("Well, you know, all software has some bugs. But our software engineers\n"
        "are working very hard to fix them. Can you describe the problem a bit\n"
        "further?")

KEYWORD_RESPONSES: Tuple[Tuple[str, str], ...] = (
    ("crash", _CRASH),
    ("crashes", _CRASH),
    ("slow",
     "I think this has to do with your hardware. Upgrading your processor\n"
     "should solve all performance problems. Have you got a problem with\n"
     "our software?"),
    ("performance",
     "Performance was quite adequate in all our tests. Are you running\n"
     "any other processes in the background?"),
    ("bug", _BUG),
    ("buggy", _BUG),
    ("windows",
     "This is a known bug to do with the Windows operating system. Please\n"
     "report it to Microsoft. There is nothing we can do about this."),
    ("macintosh",
     "This is a known bug to do with the Mac operating system. Please\n"
     "report it to Apple. There is nothing we can do about this."),
    ("expensive",
     "The cost of our product is quite competitive. Have you looked around\n"
     "and really compared our features?"),
    ("installation",
     "The installation is really quite straight forward. We have tons of\n"
     "wizards that do all the work for you. Have you read the installation\n"
     "instructions?"),
    ("memory",
     "If you read the system requirements carefully, you will see that the\n"
     "specified memory requirements are 1.5 giga byte. You really should\n"
     "upgrade your memory. Anything else you want to know?"),
    ("linux",
     "We take Linux support very seriously. But there are some problems.\n"
     "Most have to do with incompatible glibc versions. Can you be a bit\n"
     "more precise?"),
    ("bluej",
     "Ahhh, BlueJ, yes. We tried to buy out those guys long ago, but\n"
     "they simply won't sell... Stubborn people they are. Nothing we can\n"
     "do about it, I'm afraid."),
)


class KeywordTable:
    """Read-only mapping of trigger words to responses."""

    def __init__(self, entries: Optional[Mapping[str, str]] = None):
        self._responses = MappingProxyType(dict(entries or {}))

    @classmethod
    def build(cls, pairs: Iterable[Tuple[str, str]] = KEYWORD_RESPONSES):
        """
        Build a table from (word, response) pairs.

        A repeated word replaces the earlier entry.

        Returns:
            A ``(table, error)`` tuple. ``error`` is ``None`` on success;
            otherwise it is a KeywordTableError and ``table`` holds the
            entries added before the failure.
        """
        entries = {}
        try:
            for word, response in pairs:
                entries[word] = response
        except Exception as e:
            error = KeywordTableError(f"Failed to populate keyword table: {e}")
            error.__cause__ = e
            return cls(entries), error
        return cls(entries), None

    def lookup(self, word: str) -> Optional[str]:
        """Return the response for ``word`` or None if it is not a trigger word."""
        return self._responses.get(word)

    def words(self) -> List[str]:
        return sorted(self._responses)

    def __contains__(self, word) -> bool:
        return word in self._responses

    def __len__(self) -> int:
        return len(self._responses)

    def __repr__(self):
        return f"KeywordTable({len(self)} keywords)"
