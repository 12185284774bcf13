"""
Tests for loading and sampling default responses.
"""

import io
import random
from unittest.mock import patch

import pytest

from support_responder.config import FALLBACK_RESPONSE
from support_responder.default_pool import (
    DefaultResponsePool,
    load_default_responses,
    parse_records,
)
from support_responder.exceptions import (
    DefaultResponsesMissing,
    DefaultResponsesUnreadable,
)


class TestParseRecords:
    """Test splitting text into blank-line separated records."""

    def test_two_records(self):
        assert list(parse_records(io.StringIO("a\nb\n\nc\n"))) == ["a\nb", "c"]

    def test_no_separator_single_record(self):
        assert list(parse_records(io.StringIO("x\ny\nz"))) == ["x\ny\nz"]

    def test_lines_are_trimmed(self):
        text = "   first line  \n\tsecond\t\n"
        assert list(parse_records(io.StringIO(text))) == ["first line\nsecond"]

    def test_multiple_and_whitespace_blank_lines(self):
        text = "\n\none\n\n   \n\t\ntwo\n\n\n"
        assert list(parse_records(io.StringIO(text))) == ["one", "two"]

    def test_empty_input(self):
        assert list(parse_records(io.StringIO(""))) == []

    def test_non_breaking_space_is_content(self):
        text = "a\n\u00a0\nb\n\n\x0b\t\nc\n"
        assert list(parse_records(io.StringIO(text))) == ["a\n\u00a0\nb", "c"]

    def test_windows_line_endings(self):
        assert list(parse_records(["a\r\n", "\r\n", "b\r\n"])) == ["a", "b"]


class TestLoadDefaultResponses:
    """Test reading the default responses file."""

    def test_load_file(self, write_responses):
        path = write_responses("Tell me more.\n\nHave you read the\nmanual?\n")
        records, error = load_default_responses(path)
        assert error is None
        assert records == ["Tell me more.", "Have you read the\nmanual?"]

    def test_load_utf8(self, write_responses):
        path = write_responses("Très intéressant…\n")
        records, error = load_default_responses(path)
        assert error is None
        assert records == ["Très intéressant…"]

    def test_missing_file(self, tmp_path):
        path = tmp_path / "missing.txt"
        records, error = load_default_responses(path)
        assert records == []
        assert isinstance(error, DefaultResponsesMissing)
        assert error.path == str(path)

    def test_directory_is_unreadable(self, tmp_path):
        records, error = load_default_responses(tmp_path)
        assert records == []
        assert isinstance(error, DefaultResponsesUnreadable)

    def test_invalid_utf8_is_unreadable(self, tmp_path):
        path = tmp_path / "default.txt"
        path.write_bytes(b"\xff\xfe\xfa broken\n")
        records, error = load_default_responses(path)
        assert records == []
        assert isinstance(error, DefaultResponsesUnreadable)
        assert isinstance(error.cause, UnicodeDecodeError)

    def test_read_error_keeps_completed_records(self, tmp_path):
        """Test that records finished before an I/O error are kept."""
        class FailingFile:
            def __init__(self):
                self._lines = iter(["one\n", "\n", "two\n", "\n", "three\n"])

            def __enter__(self):
                return self

            def __exit__(self, *exc):
                return False

            def __iter__(self):
                return self

            def __next__(self):
                line = next(self._lines)
                if line == "three\n":
                    raise OSError("disk went away")
                return line

        with patch("builtins.open", return_value=FailingFile()):
            records, error = load_default_responses(tmp_path / "default.txt")

        assert records == ["one", "two"]
        assert isinstance(error, DefaultResponsesUnreadable)
        assert "disk went away" in str(error.cause)


class TestDefaultResponsePool:
    """Test the default response pool."""

    def test_empty_pool_gets_fallback(self):
        pool = DefaultResponsePool()
        assert pool.responses == (FALLBACK_RESPONSE,)

    def test_custom_fallback(self):
        pool = DefaultResponsePool([], fallback="Say again?")
        assert list(pool) == ["Say again?"]

    def test_fallback_not_added_when_loaded(self):
        pool = DefaultResponsePool(["a", "b"])
        assert pool.responses == ("a", "b")
        assert FALLBACK_RESPONSE not in pool

    def test_load_missing_file(self, tmp_path):
        pool, error = DefaultResponsePool.load(tmp_path / "nope.txt")
        assert isinstance(error, DefaultResponsesMissing)
        assert pool.responses == (FALLBACK_RESPONSE,)
        assert pool.pick_random() == FALLBACK_RESPONSE

    def test_load_blank_file(self, write_responses):
        pool, error = DefaultResponsePool.load(write_responses("\n\n  \n"))
        assert error is None
        assert pool.responses == (FALLBACK_RESPONSE,)

    def test_load_preserves_file_order(self, write_responses):
        pool, error = DefaultResponsePool.load(write_responses("one\n\ntwo\n\nthree"))
        assert error is None
        assert pool.responses == ("one", "two", "three")

    def test_pick_random_from_pool(self):
        pool = DefaultResponsePool(["a", "b", "c"], rng=random.Random(7))
        for _ in range(50):
            assert pool.pick_random() in pool

    def test_pick_random_covers_pool(self):
        pool = DefaultResponsePool(["a", "b", "c"], rng=random.Random(42))
        seen = {pool.pick_random() for _ in range(200)}
        assert seen == {"a", "b", "c"}

    def test_pick_random_reproducible_with_seed(self):
        first = DefaultResponsePool(["a", "b", "c", "d"], rng=random.Random(3))
        second = DefaultResponsePool(["a", "b", "c", "d"], rng=random.Random(3))
        assert [first.pick_random() for _ in range(10)] == [second.pick_random() for _ in range(10)]

    def test_pool_is_read_only(self):
        pool = DefaultResponsePool(["a"])
        with pytest.raises(AttributeError):
            pool.responses.append("b")
