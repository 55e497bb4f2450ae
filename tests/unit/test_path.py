"""tests/unit/test_path.py"""

import pytest

from typedurl.components.path import Path
from typedurl.exceptions import InvalidEncoding, InvalidPath


class TestPath:
    """Tests for Path class."""

    @pytest.mark.parametrize(
        "text, segments",
        [
            ("", ()),
            ("/", ()),
            ("/some/path", ("some", "path")),
            ("/dir/", ("dir", "")),
            ("/a//b", ("a", "", "b")),
            ("/a%20b/c%2Fd", ("a b", "c/d")),
            ("/a+b", ("a+b",)),
        ],
    )
    def test_parse(self, text, segments):
        """Test parsing encoded paths into decoded segments."""
        assert Path.parse(text).segments == segments

    @pytest.mark.parametrize("text", ["relative", "a/b", "?x"])
    def test_parse_relative_rejected(self, text):
        """Test non-absolute paths raise InvalidPath."""
        with pytest.raises(InvalidPath):
            Path.parse(text)

    def test_parse_bad_escape(self):
        """Test malformed escapes raise InvalidEncoding."""
        with pytest.raises(InvalidEncoding):
            Path.parse("/a%2")

    @pytest.mark.parametrize(
        "segments, expected",
        [
            ((), "/"),
            (("some", "path"), "/some/path"),
            (("dir", ""), "/dir/"),
            (("a b", "c/d", "e?f#g"), "/a%20b/c%2Fd/e%3Ff%23g"),
        ],
    )
    def test_str_always_absolute(self, segments, expected):
        """Test serialization re-encodes each segment."""
        assert str(Path(segments)) == expected

    def test_single_empty_segment_is_root(self):
        """Test that a lone empty segment normalizes to the root."""
        assert Path(("",)) == Path()

    def test_list_coerced_to_tuple(self):
        """Test segments are stored immutably."""
        path = Path(["a", "b"])
        assert path.segments == ("a", "b")
        assert hash(path) == hash(Path(("a", "b")))

    def test_from_decoded(self):
        """Test building from a decoded string keeps special characters."""
        path = Path.from_decoded("/some/path/q?mark")
        assert path.segments == ("some", "path", "q?mark")
        assert str(path) == "/some/path/q%3Fmark"

    def test_from_decoded_relative(self):
        """Test from_decoded rejects relative text."""
        with pytest.raises(InvalidPath):
            Path.from_decoded("some/path")

    def test_parent(self):
        """Test parent drops the last segment and stops at the root."""
        path = Path(("a", "b"))
        assert path.parent() == Path(("a",))
        assert path.parent().parent() == Path()
        assert Path().parent() == Path()

    def test_join(self):
        """Test appending segments."""
        assert Path(("a",)).join("b", "c") == Path(("a", "b", "c"))

    def test_iteration_and_len(self):
        """Test Path behaves as a segment sequence."""
        path = Path(("a", "b"))
        assert list(path) == ["a", "b"]
        assert len(path) == 2
