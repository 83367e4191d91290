"""Test suite for homophone word lists."""

import pytest
from phonlev.config import Settings
from phonlev.errors import ErrorCode, HomophoneSourceError
from phonlev.storage import HomophoneIndex, NullHomophoneLookup, load_homophone_lookup


WORD_LIST = """\
# English homophones
to, two, too
there,their,they're

lone
two, tu
"""


class TestHomophoneIndex:
    """Test parsing and lookup."""

    def setup_method(self):
        self.index = HomophoneIndex.from_lines(WORD_LIST.splitlines())

    def test_lookup(self):
        assert self.index.lookup("to") == frozenset({"to", "two", "too"})
        assert self.index.lookup("their") == frozenset({"there", "their", "they're"})

    def test_unknown_word(self):
        assert self.index.lookup("tree") == frozenset()

    def test_single_word_lines_ignored(self):
        assert "lone" not in self.index

    def test_word_in_several_groups(self):
        assert self.index.lookup("two") == frozenset({"to", "two", "too", "tu"})
        assert self.index.lookup("tu") == frozenset({"two", "tu"})

    def test_counts(self):
        assert self.index.group_count == 3
        assert len(self.index) == 7

    def test_custom_delimiter(self):
        index = HomophoneIndex.from_lines(["to;two;too"], delimiter=";")
        assert index.lookup("too") == frozenset({"to", "two", "too"})

    def test_groups_from_iterables(self):
        index = HomophoneIndex([["knight", "night"], [" ", "x"]])
        assert index.lookup("night") == frozenset({"knight", "night"})
        assert "x" not in index


class TestHomophoneFiles:
    """Test loading from disk and graceful degradation."""

    def test_from_file(self, tmp_path):
        path = tmp_path / "homophones.txt"
        path.write_text(WORD_LIST, encoding="utf-8")
        index = HomophoneIndex.from_file(path)
        assert index.lookup("too") == frozenset({"to", "two", "too"})

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(HomophoneSourceError) as exc_info:
            HomophoneIndex.from_file(tmp_path / "missing.txt")
        assert exc_info.value.code == ErrorCode.HOMOPHONE_SOURCE_UNAVAILABLE

    def test_load_configured(self, tmp_path):
        path = tmp_path / "homophones.txt"
        path.write_text("sea, see\n", encoding="utf-8")
        lookup = load_homophone_lookup(Settings(homophones_path=path))
        assert isinstance(lookup, HomophoneIndex)
        assert lookup.lookup("see") == frozenset({"sea", "see"})

    def test_load_unconfigured(self):
        lookup = load_homophone_lookup(Settings(homophones_path=None))
        assert isinstance(lookup, NullHomophoneLookup)
        assert lookup.lookup("to") == frozenset()

    def test_load_missing_file_degrades(self, tmp_path):
        lookup = load_homophone_lookup(Settings(homophones_path=tmp_path / "missing.txt"))
        assert isinstance(lookup, NullHomophoneLookup)
        assert len(lookup) == 0
