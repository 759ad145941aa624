"""
Tests for overlap extraction.
"""

from textsplitter.chunking.overlap import (
    character_overlap_words,
    overlap_from_text,
    overlap_from_words,
    tail_start,
)


class CountingStr(str):
    """str that counts index operations, to observe scan length."""

    reads = 0

    def __getitem__(self, key):
        CountingStr.reads += 1
        return super().__getitem__(key)


class TestCharacterOverlapWords:
    """Tests for the character-mode word budget."""

    def test_divides_by_ten(self):
        """Test that overlap is scaled to overlap // 10 words."""
        assert character_overlap_words(20) == 2
        assert character_overlap_words(100) == 10
        assert character_overlap_words(45) == 4

    def test_small_overlap_gives_no_words(self):
        """Test that overlaps below 10 carry no words."""
        assert character_overlap_words(9) == 0
        assert character_overlap_words(0) == 0
        assert character_overlap_words(-5) == 0


class TestTailStart:
    """Tests for the backward word scan."""

    def test_last_two_words(self):
        """Test locating the last two words."""
        text = "one two three"
        assert text[tail_start(text, 2):] == "two three"

    def test_limit_larger_than_word_count(self):
        """Test that the whole text is kept when it has too few words."""
        assert tail_start("one two", 5) == 0

    def test_zero_limit(self):
        """Test that a zero limit keeps nothing."""
        assert tail_start("one two", 0) == len("one two")

    def test_whitespace_runs(self):
        """Test that runs of mixed whitespace count as one boundary."""
        text = "alpha  beta\n\tgamma"
        assert text[tail_start(text, 2):] == "beta\n\tgamma"

    def test_scan_stops_early(self):
        """Test that only the tail of a long chunk is visited."""
        CountingStr.reads = 0
        text = CountingStr("word " * 10_000 + "end.")
        start = tail_start(text, 2)
        assert str.__getitem__(text, slice(start, None)) == "word end."
        assert CountingStr.reads < 20


class TestOverlapFromText:
    """Tests for character-mode overlap."""

    def test_trailing_words(self):
        """Test that overlap 20 carries the last two words."""
        chunk = "First sentence is here. Second sentence is here."
        assert overlap_from_text(chunk, 20) == "is here."

    def test_whitespace_normalised(self):
        """Test that the tail is rejoined with single spaces."""
        assert overlap_from_text("alpha  beta\n\tgamma", 20) == "beta gamma"

    def test_short_chunk_kept_whole(self):
        """Test that a chunk shorter than the budget is fully carried."""
        assert overlap_from_text("Hi there.", 100) == "Hi there."

    def test_no_overlap(self):
        """Test empty overlap for empty text or small budgets."""
        assert overlap_from_text("", 20) == ""
        assert overlap_from_text("a b c.", 9) == ""
        assert overlap_from_text("a b c.", 0) == ""


class TestOverlapFromWords:
    """Tests for word-mode overlap."""

    def test_last_words(self):
        """Test that the last chunk_overlap words are carried."""
        assert overlap_from_words(["a", "b", "c"], 2) == ["b", "c"]

    def test_fewer_words_than_overlap(self):
        """Test that all words are carried when there are fewer than chunk_overlap."""
        assert overlap_from_words(["a"], 5) == ["a"]

    def test_zero_overlap(self):
        """Test that zero overlap carries nothing."""
        assert overlap_from_words(["a", "b"], 0) == []
        assert overlap_from_words([], 3) == []

    def test_returns_copy(self):
        """Test that the result is independent of the input list."""
        words = ["a", "b", "c"]
        tail = overlap_from_words(words, 3)
        tail.append("d")
        assert words == ["a", "b", "c"]
