"""
Tests for sentence segmentation.
"""

from collections.abc import Iterator

from textsplitter.chunking.segmenter import iter_sentences, split_sentences


class TestSplitSentences:
    """Tests for split_sentences."""

    def test_single_sentence(self):
        """Test a single terminated sentence."""
        assert split_sentences("This is a simple sentence.") == ["This is a simple sentence."]

    def test_terminators_normalised_to_period(self):
        """Test that ! and ? are re-emitted as a single period."""
        sentences = split_sentences("Question? Exclamation! Normal sentence.")
        assert sentences == ["Question.", "Exclamation.", "Normal sentence."]

    def test_delimiter_runs_collapse(self):
        """Test that runs like '...' or '?!' split only once."""
        assert split_sentences("Wait...what?! Really.") == ["Wait.", "what.", "Really."]

    def test_empty_fragments_dropped(self):
        """Test that fragments between stray periods are discarded."""
        assert split_sentences("First sentence. . . Second sentence.") == [
            "First sentence.",
            "Second sentence.",
        ]

    def test_fragments_trimmed(self):
        """Test that surrounding whitespace and newlines are trimmed."""
        text = "  First line.\nSecond line.\r\n  Third line.  "
        assert split_sentences(text) == ["First line.", "Second line.", "Third line."]

    def test_unterminated_tail_gets_period(self):
        """Test that trailing text without a terminator still forms a sentence."""
        assert split_sentences("Done. Not quite done") == ["Done.", "Not quite done."]

    def test_empty_and_blank_text(self):
        """Test that empty or whitespace-only text yields nothing."""
        assert split_sentences("") == []
        assert split_sentences("   \n\t ") == []

    def test_punctuation_only(self):
        """Test that punctuation-only text yields nothing."""
        assert split_sentences("... !!! ???") == []

    def test_non_ascii_terminators_not_split(self):
        """Test that only ASCII . ! ? are sentence delimiters."""
        text = "日本語のテキスト。中国文本。한국어 텍스트."
        assert split_sentences(text) == [text]


class TestIterSentences:
    """Tests for the lazy sentence stream."""

    def test_is_lazy(self):
        """Test that sentences are produced on demand."""
        sentences = iter_sentences("One. Two. Three.")
        assert isinstance(sentences, Iterator)
        assert next(sentences) == "One."
        assert next(sentences) == "Two."

    def test_matches_eager_split(self):
        """Test that the stream and the list agree."""
        text = "Alpha! Beta? Gamma. Delta"
        assert list(iter_sentences(text)) == split_sentences(text)
