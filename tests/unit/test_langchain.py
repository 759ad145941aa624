"""
Tests for the LangChain adapter.
"""

import pytest
from langchain_core.documents import Document
from langchain_text_splitters import TextSplitter

from textsplitter import ChunkMode, InvalidConfiguration, Splitter, SplitterConfig
from textsplitter.integrations import SentenceTextSplitter

BILL = "The bill was introduced in 2024. It aims to reduce emissions by 50%."


class TestSentenceTextSplitter:
    """Tests for SentenceTextSplitter."""

    def test_is_langchain_splitter(self):
        """Test that the adapter is a LangChain TextSplitter."""
        assert isinstance(SentenceTextSplitter(chunk_size=100, chunk_overlap=20), TextSplitter)

    def test_split_text_matches_splitter(self):
        """Test that split_text delegates to Splitter."""
        adapter = SentenceTextSplitter(chunk_size=35, chunk_overlap=0)
        assert adapter.split_text(BILL) == Splitter(35, 0).split_text(BILL)

    def test_create_documents(self):
        """Test that documents carry chunk text and copied metadata."""
        adapter = SentenceTextSplitter(chunk_size=35, chunk_overlap=0)
        docs = adapter.create_documents([BILL], metadatas=[{"source": "bill"}])

        assert [d.page_content for d in docs] == [
            "The bill was introduced in 2024.",
            "It aims to reduce emissions by 50%.",
        ]
        assert all(d.metadata == {"source": "bill"} for d in docs)

    def test_split_documents_word_mode(self):
        """Test splitting Documents in word mode."""
        adapter = SentenceTextSplitter(chunk_size=5, chunk_overlap=1, mode=ChunkMode.WORDS)
        docs = adapter.split_documents([Document(page_content="a b c d e f g h i j k l.")])

        assert [d.page_content for d in docs] == ["a b c d e", "e f g h i", "i j k l."]

    def test_from_config(self):
        """Test building from SplitterConfig."""
        config = SplitterConfig(chunk_size=64, chunk_overlap=8, mode="words")
        adapter = SentenceTextSplitter.from_config(config)
        assert adapter.splitter.config == config

    def test_invalid_configuration(self):
        """Test that invalid sizes and start indices are rejected."""
        with pytest.raises(InvalidConfiguration):
            SentenceTextSplitter(chunk_size=100, chunk_overlap=100)
        with pytest.raises(InvalidConfiguration, match="add_start_index"):
            SentenceTextSplitter(chunk_size=100, chunk_overlap=10, add_start_index=True)
