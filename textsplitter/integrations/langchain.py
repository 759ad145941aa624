"""
LangChain adapter.

SentenceTextSplitter is a drop-in ``TextSplitter``, so LangChain's
``create_documents`` / ``split_documents`` run on the sentence-aware
engine instead of recursive character splitting.
"""

from typing import Any, Union

from langchain_text_splitters import TextSplitter

from ..chunking.splitter import Splitter
from ..schema.config import ChunkMode, InvalidConfiguration, SplitterConfig


def _word_count(text: str) -> int:
    return len(text.split())


class SentenceTextSplitter(TextSplitter):
    """
    LangChain TextSplitter backed by the sentence-aware Splitter.

    Chunk text is whitespace- and punctuation-normalised, so chunks cannot
    be located in the source text and ``add_start_index`` is rejected.
    """

    def __init__(
        self,
        chunk_size: int = 1000,
        chunk_overlap: int = 200,
        mode: Union[ChunkMode, str] = ChunkMode.CHARACTERS,
        **kwargs: Any,
    ) -> None:
        """
        Initialize splitter.

        Args:
            chunk_size: Max chunk size (characters or words)
            chunk_overlap: Overlap between chunks
            mode: Splitting mode
            **kwargs: Passed to ``TextSplitter``

        Raises:
            InvalidConfiguration: On invalid sizes, mode, or add_start_index=True
        """
        self._splitter = Splitter(chunk_size, chunk_overlap, mode)
        if kwargs.pop("add_start_index", False):
            raise InvalidConfiguration("add_start_index is not supported: chunk text is normalised")
        if self._splitter.mode == ChunkMode.WORDS:
            kwargs.setdefault("length_function", _word_count)
        super().__init__(chunk_size=chunk_size, chunk_overlap=chunk_overlap, **kwargs)

    @classmethod
    def from_config(cls, config: SplitterConfig, **kwargs: Any) -> "SentenceTextSplitter":
        """Build from a SplitterConfig."""
        return cls(config.chunk_size, config.chunk_overlap, config.mode, **kwargs)

    @property
    def splitter(self) -> Splitter:
        return self._splitter

    def split_text(self, text: str) -> list[str]:
        return self._splitter.split_text(text)
