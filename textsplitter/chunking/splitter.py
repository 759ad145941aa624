"""
Splitter facade.

Validates configuration once and exposes three entry points that all
drive one accumulator per call:

- split_text(text): eager, returns every chunk
- each_chunk(text, on_chunk): push, calls on_chunk once per chunk
- each_chunk(text): pull, returns a ChunkIterator

Given the same text, all three produce the same chunks in the same order.
"""

import logging
from typing import Callable, Optional, Union

from ..schema.config import (
    ChunkMode,
    SplitterConfig,
    parse_mode,
    validate_chunk_params,
)
from .accumulator import make_accumulator
from .iterator import ChunkIterator
from .segmenter import iter_sentences

logger = logging.getLogger(__name__)


class Splitter:
    """
    Split text into sentence-aligned, overlapping chunks.

    Holds only immutable configuration, so one instance can be shared
    and reused across texts and callers.
    """

    def __init__(
        self,
        chunk_size: int,
        chunk_overlap: int,
        mode: Union[ChunkMode, str] = ChunkMode.CHARACTERS,
    ) -> None:
        """
        Initialize splitter.

        Args:
            chunk_size: Max chunk size, in characters or words depending on mode
            chunk_overlap: Overlap between consecutive chunks; a word count in
                word mode, chunk_overlap // 10 words in character mode
            mode: ChunkMode or its string value

        Raises:
            InvalidConfiguration: If the sizes or the mode are unusable
        """
        validate_chunk_params(chunk_size, chunk_overlap)
        self._config = SplitterConfig(
            chunk_size=chunk_size,
            chunk_overlap=chunk_overlap,
            mode=parse_mode(mode),
        )
        logger.debug(
            "Splitter created: chunk_size=%d chunk_overlap=%d mode=%s",
            chunk_size,
            chunk_overlap,
            self._config.mode.value,
        )

    @classmethod
    def from_config(cls, config: SplitterConfig) -> "Splitter":
        """Build a splitter from a SplitterConfig."""
        return cls(config.chunk_size, config.chunk_overlap, config.mode)

    @property
    def config(self) -> SplitterConfig:
        return self._config

    @property
    def chunk_size(self) -> int:
        return self._config.chunk_size

    @property
    def chunk_overlap(self) -> int:
        return self._config.chunk_overlap

    @property
    def mode(self) -> ChunkMode:
        return self._config.mode

    def split_text(self, text: str) -> list[str]:
        """
        Split text into chunks.

        Args:
            text: Text to split

        Returns:
            Chunks in document order; empty for empty or blank text
        """
        return list(self.each_chunk(text))

    def each_chunk(
        self,
        text: str,
        on_chunk: Optional[Callable[[str], None]] = None,
    ) -> Optional[ChunkIterator]:
        """
        Stream chunks of text.

        Args:
            text: Text to split
            on_chunk: Called once per chunk, in order. When omitted a lazy
                ChunkIterator is returned instead.

        Returns:
            ChunkIterator when on_chunk is None, otherwise None
        """
        chunks = self._iterate(text)
        if on_chunk is None:
            return chunks
        for chunk in chunks:
            on_chunk(chunk)
        return None

    def _iterate(self, text: str) -> ChunkIterator:
        accumulator = make_accumulator(self.chunk_size, self.chunk_overlap, self.mode)
        if not text or text.isspace():
            return ChunkIterator(accumulator, iter(()))
        return ChunkIterator(accumulator, iter_sentences(text))

    def __repr__(self) -> str:
        return (
            f"Splitter(chunk_size={self.chunk_size}, "
            f"chunk_overlap={self.chunk_overlap}, mode={self.mode.value!r})"
        )
