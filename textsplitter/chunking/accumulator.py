"""
Chunk accumulation.

An accumulator consumes normalised sentences one at a time and hands
back chunks as soon as they are complete. The eager, callback and lazy
entry points of the splitter all drive the same accumulator, so they
cannot disagree about where chunks end.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..schema.config import ChunkMode
from .overlap import overlap_from_text, overlap_from_words


class _TextBuffer:
    """Append buffer for the open character-mode chunk.

    Parts are collected in a list and joined once when the chunk is
    emitted; the length is tracked so size checks never join.
    """

    __slots__ = ("_parts", "_length")

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._length = 0

    def __len__(self) -> int:
        return self._length

    def append(self, text: str) -> None:
        self._parts.append(text)
        self._length += len(text)

    def getvalue(self) -> str:
        return "".join(self._parts)


class ChunkAccumulator(ABC):
    """
    Base class for the per-mode accumulation rules.

    Instances hold the open chunk and are owned by a single driver.
    """

    def __init__(self, chunk_size: int, chunk_overlap: int) -> None:
        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap

    @abstractmethod
    def add(self, sentence: str) -> list[str]:
        """
        Consume one normalised sentence.

        Args:
            sentence: Trimmed sentence ending in "."

        Returns:
            Chunks completed by this sentence, in order (usually none or one)
        """

    @abstractmethod
    def finish(self) -> Optional[str]:
        """Flush the open chunk, returning it unless it is empty."""


class CharacterAccumulator(ChunkAccumulator):
    """
    Character-mode rule.

    Sentences are joined with single spaces while the chunk stays within
    chunk_size characters. A sentence longer than chunk_size is never cut
    and becomes a chunk of its own.
    """

    def __init__(self, chunk_size: int, chunk_overlap: int) -> None:
        super().__init__(chunk_size, chunk_overlap)
        self._buffer = _TextBuffer()

    def add(self, sentence: str) -> list[str]:
        if not self._buffer:
            self._buffer.append(sentence)
            return []

        if len(self._buffer) + len(sentence) + 1 <= self.chunk_size:
            self._buffer.append(" ")
            self._buffer.append(sentence)
            return []

        chunk = self._buffer.getvalue()
        self._buffer = _TextBuffer()
        if self.chunk_overlap > 0:
            seed = self._fit_seed(overlap_from_text(chunk, self.chunk_overlap), sentence)
            if seed:
                self._buffer.append(seed)
                self._buffer.append(" ")
        self._buffer.append(sentence)
        return [chunk]

    def finish(self) -> Optional[str]:
        chunk = self._buffer.getvalue()
        self._buffer = _TextBuffer()
        return chunk or None

    def _fit_seed(self, seed: str, sentence: str) -> str:
        """Drop leading overlap words until seed + sentence fits chunk_size."""
        budget = self.chunk_size - len(sentence) - 1
        if len(seed) <= budget:
            return seed
        if budget <= 0:
            return ""
        cut = seed.find(" ", len(seed) - budget - 1)
        return "" if cut == -1 else seed[cut + 1:]


class WordAccumulator(ChunkAccumulator):
    """
    Word-mode rule.

    Whole sentences are packed while the chunk stays within chunk_size
    words. Sentences longer than chunk_size are cut into word groups, so
    no chunk ever exceeds chunk_size words.
    """

    def __init__(self, chunk_size: int, chunk_overlap: int) -> None:
        super().__init__(chunk_size, chunk_overlap)
        self._words: list[str] = []

    def add(self, sentence: str) -> list[str]:
        words = sentence.split()
        if not words:
            return []

        if len(self._words) + len(words) <= self.chunk_size:
            self._words.extend(words)
            return []

        emitted: list[str] = []
        if self._words:
            emitted.append(self._flush())

        if len(words) <= self.chunk_size:
            # Overlap seed yields to the sentence when both do not fit
            room = self.chunk_size - len(words)
            if len(self._words) > room:
                self._words = self._words[len(self._words) - room:]
            self._words.extend(words)
        else:
            emitted.extend(self._add_oversized(words))
        return emitted

    def finish(self) -> Optional[str]:
        chunk = " ".join(self._words)
        self._words = []
        if not chunk.strip():
            return None
        return chunk

    def _flush(self) -> str:
        chunk = " ".join(self._words)
        self._words = overlap_from_words(self._words, self.chunk_overlap)
        return chunk

    def _add_oversized(self, words: list[str]) -> list[str]:
        emitted: list[str] = []
        pos = 0
        while pos < len(words):
            room = self.chunk_size - len(self._words)
            if room <= 0:
                emitted.append(self._flush())
                continue
            self._words.extend(words[pos:pos + room])
            pos += room
        return emitted


def make_accumulator(chunk_size: int, chunk_overlap: int, mode: ChunkMode) -> ChunkAccumulator:
    """Create the accumulator for ``mode``."""
    if mode == ChunkMode.WORDS:
        return WordAccumulator(chunk_size, chunk_overlap)
    return CharacterAccumulator(chunk_size, chunk_overlap)
