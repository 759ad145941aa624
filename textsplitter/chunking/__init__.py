"""
Document chunking module.

Splits text into sentence-aligned chunks with configurable overlap.
"""

from .accumulator import CharacterAccumulator, ChunkAccumulator, WordAccumulator
from .iterator import ChunkIterator, IteratorState
from .segmenter import iter_sentences, split_sentences
from .splitter import Splitter

__all__ = [
    "Splitter",
    "ChunkIterator",
    "IteratorState",
    "ChunkAccumulator",
    "CharacterAccumulator",
    "WordAccumulator",
    "iter_sentences",
    "split_sentences",
]
