"""
Lazy chunk iteration.

ChunkIterator is an explicit pull state machine: each pull consumes
sentences only until the accumulator completes a chunk, then returns it
with all intermediate state kept for the next pull.
"""

import logging
from collections import deque
from enum import Enum
from typing import Iterator, Optional

from .accumulator import ChunkAccumulator

logger = logging.getLogger(__name__)


class IteratorState(Enum):
    """Chunk iterator states."""

    ACTIVE = "active"
    FINISHED = "finished"


class ChunkIterator:
    """
    Forward-only cursor over the chunks of one text.

    Not safe for concurrent pulls; abandoning it mid-stream needs no cleanup.

    Attributes:
        state: ACTIVE until the last chunk has been returned
        sentences_consumed: Sentences read from the text so far
        chunks_emitted: Chunks returned so far
    """

    def __init__(self, accumulator: ChunkAccumulator, sentences: Iterator[str]) -> None:
        """
        Initialize iterator.

        Args:
            accumulator: Fresh accumulator owned by this iterator
            sentences: Lazy stream of normalised sentences
        """
        self._accumulator = accumulator
        self._sentences = sentences
        self._pending: deque[str] = deque()
        self.state = IteratorState.ACTIVE
        self.sentences_consumed = 0
        self.chunks_emitted = 0

    @property
    def finished(self) -> bool:
        return self.state is IteratorState.FINISHED

    def pull(self) -> Optional[str]:
        """
        Produce the next chunk.

        Returns:
            The next chunk, or None once the text is exhausted
        """
        if self.state is IteratorState.FINISHED:
            return None

        while not self._pending:
            sentence = next(self._sentences, None)
            if sentence is None:
                final = self._accumulator.finish()
                if final is not None:
                    self.chunks_emitted += 1
                self._finish()
                return final
            self.sentences_consumed += 1
            self._pending.extend(self._accumulator.add(sentence))

        self.chunks_emitted += 1
        return self._pending.popleft()

    def _finish(self) -> None:
        self.state = IteratorState.FINISHED
        self._sentences = iter(())
        logger.debug(
            "Chunk iterator finished: %d chunks from %d sentences",
            self.chunks_emitted,
            self.sentences_consumed,
        )

    def __iter__(self) -> "ChunkIterator":
        return self

    def __next__(self) -> str:
        chunk = self.pull()
        if chunk is None:
            raise StopIteration
        return chunk
