"""
Splitter configuration schema.

A configuration is three values:
- chunk_size: upper bound of a chunk, in characters or words
- chunk_overlap: trailing content repeated at the start of the next chunk
- mode: the unit chunk_size is measured in

Note on units: in word mode chunk_overlap is a word count. In character
mode it is scaled down to chunk_overlap // 10 *words* of overlap, not a
character count. Both behaviours are kept as-is.
"""

from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class InvalidConfiguration(ValueError):
    """Raised when a splitter is configured with unusable sizes or mode."""


class ChunkMode(str, Enum):
    """Unit that chunk_size and chunk_overlap are measured in."""

    CHARACTERS = "characters"
    WORDS = "words"


def parse_mode(value: Union[ChunkMode, str]) -> ChunkMode:
    """
    Coerce a mode name to a ChunkMode.

    Args:
        value: ChunkMode member or its string value (case-insensitive)

    Returns:
        Matching ChunkMode

    Raises:
        InvalidConfiguration: If the value names no mode
    """
    if isinstance(value, ChunkMode):
        return value
    try:
        return ChunkMode(str(value).strip().lower())
    except ValueError:
        raise InvalidConfiguration(f"unknown chunk mode: {value!r}") from None


def validate_chunk_params(chunk_size: int, chunk_overlap: int) -> None:
    """
    Check chunk size and overlap against each other.

    Raises:
        InvalidConfiguration: If chunk_size <= 0, chunk_overlap < 0,
            or chunk_overlap >= chunk_size
    """
    if chunk_size <= 0:
        raise InvalidConfiguration("chunk_size must be positive")
    if chunk_overlap < 0:
        raise InvalidConfiguration("chunk_overlap must be non-negative")
    if chunk_overlap >= chunk_size:
        raise InvalidConfiguration("chunk_overlap must be less than chunk_size")


class SplitterConfig(BaseModel):
    """Immutable splitter configuration."""

    model_config = ConfigDict(frozen=True)

    chunk_size: int = Field(1000, description="Max chunk size (characters or words)")
    chunk_overlap: int = Field(200, description="Overlap carried into the next chunk")
    mode: ChunkMode = ChunkMode.CHARACTERS

    @model_validator(mode="after")
    def _check_sizes(self) -> "SplitterConfig":
        validate_chunk_params(self.chunk_size, self.chunk_overlap)
        return self
