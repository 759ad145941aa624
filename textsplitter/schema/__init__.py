"""
Schema definitions for textsplitter.

Configuration types shared by the splitter, the settings loader and the CLI.
"""

from .config import (
    ChunkMode,
    InvalidConfiguration,
    SplitterConfig,
    parse_mode,
    validate_chunk_params,
)

__all__ = [
    "ChunkMode",
    "InvalidConfiguration",
    "SplitterConfig",
    "parse_mode",
    "validate_chunk_params",
]
