"""
textsplitter - sentence-aware text chunking for embedding and RAG pipelines.

Core modules:
- schema: Splitter configuration (chunk size, overlap, mode)
- chunking: Sentence segmentation, chunk accumulation, overlap, lazy iteration
- integrations: Adapters for third-party document pipelines
- settings: YAML / environment configuration loading
- cli: Command-line entry point
"""

from .chunking import ChunkIterator, Splitter
from .schema import ChunkMode, InvalidConfiguration, SplitterConfig

__version__ = "0.1.0"

__all__ = [
    "Splitter",
    "ChunkIterator",
    "ChunkMode",
    "SplitterConfig",
    "InvalidConfiguration",
]
