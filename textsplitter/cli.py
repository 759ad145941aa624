"""Command-line entry point: split a text file into chunks.

Usage:
    textsplitter notes.txt --chunk-size 500 --chunk-overlap 100
    textsplitter notes.txt --mode words --chunk-size 120 --chunk-overlap 20 --format jsonl
    cat notes.txt | python -m textsplitter --limit 3 --stats
"""

from __future__ import annotations

import argparse
import itertools
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .chunking.splitter import Splitter
from .schema.config import ChunkMode, InvalidConfiguration
from .settings import load_settings

logger = logging.getLogger(__name__)


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {value}")
    return number


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="textsplitter",
        description="Split text into sentence-aligned chunks with overlap",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Text file to split ('-' or omitted reads stdin)",
    )
    parser.add_argument("--config", type=Path, help="YAML file with splitter settings")
    parser.add_argument("--chunk-size", type=int, help="Override chunk size")
    parser.add_argument("--chunk-overlap", type=int, help="Override chunk overlap")
    parser.add_argument(
        "--mode",
        choices=[m.value for m in ChunkMode],
        help="Override splitting mode",
    )
    parser.add_argument(
        "--limit",
        type=_non_negative_int,
        help="Stop after this many chunks",
    )
    parser.add_argument(
        "--format",
        choices=["text", "jsonl"],
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument("--stats", action="store_true", help="Print chunk statistics to stderr")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def _read_text(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _measure(chunk: str, mode: ChunkMode) -> int:
    if mode == ChunkMode.WORDS:
        return len(chunk.split())
    return len(chunk)


def _print_stats(lengths: list[int], mode: ChunkMode) -> None:
    unit = "words" if mode == ChunkMode.WORDS else "chars"
    print(f"Chunks: {len(lengths)}", file=sys.stderr)
    if lengths:
        mean = sum(lengths) / len(lengths)
        print(
            f"Length ({unit}): mean {mean:.1f}, min {min(lengths)}, max {max(lengths)}",
            file=sys.stderr,
        )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )

    try:
        settings = load_settings(args.config)
        splitter = Splitter(
            args.chunk_size if args.chunk_size is not None else settings.chunk_size,
            args.chunk_overlap if args.chunk_overlap is not None else settings.chunk_overlap,
            args.mode or settings.mode,
        )
        text = _read_text(args.input)
    except (InvalidConfiguration, FileNotFoundError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    logger.debug("Read %d characters from %s", len(text), args.input)

    chunks = splitter.each_chunk(text)
    if args.limit is not None:
        chunks = itertools.islice(chunks, args.limit)

    lengths: list[int] = []
    for index, chunk in enumerate(chunks):
        length = _measure(chunk, splitter.mode)
        lengths.append(length)
        if args.format == "jsonl":
            print(json.dumps({"index": index, "text": chunk, "length": length}, ensure_ascii=False))
        else:
            print(chunk)
            print()

    logger.debug("Wrote %d chunks", len(lengths))
    if args.stats:
        _print_stats(lengths, splitter.mode)
    return 0


if __name__ == "__main__":
    sys.exit(main())
