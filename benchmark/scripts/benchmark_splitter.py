"""
Splitter benchmark: eager vs lazy chunking, plus overlap extraction.

Generates synthetic documents of increasing size and times:
- split_text (eager, all chunks)
- draining each_chunk (lazy, all chunks)
- pulling only the first few chunks from each_chunk
- overlap extraction on a single large chunk

Usage:
    python benchmark/scripts/benchmark_splitter.py
    python benchmark/scripts/benchmark_splitter.py --repeat 10 --first 3
"""

import argparse
import itertools
import random
import sys
import time
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from textsplitter import ChunkMode, Splitter
from textsplitter.chunking.overlap import overlap_from_text


SENTENCES = [
    "The quick brown fox jumps over the lazy dog.",
    "Machine learning models require large amounts of training data.",
    "Natural language processing enables computers to understand human language.",
    "Retrieval augmented generation improves AI accuracy by providing context.",
    "Text chunking is essential for processing large documents efficiently.",
    "Vector embeddings capture semantic meaning in numerical representations.",
    "Transformer architectures revolutionized natural language understanding.",
    "Attention mechanisms allow models to focus on relevant information.",
    "Fine-tuning adapts pre-trained models to specific domains.",
    "Large language models demonstrate emergent capabilities at scale.",
]

DOCUMENTS = [
    (5_000, "Medium article"),
    (20_000, "Long blog post"),
    (50_000, "Research paper"),
    (100_000, "Small book chapter"),
]

# (mode, chunk_size, chunk_overlap)
CONFIGS = [
    (ChunkMode.CHARACTERS, 1000, 200),
    (ChunkMode.WORDS, 200, 40),
]


def generate_document(word_count: int, seed: int = 0) -> str:
    rng = random.Random(seed)
    words_needed = word_count
    result: list[str] = []
    while words_needed > 0:
        sentence = rng.choice(SENTENCES)
        result.append(sentence)
        words_needed -= len(sentence.split())
    return " ".join(result)


def timed(fn, repeat: int) -> float:
    """Best-of-``repeat`` wall time in milliseconds."""
    best = float("inf")
    for _ in range(repeat):
        start = time.perf_counter()
        fn()
        best = min(best, time.perf_counter() - start)
    return best * 1000


def bench_documents(repeat: int, first: int) -> None:
    for word_count, desc in DOCUMENTS:
        doc = generate_document(word_count)
        print(f"\n{desc} (~{word_count:,} words, {len(doc):,} chars)")
        print("-" * 70)

        for mode, chunk_size, chunk_overlap in CONFIGS:
            splitter = Splitter(chunk_size, chunk_overlap, mode)
            chunks = splitter.split_text(doc)

            eager = timed(lambda: splitter.split_text(doc), repeat)
            lazy = timed(lambda: sum(1 for _ in splitter.each_chunk(doc)), repeat)
            prefix = timed(lambda: list(itertools.islice(splitter.each_chunk(doc), first)), repeat)

            print(f"  {mode.value:<10} size={chunk_size:<5} overlap={chunk_overlap:<4} chunks={len(chunks)}")
            print(f"    split_text:        {eager:8.2f} ms")
            print(f"    each_chunk (all):  {lazy:8.2f} ms")
            print(f"    each_chunk (first {first}): {prefix:8.2f} ms")


def bench_overlap(repeat: int) -> None:
    print("\nOverlap extraction (backward scan)")
    print("-" * 70)
    for word_count in (1_000, 10_000, 100_000):
        chunk = generate_document(word_count, seed=1)
        for chunk_overlap in (50, 200, 1000):
            ms = timed(lambda: overlap_from_text(chunk, chunk_overlap), repeat)
            print(f"  chunk={len(chunk):>9,} chars  overlap={chunk_overlap:<5} {ms:8.4f} ms")


def main() -> None:
    parser = argparse.ArgumentParser(description="Benchmark the text splitter")
    parser.add_argument("--repeat", type=int, default=5, help="Runs per measurement (best is kept)")
    parser.add_argument("--first", type=int, default=3, help="Chunks pulled in the prefix benchmark")
    args = parser.parse_args()

    print("Text Splitter Benchmark")
    print("=" * 70)
    bench_documents(args.repeat, args.first)
    bench_overlap(args.repeat)


if __name__ == "__main__":
    main()
