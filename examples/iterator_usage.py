"""
Example: Lazy chunk iteration.

Demonstrates the callback and iterator entry points. Pulling from the
iterator only does the work needed for the chunks actually requested.
"""

import itertools
import sys
from pathlib import Path

from textsplitter import Splitter


def main():
    """Run iterator example."""
    if len(sys.argv) > 1:
        text = Path(sys.argv[1]).read_text(encoding="utf-8")
    else:
        text = " ".join(
            f"Paragraph {i} talks about chunking strategies for retrieval. "
            f"It explains why overlap keeps context across boundaries!"
            for i in range(40)
        )
    splitter = Splitter(chunk_size=500, chunk_overlap=100)

    print("=== Example 1: Callback (no list is built) ===")
    splitter.each_chunk(text, lambda chunk: print(f"Chunk ({len(chunk)} chars): {chunk[:50]}..."))

    print("\n=== Example 2: Iterator, first 3 chunks only ===")
    chunks = splitter.each_chunk(text)
    for chunk in itertools.islice(chunks, 3):
        print(f"Chunk: {chunk[:50]}...")
    print(f"Sentences read: {chunks.sentences_consumed}")

    print("\n=== Example 3: Iterator with transformations ===")
    sizes = [size for size in map(len, splitter.each_chunk(text)) if size > 400]
    print(f"Chunks larger than 400 chars: {len(sizes)}")

    print("\n=== Example 4: Eager list ===")
    all_chunks = splitter.split_text(text)
    if all_chunks:
        print(f"Total chunks: {len(all_chunks)}")
        print(f"Average size: {sum(map(len, all_chunks)) // len(all_chunks)} chars")


if __name__ == "__main__":
    main()
