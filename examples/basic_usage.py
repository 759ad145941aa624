"""
Example: Split a document into character-sized chunks.

Shows the eager entry point and the effect of overlap.
"""

from textsplitter import Splitter


def main():
    """Run basic example."""

    text = """
    Text chunking is a crucial preprocessing step for semantic search.
    By breaking documents into smaller pieces, we can create more precise embeddings.
    The key is finding the right balance between chunk size and overlap!
    Too small, and you lose context. Too large, and embeddings become less specific.
    Is there a perfect setting? Experimentation is essential.
    """

    splitter = Splitter(chunk_size=150, chunk_overlap=30)
    chunks = splitter.split_text(text)

    print(f"{splitter!r} -> {len(chunks)} chunks\n")
    for i, chunk in enumerate(chunks, 1):
        print(f"Chunk {i} ({len(chunk)} chars):")
        print(f"  {chunk}\n")


if __name__ == "__main__":
    main()
