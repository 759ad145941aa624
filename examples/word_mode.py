"""
Example: Word-count chunking.

Word mode measures chunk_size and chunk_overlap in words and cuts
sentences that are longer than a whole chunk.
"""

from textsplitter import ChunkMode, Splitter


def main():
    """Run word-mode example."""

    text = (
        "Retrieval augmented generation pairs a language model with a search index. "
        "Documents are split into chunks, embedded and stored. "
        "At query time the most similar chunks are retrieved and handed to the model as context, "
        "which grounds its answer in the source material instead of its training data alone."
    )

    splitter = Splitter(chunk_size=20, chunk_overlap=4, mode=ChunkMode.WORDS)

    for i, chunk in enumerate(splitter.split_text(text), 1):
        print(f"Chunk {i} ({len(chunk.split())} words): {chunk}")


if __name__ == "__main__":
    main()
