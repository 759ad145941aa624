"""
Example: Simulated RAG ingestion.

Chunks a document and walks each chunk through a stand-in embed/store
step. Swap ``fake_embed`` for a real embedding call in practice.
"""

import hashlib

from textsplitter import ChunkMode, Splitter


DOCUMENT = """
SENATE BILL NO. 123
"Clean Energy Future Act"

SECTION 1. FINDINGS AND PURPOSE
The Legislature finds and declares all of the following:
(a) Climate change poses a significant threat to our environment.
(b) Transitioning to renewable energy is essential for sustainability.
(c) Investment in clean energy creates economic opportunities.

SECTION 2. DEFINITIONS
For purposes of this act:
(a) "Renewable energy" means energy from solar, wind, or hydroelectric sources.
(b) "Clean energy" includes renewable energy and energy efficiency measures.

SECTION 3. IMPLEMENTATION
The Department shall develop programs to:
(1) Increase renewable energy production by 50% by 2030.
(2) Provide incentives for clean energy adoption.
(3) Monitor progress toward emission reduction goals.
"""


def fake_embed(text: str, dim: int = 8) -> list[float]:
    """Deterministic stand-in for an embedding model."""
    digest = hashlib.sha256(text.encode("utf-8")).digest()
    return [b / 255 for b in digest[:dim]]


def main():
    """Run RAG pipeline example."""
    splitter = Splitter(chunk_size=200, chunk_overlap=40, mode=ChunkMode.CHARACTERS)
    store: dict[str, tuple[str, list[float]]] = {}

    def ingest(chunk: str) -> None:
        chunk_id = f"sb123_chunk_{len(store):04d}"
        store[chunk_id] = (chunk, fake_embed(chunk))
        print(f"{chunk_id}: {len(chunk)} chars | {chunk[:50]}...")

    print(f"Document length: {len(DOCUMENT)} characters")
    splitter.each_chunk(DOCUMENT, ingest)
    print(f"\nStored {len(store)} chunks")


if __name__ == "__main__":
    main()
