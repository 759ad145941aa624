"""
Overlap extraction.

Computes the trailing content of a finished chunk that seeds the next one.

Character mode measures overlap in words, not characters: the word budget
is ``chunk_overlap // 10``. Word mode uses ``chunk_overlap`` words as is.
"""

from typing import Sequence

CHARS_OVERLAP_DIVISOR = 10


def character_overlap_words(chunk_overlap: int) -> int:
    """Number of trailing words a character-mode chunk carries over."""
    if chunk_overlap <= 0:
        return 0
    return chunk_overlap // CHARS_OVERLAP_DIVISOR


def tail_start(text: str, word_limit: int) -> int:
    """
    Find where the last ``word_limit`` words of ``text`` begin.

    Scans backward from the end of the string one character at a time,
    counting a word each time whitespace is reached after word
    characters. Stops as soon as the limit is met, so the cost is
    proportional to the tail length rather than the whole text.

    Args:
        text: Chunk text to scan
        word_limit: Number of trailing words wanted

    Returns:
        Index of the first character of the tail (0 when the text holds
        no more than ``word_limit`` words)
    """
    if word_limit <= 0:
        return len(text)

    count = 0
    in_word = False
    pos = len(text)
    while pos > 0:
        pos -= 1
        if text[pos].isspace():
            if in_word:
                count += 1
                if count >= word_limit:
                    return pos + 1
                in_word = False
        else:
            in_word = True
    return 0


def overlap_from_text(text: str, chunk_overlap: int) -> str:
    """
    Character-mode overlap: last ``chunk_overlap // 10`` words of ``text``.

    The tail is re-normalised to single-space separated words.

    Args:
        text: The chunk that was just emitted
        chunk_overlap: Configured overlap

    Returns:
        Seed text for the next chunk, or "" when there is no overlap
    """
    limit = character_overlap_words(chunk_overlap)
    if limit == 0 or not text:
        return ""
    return " ".join(text[tail_start(text, limit):].split())


def overlap_from_words(words: Sequence[str], chunk_overlap: int) -> list[str]:
    """Word-mode overlap: the last ``min(chunk_overlap, len(words))`` words."""
    if chunk_overlap <= 0 or not words:
        return []
    return list(words[-min(chunk_overlap, len(words)):])
