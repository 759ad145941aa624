"""Sentence segmentation.

Text is cut on runs of ``.``, ``!`` and ``?``. Each fragment is trimmed,
empty fragments are dropped, and every surviving sentence is re-emitted
with a single trailing ``.`` whatever its original terminator was.

Normalising ``!``/``?`` to ``.`` is lossy and kept on purpose until the
product owner says otherwise.
"""

from __future__ import annotations

import re
from typing import Iterator

SENTENCE_TERMINATOR = "."

# Maximal runs of non-delimiter text; equivalent to splitting on [.!?]+
_FRAGMENT = re.compile(r"[^.!?]+")


def iter_sentences(text: str) -> Iterator[str]:
    """Yield normalised sentences lazily, left to right.

    Work is proportional to the text scanned so far, so a consumer that
    stops early never pays for the rest of the document.
    """
    for match in _FRAGMENT.finditer(text):
        sentence = match.group().strip()
        if sentence:
            yield sentence + SENTENCE_TERMINATOR


def split_sentences(text: str) -> list[str]:
    """Return every normalised sentence of ``text``."""
    return list(iter_sentences(text))
