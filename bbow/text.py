"""Tokenizer and normalizer shared by extraction and lookup.

Both paths must normalize identically, otherwise a word counted as
"hello" could never be found by a query for "Hello".
"""

from __future__ import annotations

import re
from collections.abc import Iterator

# Typographic apostrophe (U+2019) is accepted and folded to "'".
JOINERS = "'’-"

# Maximal runs of letters, digits, apostrophes and hyphens.  Everything
# else (whitespace, sentence punctuation, quotes, brackets) separates.
CANDIDATE_RE = re.compile(r"(?:[^\W_]|['’-])+")

# Letter runs with single apostrophes/hyphens strictly inside.  \w also
# admits numerals outside Nd (², ½, ③, Ⅻ), so pieces are re-checked
# with str.isalpha in is_word.
WORD_RE = re.compile(r"[^\W\d_]+(?:['-][^\W\d_]+)*")
JOINER_RE = re.compile(r"['-]")


def normalize(word: str) -> str:
    """Lowercase a word.  Already-normal input is returned as-is."""
    if not isinstance(word, str):
        raise TypeError(f"expected str, got {type(word).__name__}")
    if "’" in word:
        word = word.replace("’", "'")
    if word.islower():
        return word
    return word.lower()


def is_word(candidate: str) -> bool:
    candidate = candidate.replace("’", "'")
    if WORD_RE.fullmatch(candidate) is None:
        return False
    return all(piece.isalpha() for piece in JOINER_RE.split(candidate))


def iter_words(text: str) -> Iterator[str]:
    """Yield normalized words from ``text`` in order of appearance.

    Candidates are trimmed of leading/trailing joiners, then kept only
    if what remains is a valid word.  Numbers, mixed alphanumerics and
    punctuation-only runs are skipped silently.
    """
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    for match in CANDIDATE_RE.finditer(text):
        candidate = match.group().strip(JOINERS)
        if candidate and is_word(candidate):
            yield normalize(candidate)


def tokenize(text: str) -> list[str]:
    """Split → trim joiners → drop non-words → lowercase."""
    return list(iter_words(text))
