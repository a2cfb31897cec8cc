"""Big bag of words: a multiset of normalized words with occurrence counts.

A bag starts empty and only grows.  Each ``extend_from_text`` call runs
the tokenizer over a text and merges the resulting words into the bag,
so a bag built from several documents holds their combined counts.
Counts are never decremented and words are never removed.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterator

from bbow.text import iter_words, normalize

logger = logging.getLogger(__name__)


class Bag:
    def __init__(self, text: str | None = None):
        self._counts: Counter[str] = Counter()
        self._total = 0
        if text is not None:
            self.extend_from_text(text)

    @classmethod
    def new(cls) -> Bag:
        """Make a new empty bag."""
        return cls()

    # ── Building ───────────────────────────────────────────────────

    def extend_from_text(self, text: str) -> Bag:
        """Add every valid word in ``text`` to this bag.

        Returns the bag itself so calls can be chained to cover
        several texts::

            bag = Bag().extend_from_text("Hello world.").extend_from_text("Hi!")
        """
        extracted = 0
        for word in iter_words(text):
            self._counts[word] += 1
            extracted += 1
        self._total += extracted

        logger.debug(
            "extracted %d words from %d chars (distinct=%d, total=%d)",
            extracted,
            len(text),
            len(self),
            self.count(),
        )
        return self

    def copy(self) -> Bag:
        clone = type(self)()
        clone._counts = self._counts.copy()
        clone._total = self._total
        return clone

    # ── Queries ────────────────────────────────────────────────────

    def match_count(self, word: str) -> int:
        """Occurrences of ``word``, matched case-insensitively.  0 if absent."""
        return self._counts.get(normalize(word), 0)

    def count(self) -> int:
        """Total occurrences: repeated words are counted each time."""
        return self._total

    def is_empty(self) -> bool:
        return not self._counts

    def words(self) -> Iterator[str]:
        """Distinct words in sorted order."""
        return iter(sorted(self._counts))

    def items(self) -> Iterator[tuple[str, int]]:
        return iter(sorted(self._counts.items()))

    def most_common(self, n: int | None = None) -> list[tuple[str, int]]:
        """``(word, count)`` pairs, highest count first, ties alphabetical."""
        ranked = sorted(self._counts.items(), key=lambda x: (-x[1], x[0]))
        return ranked if n is None else ranked[: max(n, 0)]

    def to_dict(self) -> dict[str, int]:
        return dict(self._counts)

    # ── Dunder protocol ────────────────────────────────────────────

    def __len__(self) -> int:
        # Number of distinct words, not total occurrences.
        return len(self._counts)

    def __iter__(self) -> Iterator[str]:
        return self.words()

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        return normalize(word) in self._counts

    def __repr__(self) -> str:
        return f"Bag(distinct={len(self)}, total={self.count()})"
