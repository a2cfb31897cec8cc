"""Cosine similarity between bags, over aligned count vectors."""

from __future__ import annotations

import numpy as np

from bbow.bag import Bag


def to_vectors(a: Bag, b: Bag) -> tuple[list[str], np.ndarray, np.ndarray]:
    """Project two bags onto their shared sorted vocabulary.

    Returns (vocab, va, vb) where va[i] / vb[i] are the counts of
    vocab[i] in each bag (0 where a bag lacks the word).
    """
    vocab = sorted(set(a.words()) | set(b.words()))
    va = np.array([a.match_count(w) for w in vocab], dtype=np.float64)
    vb = np.array([b.match_count(w) for w in vocab], dtype=np.float64)
    return vocab, va, vb


def cosine_similarity(a: Bag, b: Bag) -> float:
    """Cosine of the angle between the two count vectors.

    0.0 if either bag is empty.
    """
    _, va, vb = to_vectors(a, b)
    norm_a = np.linalg.norm(va)
    norm_b = np.linalg.norm(vb)
    if norm_a == 0 or norm_b == 0:
        return 0.0
    return float(np.dot(va, vb) / (norm_a * norm_b))
