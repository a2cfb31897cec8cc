import numpy as np
import pytest

from bbow.bag import Bag
from bbow.similarity import cosine_similarity, to_vectors


def test_to_vectors_aligns_vocabulary():
    vocab, va, vb = to_vectors(Bag("cat cat dog"), Bag("dog emu"))
    assert vocab == ["cat", "dog", "emu"]
    np.testing.assert_array_equal(va, [2.0, 1.0, 0.0])
    np.testing.assert_array_equal(vb, [0.0, 1.0, 1.0])


def test_identical_bags():
    assert cosine_similarity(Bag("a b b"), Bag("A B B")) == pytest.approx(1.0)


def test_disjoint_bags():
    assert cosine_similarity(Bag("a b"), Bag("c d")) == 0.0


def test_partial_overlap():
    # [1, 1, 0] . [0, 1, 1] / (sqrt2 * sqrt2)
    assert cosine_similarity(Bag("a b"), Bag("b c")) == pytest.approx(0.5)


def test_empty_bag_scores_zero():
    assert cosine_similarity(Bag(), Bag("word")) == 0.0
    assert cosine_similarity(Bag(), Bag()) == 0.0


def test_symmetric():
    a, b = Bag("the cat sat on the mat"), Bag("the dog sat")
    assert cosine_similarity(a, b) == pytest.approx(cosine_similarity(b, a))
