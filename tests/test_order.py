from __future__ import annotations

import decimal
import fractions
import itertools
import math
import random

import pytest

from ednprint import (
    Char,
    Keyword,
    NestingError,
    Record,
    Reference,
    Seq,
    Symbol,
    Tagged,
    rank,
)
from ednprint.data import Kind, kind_of
from ednprint.order import Ranker, canonical_sorted, sort_key

from .utils import Broken, Loop, Opaque, deep

K = Keyword
S = Symbol

# One value of each kind, in canonical order
ONE_OF_EACH_KIND = [
    None,
    False,
    0,
    Char("z"),
    "a",
    K("a"),
    S("a"),
    Seq([1]),
    [1],
    {1: 2},
    Record("a.B", {}),
    {1},
    Reference("a/b"),
    Tagged("t", 1),
    Opaque("o"),
]


def sign(x: int) -> int:
    return (x > 0) - (x < 0)


def test_kinds():
    assert [kind_of(x) for x in ONE_OF_EACH_KIND] == list(Kind)


def test_kind_precedence():
    shuffled = ONE_OF_EACH_KIND.copy()
    rng = random.Random(0)
    for _ in range(10):
        rng.shuffle(shuffled)
        assert canonical_sorted(shuffled) == ONE_OF_EACH_KIND


def test_numbers():
    assert rank(1, 2) < 0
    assert rank(fractions.Fraction(1, 3), 0.5) < 0
    assert rank(-1, decimal.Decimal("-0.5")) < 0
    # Same value, different types: ordered by type name
    assert rank(1, 1.0) > 0
    assert rank(1.0, 1) < 0
    assert rank(2, 2) == 0
    # 0.1 is slightly more than 1/10 as a double
    assert rank(decimal.Decimal("0.1"), 0.1) < 0


def test_non_finite_numbers():
    values = [math.nan, math.inf, 0, -math.inf, decimal.Decimal("-Infinity")]
    res = canonical_sorted(values)
    assert res[0] == -math.inf and res[1] == -math.inf
    assert res[2:4] == [0, math.inf]
    assert math.isnan(res[4])
    assert rank(math.nan, math.nan) == 0


def test_booleans_and_strings():
    assert rank(False, True) < 0
    assert rank("a", "b") < 0
    assert rank("b", "ab") > 0
    assert rank(Char("a"), Char("b")) < 0
    assert rank(Char("b"), "a") < 0


def test_names():
    # Names without a namespace come first
    assert rank(K("z"), K("a", "ns")) < 0
    assert rank(K("a", "x"), K("a", "y")) < 0
    assert rank(K("b", "x"), K("a", "x")) > 0
    assert rank(S("a"), S("a")) == 0
    assert rank(S("a"), K("b")) > 0


def test_sequential():
    assert rank([1], [1, 0]) < 0
    assert rank([1, 0], [2]) < 0
    assert rank((1,), [1]) == 0
    assert rank([], [None]) < 0
    assert rank(Seq([1]), Seq([0, 1])) > 0
    assert rank(Seq([9]), [0]) < 0


def test_sets_and_mappings():
    assert rank({1, 3}, {2}) < 0
    assert rank(frozenset(), {0}) < 0
    assert rank({1: "b"}, {1: "a"}) > 0
    assert rank({0: 1}, {1: 0}) < 0
    assert rank({2: 0, 1: 0}, {1: 0, 2: 0}) == 0


def test_records_references_tagged():
    assert rank(Record("a.B", {}), Record("a.C", {})) < 0
    assert rank(Record("a.B", {K("x"): 2}), Record("a.B", {K("x"): 1})) > 0
    assert rank(Reference("a/b"), len) < 0
    assert rank(Tagged("a", 2), Tagged("b", 1)) < 0
    assert rank(Tagged("a", 1), Tagged("a", 2)) < 0
    assert rank(Opaque("a"), Opaque("b")) < 0


SAMPLE = ONE_OF_EACH_KIND + [
    True,
    -1,
    1.5,
    math.inf,
    decimal.Decimal("1.5"),
    "b",
    K("a", "ns"),
    [0, 1],
    [],
    {0: None},
    frozenset({0, 1}),
    Tagged("t", [1]),
]


@pytest.mark.parametrize("a", SAMPLE, ids=repr)
def test_antisymmetry(a):
    for b in SAMPLE:
        assert sign(rank(a, b)) == -sign(rank(b, a))


def test_transitivity():
    for a, b, c in itertools.product(SAMPLE, repeat=3):
        if rank(a, b) <= 0 and rank(b, c) <= 0:
            assert rank(a, c) <= 0, (a, b, c)


def test_sorting_is_stable_under_shuffling():
    expected = canonical_sorted(SAMPLE)
    rng = random.Random(42)
    shuffled = SAMPLE.copy()
    for _ in range(20):
        rng.shuffle(shuffled)
        assert canonical_sorted(shuffled) == expected


def test_opaque_values_without_display():
    b = Broken()
    assert rank(b, b) == 0
    assert rank(Broken(), Opaque("x")) < 0


def test_deeply_nested_values():
    with pytest.raises(NestingError):
        rank(deep(2000, 1), deep(2000, 2))
    with pytest.raises(NestingError):
        canonical_sorted([deep(2000, 1), deep(2000, 2)])
    # Every level counts, the leaves included
    assert rank(deep(5, 1), deep(5, 2), max_depth=7) < 0
    with pytest.raises(NestingError):
        rank(deep(5, 1), deep(5, 2), max_depth=6)
    # Values of different kinds are never looked into
    assert rank(1, deep(2000, 1)) < 0


def test_recursive_values():
    with pytest.raises(NestingError, match="Recursive"):
        rank(Loop(), Loop())
    loop = Loop()
    with pytest.raises(NestingError, match="Recursive"):
        rank(loop, loop)
    a: list[object] = [1]
    a.append(a)
    b: list[object] = [1]
    b.append(b)
    with pytest.raises(NestingError, match="Recursive"):
        canonical_sorted([{1: a}, {1: b}])


def test_ranker_is_reusable():
    ranker = Ranker(max_depth=3)
    assert ranker.sorted([[2], [1]]) == [[1], [2]]
    assert ranker.sorted({2: "a", 1: "b"}.items(), key=lambda kv: kv[0]) == [
        (1, "b"),
        (2, "a"),
    ]
    with pytest.raises(NestingError):
        ranker.sorted([[[[2]]], [[[1]]]])
    # The ranker is left clean after an error
    assert ranker.rank([1], [2]) < 0


def test_sort_key():
    assert sorted([K("a"), None, 2], key=sort_key) == [None, 2, K("a")]
