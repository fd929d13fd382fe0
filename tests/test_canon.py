from __future__ import annotations

import collections.abc

import pytest

from ednprint import (
    Keyword,
    Options,
    pprint_str,
    register,
    register_tag,
)
from ednprint.canon import Canonicalizer, find_handler, handlers

from .utils import Opaque


class Point:
    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def __str__(self) -> str:
        return f"<{self.x}, {self.y}>"


class Point3(Point):
    pass


class Money:
    def __init__(self, amount: int, currency: str) -> None:
        self.amount = amount
        self.currency = currency

    def edn_tag(self) -> str:
        return "money"

    def edn_value(self) -> list[object]:
        return [self.amount, self.currency]


class TaggedList(list):
    def edn_tag(self) -> str:
        return "my/list"

    def edn_value(self) -> list[object]:
        return list(self)


def test_register_infers_type():
    assert pprint_str(Point(1, 2)).startswith("#<")

    @register
    def _canonize_point(p: Point, canon: Canonicalizer):
        return canon.tagged("point", [p.x, p.y])

    assert find_handler(Point) is _canonize_point
    assert pprint_str(Point(1, 2)) == "#point [1 2]"
    # Subclasses use the handler of their parent class
    assert pprint_str(Point3(1, 2)) == "#point [1 2]"
    # Registered types are representable
    assert pprint_str(Point(1, 2), strict=True) == "#point [1 2]"


def test_register_most_specific():
    @register
    def _canonize_point(p: Point, canon: Canonicalizer):
        return canon.tagged("point", [p.x, p.y])

    @register
    def _canonize_point3(p: Point3, canon: Canonicalizer):
        return canon.tagged("point3", [p.x, p.y])

    assert pprint_str([Point(1, 2), Point3(3, 4)]) == (
        "[#point [1 2] #point3 [3 4]]"
    )


def test_register_explicit_type():
    @register(type=(Point, Opaque))
    def _canonize(v, canon):
        return canon.tagged("obj", str(v))

    assert pprint_str(Point(1, 2)) == '#obj "<1, 2>"'
    assert pprint_str(Opaque("x")) == '#obj "Opaque(x)"'


def test_register_union():
    @register
    def _canonize(v: Point | Opaque, canon: Canonicalizer):
        return canon.tagged("either", None)

    assert find_handler(Point) is _canonize
    assert find_handler(Opaque) is _canonize
    assert pprint_str(Opaque("x")) == "#either nil"


def test_register_errors():
    with pytest.raises(ValueError):

        @register
        def _no_annotation(v, canon):
            pass  # pragma: no cover

    with pytest.raises(ValueError):

        @register
        def _one_arg(v: Point):
            pass  # pragma: no cover


def test_builtin_handlers():
    assert find_handler(bool) is not find_handler(int)
    assert find_handler(dict) is handlers._canonize_mapping
    assert find_handler(collections.OrderedDict) is handlers._canonize_mapping
    assert find_handler(frozenset) is handlers._canonize_set
    assert find_handler(type({}.keys())) is handlers._canonize_set
    assert find_handler(bytes) is None
    assert find_handler(Point) is None


def test_tagged_value_protocol():
    assert pprint_str(Money(10, "EUR")) == '#money [10 "EUR"]'
    assert pprint_str(Money(10, "EUR"), strict=True) == '#money [10 "EUR"]'
    assert pprint_str({Keyword("price"): Money(10, "EUR")}) == (
        '{:price #money [10 "EUR"]}'
    )


def test_tag_takes_precedence_over_type():
    assert pprint_str(TaggedList([1, 2])) == "#my/list [1 2]"

    @register
    def _canonize_point(p: Point, canon: Canonicalizer):
        return canon.tagged("point", [p.x, p.y])

    register_tag(Point, "pt", lambda p: {Keyword("x"): p.x})
    assert pprint_str(Point(1, 2)) == "#pt {:x 1}"
    assert pprint_str(Point3(1, 2)) == "#pt {:x 1}"


def test_tagged_value_in_mapping_uses_space():
    # Tagged values are never treated as collections, even if their payload
    # is one
    v = {Keyword("a"): TaggedList([1, 2])}
    assert pprint_str(v, width=10) == "{:a #my/list\n [1 2]}"


def test_canonicalizer_direct():
    canon = Canonicalizer(Options(map_delimiter=","))
    assert canon.canonize({1: 2, 3: 4}).to_string(80) == "{1 2, 3 4}"
    assert canon.canonize([1]).to_string(80) == "[1]"
