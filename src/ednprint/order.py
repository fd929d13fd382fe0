"""
``ednprint.order``: Canonical ordering
======================================

:func:`rank` is a total order over all the values we can print, whatever
their kind. It is used to print sets and mappings in a deterministic order::

    >>> canonical_sorted([Symbol("b"), 2, "a", None, 1.5, Keyword("c")])
    [None, 1.5, 2, 'a', Keyword(name='c', namespace=None), \
Symbol(name='b', namespace=None)]

Values of different kinds are ordered according to :class:`~ednprint.data.Kind`.

Collections are compared element by element so, like printing, comparing
values is bounded: values nested more than ``max_depth`` levels deep or that
contain themselves raise :class:`~ednprint.errors.NestingError`.
"""

from __future__ import annotations

import decimal
import fractions
import functools
import logging
import math
from typing import Any, Callable, Iterable

from . import data, utils
from .data import Keyword, Kind, Symbol
from .errors import NestingError
from .options import DEFAULT_MAX_DEPTH

__all__ = ("Ranker", "rank", "sort_key", "canonical_sorted")

logger = logging.getLogger(__name__)


def _cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def _number_key(n: Any) -> tuple[int, fractions.Fraction]:
    """Exact position of *n* on the number line.

    Non finite values go at both ends with ``nan`` after ``+inf``.
    """
    if isinstance(n, decimal.Decimal):
        if n.is_nan():
            return 3, fractions.Fraction(0)
        if n.is_infinite():
            return (0 if n < 0 else 2), fractions.Fraction(0)
    elif isinstance(n, float):
        if math.isnan(n):
            return 3, fractions.Fraction(0)
        if math.isinf(n):
            return (0 if n < 0 else 2), fractions.Fraction(0)
    return 1, fractions.Fraction(n)


def _rank_numbers(a: Any, b: Any) -> int:
    return _cmp(_number_key(a), _number_key(b)) or _cmp(
        utils.type_name(type(a)), utils.type_name(type(b))
    )


def _rank_names(a: Keyword | Symbol, b: Keyword | Symbol) -> int:
    return _cmp(
        (a.namespace is not None, a.namespace or "", a.name),
        (b.namespace is not None, b.namespace or "", b.name),
    )


def _rank_opaque(a: Any, b: Any) -> int:
    return _cmp(
        (utils.type_name(type(a)), utils.display(a)),
        (utils.type_name(type(b)), utils.display(b)),
    )


def _entry_key(kv: tuple[Any, Any]) -> Any:
    return kv[0]


class Ranker:
    """Compares values, keeping track of the collections being compared.

    A ranker is created for every sort: it refuses to go more than
    *max_depth* levels deep and detects values that contain themselves.
    """

    max_depth: int
    _visiting: list[tuple[int, int]]

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        self.max_depth = max_depth
        self._visiting = []
        #: Key function to use with :func:`sorted`
        self.key = functools.cmp_to_key(self.rank)

    def rank(self, a: Any, b: Any) -> int:
        """Compare two values

        Returns:
          A negative number if *a* comes before *b*, a positive one if it
          comes after and 0 if they are equivalent.

        Raises:
          NestingError: if the values are recursive or too deeply nested.
        """
        ka = data.kind_of(a)
        kb = data.kind_of(b)
        if ka != kb:
            return _cmp(ka, kb)
        pair = (id(a), id(b))
        if pair in self._visiting:
            logger.debug("Recursive value of type %s", type(a).__name__)
            raise NestingError("Recursive value found")
        if len(self._visiting) >= self.max_depth:
            logger.debug("Maximum depth reached (%d)", self.max_depth)
            raise NestingError(
                f"Value nested more than {self.max_depth} levels deep"
            )
        self._visiting.append(pair)
        try:
            return self._rank_same_kind(ka, a, b)
        finally:
            self._visiting.pop()

    def sorted(
        self, values: Iterable[Any], key: Callable[[Any], Any] | None = None
    ) -> list[Any]:
        "Sort *values* (or their *key*) in canonical order"
        if key is None:
            return sorted(values, key=self.key)
        return sorted(values, key=lambda v: self.key(key(v)))

    def _rank_same_kind(self, kind: Kind, a: Any, b: Any) -> int:
        match kind:
            case Kind.NIL:
                return 0
            case Kind.BOOLEAN | Kind.CHARACTER | Kind.STRING:
                return _cmp(a, b)
            case Kind.NUMBER:
                return _rank_numbers(a, b)
            case Kind.KEYWORD | Kind.SYMBOL:
                return _rank_names(a, b)
            case Kind.SEQUENCE | Kind.VECTOR:
                return self._rank_lexicographic(a, b)
            case Kind.MAPPING:
                return self._rank_entries(a, b)
            case Kind.RECORD:
                a_name, a_fields = data.record_parts(a)
                b_name, b_fields = data.record_parts(b)
                return _cmp(a_name, b_name) or self._rank_entries(
                    a_fields, b_fields
                )
            case Kind.SET:
                return self._rank_lexicographic(
                    self.sorted(a), self.sorted(b)
                )
            case Kind.REFERENCE:
                return _cmp(data.reference_name(a), data.reference_name(b))
            case Kind.TAGGED:
                a_tag, a_payload = data.as_tagged(a)  # type: ignore[misc]
                b_tag, b_payload = data.as_tagged(b)  # type: ignore[misc]
                return _cmp(a_tag, b_tag) or self.rank(a_payload, b_payload)
            case Kind.OPAQUE:
                return _rank_opaque(a, b)
        # unreachable
        assert False, kind  # pragma: no cover

    def _rank_lexicographic(self, a: Any, b: Any) -> int:
        for x, y in zip(a, b):
            res = self.rank(x, y)
            if res != 0:
                return res
        return _cmp(len(a), len(b))

    def _rank_entries(self, a: Any, b: Any) -> int:
        a_entries = self.sorted(a.items(), key=_entry_key)
        b_entries = self.sorted(b.items(), key=_entry_key)
        for (a_key, a_value), (b_key, b_value) in zip(a_entries, b_entries):
            res = self.rank(a_key, b_key) or self.rank(a_value, b_value)
            if res != 0:
                return res
        return _cmp(len(a_entries), len(b_entries))


def rank(a: Any, b: Any, max_depth: int = DEFAULT_MAX_DEPTH) -> int:
    """Compare two values

    Returns:
      A negative number if *a* comes before *b*, a positive one if it comes
      after and 0 if they are equivalent.

    Raises:
      NestingError: if the values are recursive or nested more than
        *max_depth* levels deep.

    >>> rank(1, "1")
    -1
    >>> rank([1, 2], [1])
    1
    """
    return Ranker(max_depth).rank(a, b)


#: Key function to use with :func:`sorted`
sort_key = functools.cmp_to_key(rank)


def canonical_sorted(
    values: Iterable[Any], max_depth: int = DEFAULT_MAX_DEPTH
) -> list[Any]:
    "Sort *values* in canonical order"
    return Ranker(max_depth).sorted(values)
