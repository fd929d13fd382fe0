"""Canonical representation of the builtin kinds of values."""

from __future__ import annotations

import collections
import collections.abc
import decimal
import fractions
import types
from typing import Any

from ednprint import data, pretty
from ednprint.color import Element
from ednprint.data import Char, Keyword, Record, Reference, Seq, Symbol
from ednprint.literals import render_literal

from .base import Canonicalizer, register


def _literal(element: Element) -> Any:
    def canonize_literal(value: Any, canon: Canonicalizer) -> pretty.Doc:
        return canon.color(element, render_literal(value))

    canonize_literal.__qualname__ = f"canonize_{element.name.lower()}"
    return canonize_literal


register(_literal(Element.NIL), type=types.NoneType)
register(_literal(Element.BOOLEAN), type=bool)
register(
    _literal(Element.NUMBER),
    type=(int, float, fractions.Fraction, decimal.Decimal),
)
register(_literal(Element.STRING), type=(str, Char))
register(_literal(Element.KEYWORD), type=Keyword)
register(_literal(Element.SYMBOL), type=Symbol)


@register
def _canonize_seq(
    s: Seq | collections.deque, canon: Canonicalizer
) -> pretty.Doc:
    elements = list(s)
    docs = []
    if elements and isinstance(elements[0], Symbol):
        head, *elements = elements
        docs.append(canon.color(Element.FUNCTION_SYMBOL, str(head)))
    docs.extend([canon.canonize(x) for x in elements])
    return canon.format_coll("(", docs, ")")


@register
def _canonize_vector(v: list | tuple, canon: Canonicalizer) -> pretty.Doc:
    return canon.format_coll("[", [canon.canonize(x) for x in v], "]")


@register
def _canonize_set(
    s: collections.abc.Set, canon: Canonicalizer
) -> pretty.Doc:
    docs = [canon.canonize(x) for x in canon.canonical_sorted(s)]
    return canon.format_coll("#{", docs, "}")


@register
def _canonize_mapping(
    m: collections.abc.Mapping, canon: Canonicalizer
) -> pretty.Doc:
    return canon.format_map(m)


@register
def _canonize_record(r: Record, canon: Canonicalizer) -> pretty.Doc:
    canon.check_representable(r)
    type_name, fields = data.record_parts(r)
    return canon.record(type_name, fields)


@register(
    type=(
        Reference,
        types.FunctionType,
        types.BuiltinFunctionType,
        types.ModuleType,
        type,
    )
)
def _canonize_reference(ref: Any, canon: Canonicalizer) -> pretty.Doc:
    canon.check_representable(ref)
    return canon.color(Element.DELIMITER, "#'") + canon.color(
        Element.SYMBOL, data.reference_name(ref)
    )
