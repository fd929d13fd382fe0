"""
``ednprint.data``: The value model
==================================

EDN has a few kinds of values that have no direct equivalent in python. This
module provides classes for them and the function :func:`kind_of` that
classifies any python value.

+ :class:`Keyword` and :class:`Symbol`: ``:ns/name`` and ``ns/name``
+ :class:`Char`: a single character (``\\a``)
+ :class:`Seq`: a list (``(f 1 2)``), as opposed to a vector (``[1 2]``)
+ :class:`Record`: a named mapping (``#my.Type{:a 1}``)
+ :class:`Reference`: a named binding (``#'clojure.core/map``)
+ :class:`Tagged`: a tagged literal (``#inst "2022-01-01T00:00:00Z"``)

Types that can't be changed can be given a tag via :func:`register_tag`.
"""

from __future__ import annotations

import collections
import collections.abc
import dataclasses
import decimal
import enum
import fractions
import types
import typing
import weakref
from typing import Any, Callable, Protocol, Type, TypeAlias, TypeVar

from . import utils

T = TypeVar("T")

__all__ = (
    "Kind",
    "Keyword",
    "Symbol",
    "Char",
    "Seq",
    "Record",
    "Reference",
    "Tagged",
    "TaggedValue",
    "register_tag",
    "as_tagged",
    "kind_of",
    "is_collection",
)


class Kind(enum.IntEnum):
    """The kinds of values we know how to print.

    The order of the members is the order used to sort values of different
    kinds.
    """

    NIL = enum.auto()
    BOOLEAN = enum.auto()
    NUMBER = enum.auto()
    CHARACTER = enum.auto()
    STRING = enum.auto()
    KEYWORD = enum.auto()
    SYMBOL = enum.auto()
    SEQUENCE = enum.auto()
    VECTOR = enum.auto()
    MAPPING = enum.auto()
    RECORD = enum.auto()
    SET = enum.auto()
    REFERENCE = enum.auto()
    TAGGED = enum.auto()
    OPAQUE = enum.auto()


COLLECTIONS = frozenset(
    (Kind.SEQUENCE, Kind.VECTOR, Kind.MAPPING, Kind.RECORD, Kind.SET)
)


def _check_name(name: str, namespace: str | None) -> None:
    if not isinstance(name, str) or not name:
        raise ValueError(f"Invalid name: {name!r}")
    if namespace is not None and (
        not isinstance(namespace, str) or not namespace
    ):
        raise ValueError(f"Invalid namespace: {namespace!r}")


@dataclasses.dataclass(frozen=True, slots=True)
class Keyword:
    """An EDN keyword

    >>> str(Keyword("name", "user"))
    ':user/name'
    """

    name: str
    namespace: str | None = None

    def __post_init__(self) -> None:
        _check_name(self.name, self.namespace)

    def __str__(self) -> str:
        if self.namespace is None:
            return f":{self.name}"
        return f":{self.namespace}/{self.name}"


@dataclasses.dataclass(frozen=True, slots=True)
class Symbol:
    """An EDN symbol

    >>> str(Symbol("map", "clojure.core"))
    'clojure.core/map'
    """

    name: str
    namespace: str | None = None

    def __post_init__(self) -> None:
        _check_name(self.name, self.namespace)

    def __str__(self) -> str:
        if self.namespace is None:
            return self.name
        return f"{self.namespace}/{self.name}"


class Char(str):
    """A single character.

    Python doesn't distinguish characters from strings of length one.
    """

    __slots__ = ()

    def __new__(cls, c: str) -> Char:
        if len(c) != 1:
            raise ValueError(f"Expected a single character, got {c!r}")
        return super().__new__(cls, c)


class Seq(tuple[Any, ...]):
    """A list (in the lisp sense of the word). Printed with parentheses.

    >>> Seq([Symbol("inc"), 1])
    Seq((Symbol(name='inc', namespace=None), 1))
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return f"Seq({tuple.__repr__(self)})"


@dataclasses.dataclass(frozen=True, slots=True)
class Record:
    """A mapping with a type name

    Instances of dataclasses are also printed as records.
    """

    type_name: str
    fields: collections.abc.Mapping[Any, Any]


@dataclasses.dataclass(frozen=True, slots=True)
class Reference:
    "A named binding (a var in clojure)."

    name: str


@typing.runtime_checkable
class TaggedValue(Protocol):
    """Values that know how to be represented as a tagged literal."""

    def edn_tag(self) -> str:  # pragma: no cover
        ...

    def edn_value(self) -> Any:  # pragma: no cover
        ...


@dataclasses.dataclass(frozen=True, slots=True)
class Tagged:
    """A tagged literal

    >>> Tagged("inst", "2022-01-01T00:00:00Z").edn_tag()
    'inst'
    """

    tag: str
    payload: Any

    def edn_tag(self) -> str:
        return self.tag

    def edn_value(self) -> Any:
        return self.payload


TagFn: TypeAlias = Callable[[Any], tuple[str, Any]]

TAG_TABLE = weakref.WeakKeyDictionary[Type[Any], TagFn]()


def register_tag(
    ty: Type[T], tag: str, payload: Callable[[T], Any]
) -> None:
    """Give a tag to values of type *ty*

    This is the way to make a type that can't implement :class:`TaggedValue`
    print as a tagged literal. Subclasses of *ty* are covered too.

    Args:
      ty: The type of the values.
      tag: The tag to use (without the leading ``#``).
      payload: Function that returns the value that follows the tag.
    """

    def explode(v: T) -> tuple[str, Any]:
        return tag, payload(v)

    TAG_TABLE[ty] = explode


def as_tagged(value: Any) -> tuple[str, Any] | None:
    """Return the tag and payload of *value* if it has one."""
    if isinstance(value, TaggedValue) and not isinstance(value, type):
        return value.edn_tag(), value.edn_value()
    explode = utils.lookup_type(TAG_TABLE, type(value))
    if explode is None:
        return None
    return explode(value)


KIND_TABLE: dict[Type[Any], Kind] = {
    types.NoneType: Kind.NIL,
    bool: Kind.BOOLEAN,
    int: Kind.NUMBER,
    float: Kind.NUMBER,
    fractions.Fraction: Kind.NUMBER,
    decimal.Decimal: Kind.NUMBER,
    Char: Kind.CHARACTER,
    str: Kind.STRING,
    Keyword: Kind.KEYWORD,
    Symbol: Kind.SYMBOL,
    Seq: Kind.SEQUENCE,
    collections.deque: Kind.SEQUENCE,
    list: Kind.VECTOR,
    tuple: Kind.VECTOR,
    Record: Kind.RECORD,
    Reference: Kind.REFERENCE,
    types.FunctionType: Kind.REFERENCE,
    types.BuiltinFunctionType: Kind.REFERENCE,
    types.ModuleType: Kind.REFERENCE,
    type: Kind.REFERENCE,
    # Abstract classes go last: they are only checked when nothing in the MRO
    # matched.
    collections.abc.Mapping: Kind.MAPPING,
    collections.abc.Set: Kind.SET,
}


def kind_of(value: Any) -> Kind:
    """Classify *value*

    >>> kind_of({1: 2})
    <Kind.MAPPING: 10>
    >>> kind_of(Tagged("uuid", "00000000-0000-0000-0000-000000000000"))
    <Kind.TAGGED: 14>
    """
    if as_tagged(value) is not None:
        return Kind.TAGGED
    kind = utils.lookup_type(KIND_TABLE, type(value))
    if kind is not None:
        return kind
    if dataclasses.is_dataclass(value):
        return Kind.RECORD
    return Kind.OPAQUE


def is_collection(value: Any) -> bool:
    return kind_of(value) in COLLECTIONS


def reference_name(value: Any) -> str:
    "The name printed after ``#'`` for a value of kind REFERENCE"
    if isinstance(value, Reference):
        return value.name
    if isinstance(value, types.ModuleType):
        return value.__name__
    module = getattr(value, "__module__", None)
    if module is None or module == "builtins":
        return str(value.__qualname__)
    return f"{module}/{value.__qualname__}"


def record_parts(value: Any) -> tuple[str, collections.abc.Mapping[Any, Any]]:
    "The type name and fields of a value of kind RECORD"
    if isinstance(value, Record):
        return value.type_name, value.fields
    return utils.type_name(type(value)), {
        Keyword(f.name): getattr(value, f.name)
        for f in dataclasses.fields(value)
    }
