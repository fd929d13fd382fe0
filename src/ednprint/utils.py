from __future__ import annotations

import pydoc
from typing import Any, Mapping, TypeVar

cram = pydoc.cram

V = TypeVar("V")


def type_name(ty: type[Any]) -> str:
    """Fully qualified name of a type (builtins are left unqualified)

    >>> type_name(int)
    'int'
    >>> import fractions
    >>> type_name(fractions.Fraction)
    'fractions.Fraction'
    """
    if ty.__module__ == "builtins":
        return ty.__qualname__
    return f"{ty.__module__}.{ty.__qualname__}"


def lookup_type(table: Mapping[type[Any], V], ty: type[Any]) -> V | None:
    """Find the entry of *table* that is the most specific for *ty*.

    Classes in the MRO of *ty* are tried first (most derived first), then the
    abstract base classes in *table* in the order they were added.

    >>> import collections.abc
    >>> table = {object: "object", collections.abc.Mapping: "mapping"}
    >>> lookup_type(table, bool)
    'object'
    >>> lookup_type({collections.abc.Mapping: "mapping"}, dict)
    'mapping'
    """
    for cls in ty.__mro__:
        found = table.get(cls)
        if found is not None:
            return found
    for cls, found in table.items():
        if isinstance(cls, type) and issubclass(ty, cls):
            return found
    return None


def display(value: Any) -> str:
    """Best effort human readable representation of *value*

    Falls back on the default ``repr`` if ``str(value)`` fails.

    >>> class Broken:
    ...     def __str__(self):
    ...         raise RuntimeError("no display")
    >>> "Broken object at 0x" in display(Broken())
    True
    """
    try:
        return str(value)
    except Exception:
        return object.__repr__(value)
