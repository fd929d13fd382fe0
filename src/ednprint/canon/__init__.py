"""

:mod:`~ednprint.canon` turns python values into documents for the layout
engine.

Every value gets exactly one representation, picked in this order:

1. values with a tag (see :class:`~ednprint.data.TaggedValue` and
   :func:`~ednprint.data.register_tag`) are printed as tagged literals,
2. the handler registered (via :func:`register`) for the most specific class
   of the value,
3. instances of dataclasses are printed as records,
4. everything else is printed as ``#<type.Name str(value)>``.

Supported types
---------------

+ :const:`None`, :class:`bool`, :class:`int`, :class:`float`,
  :class:`~fractions.Fraction`, :class:`~decimal.Decimal`, :class:`str`
+ :class:`~ednprint.data.Char`, :class:`~ednprint.data.Keyword`,
  :class:`~ednprint.data.Symbol`
+ :class:`list` and :class:`tuple` (vectors), :class:`~ednprint.data.Seq` and
  :class:`~collections.deque` (lists)
+ sets and mappings (anything implementing the
  :class:`~collections.abc.Set` and :class:`~collections.abc.Mapping` ABCs)
+ :class:`~ednprint.data.Record` and dataclasses
+ :class:`~ednprint.data.Reference`, functions, classes and modules

"""
from __future__ import annotations

from . import handlers  # noqa: F401
from .base import DISPATCH_TABLE, Canonicalizer, find_handler, register

__all__ = ("DISPATCH_TABLE", "Canonicalizer", "find_handler", "register")
