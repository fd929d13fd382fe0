"""
``ednprint.printer``: Printing functions
========================================

    >>> from ednprint.data import Keyword
    >>> pprint({Keyword("b"): 2, Keyword("a"): [1, 2]})
    {:a [1 2] :b 2}

All the functions take the fields of :class:`~ednprint.options.Options` as
keyword arguments to override the current options for one call::

    >>> pprint({Keyword("b"): 2, Keyword("a"): [1, 2]}, width=8)
    {:a
     [1 2]
     :b 2}
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

from . import canon, options, pretty

__all__ = ("canonize", "pprint", "pprint_str", "cprint", "cprint_str")


def canonize(value: Any, **overrides: Any) -> pretty.Doc:
    """Convert *value* into a document for the layout engine.

    Raises:
      UnrepresentableValue: in strict mode, if *value* contains a value that
        has no canonical representation.
      NestingError: if *value* is recursive or too deeply nested.
    """
    opts = options.current().replace(**overrides)
    return canon.Canonicalizer(opts).canonize(value)


def pprint_str(value: Any, **overrides: Any) -> str:
    "Pretty print *value* to a string."
    opts = options.current().replace(**overrides)
    doc = canon.Canonicalizer(opts).canonize(value)
    return doc.to_string(opts.width).rstrip("\n")


def pprint(value: Any, file: TextIO | None = None, **overrides: Any) -> None:
    "Pretty print *value* to *file* (defaults to :data:`sys.stdout`)."
    if file is None:
        file = sys.stdout
    file.write(pprint_str(value, **overrides))
    file.write("\n")


def cprint_str(value: Any, **overrides: Any) -> str:
    "Like :func:`pprint_str` but with colored output."
    return pprint_str(value, **{**overrides, "colored": True})


def cprint(value: Any, file: TextIO | None = None, **overrides: Any) -> None:
    "Like :func:`pprint` but with colored output."
    pprint(value, file, **{**overrides, "colored": True})
