"""Canonical, colored pretty printing of python values as EDN"""
from __future__ import annotations

from importlib import metadata

from . import tagged  # noqa: F401
from .canon import register
from .color import Element, color_text
from .data import (
    Char,
    Keyword,
    Record,
    Reference,
    Seq,
    Symbol,
    Tagged,
    TaggedValue,
    register_tag,
)
from .errors import ConfigurationError, NestingError, UnrepresentableValue
from .options import (
    Options,
    configure,
    scoped,
    set_color_scheme,
    set_map_commas,
    with_color,
)
from .order import rank
from .printer import canonize, cprint, cprint_str, pprint, pprint_str

# https://packaging.python.org/en/latest/guides/single-sourcing-package-version/
__version__ = metadata.version(__name__)

__all__ = (
    "Char",
    "ConfigurationError",
    "Element",
    "Keyword",
    "NestingError",
    "Options",
    "Record",
    "Reference",
    "Seq",
    "Symbol",
    "Tagged",
    "TaggedValue",
    "UnrepresentableValue",
    "canonize",
    "color_text",
    "configure",
    "cprint",
    "cprint_str",
    "scoped",
    "pprint",
    "pprint_str",
    "rank",
    "register",
    "register_tag",
    "set_color_scheme",
    "set_map_commas",
    "with_color",
)
