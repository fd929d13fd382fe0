"""
``ednprint.color``: Syntax highlighting
=======================================

A color scheme maps syntax elements (:class:`Element`) to a list of style names
(see :mod:`ednprint.ansi`). Elements that are missing from the scheme, or
mapped to an empty list, are not colored.
"""

from __future__ import annotations

import enum
import types
from typing import TYPE_CHECKING, Mapping, Sequence

from . import ansi, pretty

if TYPE_CHECKING:  # pragma: no cover
    from .options import Options

__all__ = ("Element", "DEFAULT_COLOR_SCHEME", "color_doc", "color_text")


class Element(enum.Enum):
    "Syntax elements that can be colored."

    # syntax elements
    DELIMITER = "delimiter"
    TAG = "tag"

    # primitive values
    NIL = "nil"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    KEYWORD = "keyword"
    SYMBOL = "symbol"

    # special types
    FUNCTION_SYMBOL = "function-symbol"
    CLASS_DELIMITER = "class-delimiter"
    CLASS_NAME = "class-name"


ColorScheme = Mapping[Element, Sequence[str]]

DEFAULT_COLOR_SCHEME: ColorScheme = types.MappingProxyType(
    {
        Element.DELIMITER: ("bold", "red"),
        Element.TAG: ("red",),
        Element.NIL: ("bold", "black"),
        Element.BOOLEAN: ("green",),
        Element.NUMBER: ("cyan",),
        Element.STRING: ("bold", "magenta"),
        Element.KEYWORD: ("bold", "yellow"),
        Element.SYMBOL: (),
        Element.FUNCTION_SYMBOL: ("bold", "blue"),
        Element.CLASS_DELIMITER: ("blue",),
        Element.CLASS_NAME: ("bold", "blue"),
    }
)


def _styles(element: Element, opts: Options) -> Sequence[str]:
    if not opts.colored:
        return ()
    return opts.color_scheme.get(element, ())


def color_doc(
    element: Element, doc: pretty.Doc, opts: Options
) -> pretty.Doc:
    """Wrap *doc* in the escapes for *element*

    The escapes take no room on the line so they don't change how the
    document is laid out.
    """
    styles = _styles(element, opts)
    if not styles:
        return doc
    return (
        pretty.passthrough(ansi.esc(styles))
        + doc
        + pretty.passthrough(ansi.reset())
    )


def color_text(
    element: Element, text: str, opts: Options | None = None
) -> str:
    """Color *text* according to the active color scheme.

    This is useful to produce output that matches the printed data but isn't
    printed by this library. Text is only colored if colored output is turned
    on.
    """
    if opts is None:
        from . import options

        opts = options.current()
    styles = _styles(element, opts)
    if not styles:
        return text
    return ansi.esc(styles) + text + ansi.reset()
