"""
``ednprint.ansi``: ANSI escape sequences
========================================

Style names are the ones understood by :mod:`pygments.console` (``bold``,
``underline``, ``red``, ``brightred``...).
"""

from __future__ import annotations

from typing import Iterable

from pygments import console

__all__ = ("STYLES", "esc", "reset")

#: All the valid style names
STYLES: frozenset[str] = frozenset(k for k in console.codes if k)


def esc(styles: Iterable[str]) -> str:
    """The escape sequence that turns on all the *styles*

    >>> esc(["bold", "red"])
    '\\x1b[01m\\x1b[31m'
    """
    return "".join(console.codes[s] for s in styles)


def reset() -> str:
    "Turn off all the styles"
    return console.reset_color()
