"""``ednprint.pretty``: The layout engine
======================================

Documents are laid out with Christian Lindig's "strictly pretty" [`pdf
<https://lindig.github.io/papers/strictly-pretty-2000.pdf>`_] algorithm.

On top of the article we support:

+ :func:`passthrough`: text that is written out but takes no room on the line
  (used for ANSI escapes),
+ :func:`align`: indent the content of a document to the column where it
  starts,
+ :data:`HARD_BREAK`: a line break that is never flattened.

"""

from __future__ import annotations

import dataclasses
import enum
import io
from typing import Iterable, TextIO

__all__ = (
    "Doc",
    "EMPTY",
    "BREAK",
    "HARD_BREAK",
    "text",
    "passthrough",
    "align",
    "group",
    "join",
    "to_string",
)


class Mode(enum.Enum):
    "How the breaks of a group are laid out"
    FLAT = enum.auto()
    BREAK = enum.auto()


class Doc:
    """Type used to represent documents

    Use the helper functions in this module instead of calling the
    constructors directly. Documents can be concatenated via the ``+``
    operator.
    """

    def __add__(self, other: Doc) -> Doc:
        return DocCons(self, other)

    def to_string(self, width: int = 80) -> str:
        """Lay out this document

        Args:
          width(int): The maximum line length we aim for.
        """
        return to_string(width, self)


@dataclasses.dataclass(slots=True)
class DocNil(Doc):
    pass


@dataclasses.dataclass(slots=True)
class DocCons(Doc):
    left: Doc
    right: Doc


@dataclasses.dataclass(slots=True)
class DocText(Doc):
    text: str


@dataclasses.dataclass(slots=True)
class DocPass(Doc):
    text: str


@dataclasses.dataclass(slots=True)
class DocAlign(Doc):
    doc: Doc


@dataclasses.dataclass(slots=True)
class DocBreak(Doc):
    text: str


@dataclasses.dataclass(slots=True)
class DocHardBreak(Doc):
    pass


@dataclasses.dataclass(slots=True)
class DocGroup(Doc):
    doc: Doc


#: The empty document
EMPTY: Doc = DocNil()

#: Rendered as a space if the enclosing group fits on the line, as a newline
#: otherwise.
BREAK: Doc = DocBreak(" ")

#: Always rendered as a newline.
HARD_BREAK: Doc = DocHardBreak()


def text(s: str) -> Doc:
    """
    Turns a string into a document

    Args:
      s(str)

    Returns:
      Doc:
    """
    return DocText(s)


def passthrough(s: str) -> Doc:
    """Text that is output verbatim but counts as zero width.

    Args:
      s(str)

    Returns:
      Doc:
    """
    return DocPass(s)


def align(doc: Doc) -> Doc:
    """Lines broken inside *doc* are indented to the column *doc* starts at.

    Args:
      doc(Doc):

    Returns:
      Doc:
    """
    return DocAlign(doc)


def group(doc: Doc) -> Doc:
    """
    Either all the breaks inside the group are rendered as spaces or they are
    all rendered as newlines. Nested groups decide on their own.

    Args:
      doc(Doc):

    Returns
      Doc:
    """
    return DocGroup(doc)


def join(sep: Doc, docs: Iterable[Doc]) -> Doc:
    """Interpose *sep* between *docs*

    >>> join(text(", "), [text("a"), text("b")]).to_string()
    'a, b'
    """
    acc = EMPTY
    first = True
    for doc in docs:
        if not first:
            acc += sep
        else:
            first = False
        acc += doc
    return acc


# NOTE: The algorithm works on a stack of (indent, mode, doc) triples. We use
# linked lists for those stacks so that pushing/popping the head stays O(1).
@dataclasses.dataclass(slots=True)
class LL:
    width: int
    mode: Mode
    doc: Doc
    _succ: LL | None = None


def fits(w: int, elts: LL | None) -> bool:
    while w >= 0:
        match elts:
            case None:
                return True
            case LL(_, _, DocNil() | DocPass(), z):
                elts = z
                continue
            case LL(i, m, DocCons(x, y), z):
                elts = LL(i, m, x, LL(i, m, y, z))
                continue
            case LL(i, m, DocAlign(x), z):
                elts = LL(i, m, x, z)
                continue
            case LL(_, _, DocText(s), z):
                w -= len(s)
                elts = z
                continue
            case LL(_, Mode.FLAT, DocBreak(s), z):
                w -= len(s)
                elts = z
                continue
            case LL(_, Mode.BREAK, DocBreak(_), _):
                return True
            case LL(_, _, DocHardBreak(), _):
                return True
            case LL(i, _, DocGroup(x), z):
                elts = LL(i, Mode.FLAT, x, z)
                continue
        # unreachable
        assert False, elts  # pragma: no cover
    return False


# Lindig's algorithm is recursive. CPython has no tail calls so this is a
# loop that writes directly to *out*. *k* is the current column.
def format(w: int, k: int, elts: LL | None, out: TextIO) -> None:
    def sline(i: int) -> None:
        out.write("\n")
        out.write(" " * i)

    stext = out.write

    while elts is not None:
        match elts:
            case LL(i, m, DocNil(), z):
                elts = z
                continue
            case LL(i, m, DocCons(x, y), z):
                elts = LL(i, m, x, LL(i, m, y, z))
                continue
            case LL(_, m, DocAlign(x), z):
                elts = LL(k, m, x, z)
                continue
            case LL(i, m, DocText(s), z):
                stext(s)
                k += len(s)
                elts = z
                continue
            case LL(i, m, DocPass(s), z):
                stext(s)
                elts = z
                continue
            case LL(i, Mode.FLAT, DocBreak(s), z):
                stext(s)
                k += len(s)
                elts = z
                continue
            case LL(i, Mode.BREAK, DocBreak(_), z) | LL(
                i, _, DocHardBreak(), z
            ):
                sline(i)
                k = i
                elts = z
                continue
            case LL(i, _, DocGroup(x), z):
                if fits(w - k, LL(i, Mode.FLAT, x, z)):
                    elts = LL(i, Mode.FLAT, x, z)
                else:
                    elts = LL(i, Mode.BREAK, x, z)
                continue
        # unreachable
        assert False, elts  # pragma: no cover


def to_string(width: int, doc: Doc) -> str:
    out = io.StringIO()
    format(width, 0, LL(0, Mode.FLAT, DocGroup(doc)), out)
    return out.getvalue()
