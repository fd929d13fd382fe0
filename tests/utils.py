from __future__ import annotations

import re

ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(s: str) -> str:
    "Remove the ANSI color escapes from *s*"
    return ANSI_ESCAPE.sub("", s)


class Opaque:
    """A type the printer knows nothing about."""

    def __init__(self, name: str) -> None:
        self.name = name

    def __str__(self) -> str:
        return f"Opaque({self.name})"


class Broken:
    """A type that can't be turned into a string."""

    def __str__(self) -> str:
        raise RuntimeError("no display")


class Loop:
    """A tagged value whose payload contains itself."""

    def __init__(self) -> None:
        self.items: list[object] = [1]
        self.items.append(self.items)

    def edn_tag(self) -> str:
        return "loop"

    def edn_value(self) -> list[object]:
        return self.items


def deep(n: int, leaf: object) -> object:
    "*leaf* wrapped in ``n + 1`` tuples"
    for _ in range(n + 1):
        leaf = (leaf,)
    return leaf
