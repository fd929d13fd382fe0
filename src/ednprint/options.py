"""
``ednprint.options``: Printer configuration
===========================================

The printer is configured through an immutable :class:`Options` value. A
process wide default is used by the functions in :mod:`ednprint.printer`; it
can be changed with :func:`configure`, :func:`set_color_scheme` and
:func:`set_map_commas`, or overridden for a block of code::

    >>> from ednprint import printer
    >>> with scoped(map_delimiter=","):
    ...     printer.pprint_str({1: 2, 3: 4})
    '{1 2, 3 4}'

Overrides are stored in a :class:`contextvars.ContextVar` so they are local
to the current thread (or asyncio task) and are always undone when the block
exits.
"""

from __future__ import annotations

import collections.abc
import contextlib
import contextvars
import dataclasses
import logging
import types
from typing import Any, Iterator, Mapping, Sequence

from . import ansi
from .color import DEFAULT_COLOR_SCHEME, ColorScheme, Element
from .errors import ConfigurationError

__all__ = (
    "Options",
    "current",
    "configure",
    "reset_defaults",
    "set_color_scheme",
    "set_map_commas",
    "scoped",
    "current_defaults",
    "with_color",
)

logger = logging.getLogger(__name__)

#: How deeply nested values can be by default
DEFAULT_MAX_DEPTH = 100


def _element(name: Element | str) -> Element:
    if isinstance(name, Element):
        return name
    try:
        return Element(name)
    except ValueError:
        raise ConfigurationError(f"Unknown syntax element: {name!r}") from None


def _styles(
    element: Element, styles: Sequence[str] | None
) -> tuple[str, ...]:
    if styles is None:
        return ()
    if isinstance(styles, str):
        styles = (styles,)
    res = tuple(styles)
    unknown = [s for s in res if s not in ansi.STYLES]
    if unknown:
        raise ConfigurationError(
            f"Unknown style(s) for {element.value!r}: {', '.join(unknown)}"
        )
    return res


def _normalize_scheme(
    scheme: Mapping[Element | str, Sequence[str] | None]
) -> ColorScheme:
    normalized = {}
    for name, styles in scheme.items():
        element = _element(name)
        normalized[element] = _styles(element, styles)
    return types.MappingProxyType(normalized)


@dataclasses.dataclass(frozen=True)
class Options:
    """How values get printed

    Attributes:
      width: Maximum line width handed over to the layout engine.
      colored: Whether to output ANSI escapes.
      strict: Raise :class:`~ednprint.errors.UnrepresentableValue` instead of
        printing values that have no canonical representation.
      map_delimiter: Text placed between the entries of a mapping.
      color_scheme: Styles for each syntax element.
      max_depth: How deeply nested values can be.
    """

    width: int = 80
    colored: bool = False
    strict: bool = False
    map_delimiter: str = ""
    color_scheme: ColorScheme = dataclasses.field(
        default_factory=lambda: DEFAULT_COLOR_SCHEME
    )
    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if not isinstance(self.width, int) or self.width < 1:
            raise ConfigurationError(f"Invalid width: {self.width!r}")
        if not isinstance(self.max_depth, int) or self.max_depth < 1:
            raise ConfigurationError(f"Invalid max_depth: {self.max_depth!r}")
        if not isinstance(self.map_delimiter, str):
            raise ConfigurationError(
                f"The map delimiter should be a string: {self.map_delimiter!r}"
            )
        if self.color_scheme is not DEFAULT_COLOR_SCHEME:
            object.__setattr__(
                self, "color_scheme", _normalize_scheme(self.color_scheme)
            )

    def replace(self, **changes: Any) -> Options:
        "A copy of these options with *changes* applied"
        if not changes:
            return self
        unknown = changes.keys() - {f.name for f in dataclasses.fields(self)}
        if unknown:
            raise ConfigurationError(
                f"Unknown option(s): {', '.join(sorted(unknown))}"
            )
        return dataclasses.replace(self, **changes)


_defaults = Options()

_Scoped: contextvars.ContextVar[Options] = contextvars.ContextVar(
    "EdnPrintOptions"
)


def current() -> Options:
    "The options in effect"
    return _Scoped.get(_defaults)


def configure(**changes: Any) -> Options:
    """Change the process wide default options

    Returns:
      The new default options.
    """
    global _defaults
    _defaults = _defaults.replace(**changes)
    logger.debug("Default options changed: %s", ", ".join(changes))
    return _defaults


def reset_defaults() -> Options:
    "Go back to the default options the library was loaded with."
    global _defaults
    _defaults = Options()
    return _defaults


def set_color_scheme(
    *args: Mapping[Element | str, Sequence[str] | None] | Element | str,
    **kwargs: Sequence[str] | None,
) -> Options:
    """Update the color scheme for syntax elements.

    Takes either a mapping or pairs of element/styles. The new entries are
    merged into the default color scheme::

        set_color_scheme({"number": ["bold", "cyan"]})
        set_color_scheme("nil", ["red"], "tag", ["blue"])
        set_color_scheme(function_symbol=["green"])

    Keyword arguments use the name of the element with ``_`` instead of
    ``-``.

    Raises:
      ConfigurationError: if the arguments don't come in pairs or refer to
        unknown elements/styles.
    """
    updates: dict[Element | str, Any] = {}
    match args:
        case ():
            pass
        case (collections.abc.Mapping() as mapping,):
            updates.update(mapping)
        case _:
            if len(args) % 2 != 0:
                raise ConfigurationError(
                    "set_color_scheme takes a mapping or element/styles pairs,"
                    f" got {len(args)} arguments"
                )
            for element, styles in zip(args[::2], args[1::2]):
                if not isinstance(element, Element | str):
                    raise ConfigurationError(
                        f"Expected a syntax element, got {element!r}"
                    )
                updates[element] = styles
    for name, styles in kwargs.items():
        updates[name.replace("_", "-")] = styles
    merged = {**current_defaults().color_scheme, **_normalize_scheme(updates)}
    return configure(color_scheme=merged)


def set_map_commas() -> Options:
    "Separate the entries of mappings with commas."
    return configure(map_delimiter=",")


def current_defaults() -> Options:
    "The process wide default options (ignoring any active override)"
    return _defaults


@contextlib.contextmanager
def scoped(**changes: Any) -> Iterator[Options]:
    """Override the options for the duration of a ``with`` block

    Args:
      **changes: The fields of :class:`Options` to change.
    """
    opts = current().replace(**changes)
    token = _Scoped.set(opts)
    try:
        yield opts
    finally:
        _Scoped.reset(token)


def with_color() -> contextlib.AbstractContextManager[Options]:
    "Turn on colored output for the duration of a ``with`` block"
    return scoped(colored=True)
