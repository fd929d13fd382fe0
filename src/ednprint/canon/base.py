from __future__ import annotations

import dataclasses
import inspect
import logging
import types
import typing
import weakref
from typing import Any, Callable, Iterable, Type, TypeAlias, TypeVar

from ednprint import data, order, pretty, utils
from ednprint.color import Element, color_doc
from ednprint.errors import NestingError, UnrepresentableValue
from ednprint.options import Options

T = TypeVar("T")

Handler: TypeAlias = Callable[[T, "Canonicalizer"], pretty.Doc]

logger = logging.getLogger(__name__)

DISPATCH_TABLE = weakref.WeakKeyDictionary[Type[Any], Handler[Any]]()


def _infer_handler_types(f: Handler[T]) -> tuple[Type[Any], ...]:
    values = list(inspect.signature(f, eval_str=True).parameters.values())
    if len(values) != 2:
        raise ValueError(
            "The registered function should take two arguments: the value and"
            " the canonicalizer"
        )
    ty = values[0].annotation
    if ty is inspect.Parameter.empty:
        raise ValueError(
            f"Cannot infer the type handled by {f.__name__}: its first "
            "argument has no annotation"
        )
    origin = typing.get_origin(ty)
    if isinstance(ty, types.UnionType) or origin is typing.Union:
        return tuple(typing.get_origin(t) or t for t in typing.get_args(ty))
    return (origin or ty,)


@typing.overload
def register(function: Handler[T], /) -> Handler[T]:  # pragma: no cover
    ...


@typing.overload
def register(
    *, type: Type[T] | tuple[Type[Any], ...] | None = None
) -> Callable[[Handler[T]], Handler[T]]:  # pragma: no cover
    ...


def register(
    function: Handler[T] | None = None,
    /,
    *,
    type: Type[T] | tuple[Type[Any], ...] | None = None,
) -> Handler[T] | Callable[[Handler[T]], Handler[T]]:
    """Register a function to canonicalize values of a given type.

    *function* takes the value and the :class:`Canonicalizer` (use it to
    canonicalize the children of the value) and returns a document.

    If *type* is not specified, :func:`register` uses the type annotation on
    the first argument to deduce which type(s) to register *function* for.
    The handler is used for subclasses of the registered type unless they
    have a handler of their own.

    Here are three equivalent ways to print :class:`complex` numbers::

        @register
        def _canonize_complex(c: complex, canon: Canonicalizer):
            return canon.tagged("complex", [c.real, c.imag])

        @register()
        def _canonize_complex(c: complex, canon: Canonicalizer):
            return canon.tagged("complex", [c.real, c.imag])

        @register(type=complex)
        def _canonize_complex(c, canon):
            return canon.tagged("complex", [c.real, c.imag])

    Args:

      function: The handler we are registering

      type: The type (or tuple of types) we are registering the function for
    """

    def wrapper(function: Handler[T]) -> Handler[T]:
        if type is None:
            classes = _infer_handler_types(function)
        elif isinstance(type, tuple):
            classes = type
        else:
            classes = (type,)
        for cls in classes:
            DISPATCH_TABLE[cls] = function
            logger.debug(
                "Registered %s for %s",
                getattr(function, "__qualname__", function),
                utils.type_name(cls),
            )
        return function

    if function is None:
        return wrapper
    return wrapper(function)


def find_handler(ty: Type[Any]) -> Handler[Any] | None:
    "The most specific handler registered for *ty*"
    return utils.lookup_type(DISPATCH_TABLE, ty)


class Canonicalizer:
    """Turn values into documents.

    A canonicalizer is created for every value we print: it holds the options
    and keeps track of the values that are being visited to detect cycles.
    """

    options: Options
    _visiting: list[int]

    def __init__(self, options: Options) -> None:
        self.options = options
        self._visiting = []

    def canonize(self, value: Any) -> pretty.Doc:
        "Convert *value* into a document."
        addr = id(value)
        if addr in self._visiting:
            logger.debug("Recursive value of type %s", type(value).__name__)
            raise NestingError("Recursive value found")
        if len(self._visiting) >= self.options.max_depth:
            logger.debug("Maximum depth reached (%d)", self.options.max_depth)
            raise NestingError(
                f"Value nested more than {self.options.max_depth} levels deep"
            )
        self._visiting.append(addr)
        try:
            return self._dispatch(value)
        finally:
            self._visiting.pop()

    def _dispatch(self, value: Any) -> pretty.Doc:
        tagged = data.as_tagged(value)
        if tagged is not None:
            tag, payload = tagged
            return self.tagged(tag, payload)
        handler = find_handler(type(value))
        if handler is not None:
            return handler(value, self)
        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            self.check_representable(value)
            type_name, fields = data.record_parts(value)
            return self.record(type_name, fields)
        return self.opaque(value)

    # Helpers to build documents

    def color(self, element: Element, doc: pretty.Doc | str) -> pretty.Doc:
        "Style *doc* as a syntax *element*"
        if isinstance(doc, str):
            doc = pretty.text(doc)
        return color_doc(element, doc, self.options)

    def check_representable(self, value: Any) -> None:
        """Reject *value* in strict mode

        Raises:
          UnrepresentableValue: if strict mode is on.
        """
        if self.options.strict:
            logger.debug("Rejecting %s in strict mode", type(value).__name__)
            raise UnrepresentableValue(value)

    def format_coll(
        self, opar: str, docs: Iterable[pretty.Doc], cpar: str
    ) -> pretty.Doc:
        """Lay out *docs* between delimiters.

        If the collection doesn't fit on the line every element goes on its
        own line, aligned on the first element.
        """
        return pretty.group(
            self.color(Element.DELIMITER, opar)
            + pretty.align(pretty.join(pretty.BREAK, docs))
            + self.color(Element.DELIMITER, cpar)
        )

    def canonical_sorted(
        self, values: Iterable[Any], key: Callable[[Any], Any] | None = None
    ) -> list[Any]:
        """Sort *values* (or their *key*) in canonical order.

        Comparing values goes no deeper than what is left of the depth
        budget below the value being canonized.

        Raises:
          NestingError: if the values are recursive or too deeply nested.
        """
        ranker = order.Ranker(self.options.max_depth - len(self._visiting))
        return ranker.sorted(values, key=key)

    def _entry(self, key: Any, value: Any) -> pretty.Doc:
        sep = pretty.BREAK if data.is_collection(value) else pretty.text(" ")
        return self.canonize(key) + sep + self.canonize(value)

    def format_map(self, mapping: Any) -> pretty.Doc:
        "A mapping with its entries sorted by key"
        entries = self.canonical_sorted(mapping.items(), key=lambda kv: kv[0])
        sep = pretty.text(self.options.map_delimiter) + pretty.BREAK
        return pretty.group(
            self.color(Element.DELIMITER, "{")
            + pretty.align(
                pretty.join(sep, (self._entry(k, v) for k, v in entries))
            )
            + self.color(Element.DELIMITER, "}")
        )

    def tagged(self, tag: str, payload: Any) -> pretty.Doc:
        "``#tag payload``"
        sep = pretty.BREAK if data.is_collection(payload) else pretty.text(" ")
        return self.color(Element.TAG, f"#{tag}") + sep + self.canonize(payload)

    def record(self, type_name: str, fields: Any) -> pretty.Doc:
        "``#type.Name{...}``"
        return (
            self.color(Element.DELIMITER, "#")
            + pretty.text(type_name)
            + self.format_map(fields)
        )

    def opaque(self, value: Any) -> pretty.Doc:
        "``#<type.Name display>``"
        self.check_representable(value)
        # Every line of the display has to be measured on its own
        lines = utils.display(value).split("\n")
        return (
            self.color(Element.CLASS_DELIMITER, "#<")
            + self.color(Element.CLASS_NAME, utils.type_name(type(value)))
            + pretty.text(" ")
            + pretty.join(pretty.HARD_BREAK, map(pretty.text, lines))
            + self.color(Element.CLASS_DELIMITER, ">")
        )
