"""
``ednprint.errors``: Exceptions raised by the library
=====================================================
"""

from __future__ import annotations

from typing import Any

from . import utils

__all__ = ("UnrepresentableValue", "ConfigurationError", "NestingError")


class UnrepresentableValue(TypeError):
    """Raised in strict mode for values that have no canonical representation.

    Attributes:
      type: The type of the offending value.
      display: A best effort string representation of the value.
    """

    type: type[Any]
    display: str

    def __init__(self, value: Any) -> None:
        self.type = type(value)
        self.display = utils.display(value)
        super().__init__(
            "No canonical representation for "
            f"{utils.type_name(self.type)}: {utils.cram(self.display, 60)}"
        )


class ConfigurationError(ValueError):
    "Invalid printer options or color scheme."


class NestingError(ValueError):
    "The value is recursive or nested too deeply to be printed."
