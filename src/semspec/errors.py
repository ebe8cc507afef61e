# SPDX-License-Identifier: MIT
"""Exceptions raised by semspec.

The ``try_*`` functions never raise these for malformed input; the ``parse_*``
functions and the relational helpers do.
"""

from __future__ import annotations

from typing import Any


class SemspecError(Exception):
    """Base class for all semspec errors."""


class NullOrEmptyInputError(SemspecError, ValueError):
    """Raised when None or an empty string is passed where a value is required."""

    def __init__(self, argument: str = "version", message: str = ""):
        self.argument = argument
        self.message = message or f"Value for '{argument}' cannot be None or empty"
        super().__init__(self.message)


class FormatError(SemspecError, ValueError):
    """Raised when a non-empty string does not match the expected grammar."""

    def __init__(self, text: str, message: str = ""):
        self.text = text
        self.message = message or f"'{text}' is not in a valid format"
        super().__init__(self.message)


class InvalidVersionError(FormatError):
    """Raised when a string is not a valid version."""

    def __init__(self, text: str, message: str = ""):
        super().__init__(text, message or f"'{text}' is not a valid version string")


class InvalidVersionRangeError(FormatError):
    """Raised when a string is not a valid version range."""

    def __init__(self, text: str, message: str = ""):
        super().__init__(text, message or f"'{text}' is not a valid version range string")


class InvalidArgumentError(SemspecError, ValueError):
    """Raised when an ordering comparison gets an unusable operand."""

    def __init__(self, argument: str, message: str = ""):
        self.argument = argument
        self.message = message or f"Argument '{argument}' cannot be None"
        super().__init__(self.message)


class TypeMismatchError(SemspecError, TypeError):
    """Raised when a version is compared against an object of another type."""

    def __init__(self, other: Any, message: str = ""):
        self.other = other
        self.message = message or (
            f"Type to compare must be an instance of SemanticVersion, got {type(other).__name__}"
        )
        super().__init__(self.message)
