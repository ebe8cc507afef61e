# SPDX-License-Identifier: MIT
"""Version ranges in NuGet bracket notation.

Supported forms:
- ``1.0``: at least 1.0 (a bare version is an inclusive lower bound)
- ``[1.0]``: exactly 1.0
- ``(1.0, 2.0)``, ``[1.0, 2.0]``, ``[1.0, 2.0)``, ``(1.0, 2.0]``: bounded on both sides
- ``(, 2.0]``, ``(1.0, )``: bounded on one side

Bounds are parsed with the loose version grammar.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional, TypeVar, Union

from .compare import greater_equal, greater_than, less_equal, less_than
from .errors import InvalidVersionRangeError, NullOrEmptyInputError
from .semver import ParseMode, SemanticVersion, parse_version, try_parse_version

logger = logging.getLogger(__name__)

T = TypeVar("T")

LESS_THAN_OR_EQUAL_TO = "≤"
GREATER_THAN_OR_EQUAL_TO = "≥"


@dataclass(frozen=True, slots=True)
class VersionRange:
    """An interval of versions with independently inclusive bounds.

    A missing bound leaves that side unbounded. The inclusive flags are kept
    even when their bound is missing, but have no effect.

    Attributes:
        min_version: Lower bound, or None for no lower bound
        min_inclusive: True if min_version itself is in the range
        max_version: Upper bound, or None for no upper bound
        max_inclusive: True if max_version itself is in the range
    """

    min_version: Optional[SemanticVersion] = None
    min_inclusive: bool = False
    max_version: Optional[SemanticVersion] = None
    max_inclusive: bool = False

    @classmethod
    def at_least(cls, version: SemanticVersion) -> "VersionRange":
        """Return the range of all versions >= ``version``."""
        return cls(min_version=version, min_inclusive=True)

    @classmethod
    def exact(cls, version: SemanticVersion) -> "VersionRange":
        """Return the range containing only ``version``."""
        return cls(
            min_version=version,
            min_inclusive=True,
            max_version=version,
            max_inclusive=True,
        )

    @classmethod
    def parse(cls, text: str) -> "VersionRange":
        """Parse ``text``; see :func:`parse_range`."""
        return parse_range(text)

    @classmethod
    def try_parse(cls, text: Any) -> Optional["VersionRange"]:
        """Parse ``text`` or return None; see :func:`try_parse_range`."""
        return try_parse_range(text)

    @property
    def is_at_least(self) -> bool:
        """Return True for the bare-version form: inclusive lower bound only."""
        return (
            self.min_version is not None
            and self.min_inclusive
            and self.max_version is None
            and not self.max_inclusive
        )

    @property
    def is_exact(self) -> bool:
        """Return True if the range holds a single version."""
        return (
            self.min_version is not None
            and self.max_version is not None
            and self.min_version == self.max_version
            and self.min_inclusive
            and self.max_inclusive
        )

    def satisfies(self, version: Union[str, SemanticVersion]) -> bool:
        """Return True if ``version`` lies within the range.

        Args:
            version: A SemanticVersion or a loose version string

        Raises:
            InvalidVersionError: If ``version`` is a string that does not parse
            InvalidArgumentError: If ``version`` is None and a bound is present
        """
        if isinstance(version, str):
            version = parse_version(version)

        condition = True
        if self.min_version is not None:
            if self.min_inclusive:
                condition = condition and greater_equal(version, self.min_version)
            else:
                condition = condition and greater_than(version, self.min_version)

        if self.max_version is not None:
            if self.max_inclusive:
                condition = condition and less_equal(version, self.max_version)
            else:
                condition = condition and less_than(version, self.max_version)

        return condition

    def to_predicate(
        self, key: Optional[Callable[[T], SemanticVersion]] = None
    ) -> Callable[[T], bool]:
        """Return a function testing whether an item's version is in the range.

        Args:
            key: Extracts the version from an item; items are used as-is if None
        """

        def predicate(item: T) -> bool:
            return self.satisfies(key(item) if key is not None else item)  # type: ignore[arg-type]

        return predicate

    def filter_versions(
        self,
        items: Iterable[T],
        key: Optional[Callable[[T], SemanticVersion]] = None,
    ) -> list[T]:
        """Return the items whose version lies within the range, in input order."""
        predicate = self.to_predicate(key)
        return [item for item in items if predicate(item)]

    def to_bracket_string(self) -> str:
        """Render the range in the bracket notation accepted by parse_range.

        Examples:
            >>> VersionRange.at_least(parse_version("1.0")).to_bracket_string()
            '1.0'
            >>> parse_range("(, 3.2]").to_bracket_string()
            '(, 3.2]'
        """
        if self.is_at_least:
            return str(self.min_version)

        if self.is_exact:
            return f"[{self.min_version}]"

        lower = "" if self.min_version is None else str(self.min_version)
        upper = "" if self.max_version is None else str(self.max_version)
        return "{}{}, {}{}".format(
            "[" if self.min_inclusive else "(",
            lower,
            upper,
            "]" if self.max_inclusive else ")",
        )

    def to_math_string(self) -> str:
        """Render the range as a human readable inequality.

        Examples:
            >>> parse_range("1.0").to_math_string()
            '(≥ 1.0)'
            >>> parse_range("[1.0, 2.0)").to_math_string()
            '(≥ 1.0 && < 2.0)'
        """
        if self.is_at_least:
            return f"({GREATER_THAN_OR_EQUAL_TO} {self.min_version})"

        if self.is_exact:
            return f"(= {self.min_version})"

        text = ""
        if self.min_version is not None:
            text += f"({GREATER_THAN_OR_EQUAL_TO} " if self.min_inclusive else "(> "
            text += str(self.min_version)

        if self.max_version is not None:
            text += " && " if text else "("
            text += f"{LESS_THAN_OR_EQUAL_TO} " if self.max_inclusive else "< "
            text += str(self.max_version)

        if text:
            text += ")"
        return text

    def __contains__(self, version: object) -> bool:
        return self.satisfies(version)  # type: ignore[arg-type]

    def __str__(self) -> str:
        return self.to_bracket_string()


def try_parse_range(range_string: Any) -> Optional[VersionRange]:
    """Parse a version range, returning None instead of raising.

    A string that is itself a loose version parses as an inclusive lower
    bound. Otherwise the string must be wrapped in ``[``/``(`` and ``]``/``)``
    and hold one or two comma separated bounds, at least one of them
    non-blank. A single bound inside the brackets is used for both ends.

    Examples:
        >>> str(try_parse_range("[2.7]").max_version)
        '2.7'
        >>> try_parse_range("(,)") is None
        True
    """
    if not isinstance(range_string, str):
        return None

    text = range_string.strip()

    version = try_parse_version(text, ParseMode.LOOSE)
    if version is not None:
        return VersionRange.at_least(version)

    if len(text) < 3:
        logger.debug("Rejected range %r: too short", range_string)
        return None

    if text[0] == "[":
        min_inclusive = True
    elif text[0] == "(":
        min_inclusive = False
    else:
        logger.debug("Rejected range %r: must start with '[' or '('", range_string)
        return None

    if text[-1] == "]":
        max_inclusive = True
    elif text[-1] == ")":
        max_inclusive = False
    else:
        logger.debug("Rejected range %r: must end with ']' or ')'", range_string)
        return None

    parts = text[1:-1].split(",")
    if len(parts) > 2:
        logger.debug("Rejected range %r: more than two bounds", range_string)
        return None
    if all(not part.strip() for part in parts):
        logger.debug("Rejected range %r: no bound specified", range_string)
        return None

    min_string = parts[0]
    max_string = parts[1] if len(parts) == 2 else parts[0]

    min_version = None
    if min_string.strip():
        min_version = try_parse_version(min_string, ParseMode.LOOSE)
        if min_version is None:
            logger.debug("Rejected range %r: invalid lower bound %r", range_string, min_string)
            return None

    max_version = None
    if max_string.strip():
        max_version = try_parse_version(max_string, ParseMode.LOOSE)
        if max_version is None:
            logger.debug("Rejected range %r: invalid upper bound %r", range_string, max_string)
            return None

    return VersionRange(
        min_version=min_version,
        min_inclusive=min_inclusive,
        max_version=max_version,
        max_inclusive=max_inclusive,
    )


def parse_range(range_string: str) -> VersionRange:
    """Parse a version range.

    Args:
        range_string: A bare version or a bracketed interval

    Returns:
        The parsed VersionRange

    Raises:
        NullOrEmptyInputError: If the input is None or empty
        InvalidVersionRangeError: If the input is not a valid range
    """
    if range_string is None or range_string == "":
        raise NullOrEmptyInputError("range")

    result = try_parse_range(range_string)
    if result is None:
        raise InvalidVersionRangeError(str(range_string))
    return result


def satisfies(version_range: Union[str, VersionRange], version: Union[str, SemanticVersion]) -> bool:
    """Return True if ``version`` lies within ``version_range``.

    Either argument may be given as a string.

    Examples:
        >>> satisfies("[1.2, 3.2.5)", "2.0.0")
        True
        >>> satisfies("[1.2, 3.2.5)", "3.2.5")
        False
    """
    if isinstance(version_range, str):
        version_range = parse_range(version_range)
    return version_range.satisfies(version)
