# SPDX-License-Identifier: MIT
"""Semantic version parsing for strict and NuGet-style version strings.

Two grammars share one pattern builder:
- Strict: exactly MAJOR.MINOR.PATCH, no whitespace
- Loose: one to four numeric components, whitespace allowed around the dots

Both accept an optional pre-release label: a hyphen, a letter, then letters,
digits or hyphens (-alpha, -RC-2, -CTP-2-Refresh-Alpha).
"""

from __future__ import annotations

import enum
import logging
import re
from dataclasses import dataclass
from typing import Any, Optional

from .errors import (
    InvalidArgumentError,
    InvalidVersionError,
    NullOrEmptyInputError,
    TypeMismatchError,
)

logger = logging.getLogger(__name__)

# Numeric components must fit a signed 32-bit integer
MAX_COMPONENT_VALUE = 2**31 - 1

# Odd multiplier mixing the numeric hash with the pre-release hash
HASH_MULTIPLIER = 4567

_PRERELEASE = r"(?P<release>-[a-z][0-9a-z-]*)?"


def _build_pattern(min_parts: int, max_parts: int, separator: str) -> re.Pattern[str]:
    extra = f"{{{min_parts - 1},{max_parts - 1}}}"
    return re.compile(
        rf"(?P<version>\d+(?:{separator}\d+){extra}){_PRERELEASE}",
        re.IGNORECASE | re.ASCII,
    )


STRICT_VERSION_PATTERN = _build_pattern(3, 3, r"\.")
LOOSE_VERSION_PATTERN = _build_pattern(1, 4, r"\s*\.\s*")


class ParseMode(enum.Enum):
    """Which version grammar to parse with."""

    STRICT = "strict"
    LOOSE = "loose"

    @property
    def pattern(self) -> re.Pattern[str]:
        if self is ParseMode.STRICT:
            return STRICT_VERSION_PATTERN
        return LOOSE_VERSION_PATTERN


DEFAULT_PARSE_MODE = ParseMode.LOOSE


def _fold(label: str) -> str:
    return label.upper()


@dataclass(frozen=True, slots=True, eq=False)
class SemanticVersion:
    """A four-component version with an optional pre-release label.

    Attributes:
        major: Major version number
        minor: Minor version number
        patch: Patch number (the "build" component of NuGet-style versions)
        revision: Revision number, 0 unless a fourth component was given
        prerelease: Pre-release label without the leading hyphen, "" if none.
            Case is preserved but ignored when comparing.
        original_text: Text returned by str(); the parsed input with all
            whitespace removed, or a rendering of the components
    """

    major: int
    minor: int
    patch: int
    revision: int = 0
    prerelease: str = ""
    original_text: str = ""

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch", "revision"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidArgumentError(name, f"'{name}' must be an integer, got {value!r}")
            if value < 0:
                raise InvalidArgumentError(name, f"'{name}' must be non-negative, got {value}")
        if self.prerelease is None:
            object.__setattr__(self, "prerelease", "")
        if not self.original_text:
            parts = [self.major, self.minor, self.patch]
            if self.revision:
                parts.append(self.revision)
            object.__setattr__(self, "original_text", _render(parts, self.prerelease))

    @classmethod
    def from_parts(
        cls,
        major: int,
        minor: int,
        patch: int,
        revision: Optional[int] = None,
        prerelease: str = "",
    ) -> "SemanticVersion":
        """Build a version from numeric components.

        The display text has three components unless a revision is given,
        in which case it has four (even when the revision is 0).
        """
        parts = [major, minor, patch] if revision is None else [major, minor, patch, revision]
        return cls(
            major=major,
            minor=minor,
            patch=patch,
            revision=revision or 0,
            prerelease=prerelease or "",
            original_text=_render(parts, prerelease or ""),
        )

    @classmethod
    def parse(cls, text: str, mode: ParseMode = DEFAULT_PARSE_MODE) -> "SemanticVersion":
        """Parse ``text``; see :func:`parse_version`."""
        return parse_version(text, mode)

    @classmethod
    def try_parse(cls, text: Any, mode: ParseMode = DEFAULT_PARSE_MODE) -> Optional["SemanticVersion"]:
        """Parse ``text`` or return None; see :func:`try_parse_version`."""
        return try_parse_version(text, mode)

    @property
    def numeric(self) -> tuple[int, int, int, int]:
        """Return the normalized (major, minor, patch, revision) tuple."""
        return (self.major, self.minor, self.patch, self.revision)

    @property
    def is_prerelease(self) -> bool:
        """Return True if this version carries a pre-release label."""
        return bool(self.prerelease)

    @property
    def base_version(self) -> str:
        """Return the normalized four-component numeric part."""
        return ".".join(str(part) for part in self.numeric)

    def compare_to(self, other: object) -> int:
        """Compare against an arbitrary object.

        None sorts before every version, so comparing with None returns 1.

        Raises:
            TypeMismatchError: If ``other`` is neither None nor a SemanticVersion
        """
        if other is None:
            return 1
        if not isinstance(other, SemanticVersion):
            raise TypeMismatchError(other)
        from .compare import compare_versions

        return compare_versions(self, other)

    def __str__(self) -> str:
        return self.original_text

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self.numeric == other.numeric and _fold(self.prerelease) == _fold(other.prerelease)

    def __hash__(self) -> int:
        return hash(self.numeric) * HASH_MULTIPLIER + hash(_fold(self.prerelease))

    def __lt__(self, other: object) -> bool:
        if other is not None and not isinstance(other, SemanticVersion):
            return NotImplemented
        from .compare import less_than

        return less_than(self, other)

    def __le__(self, other: object) -> bool:
        if other is not None and not isinstance(other, SemanticVersion):
            return NotImplemented
        from .compare import less_equal

        return less_equal(self, other)

    def __gt__(self, other: object) -> bool:
        if other is not None and not isinstance(other, SemanticVersion):
            return NotImplemented
        from .compare import greater_than

        return greater_than(self, other)

    def __ge__(self, other: object) -> bool:
        if other is not None and not isinstance(other, SemanticVersion):
            return NotImplemented
        from .compare import greater_equal

        return greater_equal(self, other)


def _render(parts: list[int], prerelease: str) -> str:
    text = ".".join(str(part) for part in parts)
    if prerelease:
        text += f"-{prerelease}"
    return text


def try_parse_version(
    version_string: Any, mode: ParseMode = DEFAULT_PARSE_MODE
) -> Optional[SemanticVersion]:
    """Parse a version string, returning None instead of raising.

    Args:
        version_string: The text to parse. Leading and trailing whitespace is
            ignored.
        mode: Grammar to use (loose by default)

    Returns:
        The parsed SemanticVersion, or None if the input is None, empty, not a
        string, does not match the grammar, or has a component that is too
        large

    Examples:
        >>> str(try_parse_version("1.0"))
        '1.0'
        >>> try_parse_version("1.0", ParseMode.STRICT) is None
        True
    """
    if not isinstance(version_string, str) or not version_string:
        return None

    match = mode.pattern.fullmatch(version_string.strip())
    if not match:
        logger.debug("Rejected %r: does not match the %s grammar", version_string, mode.value)
        return None

    parts = [part.strip() for part in match.group("version").split(".")]
    if any(len(part.lstrip("0")) > len(str(MAX_COMPONENT_VALUE)) for part in parts):
        logger.debug("Rejected %r: numeric component out of range", version_string)
        return None
    numbers = [int(part) for part in parts]
    if any(number > MAX_COMPONENT_VALUE for number in numbers):
        logger.debug("Rejected %r: numeric component out of range", version_string)
        return None
    numbers.extend([0] * (4 - len(numbers)))

    release = match.group("release")
    return SemanticVersion(
        major=numbers[0],
        minor=numbers[1],
        patch=numbers[2],
        revision=numbers[3],
        prerelease=release[1:] if release else "",
        original_text="".join(version_string.split()),
    )


def parse_version(version_string: str, mode: ParseMode = DEFAULT_PARSE_MODE) -> SemanticVersion:
    """Parse a version string into a SemanticVersion.

    Args:
        version_string: The text to parse
        mode: Grammar to use (loose by default)

    Returns:
        The parsed SemanticVersion

    Raises:
        NullOrEmptyInputError: If the input is None or empty
        InvalidVersionError: If the input is not a valid version in ``mode``

    Examples:
        >>> parse_version("2.3-alpha").numeric
        (2, 3, 0, 0)
        >>> parse_version("3.4.0.3-RC-3").prerelease
        'RC-3'
    """
    if version_string is None or version_string == "":
        raise NullOrEmptyInputError("version")

    result = try_parse_version(version_string, mode)
    if result is None:
        raise InvalidVersionError(str(version_string))
    return result


def try_parse_strict(version_string: Any) -> Optional[SemanticVersion]:
    """Parse a strict MAJOR.MINOR.PATCH[-label] version, or return None."""
    return try_parse_version(version_string, ParseMode.STRICT)


def parse_strict(version_string: str) -> SemanticVersion:
    """Parse a strict MAJOR.MINOR.PATCH[-label] version."""
    return parse_version(version_string, ParseMode.STRICT)


def try_parse_loose(version_string: Any) -> Optional[SemanticVersion]:
    """Parse a NuGet-style version with one to four components, or return None."""
    return try_parse_version(version_string, ParseMode.LOOSE)


def parse_loose(version_string: str) -> SemanticVersion:
    """Parse a NuGet-style version with one to four components."""
    return parse_version(version_string, ParseMode.LOOSE)


def is_valid_version(version_string: Any, mode: ParseMode = DEFAULT_PARSE_MODE) -> bool:
    """Check if a string is a valid version in the given grammar.

    Examples:
        >>> is_valid_version("1.3.4.5")
        True
        >>> is_valid_version("1.3.4.5", ParseMode.STRICT)
        False
    """
    return try_parse_version(version_string, mode) is not None
