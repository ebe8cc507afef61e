# SPDX-License-Identifier: MIT
"""Version ordering.

Numeric components are compared first (major, minor, patch, revision). At
equal numeric value a release sorts after any pre-release, and two
pre-release labels compare as ordinal, case-insensitive strings.

None sorts before every version. The ordering helpers (less_than and friends)
reject a None left operand; the equality helpers accept None on either side.
"""

from __future__ import annotations

from typing import Optional, Union

from .errors import InvalidArgumentError
from .semver import SemanticVersion, _fold, parse_version

VersionLike = Union[str, SemanticVersion]


def _coerce(version: Optional[VersionLike], argument: str) -> Optional[SemanticVersion]:
    if version is None or isinstance(version, SemanticVersion):
        return version
    if isinstance(version, str):
        return parse_version(version)
    raise InvalidArgumentError(
        argument,
        f"Argument '{argument}' must be a SemanticVersion or str, got {type(version).__name__}",
    )


def _compare_prerelease(pre1: str, pre2: str) -> int:
    """Compare two pre-release labels ("" meaning none).

    A version without a pre-release label has higher precedence than one
    with a label (1.0 > 1.0-alpha).
    """
    if not pre1 and not pre2:
        return 0
    if not pre1:
        return 1
    if not pre2:
        return -1

    folded1, folded2 = _fold(pre1), _fold(pre2)
    if folded1 == folded2:
        return 0
    return -1 if folded1 < folded2 else 1


def compare_versions(
    version1: Optional[VersionLike], version2: Optional[VersionLike]
) -> int:
    """Compare two versions.

    Args:
        version1: First version (string, SemanticVersion or None)
        version2: Second version (string, SemanticVersion or None)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either argument is a string that does not parse
        InvalidArgumentError: If either argument has an unsupported type

    Examples:
        >>> compare_versions("1.0", "1.0.1")
        -1
        >>> compare_versions("1.01-RC-1", "1.01")
        -1
        >>> compare_versions("1.6.2-BeTa", "1.6.02-beta")
        0
        >>> compare_versions(None, "0.0.0")
        -1
    """
    v1 = _coerce(version1, "version1")
    v2 = _coerce(version2, "version2")

    if v1 is None or v2 is None:
        if v1 is None and v2 is None:
            return 0
        return -1 if v1 is None else 1

    if v1.numeric != v2.numeric:
        return -1 if v1.numeric < v2.numeric else 1

    return _compare_prerelease(v1.prerelease, v2.prerelease)


def versions_equal(
    version1: Optional[VersionLike], version2: Optional[VersionLike]
) -> bool:
    """Return True if both versions are equal; two Nones are equal."""
    return compare_versions(version1, version2) == 0


def versions_not_equal(
    version1: Optional[VersionLike], version2: Optional[VersionLike]
) -> bool:
    """Return True if the versions differ."""
    return not versions_equal(version1, version2)


def less_than(version1: Optional[VersionLike], version2: Optional[VersionLike]) -> bool:
    """Return True if version1 precedes version2.

    Raises:
        InvalidArgumentError: If version1 is None
    """
    if version1 is None:
        raise InvalidArgumentError("version1")
    return compare_versions(version1, version2) < 0


def less_equal(version1: Optional[VersionLike], version2: Optional[VersionLike]) -> bool:
    """Return True if version1 precedes or equals version2.

    Equality is tested first, so two Nones compare as less-or-equal.
    """
    return versions_equal(version1, version2) or less_than(version1, version2)


def greater_than(version1: Optional[VersionLike], version2: Optional[VersionLike]) -> bool:
    """Return True if version1 follows version2.

    Evaluated as ``less_than(version2, version1)``, so a None on either side
    raises.

    Raises:
        InvalidArgumentError: If either version is None
    """
    if version1 is None:
        raise InvalidArgumentError("version1")
    return less_than(version2, version1)


def greater_equal(version1: Optional[VersionLike], version2: Optional[VersionLike]) -> bool:
    """Return True if version1 follows or equals version2."""
    return versions_equal(version1, version2) or greater_than(version1, version2)


def version_key(version: VersionLike) -> tuple:
    """Return a sort key for a version, consistent with compare_versions.

    Examples:
        >>> sorted(["1.0.1", "1.0", "1.0-beta"], key=version_key)
        ['1.0-beta', '1.0', '1.0.1']
    """
    v = _coerce(version, "version")
    if v is None:
        raise InvalidArgumentError("version")

    # Release (1,) sorts after any pre-release (0, label)
    prerelease_key: tuple = (1,) if not v.prerelease else (0, _fold(v.prerelease))
    return (*v.numeric, prerelease_key)
