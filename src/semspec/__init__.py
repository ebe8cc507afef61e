# SPDX-License-Identifier: MIT
"""Semantic and NuGet-style version parsing, ordering and range matching.

This package parses version strings in a strict ``MAJOR.MINOR.PATCH[-label]``
grammar or a loose grammar of one to four components, orders them, and tests
them against ranges written in NuGet bracket notation.

Example:
    >>> from semspec import parse_loose, parse_range
    >>>
    >>> version = parse_loose("1.3.42.10133-PreRelease")
    >>> version.revision
    10133
    >>> str(version)
    '1.3.42.10133-PreRelease'
    >>>
    >>> parse_range("[1.2, 3.2.5)").satisfies("2.0.0")
    True
    >>> parse_range("[1.2, 3.2.5)").to_math_string()
    '(≥ 1.2 && < 3.2.5)'
"""

import logging

__version__ = "0.1.0"

from .errors import (
    SemspecError,
    NullOrEmptyInputError,
    FormatError,
    InvalidVersionError,
    InvalidVersionRangeError,
    InvalidArgumentError,
    TypeMismatchError,
)
from .semver import (
    SemanticVersion,
    ParseMode,
    DEFAULT_PARSE_MODE,
    STRICT_VERSION_PATTERN,
    LOOSE_VERSION_PATTERN,
    parse_version,
    try_parse_version,
    parse_strict,
    try_parse_strict,
    parse_loose,
    try_parse_loose,
    is_valid_version,
)
from .compare import (
    compare_versions,
    versions_equal,
    versions_not_equal,
    less_than,
    less_equal,
    greater_than,
    greater_equal,
    version_key,
)
from .version_range import (
    VersionRange,
    parse_range,
    try_parse_range,
    satisfies,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Errors
    "SemspecError",
    "NullOrEmptyInputError",
    "FormatError",
    "InvalidVersionError",
    "InvalidVersionRangeError",
    "InvalidArgumentError",
    "TypeMismatchError",
    # Version parsing
    "SemanticVersion",
    "ParseMode",
    "DEFAULT_PARSE_MODE",
    "STRICT_VERSION_PATTERN",
    "LOOSE_VERSION_PATTERN",
    "parse_version",
    "try_parse_version",
    "parse_strict",
    "try_parse_strict",
    "parse_loose",
    "try_parse_loose",
    "is_valid_version",
    # Version comparison
    "compare_versions",
    "versions_equal",
    "versions_not_equal",
    "less_than",
    "less_equal",
    "greater_than",
    "greater_equal",
    "version_key",
    # Version ranges
    "VersionRange",
    "parse_range",
    "try_parse_range",
    "satisfies",
]
