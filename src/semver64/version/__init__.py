# SPDX-License-Identifier: Apache-2.0
# Copyright Contributors to the semver64 Project


"""
Implements everything needed to parse, order and derive semantic versions.

There are two class types: :class:`PrereleaseIdentifier` and
:class:`SemanticVersion`. A :class:`SemanticVersion` is ``major.minor.patch``
(each an unsigned 64-bit integer), optionally followed by a ``-`` and a list
of :class:`PrereleaseIdentifier`\\s separated by ``.``, optionally followed by
``+`` and build metadata (eg ``1.2.3-rc.1+build5``).

Versions have two orderings. :func:`compare_ignoring_build_metadata` is the
precedence defined by the semantic versioning standard, under which versions
differing only in build metadata are equal. :func:`compare_total` then breaks
ties on build metadata, and is the ordering used by ``<``, ``>`` etc.

Objects that were not created by this library can take part in comparisons as
long as they provide the attributes described by :class:`SemanticVersionLike`.

:func:`next_prerelease_before` finds a new prerelease strictly between two
versions, eg to number a prerelease build between the last published version
and the next planned release.
"""

from semver64.version._identifier import PrereleaseIdentifier, compare_identifiers
from semver64.version._interval import next_prerelease_before
from semver64.version._util import (
    UNSIGNED_MAX_VALUE,
    EmptyBuildMetadataError,
    EmptyIdentifierError,
    InvalidCharacterError,
    InvalidIntervalError,
    InvalidNumberError,
    ParseError,
    VersionError,
    VersionOverflowError,
    WrongArityError,
)
from semver64.version._version import (
    SemanticVersion,
    SemanticVersionLike,
    build_metadata_agnostic_key,
    compare_ignoring_build_metadata,
    compare_total,
    sort_versions,
    total_ordering_key,
)

__all__ = (
    "SemanticVersion",
    "SemanticVersionLike",
    "PrereleaseIdentifier",
    "UNSIGNED_MAX_VALUE",
    "compare_identifiers",
    "compare_ignoring_build_metadata",
    "compare_total",
    "build_metadata_agnostic_key",
    "total_ordering_key",
    "sort_versions",
    "next_prerelease_before",
    "VersionError",
    "ParseError",
    "EmptyIdentifierError",
    "InvalidCharacterError",
    "WrongArityError",
    "InvalidNumberError",
    "EmptyBuildMetadataError",
    "VersionOverflowError",
    "InvalidIntervalError",
)
