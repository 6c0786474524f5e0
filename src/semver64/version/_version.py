# SPDX-License-Identifier: Apache-2.0
# Copyright Contributors to the semver64 Project


"""
Semantic version values and their two orderings.
"""
from typing import Iterable, List, Optional, Protocol, Sequence, Tuple, Union

from semver64.config import config
from semver64.version._identifier import PrereleaseIdentifier
from semver64.version._util import (
    _Comparable,
    EmptyBuildMetadataError,
    UNSIGNED_MAX_VALUE,
    VersionOverflowError,
    WrongArityError,
    check_identifier_characters,
    check_unsigned,
    cmp,
    parse_unsigned,
)


IdentifierLike = Union[str, PrereleaseIdentifier]


class SemanticVersionLike(Protocol):
    """The contract any version object must satisfy to be ordered or compared
    against a `SemanticVersion`.

    Objects not created by this library (adapters, test doubles) only need
    these attributes. Their prerelease identifiers are re-parsed with
    `PrereleaseIdentifier.parse` whenever they are compared.
    """
    major: int
    minor: int
    patch: int
    prerelease: Optional[Sequence[str]]
    build_metadata: Optional[str]


_VERSION_ATTRIBUTES = ("major", "minor", "patch", "prerelease", "build_metadata")


def is_version_like(obj) -> bool:
    return all(hasattr(obj, x) for x in _VERSION_ATTRIBUTES)


def _identifiers_of(version) -> Optional[Tuple[PrereleaseIdentifier, ...]]:
    if isinstance(version, SemanticVersion):
        return version._prerelease

    prerelease = version.prerelease
    if not prerelease:
        return None
    return tuple(PrereleaseIdentifier.parse(x) for x in prerelease)


def build_metadata_agnostic_key(version: SemanticVersionLike) -> tuple:
    """Sort key that ignores build metadata.

    Versions sort by major, minor and patch as unsigned integers, then a
    prerelease sorts before the release it belongs to. Two prereleases compare
    identifier by identifier, and a prefix sorts before any longer list.
    """
    if isinstance(version, SemanticVersion) and version._key is not None:
        return version._key

    identifiers = _identifiers_of(version)
    if identifiers is None:
        prerelease_key = (1,)
    else:
        prerelease_key = (0, tuple(x.sort_key() for x in identifiers))

    return (version.major, version.minor, version.patch, prerelease_key)


def total_ordering_key(version: SemanticVersionLike) -> tuple:
    """Sort key that breaks `build_metadata_agnostic_key` ties on build
    metadata, with no build metadata first."""
    build_metadata = version.build_metadata
    if build_metadata is None:
        build_key = (0, "")
    else:
        build_key = (1, build_metadata)
    return build_metadata_agnostic_key(version) + (build_key,)


def compare_ignoring_build_metadata(v1: SemanticVersionLike,
                                    v2: SemanticVersionLike) -> int:
    """Compare two versions as the semantic versioning standard requires.

    This is an ordered partition rather than a total order: versions that
    differ only in build metadata compare as equal.

    Returns:
        int: -1, 0 or 1.
    """
    return cmp(build_metadata_agnostic_key(v1), build_metadata_agnostic_key(v2))


def compare_total(v1: SemanticVersionLike, v2: SemanticVersionLike) -> int:
    """Compare two versions, distinguishing any that are unequal.

    Returns:
        int: -1, 0 or 1.
    """
    return cmp(total_ordering_key(v1), total_ordering_key(v2))


def _to_identifiers(identifiers: Optional[Iterable[IdentifierLike]]
                    ) -> Optional[Tuple[PrereleaseIdentifier, ...]]:
    if identifiers is None:
        return None
    if isinstance(identifiers, str):
        raise TypeError("Prerelease must be a sequence of identifiers, not a "
                        "str: %r" % identifiers)

    result = tuple(
        x if isinstance(x, PrereleaseIdentifier) else PrereleaseIdentifier.parse(x)
        for x in identifiers
    )
    return result or None


def _parse_prerelease(text: str, lenient: bool
                      ) -> Optional[Tuple[PrereleaseIdentifier, ...]]:
    chunks = text.split('.')
    if lenient:
        chunks = [x for x in chunks if x]
    return _to_identifiers(chunks)


class SemanticVersion(_Comparable):
    """Semantic version.

    A version is ``major.minor.patch``, optionally followed by ``-`` and a
    dot-separated list of prerelease identifiers, optionally followed by ``+``
    and build metadata (eg ``1.2.3-rc.1+build5``). The major, minor and patch
    numbers are unsigned 64-bit integers.

    Versions are immutable; every derivation returns a new version.

    Rich comparisons (``<``, ``>=`` etc) use the total ordering (see
    `compare_total`), which is consistent with ``==``. Use
    `compare_ignoring_build_metadata` or `build_metadata_agnostic_key` for
    the precedence defined by the semantic versioning standard.
    """
    __slots__ = ("_major", "_minor", "_patch", "_prerelease",
                 "_build_metadata", "_key", "_str")

    MIN_VALUE = None
    MAX_VALUE = None

    def __init__(self, major: int = 0, minor: int = 0, patch: int = 0,
                 prerelease: Optional[Iterable[IdentifierLike]] = None,
                 build_metadata: Optional[str] = None) -> None:
        """Create a version from its parts.

        Build metadata is not checked against the identifier character set;
        use `with_build_metadata` for that.

        Args:
            major (int): Major version.
            minor (int): Minor version.
            patch (int): Patch version.
            prerelease (list of str or `PrereleaseIdentifier`): Prerelease
                identifiers. An empty list is the same as None.
            build_metadata (str): Build metadata. An empty string is the same
                as None.
        """
        self._init(check_unsigned(major, "major version"),
                   check_unsigned(minor, "minor version"),
                   check_unsigned(patch, "patch version"),
                   _to_identifiers(prerelease),
                   build_metadata or None)

    def _init(self, major, minor, patch, prerelease, build_metadata):
        set_ = object.__setattr__
        set_(self, "_major", major)
        set_(self, "_minor", minor)
        set_(self, "_patch", patch)
        set_(self, "_prerelease", prerelease)
        set_(self, "_build_metadata", build_metadata)
        set_(self, "_key", None)
        set_(self, "_str", None)
        set_(self, "_key", build_metadata_agnostic_key(self))

    @classmethod
    def _new(cls, major, minor, patch, prerelease=None, build_metadata=None):
        # trusted fast path, all values already validated
        other = cls.__new__(cls)
        other._init(major, minor, patch, prerelease, build_metadata)
        return other

    def __setattr__(self, name, value):
        raise AttributeError("%s is immutable" % self.__class__.__name__)

    def __reduce__(self):
        return (self.__class__, (self._major, self._minor, self._patch,
                                 self._prerelease, self._build_metadata))

    @classmethod
    def from_parts(cls, major: int, minor: int, patch: int,
                   prerelease: Optional[Sequence[str]] = None,
                   build_metadata: Optional[str] = None) -> "SemanticVersion":
        """Create a version from numbers and identifier strings."""
        return cls(major, minor, patch, prerelease, build_metadata)

    @classmethod
    def from_version_like(cls, version: SemanticVersionLike) -> "SemanticVersion":
        """Convert any object satisfying `SemanticVersionLike`."""
        if isinstance(version, cls):
            return version
        return cls.from_parts(version.major, version.minor, version.patch,
                              version.prerelease, version.build_metadata)

    @classmethod
    def parse(cls, text: str, lenient: bool = False) -> "SemanticVersion":
        """Parse a version string.

        In lenient mode the following deviations from the standard grammar are
        accepted:
        - omitting the minor or patch version sets it to zero;
        - starting the version with a dot prepends a zero major version;
        - dot-separated numbers after the patch version are ignored;
        - an empty prerelease section, empty prerelease identifiers, or empty
          build metadata are ignored;
        - build metadata may contain any characters.

        Args:
            text (str): Version string, eg "1.0.0-rc.1+build.5".
            lenient (bool): Accept the deviations listed above.

        Returns:
            `SemanticVersion`.

        Raises:
            `ParseError`: If `text` is not a valid version.
        """
        comparable, plus, build_metadata = text.partition('+')
        if not plus:
            build_metadata = None

        core, dash, prerelease_text = comparable.partition('-')
        prerelease = _parse_prerelease(prerelease_text, lenient) if dash else None

        chunks = core.split('.')
        if lenient:
            while chunks and not chunks[-1]:
                chunks.pop()
            if not chunks:
                raise WrongArityError(
                    "Invalid version %r: must start with major version, or "
                    "decimal point then minor version" % text, text)
            if not chunks[0]:
                chunks[0] = '0'
        elif len(chunks) != 3:
            raise WrongArityError(
                "Invalid version %r: must be major.minor.patch" % text, text)

        numbers = [parse_unsigned(x, "version number") for x in chunks]
        numbers.extend([0, 0])
        major, minor, patch = numbers[:3]

        if build_metadata is not None:
            if not build_metadata:
                if not lenient:
                    raise EmptyBuildMetadataError(
                        "Invalid version %r: build metadata following '+' "
                        "must be non-empty" % text, text)
                build_metadata = None
            elif not lenient:
                check_identifier_characters(build_metadata, "build metadata")

        version = cls._new(major, minor, patch, prerelease, build_metadata)

        if lenient and str(version) != text:
            printer = config.warn_printer("lenient_corrections")
            printer("Version %r was read leniently as %r", text, str(version))

        return version

    @property
    def major(self) -> int:
        return self._major

    @property
    def minor(self) -> int:
        return self._minor

    @property
    def patch(self) -> int:
        return self._patch

    @property
    def is_prerelease(self) -> bool:
        """True if this version has prerelease identifiers, eg 1.0.0-alpha1."""
        return self._prerelease is not None

    @property
    def prerelease(self) -> Optional[Tuple[str, ...]]:
        """Prerelease identifiers as strings, or None for a release."""
        if self._prerelease is None:
            return None
        return tuple(str(x) for x in self._prerelease)

    @property
    def prerelease_identifiers(self) -> Optional[Tuple[PrereleaseIdentifier, ...]]:
        return self._prerelease

    @property
    def build_metadata(self) -> Optional[str]:
        return self._build_metadata

    @property
    def core(self) -> Tuple[int, int, int]:
        """``(major, minor, patch)``."""
        return (self._major, self._minor, self._patch)

    def with_build_metadata(self, build_metadata: Optional[str],
                            lenient: bool = False) -> "SemanticVersion":
        """Return a copy of this version with the given build metadata.

        Args:
            build_metadata (str): New build metadata, or None to remove it.
            lenient (bool): If True, an empty string removes the build metadata
                and any characters are allowed.

        Raises:
            `EmptyBuildMetadataError`: If `build_metadata` is empty and not
                `lenient`.
            `InvalidCharacterError`: If `build_metadata` has a character
                outside ``[0-9A-Za-z-]`` and not `lenient`.
        """
        if build_metadata is not None:
            if not build_metadata:
                if not lenient:
                    raise EmptyBuildMetadataError(
                        "Build metadata must be None or non-empty", build_metadata)
                build_metadata = None
            elif not lenient:
                check_identifier_characters(build_metadata, "build metadata")

        return self._new(self._major, self._minor, self._patch,
                         self._prerelease, build_metadata)

    def prerelease_with_identifiers(self, identifiers: Optional[Iterable[IdentifierLike]]
                                    ) -> "SemanticVersion":
        """Return a prerelease of the same release as this version.

        The result has no build metadata. An empty or None `identifiers` gives
        `release_version`.
        """
        identifiers = _to_identifiers(identifiers)
        if identifiers is None:
            return self.release_version()
        return self._new(self._major, self._minor, self._patch, identifiers)

    def release_version(self) -> "SemanticVersion":
        """Return the release this version is a prerelease of.

        The result has no build metadata. A release without build metadata is
        returned unchanged.
        """
        if self._prerelease is None and self._build_metadata is None:
            return self
        return self._new(self._major, self._minor, self._patch)

    def next_major_release(self) -> "SemanticVersion":
        """Return the version of the major release immediately following this
        version.

        This is ``X.0.0`` if this is a prerelease of ``X.0.0``, and
        ``(X+1).0.0`` otherwise.

        Raises:
            `VersionOverflowError`: If the major version is already at
                `UNSIGNED_MAX_VALUE`.
        """
        if self.is_prerelease and self._minor == 0 and self._patch == 0:
            return self.release_version()
        if self._major == UNSIGNED_MAX_VALUE:
            raise VersionOverflowError(
                "Major version of %s would overflow an unsigned 64-bit integer"
                % self)
        return self._new(self._major + 1, 0, 0)

    def next_minor_release(self) -> "SemanticVersion":
        """Return the version of the minor release immediately following this
        version.

        This is ``X.Y.0`` if this is a prerelease of ``X.Y.0``, and
        ``X.(Y+1).0`` otherwise.
        """
        if self.is_prerelease and self._patch == 0:
            return self.release_version()
        if self._minor == UNSIGNED_MAX_VALUE:
            raise VersionOverflowError(
                "Minor version of %s would overflow an unsigned 64-bit integer"
                % self)
        return self._new(self._major, self._minor + 1, 0)

    def next_patch_release(self) -> "SemanticVersion":
        """Return `release_version` for a prerelease, otherwise this version
        with the patch number incremented."""
        if self.is_prerelease:
            return self.release_version()
        if self._patch == UNSIGNED_MAX_VALUE:
            raise VersionOverflowError(
                "Patch version of %s would overflow an unsigned 64-bit integer"
                % self)
        return self._new(self._major, self._minor, self._patch + 1)

    def next_prerelease_before(self, next_release: Optional[SemanticVersionLike] = None
                               ) -> "SemanticVersion":
        """Return a prerelease that sorts after this version and before
        `next_release`.

        See `semver64.version.next_prerelease_before`.
        """
        from semver64.version._interval import next_prerelease_before
        return next_prerelease_before(self, next_release)

    def _compare(self, other):
        if not isinstance(other, SemanticVersion) and not is_version_like(other):
            return NotImplemented
        return compare_total(self, other)

    def __eq__(self, other):
        if isinstance(other, SemanticVersion):
            return (self._key == other._key
                    and self._prerelease == other._prerelease
                    and self._build_metadata == other._build_metadata)
        if not is_version_like(other):
            return NotImplemented

        return (self.core == (other.major, other.minor, other.patch)
                and self._prerelease == _identifiers_of(other)
                and self._build_metadata == other.build_metadata)

    def __hash__(self):
        return hash((self._major, self._minor, self._patch,
                     self._prerelease, self._build_metadata))

    def __str__(self):
        if self._str is None:
            s = "%d.%d.%d" % (self._major, self._minor, self._patch)
            if self._prerelease is not None:
                s += '-' + '.'.join(str(x) for x in self._prerelease)
            if self._build_metadata is not None:
                s += '+' + self._build_metadata
            object.__setattr__(self, "_str", s)
        return self._str


SemanticVersion.MIN_VALUE = SemanticVersion(
    0, 0, 0, [PrereleaseIdentifier.MIN_VALUE])
SemanticVersion.MAX_VALUE = SemanticVersion(
    UNSIGNED_MAX_VALUE, UNSIGNED_MAX_VALUE, UNSIGNED_MAX_VALUE)


def sort_versions(versions: Iterable[SemanticVersionLike],
                  ignore_build_metadata: bool = False,
                  reverse: bool = False) -> List[SemanticVersionLike]:
    """Sort versions, of any `SemanticVersionLike` type.

    Args:
        versions: Versions to sort.
        ignore_build_metadata (bool): Sort with `build_metadata_agnostic_key`
            (stable for versions differing only in build metadata) rather than
            `total_ordering_key`.
        reverse (bool): Sort highest first.
    """
    key = build_metadata_agnostic_key if ignore_build_metadata else total_ordering_key
    return sorted(versions, key=key, reverse=reverse)
