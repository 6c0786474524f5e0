# SPDX-License-Identifier: Apache-2.0
# Copyright Contributors to the semver64 Project


from typing import Optional, Tuple

from semver64.version._util import (
    _Comparable,
    EmptyIdentifierError,
    IDENTIFIER_CHARACTERS,
    InvalidCharacterError,
    check_identifier_characters,
    check_unsigned,
    cmp,
    parse_unsigned,
)

_DIGITS = "0123456789"


class PrereleaseIdentifier(_Comparable):
    """One dot-separated chunk of a prerelease section.

    An identifier is split into an optional leading run of decimal digits (the
    numeric part, an unsigned 64-bit integer) and the remaining text (the
    suffix). For example ``"10rc"`` has numeric part 10 and suffix ``"rc"``,
    while ``"beta"`` has no numeric part and suffix ``"beta"``.

    Identifiers compare as follows:
    - an identifier with a numeric part comes before one without;
    - numeric parts are compared as unsigned integers;
    - ties, and identifiers with no numeric part, are broken by comparing
      suffixes codepoint by codepoint.

    Some example comparisons that equate to true:
    - "1" < "2"
    - "2" < "2a"
    - "2a" < "10"
    - "10" < "alpha"
    - "alpha" < "beta"

    Identifiers are immutable.
    """
    __slots__ = ("_numeric_part", "_suffix")

    MIN_VALUE = None
    FIRST = None

    def __init__(self, numeric_part: Optional[int] = None, suffix: str = "") -> None:
        """Create an identifier from its parts.

        Args:
            numeric_part (int): Value of the leading digit run, or None if the
                identifier has no leading digits.
            suffix (str): Text following the digit run. It may only contain
                ``[0-9A-Za-z-]`` and may not start with a digit, since any
                leading digits belong to the numeric part.

        Raises:
            `EmptyIdentifierError`: If there is neither a numeric part nor a
                suffix.
            `InvalidCharacterError`: If `suffix` is not a valid suffix.
            `InvalidNumberError`: If `numeric_part` is not an unsigned 64-bit
                integer.
        """
        if not isinstance(suffix, str):
            raise TypeError("Identifier suffix must be a str, not %s"
                            % type(suffix).__name__)

        if numeric_part is not None:
            check_unsigned(numeric_part, "prerelease identifier")
        elif not suffix:
            raise EmptyIdentifierError("Prerelease identifier cannot be empty")

        if suffix:
            check_identifier_characters(suffix, "prerelease identifier")
            if suffix[0] in _DIGITS:
                raise InvalidCharacterError(
                    "Invalid identifier suffix %r: cannot start with a digit"
                    % suffix, suffix)

        object.__setattr__(self, "_numeric_part", numeric_part)
        object.__setattr__(self, "_suffix", suffix)

    def __setattr__(self, name, value):
        raise AttributeError("%s is immutable" % self.__class__.__name__)

    def __reduce__(self):
        return (self.__class__, (self._numeric_part, self._suffix))

    @classmethod
    def parse(cls, text: str) -> "PrereleaseIdentifier":
        """Parse a single prerelease identifier.

        Raises:
            `EmptyIdentifierError`: If `text` is empty.
            `InvalidCharacterError`: If `text` contains a character outside
                ``[0-9A-Za-z-]``.
            `InvalidNumberError`: If the leading digit run does not fit in an
                unsigned 64-bit integer.
        """
        if not text:
            raise EmptyIdentifierError("Prerelease identifier cannot be empty",
                                       text)

        numeric_length = None
        for i, ch in enumerate(text):
            if ch not in IDENTIFIER_CHARACTERS:
                raise InvalidCharacterError(
                    "Invalid identifier character %r in %r" % (ch, text), text)
            if numeric_length is None and ch not in _DIGITS:
                numeric_length = i

        if numeric_length is None:
            numeric_length = len(text)

        if not numeric_length:
            return cls(None, text)

        n = parse_unsigned(text[:numeric_length], "prerelease identifier")
        return cls(n, text[numeric_length:])

    @property
    def has_numeric_part(self) -> bool:
        return self._numeric_part is not None

    @property
    def numeric_part(self) -> Optional[int]:
        """Value of the leading digit run, or None."""
        return self._numeric_part

    @property
    def suffix(self) -> str:
        return self._suffix

    def with_numeric_part(self, n: int, suffix: str = None) -> "PrereleaseIdentifier":
        """Return a copy with a different numeric part (and optionally suffix).

        The suffix is checked the same way as in the constructor.
        """
        return PrereleaseIdentifier(n, self._suffix if suffix is None else suffix)

    def sort_key(self) -> Tuple[int, int, str]:
        if self._numeric_part is None:
            return (1, 0, self._suffix)
        return (0, self._numeric_part, self._suffix)

    def _compare(self, other):
        if not isinstance(other, PrereleaseIdentifier):
            return NotImplemented
        return cmp(self.sort_key(), other.sort_key())

    def __eq__(self, other):
        return (isinstance(other, PrereleaseIdentifier)
                and self._numeric_part == other._numeric_part
                and self._suffix == other._suffix)

    def __hash__(self):
        return hash((self._numeric_part, self._suffix))

    def __str__(self):
        if self._numeric_part is None:
            return self._suffix
        return "%d%s" % (self._numeric_part, self._suffix)


def compare_identifiers(a: PrereleaseIdentifier, b: PrereleaseIdentifier) -> int:
    """Compare two identifiers, returning -1, 0 or 1."""
    return cmp(a.sort_key(), b.sort_key())


PrereleaseIdentifier.MIN_VALUE = PrereleaseIdentifier(0)
PrereleaseIdentifier.FIRST = PrereleaseIdentifier(1)
