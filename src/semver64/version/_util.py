# SPDX-License-Identifier: Apache-2.0
# Copyright Contributors to the semver64 Project


import functools
import string
from typing import Any


#: Largest value a major, minor, patch or numeric identifier part may take.
UNSIGNED_MAX_VALUE = 2 ** 64 - 1

IDENTIFIER_CHARACTERS = frozenset(string.digits + string.ascii_letters + "-")
_DIGITS = frozenset(string.digits)


class VersionError(Exception):
    """Base class for every error raised by the version API."""
    pass


class ParseError(VersionError):
    """Text could not be converted to a version or identifier."""
    def __init__(self, message: str, text: str = None) -> None:
        super(ParseError, self).__init__(message)
        self.text = text


class EmptyIdentifierError(ParseError):
    """A prerelease identifier was empty."""
    pass


class InvalidCharacterError(ParseError):
    """A character outside ``[0-9A-Za-z-]`` appeared where it is not allowed."""
    pass


class WrongArityError(ParseError):
    """The version core did not have the required number of chunks."""
    pass


class InvalidNumberError(ParseError):
    """A numeric field was not an unsigned 64-bit integer."""
    pass


class EmptyBuildMetadataError(ParseError):
    """Build metadata following ``+`` was empty."""
    pass


class VersionOverflowError(VersionError):
    """A version component would exceed `UNSIGNED_MAX_VALUE`."""
    pass


class InvalidIntervalError(VersionError):
    """No prerelease exists strictly between the two given versions."""
    pass


def cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def is_digits(s: str) -> bool:
    """True if `s` is a non-empty run of ASCII decimal digits."""
    return bool(s) and all(ch in _DIGITS for ch in s)


def parse_unsigned(s: str, what: str = "number") -> int:
    """Parse an unsigned 64-bit decimal integer.

    Raises:
        `InvalidNumberError`: If `s` contains anything but ASCII digits, or
            its value does not fit in 64 bits.
    """
    if not is_digits(s):
        raise InvalidNumberError("Invalid %s: %r" % (what, s), s)

    n = int(s)
    if n > UNSIGNED_MAX_VALUE:
        raise InvalidNumberError(
            "Invalid %s: %s does not fit in an unsigned 64-bit integer"
            % (what, s), s)
    return n


def check_unsigned(n: int, what: str = "number") -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidNumberError("Invalid %s: %r is not an integer" % (what, n))
    if n < 0 or n > UNSIGNED_MAX_VALUE:
        raise InvalidNumberError(
            "Invalid %s: %d is outside the unsigned 64-bit range" % (what, n))
    return n


def check_identifier_characters(s: str, what: str = "identifier") -> None:
    for ch in s:
        if ch not in IDENTIFIER_CHARACTERS:
            raise InvalidCharacterError(
                "Invalid %s character %r in %r" % (what, ch, s), s)


class _Common(object):
    __slots__ = ()

    def __str__(self) -> str:
        raise NotImplementedError

    def __ne__(self, other: object) -> bool:
        return not (self == other)

    def __repr__(self) -> str:
        return "%s(%r)" % (self.__class__.__name__, str(self))


@functools.total_ordering
class _Comparable(_Common):
    """Ordering derived from a single `_compare` method.

    Subclasses implement `_compare`, returning a negative, zero or positive
    int, or ``NotImplemented`` for unrelated types.
    """
    __slots__ = ()

    def _compare(self, other: object) -> int:
        raise NotImplementedError

    def __lt__(self, other: object) -> bool:
        result = self._compare(other)
        if result is NotImplemented:
            return NotImplemented
        return result < 0

    def __eq__(self, other: object) -> bool:
        raise NotImplementedError

    def __hash__(self) -> int:
        raise NotImplementedError
