# SPDX-License-Identifier: Apache-2.0
# Copyright Contributors to the semver64 Project


"""
Synthesis of a prerelease version strictly between two versions.

`next_prerelease_before` evaluates an ordered decision table. Each row is a
branch guard plus an ordered list of strategies; the first strategy (of the
first branch whose guard holds) that produces identifiers wins. The last
strategy of every branch always produces a result, so the only failures are
the explicit `InvalidIntervalError` checks.

Strategies return the prerelease identifiers of the result, as a tuple, or
None when they do not apply. The result is always a prerelease of the upper
bound's release.
"""
from typing import Optional

from semver64.config import config
from semver64.version._identifier import PrereleaseIdentifier
from semver64.version._util import (
    InvalidIntervalError,
    UNSIGNED_MAX_VALUE,
    VersionError,
)
from semver64.version._version import (
    SemanticVersion,
    SemanticVersionLike,
    compare_ignoring_build_metadata,
)


MIN_VALUE = PrereleaseIdentifier.MIN_VALUE
FIRST = PrereleaseIdentifier.FIRST


class _Interval(object):
    """The open interval (current, upper) being bisected."""
    def __init__(self, current: SemanticVersion, upper: SemanticVersion) -> None:
        self.current = current
        self.upper = upper
        self.ours = current.prerelease_identifiers or ()
        self.theirs = upper.prerelease_identifiers or ()
        self.same_release = (current.core == upper.core)

        # only meaningful when both are prereleases of the same release
        self.shorter_length = min(len(self.ours), len(self.theirs))
        self.first_difference = self.shorter_length
        for i in range(self.shorter_length):
            if self.ours[i] != self.theirs[i]:
                self.first_difference = i
                break

    @property
    def our_identifier(self) -> PrereleaseIdentifier:
        return self.ours[self.first_difference]

    @property
    def their_identifier(self) -> PrereleaseIdentifier:
        return self.theirs[self.first_difference]

    def __str__(self):
        return "(%s, %s)" % (self.current, self.upper)


def _is_numeric_not_in(identifier, values):
    return identifier.has_numeric_part and identifier.numeric_part not in values


def _incremented(identifier):
    return PrereleaseIdentifier(identifier.numeric_part + 1, identifier.suffix)


# -----------------------------------------------------------------------------
# Branch A: current is not a prerelease of upper's release. Produce an earlier
# prerelease of upper's release.
# -----------------------------------------------------------------------------

def _targets_other_release(iv):
    return not iv.same_release


def _a1_first_prerelease(iv):
    # 2.0.0 -> 2.0.0-1
    if not iv.theirs:
        return (FIRST,)


def _a2_fail_if_minimal(iv):
    if iv.theirs == (MIN_VALUE,):
        raise InvalidIntervalError(
            "%s is already the first possible prerelease of %s"
            % (iv.upper, iv.upper.release_version()))


def _a3_numeric_to_one(iv):
    # 2.0.0-alpha.5a.bravo -> 2.0.0-alpha.1
    for i in reversed(range(len(iv.theirs))):
        if _is_numeric_not_in(iv.theirs[i], (0, 1)):
            return iv.theirs[:i] + (FIRST,)


def _a4_numeric_to_zero(iv):
    # 2.0.0-1.1 -> 2.0.0-1.0
    for i in reversed(range(len(iv.theirs))):
        if _is_numeric_not_in(iv.theirs[i], (0,)):
            return iv.theirs[:i] + (MIN_VALUE,)


def _a5_drop_suffix(iv):
    # 2.0.0-0a -> 2.0.0-0
    for i in reversed(range(len(iv.theirs))):
        theirs = iv.theirs[i]
        if theirs.has_numeric_part and theirs.suffix:
            return iv.theirs[:i] + (PrereleaseIdentifier(theirs.numeric_part),)


def _a6_replace_with_zero(iv):
    # 2.0.0-0.alpha -> 2.0.0-0.0
    for i in reversed(range(len(iv.theirs))):
        if iv.theirs[i] > MIN_VALUE:
            return iv.theirs[:i] + (MIN_VALUE,)


def _a7_truncate(iv):
    # 2.0.0-0.0 -> 2.0.0-0
    return iv.theirs[:-1]


# -----------------------------------------------------------------------------
# Branch B: current is a prerelease of upper, and upper is a release. Produce a
# later prerelease of the same release.
# -----------------------------------------------------------------------------

def _upper_is_release(iv):
    return iv.same_release and not iv.theirs


def _b1_increment(iv):
    # 1.0.0-alpha.1 -> 1.0.0-alpha.2
    for i in reversed(range(len(iv.ours))):
        if _is_numeric_not_in(iv.ours[i], (UNSIGNED_MAX_VALUE,)):
            return iv.ours[:i] + (_incremented(iv.ours[i]),)


def _b2_append_one(iv):
    # 1.0.0-alpha -> 1.0.0-alpha.1
    return iv.ours + (FIRST,)


# -----------------------------------------------------------------------------
# Branch C: both are prereleases of the same release, and current's identifiers
# are a prefix of upper's.
# -----------------------------------------------------------------------------

def _current_is_prefix(iv):
    return iv.first_difference == len(iv.ours)


def _c1_their_numeric_to_one(iv):
    # between 1.0.0-0alpha and 1.0.0-0alpha.27: 1.0.0-0alpha.1
    theirs = iv.their_identifier
    if _is_numeric_not_in(theirs, (0, 1)):
        return iv.theirs[:iv.first_difference] + (
            PrereleaseIdentifier(1, theirs.suffix),)


def _c2_next_shortest_prefix(iv):
    # between 1.0.0-a and 1.0.0-a.b.c: 1.0.0-a.b
    if len(iv.theirs) >= iv.first_difference + 2:
        return iv.theirs[:len(iv.ours) + 1]


def _c3_fail_if_adjacent(iv):
    if iv.their_identifier == MIN_VALUE:
        raise InvalidIntervalError(
            "%s is already the last possible version before %s"
            % (iv.current, iv.upper))


def _c4_append_zero(iv):
    # between 1.0.0-a and 1.0.0-a.1: 1.0.0-a.0
    return iv.ours + (MIN_VALUE,)


# -----------------------------------------------------------------------------
# Branch D: both are prereleases of the same release, they differ within their
# common length, and both identifiers at the first difference are numeric.
# -----------------------------------------------------------------------------

def _both_numeric_at_difference(iv):
    return (iv.our_identifier.has_numeric_part
            and iv.their_identifier.has_numeric_part)


def _numeric_gap(iv):
    return iv.their_identifier.numeric_part - iv.our_identifier.numeric_part


def _d1_increment_within_gap(iv):
    # between 1.0.0-0alpha and 1.0.0-2: 1.0.0-1alpha
    if _numeric_gap(iv) >= 2:
        return iv.ours[:iv.first_difference] + (_incremented(iv.our_identifier),)


def _d2_increment_below_theirs(iv):
    # between 1.0.0-0alpha and 1.0.0-1beta: 1.0.0-1alpha
    if _numeric_gap(iv) == 1:
        incremented = _incremented(iv.our_identifier)
        if incremented < iv.their_identifier:
            return iv.ours[:iv.first_difference] + (incremented,)


def _d3_their_number_then_one(iv):
    # between 1.0.0-0b and 1.0.0-1a: 1.0.0-1.1
    theirs = iv.their_identifier
    if _numeric_gap(iv) == 1 and theirs.suffix:
        return iv.ours[:iv.first_difference] + (
            PrereleaseIdentifier(theirs.numeric_part), FIRST)


def _d4_append_one(iv):
    # between 1.0.0-0b and 1.0.0-1: 1.0.0-0b.1
    if _numeric_gap(iv) == 1:
        return iv.ours + (FIRST,)


# -----------------------------------------------------------------------------
# Branch E: the first difference is not settled by numeric parts.
# -----------------------------------------------------------------------------

def _always(iv):
    return True


def _e1_their_later_numeric_to_one(iv):
    for i in range(iv.shorter_length - 1, iv.first_difference, -1):
        theirs = iv.theirs[i]
        if _is_numeric_not_in(theirs, (0, 1)):
            return iv.theirs[:i] + (PrereleaseIdentifier(1, theirs.suffix),)


def _e2_their_later_numeric_to_zero(iv):
    for i in range(iv.shorter_length - 1, iv.first_difference, -1):
        theirs = iv.theirs[i]
        if _is_numeric_not_in(theirs, (0,)):
            return iv.theirs[:i] + (PrereleaseIdentifier(0, theirs.suffix),)


def _e3_increment_our_later_numeric(iv):
    for i in range(len(iv.ours) - 1, iv.first_difference, -1):
        if _is_numeric_not_in(iv.ours[i], (UNSIGNED_MAX_VALUE,)):
            return iv.ours[:i] + (_incremented(iv.ours[i]),)


def _e4_append_one(iv):
    return iv.ours + (FIRST,)


DECISION_TABLE = (
    ("A", _targets_other_release, (
        ("A1", _a1_first_prerelease),
        ("A2", _a2_fail_if_minimal),
        ("A3", _a3_numeric_to_one),
        ("A4", _a4_numeric_to_zero),
        ("A5", _a5_drop_suffix),
        ("A6", _a6_replace_with_zero),
        ("A7", _a7_truncate),
    )),
    ("B", _upper_is_release, (
        ("B1", _b1_increment),
        ("B2", _b2_append_one),
    )),
    ("C", _current_is_prefix, (
        ("C1", _c1_their_numeric_to_one),
        ("C2", _c2_next_shortest_prefix),
        ("C3", _c3_fail_if_adjacent),
        ("C4", _c4_append_zero),
    )),
    ("D", _both_numeric_at_difference, (
        ("D1", _d1_increment_within_gap),
        ("D2", _d2_increment_below_theirs),
        ("D3", _d3_their_number_then_one),
        ("D4", _d4_append_one),
    )),
    ("E", _always, (
        ("E1", _e1_their_later_numeric_to_one),
        ("E2", _e2_their_later_numeric_to_zero),
        ("E3", _e3_increment_our_later_numeric),
        ("E4", _e4_append_one),
    )),
)


def select_strategy(current: SemanticVersion, upper: SemanticVersion):
    """Evaluate the decision table for an already validated interval.

    Returns:
        2-tuple: Name of the strategy applied (eg "C2"), and the prerelease
        identifiers it produced.
    """
    iv = _Interval(current, upper)

    for _, guard, strategies in DECISION_TABLE:
        if not guard(iv):
            continue

        for name, strategy in strategies:
            identifiers = strategy(iv)
            if identifiers is not None:
                return name, identifiers

    raise VersionError("No prerelease strategy applied to %s" % iv)


def next_prerelease_before(current: SemanticVersionLike,
                           next_release: Optional[SemanticVersionLike] = None
                           ) -> SemanticVersion:
    """Return a prerelease that sorts strictly between two versions.

    The result `v` is a prerelease of `next_release`'s release, and satisfies
    ``current < v < next_release`` under `compare_ignoring_build_metadata`.
    Among the candidates the decision table considers, it picks the one
    closest to the bounds; it does not guarantee the shortest possible result.

    Args:
        current: The lower bound.
        next_release: The upper bound. If None, `current` must be a prerelease
            and its release version is used.

    Returns:
        `SemanticVersion`: The new prerelease, without build metadata.

    Raises:
        `InvalidIntervalError`: If `next_release` is None and `current` is not
            a prerelease; if `current` does not sort before `next_release`; or
            if no prerelease exists between them (eg between ``1.0.0-a`` and
            ``1.0.0-a.0``).
    """
    current = SemanticVersion.from_version_like(current)

    if next_release is None:
        if not current.is_prerelease:
            raise InvalidIntervalError(
                "Need to know the next release to find the next prerelease, "
                "since %s isn't a prerelease" % current)
        upper = current.release_version()
    else:
        upper = SemanticVersion.from_version_like(next_release)
        if compare_ignoring_build_metadata(current, upper) >= 0:
            raise InvalidIntervalError(
                "%s is equivalent to or ahead of %s" % (current, upper))

    name, identifiers = select_strategy(current, upper)
    result = upper.prerelease_with_identifiers(identifiers)

    printer = config.debug_printer("next_prerelease")
    printer("next prerelease between %s and %s: strategy %s gave %s",
            current, upper, name, result)

    return result
