# SPDX-License-Identifier: Apache-2.0
# Copyright Contributors to the semver64 Project


"""
unit tests for 'semver64.version.next_prerelease_before'
"""
import unittest

from parameterized import parameterized

from semver64.tests.util import VersionTestBase
from semver64.tests.test_version import VERSION_STRINGS_IN_SORT_ORDER, \
    _create_mock
from semver64.version import SemanticVersion, next_prerelease_before, \
    compare_ignoring_build_metadata, InvalidIntervalError
from semver64.version._interval import select_strategy, DECISION_TABLE


VERSIONS_WITH_BUILD_METADATA = [
    "1.0.0-0+x",
    "1.0.0-0a+build-5",
    "1.0.0-1.1+x",
    "1.0.0-alpha+x",
    "1.0.0-alpha.0+x",
    "1.0.0-beta." + str(2 ** 64 - 1) + "+x",
    "1.0.0+build-5",
    "1.1.0+x",
]

# sorted by the total ordering, so each version with build metadata directly
# follows the same version without it
VERSIONS_IN_SORT_ORDER = sorted(
    SemanticVersion.parse(x)
    for x in VERSION_STRINGS_IN_SORT_ORDER + VERSIONS_WITH_BUILD_METADATA)


class TestNextPrerelease(VersionTestBase):

    def _strategy(self, current, upper):
        return select_strategy(SemanticVersion.parse(current),
                               SemanticVersion.parse(upper))

    def _test_between(self, current, upper, expected, strategy):
        name, _ = self._strategy(current, upper)
        self.assertEqual(name, strategy)

        result = SemanticVersion.parse(current).next_prerelease_before(
            SemanticVersion.parse(upper))
        self.assertEqual(str(result), expected)

    def _test_no_room(self, current, upper):
        with self.assertRaises(InvalidIntervalError):
            next_prerelease_before(SemanticVersion.parse(current),
                                   SemanticVersion.parse(upper))

    def test_decision_table(self):
        names = [name for _, _, strategies in DECISION_TABLE
                 for name, _ in strategies]
        self.assertEqual(names, [
            "A1", "A2", "A3", "A4", "A5", "A6", "A7",
            "B1", "B2",
            "C1", "C2", "C3", "C4",
            "D1", "D2", "D3", "D4",
            "E1", "E2", "E3", "E4"])

    def test_other_release(self):
        """Test prereleases of a later release."""
        self._test_between("1.0.0", "2.0.0", "2.0.0-1", "A1")
        self._test_between("1.0.0-rc.1", "1.0.1", "1.0.1-1", "A1")
        self._test_between("1.0.0", "2.0.0-alpha.5a.bravo", "2.0.0-alpha.1", "A3")
        self._test_between("1.0.0", "2.0.0-2", "2.0.0-1", "A3")
        self._test_between("1.0.0", "2.0.0-1.1", "2.0.0-1.0", "A4")
        self._test_between("1.0.0", "2.0.0-0a", "2.0.0-0", "A5")
        self._test_between("1.0.0", "2.0.0-0.alpha", "2.0.0-0.0", "A6")
        self._test_between("1.0.0", "2.0.0-0.0", "2.0.0-0", "A7")
        self._test_no_room("1.0.0", "2.0.0-0")

    def test_upper_is_release(self):
        self._test_between("1.0.0-alpha.1", "1.0.0", "1.0.0-alpha.2", "B1")
        self._test_between("1.0.0-3.18446744073709551615", "1.0.0", "1.0.0-4", "B1")
        self._test_between("1.0.0-2rc.x", "1.0.0", "1.0.0-3rc", "B1")
        self._test_between("1.0.0-alpha", "1.0.0", "1.0.0-alpha.1", "B2")
        self._test_between("1.0.0-18446744073709551615", "1.0.0",
                           "1.0.0-18446744073709551615.1", "B2")

    def test_current_is_prefix(self):
        self._test_between("1.0.0-0alpha", "1.0.0-0alpha.27", "1.0.0-0alpha.1", "C1")
        self._test_between("1.0.0-a", "1.0.0-a.5rc", "1.0.0-a.1rc", "C1")
        self._test_between("1.0.0-a", "1.0.0-a.b.c", "1.0.0-a.b", "C2")
        self._test_between("1.0.0-a", "1.0.0-a.0.0", "1.0.0-a.0", "C2")
        self._test_between("1.0.0-a", "1.0.0-a.1", "1.0.0-a.0", "C4")
        self._test_between("1.0.0-a", "1.0.0-a.b", "1.0.0-a.0", "C4")
        self._test_no_room("1.0.0-a", "1.0.0-a.0")

    def test_numeric_difference(self):
        self._test_between("1.0.0-0alpha", "1.0.0-2", "1.0.0-1alpha", "D1")
        self._test_between("1.0.0-x.3.z", "1.0.0-x.9", "1.0.0-x.4", "D1")
        self._test_between("1.0.0-0alpha", "1.0.0-1beta", "1.0.0-1alpha", "D2")
        self._test_between("1.0.0-0", "1.0.0-1a", "1.0.0-1", "D2")
        self._test_between("1.0.0-0b", "1.0.0-1a", "1.0.0-1.1", "D3")
        self._test_between("1.0.0-0b", "1.0.0-1", "1.0.0-0b.1", "D4")
        self._test_between("1.0.0-0", "1.0.0-1", "1.0.0-0.1", "D4")

    def test_other_difference(self):
        self._test_between("1.0.0-alpha.1.x", "1.0.0-beta.5.y", "1.0.0-beta.1", "E1")
        self._test_between("1.0.0-alpha.1.x", "1.0.0-beta.1.y", "1.0.0-beta.0", "E2")
        self._test_between("1.0.0-alpha.1", "1.0.0-beta", "1.0.0-alpha.2", "E3")
        self._test_between("1.0.0-alpha", "1.0.0-beta", "1.0.0-alpha.1", "E4")

        # equal numeric parts fall through to the last branch
        self._test_between("1.0.0-1a", "1.0.0-1b", "1.0.0-1a.1", "E4")

    def test_implicit_upper_bound(self):
        """With no upper bound, the current version's release is used."""
        v = SemanticVersion.parse("1.2.3-rc.1+build7")
        self.assertEqual(str(v.next_prerelease_before()), "1.2.3-rc.2")
        self.assertEqual(str(next_prerelease_before(v)), "1.2.3-rc.2")

        with self.assertRaises(InvalidIntervalError):
            SemanticVersion.parse("1.2.3").next_prerelease_before()

    def test_invalid_intervals(self):
        def _invalid(current, upper):
            with self.assertRaises(InvalidIntervalError):
                SemanticVersion.parse(current).next_prerelease_before(
                    SemanticVersion.parse(upper))

        _invalid("1.0.0", "1.0.0")
        _invalid("1.0.0", "0.9.0")
        _invalid("1.0.0", "1.0.0-1")
        _invalid("1.0.0+a", "1.0.0+b")
        _invalid("1.0.0-rc.1+a", "1.0.0-rc.1")

    def test_build_metadata_dropped(self):
        """The result never carries build metadata."""
        v = SemanticVersion.parse("1.0.0-rc.1+a").next_prerelease_before(
            SemanticVersion.parse("1.0.0+b"))
        self.assertEqual(str(v), "1.0.0-rc.2")

        v = SemanticVersion.parse("1.0.0-alpha").next_prerelease_before(
            SemanticVersion.parse("1.0.0-beta+b"))
        self.assertEqual(str(v), "1.0.0-alpha.1")

    def test_foreign_upper_bound(self):
        upper = _create_mock(2, 0, 0, ["alpha", "5"])
        result = next_prerelease_before(SemanticVersion.parse("1.0.0"), upper)
        self.assertIsInstance(result, SemanticVersion)
        self.assertEqual(str(result), "2.0.0-alpha.1")

        current = _create_mock(2, 0, 0, ["alpha"])
        result = next_prerelease_before(current)
        self.assertEqual(str(result), "2.0.0-alpha.1")

    def test_debug_logging(self):
        self.update_settings({"debug_next_prerelease": True})

        with self.assertLogs("semver64", level="DEBUG") as cm:
            SemanticVersion.parse("1.0.0-alpha").next_prerelease_before()

        self.assertEqual(len(cm.output), 1)
        self.assertIn("strategy B2", cm.output[0])
        self.assertIn("1.0.0-alpha.1", cm.output[0])

    def test_debug_logging_quiet(self):
        self.update_settings({"debug_all": True, "quiet": True})

        with self.assertRaises(AssertionError):
            with self.assertLogs("semver64", level="DEBUG"):
                SemanticVersion.parse("1.0.0-alpha").next_prerelease_before()

    # exhaustive checks over every pair of ordered versions

    def _checked_between(self, current, upper):
        """Bisect (current, upper), checking that failure happens only when no
        prerelease fits between them."""
        if compare_ignoring_build_metadata(current, upper) >= 0:
            with self.assertRaises(InvalidIntervalError):
                current.next_prerelease_before(upper)
            return None

        # the smallest prerelease above current; no room if upper is it
        if current.core == upper.core:
            first_possible = current.prerelease_with_identifiers(
                (current.prerelease or ()) + ("0",))
        else:
            first_possible = upper.prerelease_with_identifiers(["0"])

        if compare_ignoring_build_metadata(upper, first_possible) == 0:
            with self.assertRaises(InvalidIntervalError):
                current.next_prerelease_before(upper)
            return None

        try:
            between = current.next_prerelease_before(upper)
        except InvalidIntervalError as e:
            self.fail("No prerelease between %s and %s: %s" % (current, upper, e))

        self.assertTrue(between.is_prerelease)
        self.assertIsNone(between.build_metadata)
        self.assertTrue(all(between.prerelease))
        self.assertEqual(between.release_version(), upper.release_version())
        self.assertEqual(compare_ignoring_build_metadata(current, between), -1,
                         "Expected %s < %s" % (current, between))
        self.assertEqual(compare_ignoring_build_metadata(between, upper), -1,
                         "Expected %s < %s" % (between, upper))
        return between

    def _test_bisection(self, current, upper):
        def _between(a, b):
            if a is None or b is None:
                return None
            return self._checked_between(a, b)

        next_ = self._checked_between(current, upper)
        in_between = _between(current, next_)
        after_next = _between(next_, upper)
        in_between2 = _between(next_, after_next)
        third_after = _between(after_next, upper)
        in_between3 = _between(after_next, third_after)

        ordered = [current, in_between, next_, in_between2, after_next,
                   in_between3, third_after, upper]
        self._test_ordered([x for x in ordered if x is not None])

    def test_bisection_versions_with_build_metadata(self):
        strings = [str(x) for x in VERSIONS_IN_SORT_ORDER]
        for s in VERSIONS_WITH_BUILD_METADATA:
            version = SemanticVersion.parse(s)
            i = strings.index(s)
            self.assertEqual(strings[i - 1], str(version.with_build_metadata(None)))

        # no prerelease fits between a version and one holding the same
        # identifiers plus a trailing zero, whatever their build metadata
        self._test_no_room("1.0.0-alpha+x", "1.0.0-alpha.0")
        self._test_no_room("1.0.0-alpha", "1.0.0-alpha.0+x")
        self._test_no_room("1.0.0+build-5", "1.0.1-0+x")
        self._test_no_room("1.0.0-alpha", "1.0.0-alpha+x")
        self._test_between("1.0.0-alpha+x", "1.0.0-alpha.1+y", "1.0.0-alpha.0", "C4")

    @parameterized.expand(
        list(enumerate(str(x) for x in VERSIONS_IN_SORT_ORDER)))
    def test_bisection(self, i, version_str):
        current = VERSIONS_IN_SORT_ORDER[i]
        self.assertEqual(str(current), version_str)

        with self.assertRaises(InvalidIntervalError):
            current.next_prerelease_before(current)

        for previous in VERSIONS_IN_SORT_ORDER[:i]:
            with self.assertRaises(InvalidIntervalError):
                current.next_prerelease_before(previous)

        if current.is_prerelease:
            next_ = current.next_prerelease_before()
            self.assertTrue(current < next_ < current.release_version())
        else:
            with self.assertRaises(InvalidIntervalError):
                current.next_prerelease_before()

        for upper in VERSIONS_IN_SORT_ORDER[i + 1:]:
            self._test_bisection(current, upper)


if __name__ == '__main__':
    unittest.main()
