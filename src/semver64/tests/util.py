# SPDX-License-Identifier: Apache-2.0
# Copyright Contributors to the semver64 Project


import unittest
from semver64.config import config, _create_locked_config
import os.path
import os
import copy


class TestBase(unittest.TestCase):
    """Unit test base class.

    Every test runs against a locked config holding the bundled defaults plus
    the class's `settings` overrides, so user configs and $SEMVER64_XXX
    variables cannot change the outcome.
    """
    settings = {}

    def setUp(self):
        self.__environ = copy.deepcopy(os.environ)
        self.maxDiff = None
        self.setup_config(self.settings)

    def tearDown(self):
        self.teardown_config()
        os.environ = self.__environ

    @classmethod
    def data_path(cls, *dirs):
        """Get path to test data.
        """
        path = os.path.join(os.path.dirname(__file__), "data", *dirs)
        return os.path.realpath(path)

    def setup_config(self, settings):
        self._config = _create_locked_config(dict(settings))
        config._swap(self._config)

    def teardown_config(self):
        config._swap(self._config)
        self._config = None

    def update_settings(self, new_settings):
        """Swap in a config with `new_settings` applied on top of the class's
        `settings`, for the rest of the current test."""
        settings = dict(self.settings)
        settings.update(new_settings)

        self.teardown_config()
        self.setup_config(settings)

class VersionTestBase(TestBase):
    """Base class for tests over ordered sequences of versions or
    identifiers."""
    def _test_strict_weak_ordering(self, a, b):
        self.assertTrue(a == a)
        self.assertTrue(b == b)

        e = (a == b)
        ne = (a != b)
        lt = (a < b)
        lte = (a <= b)
        gt = (a > b)
        gte = (a >= b)

        self.assertTrue(e != ne)
        if e:
            self.assertTrue(not lt)
            self.assertTrue(not gt)
            self.assertTrue(lte)
            self.assertTrue(gte)
        else:
            self.assertTrue(lt != gt)
            self.assertTrue(lte != gte)
            self.assertTrue(lt == lte)
            self.assertTrue(gt == gte)

    def _test_ordered(self, items):
        def _test(fn, items_, op_str):
            for i, a in enumerate(items_):
                for b in items_[i + 1:]:
                    self.assertTrue(fn(a, b), "'%s' %s '%s'" % (a, op_str, b))

        _test(lambda a, b: a < b, items, '<')
        _test(lambda a, b: a <= b, items, '<=')
        _test(lambda a, b: a != b, items, '!=')
        _test(lambda a, b: a > b, list(reversed(items)), '>')
        _test(lambda a, b: a >= b, list(reversed(items)), '>=')
        _test(lambda a, b: a != b, list(reversed(items)), '!=')

        for i, a in enumerate(items):
            self._test_strict_weak_ordering(a, a)
            self.assertEqual(hash(a), hash(copy.copy(a)))
            for b in items[i + 1:]:
                self._test_strict_weak_ordering(a, b)

    def _test_ordered_by(self, compare, items, strict=True):
        """Check `items` ascend under a cmp-style function.

        If `strict` is False, neighbouring items may compare equal.
        """
        for i, a in enumerate(items):
            self.assertEqual(compare(a, a), 0, "'%s' should equal itself" % a)
            for b in items[i + 1:]:
                result = compare(a, b)
                if not strict and result == 0:
                    continue
                self.assertEqual(result, -1, "'%s' should be less than '%s'" % (a, b))
                self.assertEqual(compare(b, a), 1,
                                 "'%s' should be greater than '%s'" % (b, a))
