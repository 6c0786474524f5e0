# SPDX-License-Identifier: Apache-2.0
# Copyright Contributors to the semver64 Project


"""
Exceptions.

Errors raised while parsing or deriving versions live in `semver64.version`
(see `semver64.version.VersionError`).
"""


class Semver64Error(Exception):
    """Base-class semver64 error."""
    def __init__(self, value=None):
        self.value = value

    def __str__(self):
        return str(self.value)


class ConfigurationError(Semver64Error):
    """A misconfiguration error."""
    pass
