# SPDX-License-Identifier: Apache-2.0
# Copyright Contributors to the semver64 Project


# Update this value to version up semver64. Do not place anything else in this file.
_semver64_version = "1.0.0"
