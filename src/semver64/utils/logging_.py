# SPDX-License-Identifier: Apache-2.0
# Copyright Contributors to the semver64 Project


import logging


logger = logging.getLogger("semver64")


def get_debug_printer(enabled=True):
    return _Printer(enabled, logger.debug)


def get_warning_printer(enabled=True):
    return _Printer(enabled, logger.warning)


class _Printer(object):
    """Callable that logs a %-formatted message, or does nothing if disabled.

    Disabled printers skip the formatting too, so they are cheap to call on
    hot paths such as version parsing.
    """
    def __init__(self, enabled=True, printer_function=None):
        self.printer_function = printer_function if enabled else None

    def __call__(self, msg, *nargs):
        if self.printer_function:
            if nargs:
                msg = msg % nargs
            self.printer_function(msg)

    def __bool__(self):
        return bool(self.printer_function)
