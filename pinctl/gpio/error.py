"""Exceptions raised by the pin controller and its I/O adapters.

Every exception derives from GPIOError, so that callers (and the command-line
top level) can report any pin failure without a stack trace.

Copyright (C) 2025 Paulo Ferreira de Castro

Licensed under the Open Software License version 3.0, a copy of which can be
found in the LICENSE file.
"""


class GPIOError(Exception):
    pass


# Pin numbering
class InvalidPinIdError(GPIOError):
    pass


class NoSuchPinError(GPIOError):
    """A board pin without a chip pin, e.g. a power or ground pin."""


class NotGPIOCapableError(GPIOError):
    pass


# Pin state machine
class AlreadyConfiguredError(GPIOError):
    pass


class NotConfiguredError(GPIOError):
    pass


class NotAnInputPinError(GPIOError):
    pass


class NotAnOutputPinError(GPIOError):
    pass


# I/O interface
class PinIOError(GPIOError):
    """An I/O adapter failure. The adapter's OSError is chained as __cause__."""


class InterfaceUnavailableError(GPIOError):
    pass


class InterfacePermissionError(GPIOError):
    pass
