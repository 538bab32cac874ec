"""I/O adapter for the Linux GPIO character device, through the `gpiod` package.

Copyright (C) 2025 Paulo Ferreira de Castro

Licensed under the Open Software License version 3.0, a copy of which can be
found in the LICENSE file.
"""

import logging
import os
from os.path import exists
from typing import Final

from gpiod import LineRequest, LineSettings, request_lines
from gpiod.line import Direction, Value

from .adapter import GPIO_CHIP_PATH, DirectionStr, ValueInt

_LOGGER = logging.getLogger(__name__)

_DIRECTIONS: Final = {"in": Direction.INPUT, "out": Direction.OUTPUT}


class GpiodAdapter:
    """Drive GPIO lines through libgpiod line requests.

    A line is requested the first time its direction is written, and the request
    is held (and reconfigured on later direction changes) until close().
    """

    def __init__(self, chip_path: str = GPIO_CHIP_PATH, consumer: str = "pinctl"):
        self.chip_path = chip_path
        self.consumer = consumer
        self._requests: dict[int, LineRequest] = {}

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.chip_path!r})"

    def backing_root_exists(self) -> bool:
        return exists(self.chip_path)

    def is_writable(self, chip_pin: int) -> bool:
        # Line requests are made on the chip device, not per pin.
        return os.access(self.chip_path, os.R_OK | os.W_OK)

    def write_direction(self, chip_pin: int, direction: DirectionStr):
        settings = LineSettings(direction=_DIRECTIONS[direction])
        try:
            if line_req := self._requests.get(chip_pin):
                line_req.reconfigure_lines(config={chip_pin: settings})
            else:
                self._requests[chip_pin] = request_lines(
                    path=self.chip_path,
                    consumer=self.consumer,
                    config={chip_pin: settings},
                )
        except ValueError as e:
            raise OSError(f"{self.chip_path} line {chip_pin}: {e}") from e
        _LOGGER.debug(
            "Line %d of '%s' set to '%s'", chip_pin, self.chip_path, direction
        )

    def _get_request(self, chip_pin: int) -> LineRequest:
        try:
            return self._requests[chip_pin]
        except KeyError:
            raise OSError(
                f"{self.chip_path} line {chip_pin} has not been requested"
            ) from None

    def write_value(self, chip_pin: int, value: ValueInt):
        line_req = self._get_request(chip_pin)
        try:
            line_req.set_value(chip_pin, Value.ACTIVE if value else Value.INACTIVE)
        except ValueError as e:
            raise OSError(f"{self.chip_path} line {chip_pin}: {e}") from e

    def read_value(self, chip_pin: int) -> str:
        line_req = self._get_request(chip_pin)
        try:
            return str(int(line_req.get_value(chip_pin) == Value.ACTIVE))
        except ValueError as e:
            raise OSError(f"{self.chip_path} line {chip_pin}: {e}") from e

    def close(self):
        requests, self._requests = self._requests, {}
        for chip_pin, line_req in requests.items():
            _LOGGER.debug("Releasing line %d of '%s'", chip_pin, self.chip_path)
            line_req.release()
