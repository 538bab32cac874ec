"""Configuration model classes (configuration file schema).

Sample configuration file:

    [controller]
    numbering_scheme = "board"
    adapter = "sysfs"
    base_path = "/sys/class/gpio/gpio"

    [[pins]]
    slug = "relay"
    pin = 12
    direction = "output"

Copyright (C) 2025 Paulo Ferreira de Castro

Licensed under the Open Software License version 3.0, a copy of which can be
found in the LICENSE file.
"""

import os
from typing import Any, Literal, Self, override

from pydantic import (
    BaseModel,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from ..gpio.adapter import GPIO_CHIP_PATH, SYSFS_GPIO_PATH
from ..gpio.error import GPIOError
from .capability import capability_of, is_gpio
from .pin_map import NumberingScheme, translate

BASE_PATH_ENV_VAR = "PINCTL_BASE_PATH"


class ConfigError(Exception):
    pass


class ControllerConfig(BaseModel):
    numbering_scheme: NumberingScheme = NumberingScheme.BOARD
    # adapter: 'sysfs' (files under base_path), 'gpiod' (character device at
    # chip_path) or 'dry_run' (log writes, read zeros).
    adapter: Literal["sysfs", "gpiod", "dry_run"] = "sysfs"
    base_path: str = SYSFS_GPIO_PATH
    chip_path: str = GPIO_CHIP_PATH
    consumer: str = "pinctl"  # Line consumer label shown by 'gpioinfo'

    # pylint incorrectly reports that the parent has a different number of arguments.
    # pylint: disable=arguments-differ
    @override
    def model_post_init(self, context: Any):
        """Use the value of the PINCTL_BASE_PATH environment variable, if set."""
        # An env var (if set) takes precedence over the config file setting.
        env_str = os.environ.get(BASE_PATH_ENV_VAR, "").strip()
        if env_str:
            self.base_path = env_str
        super().model_post_init(context)


class PinConfig(BaseModel):
    slug: str  # Short descriptive name like 'relay' or 'door_sensor'
    pin: int  # In the controller's numbering scheme
    direction: Literal["input", "output"]

    @field_validator("slug")
    @classmethod
    def must_not_be_numeric(cls, value: str) -> str:
        if not value or value.isdigit():
            raise ValueError(
                f"'slug' must be a non-empty, non-numeric name, found '{value}'"
            )
        return value


class CoreConfig(BaseModel):
    controller: ControllerConfig = Field(default_factory=ControllerConfig)
    # pydantic's BaseModel correctly handles mutable default values (= [])
    pins: list[PinConfig] = []

    @model_validator(mode="after")
    def validate_pins(self) -> Self:
        scheme = self.controller.numbering_scheme
        seen: set[str] = set()
        for pin_cfg in self.pins:
            if pin_cfg.slug in seen:
                raise ValueError(f"Duplicate pin slug '{pin_cfg.slug}'")
            seen.add(pin_cfg.slug)
            try:
                chip_pin = translate(pin_cfg.pin, scheme)
            except GPIOError as e:
                raise ValueError(f"Pin '{pin_cfg.slug}': {e}") from e
            if not is_gpio(chip_pin):
                raise ValueError(
                    f"Pin '{pin_cfg.slug}': {scheme} pin {pin_cfg.pin} is not a "
                    f"GPIO pin ({capability_of(chip_pin).value})"
                )
        return self

    def get_pin(self, slug: str) -> PinConfig | None:
        for pin_cfg in self.pins:
            if pin_cfg.slug == slug:
                return pin_cfg
        return None


def load_config_file(config_file: str) -> dict[str, Any]:
    """Load and parse the TOML configuration file."""
    from tomllib import load, TOMLDecodeError

    try:
        with open(config_file, "rb") as f:
            return load(f)
    except TOMLDecodeError as e:
        raise ConfigError(
            f"Failed to parse configuration file '{config_file}':\n{e}"
        ) from e
    except OSError as e:
        raise ConfigError(
            f"Failed to read configuration file '{config_file}': {e}"
        ) from e


def validate_config(config_obj: dict[str, Any]) -> CoreConfig:
    """Validate the TOML configuration file using a Pydantic model."""
    try:
        return CoreConfig(**config_obj)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration file:\n{e}") from e
