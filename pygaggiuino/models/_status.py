"""Models for the live machine status."""

from __future__ import annotations

from dataclasses import dataclass, field

from mashumaro import field_options
from mashumaro.mixins.json import DataClassJSONMixin

from pygaggiuino.util import (
    flexible_bool,
    flexible_float,
    flexible_int,
    strict_str,
)


@dataclass(frozen=True, kw_only=True)
class MachineStatus(DataClassJSONMixin):
    """Live status of the machine.

    Numeric and boolean fields arrive either natively or as strings,
    depending on the firmware version.
    """

    profile_id: int = field(
        metadata=field_options(alias="profileId", deserialize=flexible_int)
    )
    profile_name: str = field(
        metadata=field_options(alias="profileName", deserialize=strict_str)
    )
    temperature: float = field(metadata=field_options(deserialize=flexible_float))
    target_temperature: float = field(
        metadata=field_options(alias="targetTemperature", deserialize=flexible_float)
    )
    pressure: float = field(metadata=field_options(deserialize=flexible_float))
    water_level: int = field(
        metadata=field_options(alias="waterLevel", deserialize=flexible_int)
    )
    weight: float = field(metadata=field_options(deserialize=flexible_float))
    brew_switch_state: bool = field(
        metadata=field_options(alias="brewSwitchState", deserialize=flexible_bool)
    )
    steam_switch_state: bool = field(
        metadata=field_options(alias="steamSwitchState", deserialize=flexible_bool)
    )
    up_time: int = field(
        metadata=field_options(alias="upTime", deserialize=flexible_int)
    )
