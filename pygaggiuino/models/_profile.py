"""Models for brewing profiles."""

from __future__ import annotations

from dataclasses import dataclass, field

from mashumaro import field_options
from mashumaro.mixins.json import DataClassJSONMixin

from pygaggiuino.const import PhaseType
from pygaggiuino.util import (
    lenient_bool,
    strict_bool,
    strict_float,
    strict_float_dict,
    strict_int,
    strict_str,
)


@dataclass(frozen=True, kw_only=True)
class StopConditions(DataClassJSONMixin):
    """Conditions ending a phase. Any subset may be set."""

    pressure_above: float | None = field(
        metadata=field_options(alias="pressureAbove", deserialize=strict_float),
        default=None,
    )
    pressure_below: float | None = field(
        metadata=field_options(alias="pressureBelow", deserialize=strict_float),
        default=None,
    )
    time: int | None = field(
        metadata=field_options(deserialize=strict_int), default=None
    )
    weight: float | None = field(
        metadata=field_options(deserialize=strict_float), default=None
    )
    water_pumped_in_phase: int | None = field(
        metadata=field_options(alias="waterPumpedInPhase", deserialize=strict_int),
        default=None,
    )


@dataclass(frozen=True, kw_only=True)
class PhaseTarget(DataClassJSONMixin):
    """Target curve of a phase."""

    curve: str = field(metadata=field_options(deserialize=strict_str))
    end: float = field(metadata=field_options(deserialize=strict_float))
    start: float | None = field(
        metadata=field_options(deserialize=strict_float), default=None
    )
    time: int | None = field(
        metadata=field_options(deserialize=strict_int), default=None
    )


@dataclass(frozen=True, kw_only=True)
class Phase(DataClassJSONMixin):
    """One stage of a brewing profile."""

    restriction: float | None = field(
        metadata=field_options(deserialize=strict_float), default=None
    )
    skip: bool = field(metadata=field_options(deserialize=strict_bool), default=False)
    stop_conditions: StopConditions = field(
        metadata=field_options(alias="stopConditions"),
        default_factory=StopConditions,
    )
    target: PhaseTarget | None = field(default=None)
    type: PhaseType | None = field(default=None)


@dataclass(frozen=True, kw_only=True)
class ProfileRecipe(DataClassJSONMixin):
    """Brew recipe attached to a profile."""

    coffee_in: float | None = field(
        metadata=field_options(alias="coffeeIn", deserialize=strict_float),
        default=None,
    )
    ratio: float | None = field(
        metadata=field_options(deserialize=strict_float), default=None
    )


@dataclass(frozen=True, kw_only=True)
class Profile(DataClassJSONMixin):
    """Brewing profile stored on the machine."""

    id: int = field(metadata=field_options(deserialize=strict_int))
    name: str = field(metadata=field_options(deserialize=strict_str))
    # sent as a bool by some firmwares and as a string by others
    selected: bool | None = field(
        metadata=field_options(deserialize=lenient_bool), default=None
    )
    water_temperature: int | None = field(
        metadata=field_options(alias="waterTemperature", deserialize=strict_int),
        default=None,
    )
    phases: list[Phase] | None = field(default=None)
    global_stop_conditions: dict[str, float] | None = field(
        metadata=field_options(
            alias="globalStopConditions", deserialize=strict_float_dict
        ),
        default=None,
    )
    recipe: ProfileRecipe | None = field(default=None)
