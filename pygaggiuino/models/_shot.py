"""Models for shot history.

Every series the machine records is transmitted in tenths of its physical
unit so it fits into integers. The raw series are kept exactly as sent; the
properties return the scaled values.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from mashumaro import field_options
from mashumaro.mixins.json import DataClassJSONMixin

from pygaggiuino.util import flexible_int, scale_tenths, strict_int, strict_int_list

from ._profile import Profile


@dataclass(frozen=True, kw_only=True)
class ShotDatapoints(DataClassJSONMixin):
    """Time series recorded during a shot."""

    pressure: list[int] | None = field(
        metadata=field_options(deserialize=strict_int_list), default=None
    )
    pump_flow: list[int] | None = field(
        metadata=field_options(alias="pumpFlow", deserialize=strict_int_list),
        default=None,
    )
    shot_weight: list[int] | None = field(
        metadata=field_options(alias="shotWeight", deserialize=strict_int_list),
        default=None,
    )
    target_pressure: list[int] | None = field(
        metadata=field_options(alias="targetPressure", deserialize=strict_int_list),
        default=None,
    )
    target_pump_flow: list[int] | None = field(
        metadata=field_options(alias="targetPumpFlow", deserialize=strict_int_list),
        default=None,
    )
    target_temperature: list[int] | None = field(
        metadata=field_options(alias="targetTemperature", deserialize=strict_int_list),
        default=None,
    )
    temperature: list[int] | None = field(
        metadata=field_options(deserialize=strict_int_list), default=None
    )
    time_in_shot: list[int] | None = field(
        metadata=field_options(alias="timeInShot", deserialize=strict_int_list),
        default=None,
    )
    water_pumped: list[int] | None = field(
        metadata=field_options(alias="waterPumped", deserialize=strict_int_list),
        default=None,
    )
    weight_flow: list[int] | None = field(
        metadata=field_options(alias="weightFlow", deserialize=strict_int_list),
        default=None,
    )

    @property
    def pressure_bar(self) -> list[float] | None:
        """Pressure in bar."""
        return scale_tenths(self.pressure)

    @property
    def pump_flow_ml_per_second(self) -> list[float] | None:
        """Pump flow in mL/s."""
        return scale_tenths(self.pump_flow)

    @property
    def shot_weight_grams(self) -> list[float] | None:
        """Shot weight in grams."""
        return scale_tenths(self.shot_weight)

    @property
    def target_pressure_bar(self) -> list[float] | None:
        """Target pressure in bar."""
        return scale_tenths(self.target_pressure)

    @property
    def target_pump_flow_ml_per_second(self) -> list[float] | None:
        """Target pump flow in mL/s."""
        return scale_tenths(self.target_pump_flow)

    @property
    def target_temperature_celsius(self) -> list[float] | None:
        """Target temperature in °C."""
        return scale_tenths(self.target_temperature)

    @property
    def temperature_celsius(self) -> list[float] | None:
        """Temperature in °C."""
        return scale_tenths(self.temperature)

    @property
    def time_in_shot_seconds(self) -> list[float] | None:
        """Time in shot in seconds."""
        return scale_tenths(self.time_in_shot)

    @property
    def water_pumped_ml(self) -> list[float] | None:
        """Water pumped in mL."""
        return scale_tenths(self.water_pumped)

    @property
    def weight_flow_grams_per_second(self) -> list[float] | None:
        """Weight flow in g/s."""
        return scale_tenths(self.weight_flow)


@dataclass(frozen=True, kw_only=True)
class Shot(DataClassJSONMixin):
    """A recorded extraction."""

    id: int = field(metadata=field_options(deserialize=strict_int))
    timestamp: int = field(metadata=field_options(deserialize=strict_int))
    duration: int = field(metadata=field_options(deserialize=strict_int))
    profile: Profile
    datapoints: ShotDatapoints

    @property
    def date(self) -> datetime:
        """Time the shot was pulled."""
        return datetime.fromtimestamp(self.timestamp, timezone.utc)

    @property
    def duration_seconds(self) -> float:
        """Duration of the shot in seconds."""
        return self.duration / 10.0


@dataclass(frozen=True, kw_only=True)
class LatestShot(DataClassJSONMixin):
    """Response of the latest shot endpoint."""

    last_shot_id: int = field(
        metadata=field_options(alias="lastShotId", deserialize=flexible_int)
    )
