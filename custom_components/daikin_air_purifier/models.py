"""Data models for Daikin Air Purifier integration."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class DaikinDevice:
    """Represents a configured Daikin air purifier."""

    name: str
    ip_address: str


@dataclass(frozen=True, slots=True)
class ControlInfo:
    """Operating state decoded from get_control_info."""

    power: bool
    humidifier: bool


@dataclass(frozen=True, slots=True)
class SensorInfo:
    """Measurements decoded from get_sensor_info."""

    temperature: float
    humidity: float


@dataclass(frozen=True, slots=True)
class ControlCommand:
    """Writable control fields sent to set_control_info."""

    power: bool


@dataclass(frozen=True, slots=True)
class DeviceState:
    """Snapshot of the device held by the coordinator.

    Replaced as a whole on every successful refresh. ``updated_at`` is the
    coordinator clock reading at replacement time, or None before the first
    successful refresh.
    """

    updated_at: float | None = None
    control: ControlInfo = field(
        default_factory=lambda: ControlInfo(power=False, humidifier=False)
    )
    sensor: SensorInfo = field(
        default_factory=lambda: SensorInfo(temperature=0.0, humidity=0.0)
    )
