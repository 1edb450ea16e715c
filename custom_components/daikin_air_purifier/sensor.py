"""Sensor entities for Daikin air purifier measurements."""

from __future__ import annotations

from typing import TYPE_CHECKING

from homeassistant.components.sensor import (
    SensorDeviceClass,
    SensorEntity,
    SensorStateClass,
)
from homeassistant.const import PERCENTAGE, UnitOfTemperature

from .const import DOMAIN
from .entity import DaikinPurifierEntity

if TYPE_CHECKING:
    from homeassistant.config_entries import ConfigEntry
    from homeassistant.core import HomeAssistant
    from homeassistant.helpers.entity_platform import AddEntitiesCallback

    from .coordinator import DaikinPurifierCoordinator
    from .models import DaikinDevice


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up temperature and humidity sensors."""
    entry_data = hass.data[DOMAIN][entry.entry_id]
    coordinator = entry_data["coordinator"]
    device = entry_data["device"]
    async_add_entities(
        [
            DaikinTemperatureSensor(coordinator, device),
            DaikinHumiditySensor(coordinator, device),
        ]
    )


class DaikinTemperatureSensor(DaikinPurifierEntity, SensorEntity):
    """Room temperature measured by the purifier."""

    _attr_name = "Temperature"
    _attr_device_class = SensorDeviceClass.TEMPERATURE
    _attr_state_class = SensorStateClass.MEASUREMENT
    _attr_native_unit_of_measurement = UnitOfTemperature.CELSIUS

    def __init__(
        self,
        coordinator: DaikinPurifierCoordinator,
        device: DaikinDevice,
    ) -> None:
        super().__init__(coordinator, device, "temperature")

    @property
    def native_value(self) -> float:
        """Return the cached temperature."""
        return self.coordinator.current_temperature


class DaikinHumiditySensor(DaikinPurifierEntity, SensorEntity):
    """Relative humidity measured by the purifier."""

    _attr_name = "Humidity"
    _attr_device_class = SensorDeviceClass.HUMIDITY
    _attr_state_class = SensorStateClass.MEASUREMENT
    _attr_native_unit_of_measurement = PERCENTAGE

    def __init__(
        self,
        coordinator: DaikinPurifierCoordinator,
        device: DaikinDevice,
    ) -> None:
        super().__init__(coordinator, device, "humidity")

    @property
    def native_value(self) -> float:
        """Return the cached relative humidity."""
        return self.coordinator.current_humidity
