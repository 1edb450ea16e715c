"""Humidifier entity for Daikin air purifiers with a humidifying unit."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from homeassistant.components.humidifier import (
    HumidifierAction,
    HumidifierDeviceClass,
    HumidifierEntity,
)

from .const import DOMAIN
from .entity import DaikinPurifierEntity

if TYPE_CHECKING:
    from homeassistant.config_entries import ConfigEntry
    from homeassistant.core import HomeAssistant
    from homeassistant.helpers.entity_platform import AddEntitiesCallback

    from .coordinator import DaikinPurifierCoordinator
    from .models import DaikinDevice

_LOGGER = logging.getLogger(__name__)


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up the humidifier entity."""
    entry_data = hass.data[DOMAIN][entry.entry_id]
    async_add_entities(
        [DaikinHumidifierEntity(entry_data["coordinator"], entry_data["device"])]
    )


class DaikinHumidifierEntity(DaikinPurifierEntity, HumidifierEntity):
    """Humidifier sharing its on/off state with the purifier power."""

    _attr_name = "Humidifier"
    _attr_device_class = HumidifierDeviceClass.HUMIDIFIER

    def __init__(
        self,
        coordinator: DaikinPurifierCoordinator,
        device: DaikinDevice,
    ) -> None:
        """Initialize the humidifier entity."""
        super().__init__(coordinator, device, "humidifier")

    @property
    def is_on(self) -> bool:
        """Return True if the device is powered."""
        return self.coordinator.current_power

    @property
    def action(self) -> HumidifierAction:
        """Return what the humidifier is currently doing."""
        if self.coordinator.current_humidifier_active:
            return HumidifierAction.HUMIDIFYING
        if self.coordinator.current_power:
            return HumidifierAction.IDLE
        return HumidifierAction.OFF

    @property
    def current_humidity(self) -> float:
        """Return the measured relative humidity."""
        return self.coordinator.current_humidity

    async def async_turn_on(self, **kwargs: Any) -> None:  # noqa: ANN401
        """Turn the device on."""
        _LOGGER.info("Active => on for %s", self._device.name)
        await self._async_set_power(True)

    async def async_turn_off(self, **kwargs: Any) -> None:  # noqa: ANN401
        """Turn the device off."""
        _LOGGER.info("Active => off for %s", self._device.name)
        await self._async_set_power(False)
