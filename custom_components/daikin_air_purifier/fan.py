"""Fan entity representing the Daikin air purifier itself."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from homeassistant.components.fan import FanEntity, FanEntityFeature

from .const import DOMAIN, PRESET_AUTO
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
    """Set up the air purifier fan entity."""
    entry_data = hass.data[DOMAIN][entry.entry_id]
    async_add_entities(
        [DaikinAirPurifierFan(entry_data["coordinator"], entry_data["device"])]
    )


class DaikinAirPurifierFan(DaikinPurifierEntity, FanEntity):
    """Air purifier exposed as a fan that can be switched on and off.

    The device always purifies in automatic mode, so ``auto`` is the only
    preset.
    """

    _attr_name = None
    _attr_preset_modes = [PRESET_AUTO]
    _attr_supported_features = (
        FanEntityFeature.TURN_ON
        | FanEntityFeature.TURN_OFF
        | FanEntityFeature.PRESET_MODE
    )

    def __init__(
        self,
        coordinator: DaikinPurifierCoordinator,
        device: DaikinDevice,
    ) -> None:
        """Initialize the air purifier fan entity."""
        super().__init__(coordinator, device, "air_purifier")

    @property
    def is_on(self) -> bool:
        """Return True if the purifier is running."""
        return self.coordinator.current_power

    @property
    def preset_mode(self) -> str:
        """Return the target purifier mode."""
        return PRESET_AUTO

    async def async_turn_on(
        self,
        percentage: int | None = None,
        preset_mode: str | None = None,
        **kwargs: Any,  # noqa: ANN401
    ) -> None:
        """Turn the purifier on."""
        _LOGGER.info("Active => on for %s", self._device.name)
        await self._async_set_power(True)

    async def async_turn_off(self, **kwargs: Any) -> None:  # noqa: ANN401
        """Turn the purifier off."""
        _LOGGER.info("Active => off for %s", self._device.name)
        await self._async_set_power(False)

    async def async_set_preset_mode(self, preset_mode: str) -> None:
        """Accept the fixed automatic mode; the device has no other target."""
        _LOGGER.debug("Ignoring preset %s for %s", preset_mode, self._device.name)
