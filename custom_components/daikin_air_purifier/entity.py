"""Base entity for Daikin Air Purifier integration."""

from __future__ import annotations

from homeassistant.exceptions import HomeAssistantError
from homeassistant.helpers.device_registry import DeviceInfo
from homeassistant.helpers.update_coordinator import CoordinatorEntity

from .api import DaikinApiClientError
from .const import DOMAIN, MANUFACTURER, MODEL
from .coordinator import DaikinPurifierCoordinator
from .models import DaikinDevice


class DaikinPurifierEntity(CoordinatorEntity[DaikinPurifierCoordinator]):
    """Entity backed by the purifier coordinator's cached state."""

    _attr_has_entity_name = True

    def __init__(
        self,
        coordinator: DaikinPurifierCoordinator,
        device: DaikinDevice,
        key: str,
    ) -> None:
        """Initialize the entity.

        Args:
            coordinator: Coordinator holding the device state.
            device: Configured purifier.
            key: Suffix making the unique id distinct per entity.

        """
        super().__init__(coordinator)
        self._device = device
        self._attr_unique_id = f"{device.ip_address}_{key}"
        self._attr_device_info = DeviceInfo(
            identifiers={(DOMAIN, device.ip_address)},
            manufacturer=MANUFACTURER,
            model=MODEL,
            name=device.name,
        )

    @property
    def available(self) -> bool:
        """Return True once the device has been read successfully.

        A failed poll keeps the entity available with its last-known state.
        """
        return self.coordinator.data.updated_at is not None

    async def _async_set_power(self, on: bool) -> None:  # noqa: FBT001
        try:
            await self.coordinator.async_set_power(on)
        except DaikinApiClientError as err:
            error_msg = f"Failed to switch {self._device.name}: {err}"
            raise HomeAssistantError(error_msg) from err
