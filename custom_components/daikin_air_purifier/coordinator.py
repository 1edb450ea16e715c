"""Coordinator for Daikin Air Purifier integration."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from datetime import timedelta
from typing import TYPE_CHECKING

from homeassistant.helpers.update_coordinator import DataUpdateCoordinator, UpdateFailed

from . import api
from .const import DEFAULT_POLL_INTERVAL, DOMAIN, FRESHNESS_WINDOW
from .models import ControlCommand, DeviceState

if TYPE_CHECKING:
    from homeassistant.config_entries import ConfigEntry
    from homeassistant.core import HomeAssistant

_LOGGER = logging.getLogger(__name__)


class DaikinPurifierCoordinator(DataUpdateCoordinator[DeviceState]):
    """Coordinator that caches purifier state and keeps it fresh.

    The background tick runs every DEFAULT_POLL_INTERVAL seconds but only
    hits the device when the cached state is older than FRESHNESS_WINDOW.
    Explicit refreshes and power writes always hit the device and raise on
    failure; background failures are logged and the previous state is kept.
    """

    def __init__(
        self,
        hass: HomeAssistant,
        config_entry: ConfigEntry | None,
        client: api.DaikinPurifierClient,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the coordinator.

        Args:
            hass: Home Assistant instance.
            config_entry: Config entry owning this coordinator.
            client: Client for the purifier API.
            clock: Monotonic clock returning seconds.

        """
        super().__init__(
            hass,
            _LOGGER,
            config_entry=config_entry,
            name=f"{DOMAIN}_{client.ip_address}",
            update_interval=timedelta(seconds=DEFAULT_POLL_INTERVAL),
            always_update=False,
        )
        self.client = client
        self._clock = clock
        self.data = DeviceState()

    @property
    def is_stale(self) -> bool:
        """Return True if the cached state must be refetched."""
        updated_at = self.data.updated_at
        if updated_at is None:
            return True
        return self._clock() - updated_at >= FRESHNESS_WINDOW

    @property
    def current_power(self) -> bool:
        """Return the cached power state."""
        return self.data.control.power

    @property
    def current_humidifier_active(self) -> bool:
        """Return whether the humidifier is running, per the cache."""
        return self.data.control.humidifier

    @property
    def current_temperature(self) -> float:
        """Return the cached temperature in Celsius."""
        return self.data.sensor.temperature

    @property
    def current_humidity(self) -> float:
        """Return the cached relative humidity in percent."""
        return self.data.sensor.humidity

    async def _async_fetch_state(self) -> DeviceState:
        control, sensor = await self.client.async_get_status()
        return DeviceState(
            updated_at=self._clock(),
            control=control,
            sensor=sensor,
        )

    async def _async_update_data(self) -> DeviceState:
        """Refresh the state on a background tick if it is stale."""
        if not self.is_stale:
            _LOGGER.debug("use cached")
            return self.data

        try:
            state = await self._async_fetch_state()
        except api.DaikinApiClientError as err:
            error_msg = f"Error while polling purifier: {err}"
            raise UpdateFailed(error_msg) from err

        _LOGGER.debug("Polled state for %s: %s", self.client.ip_address, state)
        return state

    async def async_refresh_state(self) -> None:
        """Fetch the device state now, regardless of freshness.

        On failure the cached state is left unchanged.

        Raises:
            DaikinApiClientError: If fetching the state fails.

        """
        state = await self._async_fetch_state()
        _LOGGER.debug("Refreshed state for %s: %s", self.client.ip_address, state)
        self.async_set_updated_data(state)

    async def async_set_power(self, on: bool) -> None:  # noqa: FBT001
        """Switch the purifier on or off and resynchronize the cache.

        Raises:
            DaikinApiClientError: If the command or the refresh fails.

        """
        _LOGGER.info("Setting power of %s to %s", self.client.ip_address, on)
        await self.client.async_set_control_info(ControlCommand(power=on))
        await self.async_refresh_state()
