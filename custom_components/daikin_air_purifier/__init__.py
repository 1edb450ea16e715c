from __future__ import annotations

import logging

from homeassistant.config_entries import ConfigEntry
from homeassistant.const import CONF_IP_ADDRESS, CONF_NAME, Platform
from homeassistant.core import HomeAssistant

from . import api
from .api import create_session_client
from .const import DOMAIN
from .coordinator import DaikinPurifierCoordinator
from .models import DaikinDevice

_LOGGER = logging.getLogger(__name__)

PLATFORMS = [Platform.FAN, Platform.HUMIDIFIER, Platform.SENSOR]


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    _LOGGER.info("Setting up Daikin Air Purifier for entry %s", entry.entry_id)

    if not entry.data.get(CONF_IP_ADDRESS):
        _LOGGER.error("Missing ip address in configuration for entry %s", entry.entry_id)
        return False

    device = DaikinDevice(
        name=entry.data.get(CONF_NAME, entry.title),
        ip_address=entry.data[CONF_IP_ADDRESS],
    )
    session = create_session_client(hass)
    client = api.DaikinPurifierClient(session, device.ip_address)
    coordinator = DaikinPurifierCoordinator(hass, entry, client)

    try:
        await coordinator.async_refresh_state()
        _LOGGER.info("Fetched initial state from %s", device.ip_address)
    except api.DaikinApiClientError as err:
        _LOGGER.warning(
            "Initial refresh failed for %s, will retry on next poll: %s",
            device.ip_address,
            err,
        )

    hass.data.setdefault(DOMAIN, {})[entry.entry_id] = {
        "device": device,
        "client": client,
        "coordinator": coordinator,
    }
    _LOGGER.debug("Stored data for entry %s: %s", entry.entry_id, device)

    try:
        await hass.config_entries.async_forward_entry_setups(entry, PLATFORMS)
        _LOGGER.info(
            "Successfully setup Daikin Air Purifier for entry %s", entry.entry_id
        )
        return True
    except Exception as err:
        _LOGGER.error("Failed to setup platforms for entry %s: %s", entry.entry_id, err)
        await coordinator.async_shutdown()
        hass.data[DOMAIN].pop(entry.entry_id, None)
        return False


async def async_unload_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    _LOGGER.info("Unloading Daikin Air Purifier for entry %s", entry.entry_id)

    try:
        unload_ok = await hass.config_entries.async_unload_platforms(entry, PLATFORMS)
        if unload_ok:
            if DOMAIN in hass.data and entry.entry_id in hass.data[DOMAIN]:
                entry_data = hass.data[DOMAIN].pop(entry.entry_id)
                await entry_data["coordinator"].async_shutdown()
                _LOGGER.debug("Cleaned up data for entry %s", entry.entry_id)
            _LOGGER.info(
                "Successfully unloaded Daikin Air Purifier for entry %s",
                entry.entry_id,
            )
        else:
            _LOGGER.warning(
                "Failed to unload some platforms for entry %s", entry.entry_id
            )

        return unload_ok
    except Exception as err:
        _LOGGER.error(
            "Error unloading Daikin Air Purifier for entry %s: %s",
            entry.entry_id,
            err,
        )
        return False
