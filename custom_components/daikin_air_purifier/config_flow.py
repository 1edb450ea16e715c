"""
Configuration flow for Daikin Air Purifier integration.

This module handles the setup of a purifier through Home Assistant's config
flow system, checking that the device answers before creating the entry.
"""

import logging
from typing import Any

import voluptuous as vol
from homeassistant.config_entries import ConfigFlow, ConfigFlowResult
from homeassistant.const import CONF_IP_ADDRESS, CONF_NAME
from homeassistant.helpers.httpx_client import get_async_client

from . import api
from .const import (
    DOMAIN,
    ERROR_API_ERROR,
    ERROR_CANNOT_CONNECT,
    ERROR_TIMEOUT,
    ERROR_UNKNOWN,
)

_LOGGER = logging.getLogger(__name__)

DEFAULT_NAME = "Daikin Air Purifier"


class DaikinAirPurifierConfigFlow(ConfigFlow, domain=DOMAIN):
    """Handle configuration flow for Daikin Air Purifier integration."""

    VERSION = 1

    async def async_step_user(
        self, user_input: dict[str, Any] | None = None
    ) -> ConfigFlowResult:
        """
        Handle the initial step of the config flow.

        Args:
            user_input: User input data containing name and IP address.

        Returns:
            ConfigFlowResult indicating the next step or errors.

        """
        errors: dict[str, str] = {}

        if user_input is not None:
            name = user_input[CONF_NAME]
            ip_address = user_input[CONF_IP_ADDRESS].strip()

            try:
                client = api.DaikinPurifierClient(
                    get_async_client(self.hass), ip_address
                )
                await client.async_get_control_info()
                _LOGGER.info("Successfully contacted purifier at %s", ip_address)

            except ValueError:
                _LOGGER.warning("Empty IP address (%s)", ERROR_CANNOT_CONNECT)
                errors["base"] = ERROR_CANNOT_CONNECT
            except api.DaikinTimeoutError:
                _LOGGER.exception("Timeout error (%s)", ERROR_TIMEOUT)
                errors["base"] = ERROR_TIMEOUT
            except api.DaikinTransportError:
                _LOGGER.exception("Connection error (%s)", ERROR_CANNOT_CONNECT)
                errors["base"] = ERROR_CANNOT_CONNECT
            except api.DaikinApiClientError:
                _LOGGER.exception("API client error (%s)", ERROR_API_ERROR)
                errors["base"] = ERROR_API_ERROR
            except Exception:
                _LOGGER.exception(
                    "Unexpected error while contacting purifier (%s)",
                    ERROR_UNKNOWN,
                )
                errors["base"] = ERROR_UNKNOWN

            else:
                await self.async_set_unique_id(ip_address)
                self._abort_if_unique_id_configured()

                return self.async_create_entry(
                    title=name,
                    data={
                        CONF_NAME: name,
                        CONF_IP_ADDRESS: ip_address,
                    },
                )

        return self.async_show_form(
            step_id="user",
            data_schema=vol.Schema(
                {
                    vol.Required(CONF_NAME, default=DEFAULT_NAME): str,
                    vol.Required(CONF_IP_ADDRESS): str,
                }
            ),
            errors=errors,
        )
