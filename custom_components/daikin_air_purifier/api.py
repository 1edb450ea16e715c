"""API client for Daikin air purifiers.

This module talks to the purifier's local HTTP API. Responses are plain text
made of comma-separated ``key=value`` pairs, for example
``ret=OK,pow=1,mode=1,airvol=0,humd=4``.
"""

from __future__ import annotations

import asyncio
import logging
import math
from typing import TYPE_CHECKING

import httpx
from homeassistant.helpers.httpx_client import create_async_httpx_client

from .const import (
    ENDPOINT_GET_CONTROL_INFO,
    ENDPOINT_GET_SENSOR_INFO,
    ENDPOINT_SET_CONTROL_INFO,
    FIELD_HUMIDIFIER,
    FIELD_HUMIDITY,
    FIELD_POWER,
    FIELD_RET,
    FIELD_TEMPERATURE,
    HUMIDIFIER_CODE_MAP,
    POWER_CODE_MAP,
    POWER_REVERSE_MAP,
    REQUEST_TIMEOUT,
    RESPONSE_OK,
)
from .models import ControlCommand, ControlInfo, SensorInfo

if TYPE_CHECKING:
    from homeassistant.core import HomeAssistant

_LOGGER = logging.getLogger(__name__)

# HTTP status codes
HTTP_BAD_REQUEST = 400


class DaikinApiClientError(Exception):
    """Base exception for Daikin API client errors."""


class DaikinTransportError(DaikinApiClientError):
    """Exception raised when the HTTP call itself fails."""


class DaikinTimeoutError(DaikinTransportError):
    """Exception raised when the device does not answer in time."""


class DaikinProtocolError(DaikinApiClientError):
    """Exception raised when the device does not answer ret=OK."""


class DaikinDecodeError(DaikinApiClientError):
    """Exception raised for field values that cannot be decoded."""


def is_http_error(status: int) -> bool:
    """Check if HTTP status code indicates an error.

    Args:
        status: HTTP status code to check.

    Returns:
        True if status code is 400 or higher, False otherwise.

    """
    return status >= HTTP_BAD_REQUEST


def parse_response(body: str) -> dict[str, str]:
    """Parse a device response body into a mapping.

    Items are split on ``,`` and each item on its first ``=``. When a key
    repeats, the last occurrence wins.

    Args:
        body: Raw response text.

    Returns:
        Dictionary of field names to string values.

    """
    result: dict[str, str] = {}
    for item in body.strip().split(","):
        key, _, value = item.partition("=")
        result[key] = value
    return result


def is_ok_response(data: dict[str, str]) -> bool:
    """Check if a parsed response carries the ret=OK marker."""
    return data.get(FIELD_RET) == RESPONSE_OK


def validate_response(response: httpx.Response) -> dict[str, str]:
    """Validate HTTP response and return the parsed fields.

    Args:
        response: HTTP response object to validate.

    Returns:
        Parsed response fields.

    Raises:
        DaikinTransportError: If the HTTP status indicates an error.
        DaikinProtocolError: If the device did not report ret=OK.

    """
    if is_http_error(response.status_code):
        error_msg = f"Request failed: {response.status_code}"
        raise DaikinTransportError(error_msg)

    data = parse_response(response.text)
    _LOGGER.debug("Parsed response: %s", data)

    if not is_ok_response(data):
        error_msg = f"Device API failed: {data}"
        raise DaikinProtocolError(error_msg)

    return data


def decode_power(code: str | None) -> bool:
    """Decode the ``pow`` status code.

    Raises:
        DaikinDecodeError: If the code is not "0" or "1".

    """
    if code not in POWER_CODE_MAP:
        error_msg = f"Unknown value for {FIELD_POWER}: {code}"
        raise DaikinDecodeError(error_msg)
    return POWER_CODE_MAP[code]


def decode_humidifier(code: str | None) -> bool:
    """Decode the ``humd`` status code.

    Levels 1-3 and auto (4) all mean the humidifier is running.

    Raises:
        DaikinDecodeError: If the code is not in 0-4.

    """
    if code not in HUMIDIFIER_CODE_MAP:
        error_msg = f"Unknown value for {FIELD_HUMIDIFIER}: {code}"
        raise DaikinDecodeError(error_msg)
    return HUMIDIFIER_CODE_MAP[code]


def decode_sensor_value(name: str, value: str | None) -> float:
    """Decode a numeric sensor field.

    Raises:
        DaikinDecodeError: If the value is missing, not numeric or not finite.

    """
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as err:
        error_msg = f"Invalid value for {name}: {value}"
        raise DaikinDecodeError(error_msg) from err

    if not math.isfinite(number):
        error_msg = f"Invalid value for {name}: {value}"
        raise DaikinDecodeError(error_msg)

    return number


def encode_power(power: bool) -> str:  # noqa: FBT001
    """Encode a power flag as the device ``pow`` code."""
    return POWER_REVERSE_MAP[power]


def extract_control_info(data: dict[str, str]) -> ControlInfo:
    """Build ControlInfo from a get_control_info response."""
    return ControlInfo(
        power=decode_power(data.get(FIELD_POWER)),
        humidifier=decode_humidifier(data.get(FIELD_HUMIDIFIER)),
    )


def extract_sensor_info(data: dict[str, str]) -> SensorInfo:
    """Build SensorInfo from a get_sensor_info response."""
    return SensorInfo(
        temperature=decode_sensor_value(
            FIELD_TEMPERATURE, data.get(FIELD_TEMPERATURE)
        ),
        humidity=decode_sensor_value(FIELD_HUMIDITY, data.get(FIELD_HUMIDITY)),
    )


def create_session_client(hass: HomeAssistant) -> httpx.AsyncClient:
    """Create HTTP client for talking to the purifier.

    Args:
        hass: Home Assistant instance.

    Returns:
        Configured httpx AsyncClient.

    """
    return create_async_httpx_client(hass, timeout=REQUEST_TIMEOUT)


class DaikinPurifierClient:
    """Client for a single purifier's local HTTP API.

    Holds no device state between calls.
    """

    def __init__(self, session: httpx.AsyncClient, ip_address: str) -> None:
        """Initialize the client.

        Args:
            session: HTTP client session.
            ip_address: Address of the purifier on the local network.

        Raises:
            ValueError: If the IP address is empty.

        """
        if not ip_address:
            error_msg = "ip address is missing"
            raise ValueError(error_msg)

        self._session = session
        self._ip_address = ip_address

    @property
    def ip_address(self) -> str:
        """Return the purifier address."""
        return self._ip_address

    @property
    def base_url(self) -> str:
        """Return the base URL of the purifier API."""
        return f"http://{self._ip_address}"

    async def async_call(
        self,
        path: str,
        params: dict[str, str] | None = None,
    ) -> dict[str, str]:
        """Issue a GET request and return the parsed response fields.

        Args:
            path: Endpoint path, e.g. ``/cleaner/get_control_info``.
            params: Optional query parameters.

        Returns:
            Parsed response fields.

        Raises:
            DaikinTransportError: If the request fails or times out.
            DaikinProtocolError: If the device did not report ret=OK.

        """
        url = f"{self.base_url}{path}"
        params = params or {}

        _LOGGER.debug("GET %s", url)
        _LOGGER.debug("args: %s", params)

        try:
            response = await self._session.get(url, params=params)
        except httpx.TimeoutException as err:
            error_msg = f"Timeout while calling {url}: {err}"
            raise DaikinTimeoutError(error_msg) from err
        except httpx.RequestError as err:
            error_msg = f"Connection error while calling {url}: {err}"
            raise DaikinTransportError(error_msg) from err

        _LOGGER.debug("raw resp: %s", response.text)
        return validate_response(response)

    async def async_get_sensor_info(self) -> SensorInfo:
        """Fetch temperature and humidity readings.

        Raises:
            DaikinApiClientError: If the request or decoding fails.

        """
        data = await self.async_call(ENDPOINT_GET_SENSOR_INFO)
        return extract_sensor_info(data)

    async def async_get_control_info(self) -> ControlInfo:
        """Fetch power and humidifier state.

        Raises:
            DaikinApiClientError: If the request or decoding fails.

        """
        data = await self.async_call(ENDPOINT_GET_CONTROL_INFO)
        return extract_control_info(data)

    async def async_set_control_info(self, command: ControlCommand) -> None:
        """Send a control command.

        The device state is not read back; refresh separately to observe it.

        Raises:
            DaikinApiClientError: If the request fails.

        """
        _LOGGER.debug("Sending control command to %s: %s", self._ip_address, command)
        await self.async_call(
            ENDPOINT_SET_CONTROL_INFO,
            {FIELD_POWER: encode_power(command.power)},
        )

    async def async_get_status(self) -> tuple[ControlInfo, SensorInfo]:
        """Fetch control and sensor info concurrently.

        Both requests run to completion before an error is raised.

        Raises:
            DaikinApiClientError: If either fetch fails.

        """
        control, sensor = await asyncio.gather(
            self.async_get_control_info(),
            self.async_get_sensor_info(),
            return_exceptions=True,
        )
        if isinstance(control, BaseException):
            raise control
        if isinstance(sensor, BaseException):
            raise sensor
        return control, sensor
