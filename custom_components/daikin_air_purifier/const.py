"""Constants for Daikin Air Purifier integration.

This module contains all the constants used throughout the integration,
including device endpoints, timing values, configuration keys, and the
status code tables.
"""

DOMAIN = "daikin_air_purifier"

MANUFACTURER = "Daikin"
MODEL = "Unknown"

ENDPOINT_PREFIX = "/cleaner"
ENDPOINT_GET_SENSOR_INFO = f"{ENDPOINT_PREFIX}/get_sensor_info"
ENDPOINT_GET_CONTROL_INFO = f"{ENDPOINT_PREFIX}/get_control_info"
ENDPOINT_SET_CONTROL_INFO = f"{ENDPOINT_PREFIX}/set_control_info"

RESPONSE_OK = "OK"

DEFAULT_POLL_INTERVAL = 10  # Seconds between background staleness checks
FRESHNESS_WINDOW = 5.0  # Seconds a fetched state is trusted
REQUEST_TIMEOUT = 5.0

ERROR_CANNOT_CONNECT = "cannot_connect"
ERROR_TIMEOUT = "timeout_error"
ERROR_API_ERROR = "api_error"
ERROR_UNKNOWN = "unknown_error"

FIELD_RET = "ret"
FIELD_POWER = "pow"
FIELD_HUMIDIFIER = "humd"
FIELD_TEMPERATURE = "htemp"
FIELD_HUMIDITY = "hhum"

POWER_CODE_MAP = {
    "0": False,
    "1": True,
}
POWER_REVERSE_MAP = {value: key for key, value in POWER_CODE_MAP.items()}
HUMIDIFIER_CODE_MAP = {
    "0": False,
    "1": True,  # Low
    "2": True,  # Medium
    "3": True,  # High
    "4": True,  # Auto
}

PRESET_AUTO = "auto"
