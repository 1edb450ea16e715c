"""Pytest configuration and fixtures for Daikin Air Purifier tests."""

from unittest.mock import AsyncMock, Mock

import httpx
import pytest

from custom_components.daikin_air_purifier.models import (
    ControlInfo,
    DaikinDevice,
    DeviceState,
    SensorInfo,
)

TEST_IP_ADDRESS = "192.0.2.10"
TEST_NAME = "Living Room Purifier"


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    """Fixture providing a simulated clock."""
    return FakeClock()


@pytest.fixture
def mock_hass() -> Mock:
    """Create a mock Home Assistant instance."""
    hass = Mock()
    hass.data = {}
    hass.config_entries = Mock()
    hass.config_entries.async_forward_entry_setups = AsyncMock()
    hass.config_entries.async_unload_platforms = AsyncMock(return_value=True)
    return hass


@pytest.fixture
def mock_config_entry() -> Mock:
    """Create a mock config entry for testing."""
    entry = Mock()
    entry.entry_id = "test_entry_id"
    entry.title = TEST_NAME
    entry.data = {"name": TEST_NAME, "ip_address": TEST_IP_ADDRESS}
    return entry


@pytest.fixture
def mock_session() -> Mock:
    """Create a mock HTTP session."""
    return Mock(spec=httpx.AsyncClient)


@pytest.fixture
def control_info_body() -> str:
    """Fixture providing a get_control_info response with humidifier on auto."""
    return "ret=OK,pow=1,mode=1,airvol=0,humd=4"


@pytest.fixture
def control_info_off_body() -> str:
    """Fixture providing a get_control_info response for a switched off device."""
    return "ret=OK,pow=0,mode=1,airvol=0,humd=0"


@pytest.fixture
def sensor_info_body() -> str:
    """Fixture providing a get_sensor_info response."""
    return "ret=OK,htemp=22.5,hhum=41,pm25=3,dust=0,odor=10"


@pytest.fixture
def set_control_info_body() -> str:
    """Fixture providing a set_control_info response."""
    return "ret=OK,adv="


@pytest.fixture
def device() -> DaikinDevice:
    """Fixture providing the configured purifier."""
    return DaikinDevice(name=TEST_NAME, ip_address=TEST_IP_ADDRESS)


@pytest.fixture
def mock_coordinator() -> Mock:
    """Create a mock coordinator holding a powered, humidifying purifier."""
    coordinator = Mock()
    coordinator.data = DeviceState(
        updated_at=1000.0,
        control=ControlInfo(power=True, humidifier=True),
        sensor=SensorInfo(temperature=22.5, humidity=41.0),
    )
    coordinator.last_update_success = True
    coordinator.current_power = True
    coordinator.current_humidifier_active = True
    coordinator.current_temperature = 22.5
    coordinator.current_humidity = 41.0
    coordinator.async_set_power = AsyncMock()
    coordinator.async_add_listener = Mock(return_value=Mock())
    return coordinator
