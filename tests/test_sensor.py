"""Tests for the Daikin Air Purifier sensor entities."""

from unittest.mock import Mock

import pytest
from homeassistant.components.sensor import SensorDeviceClass
from homeassistant.const import PERCENTAGE, UnitOfTemperature

from custom_components.daikin_air_purifier.const import DOMAIN
from custom_components.daikin_air_purifier.models import DaikinDevice
from custom_components.daikin_air_purifier.sensor import (
    DaikinHumiditySensor,
    DaikinTemperatureSensor,
    async_setup_entry,
)


class TestAsyncSetupEntry:
    """Tests for async_setup_entry function."""

    @pytest.mark.asyncio
    async def test_async_setup_entry_adds_both_sensors(
        self,
        mock_hass: Mock,
        mock_coordinator: Mock,
        device: DaikinDevice,
    ) -> None:
        """Test that temperature and humidity sensors are added."""
        entry = Mock()
        entry.entry_id = "test_entry"
        mock_hass.data[DOMAIN] = {
            "test_entry": {"coordinator": mock_coordinator, "device": device},
        }
        async_add_entities = Mock()
        await async_setup_entry(mock_hass, entry, async_add_entities)
        entities = async_add_entities.call_args[0][0]
        assert [type(entity) for entity in entities] == [
            DaikinTemperatureSensor,
            DaikinHumiditySensor,
        ]


class TestDaikinTemperatureSensor:
    """Tests for DaikinTemperatureSensor."""

    def test_reports_cached_temperature(
        self,
        mock_coordinator: Mock,
        device: DaikinDevice,
    ) -> None:
        """Test value, unit and unique id."""
        sensor = DaikinTemperatureSensor(mock_coordinator, device)
        assert sensor.unique_id == f"{device.ip_address}_temperature"
        assert sensor.device_class == SensorDeviceClass.TEMPERATURE
        assert sensor.native_unit_of_measurement == UnitOfTemperature.CELSIUS
        assert sensor.native_value == pytest.approx(22.5)

        mock_coordinator.current_temperature = 19.0
        assert sensor.native_value == pytest.approx(19.0)


class TestDaikinHumiditySensor:
    """Tests for DaikinHumiditySensor."""

    def test_reports_cached_humidity(
        self,
        mock_coordinator: Mock,
        device: DaikinDevice,
    ) -> None:
        """Test value, unit and unique id."""
        sensor = DaikinHumiditySensor(mock_coordinator, device)
        assert sensor.unique_id == f"{device.ip_address}_humidity"
        assert sensor.device_class == SensorDeviceClass.HUMIDITY
        assert sensor.native_unit_of_measurement == PERCENTAGE
        assert sensor.native_value == pytest.approx(41.0)

    def test_keeps_cached_humidity_after_failed_poll(
        self,
        mock_coordinator: Mock,
        device: DaikinDevice,
    ) -> None:
        """Test that a failed background poll leaves the last reading visible."""
        sensor = DaikinHumiditySensor(mock_coordinator, device)
        mock_coordinator.last_update_success = False
        assert sensor.available is True
        assert sensor.native_value == pytest.approx(41.0)
