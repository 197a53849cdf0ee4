"""Tests for GoCube discovery."""

import asyncio
from types import SimpleNamespace
from unittest.mock import AsyncMock, patch

import pytest

from gocube_ble.const import PRIMARY_SERVICE_UUID
from gocube_ble.discovery import discover, find_first, match_advertisement
from gocube_ble.exceptions import DeviceNotFoundError


def test_match_by_name():
    assert match_advertisement("GoCube_1234", None)
    assert match_advertisement("gocubeX", [])
    assert match_advertisement("Rubiks_Connected", [])
    assert not match_advertisement("GAN-1234", [])
    assert not match_advertisement(None, None)


def test_match_by_service_uuid():
    assert match_advertisement(None, [PRIMARY_SERVICE_UUID.upper()])
    assert not match_advertisement("Speaker", ["0000180f-0000-1000-8000-00805f9b34fb"])


def _advertised(address, name, rssi, uuids=()):
    device = SimpleNamespace(address=address, name=name)
    advertisement = SimpleNamespace(local_name=name, rssi=rssi, service_uuids=list(uuids))
    return address, (device, advertisement)


def test_discover_filters_and_sorts():
    found = dict(
        [
            _advertised("AA", "GoCube_far", -80),
            _advertised("BB", "Headphones", -30),
            _advertised("CC", "GoCube_near", -40),
            _advertised("DD", None, -60, [PRIMARY_SERVICE_UUID]),
        ]
    )
    with patch(
        "gocube_ble.discovery.BleakScanner.discover", AsyncMock(return_value=found)
    ):
        cubes = asyncio.run(discover(timeout=1.0))

    assert [cube.address for cube in cubes] == ["CC", "DD", "AA"]
    assert cubes[0].name == "GoCube_near"
    assert cubes[1].name == "DD"
    assert cubes[0].rssi == -40


def test_find_first_raises_when_empty():
    with patch("gocube_ble.discovery.BleakScanner.discover", AsyncMock(return_value={})):
        with pytest.raises(DeviceNotFoundError):
            asyncio.run(find_first(timeout=1.0))
