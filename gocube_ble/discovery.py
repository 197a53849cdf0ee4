"""Discovery of GoCube devices from BLE advertisements."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List

from bleak import BleakScanner
from bleak.backends.device import BLEDevice

from .const import NAME_PREFIXES, PRIMARY_SERVICE_UUID, SCAN_TIMEOUT
from .exceptions import DeviceNotFoundError

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class DiscoveredCube:
    """A GoCube seen during a scan."""

    name: str
    address: str
    rssi: int
    device: BLEDevice


def match_advertisement(
    name: str | None,
    service_uuids: Iterable[str] | None,
) -> bool:
    """Return whether a BLE advertisement belongs to a GoCube."""
    name_value = (name or "").lower()
    if name_value.startswith(NAME_PREFIXES):
        return True
    return any(
        uuid.lower() == PRIMARY_SERVICE_UUID for uuid in (service_uuids or ())
    )


async def discover(timeout: float = SCAN_TIMEOUT) -> List[DiscoveredCube]:
    """Scan for GoCubes, strongest signal first."""
    found = await BleakScanner.discover(timeout=timeout, return_adv=True)
    cubes = []
    for device, advertisement in found.values():
        name = advertisement.local_name or device.name
        if not match_advertisement(name, advertisement.service_uuids):
            continue
        cubes.append(
            DiscoveredCube(
                name=name or device.address,
                address=device.address,
                rssi=advertisement.rssi,
                device=device,
            )
        )
    _LOGGER.debug("Found %s GoCube(s)", len(cubes))
    return sorted(cubes, key=lambda cube: cube.rssi, reverse=True)


async def find_first(timeout: float = SCAN_TIMEOUT) -> DiscoveredCube:
    """Return the nearest GoCube."""
    cubes = await discover(timeout)
    if not cubes:
        raise DeviceNotFoundError("no GoCube found")
    return cubes[0]
