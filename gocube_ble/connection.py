"""GoCube Bluetooth connection feeding the decode and tracking pipeline."""

from __future__ import annotations

import asyncio
import logging
from typing import List, Optional

from bleak import BleakClient
from bleak.backends.device import BLEDevice
from bleak_retry_connector import establish_connection

from .base import BaseCubeConnection
from .const import (
    SCAN_TIMEOUT,
    CMD_CALIBRATE_ORIENTATION,
    CMD_DISABLE_ORIENTATION,
    CMD_ENABLE_ORIENTATION,
    CMD_FLASH_BACKLIGHT,
    CMD_REBOOT,
    CMD_REQUEST_BATTERY,
    CMD_REQUEST_CUBE_TYPE,
    CMD_REQUEST_OFFLINE_STATS,
    CMD_REQUEST_STATE,
    CMD_RESET_SOLVED,
    CMD_SLOW_FLASH_BACKLIGHT,
    CMD_TOGGLE_ANIMATED_BACKLIGHT,
    CMD_TOGGLE_BACKLIGHT,
    RX_CHARACTERISTIC_UUID,
    TX_CHARACTERISTIC_UUID,
)
from .cube import PuzzleState
from .decoder import (
    BatteryEvent,
    CubeEvent,
    CubeTypeEvent,
    OfflineStatsEvent,
    OrientationEvent,
    RotationsEvent,
    UnknownEvent,
    decode_payload,
)
from .discovery import DiscoveredCube, find_first
from .exceptions import (
    DeviceNotFoundError,
    GoCubeConnectionError,
    GoCubeError,
    NotConnectedError,
)
from .helpers.state import update_cube_state
from .models import GoCubeOptions
from .moves import Move
from .phases import Phase
from .protocol import build_command, parse_message
from .tracker import ProgressTracker
from .translator import rotations_to_moves

_LOGGER = logging.getLogger(__name__)


class GoCubeConnection(BaseCubeConnection):
    """Manager for a GoCube Bluetooth connection.

    Notifications are decoded and applied to the tracker synchronously in the
    notification handler, so each notification is fully processed before the
    next one is delivered.
    """

    def __init__(self, options: GoCubeOptions | None = None) -> None:
        super().__init__()
        self._options = options or GoCubeOptions()
        self._client: Optional[BleakClient] = None
        self._device: Optional[BLEDevice] = None
        self._address: str | None = None
        self._closing = False
        self._reconnect_task: asyncio.Task | None = None
        self._tracker = ProgressTracker()
        self._tracker.register_phase_callback(self._handle_phase)
        self._moves: List[Move] = []
        self._pending_phases: List[Phase] = []

    @property
    def options(self) -> GoCubeOptions:
        """Return the connection options."""
        return self._options

    @property
    def tracker(self) -> ProgressTracker:
        """Return the progress tracker fed by this connection."""
        return self._tracker

    @property
    def moves(self) -> List[Move]:
        """Return the moves seen since connecting or the last clear."""
        return list(self._moves)

    async def connect(self, address: str, device: BLEDevice | None = None) -> None:
        """Connect to the GoCube."""
        async with self._connection_lock:
            await self._cleanup_connection()
            target = device
            if target and target.address.lower() != address.lower():
                target = None
            if target is None:
                raise DeviceNotFoundError(f"GoCube {address} not available")

            self._device = target
            self._address = address
            self._closing = False
            _LOGGER.info("Attempting to connect to GoCube %s...", address)
            try:
                self._client = await establish_connection(
                    BleakClient,
                    target,
                    target.name or "GoCube",
                    disconnected_callback=self._handle_disconnect,
                    timeout=self._options.connect_timeout,
                )
            except Exception as err:
                _LOGGER.warning("GoCube establish_connection failed: %s", err)
                raise
            self._is_connected = True

            try:
                await self._client.start_notify(
                    TX_CHARACTERISTIC_UUID,
                    self._notification_handler,
                )
                if self._options.request_battery_on_connect:
                    await self.request_battery()
            except Exception as err:
                _LOGGER.warning("GoCube setup after connect failed: %s", err)
                await self._cleanup_connection()
                raise
            self._notify_state_change()

    async def connect_first(self, timeout: float = SCAN_TIMEOUT) -> DiscoveredCube:
        """Scan for GoCubes and connect to the nearest one."""
        cube = await find_first(timeout)
        await self.connect(cube.address, cube.device)
        return cube

    async def disconnect(self) -> None:
        """Disconnect from the device without reconnecting."""
        self._closing = True
        if self._reconnect_task is not None:
            self._reconnect_task.cancel()
            self._reconnect_task = None
        was_connected = self._client is not None
        await self._cleanup_connection()
        if was_connected:
            self._notify_disconnect(None)

    async def send_command(self, command: int) -> None:
        """Write a command frame to the cube."""
        if not self._client or not self._client.is_connected:
            raise NotConnectedError("GoCube is not connected")
        await self._client.write_gatt_char(
            RX_CHARACTERISTIC_UUID,
            build_command(command),
            response=False,
        )

    async def request_battery(self) -> None:
        """Request the battery level."""
        await self.send_command(CMD_REQUEST_BATTERY)

    async def request_state(self) -> None:
        """Request the cube's own facelet state."""
        await self.send_command(CMD_REQUEST_STATE)

    async def request_cube_type(self) -> None:
        """Request the hardware variant."""
        await self.send_command(CMD_REQUEST_CUBE_TYPE)

    async def request_offline_stats(self) -> None:
        """Request statistics collected while disconnected."""
        await self.send_command(CMD_REQUEST_OFFLINE_STATS)

    async def reboot(self) -> None:
        """Reboot the cube."""
        await self.send_command(CMD_REBOOT)

    async def reset_solved(self) -> None:
        """Tell the cube its current state is solved."""
        await self.send_command(CMD_RESET_SOLVED)

    async def enable_orientation(self) -> None:
        """Enable orientation notifications."""
        await self.send_command(CMD_ENABLE_ORIENTATION)

    async def disable_orientation(self) -> None:
        """Disable orientation notifications."""
        await self.send_command(CMD_DISABLE_ORIENTATION)

    async def calibrate_orientation(self) -> None:
        """Calibrate the orientation sensor."""
        await self.send_command(CMD_CALIBRATE_ORIENTATION)

    async def flash_backlight(self) -> None:
        """Flash the backlight."""
        await self.send_command(CMD_FLASH_BACKLIGHT)

    async def slow_flash_backlight(self) -> None:
        """Slowly flash the backlight."""
        await self.send_command(CMD_SLOW_FLASH_BACKLIGHT)

    async def toggle_backlight(self) -> None:
        """Toggle the backlight."""
        await self.send_command(CMD_TOGGLE_BACKLIGHT)

    async def toggle_animated_backlight(self) -> None:
        """Toggle the animated backlight."""
        await self.send_command(CMD_TOGGLE_ANIMATED_BACKLIGHT)

    def reset(self) -> None:
        """Reset the simulated cube to solved; the physical cube is unaffected."""
        self._tracker.reset()
        self._pending_phases = []
        self._update_data()
        self._notify_state_change()

    def clear_history(self) -> None:
        """Forget the recorded moves."""
        self._moves = []

    def snapshot(self) -> PuzzleState:
        """Return a copy of the simulated cube."""
        return self._tracker.snapshot()

    async def _cleanup_connection(self) -> None:
        client = self._client
        if client is None:
            return
        # Cleared first so the disconnected callback fired by bleak is ignored.
        self._client = None
        self._device = None
        self._is_connected = False
        try:
            try:
                await client.stop_notify(TX_CHARACTERISTIC_UUID)
            except Exception as err:
                _LOGGER.debug("Failed to stop GoCube notifications: %s", err)
            await client.disconnect()
        except Exception as err:
            _LOGGER.debug("Error during GoCube cleanup: %s", err)
        finally:
            self._notify_state_change()

    def _handle_disconnect(self, client: BleakClient) -> None:
        if client is not self._client:
            _LOGGER.debug("Ignoring disconnect of a stale GoCube client")
            return
        self._is_connected = False
        self._notify_state_change()
        _LOGGER.debug("GoCube disconnected")
        self._notify_disconnect(
            GoCubeConnectionError(f"GoCube {self._address} disconnected unexpectedly")
        )
        if self._options.auto_reconnect and not self._closing and self._device:
            self._reconnect_task = asyncio.get_running_loop().create_task(
                self._reconnect()
            )

    async def _reconnect(self) -> None:
        device, address = self._device, self._address
        if device is None or address is None:
            return
        _LOGGER.info("Reconnecting to GoCube %s", address)
        try:
            await self.connect(address, device)
        except Exception as err:
            _LOGGER.warning("GoCube reconnect failed: %s", err)
        finally:
            self._reconnect_task = None

    def _notification_handler(self, sender: object, data: bytearray) -> None:
        try:
            message = parse_message(bytes(data))
            event = decode_payload(message)
        except GoCubeError as err:
            _LOGGER.debug("Discarding GoCube notification %s: %s", bytes(data).hex(), err)
            return
        self._data.last_raw = message.raw
        self._touch_activity()
        self._handle_event(event)
        self._notify_state_change()

    def _handle_event(self, event: CubeEvent) -> None:
        if isinstance(event, RotationsEvent):
            for move in rotations_to_moves(event.rotations):
                self._handle_move(move)
        elif isinstance(event, BatteryEvent):
            self._data.battery_level = event.level
        elif isinstance(event, CubeTypeEvent):
            self._data.cube_type = event.type_name
        elif isinstance(event, OfflineStatsEvent):
            self._data.offline_moves = event.moves
            self._data.offline_seconds = event.seconds
            self._data.offline_solves = event.solves
        elif isinstance(event, OrientationEvent):
            self._data.up_face = event.up_face.value
            self._data.front_face = event.front_face.value
            self._notify_orientation(event)
        elif isinstance(event, UnknownEvent):
            _LOGGER.debug("Ignoring GoCube %s message", event.name)

    def _handle_move(self, move: Move) -> None:
        self._tracker.apply_move(move)
        if self._options.move_history:
            self._moves.append(move)
        self._data.last_move = move.notation()
        self._update_data()
        phases, self._pending_phases = self._pending_phases, []
        if self._options.phase_detection:
            for phase in phases:
                _LOGGER.debug("GoCube reached phase %s", phase.key)
                self._notify_phase(phase)
        self._notify_movement(move)

    def _handle_phase(self, phase: Phase) -> None:
        # Delivered from _handle_move once CubeData reflects the move.
        self._pending_phases.append(phase)

    def _update_data(self) -> None:
        update_cube_state(
            self._data,
            self._tracker.snapshot(),
            self._tracker.last_phase,
            self._tracker.highest_phase,
        )
