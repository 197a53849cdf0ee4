"""Base connection and callback helpers for the GoCube."""

from __future__ import annotations

import asyncio
import time
from typing import Callable, Set

from .decoder import OrientationEvent
from .models import CubeData
from .moves import Move
from .phases import Phase


class BaseCubeConnection:
    """Callback registries shared by cube connections."""

    manufacturer: str = "GoCube"
    model: str = "GoCube"

    def __init__(self) -> None:
        self._data = CubeData()
        self._state_callbacks: Set[Callable[[], None]] = set()
        self._movement_callbacks: Set[Callable[[Move], None]] = set()
        self._phase_callbacks: Set[Callable[[Phase], None]] = set()
        self._orientation_callbacks: Set[Callable[[OrientationEvent], None]] = set()
        self._disconnect_callbacks: Set[Callable[[Exception | None], None]] = set()
        self._is_connected = False
        self._connection_lock = asyncio.Lock()
        self._last_activity: float | None = None

    @property
    def data(self) -> CubeData:
        """Return the latest parsed data."""
        return self._data

    @property
    def is_connected(self) -> bool:
        """Return whether the cube is connected."""
        return self._is_connected

    @property
    def last_activity(self) -> float | None:
        """Return the time of the last notification."""
        return self._last_activity

    def register_callback(self, callback: Callable[[], None]) -> Callable[[], None]:
        """Register a callback for state changes."""

        def unsubscribe() -> None:
            self._state_callbacks.discard(callback)

        self._state_callbacks.add(callback)
        return unsubscribe

    def add_movement_callback(self, callback: Callable[[Move], None]) -> None:
        """Add a callback for movement events."""
        self._movement_callbacks.add(callback)

    def remove_movement_callback(self, callback: Callable[[Move], None]) -> None:
        """Remove a callback for movement events."""
        self._movement_callbacks.discard(callback)

    def add_phase_callback(self, callback: Callable[[Phase], None]) -> None:
        """Add a callback for newly reached solving phases."""
        self._phase_callbacks.add(callback)

    def remove_phase_callback(self, callback: Callable[[Phase], None]) -> None:
        """Remove a callback for solving phases."""
        self._phase_callbacks.discard(callback)

    def add_orientation_callback(
        self, callback: Callable[[OrientationEvent], None]
    ) -> None:
        """Add a callback for orientation changes."""
        self._orientation_callbacks.add(callback)

    def remove_orientation_callback(
        self, callback: Callable[[OrientationEvent], None]
    ) -> None:
        """Remove a callback for orientation changes."""
        self._orientation_callbacks.discard(callback)

    def add_disconnect_callback(
        self, callback: Callable[[Exception | None], None]
    ) -> None:
        """Add a callback for disconnections.

        The callback receives None when the disconnect was requested and an
        exception describing the cause otherwise.
        """
        self._disconnect_callbacks.add(callback)

    def remove_disconnect_callback(
        self, callback: Callable[[Exception | None], None]
    ) -> None:
        """Remove a callback for disconnections."""
        self._disconnect_callbacks.discard(callback)

    def _notify_state_change(self) -> None:
        """Notify all state callbacks."""
        for callback in list(self._state_callbacks):
            callback()

    def _notify_movement(self, move: Move) -> None:
        """Notify all movement callbacks."""
        for callback in list(self._movement_callbacks):
            callback(move)

    def _notify_phase(self, phase: Phase) -> None:
        """Notify all phase callbacks."""
        for callback in list(self._phase_callbacks):
            callback(phase)

    def _notify_orientation(self, event: OrientationEvent) -> None:
        """Notify all orientation callbacks."""
        for callback in list(self._orientation_callbacks):
            callback(event)

    def _notify_disconnect(self, error: Exception | None) -> None:
        """Notify all disconnect callbacks."""
        for callback in list(self._disconnect_callbacks):
            callback(error)

    def _touch_activity(self) -> None:
        """Record the last activity time."""
        self._last_activity = time.time()
