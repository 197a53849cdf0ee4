"""Data models for cube state and connection options."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from .const import CONNECT_TIMEOUT
from .phases import Phase


@dataclass
class CubeData:
    """Data class for the latest state reported by the cube."""

    battery_level: int | None = None
    cube_type: str | None = None
    is_solved: bool = True
    face_states: Dict[str, bool] | None = None
    last_move: str | None = None
    last_raw: bytes | None = None
    state_string: str | None = None
    phase: Phase = Phase.SOLVED
    highest_phase: Phase = Phase.SCRAMBLED
    up_face: str | None = None
    front_face: str | None = None
    offline_moves: int | None = None
    offline_seconds: int | None = None
    offline_solves: int | None = None
    last_update: float | None = None

    def __post_init__(self) -> None:
        """Initialize face states dictionary."""
        if self.face_states is None:
            self.face_states = {}


@dataclass(frozen=True)
class GoCubeOptions:
    """Options for a GoCube connection."""

    auto_reconnect: bool = False
    move_history: bool = True
    phase_detection: bool = True
    request_battery_on_connect: bool = True
    connect_timeout: float = CONNECT_TIMEOUT
