"""GoCube Bluetooth library."""

from __future__ import annotations

from .base import BaseCubeConnection
from .connection import GoCubeConnection
from .cube import Color, PuzzleState
from .decoder import (
    BatteryEvent,
    CubeTypeEvent,
    OfflineStatsEvent,
    OrientationEvent,
    RotationEvent,
    RotationsEvent,
    UnknownEvent,
    decode_battery,
    decode_cube_type,
    decode_notification,
    decode_offline_stats,
    decode_orientation,
    decode_payload,
    decode_rotation,
)
from .discovery import DiscoveredCube, discover, find_first, match_advertisement
from .exceptions import (
    FrameError,
    GoCubeConnectionError,
    GoCubeError,
    NotationError,
    PayloadError,
)
from .models import CubeData, GoCubeOptions
from .moves import Face, Move, Turn, format_moves, merge_moves, parse_move, parse_moves
from .phases import Phase, PhaseProgress, detect_phase
from .protocol import Message, MessageKind, build_command, parse_message
from .tracker import ProgressTracker
from .translator import rotation_to_move, rotations_to_moves

__all__ = [
    "BaseCubeConnection",
    "BatteryEvent",
    "Color",
    "CubeData",
    "CubeTypeEvent",
    "DiscoveredCube",
    "Face",
    "FrameError",
    "GoCubeConnection",
    "GoCubeConnectionError",
    "GoCubeError",
    "GoCubeOptions",
    "Message",
    "MessageKind",
    "Move",
    "NotationError",
    "OfflineStatsEvent",
    "OrientationEvent",
    "PayloadError",
    "Phase",
    "PhaseProgress",
    "ProgressTracker",
    "PuzzleState",
    "RotationEvent",
    "RotationsEvent",
    "Turn",
    "UnknownEvent",
    "build_command",
    "decode_battery",
    "decode_cube_type",
    "decode_notification",
    "decode_offline_stats",
    "decode_orientation",
    "decode_payload",
    "decode_rotation",
    "detect_phase",
    "discover",
    "find_first",
    "format_moves",
    "match_advertisement",
    "merge_moves",
    "parse_message",
    "parse_move",
    "parse_moves",
    "rotation_to_move",
    "rotations_to_moves",
]
