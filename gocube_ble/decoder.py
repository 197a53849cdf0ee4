"""Payload decoders for GoCube notifications."""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import List, Tuple, Union

from .const import COLOR_NAMES, CUBE_TYPE_EDGE
from .exceptions import PayloadError
from .moves import Face
from .protocol import Message, MessageKind, message_kind_name, parse_message

_LOGGER = logging.getLogger(__name__)

_LEADING_NUMBER = re.compile(r"-?[0-9]*\.?[0-9]*")
_UNSIGNED_INT = re.compile(r"[0-9]+")
_DECIMAL = re.compile(r"-?(?:[0-9]+\.?[0-9]*|\.[0-9]+)")


@dataclass(frozen=True)
class RotationEvent:
    """A single face rotation reported by the cube."""

    raw_code: int
    center_orientation: int
    clockwise: bool
    color_index: int

    @property
    def color(self) -> str:
        """Return the color name of the turned face."""
        return COLOR_NAMES[self.color_index]


@dataclass(frozen=True)
class RotationsEvent:
    """All rotations carried by one rotation notification."""

    rotations: Tuple[RotationEvent, ...]


@dataclass(frozen=True)
class BatteryEvent:
    """Battery level in percent."""

    level: int


@dataclass(frozen=True)
class CubeTypeEvent:
    """Hardware variant reported by the cube."""

    type_code: int
    type_name: str


@dataclass(frozen=True)
class OrientationEvent:
    """Orientation quaternion with the derived up and front faces."""

    x: float
    y: float
    z: float
    w: float
    up_face: Face
    front_face: Face


@dataclass(frozen=True)
class OfflineStatsEvent:
    """Statistics the cube collected while disconnected."""

    moves: int
    seconds: int
    solves: int


@dataclass(frozen=True)
class UnknownEvent:
    """A message this library does not decode, kept for logging."""

    code: int
    payload: bytes

    @property
    def name(self) -> str:
        """Return the message kind name, e.g. unknown_0x0A."""
        return message_kind_name(self.code)


CubeEvent = Union[
    RotationsEvent,
    BatteryEvent,
    CubeTypeEvent,
    OrientationEvent,
    OfflineStatsEvent,
    UnknownEvent,
]


def decode_rotation(payload: bytes) -> List[RotationEvent]:
    """Decode [code, center orientation] pairs into rotation events."""
    if len(payload) % 2 != 0:
        raise PayloadError(
            "rotation", f"payload must have even length, got {len(payload)}"
        )
    events = []
    for i in range(0, len(payload), 2):
        code = payload[i]
        color_index = code // 2
        if color_index >= len(COLOR_NAMES):
            raise PayloadError(
                "rotation",
                f"unknown color index {color_index} from face code 0x{code:02X}",
            )
        events.append(
            RotationEvent(
                raw_code=code,
                center_orientation=payload[i + 1],
                clockwise=code % 2 == 0,
                color_index=color_index,
            )
        )
    return events


def decode_battery(payload: bytes) -> BatteryEvent:
    """Decode a battery level payload."""
    if len(payload) < 1:
        raise PayloadError("battery", "payload too short")
    return BatteryEvent(level=payload[0])


def decode_cube_type(payload: bytes) -> CubeTypeEvent:
    """Decode a cube type payload."""
    if len(payload) < 1:
        raise PayloadError("cube_type", "payload too short")
    type_name = "edge" if payload[0] == CUBE_TYPE_EDGE else "standard"
    return CubeTypeEvent(type_code=payload[0], type_name=type_name)


def _split_fields(kind: str, payload: bytes, count: int) -> List[str]:
    parts = payload.decode("latin-1").split("#")
    if len(parts) != count:
        raise PayloadError(kind, f"payload must have {count} parts, got {len(parts)}")
    return parts


def _parse_float(kind: str, field: str, value: str) -> float:
    if not _DECIMAL.fullmatch(value):
        raise PayloadError(kind, f"invalid {field} value {value!r}")
    return float(value)


def leading_number(text: str) -> str:
    """Return the leading numeric part of text, e.g. '-12.5' of '-12.5Z\\r'."""
    match = _LEADING_NUMBER.match(text)
    return match.group(0) if match else ""


def decode_orientation(payload: bytes) -> OrientationEvent:
    """Decode an "x#y#z#w" orientation payload.

    The last field may be followed by a checksum byte or control characters,
    so only its leading number is used.
    """
    parts = _split_fields("orientation", payload, 4)
    x = _parse_float("orientation", "x", parts[0])
    y = _parse_float("orientation", "y", parts[1])
    z = _parse_float("orientation", "z", parts[2])
    w = _parse_float("orientation", "w", leading_number(parts[3]))
    up_face, front_face = quaternion_to_faces(x, y, z, w)
    return OrientationEvent(x=x, y=y, z=z, w=w, up_face=up_face, front_face=front_face)


def decode_offline_stats(payload: bytes) -> OfflineStatsEvent:
    """Decode a "moves#seconds#solves" payload."""
    parts = _split_fields("offline_stats", payload, 3)
    values = []
    for field, value in zip(("moves", "seconds", "solves"), parts):
        if not _UNSIGNED_INT.fullmatch(value):
            raise PayloadError("offline_stats", f"invalid {field} value {value!r}")
        values.append(int(value))
    return OfflineStatsEvent(moves=values[0], seconds=values[1], solves=values[2])


def quaternion_to_faces(x: float, y: float, z: float, w: float) -> Tuple[Face, Face]:
    """Return the faces pointing up and towards the solver.

    With the identity quaternion white (U) points up along +Y, green (F)
    points at the solver along +Z and red (R) along +X. The cube reports raw
    values that are not unit length, so the quaternion is normalized first.
    """
    norm = math.sqrt(x * x + y * y + z * z + w * w)
    if norm > 0:
        x, y, z, w = x / norm, y / norm, z / norm, w / norm

    up = (
        2 * (x * y - w * z),
        1 - 2 * (x * x + z * z),
        2 * (y * z + w * x),
    )
    front = (
        2 * (x * z + w * y),
        2 * (y * z - w * x),
        1 - 2 * (x * x + y * y),
    )
    return vector_to_face(*up), vector_to_face(*front)


def vector_to_face(x: float, y: float, z: float) -> Face:
    """Map a vector to the face along its dominant axis (ties: Y, Z, X)."""
    abs_x, abs_y, abs_z = abs(x), abs(y), abs(z)
    if abs_y >= abs_x and abs_y >= abs_z:
        return Face.U if y > 0 else Face.D
    if abs_z >= abs_x:
        return Face.F if z > 0 else Face.B
    return Face.R if x > 0 else Face.L


def decode_payload(message: Message) -> CubeEvent:
    """Decode the payload of a parsed message."""
    kind = message.kind
    if kind is MessageKind.ROTATION:
        return RotationsEvent(tuple(decode_rotation(message.payload)))
    if kind is MessageKind.BATTERY:
        return decode_battery(message.payload)
    if kind is MessageKind.CUBE_TYPE:
        return decode_cube_type(message.payload)
    if kind is MessageKind.ORIENTATION:
        return decode_orientation(message.payload)
    if kind is MessageKind.OFFLINE_STATS:
        return decode_offline_stats(message.payload)
    _LOGGER.debug("Passing through %s message: %s", message.name, message.payload.hex())
    return UnknownEvent(code=message.code, payload=message.payload)


def decode_notification(data: bytes) -> CubeEvent:
    """Parse a raw notification and decode its payload."""
    return decode_payload(parse_message(data))
