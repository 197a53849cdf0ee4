"""GoCube frame parsing and command serialization.

Inbound frames look like::

    [0x2A] [L] [kind] [payload ...] [checksum] [0x0D] [0x0A]

where the whole frame is ``L + 2`` bytes long and the checksum is the sum of
every byte before it, modulo 256. Outbound commands use a fixed six byte
frame whose length byte is always ``0x01``; this does not follow the inbound
convention, and the device expects it that way.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .const import (
    FRAME_PREFIX,
    FRAME_SUFFIX,
    MIN_FRAME_LENGTH,
    MSG_TYPE_BATTERY,
    MSG_TYPE_CUBE_TYPE,
    MSG_TYPE_OFFLINE_STATS,
    MSG_TYPE_ORIENTATION,
    MSG_TYPE_ROTATION,
    MSG_TYPE_STATE,
)
from .exceptions import (
    InvalidChecksumError,
    InvalidLengthError,
    InvalidPrefixError,
    InvalidSuffixError,
    MessageTooShortError,
)

COMMAND_LENGTH = 0x01


class MessageKind(IntEnum):
    """Kind of an inbound message."""

    UNKNOWN = -1
    ROTATION = MSG_TYPE_ROTATION
    STATE = MSG_TYPE_STATE
    ORIENTATION = MSG_TYPE_ORIENTATION
    BATTERY = MSG_TYPE_BATTERY
    OFFLINE_STATS = MSG_TYPE_OFFLINE_STATS
    CUBE_TYPE = MSG_TYPE_CUBE_TYPE

    @classmethod
    def from_code(cls, code: int) -> "MessageKind":
        """Return the kind for a wire code, UNKNOWN if unrecognised."""
        try:
            return cls(code)
        except ValueError:
            return cls.UNKNOWN


_KIND_NAMES = {
    MessageKind.ROTATION: "rotation",
    MessageKind.STATE: "state",
    MessageKind.ORIENTATION: "orientation",
    MessageKind.BATTERY: "battery",
    MessageKind.OFFLINE_STATS: "offline_stats",
    MessageKind.CUBE_TYPE: "cube_type",
}


@dataclass(frozen=True)
class Message:
    """A validated inbound frame."""

    code: int
    payload: bytes
    raw: bytes

    @property
    def kind(self) -> MessageKind:
        """Return the message kind."""
        return MessageKind.from_code(self.code)

    @property
    def name(self) -> str:
        """Return a readable name for the message kind."""
        return message_kind_name(self.code)


def message_kind_name(code: int) -> str:
    """Return a readable name for a message kind code."""
    kind = MessageKind.from_code(code)
    if kind is MessageKind.UNKNOWN:
        return f"unknown_0x{code:02X}"
    return _KIND_NAMES[kind]


def checksum(data: bytes) -> int:
    """Return the frame checksum of data."""
    return sum(data) & 0xFF


def parse_message(data: bytes) -> Message:
    """Validate a raw notification and split it into kind and payload."""
    if len(data) < MIN_FRAME_LENGTH:
        raise MessageTooShortError(f"message too short: {len(data)} bytes")
    if data[0] != FRAME_PREFIX:
        raise InvalidPrefixError(f"invalid message prefix 0x{data[0]:02X}")

    length = data[1]
    frame_length = length + 2
    if len(data) < frame_length:
        raise InvalidLengthError(frame_length, len(data))

    checksum_index = length - 1
    if checksum_index < 2:
        raise MessageTooShortError(f"declared length {length} leaves no room for a kind")

    if bytes(data[length:frame_length]) != FRAME_SUFFIX:
        raise InvalidSuffixError("invalid message suffix")

    computed = checksum(data[:checksum_index])
    if computed != data[checksum_index]:
        raise InvalidChecksumError(data[checksum_index], computed)

    return Message(
        code=data[2],
        payload=bytes(data[3:checksum_index]),
        raw=bytes(data[:frame_length]),
    )


def encode_message(code: int, payload: bytes = b"") -> bytes:
    """Build an inbound-shaped frame, as the cube would send it."""
    length = len(payload) + 4
    if length > 0xFF:
        raise ValueError(f"payload too long: {len(payload)} bytes")
    body = bytes([FRAME_PREFIX, length, code]) + bytes(payload)
    return body + bytes([checksum(body)]) + FRAME_SUFFIX


def build_command(command: int) -> bytes:
    """Build a zero-argument command frame to write to the cube."""
    body = bytes([FRAME_PREFIX, COMMAND_LENGTH, command])
    return body + bytes([checksum(body)]) + FRAME_SUFFIX
