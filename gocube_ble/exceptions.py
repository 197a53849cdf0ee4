"""Exceptions raised by the GoCube library."""

from __future__ import annotations


class GoCubeError(Exception):
    """Base class for GoCube errors."""


class FrameError(GoCubeError):
    """Raised when a notification is not a well-formed frame."""


class MessageTooShortError(FrameError):
    """Raised when a buffer is too short to hold a frame."""


class InvalidPrefixError(FrameError):
    """Raised when a frame does not start with the prefix byte."""


class InvalidLengthError(FrameError):
    """Raised when a frame is shorter than its declared length."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"invalid message length: expected {expected}, got {actual}")
        self.expected = expected
        self.actual = actual


class InvalidSuffixError(FrameError):
    """Raised when a frame is not terminated by CR LF."""


class InvalidChecksumError(FrameError):
    """Raised when the frame checksum does not match its contents."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(
            f"invalid checksum: frame carries 0x{expected:02X}, computed 0x{actual:02X}"
        )
        self.expected = expected
        self.actual = actual


class PayloadError(GoCubeError):
    """Raised when the payload of a known message kind cannot be decoded."""

    def __init__(self, kind: str, message: str) -> None:
        super().__init__(f"{kind}: {message}")
        self.kind = kind


class NotationError(GoCubeError):
    """Raised when move notation cannot be parsed."""


class GoCubeConnectionError(GoCubeError):
    """Raised when there is an error talking to the cube."""


class NotConnectedError(GoCubeConnectionError):
    """Raised when a command is sent without a connection."""


class DeviceNotFoundError(GoCubeConnectionError):
    """Raised when no GoCube could be found."""
