"""Constants for GoCube Bluetooth communication."""

from __future__ import annotations

# Bluetooth UUIDs
PRIMARY_SERVICE_UUID = "6e400001-b5a3-f393-e0a9-e50e24dcca9e"
RX_CHARACTERISTIC_UUID = "6e400002-b5a3-f393-e0a9-e50e24dcca9e"
TX_CHARACTERISTIC_UUID = "6e400003-b5a3-f393-e0a9-e50e24dcca9e"

NAME_PREFIXES = ("gocube", "rubiks")

CONNECT_TIMEOUT = 20.0
SCAN_TIMEOUT = 10.0

# Frame bytes
FRAME_PREFIX = 0x2A
FRAME_SUFFIX = b"\x0d\x0a"
MIN_FRAME_LENGTH = 5

# Message types
MSG_TYPE_ROTATION = 0x01
MSG_TYPE_STATE = 0x02
MSG_TYPE_ORIENTATION = 0x03
MSG_TYPE_BATTERY = 0x05
MSG_TYPE_OFFLINE_STATS = 0x07
MSG_TYPE_CUBE_TYPE = 0x08

# Commands written to the RX characteristic
CMD_REQUEST_BATTERY = 0x32
CMD_REQUEST_STATE = 0x33
CMD_REBOOT = 0x34
CMD_RESET_SOLVED = 0x35
CMD_DISABLE_ORIENTATION = 0x37
CMD_ENABLE_ORIENTATION = 0x38
CMD_REQUEST_OFFLINE_STATS = 0x39
CMD_FLASH_BACKLIGHT = 0x41
CMD_TOGGLE_ANIMATED_BACKLIGHT = 0x42
CMD_SLOW_FLASH_BACKLIGHT = 0x43
CMD_TOGGLE_BACKLIGHT = 0x44
CMD_REQUEST_CUBE_TYPE = 0x56
CMD_CALIBRATE_ORIENTATION = 0x57

CUBE_TYPE_EDGE = 0x01

# Color index carried in a rotation code (code // 2)
COLOR_NAMES = (
    "blue",
    "green",
    "white",
    "yellow",
    "red",
    "orange",
)

# Fixed reference orientation: white up, green front
COLOR_FACE_MAPPING = {
    "white": "U",
    "yellow": "D",
    "green": "F",
    "blue": "B",
    "red": "R",
    "orange": "L",
}
