"""State codes of the boards and devices, board identifiers and the CRC polynomial."""

from __future__ import annotations

from enum import IntEnum

__all__ = [
    "CRC_GENERATING_POLYNOMIAL",
    "EngineState",
    "FillingStationState",
    "GSControlState",
    "StorageState",
    "TelecommunicationState",
    "ValveState",
    "BoardId",
]

CRC_GENERATING_POLYNOMIAL = 0x04C11DB7
"""Generating polynomial of the 32-bit CRC that closes every packet."""


class EngineState(IntEnum):
    """State of the engine board's state machine."""

    INIT = 0x00
    SAFE = 0x01
    UNSAFE = 0x02
    ABORT = 0x03
    IGNITION = 0x06
    FIRE = 0x07
    ERROR = 0x08
    TEST = 0x09


class FillingStationState(IntEnum):
    """State of the filling station's state machine."""

    INIT = 0x00
    SAFE = 0x01
    UNSAFE = 0x02
    ABORT = 0x03
    ERROR = 0x04
    IGNITE = 0x05
    TEST = 0x06


class GSControlState(IntEnum):
    """State of the ground-station control board."""

    INIT = 0x00
    SAFE = 0x01
    UNSAFE = 0x02
    ABORT = 0x03


class StorageState(IntEnum):
    """State of a storage device."""

    INIT = 0x00
    ACTIVE = 0x01
    ERROR = 0x02


class TelecommunicationState(IntEnum):
    """State of a telecommunication link."""

    INIT = 0x00
    CONFIG = 0x01
    ACTIVE = 0x02
    INACTIVE = 0x03


class ValveState(IntEnum):
    """Position state of a valve."""

    UNKNOWN = 0x00
    OPENED = 0x01
    CLOSED = 0x02
    OPENING = 0x03
    CLOSING = 0x04


class BoardId(IntEnum):
    """Identifier of a board in packet headers."""

    ENGINE = 0x01
    FILLING_STATION = 0x02
    GS_CONTROL = 0x03