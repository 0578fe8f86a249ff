"""Command, ground-station command and command-response frames of the 2025 radio link."""

from __future__ import annotations

from enum import IntEnum

from .bitfields import BitField, BitFieldStatus
from .telemetry import Packet

__all__ = [
    "BOARD_COMMAND_UNICAST_TYPE_CODE",
    "BOARD_COMMAND_BROADCAST_TYPE_CODE",
    "COMMAND_RESPONSE_TYPE_CODE",
    "GS_COMMAND_TYPE_CODE",
    "RESPONSE_CODE_OK",
    "CommandCode",
    "CommandHeader",
    "BoardCommand",
    "CommandResponse",
    "GSCommand",
]

BOARD_COMMAND_UNICAST_TYPE_CODE = 0x424F4
BOARD_COMMAND_BROADCAST_TYPE_CODE = 0x5A49D
COMMAND_RESPONSE_TYPE_CODE = 0x52535
GS_COMMAND_TYPE_CODE = 0x47834

RESPONSE_CODE_OK = 0x00


class CommandCode(IntEnum):
    """Five-bit command codes.

    Engine and filling-station commands reuse the same numbers; the board
    named in the header tells them apart, so equal codes are aliases here.
    """

    ACK = 0b00000
    UNSAFE = 0b00001
    SAFE = 0b10001
    ABORT = 0b11111
    RESET = 0b11110

    ENGINE_ARM_VALVE = 0b00010
    ENGINE_ARM_IGNITER = 0b00011
    ENGINE_OPEN_VALVE = 0b01010
    ENGINE_CLOSE_VALVE = 0b01001
    ENGINE_FIRE_IGNITER = 0b01011
    ENGINE_SET_NOS_VALVE_HEATER_POWER_PCT = 0b01100
    ENGINE_SET_IPA_VALVE_HEATER_POWER_PCT = 0b01101
    ENGINE_OPEN_NOS_VALVE_PCT = 0b10100
    ENGINE_OPEN_IPA_VALVE_PCT = 0b10101

    FILLING_STATION_OPEN_FILL_VALVE_PCT = 0b01010
    FILLING_STATION_OPEN_DUMP_VALVE_PCT = 0b01110
    FILLING_STATION_SET_FILL_VALVE_HEATER_POWER_PCT = 0b01100
    FILLING_STATION_SET_DUMP_VALVE_HEATER_POWER_PCT = 0b01101
    FILLING_STATION_ALLOW_FILL = 0b00010
    FILLING_STATION_ALLOW_DUMP = 0b00011


class CommandHeader(BitFieldStatus, unit_bits=32):
    """First word of a command frame.

    In a command response the ``command_code`` field carries the response code.
    """

    type_code = BitField(20)
    command_index = BitField(4)
    board_id = BitField(3)
    command_code = BitField(5)


class BoardCommand(Packet):
    """Command sent to a board, with one 32-bit argument."""

    FIELDS = (
        ("header", CommandHeader),
        ("value", "I"),
        ("_padding", "B", 32),
        ("crc", "I"),
    )


class CommandResponse(Packet):
    """A board's answer to a command."""

    FIELDS = (
        ("header", CommandHeader),
        ("_padding", "B", 36),
        ("crc", "I"),
    )


class GSCommand(Packet):
    """Command emitted by the ground-station control board."""

    FIELDS = (
        ("header", CommandHeader),
        ("_padding", "B", 36),
        ("crc", "I"),
    )