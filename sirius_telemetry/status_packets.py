"""Board telemetry and status packets, and the engine's SD-card buffer layout."""

from __future__ import annotations

import struct
from typing import Any, Tuple

from .sensors import (
    ENGINE_ADC_CHANNEL_AMOUNT,
    ENGINE_VALVE_AMOUNT,
    FILLING_STATION_ADC_CHANNEL_AMOUNT,
    FILLING_STATION_VALVE_AMOUNT,
)
from .status import (
    EngineErrorStatus,
    EngineStatus,
    FillingStationErrorStatus,
    FillingStationStatus,
    GSControlErrorStatus,
    GSControlStatus,
    StorageErrorStatus,
    StorageStatus,
    TelecommunicationErrorStatus,
    TelecommunicationStatus,
    ValveStatus,
)
from .telemetry import Packet, TelemetryHeader

__all__ = [
    "SD_CARD_BUFFER_SIZE_BYTES",
    "SD_CARD_FOOTER_SIZE_BYTES",
    "SD_CARD_FOOTER_SIGNATURE_SIZE_BYTES",
    "EngineTelemetryPacket",
    "EngineStatusPacket",
    "FillingStationTelemetryPacket",
    "FillingStationStatusPacket",
    "GSControlStatusPacket",
    "TelecommunicationPacket",
    "EngineSDBufferFooter",
    "EngineSDCardBuffer",
]

SD_CARD_BUFFER_SIZE_BYTES = 0x10000
SD_CARD_FOOTER_SIZE_BYTES = 0x80
SD_CARD_FOOTER_SIGNATURE_SIZE_BYTES = 0x40


class EngineTelemetryPacket(Packet):
    """Raw readings of every engine ADC channel."""

    FIELDS = (
        ("header", TelemetryHeader),
        ("timestamp_ms", "I"),
        ("adc_values", "H", ENGINE_ADC_CHANNEL_AMOUNT),
        ("crc", "I"),
    )


class EngineStatusPacket(Packet):
    """Status of the engine board, its valves and its storage."""

    FIELDS = (
        ("header", TelemetryHeader),
        ("timestamp_ms", "I"),
        ("status", EngineStatus),
        ("error_status", EngineErrorStatus),
        ("valve_status", ValveStatus, ENGINE_VALVE_AMOUNT),
        ("storage_status", StorageStatus),
        ("storage_error_status", StorageErrorStatus),
        ("ignite_timestamp_ms", "I"),
        ("launch_timestamp_ms", "I"),
        ("time_since_last_command_ms", "I"),
        ("last_received_command_code", "I"),
        ("_padding", "B", 4),
        ("crc", "I"),
    )


class FillingStationTelemetryPacket(Packet):
    """Raw readings of every filling-station ADC channel."""

    FIELDS = (
        ("header", TelemetryHeader),
        ("timestamp_ms", "I"),
        ("adc_values", "H", FILLING_STATION_ADC_CHANNEL_AMOUNT),
        ("crc", "I"),
    )


class FillingStationStatusPacket(Packet):
    """Status of the filling station, its valves and its storage."""

    FIELDS = (
        ("header", TelemetryHeader),
        ("timestamp_ms", "I"),
        ("status", FillingStationStatus),
        ("error_status", FillingStationErrorStatus),
        ("valve_status", ValveStatus, FILLING_STATION_VALVE_AMOUNT),
        ("storage_status", StorageStatus),
        ("storage_error_status", StorageErrorStatus),
        ("ignite_timestamp_ms", "I"),
        ("time_since_last_command_ms", "I"),
        ("last_received_command_code", "I"),
        ("_padding", "B", 8),
        ("crc", "I"),
    )


class GSControlStatusPacket(Packet):
    """Status of the ground-station control board."""

    FIELDS = (
        ("header", TelemetryHeader),
        ("timestamp_ms", "I"),
        ("status", GSControlStatus),
        ("error_status", GSControlErrorStatus),
        ("last_received_gs_command_timestamp_ms", "I"),
        ("last_board_sent_command_code", "I"),
        ("last_sent_command_timestamp_ms", "I"),
        ("_padding", "B", 16),
        ("crc", "I"),
    )


class _TelecommunicationPacketData(Packet):
    FIELDS = (
        ("error_status", TelecommunicationErrorStatus),
        ("status", TelecommunicationStatus),
        ("timestamp_ms", "I"),
    )


class TelecommunicationPacket(Packet):
    """State report of a telecommunication link."""

    FIELDS = (
        ("header", TelemetryHeader),
        ("raw_data", _TelecommunicationPacketData),
        ("crc", "I"),
    )


class EngineSDBufferFooter(Packet):
    """Trailer written at the end of each half of the engine's SD-card buffer."""

    FIELDS = (
        ("timestamp_ms", "I"),
        ("status", "H"),
        ("error_status", "H"),
        ("valve_status", "H", 2),
        ("valve_error_status", "H", 2),
        ("current_command", "I", 3),
        ("_padding", "B", 32),
        ("signature", "I", SD_CARD_FOOTER_SIGNATURE_SIZE_BYTES // 4),
        ("crc", "I"),
    )


_HALF_SIZE = SD_CARD_BUFFER_SIZE_BYTES // 2
_DATA_SIZE = _HALF_SIZE - EngineSDBufferFooter.size()


class EngineSDCardBuffer:
    """The engine's SD-card write buffer: two halves of data followed by a footer.

    The same bytes can be read as 16-bit words, 32-bit words, or as the two
    formatted halves.
    """

    SIZE = SD_CARD_BUFFER_SIZE_BYTES
    HALVES = 2
    DATA_SIZE = _DATA_SIZE

    def __init__(self) -> None:
        self._raw = bytearray(self.SIZE)

    @classmethod
    def from_bytes(cls, data: bytes) -> "EngineSDCardBuffer":
        """Load a buffer from exactly ``SIZE`` bytes."""
        raw = bytes(data)
        if len(raw) != cls.SIZE:
            raise ValueError(f"{cls.__name__} needs {cls.SIZE} bytes, got {len(raw)}")
        buffer = cls()
        buffer._raw[:] = raw
        return buffer

    def to_bytes(self) -> bytes:
        """The whole buffer as bytes."""
        return bytes(self._raw)

    @property
    def values(self) -> Tuple[int, ...]:
        """The buffer read as little-endian 16-bit words."""
        return struct.unpack(f"<{self.SIZE // 2}H", self._raw)

    @property
    def values32(self) -> Tuple[int, ...]:
        """The buffer read as little-endian 32-bit words."""
        return struct.unpack(f"<{self.SIZE // 4}I", self._raw)

    @property
    def blocks(self) -> Tuple[bytes, ...]:
        """The data area of each half."""
        return tuple(
            bytes(self._raw[start:start + self.DATA_SIZE])
            for start in range(0, self.SIZE, _HALF_SIZE)
        )

    @property
    def footers(self) -> Tuple[EngineSDBufferFooter, ...]:
        """The footer of each half."""
        return tuple(
            EngineSDBufferFooter.from_bytes(self._raw[start + self.DATA_SIZE:start + _HALF_SIZE])
            for start in range(0, self.SIZE, _HALF_SIZE)
        )

    def fill(self, index: int, data: bytes, footer: EngineSDBufferFooter) -> None:
        """Write the data area and the footer of one half."""
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < self.HALVES:
            raise IndexError(f"half index must be 0..{self.HALVES - 1}, got {index!r}")
        block = bytes(data)
        if len(block) != self.DATA_SIZE:
            raise ValueError(f"data block needs {self.DATA_SIZE} bytes, got {len(block)}")
        if not isinstance(footer, EngineSDBufferFooter):
            raise TypeError(f"footer must be EngineSDBufferFooter, not {type(footer).__name__}")
        start = index * _HALF_SIZE
        self._raw[start:start + self.DATA_SIZE] = block
        self._raw[start + self.DATA_SIZE:start + _HALF_SIZE] = footer.to_bytes()

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._raw == other._raw

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(footers={self.footers!r})"