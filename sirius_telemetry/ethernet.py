"""Frames of the Ethernet architecture: UDP packet header and device sync packet."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import ClassVar

from .bitfields import BitField, BitFieldStatus

__all__ = [
    "SYNC_PACKET_CODE",
    "DIAGNOSE_PACKET_CODE",
    "SyncFlags",
    "SyncPacket",
    "UDPDeviceCtrlFlags",
    "UDPPacketHeader",
]

SYNC_PACKET_CODE = 0x01
DIAGNOSE_PACKET_CODE = 0x02

_SYNC_FORMAT = "<BBBB"
_UDP_HEADER_FORMAT = "<BBHBBHI"


class SyncFlags(BitFieldStatus, unit_bits=8):
    """Flags byte of a sync packet."""

    force_state = BitField(1)
    confirm_sync = BitField(1)
    sync_time = BitField(1)
    diagnose = BitField(1)
    _reserved = BitField(4)


class UDPDeviceCtrlFlags(BitFieldStatus, unit_bits=8):
    """Real-time control flags a device reports in each UDP header."""

    device_rdy = BitField(1)
    on_can = BitField(1)
    err_detected = BitField(1)
    remote_req = BitField(1)
    _reserved = BitField(4)


def _pack(fmt: str, *values: int) -> bytes:
    try:
        return struct.pack(fmt, *values)
    except struct.error as exc:
        raise ValueError(str(exc)) from exc


def _check_length(cls: type, data: bytes, size: int) -> bytes:
    raw = bytes(data)
    if len(raw) != size:
        raise ValueError(f"{cls.__name__} needs {size} bytes, got {len(raw)}")
    return raw


@dataclass
class SyncPacket:
    """Syncs one device with another's state; every device on the network handles it."""

    device_id_from: int = 0
    device_id_to: int = 0
    sync_state: int = 0
    sync_flags: SyncFlags = field(default_factory=SyncFlags)

    SIZE: ClassVar[int] = struct.calcsize(_SYNC_FORMAT)

    def __post_init__(self) -> None:
        if not isinstance(self.sync_flags, SyncFlags):
            self.sync_flags = SyncFlags(self.sync_flags)

    def to_bytes(self) -> bytes:
        """Encode the packet."""
        return _pack(
            _SYNC_FORMAT,
            self.device_id_from,
            self.device_id_to,
            self.sync_state,
            int(self.sync_flags),
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> "SyncPacket":
        """Decode a packet from exactly ``SIZE`` bytes."""
        raw = _check_length(cls, data, cls.SIZE)
        device_from, device_to, state, flags = struct.unpack(_SYNC_FORMAT, raw)
        return cls(device_from, device_to, state, SyncFlags(flags))


@dataclass
class UDPPacketHeader:
    """Fixed header read first from every UDP packet.

    The payload that follows has a length that is a multiple of four bytes,
    and is itself followed by a 32-bit CRC.
    """

    device_id: int = 0
    payload_id: int = 0
    payload_length: int = 0
    device_ctrl_flags: UDPDeviceCtrlFlags = field(default_factory=UDPDeviceCtrlFlags)
    device_state: int = 0
    reserved: int = 0
    device_ts_ms: int = 0

    SIZE: ClassVar[int] = struct.calcsize(_UDP_HEADER_FORMAT)

    def __post_init__(self) -> None:
        if not isinstance(self.device_ctrl_flags, UDPDeviceCtrlFlags):
            self.device_ctrl_flags = UDPDeviceCtrlFlags(self.device_ctrl_flags)

    def to_bytes(self) -> bytes:
        """Encode the header."""
        return _pack(
            _UDP_HEADER_FORMAT,
            self.device_id,
            self.payload_id,
            self.payload_length,
            int(self.device_ctrl_flags),
            self.device_state,
            self.reserved,
            self.device_ts_ms,
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> "UDPPacketHeader":
        """Decode a header from exactly ``SIZE`` bytes."""
        raw = _check_length(cls, data, cls.SIZE)
        (device_id, payload_id, length, flags, state, reserved, timestamp) = struct.unpack(
            _UDP_HEADER_FORMAT, raw
        )
        return cls(
            device_id=device_id,
            payload_id=payload_id,
            payload_length=length,
            device_ctrl_flags=UDPDeviceCtrlFlags(flags),
            device_state=state,
            reserved=reserved,
            device_ts_ms=timestamp,
        )