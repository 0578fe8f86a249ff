"""Telemetry header word and the base class of fixed-layout wire packets."""

from __future__ import annotations

import struct
from enum import IntEnum
from typing import Any, ClassVar, Dict, List, NamedTuple, Optional, Tuple

from .bitfields import BitField, BitFieldStatus

__all__ = [
    "TELEMETRY_TYPE_CODE",
    "STATUS_TYPE_CODE",
    "TelemetryCode",
    "TelemetryHeader",
    "Packet",
]

TELEMETRY_TYPE_CODE = 0x54454
STATUS_TYPE_CODE = 0x53544


class TelemetryCode(IntEnum):
    """Three-letter ASCII codes that announce each kind of sensor data."""

    ACCELEROMETER = 0x414343
    GYROSCOPE = 0x475952
    ALTIMETER = 0x414C54
    GPS = 0x475053
    MAGNETOMETER = 0x4D4147
    PRESSURE_SENSOR = 0x505253
    ROCKET = 0x524B54
    TEMPERATURE_SENSOR = 0x54484D
    VALVE = 0x564C56

    @property
    def tag(self) -> str:
        """The code spelled as its three ASCII letters."""
        return self.value.to_bytes(3, "big").decode("ascii")


class TelemetryHeader(BitFieldStatus, unit_bits=32):
    """First word of every telemetry packet: packet type and sending board."""

    type_code = BitField(20)
    board_id = BitField(4)
    _reserved = BitField(8)


_INT_CODES = frozenset("bBhHiIqQ")


class _Slot(NamedTuple):
    name: str
    kind: Any
    count: Optional[int]
    offset: int
    elem_size: int


def _align(offset: int, alignment: int) -> int:
    return -(-offset // alignment) * alignment


def _parse_spec(spec: Any) -> Tuple[str, Any, Optional[int]]:
    if not isinstance(spec, tuple) or len(spec) not in (2, 3):
        raise TypeError(f"field spec must be (name, kind) or (name, kind, count), got {spec!r}")
    name, kind = spec[0], spec[1]
    count = spec[2] if len(spec) == 3 else None
    if not isinstance(name, str) or not name.isidentifier():
        raise TypeError(f"field name must be an identifier, got {name!r}")
    if count is not None and (isinstance(count, bool) or not isinstance(count, int) or count < 1):
        raise TypeError(f"array length of {name!r} must be a positive integer, got {count!r}")
    return name, kind, count


def _measure(kind: Any) -> Tuple[int, int]:
    """Return the size and the alignment of one element of ``kind``."""
    if isinstance(kind, str):
        if kind not in _INT_CODES:
            raise TypeError(f"unsupported field code {kind!r}")
        size = struct.calcsize("<" + kind)
        return size, size
    if isinstance(kind, type) and issubclass(kind, BitFieldStatus):
        return kind.SIZE, kind.UNIT_BITS // 8
    if isinstance(kind, type) and issubclass(kind, Packet):
        return kind._size, kind._alignment
    raise TypeError(f"unsupported field kind {kind!r}")


def _default_element(kind: Any) -> Any:
    return 0 if isinstance(kind, str) else kind()


def _encode(kind: Any, item: Any, name: str) -> bytes:
    if isinstance(kind, str):
        try:
            return struct.pack("<" + kind, item)
        except struct.error as exc:
            raise ValueError(f"{name}: {exc}") from exc
    if issubclass(kind, BitFieldStatus):
        if isinstance(item, kind):
            return item.to_bytes()
        if isinstance(item, int):
            return kind(item).to_bytes()
        raise TypeError(f"{name} must be {kind.__name__} or int, not {type(item).__name__}")
    if isinstance(item, kind):
        return item.to_bytes()
    raise TypeError(f"{name} must be {kind.__name__}, not {type(item).__name__}")


def _decode(kind: Any, chunk: bytes) -> Any:
    if isinstance(kind, str):
        return struct.unpack("<" + kind, chunk)[0]
    return kind.from_bytes(chunk)


class Packet:
    """A packet with a fixed little-endian layout declared in ``FIELDS``.

    Each entry of ``FIELDS`` is ``(name, kind)`` or ``(name, kind, count)``
    where ``kind`` is an integer struct code (``"B"``, ``"H"``, ``"i"``...),
    a ``BitFieldStatus`` subclass or another ``Packet`` subclass, and
    ``count`` makes the field an array. Fields are aligned to their natural
    boundary and the packet is padded to its widest member, as a C compiler
    does. With ``UNION`` set every field starts at offset zero.
    Fields named with a leading underscore are padding: kept, but not set
    by keyword.
    """

    FIELDS: ClassVar[Tuple[tuple, ...]] = ()
    UNION: ClassVar[bool] = False
    _slots: ClassVar[Tuple[_Slot, ...]] = ()
    _size: ClassVar[int] = 0
    _alignment: ClassVar[int] = 1

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        slots: List[_Slot] = []
        seen = set()
        offset = 0
        extent = 0
        alignment = 1
        for spec in cls.FIELDS:
            name, kind, count = _parse_spec(spec)
            if name in seen or hasattr(Packet, name):
                raise TypeError(f"field name {name!r} is already taken in {cls.__name__}")
            seen.add(name)
            elem_size, elem_align = _measure(kind)
            alignment = max(alignment, elem_align)
            start = 0 if cls.UNION else _align(offset, elem_align)
            slots.append(_Slot(name, kind, count, start, elem_size))
            offset = start + elem_size * (count or 1)
            extent = max(extent, offset)
        cls._slots = tuple(slots)
        cls._alignment = alignment
        cls._size = _align(extent, alignment)

    def __init__(self, **kwargs: Any) -> None:
        for slot in self._slots:
            if slot.count is None:
                setattr(self, slot.name, _default_element(slot.kind))
            else:
                setattr(self, slot.name, [_default_element(slot.kind) for _ in range(slot.count)])
        public = {slot.name for slot in self._slots if not slot.name.startswith("_")}
        for name, value in kwargs.items():
            if name not in public:
                raise TypeError(f"{type(self).__name__} has no field {name!r}")
            setattr(self, name, value)

    @classmethod
    def size(cls) -> int:
        """Number of bytes of the encoded packet, padding included."""
        return cls._size

    def to_bytes(self) -> bytes:
        """Encode the packet; padding bytes are zero."""
        buffer = bytearray(self._size)
        for slot in self._slots:
            value = getattr(self, slot.name)
            if slot.count is None:
                items = [value]
            else:
                items = list(value)
                if len(items) != slot.count:
                    raise ValueError(
                        f"{slot.name} needs {slot.count} elements, got {len(items)}"
                    )
            for index, item in enumerate(items):
                start = slot.offset + index * slot.elem_size
                buffer[start:start + slot.elem_size] = _encode(slot.kind, item, slot.name)
        return bytes(buffer)

    @classmethod
    def from_bytes(cls, data: bytes) -> "Packet":
        """Decode a packet from exactly ``size()`` bytes."""
        raw = bytes(data)
        if len(raw) != cls._size:
            raise ValueError(f"{cls.__name__} needs {cls._size} bytes, got {len(raw)}")
        packet = cls.__new__(cls)
        for slot in cls._slots:
            elements = [
                _decode(slot.kind, raw[start:start + slot.elem_size])
                for start in range(
                    slot.offset,
                    slot.offset + slot.elem_size * (slot.count or 1),
                    slot.elem_size,
                )
            ]
            setattr(packet, slot.name, elements[0] if slot.count is None else elements)
        return packet

    def _values(self) -> Dict[str, Any]:
        return {slot.name: getattr(self, slot.name) for slot in self._slots}

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._values() == other._values()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        parts = ", ".join(
            f"{name}={value!r}" for name, value in self._values().items() if not name.startswith("_")
        )
        return f"{type(self).__name__}({parts})"