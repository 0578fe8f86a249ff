"""Packed little-endian bit-field words used for status and error flags."""

from __future__ import annotations

from typing import Any, ClassVar, Dict, Tuple

_ALLOWED_UNIT_BITS = (8, 16, 32)


def _check_uint(value: Any, maximum: int, name: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, not {type(value).__name__}")
    value = int(value)
    if not 0 <= value <= maximum:
        raise ValueError(f"{name}={value} does not fit in range 0..{maximum}")
    return value


class BitField:
    """An unsigned field of a fixed number of bits inside a BitFieldStatus.

    Offsets are assigned by the owning class in declaration order, starting
    at the least significant bit. A field that does not fit in what is left
    of the current storage unit starts at the next unit, as a C compiler lays
    out bit-fields.
    """

    def __init__(self, width: int) -> None:
        if isinstance(width, bool) or not isinstance(width, int) or width < 1:
            raise ValueError(f"bit field width must be a positive integer, got {width!r}")
        self.width = width
        self.offset = 0
        self.name = ""

    @property
    def mask(self) -> int:
        """Largest value the field can hold."""
        return (1 << self.width) - 1

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return (instance._value >> self.offset) & self.mask

    def __set__(self, instance: Any, value: int) -> None:
        value = _check_uint(value, self.mask, self.name)
        cleared = instance._value & ~(self.mask << self.offset)
        instance._value = cleared | (value << self.offset)

    def __repr__(self) -> str:
        return f"BitField(name={self.name!r}, width={self.width}, offset={self.offset})"


class BitFieldStatus:
    """A word made of named bit fields, readable as a whole integer value.

    Subclasses declare their fields as ``BitField`` class attributes. Fields
    whose names start with an underscore are reserved: they take up bits but
    are left out of ``to_dict`` and cannot be set by keyword.
    """

    UNIT_BITS: ClassVar[int] = 16
    SIZE: ClassVar[int] = 2
    _fields: ClassVar[Tuple[BitField, ...]] = ()
    _bits_used: ClassVar[int] = 0

    def __init_subclass__(cls, unit_bits: int | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if unit_bits is None:
            unit_bits = cls.UNIT_BITS
        if unit_bits not in _ALLOWED_UNIT_BITS:
            raise TypeError(f"unit_bits must be one of {_ALLOWED_UNIT_BITS}, got {unit_bits!r}")

        position = cls._bits_used
        own = [attr for attr in vars(cls).values() if isinstance(attr, BitField)]
        for field in own:
            if field.width > unit_bits:
                raise TypeError(
                    f"field {field.name!r} of {field.width} bits does not fit "
                    f"in a {unit_bits}-bit storage unit"
                )
            free = unit_bits - position % unit_bits
            if field.width > free:
                position += free
            field.offset = position
            position += field.width

        units = max(1, -(-position // unit_bits))
        cls.UNIT_BITS = unit_bits
        cls.SIZE = units * unit_bits // 8
        cls._fields = cls._fields + tuple(own)
        cls._bits_used = position

    def __init__(self, value: int = 0, **kwargs: int) -> None:
        self._value = 0
        self.value = value
        public = {field.name for field in self._fields if not field.name.startswith("_")}
        for name, field_value in kwargs.items():
            if name not in public:
                raise TypeError(f"{type(self).__name__} has no field {name!r}")
            setattr(self, name, field_value)

    @property
    def value(self) -> int:
        """The whole word as an unsigned integer."""
        return self._value

    @value.setter
    def value(self, value: int) -> None:
        self._value = _check_uint(value, (1 << (self.SIZE * 8)) - 1, "value")

    def to_dict(self) -> Dict[str, int]:
        """Map each public field name to its current value."""
        return {
            field.name: getattr(self, field.name)
            for field in self._fields
            if not field.name.startswith("_")
        }

    def to_bytes(self) -> bytes:
        """Encode the word as little-endian bytes."""
        return self._value.to_bytes(self.SIZE, "little")

    @classmethod
    def from_bytes(cls, data: bytes) -> "BitFieldStatus":
        """Decode a word from exactly ``SIZE`` little-endian bytes."""
        raw = bytes(data)
        if len(raw) != cls.SIZE:
            raise ValueError(f"{cls.__name__} needs {cls.SIZE} bytes, got {len(raw)}")
        return cls(int.from_bytes(raw, "little"))

    def __int__(self) -> int:
        return self._value

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        digits = self.SIZE * 2
        parts = [f"value=0x{self._value:0{digits}X}"]
        parts.extend(f"{name}={val}" for name, val in self.to_dict().items())
        return f"{type(self).__name__}({', '.join(parts)})"