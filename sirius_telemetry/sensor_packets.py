"""Telemetry packets that carry one device's data, status and error words."""

from __future__ import annotations

from typing import Tuple, Type

from .status import (
    AccelerometerErrorStatus,
    AccelerometerStatus,
    AltimeterErrorStatus,
    AltimeterStatus,
    ButtonErrorStatus,
    ButtonStatus,
    GpsErrorStatus,
    GpsStatus,
    GyroscopeErrorStatus,
    GyroscopeStatus,
    HeaterErrorStatus,
    HeaterStatus,
    IgniterErrorStatus,
    IgniterStatus,
    LoadCellErrorStatus,
    LoadCellStatus,
    MagnetometerErrorStatus,
    MagnetometerStatus,
    PressureSensorErrorStatus,
    PressureSensorStatus,
    RocketErrorStatus,
    RocketStatus,
    StorageErrorStatus,
    StorageStatus,
    TemperatureSensorErrorStatus,
    TemperatureSensorStatus,
    ValveErrorStatus,
    ValveStatus,
)
from .sensors import (
    ENGINE_TEMPERATURE_SENSOR_AMOUNT,
    FILLING_STATION_TEMPERATURE_SENSOR_AMOUNT,
)
from .telemetry import Packet, TelemetryHeader

__all__ = [
    "STORAGE_DEVICE_AMOUNT",
    "AccelerometerPacket",
    "AltimeterPacket",
    "ButtonPacket",
    "GpsPacket",
    "GyroscopePacket",
    "HeaterPacket",
    "IgniterPacket",
    "LoadCellPacket",
    "MagnetometerPacket",
    "PressureSensorPacket",
    "RocketPacket",
    "StoragePacket",
    "TemperatureSensorPacketData",
    "TemperatureSensorPacket",
    "TemperatureSensorEnginePacket",
    "TemperatureSensorFillingStationPacket",
    "ValvePacket",
]

STORAGE_DEVICE_AMOUNT = 2


def _framed(data_cls: Type[Packet]) -> Tuple[tuple, ...]:
    """Layout of a packet made of a header, one data block and a CRC."""
    return (("header", TelemetryHeader), ("raw_data", data_cls), ("crc", "I"))


class _AccelerometerPacketData(Packet):
    FIELDS = (
        ("raw_x", "H"),
        ("raw_y", "H"),
        ("raw_z", "H"),
        ("error_status", AccelerometerErrorStatus),
        ("status", AccelerometerStatus),
        ("time_stamp_ms", "I"),
    )


class AccelerometerPacket(Packet):
    """Raw three-axis accelerometer reading."""

    FIELDS = _framed(_AccelerometerPacketData)


class _AltimeterPacketData(Packet):
    FIELDS = (
        ("raw_altitude", "H"),
        ("error_status", AltimeterErrorStatus),
        ("status", AltimeterStatus),
        ("time_stamp_ms", "I"),
    )


class AltimeterPacket(Packet):
    """Raw altimeter reading."""

    FIELDS = _framed(_AltimeterPacketData)


class _ButtonPacketData(Packet):
    FIELDS = (
        ("error_status", ButtonErrorStatus),
        ("status", ButtonStatus),
        ("time_stamp_ms", "I"),
    )


class ButtonPacket(Packet):
    """Button state report."""

    FIELDS = _framed(_ButtonPacketData)


class _GpsPacketData(Packet):
    FIELDS = (
        ("raw_latitude", "h"),
        ("raw_longitude", "h"),
        ("error_status", GpsErrorStatus),
        ("status", GpsStatus),
        ("time_stamp_ms", "I"),
    )


class GpsPacket(Packet):
    """Raw GPS position, latitude and longitude signed."""

    FIELDS = _framed(_GpsPacketData)


class _GyroscopePacketData(Packet):
    FIELDS = (
        ("raw_x", "H"),
        ("raw_y", "H"),
        ("raw_z", "H"),
        ("error_status", GyroscopeErrorStatus),
        ("status", GyroscopeStatus),
        ("time_stamp_ms", "I"),
    )


class GyroscopePacket(Packet):
    """Raw three-axis gyroscope reading."""

    FIELDS = _framed(_GyroscopePacketData)


class _HeaterPacketData(Packet):
    FIELDS = (
        ("error_status", HeaterErrorStatus),
        ("status", HeaterStatus),
        ("time_stamp_ms", "I"),
    )


class HeaterPacket(Packet):
    """Heater state report."""

    FIELDS = _framed(_HeaterPacketData)


class _IgniterPacketData(Packet):
    FIELDS = (
        ("error_status", IgniterErrorStatus),
        ("status", IgniterStatus),
        ("time_stamp_ms", "I"),
    )


class IgniterPacket(Packet):
    """Igniter state report."""

    FIELDS = _framed(_IgniterPacketData)


class _LoadCellPacketData(Packet):
    FIELDS = (
        ("raw_force", "H"),
        ("error_status", LoadCellErrorStatus),
        ("status", LoadCellStatus),
        ("time_stamp_ms", "I"),
    )


class LoadCellPacket(Packet):
    """Raw load-cell force reading."""

    FIELDS = _framed(_LoadCellPacketData)


class _MagnetometerPacketData(Packet):
    FIELDS = (
        ("raw_x", "H"),
        ("raw_y", "H"),
        ("raw_z", "H"),
        ("error_status", MagnetometerErrorStatus),
        ("status", MagnetometerStatus),
        ("time_stamp_ms", "I"),
    )


class MagnetometerPacket(Packet):
    """Raw three-axis magnetometer reading."""

    FIELDS = _framed(_MagnetometerPacketData)


class _PressureSensorPacketData(Packet):
    # The status word comes before the error word in this packet.
    FIELDS = (
        ("raw_pressure", "I"),
        ("status", PressureSensorStatus),
        ("error_status", PressureSensorErrorStatus),
        ("time_stamp_ms", "I"),
    )


class PressureSensorPacket(Packet):
    """Raw pressure reading."""

    FIELDS = _framed(_PressureSensorPacketData)


class _RocketPacketData(Packet):
    FIELDS = (
        ("error_status", RocketErrorStatus),
        ("status", RocketStatus),
        ("time_stamp_ms", "I"),
    )


class RocketPacket(Packet):
    """Rocket report whose header, data and CRC share the same bytes.

    The header and the CRC are views of the packet's first four bytes, which
    are also the rocket error word; setting either rewrites that word.
    """

    FIELDS = (("raw_data", _RocketPacketData),)

    @property
    def header(self) -> TelemetryHeader:
        """The first word read as a telemetry header."""
        return TelemetryHeader(self.raw_data.error_status.value)

    @header.setter
    def header(self, header: TelemetryHeader) -> None:
        self.raw_data.error_status = RocketErrorStatus(int(header))

    @property
    def crc(self) -> int:
        """The first word read as a 32-bit CRC."""
        return self.raw_data.error_status.value

    @crc.setter
    def crc(self, crc: int) -> None:
        self.raw_data.error_status = RocketErrorStatus(crc)


class _StoragePacketData(Packet):
    FIELDS = (
        ("error_status", StorageErrorStatus),
        ("status", StorageStatus),
        ("time_stamp_ms", "I"),
    )


class StoragePacket(Packet):
    """Storage device state report."""

    FIELDS = _framed(_StoragePacketData)


class TemperatureSensorPacketData(Packet):
    """One temperature sensor's reading, status words and time stamp."""

    FIELDS = (
        ("raw_temperature", "I"),
        ("error_status", TemperatureSensorErrorStatus),
        ("status", TemperatureSensorStatus),
        ("time_stamp_ms", "I"),
    )


class TemperatureSensorPacket(Packet):
    """Reading of a single temperature sensor."""

    FIELDS = _framed(TemperatureSensorPacketData)


class TemperatureSensorEnginePacket(Packet):
    """Readings of every engine temperature sensor."""

    FIELDS = (
        ("header", TelemetryHeader),
        ("raw_data", TemperatureSensorPacketData, ENGINE_TEMPERATURE_SENSOR_AMOUNT),
        ("time_stamp_ms", "I"),
        ("crc", "I"),
    )


class TemperatureSensorFillingStationPacket(Packet):
    """Readings of every filling-station temperature sensor."""

    FIELDS = (
        ("header", TelemetryHeader),
        ("raw_data", TemperatureSensorPacketData, FILLING_STATION_TEMPERATURE_SENSOR_AMOUNT),
        ("time_stamp_ms", "I"),
        ("crc", "I"),
    )


class _ValvePacketData(Packet):
    FIELDS = (
        ("error_status", ValveErrorStatus),
        ("status", ValveStatus),
        ("time_stamp_ms", "I"),
    )


class ValvePacket(Packet):
    """Valve state report."""

    FIELDS = _framed(_ValvePacketData)