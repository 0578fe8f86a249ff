"""Status and error-status words of each device and subsystem."""

from __future__ import annotations

from .bitfields import BitField, BitFieldStatus

__all__ = [
    "AccelerometerStatus",
    "AccelerometerErrorStatus",
    "AltimeterStatus",
    "AltimeterErrorStatus",
    "ButtonStatus",
    "ButtonErrorStatus",
    "EngineStatus",
    "EngineErrorStatus",
    "FillingStationStatus",
    "FillingStationErrorStatus",
    "GpsStatus",
    "GpsErrorStatus",
    "GSControlStatus",
    "GSControlErrorStatus",
    "GyroscopeStatus",
    "GyroscopeErrorStatus",
    "HeaterStatus",
    "HeaterErrorStatus",
    "IgniterStatus",
    "IgniterErrorStatus",
    "LoadCellStatus",
    "LoadCellErrorStatus",
    "MagnetometerStatus",
    "MagnetometerErrorStatus",
    "PressureSensorStatus",
    "PressureSensorErrorStatus",
    "RocketStatus",
    "RocketErrorStatus",
    "StorageStatus",
    "StorageErrorStatus",
    "TelecommunicationStatus",
    "TelecommunicationErrorStatus",
    "TemperatureSensorStatus",
    "TemperatureSensorErrorStatus",
    "ValveStatus",
    "ValveErrorStatus",
]


class AccelerometerStatus(BitFieldStatus):
    not_initialized = BitField(1)
    invalid_function_pointer = BitField(1)
    not_connected = BitField(1)
    _reserved = BitField(13)


class AccelerometerErrorStatus(BitFieldStatus):
    not_initialized = BitField(1)
    null_function_pointer = BitField(1)
    default_function_called = BitField(1)
    not_connected = BitField(1)
    _reserved = BitField(12)


class AltimeterStatus(BitFieldStatus):
    _reserved = BitField(16)


class AltimeterErrorStatus(BitFieldStatus):
    not_initialized = BitField(1)
    null_function_pointer = BitField(1)
    default_function_called = BitField(1)
    _reserved = BitField(13)


class ButtonStatus(BitFieldStatus):
    ignited = BitField(1)
    is_pressed = BitField(1)
    _reserved = BitField(14)


class ButtonErrorStatus(BitFieldStatus):
    not_initialized = BitField(1)
    null_function_pointer = BitField(1)
    default_function_called = BitField(1)
    _reserved = BitField(13)


class EngineStatus(BitFieldStatus):
    test_mode_on = BitField(1)
    fast_mode_on = BitField(1)
    timestamp_buffer_ready = BitField(1)
    slow_mode_buffer_ready = BitField(1)
    state = BitField(6)
    _reserved = BitField(6)


class EngineErrorStatus(BitFieldStatus):
    not_initialized = BitField(1)
    invalid_state = BitField(1)
    test_failed = BitField(1)
    _reserved = BitField(13)


class FillingStationStatus(BitFieldStatus):
    state = BitField(6)
    _reserved = BitField(10)


class FillingStationErrorStatus(BitFieldStatus):
    not_initialized = BitField(1)
    invalid_state = BitField(1)
    _reserved = BitField(14)


class GpsStatus(BitFieldStatus):
    _reserved = BitField(16)


class GpsErrorStatus(BitFieldStatus):
    not_initialized = BitField(1)
    null_function_pointer = BitField(1)
    default_function_called = BitField(1)
    _reserved = BitField(13)


class GSControlStatus(BitFieldStatus):
    _reserved = BitField(2)
    state = BitField(6)
    is_valve_start_button_pressed = BitField(1)
    is_allow_fill_switch_on = BitField(1)
    is_arm_servo_switch_on = BitField(1)
    is_arm_igniter_switch_on = BitField(1)
    is_allow_dump_switch_on = BitField(1)
    is_emergency_stop_button_pressed = BitField(1)
    is_fire_igniter_button_pressed = BitField(1)
    is_unsafe_key_switch_pressed = BitField(1)


class GSControlErrorStatus(BitFieldStatus):
    not_initialized = BitField(1)
    invalid_state = BitField(1)
    _reserved = BitField(14)


class GyroscopeStatus(BitFieldStatus):
    _reserved = BitField(16)


class GyroscopeErrorStatus(BitFieldStatus):
    not_initialized = BitField(1)
    null_function_pointer = BitField(1)
    default_function_called = BitField(1)
    _reserved = BitField(13)


class HeaterStatus(BitFieldStatus):
    _reserved = BitField(16)


class HeaterErrorStatus(BitFieldStatus):
    not_initialized = BitField(1)
    null_function_pointer = BitField(1)
    default_function_called = BitField(1)
    _reserved = BitField(13)


class IgniterStatus(BitFieldStatus):
    ignited = BitField(1)
    state = BitField(3)
    _reserved = BitField(12)


class IgniterErrorStatus(BitFieldStatus):
    not_initialized = BitField(1)
    null_function_pointer = BitField(1)
    default_function_called = BitField(1)
    _reserved = BitField(13)


class LoadCellStatus(BitFieldStatus):
    _reserved = BitField(16)


class LoadCellErrorStatus(BitFieldStatus):
    not_initialized = BitField(1)
    null_function_pointer = BitField(1)
    default_function_called = BitField(1)
    not_connected = BitField(1)
    _reserved = BitField(12)


class MagnetometerStatus(BitFieldStatus):
    _reserved = BitField(16)


class MagnetometerErrorStatus(BitFieldStatus):
    not_initialized = BitField(1)
    null_function_pointer = BitField(1)
    default_function_called = BitField(1)
    _reserved = BitField(13)


class PressureSensorStatus(BitFieldStatus):
    _reserved = BitField(16)


class PressureSensorErrorStatus(BitFieldStatus):
    not_initialized = BitField(1)
    null_function_pointer = BitField(1)
    default_function_called = BitField(1)
    not_connected = BitField(1)
    leak_suspected = BitField(1)
    leak_detected = BitField(1)
    below_min_pressure = BitField(1)
    above_max_pressure = BitField(1)
    _reserved = BitField(8)


class RocketStatus(BitFieldStatus):
    _reserved = BitField(16)


class RocketErrorStatus(BitFieldStatus):
    """Rocket error word; its 15-bit reserved field spills into a second unit."""

    not_initialized = BitField(1)
    invalid_state = BitField(1)
    _reserved = BitField(15)


class StorageStatus(BitFieldStatus):
    state = BitField(3)
    is_plugged_in = BitField(1)
    _reserved = BitField(12)


class StorageErrorStatus(BitFieldStatus):
    not_initialized = BitField(1)
    null_function_pointer = BitField(1)
    default_function_called = BitField(1)
    disconnected = BitField(1)
    is_full = BitField(1)
    write_failed = BitField(1)
    read_failed = BitField(1)
    incomplete_write = BitField(1)
    fs_mount_failed = BitField(1)
    fs_open_failed = BitField(1)
    fs_sync_failed = BitField(1)
    fs_close_failed = BitField(1)
    fs_create_directory_fail = BitField(1)
    fs_file_too_large = BitField(1)
    fs_unexpected_file_name = BitField(1)
    _reserved = BitField(1)


class TelecommunicationStatus(BitFieldStatus):
    state = BitField(3)
    rx_data_ready = BitField(1)
    tx_ready = BitField(1)
    _reserved = BitField(11)


class TelecommunicationErrorStatus(BitFieldStatus):
    not_initialized = BitField(1)
    null_function_pointer = BitField(1)
    default_function_called = BitField(1)
    communication_lost = BitField(1)
    _reserved = BitField(12)


class TemperatureSensorStatus(BitFieldStatus):
    _reserved = BitField(16)


class TemperatureSensorErrorStatus(BitFieldStatus):
    not_initialized = BitField(1)
    null_function_pointer = BitField(1)
    default_function_called = BitField(1)
    not_connected = BitField(1)
    below_min_temperature = BitField(1)
    above_max_temperature = BitField(1)
    _reserved = BitField(10)


class ValveStatus(BitFieldStatus):
    is_idle = BitField(1)
    closed_switch_high = BitField(1)
    opened_switch_high = BitField(1)
    state = BitField(3)
    position_opened_pct = BitField(8)
    _reserved = BitField(2)


class ValveErrorStatus(BitFieldStatus):
    not_initialized = BitField(1)
    null_function_pointer = BitField(1)
    default_function_called = BitField(1)
    not_connected = BitField(1)
    duty_cycle_below_min = BitField(1)
    duty_cycle_over_max = BitField(1)
    exceeded_max_adjustments = BitField(1)
    invalid_state = BitField(1)
    _reserved = BitField(8)