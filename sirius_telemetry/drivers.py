"""Status and error-status words of the low-level peripheral drivers."""

from __future__ import annotations

from .bitfields import BitField, BitFieldStatus

__all__ = [
    "ADCChannelStatus",
    "ADCChannelErrorStatus",
    "ADCStatus",
    "ADCErrorStatus",
    "GPIOStatus",
    "GPIOErrorStatus",
    "PWMStatus",
    "PWMErrorStatus",
    "SPIStatus",
    "SPIErrorStatus",
    "UARTStatus",
    "UARTErrorStatus",
    "USBStatus",
    "USBErrorStatus",
]


class ADCChannelStatus(BitFieldStatus):
    _reserved = BitField(16)


class ADCChannelErrorStatus(BitFieldStatus):
    not_initialized = BitField(1)
    null_function_pointer = BitField(1)
    default_function_called = BitField(1)
    not_connected = BitField(1)
    is_short_circuited = BitField(1)
    _reserved = BitField(11)


class ADCStatus(BitFieldStatus):
    dma_half_full = BitField(1)
    dma_full = BitField(1)
    _reserved = BitField(14)


class ADCErrorStatus(BitFieldStatus):
    not_initialized = BitField(1)
    null_function_pointer = BitField(1)
    default_function_called = BitField(1)
    _reserved = BitField(13)


class GPIOStatus(BitFieldStatus):
    _reserved = BitField(16)


class GPIOErrorStatus(BitFieldStatus):
    not_initialized = BitField(1)
    null_function_pointer = BitField(1)
    default_function_called = BitField(1)
    _reserved = BitField(13)


class PWMStatus(BitFieldStatus):
    _reserved = BitField(16)


class PWMErrorStatus(BitFieldStatus):
    not_initialized = BitField(1)
    null_function_pointer = BitField(1)
    default_function_called = BitField(1)
    init_timer_error = BitField(1)
    invalid_timer_channel = BitField(1)
    _reserved = BitField(11)


class SPIStatus(BitFieldStatus):
    _reserved = BitField(16)


class SPIErrorStatus(BitFieldStatus):
    not_initialized = BitField(1)
    null_function_pointer = BitField(1)
    default_function_called = BitField(1)
    _reserved = BitField(13)


class UARTStatus(BitFieldStatus):
    rx_data_ready = BitField(1)
    tx_ready = BitField(1)
    _reserved = BitField(14)


class UARTErrorStatus(BitFieldStatus):
    not_initialized = BitField(1)
    null_function_pointer = BitField(1)
    default_function_called = BitField(1)
    _reserved = BitField(13)


class USBStatus(BitFieldStatus):
    rx_data_ready = BitField(1)
    _reserved = BitField(15)


class USBErrorStatus(BitFieldStatus):
    not_initialized = BitField(1)
    null_function_pointer = BitField(1)
    default_function_called = BitField(1)
    _reserved = BitField(13)