import itertools

import pytest

from sirius_telemetry import drivers as dv
from sirius_telemetry.bitfields import BitFieldStatus

ALL_CLASSES = [getattr(dv, name) for name in dv.__all__]
ERROR_CLASSES = [cls for cls in ALL_CLASSES if cls.__name__.endswith("ErrorStatus")]


def _masks(cls):
    return {name: getattr(cls, name).mask for name in cls().to_dict()}


@pytest.mark.parametrize("cls", ALL_CLASSES)
def test_round_trip_every_field(cls):
    for name, mask in _masks(cls).items():
        decoded = cls.from_bytes(BitFieldStatus.to_bytes(cls(**{name: mask})))
        assert getattr(decoded, name) == mask
        assert sum(BitFieldStatus.to_dict(decoded).values()) == mask


@pytest.mark.parametrize("cls", ALL_CLASSES)
def test_fields_do_not_overlap(cls):
    words = [
        int.from_bytes(BitFieldStatus.to_bytes(cls(**{name: mask})), "little")
        for name, mask in _masks(cls).items()
    ]
    for a, b in itertools.combinations(words, 2):
        assert a & b == 0


@pytest.mark.parametrize("cls", ALL_CLASSES)
def test_words_are_two_bytes(cls):
    encoded = BitFieldStatus.to_bytes(cls(0xFFFF))
    assert encoded == b"\xff\xff"
    assert cls.SIZE == len(encoded)
    assert cls.from_bytes(encoded).value == 0xFFFF


@pytest.mark.parametrize("cls", ERROR_CLASSES)
def test_common_error_flags_lead(cls):
    names = list(BitFieldStatus.to_dict(cls()))
    assert names[:3] == ["not_initialized", "null_function_pointer", "default_function_called"]
    assert BitFieldStatus.to_bytes(cls(not_initialized=1)) == b"\x01\x00"


@pytest.mark.parametrize("cls", [dv.ADCChannelStatus, dv.GPIOStatus, dv.PWMStatus, dv.SPIStatus])
def test_reserved_only_statuses(cls):
    assert cls(0xFFFF).to_dict() == {}


def test_adc_dma_flags():
    status = dv.ADCStatus(dma_full=1)
    decoded = dv.ADCStatus.from_bytes(status.to_bytes())
    assert decoded.dma_full == 1
    assert decoded.dma_half_full == 0


def test_adc_channel_short_circuit_flag():
    status = dv.ADCChannelErrorStatus(is_short_circuited=1)
    assert status.to_dict()["is_short_circuited"] == 1
    assert status.not_connected == 0


def test_pwm_timer_flags():
    status = dv.PWMErrorStatus(init_timer_error=1, invalid_timer_channel=1)
    decoded = dv.PWMErrorStatus.from_bytes(status.to_bytes())
    assert decoded.init_timer_error == 1
    assert decoded.invalid_timer_channel == 1
    assert decoded.not_initialized == 0


def test_uart_and_usb_rx_flag_is_bit_zero():
    assert dv.UARTStatus(rx_data_ready=1).to_bytes() == dv.USBStatus(rx_data_ready=1).to_bytes()


def test_flag_overflow_rejected():
    with pytest.raises(ValueError):
        dv.UARTStatus(tx_ready=2)


def test_unknown_field_rejected():
    with pytest.raises(TypeError):
        dv.SPIErrorStatus(not_connected=1)