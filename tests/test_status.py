import itertools

import pytest

from sirius_telemetry import status as st
from sirius_telemetry.bitfields import BitFieldStatus

ALL_CLASSES = [getattr(st, name) for name in st.__all__]


def _masks(cls):
    return {name: getattr(cls, name).mask for name in cls().to_dict()}


@pytest.mark.parametrize("cls", ALL_CLASSES)
def test_default_fields_are_zero(cls):
    assert all(v == 0 for v in BitFieldStatus.to_dict(cls()).values())
    assert BitFieldStatus.to_bytes(cls()) == bytes(cls.SIZE)


@pytest.mark.parametrize("cls", ALL_CLASSES)
def test_each_field_round_trips_alone(cls):
    for name, mask in _masks(cls).items():
        status = cls(**{name: mask})
        decoded = cls.from_bytes(BitFieldStatus.to_bytes(status))
        assert getattr(decoded, name) == mask
        others = {k: v for k, v in BitFieldStatus.to_dict(decoded).items() if k != name}
        assert all(v == 0 for v in others.values())


@pytest.mark.parametrize("cls", ALL_CLASSES)
def test_fields_do_not_overlap(cls):
    words = [
        int.from_bytes(BitFieldStatus.to_bytes(cls(**{name: mask})), "little")
        for name, mask in _masks(cls).items()
    ]
    for a, b in itertools.combinations(words, 2):
        assert a & b == 0


@pytest.mark.parametrize("cls", ALL_CLASSES)
def test_to_bytes_length_matches_size(cls):
    assert len(BitFieldStatus.to_bytes(cls(1))) == cls.SIZE


@pytest.mark.parametrize("cls", ALL_CLASSES)
def test_wrong_length_rejected(cls):
    with pytest.raises(ValueError):
        cls.from_bytes(BitFieldStatus.to_bytes(cls()) + b"\x00")


def test_reserved_only_statuses_have_no_fields():
    for cls in (st.AltimeterStatus, st.GpsStatus, st.RocketStatus, st.TemperatureSensorStatus):
        assert cls(0xFFFF).to_dict() == {}


def test_rocket_error_status_spans_two_units():
    assert st.RocketErrorStatus.SIZE == 4
    status = st.RocketErrorStatus(invalid_state=1)
    assert status.to_bytes()[2:] == b"\x00\x00"


def test_gs_control_low_bits_are_reserved():
    status = st.GSControlStatus.from_bytes(b"\x03\x00")
    assert all(v == 0 for v in status.to_dict().values())


def test_gs_control_last_flag_is_top_bit():
    status = st.GSControlStatus(is_unsafe_key_switch_pressed=1)
    assert status.to_bytes() == b"\x00\x80"


def test_valve_position_full_range():
    assert st.ValveStatus(0xFFFF).position_opened_pct == 255


def test_valve_state_overflow_rejected():
    with pytest.raises(ValueError):
        st.ValveStatus(state=st.ValveStatus.state.mask + 1)


def test_engine_state_is_six_bits():
    assert st.EngineStatus(0xFFFF).state == 63


def test_engine_state_does_not_touch_flags():
    status = st.EngineStatus(test_mode_on=1, state=st.EngineStatus.state.mask)
    status.state = 0
    assert status.test_mode_on == 1
    assert status.fast_mode_on == 0


def test_storage_error_flags_present():
    names = st.StorageErrorStatus().to_dict()
    assert "fs_unexpected_file_name" in names
    assert "incomplete_write" in names


def test_pressure_sensor_leak_flags():
    status = st.PressureSensorErrorStatus(leak_detected=1, above_max_pressure=1)
    decoded = st.PressureSensorErrorStatus.from_bytes(status.to_bytes())
    assert decoded.leak_detected == 1
    assert decoded.above_max_pressure == 1
    assert decoded.leak_suspected == 0


def test_value_too_large_rejected():
    with pytest.raises(ValueError):
        st.ValveErrorStatus(0x10000)