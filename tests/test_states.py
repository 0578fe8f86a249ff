import pytest

from sirius_telemetry.bitfields import BitFieldStatus
from sirius_telemetry.states import (
    BoardId,
    EngineState,
    FillingStationState,
    GSControlState,
    StorageState,
    TelecommunicationState,
    ValveState,
)
from sirius_telemetry.status import (
    EngineStatus,
    FillingStationStatus,
    GSControlStatus,
    StorageStatus,
    TelecommunicationStatus,
    ValveStatus,
)

STATE_WORDS = [
    (EngineState, EngineStatus),
    (FillingStationState, FillingStationStatus),
    (GSControlState, GSControlStatus),
    (StorageState, StorageStatus),
    (TelecommunicationState, TelecommunicationStatus),
    (ValveState, ValveStatus),
]


def test_engine_state_fire_code():
    assert EngineState.FIRE.value == 0x07
    assert EngineState(0x06) is EngineState.IGNITION


@pytest.mark.parametrize("code", [0x04, 0x05, 0x0A])
def test_engine_state_rejects_unassigned_codes(code):
    with pytest.raises(ValueError):
        EngineState(code)


@pytest.mark.parametrize("states, word", STATE_WORDS)
def test_every_state_fits_its_status_field(states, word):
    for state in states:
        assert 0 <= state <= word.state.mask
        assert BitFieldStatus.to_dict(word(state=state))["state"] == state


@pytest.mark.parametrize("states, word", STATE_WORDS)
def test_state_round_trips_through_status_bytes(states, word):
    for state in states:
        decoded = word.from_bytes(BitFieldStatus.to_bytes(word(state=state)))
        assert states(decoded.state) is state


@pytest.mark.parametrize(
    "states",
    [EngineState, FillingStationState, GSControlState, StorageState, TelecommunicationState, ValveState],
)
def test_state_codes_are_unique(states):
    values = [member.value for member in states]
    assert len(values) == len(set(values))


def test_all_boards_start_in_init_state_zero():
    assert EngineState(0) is EngineState.INIT
    assert FillingStationState(0) is FillingStationState.INIT
    assert GSControlState(0) is GSControlState.INIT
    assert StorageState(0) is StorageState.INIT
    assert TelecommunicationState(0) is TelecommunicationState.INIT
    assert ValveState(0) is ValveState.UNKNOWN


def test_board_ids_are_distinct_and_nonzero():
    values = [board.value for board in BoardId]
    assert all(value > 0 for value in values)
    assert len(set(values)) == len(values)
    assert [BoardId(value) for value in values] == list(BoardId)
    assert BoardId(0x01) is BoardId.ENGINE
    assert BoardId(0x03) is BoardId.GS_CONTROL