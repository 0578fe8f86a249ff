import pytest

from sirius_telemetry import sensors
from sirius_telemetry.sensors import (
    EngineAdcChannel,
    EngineGpio,
    EngineThermistance,
    FillingStationAdcChannel,
    FillingStationGpio,
    FillingStationThermistance,
    GSControlButton,
    GSControlGpio,
)


def test_pinned_adc_channels():
    assert EngineAdcChannel(0x0A) is EngineAdcChannel.COMBUSTION_CHAMBER_PRESSURE_SENSOR
    assert FillingStationAdcChannel(0x0E) is FillingStationAdcChannel.TANK_LOAD_CELL


@pytest.mark.parametrize(
    "indexes, amount",
    [
        (EngineThermistance, sensors.ENGINE_TEMPERATURE_SENSOR_AMOUNT),
        (EngineAdcChannel, sensors.ENGINE_ADC_CHANNEL_AMOUNT),
        (EngineGpio, sensors.ENGINE_GPIO_AMOUNT),
        (FillingStationThermistance, sensors.FILLING_STATION_TEMPERATURE_SENSOR_AMOUNT),
        (FillingStationGpio, sensors.FILLING_STATION_GPIO_AMOUNT),
        (GSControlButton, sensors.GS_CONTROL_BUTTON_AMOUNT),
        (GSControlGpio, sensors.GS_CONTROL_GPIO_AMOUNT),
    ],
)
def test_contiguous_indexes_cover_every_slot(indexes, amount):
    assert sorted(member.value for member in indexes) == list(range(amount))


def test_filling_station_adc_channels_stay_in_range_and_are_unique():
    values = [member.value for member in FillingStationAdcChannel]
    assert all(0 <= value < sensors.FILLING_STATION_ADC_CHANNEL_AMOUNT for value in values)
    assert len(values) == len(set(values))
    assert [FillingStationAdcChannel(value) for value in values] == list(FillingStationAdcChannel)


@pytest.mark.parametrize(
    "thermistances, channels",
    [
        (EngineThermistance, EngineAdcChannel),
        (FillingStationThermistance, FillingStationAdcChannel),
    ],
)
def test_each_thermistance_reads_its_own_adc_channel(thermistances, channels):
    for thermistance in thermistances:
        assert channels[thermistance.name].value == thermistance.value


def test_gs_control_buttons_share_gpio_index_except_allow_dump():
    for button in GSControlButton:
        if button is GSControlButton.ALLOW_DUMP:
            assert GSControlGpio(button.value) is GSControlGpio.UNUSED
        else:
            assert GSControlGpio[button.name].value == button.value


def test_derived_peripheral_amounts():
    assert sensors.ENGINE_PWM_AMOUNT == sensors.ENGINE_VALVE_AMOUNT
    assert sensors.FILLING_STATION_PWM_AMOUNT == sensors.FILLING_STATION_VALVE_AMOUNT
    assert sensors.ENGINE_GPIO_AMOUNT == len(EngineGpio)
    assert sensors.FILLING_STATION_GPIO_AMOUNT == len(FillingStationGpio)
    last_engine = sensors.ENGINE_GPIO_AMOUNT - 1
    last_station = sensors.FILLING_STATION_GPIO_AMOUNT - 1
    assert EngineGpio(last_engine).value == last_engine
    assert FillingStationGpio(last_station).value == last_station
    with pytest.raises(ValueError):
        EngineGpio(sensors.ENGINE_GPIO_AMOUNT)
    with pytest.raises(ValueError):
        FillingStationGpio(sensors.FILLING_STATION_GPIO_AMOUNT)


def test_valve_indexes_are_within_valve_amount():
    engine = [sensors.ENGINE_IPA_VALVE_INDEX, sensors.ENGINE_NOS_VALVE_INDEX]
    station = [sensors.FILLING_STATION_FILL_VALVE_INDEX, sensors.FILLING_STATION_DUMP_VALVE_INDEX]
    assert sorted(engine) == list(range(sensors.ENGINE_VALVE_AMOUNT))
    assert sorted(station) == list(range(sensors.FILLING_STATION_VALVE_AMOUNT))
    with pytest.raises(ValueError):
        EngineThermistance(sensors.ENGINE_TEMPERATURE_SENSOR_AMOUNT)