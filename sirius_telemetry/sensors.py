"""Device counts, peripheral counts and array indexes of each board."""

from __future__ import annotations

from enum import IntEnum

__all__ = [
    "EngineThermistance",
    "EngineAdcChannel",
    "EngineGpio",
    "FillingStationThermistance",
    "FillingStationAdcChannel",
    "FillingStationGpio",
    "GSControlButton",
    "GSControlGpio",
]

# Engine: devices.
ENGINE_VALVE_AMOUNT = 0x02
ENGINE_HEATPAD_AMOUNT = 0x02
ENGINE_TELECOMMUNICATION_AMOUNT = 0x01
ENGINE_TEMPERATURE_SENSOR_AMOUNT = 0x08
ENGINE_PRESSURE_SENSOR_AMOUNT = 0x02
ENGINE_IGNITER_AMOUNT = 0x02
ENGINE_STORAGE_AMOUNT = 0x02

# Engine: peripherals per device.
ENGINE_PWM_PER_VALVE = 0x01
ENGINE_GPIO_PER_VALVE = 0x02
ENGINE_GPIO_PER_IGNITER = 0x02
ENGINE_ADC_CHANNEL_PER_TEMPERATURE_SENSOR = 0x01
ENGINE_ADC_CHANNEL_PER_PRESSURE_SENSOR = 0x01

# Engine: peripherals.
ENGINE_ADC_AMOUNT = 0x01
ENGINE_PWM_AMOUNT = ENGINE_VALVE_AMOUNT * ENGINE_PWM_PER_VALVE
ENGINE_ADC_CHANNEL_AMOUNT = 0x10
ENGINE_UART_AMOUNT = 0x01
ENGINE_SPI_AMOUNT = 0x01
ENGINE_SDIO_AMOUNT = 0x01
ENGINE_GPIO_AMOUNT = (ENGINE_GPIO_PER_VALVE * ENGINE_VALVE_AMOUNT) + (
    ENGINE_IGNITER_AMOUNT * ENGINE_GPIO_PER_IGNITER
)

# Engine: indexes.
ENGINE_IPA_VALVE_INDEX = 0x00
ENGINE_NOS_VALVE_INDEX = 0x01
ENGINE_IPA_HEATPAD_INDEX = 0x00
ENGINE_NOS_HEATPAD_INDEX = 0x01
ENGINE_IPA_VALVE_PWM_INDEX = 0x00
ENGINE_NOS_VALVE_PWM_INDEX = 0x01
ENGINE_NOS_TANK_PRESSURE_SENSOR_INDEX = 0x00
ENGINE_COMBUSTION_CHAMBER_PRESSURE_SENSOR_INDEX = 0x01
ENGINE_TELECOMMUNICATION_UART_INDEX = 0x00
ENGINE_STORAGE_SD_CARD_INDEX = 0x00
ENGINE_STORAGE_EXTERNAL_FLASH_INDEX = 0x01


class EngineThermistance(IntEnum):
    """Index of each engine temperature sensor."""

    IPA_MAIN_VALVE = 0x00
    NOS_MAIN_VALVE = 0x01
    NOZZLE_1 = 0x02
    NOZZLE_2 = 0x03
    THROAT_1 = 0x04
    THROAT_2 = 0x05
    THROAT_3 = 0x06
    THERMISTANCE_8 = 0x07


class EngineAdcChannel(IntEnum):
    """ADC channel wired to each engine sensor."""

    IPA_MAIN_VALVE = 0x00
    NOS_MAIN_VALVE = 0x01
    NOZZLE_1 = 0x02
    NOZZLE_2 = 0x03
    THROAT_1 = 0x04
    THROAT_2 = 0x05
    THROAT_3 = 0x06
    THERMISTANCE_8 = 0x07
    UNUSED_1 = 0x08
    UNUSED_2 = 0x09
    COMBUSTION_CHAMBER_PRESSURE_SENSOR = 0x0A
    NOS_TANK_PRESSURE_SENSOR = 0x0B
    UNUSED_3 = 0x0C
    UNUSED_4 = 0x0D
    UNUSED_5 = 0x0E
    UNUSED_6 = 0x0F


class EngineGpio(IntEnum):
    """GPIO index of each engine input or output."""

    IGNITER_1 = 0x00
    IGNITER_2 = 0x01
    NOS_VALVE_CLOSED = 0x02
    NOS_VALVE_OPENED = 0x03
    IPA_VALVE_CLOSED = 0x04
    IPA_VALVE_OPENED = 0x05
    IPA_HEATPAD = 0x06
    NOS_HEATPAD = 0x07


# Filling station: devices.
FILLING_STATION_TEMPERATURE_SENSOR_AMOUNT = 0x08
FILLING_STATION_LOAD_CELL_AMOUNT = 0x02
FILLING_STATION_PRESSURE_SENSOR_AMOUNT = 0x02
FILLING_STATION_HEATPAD_AMOUNT = 0x02
FILLING_STATION_VALVE_AMOUNT = 0x02
FILLING_STATION_IGNITER_AMOUNT = 0x01
FILLING_STATION_BUTTON_AMOUNT = 0x01
FILLING_STATION_EXTERNAL_FLASH_AMOUNT = 0x01
FILLING_STATION_SD_CARD_AMOUNT = 0x01
FILLING_STATION_TELECOMMUNICATION_AMOUNT = 0x01

# Filling station: peripherals per device.
FILLING_STATION_PWM_PER_VALVE = 0x01
FILLING_STATION_HEATPAD_PER_VALVE = 0x01
FILLING_STATION_GPIO_PER_VALVE = 0x02
FILLING_STATION_GPIO_PER_HEATPAD = 0x01
FILLING_STATION_GPIO_PER_BUTTON = 0x01
FILLING_STATION_GPIO_PER_IGNITER = 0x01
FILLING_STATION_ADC_CHANNEL_PER_TEMPERATURE_SENSOR = 0x01
FILLING_STATION_ADC_CHANNEL_PER_PRESSURE_SENSOR = 0x01

# Filling station: peripherals.
FILLING_STATION_ADC_CHANNEL_AMOUNT = 0x10
FILLING_STATION_PWM_AMOUNT = FILLING_STATION_VALVE_AMOUNT
FILLING_STATION_GPIO_AMOUNT = (
    FILLING_STATION_VALVE_AMOUNT * FILLING_STATION_GPIO_PER_VALVE
    + FILLING_STATION_HEATPAD_AMOUNT * FILLING_STATION_GPIO_PER_HEATPAD
    + FILLING_STATION_BUTTON_AMOUNT * FILLING_STATION_GPIO_PER_BUTTON
    + FILLING_STATION_IGNITER_AMOUNT * FILLING_STATION_GPIO_PER_IGNITER
)

# Filling station: indexes.
FILLING_STATION_FILL_VALVE_INDEX = 0x00
FILLING_STATION_DUMP_VALVE_INDEX = 0x01
FILLING_STATION_FILL_VALVE_HEATPAD_INDEX = 0x00
FILLING_STATION_DUMP_VALVE_HEATPAD_INDEX = 0x01
FILLING_STATION_FILL_VALVE_PWM_INDEX = 0x00
FILLING_STATION_DUMP_VALVE_PWM_INDEX = 0x01
FILLING_STATION_TANK_LOAD_CELL_INDEX = 0x00
FILLING_STATION_COMBUSTION_CHAMBER_LOAD_CELL_INDEX = 0x01


class FillingStationThermistance(IntEnum):
    """Index of each filling-station temperature sensor."""

    FILL_VALVE = 0x00
    QUICK_CONNECT = 0x01
    NOS_VALVE = 0x02
    IPA_VALVE = 0x03
    THERMISTANCE_1 = 0x04
    THERMISTANCE_2 = 0x05
    THERMISTANCE_3 = 0x06
    THERMISTANCE_4 = 0x07


class FillingStationAdcChannel(IntEnum):
    """ADC channel wired to each filling-station sensor."""

    FILL_VALVE = 0x00
    QUICK_CONNECT = 0x01
    NOS_VALVE = 0x02
    IPA_VALVE = 0x03
    THERMISTANCE_1 = 0x04
    THERMISTANCE_2 = 0x05
    THERMISTANCE_3 = 0x06
    THERMISTANCE_4 = 0x07
    UNUSED_1 = 0x08
    UNUSED_2 = 0x09
    IPA_MANIFOLD_PRESSURE_SENSOR = 0x0A
    NOS_MANIFOLD_PRESSURE_SENSOR = 0x0B
    TANK_LOAD_CELL = 0x0E
    COMBUSTION_CHAMBER_LOAD_CELL = 0x0F


class FillingStationGpio(IntEnum):
    """GPIO index of each filling-station input or output."""

    FILL_VALVE_CLOSED = 0x00
    FILL_VALVE_OPENED = 0x01
    DUMP_VALVE_CLOSED = 0x02
    DUMP_VALVE_OPENED = 0x03
    FILL_HEATPAD = 0x04
    DUMP_HEATPAD = 0x05
    BUTTON_EMERGENCY_STOP = 0x06
    IGNITER_DUMP = 0x07


# Ground-station control.
GS_CONTROL_BUTTON_AMOUNT = 0x08
GS_CONTROL_GPIO_PER_BUTTON = 0x01
GS_CONTROL_GPIO_AMOUNT = GS_CONTROL_BUTTON_AMOUNT * GS_CONTROL_GPIO_PER_BUTTON


class GSControlButton(IntEnum):
    """Index of each button or switch on the ground-station control board."""

    ALLOW_FILL = 0x00
    ARM_VALVE = 0x01
    ARM_IGNITER = 0x02
    ALLOW_DUMP = 0x03
    EMERGENCY_STOP = 0x04
    FIRE_IGNITER = 0x05
    VALVE_START = 0x06
    UNSAFE = 0x07


class GSControlGpio(IntEnum):
    """GPIO index of each ground-station control input."""

    ALLOW_FILL = 0x00
    ARM_VALVE = 0x01
    ARM_IGNITER = 0x02
    UNUSED = 0x03
    EMERGENCY_STOP = 0x04
    FIRE_IGNITER = 0x05
    VALVE_START = 0x06
    UNSAFE = 0x07