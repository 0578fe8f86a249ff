# sirius-telemetry

Python definitions of the binary formats shared by the engine, filling
station and ground-station control boards: the packed status and error
words, the telemetry packets, the board commands, the engine's SD-card
buffer and the Ethernet sync and UDP frames. Every layout is
little-endian, with fields aligned and padded the way a C compiler lays
out the matching structures.

## Installation

```
pip install .
```

Install with the test extra to run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `sirius_telemetry.bitfields` | `BitField` and `BitFieldStatus`, the base for every packed status word |
| `sirius_telemetry.status` | status and error words of each device (`ValveStatus`, `EngineStatus`, `StorageErrorStatus`, ...) |
| `sirius_telemetry.drivers` | status and error words of the ADC, GPIO, PWM, SPI, UART and USB drivers |
| `sirius_telemetry.states` | state enums (`EngineState`, `ValveState`, ...), `BoardId` and `CRC_GENERATING_POLYNOMIAL` |
| `sirius_telemetry.sensors` | device counts, ADC channel and GPIO assignments of each board |
| `sirius_telemetry.telemetry` | `TelemetryCode`, `TelemetryHeader` and the `Packet` base class |
| `sirius_telemetry.sensor_packets` | per-device telemetry packets |
| `sirius_telemetry.commands` | `BoardCommand`, `GSCommand`, `CommandResponse`, `CommandHeader` and `CommandCode` |
| `sirius_telemetry.status_packets` | board status and telemetry packets, `EngineSDBufferFooter`, `EngineSDCardBuffer` |
| `sirius_telemetry.ethernet` | `SyncPacket`, `SyncFlags`, `UDPDeviceCtrlFlags`, `UDPPacketHeader` |

## Status words

A status word is an unsigned integer split into named bit fields, most
of them 16 bits wide. Build one from a raw value or from field names,
read and write the fields as attributes, and convert it to and from
bytes:

```python
from sirius_telemetry.status import ValveStatus
from sirius_telemetry.states import ValveState

status = ValveStatus(0, state=ValveState.OPENED, position_opened_pct=100)
status.is_idle = 1

raw = status.to_bytes()          # two bytes, little-endian
again = ValveStatus.from_bytes(raw)
assert again.state == ValveState.OPENED
print(again.to_dict())
```

Reserved bits are named with a leading underscore: they are left out of
`to_dict()` and cannot be set by keyword. A field value that does not
fit in its width raises `ValueError`; `from_bytes()` raises `ValueError`
when the data is not exactly `SIZE` bytes long.

`TelemetryHeader` and `CommandHeader` are 32-bit words built the same
way; `SyncFlags` and `UDPDeviceCtrlFlags` are single bytes.

## Packets

Packets subclass `Packet`. `size()` gives the length of the encoded
packet, `to_bytes()` encodes it with zeroed padding and `from_bytes()`
decodes it; decoding raises `ValueError` when the data does not have
the packet's length.

```python
from sirius_telemetry.sensor_packets import PressureSensorPacket

data = bytes(PressureSensorPacket.size())
packet = PressureSensorPacket.from_bytes(data)
assert packet.to_bytes() == data
```

`EngineSDCardBuffer` holds a 64 KiB buffer made of two halves, each a
data block followed by an `EngineSDBufferFooter`. Its `values`,
`values32`, `blocks` and `footers` properties read the same bytes in
different shapes, and `fill(index, data, footer)` writes one half.

## Ethernet frames

```python
from sirius_telemetry.ethernet import UDPPacketHeader

header = UDPPacketHeader.from_bytes(bytes(12))
assert len(header.to_bytes()) == 12
```

The UDP header is 12 bytes long. The payload that follows it must have
a length that is a multiple of 4 bytes, and a 4-byte CRC comes after
the payload. `SyncPacket` is 4 bytes long.

## What this package does not do

It only describes and converts the formats. It does not compute or
check CRCs (it gives the generating polynomial,
`CRC_GENERATING_POLYNOMIAL`, but no checksum routine), it does not open
serial ports or sockets, and it has no command-line program.