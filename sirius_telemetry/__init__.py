"""Status words, telemetry packets, commands, SD-card buffers and Ethernet frames of the rocket boards."""

__version__ = "0.1.0"