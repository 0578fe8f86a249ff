[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sirius-telemetry"
version = "0.1.0"
description = "Encode and decode the status words, telemetry packets, commands and Ethernet frames shared by the engine, filling station and ground-station boards."
requires-python = ">=3.10"
dependencies = []
keywords = ["telemetry", "rocketry", "bitfield", "packet", "embedded", "ground-station"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sirius_telemetry"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
