[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kaleidocore"
version = "0.1.0"
description = "Building blocks of a virtual Arduino-style core for keyboard firmware: clock, strings, EEPROM and scripted input"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "arduino",
    "keyboard",
    "firmware",
    "simulation",
    "virtual hardware",
    "eeprom",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
    "Topic :: Software Development :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kaleidocore"]

[tool.pytest.ini_options]
addopts = "-ra"
