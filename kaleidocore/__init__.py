"""Clock, helpers, strings, EEPROM, binary names and scripted input of a virtual keyboard-firmware core."""

__version__ = "0.1.0"