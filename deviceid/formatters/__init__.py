"""
Device identifier formatters.

- HashDeviceIdFormatter: all component values hashed into one digest
- StringDeviceIdFormatter: each component value encoded separately
"""

from .base import DeviceIdFormatter
from .hash_formatter import HashDeviceIdFormatter
from .string_formatter import StringDeviceIdFormatter
from .component_encoder import (
    DeviceIdComponentEncoder,
    HashDeviceIdComponentEncoder,
    PlainDeviceIdComponentEncoder,
)

__all__ = [
    "DeviceIdFormatter",
    "HashDeviceIdFormatter",
    "StringDeviceIdFormatter",
    "DeviceIdComponentEncoder",
    "HashDeviceIdComponentEncoder",
    "PlainDeviceIdComponentEncoder",
]
