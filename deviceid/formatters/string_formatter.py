"""
Formatter that keeps components individually visible in the identifier.
"""

from typing import Mapping

from ..core.canonical import collect_values, join_values
from ..core.components import DeviceIdComponent
from ..core.errors import InvalidArgumentError
from .base import DeviceIdFormatter
from .component_encoder import DeviceIdComponentEncoder


class StringDeviceIdFormatter(DeviceIdFormatter):
    """
    Encodes each component value on its own and joins the results.

    With a hashing component encoder the identifier reveals which component
    changed between two devices, at the cost of a longer string.
    """

    def __init__(self, component_encoder: DeviceIdComponentEncoder, separator: str = "."):
        if component_encoder is None:
            raise InvalidArgumentError("component_encoder is required")
        if separator is None:
            raise InvalidArgumentError("separator is required")
        self._component_encoder = component_encoder
        self._separator = separator

    def get_device_id(self, components: Mapping[str, DeviceIdComponent]) -> str:
        if components is None:
            raise InvalidArgumentError("components is required")

        encoded = [self._component_encoder.encode(v) for v in collect_values(components)]
        return join_values(encoded, self._separator)
