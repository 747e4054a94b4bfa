"""
DeviceIdFormatter abstract interface.
"""

from abc import ABC, abstractmethod
from typing import Mapping

from ..core.components import DeviceIdComponent


class DeviceIdFormatter(ABC):
    """
    Turns a mapping of named components into one identifier string.

    Implementations must give the same result for equal mappings whatever
    their insertion order, and must not keep references to the mapping.
    """

    @abstractmethod
    def get_device_id(self, components: Mapping[str, DeviceIdComponent]) -> str:
        """
        Return the device identifier for components.

        Raises:
            InvalidArgumentError: If components is None
        """
        ...
