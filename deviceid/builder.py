"""
Fluent builder that collects components and hands them to a formatter.
"""

from types import MappingProxyType
from typing import Dict, Mapping, Optional

from .core.components import ConstantComponent, DeviceIdComponent
from .core.errors import FormatterNotConfiguredError, InvalidArgumentError
from .formatters.base import DeviceIdFormatter
from .logging_config import get_logger

logger = get_logger(__name__)


class DeviceIdBuilder:
    """
    Collects caller-supplied components.

    No formatter is chosen by default; to_string() fails until
    use_formatter() has been called.

    Example:
        device_id = (
            DeviceIdBuilder()
            .add_value("MachineName", "build-07")
            .add_value("MacAddress", "00:1a:2b:3c:4d:5e")
            .use_formatter(HashDeviceIdFormatter(sha256, Base32ByteArrayEncoder()))
            .to_string()
        )
    """

    def __init__(self, formatter: Optional[DeviceIdFormatter] = None):
        self._components: Dict[str, DeviceIdComponent] = {}
        self._formatter = formatter

    @property
    def components(self) -> Mapping[str, DeviceIdComponent]:
        return MappingProxyType(self._components)

    @property
    def formatter(self) -> Optional[DeviceIdFormatter]:
        return self._formatter

    def add_component(self, name: str, component: DeviceIdComponent) -> "DeviceIdBuilder":
        """Add component under name, replacing any component of that name."""
        if name is None:
            raise InvalidArgumentError("name is required")
        if component is None:
            raise InvalidArgumentError("component is required")
        if name in self._components:
            logger.debug("Replacing component %s", name)
        self._components[name] = component
        return self

    def add_value(self, name: str, value: str) -> "DeviceIdBuilder":
        return self.add_component(name, ConstantComponent(value))

    def add_components(self, components: Mapping[str, DeviceIdComponent]) -> "DeviceIdBuilder":
        if components is None:
            raise InvalidArgumentError("components is required")
        for name, component in components.items():
            self.add_component(name, component)
        return self

    def use_formatter(self, formatter: DeviceIdFormatter) -> "DeviceIdBuilder":
        if formatter is None:
            raise InvalidArgumentError("formatter is required")
        self._formatter = formatter
        return self

    def to_string(self) -> str:
        if self._formatter is None:
            raise FormatterNotConfiguredError("No formatter configured; call use_formatter() first")

        logger.debug(
            "Building device id from %d components with %s",
            len(self._components),
            type(self._formatter).__name__,
        )
        return self._formatter.get_device_id(dict(self._components))

    def __str__(self) -> str:
        return self.to_string()
