"""
Component value providers.

A component is a named source of one text value contributing to device
identity. Discovering the value (reading a MAC address, an OS build number)
is the caller's business; these classes only hand the value over.
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional

from .errors import InvalidArgumentError


class DeviceIdComponent(ABC):
    @abstractmethod
    def get_value(self) -> Optional[str]:
        ...


class ConstantComponent(DeviceIdComponent):
    """Component with a value fixed at construction."""

    def __init__(self, value: Optional[str]):
        self.value = value

    def get_value(self) -> Optional[str]:
        return self.value

    def __repr__(self) -> str:
        return f"ConstantComponent({self.value!r})"


class CallableComponent(DeviceIdComponent):
    """
    Component that calls a function each time its value is requested.

    Whatever the function raises reaches the caller unchanged.
    """

    def __init__(self, func: Callable[[], Optional[str]]):
        if func is None:
            raise InvalidArgumentError("func is required")
        self.func = func

    def get_value(self) -> Optional[str]:
        return self.func()
