"""
Canonical ordering and serialization of component values.

All formatters go through these functions so that the bytes fed to a hash
engine never depend on the caller's mapping order.
"""

from typing import Iterable, List, Mapping, Optional, Tuple

from .components import DeviceIdComponent

VALUE_SEPARATOR = ","


def canonical_components(
    components: Mapping[str, DeviceIdComponent],
) -> List[Tuple[str, DeviceIdComponent]]:
    """
    Return (name, component) pairs sorted by name.

    Ordering is ordinal on code points (equal to UTF-8 byte order), so
    "CPU" and "cpu" are distinct and "CPU" sorts first. No case folding.
    """
    return sorted(components.items(), key=lambda item: item[0])


def collect_values(components: Mapping[str, DeviceIdComponent]) -> List[str]:
    """
    Read every component value in canonical order.

    Errors from get_value() propagate unchanged. A None value is read as
    the empty string.
    """
    return [_text(component.get_value()) for _, component in canonical_components(components)]


def join_values(values: Iterable[str], separator: str = VALUE_SEPARATOR) -> str:
    """
    Join values with the separator.

    Values are not escaped: {"a": "1,2"} and {"a": "1", "b": "2"} join to
    the same string.
    """
    return separator.join(values)


def canonical_value_bytes(components: Mapping[str, DeviceIdComponent]) -> bytes:
    """
    UTF-8 bytes (no BOM) of the comma-joined canonical component values.
    """
    return utf8_bytes(join_values(collect_values(components)))


def utf8_bytes(text: str) -> bytes:
    """
    UTF-8 bytes of text, with each lone surrogate replaced by U+FFFD.

    Lone surrogates reach us from undecodable argv or file names
    (surrogateescape); paired surrogates are combined into one code point.
    """
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError:
        return text.encode("utf-16", "surrogatepass").decode("utf-16", "replace").encode("utf-8")


def _text(value: Optional[str]) -> str:
    return "" if value is None else value
