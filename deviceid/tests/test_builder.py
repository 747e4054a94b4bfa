"""
Tests for DeviceIdBuilder.
"""

import hashlib

import pytest

from deviceid.builder import DeviceIdBuilder
from deviceid.core import (
    ConstantComponent,
    FormatterNotConfiguredError,
    HexByteArrayEncoder,
    InvalidArgumentError,
    md5,
)
from deviceid.formatters import HashDeviceIdFormatter


def md5_hex():
    return HashDeviceIdFormatter(md5, HexByteArrayEncoder())


def test_builder_matches_formatter():
    device_id = (
        DeviceIdBuilder()
        .add_value("CPU", "ABC123")
        .add_component("BIOS", ConstantComponent("XYZ789"))
        .use_formatter(md5_hex())
        .to_string()
    )

    assert device_id == hashlib.md5(b"XYZ789,ABC123").hexdigest()


def test_no_default_formatter():
    builder = DeviceIdBuilder().add_value("CPU", "ABC123")

    with pytest.raises(FormatterNotConfiguredError):
        builder.to_string()


def test_later_component_replaces_earlier():
    builder = DeviceIdBuilder(md5_hex()).add_value("CPU", "old").add_value("CPU", "new")

    assert builder.components["CPU"].get_value() == "new"
    assert builder.to_string() == hashlib.md5(b"new").hexdigest()


def test_add_components_mapping():
    builder = DeviceIdBuilder(md5_hex()).add_components(
        {"B": ConstantComponent("2"), "A": ConstantComponent("1")}
    )

    assert sorted(builder.components) == ["A", "B"]
    assert str(builder) == hashlib.md5(b"1,2").hexdigest()


def test_components_view_is_read_only():
    builder = DeviceIdBuilder().add_value("CPU", "x")

    with pytest.raises(TypeError):
        builder.components["GPU"] = ConstantComponent("y")


def test_builder_rejects_none():
    builder = DeviceIdBuilder()

    with pytest.raises(InvalidArgumentError):
        builder.add_component(None, ConstantComponent("x"))
    with pytest.raises(InvalidArgumentError):
        builder.add_component("CPU", None)
    with pytest.raises(InvalidArgumentError):
        builder.add_components(None)
    with pytest.raises(InvalidArgumentError):
        builder.use_formatter(None)


def test_empty_builder_hashes_empty_string():
    assert DeviceIdBuilder(md5_hex()).to_string() == "d41d8cd98f00b204e9800998ecf8427e"
