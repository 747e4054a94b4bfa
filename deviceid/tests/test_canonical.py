"""
Tests for canonical ordering and serialization of component values.
"""

from deviceid.core.canonical import (
    canonical_components,
    canonical_value_bytes,
    collect_values,
    join_values,
)
from deviceid.core.components import CallableComponent, ConstantComponent


def test_canonical_components_sorted_by_name():
    c1 = {"z": ConstantComponent("1"), "a": ConstantComponent("2"), "m": ConstantComponent("3")}
    c2 = {"a": c1["a"], "m": c1["m"], "z": c1["z"]}

    assert canonical_components(c1) == canonical_components(c2)
    assert [name for name, _ in canonical_components(c1)] == ["a", "m", "z"]


def test_values_read_in_canonical_order():
    calls = []

    def provider(name):
        def get():
            calls.append(name)
            return name.lower()
        return CallableComponent(get)

    values = collect_values({"Z": provider("Z"), "A": provider("A")})

    assert calls == ["A", "Z"]
    assert values == ["a", "z"]


def test_join_values_no_leading_or_trailing_separator():
    assert join_values(["a", "b", "c"]) == "a,b,c"
    assert join_values(["only"]) == "only"
    assert join_values([]) == ""


def test_canonical_value_bytes_utf8_without_bom():
    data = canonical_value_bytes({"k": ConstantComponent("日本語")})

    assert data == "日本語".encode("utf-8")
    assert not data.startswith(b"\xef\xbb\xbf")


def test_lone_surrogate_replaced_with_replacement_character():
    """Undecodable argv bytes arrive as lone surrogates; they hash as U+FFFD."""
    data = canonical_value_bytes({"Host": ConstantComponent("caf\udce9")})

    assert data == b"caf\xef\xbf\xbd"


def test_paired_surrogates_combined():
    data = canonical_value_bytes({"Emoji": ConstantComponent("\ud83d\ude00")})

    assert data == "\U0001F600".encode("utf-8")
