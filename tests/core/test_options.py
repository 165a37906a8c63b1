import pytest

from unitshift.core.errors import InvalidFamilyError, InvalidOptionKeyError, UnknownScaleError
from unitshift.core.options import option_key, option_label, parse_option_key, variant_unit_options


def test_variant_unit_options_lists_fixed_entries_in_display_order() -> None:
    assert variant_unit_options() == [
        ("Weight (g)", "weight_1"),
        ("Weight (kg)", "weight_1000"),
        ("Weight (T)", "weight_1000000"),
        ("Weight (oz)", "weight_28.34952"),
        ("Weight (lb)", "weight_453.6"),
        ("Volume (mL)", "volume_0.001"),
        ("Volume (L)", "volume_1"),
        ("Volume (kL)", "volume_1000"),
        ("Items", "items"),
    ]


def test_variant_unit_options_returns_a_fresh_list() -> None:
    options = variant_unit_options()
    options.pop()

    assert len(variant_unit_options()) == 9
    assert variant_unit_options()[-1] == ("Items", "items")
    assert list(variant_unit_options()[-1]) == ["Items", "items"]


def test_every_option_key_decodes_to_a_table_scale() -> None:
    for _label, key in variant_unit_options()[:-1]:
        family, scale = parse_option_key(key)
        assert option_key(family, scale) == key


def test_parse_option_key_decodes_items() -> None:
    assert parse_option_key("items") == ("items", None)


def test_parse_option_key_decodes_family_and_scale() -> None:
    assert parse_option_key("weight_28.34952") == ("weight", 28.34952)
    assert parse_option_key("volume_0.001") == ("volume", 0.001)


@pytest.mark.parametrize(
    "key",
    ["", "weight", "weight_", "_1000", "weight_kg", "weight_1_000", "weight_1e3", "weight_1000.0", "volume_inf"],
)
def test_parse_option_key_rejects_malformed_keys(key) -> None:
    with pytest.raises(InvalidOptionKeyError):
        parse_option_key(key)


def test_parse_option_key_rejects_unknown_family() -> None:
    with pytest.raises(InvalidFamilyError):
        parse_option_key("length_1")


def test_parse_option_key_rejects_scale_outside_table() -> None:
    with pytest.raises(UnknownScaleError):
        parse_option_key("weight_28.35")


def test_option_key_rejects_scale_outside_table() -> None:
    with pytest.raises(UnknownScaleError):
        option_key("volume", 4.54609)


def test_option_label_capitalizes_family() -> None:
    assert option_label("volume", "kL") == "Volume (kL)"
