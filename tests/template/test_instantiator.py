import pytest

from huffv.errors import UnresolvedPlaceholder
from huffv.template.instantiator import find_placeholders, instantiate
from huffv.template.placeholders import Placeholder, PlaceholderFamily, recognised_placeholders


def test_recognised_placeholders():
    tokens = [placeholder.token for placeholder in recognised_placeholders()]

    assert tokens[:5] == ["{{PACKED_VKEY}}", "{{N_ICS}}", "{{IC_BYTES}}", "{{PUB_INPUT_LEN_PTR}}", "{{PUB_INPUT_PTR}}"]
    assert tokens[5:18] == [f"{{{{pi_{i}}}}}" for i in range(13)]
    assert tokens[18:] == [f"{{{{in_{i}}}}}" for i in range(8)]


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("pi_3", Placeholder("pi", 3)),
        ("{{pi_12}}", Placeholder("pi", 12)),
        ("in_0", Placeholder("in", 0)),
        ("PACKED_VKEY", Placeholder("PACKED_VKEY")),
        ("{{N_ICS}}", Placeholder("N_ICS")),
        ("pi_x", Placeholder("pi_x")),
        ("pi_03", Placeholder("pi_03")),
        ("in_٣", Placeholder("in_٣")),
        ("{{in_00}}", Placeholder("in_00")),
    ],
)
def test_parse_placeholder(text, expected):
    assert Placeholder.parse(text) == expected


@pytest.mark.parametrize(
    ("family", "index"),
    [(PlaceholderFamily.PAIRING_INPUT, 13), (PlaceholderFamily.PUBLIC_INPUT, 8), (PlaceholderFamily.PUBLIC_INPUT, -1)],
)
def test_indexed_placeholder_out_of_range(family, index):
    with pytest.raises(ValueError, match=r"Index out of range for placeholder family"):
        Placeholder.indexed(family, index)


def test_instantiate_replaces_every_occurrence():
    template = "a {{N_ICS}} b {{N_ICS}} c {{pi_1}} d {{pi_10}}"
    out = instantiate(template, {"N_ICS": "0x02", Placeholder("pi", 1): "0x120", "pi_10": "0x2e0"})

    assert out == "a 0x02 b 0x02 c 0x120 d 0x2e0"


def test_instantiate_all_recognised_placeholders():
    placeholders = recognised_placeholders()
    template = "\n".join(f"line {placeholder.token}" for placeholder in placeholders)
    out = instantiate(template, {placeholder: f"value_{placeholder.key}" for placeholder in placeholders})

    assert find_placeholders(out) == []
    assert "{{" not in out
    assert "line value_pi_12" in out


def test_unresolved_placeholders_are_left_as_is():
    out = instantiate("{{PACKED_VKEY}} {{in_0}} {{UNKNOWN}}", {"PACKED_VKEY": "0x00"})

    assert out == "0x00 {{in_0}} {{UNKNOWN}}"


def test_strict_instantiation_reports_unresolved_placeholders():
    with pytest.raises(UnresolvedPlaceholder, match=r"\{\{in_0\}\}, \{\{UNKNOWN\}\}") as excinfo:
        instantiate("{{PACKED_VKEY}} {{in_0}} {{UNKNOWN}} {{in_0}}", {"PACKED_VKEY": "0x00"}, strict=True)
    assert excinfo.value.placeholders == ["{{in_0}}", "{{UNKNOWN}}"]


def test_substitution_is_literal():
    out = instantiate("#define table T { {{PACKED_VKEY}} }", {"PACKED_VKEY": r"0x\1{{x"})

    assert out == r"#define table T { 0x\1{{x }"


def test_non_canonical_index_only_replaces_its_exact_token():
    out = instantiate("{{pi_03}} {{pi_3}}", {"pi_03": "X"})

    assert out == "X {{pi_3}}"
