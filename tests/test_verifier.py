from pathlib import Path

import pytest

from huffv.encoding.packer import pack_verification_key
from huffv.errors import TooManyPublicInputs, UnresolvedPlaceholder
from huffv.template.instantiator import find_placeholders
from huffv.template.placeholders import recognised_placeholders
from huffv.verifier import generate_verifier, load_default_template, verifier_substitutions


def test_default_template_uses_every_placeholder():
    template = load_default_template()

    assert {placeholder.token for placeholder in recognised_placeholders()} == set(find_placeholders(template))


@pytest.mark.parametrize("n_public", [0, 1, 3, 8])
def test_generate_verifier(vk_factory, n_public, save_verifier_folder):
    vk = vk_factory(n_public)
    contract = generate_verifier(vk)

    assert find_placeholders(contract) == []
    assert pack_verification_key(vk) in contract
    assert f"#define constant N_ICS = 0x{n_public + 1:02x}" in contract
    assert f"#define constant IC_BYTES = 0x{(n_public + 1) * 0x40:02x}" in contract

    if save_verifier_folder is not None:
        folder = Path(save_verifier_folder)
        folder.mkdir(parents=True, exist_ok=True)
        (folder / f"Verifier_{n_public}.huff").write_text(contract)


def test_verifier_substitutions(vk_factory):
    substitutions = {placeholder.key: value for placeholder, value in verifier_substitutions(vk_factory(0)).items()}

    assert substitutions["N_ICS"] == "0x01"
    assert substitutions["IC_BYTES"] == "0x40"
    assert substitutions["PUB_INPUT_LEN_PTR"] == "0x500"
    assert substitutions["PUB_INPUT_PTR"] == "0x520"
    assert substitutions["pi_0"] == "0x100"
    assert substitutions["pi_6"] == "0x1c0"
    assert substitutions["in_1"] == "0x420"


def test_generate_verifier_with_custom_template(vk_factory):
    contract = generate_verifier(vk_factory(1), "N={{N_ICS}} PI={{pi_6}} IN={{in_7}}")

    assert contract == "N=0x02 PI=0x200 IN=0x520"


def test_generate_verifier_strictness(vk_factory):
    template = "{{N_ICS}} {{MISSING}}"

    with pytest.raises(UnresolvedPlaceholder, match=r"\{\{MISSING\}\}"):
        generate_verifier(vk_factory(1), template)
    assert generate_verifier(vk_factory(1), template, strict=False) == "0x02 {{MISSING}}"


def test_generate_verifier_too_many_public_inputs(vk_factory):
    with pytest.raises(TooManyPublicInputs):
        generate_verifier(vk_factory(9))
