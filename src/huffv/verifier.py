"""Generation of Huff verifier contracts from verification keys."""

from importlib.resources import files

from huffv.encoding.packer import pack_verification_key
from huffv.layout.memory_layout import compute_layout
from huffv.template.instantiator import instantiate
from huffv.template.placeholders import Placeholder
from huffv.types.verification_key import VerificationKey
from huffv.util.utility_functions import hex_literal

DEFAULT_TEMPLATE = "VerifierTemplate.huff"


def load_default_template() -> str:
    """Return the verifier template shipped with huffv."""
    return (files("huffv") / "contracts" / DEFAULT_TEMPLATE).read_text(encoding="utf-8")


def verifier_substitutions(vk: VerificationKey) -> dict[Placeholder, str]:
    """Compute the value of every template placeholder for `vk`.

    The offsets are rendered as hex literals, see `hex_literal`.
    """
    packed = pack_verification_key(vk)
    layout = compute_layout(len(vk.ic))

    substitutions = {Placeholder("PACKED_VKEY"): packed}
    for placeholder, value in layout.placeholder_values().items():
        substitutions[placeholder] = hex_literal(value)
    return substitutions


def generate_verifier(vk: VerificationKey, template: str | None = None, strict: bool = True) -> str:
    """Generate the source of a verifier contract for `vk`.

    Args:
        vk (VerificationKey): The verification key.
        template (str | None): The contract template. Defaults to the template shipped with huffv.
        strict (bool): Whether to raise if the instantiated template still contains placeholders.
            Defaults to `True`.

    Returns:
        The source of the verifier contract.
    """
    if template is None:
        template = load_default_template()
    return instantiate(template, verifier_substitutions(vk), strict=strict)
