"""Literal substitution of placeholders in the verifier template."""

from collections.abc import Mapping

from huffv.errors import UnresolvedPlaceholder
from huffv.template.placeholders import PLACEHOLDER_PATTERN, Placeholder


def find_placeholders(text: str) -> list[str]:
    """Return the placeholder tokens in `text`, in order of first appearance and without duplicates."""
    return list(dict.fromkeys(match.group(0) for match in PLACEHOLDER_PATTERN.finditer(text)))


def instantiate(template: str, substitutions: Mapping[Placeholder | str, str], strict: bool = False) -> str:
    """Replace every occurrence of the placeholders in `substitutions` with their value.

    Substitution is a literal replacement of the token text, there is no escaping and no templating
    logic.

    Args:
        template (str): The template text.
        substitutions (Mapping[Placeholder | str, str]): Value for each placeholder. Keys are either
            `Placeholder` instances or bare names such as `PACKED_VKEY` or `pi_3`.
        strict (bool): If `True`, raise if placeholders are left in the output. Otherwise they are left
            as they are. Defaults to `False`.

    Returns:
        The instantiated template.

    Raises:
        UnresolvedPlaceholder: If `strict` and the output still contains placeholders.
    """
    out = template
    for placeholder, value in substitutions.items():
        if not isinstance(placeholder, Placeholder):
            placeholder = Placeholder.parse(placeholder)
        out = out.replace(placeholder.token, value)

    if strict:
        leftover = find_placeholders(out)
        if leftover:
            raise UnresolvedPlaceholder(leftover)

    return out
