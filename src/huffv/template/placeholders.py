"""Placeholders recognised in the verifier template."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Self

PLACEHOLDER_PATTERN = re.compile(r"\{\{([A-Za-z_][A-Za-z0-9_]*)\}\}")


class PlaceholderFamily(Enum):
    """Indexed placeholder families.

    The value of each member is `(prefix, size)`: the placeholders of the family are `{{prefix_0}}`, ..,
    `{{prefix_(size-1)}}`.
    """

    PAIRING_INPUT = ("pi", 13)
    PUBLIC_INPUT = ("in", 8)

    @property
    def prefix(self) -> str:
        return self.value[0]

    @property
    def size(self) -> int:
        return self.value[1]


NAMED_PLACEHOLDERS = ("PACKED_VKEY", "N_ICS", "IC_BYTES", "PUB_INPUT_LEN_PTR", "PUB_INPUT_PTR")


@dataclass(frozen=True)
class Placeholder:
    """A placeholder in the verifier template.

    Attributes:
        name (str): Name of a named placeholder (e.g. `PACKED_VKEY`), or prefix of an indexed family
            (e.g. `pi`).
        index (int | None): Position in the family for indexed placeholders, `None` otherwise.
    """

    name: str
    index: int | None = None

    @classmethod
    def indexed(cls, family: PlaceholderFamily, index: int) -> Self:
        """Return the placeholder at position `index` of `family`."""
        if not 0 <= index < family.size:
            msg = f"Index out of range for placeholder family {family.name}: index: {index}, size: {family.size}"
            raise ValueError(msg)
        return cls(family.prefix, index)

    @classmethod
    def parse(cls, text: str) -> Self:
        """Parse a placeholder from its bare name (`pi_3`) or its token (`{{pi_3}}`)."""
        match = PLACEHOLDER_PATTERN.fullmatch(text)
        name = match.group(1) if match else text
        for family in PlaceholderFamily:
            prefix = family.prefix + "_"
            suffix = name[len(prefix) :]
            # Only canonical indices, `pi_03` stays a distinct named placeholder
            if name.startswith(prefix) and suffix.isascii() and suffix.isdigit() and str(int(suffix)) == suffix:
                return cls(family.prefix, int(suffix))
        return cls(name)

    @property
    def key(self) -> str:
        """The bare name of the placeholder."""
        return self.name if self.index is None else f"{self.name}_{self.index}"

    @property
    def token(self) -> str:
        """The text of the placeholder in the template."""
        return "{{" + self.key + "}}"


def recognised_placeholders() -> list[Placeholder]:
    """Return all the placeholders filled by huffv, named ones first."""
    out = [Placeholder(name) for name in NAMED_PLACEHOLDERS]
    for family in PlaceholderFamily:
        out.extend(Placeholder.indexed(family, i) for i in range(family.size))
    return out
