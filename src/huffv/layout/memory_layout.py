"""Memory layout of the verifier contract.

The verifier copies the packed verification key to memory and builds the input of the pairing
precompile right after the IC points. Every offset depends on the number of IC points only:

    0x00                          fixed prefix, 0xC0 bytes
    0xC0                          IC points, 0x40 bytes each
    pairing_base                  pairing inputs, 0x300 bytes
    input_ptr = pairing_base + 0x300
                                  public inputs, 0x20 bytes each
    input_ptr + 0x100             length of the public inputs
    input_ptr + 0x120             public inputs read from calldata
"""

from dataclasses import dataclass

from huffv.errors import TooManyPublicInputs
from huffv.template.placeholders import Placeholder, PlaceholderFamily

IC_POINT_SIZE = 0x40
IC_START = 0xC0
PAIRING_INPUT_SIZE = 0x300
PUB_INPUT_LEN_OFFSET = 0x100
PUB_INPUT_OFFSET = 0x120
WORD_SIZE = 0x20

# Offsets of the pairing inputs relative to pairing_base
PAIRING_INPUT_OFFSET_BASES = (0x00, 0x20, 0x40, 0x60, 0x80, 0xA0, 0xC0, 0x180, 0x1A0, 0x1C0, 0x240, 0x260, 0x280)

MAX_PUBLIC_INPUTS = PlaceholderFamily.PUBLIC_INPUT.size


@dataclass(frozen=True)
class LayoutConstants:
    """Offsets used by the verifier contract.

    Attributes:
        ic_count (int): Number of IC points in the verification key.
        ic_byte_span (int): Size in bytes of the IC points.
        pairing_base (int): Start of the pairing inputs.
        pairing_input_offsets (tuple[int, ...]): Absolute offset of each of the 13 pairing inputs.
        input_ptr (int): Start of the public inputs.
        pub_input_len_ptr (int): Location of the number of public inputs.
        pub_input_ptr (int): Location of the public inputs read from calldata.
        public_input_offsets (tuple[int, ...]): Absolute offset of each of the 8 public input slots.
    """

    ic_count: int
    ic_byte_span: int
    pairing_base: int
    pairing_input_offsets: tuple[int, ...]
    input_ptr: int
    pub_input_len_ptr: int
    pub_input_ptr: int
    public_input_offsets: tuple[int, ...]

    def placeholder_values(self) -> dict[Placeholder, int]:
        """Return the value of every offset placeholder of the template."""
        values = {
            Placeholder("N_ICS"): self.ic_count,
            Placeholder("IC_BYTES"): self.ic_byte_span,
            Placeholder("PUB_INPUT_LEN_PTR"): self.pub_input_len_ptr,
            Placeholder("PUB_INPUT_PTR"): self.pub_input_ptr,
        }
        for i, offset in enumerate(self.pairing_input_offsets):
            values[Placeholder.indexed(PlaceholderFamily.PAIRING_INPUT, i)] = offset
        for i, offset in enumerate(self.public_input_offsets):
            values[Placeholder.indexed(PlaceholderFamily.PUBLIC_INPUT, i)] = offset
        return values


def compute_layout(ic_count: int) -> LayoutConstants:
    """Compute the memory layout of a verifier for a key with `ic_count` IC points.

    Args:
        ic_count (int): Number of IC points, that is the number of public inputs plus one.

    Raises:
        ValueError: If `ic_count` is negative.
        TooManyPublicInputs: If there are more than `MAX_PUBLIC_INPUTS` public inputs.

    Example:
        >>> layout = compute_layout(1)
        >>> hex(layout.pairing_base), hex(layout.input_ptr)
        ('0x100', '0x400')
    """
    if ic_count < 0:
        msg = f"The number of IC points must be non-negative: ic_count: {ic_count}"
        raise ValueError(msg)
    if ic_count - 1 > MAX_PUBLIC_INPUTS:
        raise TooManyPublicInputs(ic_count, MAX_PUBLIC_INPUTS)

    ic_byte_span = ic_count * IC_POINT_SIZE
    pairing_base = IC_START + ic_byte_span
    input_ptr = pairing_base + PAIRING_INPUT_SIZE

    return LayoutConstants(
        ic_count=ic_count,
        ic_byte_span=ic_byte_span,
        pairing_base=pairing_base,
        pairing_input_offsets=tuple(pairing_base + base for base in PAIRING_INPUT_OFFSET_BASES),
        input_ptr=input_ptr,
        pub_input_len_ptr=input_ptr + PUB_INPUT_LEN_OFFSET,
        pub_input_ptr=input_ptr + PUB_INPUT_OFFSET,
        public_input_offsets=tuple(input_ptr + i * WORD_SIZE for i in range(MAX_PUBLIC_INPUTS)),
    )
