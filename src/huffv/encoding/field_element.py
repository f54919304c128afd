"""Encoding of field elements as fixed-width big-endian hex strings."""

from huffv.errors import FieldElementOverflow, MalformedFieldElement

FIELD_ELEMENT_BYTES = 32
FIELD_ELEMENT_HEX_LENGTH = 2 * FIELD_ELEMENT_BYTES
MAX_DECIMAL_DIGITS = len(str(2 ** (8 * FIELD_ELEMENT_BYTES)))


def encode_field_element(decimal_string: str, field: str | None = None) -> str:
    """Encode a decimal string as a 32-byte big-endian lowercase hex string.

    The value is left-padded with zeros up to 64 hex characters. Values that need more than 32
    bytes are rejected, never truncated.

    Args:
        decimal_string (str): The base-10 representation of a non-negative integer.
        field (str | None): Label of the entry being encoded, reported in raised errors.

    Returns:
        The 64 characters hex encoding of `decimal_string`, without `0x` prefix.

    Raises:
        MalformedFieldElement: If `decimal_string` is not made of ASCII decimal digits only.
        FieldElementOverflow: If the value does not fit in 32 bytes.

    Example:
        >>> encode_field_element("255")
        '00000000000000000000000000000000000000000000000000000000000000ff'
    """
    if not isinstance(decimal_string, str) or not (decimal_string.isascii() and decimal_string.isdigit()):
        raise MalformedFieldElement(decimal_string, field)

    # Longer strings cannot fit in 32 bytes, reject them before parsing
    digits = decimal_string.lstrip("0") or "0"
    if len(digits) > MAX_DECIMAL_DIGITS:
        raise FieldElementOverflow(decimal_string, field)

    encoded = format(int(digits, 10), "x")
    if len(encoded) > FIELD_ELEMENT_HEX_LENGTH:
        raise FieldElementOverflow(decimal_string, field)

    return encoded.rjust(FIELD_ELEMENT_HEX_LENGTH, "0")
