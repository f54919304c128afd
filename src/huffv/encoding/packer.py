"""Packing of a verification key into the hex blob embedded in the verifier contract.

The packed key is the concatenation of 32-byte big-endian words:

    alpha1.x, alpha1.y,
    beta2, gamma2, delta2 (each as x.imag, x.real, y.imag, y.real),
    len(ic),
    ic[0].x, ic[0].y, ..., ic[n-1].x, ic[n-1].y

G2 coordinates are written imaginary part first, which is the order expected by the EVM pairing
precompile.
"""

from collections.abc import Sequence

from huffv.encoding.field_element import FIELD_ELEMENT_BYTES, encode_field_element
from huffv.errors import EmptyVerificationKey
from huffv.types.verification_key import JSON_KEYS, VerificationKey
from huffv.util.utility_functions import format_index

G2_ELEMENT_ORDER = ((0, 1), (0, 0), (1, 1), (1, 0))

# (attribute, row, column) of every word in the fixed size header, column is None for G1 points
HEADER_LAYOUT = (
    ("alpha1", 0, None),
    ("alpha1", 1, None),
    *(("beta2", row, column) for row, column in G2_ELEMENT_ORDER),
    *(("gamma2", row, column) for row, column in G2_ELEMENT_ORDER),
    *(("delta2", row, column) for row, column in G2_ELEMENT_ORDER),
)

HEADER_BYTES = len(HEADER_LAYOUT) * FIELD_ELEMENT_BYTES
IC_POINT_BYTES = 2 * FIELD_ELEMENT_BYTES


def packed_length(ic_count: int) -> int:
    """Return the length in bytes of a packed verification key with `ic_count` IC points."""
    return HEADER_BYTES + FIELD_ELEMENT_BYTES + ic_count * IC_POINT_BYTES


def _check_g1(point: Sequence, field: str) -> None:
    if not isinstance(point, Sequence) or isinstance(point, str) or len(point) < 2:
        raise EmptyVerificationKey(field, "not a G1 point with coordinates (x, y)")


def _check_g2(point: Sequence, field: str) -> None:
    if not isinstance(point, Sequence) or isinstance(point, str) or len(point) < 2:
        raise EmptyVerificationKey(field, "not a G2 point with rows (x, y)")
    for row in range(2):
        if not isinstance(point[row], Sequence) or isinstance(point[row], str) or len(point[row]) < 2:
            msg = "not a pair (real, imaginary)"
            raise EmptyVerificationKey(f"{field}{format_index(row)}", msg)


def check_shape(vk: VerificationKey) -> None:
    """Check that `vk` has all the coordinates needed to pack it.

    Raises:
        EmptyVerificationKey: If a point misses coordinates or the IC list is empty.
    """
    _check_g1(vk.alpha1, JSON_KEYS["alpha1"])
    for attribute in ("beta2", "gamma2", "delta2"):
        _check_g2(getattr(vk, attribute), JSON_KEYS[attribute])

    if not isinstance(vk.ic, Sequence) or len(vk.ic) == 0:
        raise EmptyVerificationKey(JSON_KEYS["ic"], "empty")
    for i, point in enumerate(vk.ic):
        _check_g1(point, f"{JSON_KEYS['ic']}{format_index(i)}")


def pack_verification_key(vk: VerificationKey) -> str:
    """Produce the packed hex representation of a verification key.

    Args:
        vk (VerificationKey): The verification key to pack.

    Returns:
        A `0x` prefixed hex string of `packed_length(len(vk.ic))` bytes.

    Raises:
        EmptyVerificationKey: If `vk` misses coordinates, see `check_shape`.
        MalformedFieldElement: If a coordinate is not a decimal integer.
        FieldElementOverflow: If a coordinate does not fit in 32 bytes.
    """
    check_shape(vk)

    words = []
    for attribute, row, column in HEADER_LAYOUT:
        point = getattr(vk, attribute)
        if column is None:
            words.append(encode_field_element(point[row], f"{JSON_KEYS[attribute]}{format_index(row)}"))
        else:
            words.append(
                encode_field_element(point[row][column], f"{JSON_KEYS[attribute]}{format_index(row, column)}")
            )

    words.append(encode_field_element(str(len(vk.ic)), "len(IC)"))
    for i, point in enumerate(vk.ic):
        words.append(encode_field_element(point[0], f"{JSON_KEYS['ic']}{format_index(i, 0)}"))
        words.append(encode_field_element(point[1], f"{JSON_KEYS['ic']}{format_index(i, 1)}"))

    return "0x" + "".join(words)
