"""Groth16 verification keys as generated by snarkjs."""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Self

from huffv.errors import EmptyVerificationKey

# Keys of the snarkjs JSON document, indexed by attribute name
JSON_KEYS = {
    "n_public": "nPublic",
    "alpha1": "vk_alpha_1",
    "beta2": "vk_beta_2",
    "gamma2": "vk_gamma_2",
    "delta2": "vk_delta_2",
    "alphabeta12": "vk_alphabeta_12",
    "ic": "IC",
}


def _freeze(value: Any) -> Any:
    """Recursively turn lists into tuples."""
    if isinstance(value, list | tuple):
        return tuple(_freeze(v) for v in value)
    return value


def _thaw(value: Any) -> Any:
    """Recursively turn tuples into lists."""
    if isinstance(value, list | tuple):
        return [_thaw(v) for v in value]
    return value


@dataclass(frozen=True)
class VerificationKey:
    """Groth16 verification key over BN254, with field elements given as decimal strings.

    Attributes:
        n_public (int): Number of public inputs of the circuit. Informational only, the length of `ic`
            is authoritative.
        alpha1 (tuple[str, ...]): The G1 point alpha, as `(x, y)` or `(x, y, z)`.
        beta2 (tuple[tuple[str, ...], ...]): The G2 point beta, as rows `(x, y)` or `(x, y, z)`, where every
            row is a pair `(real, imaginary)`.
        gamma2 (tuple[tuple[str, ...], ...]): The G2 point gamma, same layout as `beta2`.
        delta2 (tuple[tuple[str, ...], ...]): The G2 point delta, same layout as `beta2`.
        alphabeta12 (tuple): The precomputed pairing e(alpha, beta). Not used by the verifier, kept so that
            the key can be serialised back.
        ic (tuple[tuple[str, ...], ...]): The G1 points for the constant term and each public input.
    """

    n_public: int
    alpha1: tuple[str, ...]
    beta2: tuple[tuple[str, ...], ...]
    gamma2: tuple[tuple[str, ...], ...]
    delta2: tuple[tuple[str, ...], ...]
    alphabeta12: tuple
    ic: tuple[tuple[str, ...], ...]

    @classmethod
    def from_json_dict(cls, data: dict) -> Self:
        """Construct a verification key from a deserialised snarkjs `verification_key.json`.

        Args:
            data (dict): The JSON document. Keys other than the ones in `JSON_KEYS` are ignored.

        Raises:
            EmptyVerificationKey: If one of the keys in `JSON_KEYS` is absent.
        """
        if not isinstance(data, dict):
            raise EmptyVerificationKey("<root>", f"not a JSON object: {type(data).__name__}")
        for json_key in JSON_KEYS.values():
            if json_key not in data:
                raise EmptyVerificationKey(json_key)

        return cls(**{attribute: _freeze(data[json_key]) for attribute, json_key in JSON_KEYS.items()})

    def to_json_dict(self) -> dict:
        """Return the snarkjs JSON representation of the verification key."""
        return {json_key: _thaw(getattr(self, attribute)) for attribute, json_key in JSON_KEYS.items()}

    def __str__(self) -> str:
        return json.dumps(self.to_json_dict(), indent=2)


def load_verification_key(path: str | Path) -> VerificationKey:
    """Load a verification key from a snarkjs JSON file."""
    with Path(path).open(encoding="utf-8") as f:
        return VerificationKey.from_json_dict(json.load(f))
