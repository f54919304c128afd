"""huffv: generate Huff Groth16 verifier contracts from snarkjs verification keys.

The `huffv` package converts a Groth16 verification key, as exported by snarkjs, into the source
of a Huff contract that verifies proofs for that key with the EVM precompiles. The key is packed
into a table of 32-byte words embedded in the contract, and the memory offsets used by the
contract are computed from the number of public inputs.

Usage example:
    Generate a verifier for a key exported with `snarkjs zkey export verificationkey`:

    >>> from huffv.types.verification_key import load_verification_key
    >>> from huffv.verifier import generate_verifier
    >>>
    >>> vk = load_verification_key("verification_key.json")
    >>> contract = generate_verifier(vk)
"""

__version__ = "0.1.0"
