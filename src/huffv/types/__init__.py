"""types package.

This package provides custom types.

Modules:
    - verification_key: Groth16 verification keys as exported by snarkjs.
"""
