"""layout package.

This package provides the memory layout of the verifier contract.

Modules:
    - memory_layout: Computes the offsets of the pairing inputs and public inputs from the number of IC
        points of the verification key.
"""
