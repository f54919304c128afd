"""template package.

This package provides the placeholders of the verifier template and their substitution.

Modules:
    - placeholders: The placeholders recognised in the template, named (`{{PACKED_VKEY}}`) or indexed
        (`{{pi_0}}`, `{{in_0}}`).
    - instantiator: Literal substitution of placeholders in a template.
"""
