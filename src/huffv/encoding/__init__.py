"""encoding package.

This package provides modules for encoding verification keys as hex strings.

Modules:
    - field_element: Encodes a decimal field element as a 32-byte big-endian hex string.
    - packer: Packs a whole verification key into the hex blob embedded in the verifier.

Usage example:
    >>> from huffv.encoding.field_element import encode_field_element
    >>>
    >>> encode_field_element("1")
    '0000000000000000000000000000000000000000000000000000000000000001'
"""
