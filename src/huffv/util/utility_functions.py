"""Utility functions."""


def hex_literal(value: int) -> str:
    """Render a non-negative integer as a Huff hex literal with at least two digits.

    Example:
        >>> hex_literal(1)
        '0x01'
        >>> hex_literal(0x520)
        '0x520'
    """
    if value < 0:
        msg = f"Cannot render a negative value as a hex literal: value: {value}"
        raise ValueError(msg)
    return f"0x{value:02x}"


def format_index(*indices: int) -> str:
    """Format a sequence of indices as a subscript suffix.

    Example:
        >>> format_index(0, 1)
        '[0][1]'
    """
    return "".join(f"[{i}]" for i in indices)
