"""Palette colours, carried as CSS names or hex strings."""

from __future__ import annotations

from matplotlib.colors import is_color_like, to_hex

#: A CSS colour name (``"white"``) or hex string (``"#74ffd1"``).
Colour = str


def colour_to_hex(colour: Colour) -> str:
    """Return *colour* as a lowercase ``#rrggbb`` string.

    Raises:
        ValueError: If *colour* is not a string matplotlib can parse.
    """
    if not isinstance(colour, str) or not is_color_like(colour):
        raise ValueError(f"Unrecognised colour: {colour!r}")
    return to_hex(colour)
