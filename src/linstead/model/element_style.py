from __future__ import annotations

from dataclasses import dataclass

from linstead.model.colour import Colour, colour_to_hex


@dataclass(frozen=True)
class ElementStyle:
    """Ball-and-stick style for one element.

    Attributes:
        colour: Fill colour as a CSS name or hex string.
        sphere_radius: Ball radius in angstroms, or ``None`` to draw
            no ball.
        stick_radius: Stick radius in angstroms, or ``None`` to draw
            no sticks.

    Raises:
        ValueError: If both radii are ``None`` or either is not
            positive.
    """

    colour: Colour
    sphere_radius: float | None = None
    stick_radius: float | None = None

    def __post_init__(self) -> None:
        if self.sphere_radius is None and self.stick_radius is None:
            raise ValueError(
                "at least one of sphere_radius or stick_radius must be set"
            )
        for name in ("sphere_radius", "stick_radius"):
            value = getattr(self, name)
            if value is not None and value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")
        colour_to_hex(self.colour)

    def to_engine_style(self) -> dict:
        """Build the style mapping passed to ``RenderSurface.set_style``.

        The mapping has a ``"sphere"`` and/or ``"stick"`` key, each
        holding ``radius`` and a hex ``color``.
        """
        hex_colour = colour_to_hex(self.colour)
        style: dict = {}
        if self.sphere_radius is not None:
            style["sphere"] = {"radius": self.sphere_radius, "color": hex_colour}
        if self.stick_radius is not None:
            style["stick"] = {"radius": self.stick_radius, "color": hex_colour}
        return style

    def to_dict(self) -> dict:
        """Serialise to a JSON-compatible dictionary.

        Colours are written as ``#rrggbb`` strings and unset radii
        are omitted.
        """
        d: dict = {"colour": colour_to_hex(self.colour)}
        if self.sphere_radius is not None:
            d["sphere_radius"] = self.sphere_radius
        if self.stick_radius is not None:
            d["stick_radius"] = self.stick_radius
        return d

    @classmethod
    def from_dict(cls, d: dict) -> ElementStyle:
        """Deserialise from a dictionary.

        Accepts any colour name or hex string matplotlib recognises.
        """
        return cls(
            colour=d["colour"],
            sphere_radius=d.get("sphere_radius"),
            stick_radius=d.get("stick_radius"),
        )
