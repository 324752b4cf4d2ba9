"""Viewer configuration and JSON load/save."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path

from linstead.defaults import BASE_STYLE, ELEMENT_STYLES
from linstead.model import ElementStyle
from linstead.model.colour import Colour, colour_to_hex

_VALID_AXES = frozenset({"x", "y", "z"})

_VALID_KEYS = frozenset({
    "spin_axis", "spin_rate", "fetch_timeout", "base_url",
    "antialias", "background", "element_styles", "base_style",
})


@dataclass
class ViewerConfig:
    """Settings for a viewer session and its rendering surface.

    Attributes:
        spin_axis: Axis of the continuous rotation animation.
        spin_rate: Angular rate of the rotation in radians per second.
        fetch_timeout: Seconds to wait for a remote structure before
            reporting a load failure, or ``None`` to wait indefinitely.
        base_url: Prefix joined to relative locators by the HTTP
            structure store, or ``None`` to use locators as given.
        antialias: Whether the surface should antialias its output.
        background: Surface background colour, or ``"none"`` for a
            transparent background.
        element_styles: Per-element ball-and-stick styles.
        base_style: Style applied to every atom before the
            per-element styles.
    """

    spin_axis: str = "y"
    spin_rate: float = 0.18
    fetch_timeout: float | None = 30.0
    base_url: str | None = None
    antialias: bool = True
    background: Colour = "none"
    element_styles: dict[str, ElementStyle] = field(
        default_factory=lambda: dict(ELEMENT_STYLES)
    )
    base_style: ElementStyle = field(default_factory=lambda: BASE_STYLE)

    def __post_init__(self) -> None:
        if self.spin_axis not in _VALID_AXES:
            raise ValueError(
                f"spin_axis must be one of {sorted(_VALID_AXES)}, "
                f"got {self.spin_axis!r}"
            )
        if self.spin_rate <= 0:
            raise ValueError(f"spin_rate must be positive, got {self.spin_rate}")
        if self.fetch_timeout is not None and self.fetch_timeout <= 0:
            raise ValueError(
                f"fetch_timeout must be positive or None, got {self.fetch_timeout}"
            )
        if self.background != "none":
            colour_to_hex(self.background)

    def surface_options(self) -> dict:
        """Options passed to the surface factory."""
        return {"antialias": self.antialias, "background": self.background}

    def to_dict(self) -> dict:
        """Serialise to a JSON-compatible dictionary.

        Only fields that differ from their defaults are included.
        """
        defaults = ViewerConfig()
        d: dict = {}
        for name in ("spin_axis", "spin_rate", "fetch_timeout",
                     "base_url", "antialias", "background"):
            value = getattr(self, name)
            if value != getattr(defaults, name):
                d[name] = value
        if self.element_styles != defaults.element_styles:
            d["element_styles"] = {
                el: style.to_dict() for el, style in self.element_styles.items()
            }
        if self.base_style != defaults.base_style:
            d["base_style"] = self.base_style.to_dict()
        return d

    @classmethod
    def from_dict(cls, d: dict) -> ViewerConfig:
        """Deserialise from a dictionary.

        Raises:
            ValueError: If *d* contains unknown keys.
        """
        unknown = set(d) - _VALID_KEYS
        if unknown:
            raise ValueError(f"unknown config keys: {sorted(unknown)}")
        kwargs = {k: v for k, v in d.items()
                  if k not in ("element_styles", "base_style")}
        if "element_styles" in d:
            styles = dict(ELEMENT_STYLES)
            styles.update({
                el: ElementStyle.from_dict(sd)
                for el, sd in d["element_styles"].items()
            })
            kwargs["element_styles"] = styles
        if "base_style" in d:
            kwargs["base_style"] = ElementStyle.from_dict(d["base_style"])
        return cls(**kwargs)


def save_config(path: str | Path, config: ViewerConfig) -> None:
    """Write *config* to a JSON file with two-space indentation."""
    Path(path).write_text(json.dumps(config.to_dict(), indent=2) + "\n")


def load_config(path: str | Path) -> ViewerConfig:
    """Load a :class:`ViewerConfig` from a JSON file.

    Missing keys take their defaults.

    Raises:
        ValueError: If the file contains unknown keys.
    """
    data = json.loads(Path(path).read_text())
    return ViewerConfig.from_dict(data)
