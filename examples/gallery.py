"""Render a gallery image of every procedural FnPcZn level."""

from pathlib import Path

from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure

from linstead import FluorinationLevel, ViewerConfig
from linstead.rendering import MplSurface
from linstead.resolver import generated_payload

OUTPUT = Path(__file__).resolve().parent


def render_level(level: FluorinationLevel, path: Path) -> None:
    """Render one procedural level, tilted so the substituents show."""
    config = ViewerConfig()
    figure = Figure(figsize=(4.0, 4.0))
    FigureCanvasAgg(figure)
    surface = MplSurface(figure, background="white")
    payload = generated_payload(level)
    surface.add_model(payload.data, payload.format)
    surface.set_style({}, config.base_style.to_engine_style())
    for element, style in config.element_styles.items():
        surface.set_style({"elem": element}, style.to_engine_style())
    surface.view.rotate("x", -0.6)
    surface.zoom_to()
    surface.render()
    figure.savefig(path, dpi=120)
    surface.dispose()


def generate_gallery() -> None:
    for level in FluorinationLevel:
        render_level(level, OUTPUT / f"level_{level.name.lower()}.svg")


if __name__ == "__main__":
    generate_gallery()
