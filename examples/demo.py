"""Demo script: render every procedural FnPcZn level with matplotlib."""

import asyncio
import logging
from pathlib import Path

from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure

from linstead import (
    LocalStructureStore,
    ViewerSelection,
    ViewerSession,
    create_mpl_surface,
)

STRUCTURES = Path(__file__).resolve().parent / "public"
OUTPUT = Path(__file__).resolve().parent


async def main():
    figure = Figure(figsize=(5.0, 5.0))
    FigureCanvasAgg(figure)
    session = ViewerSession(create_mpl_surface, LocalStructureStore(STRUCTURES))
    session.mount(figure)
    selection = ViewerSelection(session, spinning=False)
    print(f"Mode: {selection.mode.value}, entries: {[e.id for e in selection.entries]}")

    for compound_id in ("F40", "F52"):
        task = selection.select(compound_id)
        if task is not None:
            await task
        print(f"{compound_id}: {session.load_state.value}")
        path = OUTPUT / f"{compound_id}.png"
        figure.savefig(path, dpi=150)
        print(f"Rendered to {path}")

    session.unmount()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
