"""
Matplotlib viewer for generated meshes.

Draws the mesh as filled 2D triangles on a black background and maps keys
to actions:

- space: regenerate the mesh
- enter: save the current frame, then acknowledge (by default a new mesh)
- escape: close the window
"""

from pathlib import Path
from typing import Callable, Optional

import matplotlib.pyplot as plt
import structlog
from matplotlib.collections import PolyCollection
from matplotlib.figure import Figure

from ..config import Settings
from ..core.alea_prng import RandomSource
from ..core.mesh import Mesh, generate_mesh
from .capture import FrameCapture

logger = structlog.get_logger()

REGENERATE = "regenerate"
SAVE = "save"
QUIT = "quit"

KEY_BINDINGS = {
    " ": REGENERATE,
    "enter": SAVE,
    "escape": QUIT,
}

DPI = 100


def create_figure(width: float, height: float, interactive: bool = True) -> Figure:
    """
    Create a borderless black figure whose pixel size matches the viewport.

    Interactive figures are managed by pyplot so they can be shown; headless
    ones are plain Figure objects rendered through Agg on save.
    """
    figsize = (width / DPI, height / DPI)
    if interactive:
        fig = plt.figure(figsize=figsize, dpi=DPI, facecolor="black")
    else:
        fig = Figure(figsize=figsize, dpi=DPI, facecolor="black")

    ax = fig.add_axes([0, 0, 1, 1])
    ax.set_facecolor("black")
    ax.set_xlim(0, width)
    ax.set_ylim(height, 0)  # screen coordinates, y grows downwards
    ax.set_axis_off()
    return fig


class MeshViewer:
    """Owns the current mesh and redraws it after every regeneration."""

    def __init__(
        self,
        settings: Settings,
        rng: RandomSource,
        figure: Optional[Figure] = None,
        capture: Optional[FrameCapture] = None,
        on_saved: Optional[Callable[[Path], None]] = None,
    ):
        """
        Initialize the viewer and generate the first mesh.

        Args:
            settings: Viewport, generation and screenshot settings
            rng: Random source used for every regeneration
            figure: Figure to draw into; an interactive one is created if omitted
            capture: Frame writer used by the save action
            on_saved: Called with the written path after a successful save;
                defaults to regenerating the mesh as a visible acknowledgment
        """
        self.settings = settings
        self.rng = rng
        self.config = settings.mesh_config()
        self.figure = figure if figure is not None else create_figure(settings.width, settings.height)
        self.capture = capture or FrameCapture(settings.output_dir, settings.screenshot_prefix)
        self.on_saved = on_saved if on_saved is not None else self._acknowledge_save
        self.mesh: Optional[Mesh] = None
        self.closed = False
        self._collection = None
        self._actions = {
            REGENERATE: self.regenerate,
            SAVE: self.save,
            QUIT: self.quit,
        }

        self.figure.canvas.mpl_connect("key_press_event", self._on_key_press)
        self.regenerate()

    @property
    def axes(self):
        return self.figure.axes[0]

    def regenerate(self) -> Mesh:
        """Replace the current mesh with a freshly generated one and redraw."""
        mesh = generate_mesh(self.settings.width, self.settings.height, self.config, self.rng)
        self.mesh = mesh
        self.draw()
        return mesh

    def draw(self) -> None:
        """Draw the current mesh, replacing whatever was drawn before."""
        if self._collection is not None:
            self._collection.remove()
        self._collection = PolyCollection(
            self.mesh.projected(),
            facecolors=self.mesh.rgba(),
            edgecolors="face",
            linewidths=0.5,
        )
        self.axes.add_collection(self._collection)
        self.figure.canvas.draw_idle()

    def save(self) -> Optional[Path]:
        """Capture the current frame; returns the written path, or None on failure."""
        try:
            path = self.capture.save(self.figure)
        except OSError:
            logger.exception("Failed to save frame", output_dir=str(self.capture.output_dir))
            return None
        self.on_saved(path)
        return path

    def quit(self) -> None:
        """Close the window."""
        logger.info("Closing viewer")
        self.closed = True
        plt.close(self.figure)

    def handle_key(self, key: Optional[str]) -> Optional[str]:
        """
        Run the action bound to ``key``.

        Returns:
            Name of the action run, or None for unbound keys
        """
        action = KEY_BINDINGS.get(key)
        if action is None:
            return None
        logger.debug("Key action", key=key, action=action)
        self._actions[action]()
        return action

    def show(self) -> None:
        """Open the window (full-screen if configured) and block until closed."""
        if self.settings.fullscreen:
            manager = self.figure.canvas.manager
            if manager is not None:
                manager.full_screen_toggle()
        plt.show()

    def _on_key_press(self, event) -> None:
        self.handle_key(event.key)

    def _acknowledge_save(self, path: Path) -> None:
        self.regenerate()
