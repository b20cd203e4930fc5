"""Command line entry point."""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

import structlog

from .config import Settings, get_settings
from .logging_config import configure_logging
from .utils.random import create_prng

logger = structlog.get_logger()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polypaper",
        description="Display randomized low-poly wallpapers. "
                    "Space regenerates, Enter saves the frame, Escape quits.",
    )
    parser.add_argument("--seed", help="Seed for reproducible meshes")
    parser.add_argument("--width", type=float, help="Viewport width in pixels")
    parser.add_argument("--height", type=float, help="Viewport height in pixels")
    parser.add_argument("--lights", type=int, dest="light_count", help="Number of point lights")
    parser.add_argument("--z-offset", type=float, dest="z_offset", help="Base light height")
    parser.add_argument("--legacy-centroid", action="store_true", default=None,
                        help="Use the skewed centroid of older renders")
    parser.add_argument("--windowed", action="store_false", dest="fullscreen", default=None,
                        help="Open in a window instead of full-screen")
    parser.add_argument("--output-dir", help="Directory for saved frames")
    parser.add_argument("--output", type=Path,
                        help="Render one frame to this PNG without opening a window")
    parser.add_argument("--log-level", help="Logging level")
    parser.add_argument("--log-format", choices=["plain", "json"], help="Logging format")
    return parser


def resolve_settings(args: argparse.Namespace, base: Optional[Settings] = None) -> Settings:
    """Overlay command line values on top of environment settings."""
    base = base or get_settings()
    overrides = {
        key: value for key, value in vars(args).items()
        if key != "output" and value is not None
    }
    return Settings(**{**base.model_dump(), **overrides})


def render_to_file(settings: Settings, output: Path) -> Path:
    """Generate one mesh and write it to ``output`` headlessly."""
    from .app.viewer import MeshViewer, create_figure

    figure = create_figure(settings.width, settings.height, interactive=False)
    viewer = MeshViewer(settings, create_prng(settings.seed), figure=figure)
    output.parent.mkdir(parents=True, exist_ok=True)
    figure.savefig(output, dpi=figure.dpi, facecolor=figure.get_facecolor())
    logger.info("Frame rendered", path=str(output), triangles=len(viewer.mesh))
    return output


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = resolve_settings(args)
    configure_logging(settings.log_level, settings.log_format)

    if args.output is not None:
        render_to_file(settings, args.output)
        return 0

    from .app.viewer import MeshViewer

    rng = create_prng(settings.seed)
    logger.info("Starting viewer", width=settings.width, height=settings.height,
                seed=rng.seed)
    MeshViewer(settings, rng).show()
    return 0


if __name__ == "__main__":
    sys.exit(main())
