"""Frame capture to timestamp-named PNG files."""

from datetime import datetime
from pathlib import Path
from typing import Optional, Union

import structlog

logger = structlog.get_logger()


def screenshot_filename(prefix: str, now: datetime) -> str:
    """File name for a frame saved at ``now``, e.g. output_2024-05-01_13-45-09.png."""
    return f"{prefix}_{now.strftime('%Y-%m-%d_%H-%M-%S')}.png"


class FrameCapture:
    """Writes the viewer's current figure to disk."""

    def __init__(self, output_dir: Union[str, Path] = ".", prefix: str = "output"):
        self.output_dir = Path(output_dir)
        self.prefix = prefix

    def save(self, figure, now: Optional[datetime] = None) -> Path:
        """
        Save ``figure`` as a PNG at its native pixel size.

        Args:
            figure: matplotlib Figure to capture
            now: Timestamp for the file name (defaults to the local time)

        Returns:
            Path of the written file

        Raises:
            OSError: If the directory or file cannot be written
        """
        now = now or datetime.now()
        self.output_dir.mkdir(parents=True, exist_ok=True)
        path = self.output_dir / screenshot_filename(self.prefix, now)

        logger.info("Saving frame", path=str(path))
        figure.savefig(path, dpi=figure.dpi, facecolor=figure.get_facecolor())
        logger.info("Frame saved", path=str(path))
        return path
