"""
Viewer and frame capture.
"""

from .capture import FrameCapture, screenshot_filename
from .viewer import KEY_BINDINGS, MeshViewer, create_figure

__all__ = ['FrameCapture', 'screenshot_filename', 'KEY_BINDINGS', 'MeshViewer', 'create_figure']
