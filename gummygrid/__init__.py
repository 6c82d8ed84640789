"""Deterministic grid avatars rendered as SVG."""

from gummygrid.engine import GummyGrid, generate

__version__ = "0.1.0"

__all__ = ["GummyGrid", "generate", "__version__"]
