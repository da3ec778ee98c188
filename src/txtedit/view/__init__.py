"""Viewport geometry and frame rendering."""

from .renderer import Renderer
from .viewport import move_cursor, page, scroll, step

__all__ = ["Renderer", "move_cursor", "page", "scroll", "step"]
