"""Business process renderers.

``Renderer`` holds the per-request rendering context; the concrete
classes turn it into HTML fragments.
"""

from businessprocess.renderer.base import Renderer
from businessprocess.renderer.breadcrumb import Breadcrumb
from businessprocess.renderer.tiles import TileRenderer
from businessprocess.renderer.tree import TreeRenderer

__all__ = ["Breadcrumb", "Renderer", "TileRenderer", "TreeRenderer"]
