"""
Grouped, tabbed code blocks for markdown-it.
"""

from .exceptions import GroupStructureError
from .options import CodeCollectionOptions
from .plugin import code_collection_plugin, create_md_parser, render_markdown
from .renderer import GroupedFenceRenderer
from .rewriter import GroupMarkerRewriter

__all__ = [
    "CodeCollectionOptions",
    "GroupMarkerRewriter",
    "GroupStructureError",
    "GroupedFenceRenderer",
    "code_collection_plugin",
    "create_md_parser",
    "render_markdown",
]
