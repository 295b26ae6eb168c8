"""
SiteTree - a small static site generator.

SiteTree reads a directory of text fragments with ``key = value`` front
matter, resolves configuration through the directory hierarchy and fills
plain HTML templates by literal placeholder substitution.
"""

__version__ = "1.0.0"

from .config import ConfigDocument, ConfigEntry, parse_front_matter
from .core import SiteTree
from .resolver import find_config, get_content, render_path, render_url, resolve
from .substitute import substitute
from .templates import TemplateCache
from .tree import ContentNode, Limits, attach, new_node, release_tree, set_config

__all__ = [
    'SiteTree',
    'ConfigDocument', 'ConfigEntry', 'parse_front_matter',
    'ContentNode', 'Limits', 'attach', 'new_node', 'release_tree', 'set_config',
    'find_config', 'get_content', 'render_path', 'render_url', 'resolve',
    'substitute', 'TemplateCache',
]
