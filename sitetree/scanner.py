"""
Build a content tree from a directory.

Every subdirectory becomes a container configured by its own ``index.html``;
every other regular file becomes a leaf configured by its own text.
"""

import logging
import os
from typing import Optional

from .config import ConfigDocument, parse_front_matter
from .files import read_text
from .resolver import INDEX_PAGE
from .tree import ContentNode, Limits, DEFAULT_LIMITS, attach, new_node, release_tree, set_config

logger = logging.getLogger('SiteTree.scanner')


def load_config(path: str, limits: Limits) -> ConfigDocument:
    """Parse ``path``, or return an empty document if it can't be read."""
    text = read_text(path)
    if text is None:
        return ConfigDocument()
    return parse_front_matter(text, limits.max_entries)


def build_tree(path: str, name: str = '', limits: Optional[Limits] = None) -> Optional[ContentNode]:
    """
    Recursively build the tree rooted at directory ``path``.

    Args:
        path: Directory to scan
        name: Name of the resulting node, empty for the root
        limits: Capacity ceilings, defaults to DEFAULT_LIMITS

    Returns:
        The container node for ``path``, or None if it can't be listed
    """
    limits = limits or DEFAULT_LIMITS

    try:
        with os.scandir(path) as it:
            entries = list(it)
    except (IOError, OSError, PermissionError) as e:
        logger.error(f"Can't open directory {path}: {e}")
        return None

    node = new_node(name, is_container=True)
    set_config(node, load_config(os.path.join(path, INDEX_PAGE), limits))

    for entry in entries:
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
            is_file = entry.is_file(follow_symlinks=False)
        except OSError as e:
            logger.error(f"Can't stat {entry.path}: {e}")
            continue

        if is_dir:
            child = build_tree(entry.path, entry.name, limits)
            if child is not None and not attach(node, child, limits):
                release_tree(child)
        elif is_file:
            if entry.name == INDEX_PAGE:
                continue
            child = new_node(entry.name)
            if attach(node, child, limits):
                set_config(child, load_config(entry.path, limits))
            else:
                release_tree(child)
        else:
            logger.debug(f"Skipping non-regular entry: {entry.path}")

    logger.debug(f"Scanned {path}: {len(node.children)} children, {len(node.special_children)} special")
    return node
