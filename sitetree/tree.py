"""
In-memory content tree.

Nodes own their children top-down. The parent link is a weak reference so a
child never keeps its parent alive.
"""

import logging
import weakref
from typing import List, Optional

from .config import ConfigDocument, MAX_ENTRIES

SPECIAL_PREFIX = '.'
MAX_NAME_LENGTH = 255
MAX_CHILDREN = 4096
MAX_SPECIAL = 64
MAX_TEMPLATES = 128

logger = logging.getLogger('SiteTree.tree')


class Limits:
    """Capacity ceilings for a single build run."""

    def __init__(self, max_children: int = MAX_CHILDREN, max_special: int = MAX_SPECIAL,
                 max_entries: int = MAX_ENTRIES, max_templates: int = MAX_TEMPLATES):
        self.max_children = max_children
        self.max_special = max_special
        self.max_entries = max_entries
        self.max_templates = max_templates

    def __repr__(self) -> str:
        return (f"Limits(max_children={self.max_children}, max_special={self.max_special}, "
                f"max_entries={self.max_entries}, max_templates={self.max_templates})")


DEFAULT_LIMITS = Limits()


class ContentNode:
    def __init__(self, name: str, is_container: bool = False):
        self.name = name[:MAX_NAME_LENGTH]
        self.is_container = is_container
        self.config = ConfigDocument()
        self.children: List['ContentNode'] = []
        self.special_children: List['ContentNode'] = []
        self._parent = None

    @property
    def parent(self) -> Optional['ContentNode']:
        if self._parent is None:
            return None
        return self._parent()

    @property
    def is_special(self) -> bool:
        return self.name.startswith(SPECIAL_PREFIX)

    def __repr__(self) -> str:
        kind = 'container' if self.is_container else 'leaf'
        return f"ContentNode({self.name!r}, {kind})"


def new_node(name: str, is_container: bool = False) -> ContentNode:
    """Create a detached node with an empty configuration."""
    return ContentNode(name, is_container)


def attach(parent: ContentNode, child: Optional[ContentNode], limits: Optional[Limits] = None) -> bool:
    """
    Attach ``child`` to ``parent``.

    Names starting with the special prefix go to ``special_children``. When the
    matching list is full, or the child already has a parent, nothing changes
    and the caller is expected to drop the child.

    Returns:
        True if the child was attached
    """
    if child is None:
        return False

    limits = limits or DEFAULT_LIMITS

    if child.parent is not None:
        logger.error(f"Node already attached, refusing second parent: {child.name}")
        return False

    if child.is_special:
        if len(parent.special_children) >= limits.max_special:
            logger.warning(f"Too many special pages in '{parent.name}', dropping: {child.name}")
            return False
        parent.special_children.append(child)
    else:
        if len(parent.children) >= limits.max_children:
            logger.warning(f"Too many children in '{parent.name}', dropping: {child.name}")
            return False
        parent.children.append(child)

    child._parent = weakref.ref(parent)
    parent.is_container = True
    return True


def set_config(node: ContentNode, document: ConfigDocument) -> None:
    node.config = document


def release_tree(node: Optional[ContentNode]) -> int:
    """
    Release a tree post-order: children first, then the node's own document.

    Returns:
        Number of nodes released
    """
    if node is None:
        return 0

    released = 0
    for child in node.children:
        released += release_tree(child)
    for special in node.special_children:
        released += release_tree(special)

    node.children = []
    node.special_children = []
    node.config.release()
    return released + 1
