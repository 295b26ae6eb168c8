"""
Path resolution and inherited lookups over the content tree.
"""

from typing import Optional

from .tree import ContentNode

PATH_SEPARATOR = '/'
SELF_SEGMENT = '.'
INDEX_PAGE = 'index.html'


def find_root(node: ContentNode) -> ContentNode:
    while node.parent is not None:
        node = node.parent
    return node


def resolve(start: ContentNode, path: str) -> Optional[ContentNode]:
    """
    Resolve a slash separated ``path`` relative to ``start``.

    A leading slash restarts from the root. A ``.`` segment on a leaf means the
    leaf's directory. When a segment is not found among the children of a
    node, the whole ``path`` is tried again from the node's parent, so a
    reference written deep in the tree still finds a subtree higher up.

    Returns:
        The matching node, or None if nothing matched up to the root
    """
    if path.startswith(PATH_SEPARATOR):
        return resolve(find_root(start), path[1:])

    segment, _, rest = path.partition(PATH_SEPARATOR)

    if not segment:
        return start

    if segment == SELF_SEGMENT:
        if not start.is_container and start.parent is not None:
            return resolve(start.parent, rest)
        return resolve(start, rest)

    for child in start.children:
        if child.name == segment:
            return resolve(child, rest)

    for special in start.special_children:
        if special.name == segment:
            return resolve(special, rest)

    # not here, try again from the parent with the unmodified path
    if start.parent is not None:
        return resolve(start.parent, path)

    return None


def find_config(node: Optional[ContentNode], key: str, default: Optional[str] = None) -> Optional[str]:
    """Look ``key`` up on ``node``, then on each of its ancestors."""
    while node is not None:
        value = node.config.find(key)
        if value is not None:
            return value
        node = node.parent
    return default


def get_content(node: ContentNode, default: Optional[str] = None) -> Optional[str]:
    """Content is never inherited."""
    if node.config.content is not None:
        return node.config.content
    return default


def render_path(node: ContentNode) -> str:
    path = ''
    # the root name is never part of a path
    if node.parent is not None:
        path = render_path(node.parent) + node.name
    if node.is_container:
        path += PATH_SEPARATOR
    return path


def render_url(node: ContentNode) -> str:
    url = render_path(node)
    if node.is_container:
        url += INDEX_PAGE
    return url
