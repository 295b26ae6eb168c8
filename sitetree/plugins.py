"""
Page plugins.

Each plugin looks up configuration and content for a node, fetches a template
and fills it with ``substitute``. A plugin returns None when something it
needs is missing, and the page is skipped.
"""

import logging
from typing import List, Optional

from .resolver import find_config, get_content, render_url, resolve
from .substitute import substitute
from .templates import TemplateCache
from .tree import ContentNode

BLOG_PAGE = 'blog'
BLOG_DATE_LENGTH = len('YYYY-mm-dd')
MENU_PAGE = '.menu.html'
DEFAULT_TITLE_DELIMITER = ' | '

logger = logging.getLogger('SiteTree.plugins')


class RenderContext:
    """State shared by the plugins during one build run."""

    def __init__(self, templates: TemplateCache, root_url: str = ''):
        self.templates = templates
        self.root_url = root_url

    def url_for(self, node: ContentNode) -> str:
        return self.root_url + render_url(node)


def post_date(node: ContentNode) -> str:
    """Blog posts are named after their date, e.g. ``2024-01-31-title.html``."""
    return node.name[:BLOG_DATE_LENGTH]


def render_blog_list(node: ContentNode, context: RenderContext) -> Optional[str]:
    """Render one list item per blog post, newest first."""
    blog = resolve(node, BLOG_PAGE)
    if blog is None:
        return None

    template = context.templates.get('blog/list.html')
    if template is None:
        return None

    items: List[str] = []
    for post in sorted(blog.children, key=lambda p: p.name, reverse=True):
        items.append(substitute(template, [
            ('{{ title }}', find_config(post, 'title')),
            ('{{ date }}', post_date(post)),
            ('{{ url }}', context.url_for(post)),
        ]))

    if not items:
        return None
    return ''.join(items)


def render_blog_post(node: ContentNode, context: RenderContext) -> Optional[str]:
    template = context.templates.get('blog/post.html')
    if template is None:
        return None

    content = get_content(node)
    if content is None:
        return None

    return substitute(template, [
        ('{{ content }}', content),
        ('{{ title }}', find_config(node, 'title')),
        ('{{ date }}', post_date(node)),
    ])


def render_page(node: ContentNode, context: RenderContext) -> Optional[str]:
    template = context.templates.get('page.html')
    if template is None:
        return None

    content = get_content(node)
    if content is None:
        return None

    return substitute(template, [
        ('{{ content }}', content),
        ('{{ title }}', find_config(node, 'title')),
    ])


def render_menu(node: ContentNode, context: RenderContext) -> Optional[str]:
    """
    Render the nearest ``.menu.html`` found from ``node``.

    Menu items are repeating groups of entries, e.g.::

        title = About
        path = about.html
        title = Source
        url = https://example.com/source

    An item links to its ``url`` if set, otherwise to the page its ``path``
    resolves to (relative to the menu), otherwise to ``#``.
    """
    menu = resolve(node, MENU_PAGE)
    if menu is None:
        return None

    template = context.templates.get('menu.html')
    if template is None:
        return None

    items: List[str] = []
    for offset in range(0, len(menu.config), 2):
        title = menu.config.find('title', offset)
        page_url = menu.config.find('url', offset)
        page_path = menu.config.find('path', offset)

        url = '#'
        if page_url is not None:
            url = page_url
        elif page_path is not None:
            target = resolve(menu, page_path)
            if target is not None:
                url = context.url_for(target)
            else:
                logger.warning(f"Menu path not found: {page_path}")

        items.append(substitute(template, [
            ('{{ title }}', title),
            ('{{ url }}', url),
        ]))

    if not items:
        return None
    return ''.join(items)


def render_home(node: ContentNode, context: RenderContext) -> Optional[str]:
    template = context.templates.get('home.html')
    if template is None:
        return None

    return substitute(template, [
        ('{{ content }}', get_content(node)),
    ])


def page_title(node: ContentNode) -> str:
    """``<title> | <site name>`` for pages, just the site name for the home page."""
    site_name = find_config(node, 'site.name') or ''
    if node.parent is None:
        return site_name

    title = find_config(node, 'title') or ''
    delimiter = find_config(node, 'site.title.delimiter', DEFAULT_TITLE_DELIMITER)
    return title + delimiter + site_name


def render_base(node: ContentNode, context: RenderContext) -> Optional[str]:
    """Render a complete HTML page for ``node``."""
    template = context.templates.get('base.html')
    if template is None:
        return None

    parent = node.parent
    if parent is None:
        content = render_home(node, context)
    elif parent.name == BLOG_PAGE:
        content = render_blog_post(node, context)
    else:
        content = render_page(node, context)

    if content is None:
        return None

    return substitute(template, [
        ('{{ content }}', content),
        ('{{ footer }}', find_config(node, 'footer')),
        ('{{ blog }}', render_blog_list(node, context)),
        ('{{ menu }}', render_menu(node, context)),
        ('{{ description }}', find_config(node, 'meta.description')),
        ('{{ title }}', page_title(node)),
        ('{{ name }}', find_config(node, 'site.name')),
        ('{{ root }}', context.root_url),
    ])
