"""Test configuration and fixtures for SiteTree tests."""

import pytest
import tempfile
import shutil
import os
import sys
import logging
from pathlib import Path

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from sitetree.tree import new_node, attach


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    temp_dir = tempfile.mkdtemp()
    yield temp_dir
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def content_dir(temp_dir):
    """Create a sample content directory."""
    content_dir = Path(temp_dir) / 'content'
    blog_dir = content_dir / 'blog'
    blog_dir.mkdir(parents=True)

    (content_dir / 'index.html').write_text("""---
site.name = Example
meta.description = An example site
footer = Example footer
---
<p>Welcome home</p>""")

    (content_dir / '.menu.html').write_text("""---
title = Source
url = https://example.com/src
title = Home
path = /
title = About
path = about.html
---
""")

    (content_dir / 'about.html').write_text("""---
title = About
---
<p>About us</p>""")

    # front matter never closed, so there is no content to render
    (content_dir / 'draft.html').write_text("""---
title = Draft
""")

    (blog_dir / 'index.html').write_text("""---
title = Blog
---
<p>All posts</p>""")

    (blog_dir / '2024-01-02-hello.html').write_text("""---
title = Hello
---
<p>First post</p>""")

    (blog_dir / '2024-03-04-again.html').write_text("""---
title = Again
---
<p>Second post</p>""")

    return str(content_dir)


@pytest.fixture
def theme_dir(temp_dir):
    """Create a theme directory with every template the plugins use."""
    theme_dir = Path(temp_dir) / 'theme'
    (theme_dir / 'blog').mkdir(parents=True)

    (theme_dir / 'base.html').write_text(
        '<title>{{ title }}</title>'
        '<meta content="{{ description }}">'
        '<nav>{{ menu }}</nav>'
        '<main>{{ content }}</main>'
        '<aside>{{ blog }}</aside>'
        '<footer>{{ footer }}</footer>'
        '<a href="{{ root }}/index.html">{{ name }}</a>'
    )
    (theme_dir / 'home.html').write_text('<section>{{ content }}</section>')
    (theme_dir / 'page.html').write_text('<h1>{{ title }}</h1>{{ content }}')
    (theme_dir / 'menu.html').write_text('<li><a href="{{ url }}">{{ title }}</a></li>')
    (theme_dir / 'blog' / 'list.html').write_text('<li><a href="{{ url }}">{{ title }}</a> {{ date }}</li>')
    (theme_dir / 'blog' / 'post.html').write_text('<h1>{{ title }}</h1><time>{{ date }}</time>{{ content }}')

    return str(theme_dir)


@pytest.fixture
def output_dir(temp_dir):
    """Output directory path, not created yet."""
    return str(Path(temp_dir) / 'public')


@pytest.fixture
def sample_tree():
    """
    Build a small tree in memory::

        root/
            child1
            child2/
                .child3

    Returns a dict of nodes, which also keeps the root alive.
    """
    root = new_node('root')
    child1 = new_node('child1')
    child2 = new_node('child2')
    child3 = new_node('.child3')
    attach(root, child1)
    attach(root, child2)
    attach(child2, child3)
    return {'root': root, 'child1': child1, 'child2': child2, 'child3': child3}


@pytest.fixture(autouse=True)
def reset_sitetree_logger():
    """Remove handlers a SiteTree instance attached during a test."""
    logger = logging.getLogger('SiteTree')
    handlers = list(logger.handlers)
    level = logger.level
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)
