#!/usr/bin/env python3
"""
Command-line interface for SiteTree.
"""

import os
import sys
import argparse
from typing import Dict, List, Optional

from . import __version__
from .core import SiteTree
from .settings import SiteTreeSettings

STARTER_THEME = {
    'base.html': """<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>{{ title }}</title>
    <meta name="description" content="{{ description }}">
</head>
<body>
    <header><a href="{{ root }}/index.html">{{ name }}</a></header>
    <nav><ul>{{ menu }}</ul></nav>
    <main>{{ content }}</main>
    <aside><ul>{{ blog }}</ul></aside>
    <footer>{{ footer }}</footer>
</body>
</html>
""",
    'home.html': '<section class="home">{{ content }}</section>\n',
    'page.html': '<article><h1>{{ title }}</h1>{{ content }}</article>\n',
    'menu.html': '<li><a href="{{ url }}">{{ title }}</a></li>\n',
    'blog/list.html': '<li><a href="{{ url }}">{{ title }}</a> <time>{{ date }}</time></li>\n',
    'blog/post.html': '<article><h1>{{ title }}</h1><time>{{ date }}</time>{{ content }}</article>\n',
}

STARTER_CONTENT = {
    'index.html': """---
site.name = My Site
meta.description = A site built with SiteTree
footer = Built with SiteTree
---
<p>Welcome to your new site.</p>
""",
    '.menu.html': """---
title = Home
path = /
title = About
path = about.html
title = Blog
path = blog
---
""",
    'about.html': """---
title = About
---
<p>Edit content/about.html to tell visitors about yourself.</p>
""",
    'blog/index.html': """---
title = Blog
---
<p>All posts.</p>
""",
    'blog/2025-01-01-hello-world.html': """---
title = Hello, world
---
<p>Your first post. Posts are named after their date.</p>
""",
}


def write_starter_files(base_dir: str, files: Dict[str, str]) -> List[str]:
    """Write ``files`` below ``base_dir``, never overwriting existing files."""
    created = []
    for relative_path, text in files.items():
        path = os.path.join(base_dir, relative_path)
        if os.path.exists(path):
            print(f"File already exists: {os.path.relpath(path)}")
            continue
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(text)
        print(f"Created: {os.path.relpath(path)}")
        created.append(path)
    return created


def create_starter_structure(base_dir: Optional[str] = None, settings: Optional[dict] = None) -> None:
    """Create a starter content directory and theme."""
    base_dir = base_dir or os.getcwd()
    settings = settings or SiteTreeSettings.DEFAULT_SETTINGS

    write_starter_files(os.path.join(base_dir, settings['templates']), STARTER_THEME)
    write_starter_files(os.path.join(base_dir, settings['input']), STARTER_CONTENT)

    print("\nStarter structure created successfully!")
    print("\nNext steps:")
    print("1. Edit the configuration file (sitetree.yml)")
    print(f"2. Customize templates in the '{settings['templates']}/' directory")
    print(f"3. Add your content to '{settings['input']}/'")
    print("4. Run 'sitetree' to build your site")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='SiteTree - Static Site Generator')
    parser.add_argument('-i', '--input', type=str,
                        help='Content directory to read pages from')
    parser.add_argument('-o', '--output', type=str,
                        help='Output directory for generated site')
    parser.add_argument('-t', '--templates', type=str,
                        help='Theme directory holding the templates')
    parser.add_argument('-r', '--root-url', type=str, dest='root_url',
                        help='Prefix for generated links, e.g. https://example.com')
    parser.add_argument('--log-dir', type=str, dest='log_dir',
                        help='Directory for build log files')
    parser.add_argument('--init', type=str, choices=['yml', 'yaml', 'json'],
                        help='Create a sample configuration file and starter site')
    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    # Handle init command
    if args.init:
        settings_loader = SiteTreeSettings()
        config_path = settings_loader.create_sample_config(args.init)
        print(f"Created sample configuration file: {config_path}")

        print("\nCreating starter project structure...")
        create_starter_structure(settings_loader.config_dir)
        return

    # Load settings from configuration file
    settings_loader = SiteTreeSettings()
    settings_loader.load_settings()

    # Command line arguments take precedence
    args_dict = {k: v for k, v in vars(args).items() if v is not None}
    final_settings = settings_loader.merge_with_args(args_dict)

    output_dir = os.path.expanduser(final_settings['output'])

    try:
        generator = SiteTree(
            input_dir=final_settings['input'],
            output_dir=output_dir,
            templates_dir=final_settings['templates'],
            root_url=final_settings['root_url'],
            limits=SiteTreeSettings.limits_from(final_settings),
            log_dir=final_settings['log_dir'],
        )
        if not generator.build():
            sys.exit(1)
    except (ValueError, TypeError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
