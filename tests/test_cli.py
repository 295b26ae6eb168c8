"""Tests for the command-line interface."""

import os
import sys
from pathlib import Path

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from sitetree import __version__
from sitetree.cli import STARTER_CONTENT, STARTER_THEME, build_parser, main, write_starter_files


class TestCli:
    """Test cases for the sitetree command."""

    def test_parser_defaults(self):
        """Test that unset options are None so config values survive."""
        args = build_parser().parse_args([])

        assert args.input is None
        assert args.output is None
        assert args.templates is None
        assert args.root_url is None
        assert args.init is None

    def test_parser_short_options(self):
        """Test the short option names."""
        args = build_parser().parse_args(['-i', 'in', '-o', 'out', '-t', 'tpl', '-r', 'https://example.com'])

        assert args.input == 'in'
        assert args.output == 'out'
        assert args.templates == 'tpl'
        assert args.root_url == 'https://example.com'

    def test_version(self, capsys):
        """Test --version."""
        with pytest.raises(SystemExit) as exc_info:
            main(['--version'])

        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_build(self, content_dir, theme_dir, output_dir, temp_dir, monkeypatch):
        """Test building a site from command line arguments."""
        monkeypatch.chdir(temp_dir)

        main(['-i', content_dir, '-o', output_dir, '-t', theme_dir, '--log-dir', os.path.join(temp_dir, 'logs')])

        assert os.path.isfile(os.path.join(output_dir, 'index.html'))
        assert os.path.isfile(os.path.join(output_dir, 'blog', '2024-03-04-again.html'))

    def test_build_failure_exits(self, temp_dir, monkeypatch):
        """Test that a failed build exits with status 1."""
        monkeypatch.chdir(temp_dir)

        with pytest.raises(SystemExit) as exc_info:
            main(['-i', os.path.join(temp_dir, 'missing'), '--log-dir', os.path.join(temp_dir, 'logs')])

        assert exc_info.value.code == 1

    def test_init_then_build(self, temp_dir, monkeypatch):
        """Test that the starter project builds out of the box."""
        monkeypatch.chdir(temp_dir)

        main(['--init', 'yml'])

        assert os.path.isfile(os.path.join(temp_dir, 'sitetree.yml'))
        for relative_path in STARTER_THEME:
            assert os.path.isfile(os.path.join(temp_dir, 'theme', relative_path))
        for relative_path in STARTER_CONTENT:
            assert os.path.isfile(os.path.join(temp_dir, 'content', relative_path))

        main([])

        home = Path(temp_dir, 'public', 'index.html').read_text(encoding='utf-8')
        post = Path(temp_dir, 'public', 'blog', '2025-01-01-hello-world.html').read_text(encoding='utf-8')
        assert '<title>My Site</title>' in home
        assert '<a href="/about.html">About</a>' in home
        assert '<a href="/blog/index.html">Blog</a>' in home
        assert '<title>Hello, world | My Site</title>' in post
        assert os.path.isdir(os.path.join(temp_dir, 'logs'))

    def test_write_starter_files_keeps_existing(self, temp_dir):
        """Test that existing files are never overwritten."""
        existing = Path(temp_dir, 'page.html')
        existing.write_text('mine')

        created = write_starter_files(temp_dir, {'page.html': 'starter', 'new/other.html': 'starter'})

        assert existing.read_text() == 'mine'
        assert created == [os.path.join(temp_dir, 'new/other.html')]
