import os
import logging
import time
from datetime import datetime
from typing import Optional

from .files import make_parent_dirs, write_text
from .plugins import RenderContext, render_base
from .resolver import render_url
from .scanner import build_tree
from .templates import TemplateCache
from .tree import ContentNode, Limits, release_tree


class InfoFilter(logging.Filter):
    """Filter to allow only selected INFO messages to be shown in the console."""
    def filter(self, record):
        if record.levelno >= logging.WARNING:
            return True
        allowed_messages = [
            "Site build completed in",
            "Total pages generated:",
            "Total pages skipped:",
            "Scanning content",
            "Generating pages",
        ]
        return any(msg in record.getMessage() for msg in allowed_messages)


class SiteTree:
    def __init__(self, input_dir='content', output_dir='public', templates_dir='theme', root_url='', limits=None, log_dir='logs'):
        self.input_dir = input_dir
        self.output_dir = output_dir
        self.templates_dir = templates_dir
        self.root_url = root_url or ''
        self.limits = limits or Limits()
        self.log_dir = log_dir
        self.pages_generated = 0
        self.pages_skipped = 0

        self.setup_logging()

    def setup_logging(self):
        """Set up logging configuration."""
        self.logger = logging.getLogger('SiteTree')
        self.logger.setLevel(logging.DEBUG)

        if not self.logger.handlers:
            # Console handler with filter
            console_handler = logging.StreamHandler()
            console_handler.setLevel(logging.INFO)
            console_handler.addFilter(InfoFilter())
            console_formatter = logging.Formatter('%(message)s')
            console_handler.setFormatter(console_formatter)
            self.logger.addHandler(console_handler)

        # File handler for all logs
        if self.log_dir and not any(isinstance(h, logging.FileHandler) for h in self.logger.handlers):
            try:
                os.makedirs(self.log_dir, exist_ok=True)
                log_filename = datetime.now().strftime('sitetree_%Y-%m-%d_%H-%M-%S.log')
                file_handler = logging.FileHandler(os.path.join(self.log_dir, log_filename))
            except (IOError, OSError, PermissionError) as e:
                self.logger.warning(f"Can't create log file in {self.log_dir}: {e}")
                return
            file_handler.setLevel(logging.DEBUG)
            file_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
            file_handler.setFormatter(file_formatter)
            self.logger.addHandler(file_handler)

    def load_tree(self) -> Optional[ContentNode]:
        """Scan the input directory into a content tree."""
        self.logger.info(f"Scanning content in {self.input_dir}")
        return build_tree(self.input_dir, '', self.limits)

    def output_path(self, node: ContentNode) -> str:
        return self.output_dir + render_url(node)

    def generate_page(self, node: ContentNode, context: RenderContext) -> bool:
        """Render and write a single page."""
        path = self.output_path(node)

        html = render_base(node, context)
        if html is None:
            self.logger.warning(f"Skipping page with missing template or content: {render_url(node)}")
            self.pages_skipped += 1
            return False

        if not make_parent_dirs(path) or not write_text(path, html):
            self.pages_skipped += 1
            return False

        self.logger.debug(f"Generated page: {path}")
        self.pages_generated += 1
        return True

    def generate_pages(self, node: ContentNode, context: RenderContext):
        """Generate ``node`` and, depth-first, all of its ordinary children."""
        self.generate_page(node, context)
        for child in node.children:
            self.generate_pages(child, context)

    def build(self) -> bool:
        """Main build process."""
        start_time = time.time()
        self.pages_generated = 0
        self.pages_skipped = 0

        tree = self.load_tree()
        if tree is None:
            self.logger.error(f"Can't build site, content directory unreadable: {self.input_dir}")
            return False

        templates = TemplateCache(self.templates_dir, self.limits.max_templates)
        try:
            self.logger.info(f"Generating pages into {self.output_dir}")
            self.generate_pages(tree, RenderContext(templates, self.root_url))
        finally:
            templates.clear()
            release_tree(tree)

        total_time = time.time() - start_time
        self.logger.info(f"Site build completed in {total_time:.6f} seconds.")
        self.logger.info(f"Total pages generated: {self.pages_generated}")
        self.logger.info(f"Total pages skipped: {self.pages_skipped}")
        return True
