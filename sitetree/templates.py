"""
Template body cache for a single build run.
"""

import logging
import os
from typing import Dict, Optional

from .files import read_text
from .tree import MAX_TEMPLATES

logger = logging.getLogger('SiteTree.templates')


class TemplateCache:
    """
    Memoize template bodies by path relative to ``templates_dir``.

    Missing templates are remembered too, so a failing path is read only once
    per run. Once ``max_templates`` paths are known, lookups of new paths fail
    without evicting anything.
    """

    def __init__(self, templates_dir: str, max_templates: int = MAX_TEMPLATES):
        self.templates_dir = templates_dir
        self.max_templates = max_templates
        self._templates: Dict[str, Optional[str]] = {}

    def __len__(self) -> int:
        return len(self._templates)

    def __contains__(self, relative_path: str) -> bool:
        return relative_path in self._templates

    def get(self, relative_path: str) -> Optional[str]:
        if relative_path in self._templates:
            return self._templates[relative_path]

        if len(self._templates) >= self.max_templates:
            logger.warning(f"Too many templates, not loading: {relative_path}")
            return None

        body = read_text(os.path.join(self.templates_dir, relative_path))
        if body is None:
            logger.warning(f"Template not found: {relative_path}")
        else:
            logger.debug(f"Loaded template: {relative_path}")

        self._templates[relative_path] = body
        return body

    def clear(self) -> None:
        self._templates.clear()
