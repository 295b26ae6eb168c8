"""
Filesystem helpers. Failures are logged with the OS error text and reported
through the return value.
"""

import logging
import os
from typing import Optional

logger = logging.getLogger('SiteTree.files')


def read_text(path: str) -> Optional[str]:
    """Read a whole file, or return None if it can't be read."""
    try:
        with open(path, 'r', encoding='utf-8', newline='') as f:
            return f.read()
    except (IOError, OSError, PermissionError) as e:
        logger.error(f"Can't read file {path}: {e}")
        return None
    except UnicodeDecodeError as e:
        logger.error(f"File is not valid UTF-8 {path}: {e}")
        return None


def write_text(path: str, text: str) -> bool:
    try:
        with open(path, 'w', encoding='utf-8', newline='') as f:
            f.write(text)
        logger.debug(f"Wrote file: {path}")
        return True
    except (IOError, OSError, PermissionError) as e:
        logger.error(f"Failed to write file {path}: {e}")
        return False


def make_parent_dirs(path: str) -> bool:
    """Create every missing directory leading up to ``path``."""
    parent = os.path.dirname(path)
    if not parent:
        return True
    try:
        os.makedirs(parent, exist_ok=True)
        return True
    except (IOError, OSError, PermissionError) as e:
        logger.error(f"Can't create directory {parent}: {e}")
        return False
