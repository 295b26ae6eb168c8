"""
Front matter parser for SiteTree content files.

A content file may start with a block of ``key = value`` lines enclosed by
``---`` lines. Everything after the closing ``---`` line is the page content.
Files without a leading ``---`` line are content only.
"""

import logging
from typing import List, NamedTuple, Optional

FRONT_MATTER_DELIMITER = '---\n'
KEY_VALUE_DELIMITER = ' = '
MAX_ENTRIES = 256

logger = logging.getLogger('SiteTree.config')


class ConfigEntry(NamedTuple):
    key: str
    value: str


class ConfigDocument:
    """Ordered key/value entries plus an optional content body.

    ``content`` is ``None`` when the front matter was opened but never closed,
    which is different from an empty body after a closing delimiter.
    """

    def __init__(self, text: str = '', entries: Optional[List[ConfigEntry]] = None,
                 content: Optional[str] = None):
        self.text = text
        self.entries = entries if entries is not None else []
        self.content = content

    def __len__(self) -> int:
        return len(self.entries)

    def __repr__(self) -> str:
        return f"ConfigDocument(entries={self.entries!r}, content={self.content!r})"

    def find(self, key: str, offset: int = 0, default: Optional[str] = None) -> Optional[str]:
        """
        Return the value of the first entry named ``key`` at or after ``offset``.

        Args:
            key: Entry key to look for
            offset: Index of the first entry to examine
            default: Value returned when no entry matches

        Returns:
            The matching value or ``default``
        """
        for entry in self.entries[offset:]:
            if entry.key == key:
                return entry.value
        return default

    def add(self, key: str, value: str, max_entries: int = MAX_ENTRIES) -> bool:
        """Append an entry unless the document already holds ``max_entries``."""
        if len(self.entries) >= max_entries:
            logger.warning(f"Too many key-value pairs, dropping: key = {key}")
            return False
        self.entries.append(ConfigEntry(key, value))
        return True

    def release(self) -> None:
        """Drop the source text and everything sliced from it."""
        self.text = ''
        self.entries = []
        self.content = None


def parse_front_matter(text: str, max_entries: int = MAX_ENTRIES) -> ConfigDocument:
    """
    Parse a content file into a ConfigDocument.

    Lines inside the front matter without a `` = `` separator are skipped.
    Only a ``---`` line ended by a newline closes the block; a document that
    never closes it has no content at all.

    Args:
        text: Full text of the content file
        max_entries: Maximum number of entries kept, extra entries are dropped

    Returns:
        Parsed document holding on to ``text``
    """
    document = ConfigDocument(text)

    # no front matter, everything is content
    if not text.startswith(FRONT_MATTER_DELIMITER):
        document.content = text
        return document

    position = len(FRONT_MATTER_DELIMITER)
    while position < len(text):
        if text.startswith(FRONT_MATTER_DELIMITER, position):
            document.content = text[position + len(FRONT_MATTER_DELIMITER):]
            return document

        line_end = text.find('\n', position)
        if line_end == -1:
            line_end = len(text)

        key, separator, value = text[position:line_end].partition(KEY_VALUE_DELIMITER)
        if separator:
            document.add(key, value, max_entries)
        else:
            logger.debug(f"Skipping front matter line without '{KEY_VALUE_DELIMITER}': {text[position:line_end]!r}")

        position = line_end + 1

    return document
