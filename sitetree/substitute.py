"""
Serial literal substitution used to fill templates.
"""

from typing import Iterable, Optional, Tuple

Pair = Tuple[str, Optional[str]]


def substitute(template: str, pairs: Iterable[Pair]) -> str:
    """
    Apply find/replace pairs to ``template`` one after another.

    Each pair works on the result of the previous ones, so a later pair can
    match text inserted by an earlier replacement. A ``None`` replacement
    deletes every occurrence. ``template`` itself is left untouched and can be
    reused for the next call.

    Args:
        template: Template body
        pairs: Ordered ``(find, replace)`` pairs

    Returns:
        The substituted string
    """
    result = template
    for find, replace in pairs:
        if not find:
            continue
        result = result.replace(find, replace if replace is not None else '')
    return result

