"""Color & style helpers.

Decisions:
- Tags are one-character cells painted with a bright background.
- On by default, piped output included, so the tags keep their colors.
- Honors NO_COLOR for complete disable.
- With colors off a tag falls back to a letter so the cell stays readable.
"""
from __future__ import annotations
import os
from typing import Mapping

def _color_enabled(environ: Mapping[str, str]) -> bool:
    """Colors stay on unless NO_COLOR is set (to any value)."""
    return environ.get("NO_COLOR") is None

_ENABLE = _color_enabled(os.environ)

def _code(part: str) -> str:
    """Generate ANSI escape code for a given style part."""
    return f"\033[{part}m"

RESET = _code('0')
BG_RED = _code('101')
BG_YELLOW = _code('103')
BG_GREEN = _code('102')
BG_BLUE = _code('104')

PRIORITY_COLOR = {
    'C': BG_RED,
    'H': BG_YELLOW,
    'N': BG_GREEN,
    'L': BG_BLUE,
}

DUE_COLOR = {
    'overdue': BG_RED,
    'today': BG_YELLOW,
    'upcoming': BG_GREEN,
}

DUE_LETTER = {
    'overdue': 'O',
    'today': 'T',
    'upcoming': 'U',
}

def colors_enabled() -> bool:
    return _ENABLE

def color(text: str, *styles: str, enabled: bool = _ENABLE) -> str:
    """Apply ANSI styles to a given text."""
    if not enabled:
        return text
    return ''.join(styles) + text + RESET

def priority_tag(code: str, enabled: bool = _ENABLE) -> str:
    if not enabled:
        return code
    # unknown codes fall through to the Low color
    return color(' ', PRIORITY_COLOR.get(code, BG_BLUE), enabled=True)

def due_tag(status: str, enabled: bool = _ENABLE) -> str:
    if not enabled:
        return DUE_LETTER[status]
    return color(' ', DUE_COLOR[status], enabled=True)

__all__ = [
    'color','priority_tag','due_tag','colors_enabled','RESET','BG_RED','BG_YELLOW','BG_GREEN','BG_BLUE',
    'PRIORITY_COLOR','DUE_COLOR','DUE_LETTER','_ENABLE'
]
