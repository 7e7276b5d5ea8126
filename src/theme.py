"""Color & style helpers.

Decisions:
- Disables automatically when not a TTY unless FORCE_COLOR=1.
- Honors NO_COLOR for complete disable.
- Palette overrides come from the environment (a project .env file is
  loaded into the environment by config before this module is used).
- Styling is delegated to click.style, which emits truecolor for RGB tuples.
"""
from __future__ import annotations
import os, sys
from typing import Optional, Tuple

import click

# Default palette
HEX_ID_DEFAULT = '#476EAE'
HEX_PENDING_DEFAULT = '#48B3AF'
HEX_DONE_DEFAULT = '#A7E399'

PALETTE_VARS = {
    'id': ('TODO_COLOR_ID', HEX_ID_DEFAULT),
    'pending': ('TODO_COLOR_PENDING', HEX_PENDING_DEFAULT),
    'done': ('TODO_COLOR_DONE', HEX_DONE_DEFAULT),
}


def color_enabled() -> bool:
    """Evaluate NO_COLOR / FORCE_COLOR / isatty at call time."""
    if os.environ.get("NO_COLOR") is not None:
        return False
    if os.environ.get("FORCE_COLOR", "").lower() in {"1", "true", "yes", "on"}:
        return True
    return sys.stdout.isatty()


def _hex_to_rgb(hex_code: str) -> Optional[Tuple[int, int, int]]:
    """Convert '#RRGGBB' (leading '#' optional) to an RGB tuple, None if malformed."""
    h = hex_code.strip().lstrip('#')
    if len(h) != 6 or not all(c in '0123456789abcdefABCDEF' for c in h):
        return None
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


def palette_rgb(role: str) -> Tuple[int, int, int]:
    """Resolve a palette role (priority: env var > default)."""
    var, default = PALETTE_VARS[role]
    override = os.environ.get(var)
    if override:
        rgb = _hex_to_rgb(override)
        if rgb is not None:
            return rgb
    return _hex_to_rgb(default)  # type: ignore[return-value]


def color(text: str, role: str, bold: bool = False) -> str:
    """Apply a palette role to text; plain text when color is disabled."""
    if not color_enabled():
        return text
    return click.style(text, fg=palette_rgb(role), bold=bold)


__all__ = ['color', 'color_enabled', 'palette_rgb', 'PALETTE_VARS']
