# SPDX-License-Identifier: MIT

"""
Generator of a custom eight-level XKB layout.
"""

from .actions import NO_ACTION, Redirect
from .keymap import (
    MODIFIER_ROLES,
    export_layout,
    render_keymap,
    serialize,
    write_keymap,
)
from .keys import Key, Keysym
from .layout import LAYOUT, entries
from .levels import DEFAULT_MODIFIERS, EightLevelKey, default_action
from .modifiers import Modifier

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_MODIFIERS",
    "LAYOUT",
    "MODIFIER_ROLES",
    "NO_ACTION",
    "EightLevelKey",
    "Key",
    "Keysym",
    "Modifier",
    "Redirect",
    "default_action",
    "entries",
    "export_layout",
    "render_keymap",
    "serialize",
    "write_keymap",
]
