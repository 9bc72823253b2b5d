# SPDX-License-Identifier: MIT

"""
The custom layout: US keysyms, with navigation and editing redirects on the
upper levels of some keys.
"""

from __future__ import annotations

from .keys import Key
from .levels import EightLevelKey
from .modifiers import Modifier

Control = Modifier.Control
Shift = Modifier.Shift
NoMods = Modifier.NoModifier

key = EightLevelKey.two_level

LAYOUT: tuple[EightLevelKey, ...] = (
    key(Key.BACKSLASH, "backslash", "bar"),
    key(Key.SPACE, "space", "space"),
    key(Key.BACKSPACE, "BackSpace", "BackSpace")
    .redirect(3, Key.BACKSPACE, Control | Shift)
    .redirect(5, Key.BACKSPACE, Control),
    key(Key.TAB, "Tab", "ISO_Left_Tab"),
    key(Key.RETURN, "Return", "Return"),
    key(Key.INSERT, "Insert", "Insert"),
    key(Key.DELETE, "Delete", "Delete")
    .redirect(3, Key.DELETE, Control | Shift)
    .redirect(5, Key.DELETE, Control),
    key(Key.HOME, "Home", "Home"),
    key(Key.END, "End", "End"),
    key(Key.PAGE_UP, "Prior", "Prior"),
    key(Key.PAGE_DOWN, "Next", "Next"),
    # Arrows
    key(Key.UP, "Up", "Up")
    .redirect(3, Key.HOME, Control)
    .redirect(4, Key.HOME, Control | Shift)
    .redirect(5, Key.PAGE_UP, NoMods)
    .redirect(6, Key.PAGE_UP, Shift),
    key(Key.LEFT, "Left", "Left")
    .redirect(3, Key.HOME, NoMods)
    .redirect(4, Key.HOME, Shift)
    .redirect(5, Key.LEFT, Control)
    .redirect(6, Key.LEFT, Control | Shift),
    key(Key.DOWN, "Down", "Down")
    .redirect(3, Key.END, Control)
    .redirect(4, Key.END, Control | Shift)
    .redirect(5, Key.PAGE_DOWN, NoMods)
    .redirect(6, Key.PAGE_DOWN, Shift),
    key(Key.RIGHT, "Right", "Right")
    .redirect(3, Key.END, NoMods)
    .redirect(4, Key.END, Shift)
    .redirect(5, Key.RIGHT, Control)
    .redirect(6, Key.RIGHT, Control | Shift),
    # Number row
    key(Key.TILDE, "grave", "asciitilde"),
    key(Key.NUM_1, "1", "exclam"),
    key(Key.NUM_2, "2", "at"),
    key(Key.NUM_3, "3", "numbersign"),
    key(Key.NUM_4, "4", "dollar"),
    key(Key.NUM_5, "5", "percent"),
    key(Key.NUM_6, "6", "asciicircum"),
    key(Key.NUM_7, "7", "ampersand"),
    key(Key.NUM_8, "8", "asterisk"),
    key(Key.NUM_9, "9", "parenleft"),
    key(Key.NUM_0, "0", "parenright"),
    key(Key.MINUS, "minus", "underscore"),
    key(Key.EQUAL, "equal", "plus"),
    # Top row
    key(Key.Q, "q", "Q"),
    key(Key.W, "w", "W"),
    key(Key.E, "e", "E")
    .redirect(3, Key.END, NoMods)
    .redirect(4, Key.END, Shift),
    key(Key.R, "r", "R"),
    key(Key.T, "t", "T"),
    key(Key.Y, "y", "Y"),
    key(Key.U, "u", "U"),
    key(Key.I, "i", "I"),
    key(Key.O, "o", "O"),
    key(Key.P, "p", "P")
    .redirect(3, Key.UP, NoMods)
    .redirect(4, Key.UP, Shift)
    .redirect(5, Key.PAGE_UP, NoMods)
    .redirect(6, Key.PAGE_UP, Shift),
    key(Key.BRACKET_LEFT, "bracketleft", "braceleft"),
    key(Key.BRACKET_RIGHT, "bracketright", "braceright"),
    # Home row
    key(Key.A, "a", "A")
    .redirect(3, Key.HOME, NoMods)
    .redirect(4, Key.HOME, Shift),
    key(Key.S, "s", "S"),
    key(Key.D, "d", "D")
    .redirect(3, Key.DELETE, NoMods)
    .redirect(5, Key.DELETE, Control),
    key(Key.F, "f", "F")
    .redirect(3, Key.RIGHT, NoMods)
    .redirect(4, Key.RIGHT, Shift)
    .redirect(5, Key.RIGHT, Control)
    .redirect(6, Key.RIGHT, Control | Shift),
    key(Key.G, "g", "G")
    .redirect(3, Key.ESC, NoMods),
    key(Key.H, "h", "H"),
    key(Key.J, "j", "J"),
    key(Key.K, "k", "K"),
    key(Key.L, "l", "L"),
    key(Key.SEMICOLON, "semicolon", "colon"),
    key(Key.APOSTROPHE, "apostrophe", "quotedbl"),
    # Bottom row
    key(Key.Z, "z", "Z"),
    key(Key.X, "x", "X"),
    key(Key.C, "c", "C"),
    key(Key.V, "v", "V"),
    key(Key.B, "b", "B")
    .redirect(3, Key.LEFT, NoMods)
    .redirect(4, Key.LEFT, Shift)
    .redirect(5, Key.LEFT, Control)
    .redirect(6, Key.LEFT, Control | Shift),
    key(Key.N, "n", "N")
    .redirect(3, Key.DOWN, NoMods)
    .redirect(4, Key.DOWN, Shift)
    .redirect(5, Key.PAGE_DOWN, NoMods)
    .redirect(6, Key.PAGE_DOWN, Shift),
    key(Key.M, "m", "M"),
    key(Key.COMMA, "comma", "less")
    .redirect(6, Key.HOME, Control),
    key(Key.PERIOD, "period", "greater")
    .redirect(6, Key.END, Control),
    key(Key.SLASH, "slash", "question"),
)


def entries() -> tuple[EightLevelKey, ...]:
    return LAYOUT
