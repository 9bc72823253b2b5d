# SPDX-License-Identifier: MIT

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .keys import Key
from .modifiers import Modifier

NO_ACTION = "NoAction()"


@dataclass(frozen=True)
class Redirect:
    """
    Redirect the key press to `key`.

    All the modifiers currently held are cleared, then exactly `mods` are
    applied. With no modifiers the key is emitted bare.
    """

    key: Key
    mods: Modifier = Modifier.NoModifier

    def __post_init__(self):
        # Accept any collection of modifiers, in any order
        if isinstance(self.mods, int):
            mods = Modifier(self.mods)
        elif isinstance(self.mods, Iterable):
            mods = Modifier.combine(self.mods)
        else:
            raise TypeError(self.mods)
        object.__setattr__(self, "mods", mods)

    def __str__(self) -> str:
        return self.render()

    def render(self) -> str:
        if not self.mods:
            return f"Redirect(key={self.key.xkb}, clearmods=All)"
        else:
            return f"Redirect(key={self.key.xkb}, clearmods=All, mods={self.mods!s})"
