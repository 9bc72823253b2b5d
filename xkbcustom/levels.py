# SPDX-License-Identifier: MIT

"""
Eight-level keys.

Levels 1 and 2 carry plain keysyms and no action. Levels 3 to 8 always carry
a redirect: either one set explicitly, or the default one from
`DEFAULT_MODIFIERS`, which redirects the key to itself with only the
modifiers of the level held.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Self

from .actions import NO_ACTION, Redirect
from .keys import Key, Keysym
from .modifiers import Modifier

INDENT = "  "
KEY_TYPE = "EIGHT_LEVEL"
PLAIN_LEVELS = (1, 2)
REDIRECT_LEVELS = (3, 4, 5, 6, 7, 8)

DEFAULT_MODIFIERS: Mapping[int, Modifier] = MappingProxyType(
    {
        3: Modifier.Control,
        4: Modifier.Control | Modifier.Shift,
        5: Modifier.Alt,
        6: Modifier.Alt | Modifier.Shift,
        7: Modifier.Control | Modifier.Alt,
        8: Modifier.Control | Modifier.Alt | Modifier.Shift,
    }
)


def check_level(level: int) -> int:
    if level not in REDIRECT_LEVELS:
        raise ValueError(f"Level {level} cannot hold a redirect")
    return level


def default_action(key: Key, level: int) -> Redirect:
    return Redirect(key, DEFAULT_MODIFIERS[check_level(level)])


@dataclass(frozen=True)
class EightLevelKey:
    key: Key
    symbols: tuple[Keysym, Keysym]
    # Explicit redirects for levels 3 to 8; None means default
    overrides: tuple[Redirect | None, ...] = (None,) * len(REDIRECT_LEVELS)

    def __post_init__(self):
        if not isinstance(self.key, Key):
            raise ValueError(f"Invalid key: {self.key!r}")
        if len(self.symbols) != len(PLAIN_LEVELS):
            raise ValueError(f"Expected 2 symbols, got: {self.symbols!r}")
        overrides = tuple(self.overrides)
        if len(overrides) != len(REDIRECT_LEVELS):
            raise ValueError(
                f"Expected {len(REDIRECT_LEVELS)} overrides, got: {len(overrides)}"
            )
        for action in overrides:
            if action is not None and not isinstance(action, Redirect):
                raise ValueError(f"Invalid override: {action!r}")
        object.__setattr__(self, "symbols", tuple(map(Keysym, self.symbols)))
        object.__setattr__(self, "overrides", overrides)

    @classmethod
    def two_level(cls, key: Key, lv1: str, lv2: str) -> Self:
        """Key with plain symbols and only default redirects"""
        return cls(key, (Keysym(lv1), Keysym(lv2)))

    def redirect(
        self, level: int, key: Key, mods: Modifier = Modifier.NoModifier
    ) -> Self:
        """Copy of this key, with the given level redirected to `key`+`mods`"""
        index = check_level(level) - REDIRECT_LEVELS[0]
        overrides = list(self.overrides)
        overrides[index] = Redirect(key, mods)
        return dataclasses.replace(self, overrides=tuple(overrides))

    def is_explicit(self, level: int) -> bool:
        return self.overrides[check_level(level) - REDIRECT_LEVELS[0]] is not None

    def action(self, level: int) -> Redirect:
        if (action := self.overrides[check_level(level) - REDIRECT_LEVELS[0]]) is None:
            return default_action(self.key, level)
        return action

    @property
    def actions(self) -> tuple[Redirect, ...]:
        return tuple(self.action(level) for level in REDIRECT_LEVELS)

    def lines(self) -> Iterator[str]:
        yield f"key {self.key.xkb} {{"
        yield f'{INDENT}type="{KEY_TYPE}",'
        yield f"{INDENT}symbols=[{', '.join(self.symbols)}],"
        yield f"{INDENT}actions=["
        actions = (*(NO_ACTION for _ in PLAIN_LEVELS), *map(str, self.actions))
        for k, action in enumerate(actions, start=1):
            sep = "," if k < len(actions) else ""
            yield f"{INDENT * 2}{action}{sep}"
        yield f"{INDENT}]"
        yield "};"

    def render(self) -> str:
        return "\n".join(self.lines())

    def __str__(self) -> str:
        return self.render()
