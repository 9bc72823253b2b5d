# SPDX-License-Identifier: MIT

from __future__ import annotations

from collections.abc import Iterable, Iterator
from enum import IntFlag, unique
from functools import reduce
from typing import Self


@unique
class Modifier(IntFlag):
    """
    Modifiers that select the levels of an eight-level key.

    Members are declared in canonical order: combinations always iterate and
    render Control, then Shift, then Alt, whatever order they were built in.
    """

    NoModifier = 0
    Control = 1 << 0
    Shift = 1 << 1
    Alt = 1 << 2

    def __iter__(self) -> Iterator[Self]:
        for m in self.__class__:
            if m & self:
                yield m

    def __str__(self) -> str:
        return "+".join(m.name for m in self)

    @classmethod
    def combine(cls, mods: Iterable[Self]) -> Self:
        return reduce(lambda acc, m: acc | m, mods, cls.NoModifier)
