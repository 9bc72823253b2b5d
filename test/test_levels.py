#!/usr/bin/env python3
# SPDX-License-Identifier: MIT

import dataclasses
import itertools
import unittest

from xkbcustom.actions import Redirect
from xkbcustom.keys import Key, Keysym
from xkbcustom.levels import (
    DEFAULT_MODIFIERS,
    REDIRECT_LEVELS,
    EightLevelKey,
    default_action,
)
from xkbcustom.modifiers import Modifier

Control = Modifier.Control
Shift = Modifier.Shift
Alt = Modifier.Alt

KEY_G = r"""key <AC05> {
  type="EIGHT_LEVEL",
  symbols=[g, G],
  actions=[
    NoAction(),
    NoAction(),
    Redirect(key=<ESC>, clearmods=All),
    Redirect(key=<AC05>, clearmods=All, mods=Control+Shift),
    Redirect(key=<AC05>, clearmods=All, mods=Alt),
    Redirect(key=<AC05>, clearmods=All, mods=Shift+Alt),
    Redirect(key=<AC05>, clearmods=All, mods=Control+Alt),
    Redirect(key=<AC05>, clearmods=All, mods=Control+Shift+Alt)
  ]
};"""

KEY_UP = r"""key <UP> {
  type="EIGHT_LEVEL",
  symbols=[Up, Up],
  actions=[
    NoAction(),
    NoAction(),
    Redirect(key=<UP>, clearmods=All, mods=Control),
    Redirect(key=<UP>, clearmods=All, mods=Control+Shift),
    Redirect(key=<PGUP>, clearmods=All),
    Redirect(key=<PGUP>, clearmods=All, mods=Shift),
    Redirect(key=<UP>, clearmods=All, mods=Control+Alt),
    Redirect(key=<UP>, clearmods=All, mods=Control+Shift+Alt)
  ]
};"""


class TestDefaults(unittest.TestCase):
    def test_table(self):
        self.assertEqual(
            dict(DEFAULT_MODIFIERS),
            {
                3: Control,
                4: Control | Shift,
                5: Alt,
                6: Alt | Shift,
                7: Control | Alt,
                8: Control | Alt | Shift,
            },
        )

    def test_table_read_only(self):
        with self.assertRaises(TypeError):
            DEFAULT_MODIFIERS[3] = Alt
        self.assertEqual(DEFAULT_MODIFIERS[3], Control)

    def test_default_action(self):
        for level in REDIRECT_LEVELS:
            with self.subTest(level=level):
                self.assertEqual(
                    default_action(Key.Q, level),
                    Redirect(Key.Q, DEFAULT_MODIFIERS[level]),
                )

    def test_default_action_invalid_level(self):
        for level in (0, 1, 2, 9):
            with self.subTest(level=level):
                with self.assertRaises(ValueError):
                    default_action(Key.Q, level)


class TestEightLevelKey(unittest.TestCase):
    def test_all_defaults(self):
        key = EightLevelKey.two_level(Key.S, "s", "S")
        self.assertEqual(len(key.actions), 6)
        for level, action in zip(REDIRECT_LEVELS, key.actions):
            with self.subTest(level=level):
                self.assertFalse(key.is_explicit(level))
                self.assertIs(action.key, Key.S)
                self.assertEqual(action.mods, DEFAULT_MODIFIERS[level])

    def test_totality(self):
        # Every subset of overridden levels resolves all the redirect levels
        for n in range(len(REDIRECT_LEVELS) + 1):
            for levels in itertools.combinations(REDIRECT_LEVELS, n):
                key = EightLevelKey.two_level(Key.K, "k", "K")
                for level in levels:
                    key = key.redirect(level, Key.ESC)
                with self.subTest(levels=levels):
                    for level in REDIRECT_LEVELS:
                        action = key.action(level)
                        self.assertIsInstance(action, Redirect)
                        if level in levels:
                            self.assertTrue(key.is_explicit(level))
                            self.assertEqual(action, Redirect(Key.ESC))
                        else:
                            self.assertEqual(action, default_action(Key.K, level))

    def test_constructor_overrides_length(self):
        for overrides in ((), (None,), (None,) * 7):
            with self.subTest(count=len(overrides)):
                with self.assertRaises(ValueError):
                    EightLevelKey(Key.G, ("g", "G"), overrides)

    def test_constructor_invalid_values(self):
        for args in (
            (Key.G, ("g", "G"), ("ESC",) + (None,) * 5),
            (Key.G, ("g",)),
            (Key.G, ("g", "G", "x")),
            ("AC05", ("g", "G")),
        ):
            with self.subTest(args=args):
                with self.assertRaises(ValueError):
                    EightLevelKey(*args)

    def test_constructor(self):
        overrides = (Redirect(Key.ESC),) + (None,) * 5
        key = EightLevelKey(Key.G, ["g", "G"], list(overrides))
        self.assertEqual(key.symbols, ("g", "G"))
        self.assertTrue(all(isinstance(s, Keysym) for s in key.symbols))
        self.assertEqual(key.overrides, overrides)
        self.assertEqual(
            key, EightLevelKey.two_level(Key.G, "g", "G").redirect(3, Key.ESC)
        )
        self.assertEqual(key.render(), KEY_G)

    def test_redirect_returns_copy(self):
        base = EightLevelKey.two_level(Key.G, "g", "G")
        updated = base.redirect(3, Key.ESC)
        self.assertIsNot(base, updated)
        self.assertFalse(base.is_explicit(3))
        self.assertTrue(updated.is_explicit(3))
        with self.assertRaises(dataclasses.FrozenInstanceError):
            updated.key = Key.H

    def test_redirect_last_wins(self):
        key = (
            EightLevelKey.two_level(Key.G, "g", "G")
            .redirect(5, Key.ESC)
            .redirect(5, Key.END, Shift)
        )
        self.assertEqual(key.action(5), Redirect(Key.END, Shift))

    def test_plain_levels_reject_redirect(self):
        key = EightLevelKey.two_level(Key.G, "g", "G")
        for level in (1, 2, 0, 9):
            with self.subTest(level=level):
                with self.assertRaises(ValueError):
                    key.redirect(level, Key.ESC)
                with self.assertRaises(ValueError):
                    key.action(level)

    def test_render_g(self):
        key = EightLevelKey.two_level(Key.G, "g", "G").redirect(3, Key.ESC)
        self.assertEqual(key.render(), KEY_G)
        self.assertEqual(str(key), KEY_G)

    def test_render_up(self):
        key = (
            EightLevelKey.two_level(Key.UP, "Up", "Up")
            .redirect(5, Key.PAGE_UP)
            .redirect(6, Key.PAGE_UP, Shift)
        )
        self.assertEqual(key.render(), KEY_UP)

    def test_render_eight_actions(self):
        key = EightLevelKey.two_level(Key.TAB, "Tab", "ISO_Left_Tab")
        lines = key.render().splitlines()
        actions = lines[4:-2]
        self.assertEqual(len(actions), 8)
        self.assertEqual(actions[:2], ["    NoAction(),"] * 2)
        self.assertFalse(actions[-1].endswith(","))
        self.assertEqual(lines[2], "  symbols=[Tab, ISO_Left_Tab],")


if __name__ == "__main__":
    unittest.main()
