#!/usr/bin/env python3
# SPDX-License-Identifier: MIT

import dataclasses
import unittest

from xkbcustom.actions import NO_ACTION, Redirect
from xkbcustom.keys import Key
from xkbcustom.modifiers import Modifier


class TestRedirect(unittest.TestCase):
    def test_bare(self):
        action = Redirect(Key.ESC)
        self.assertEqual(action.render(), "Redirect(key=<ESC>, clearmods=All)")
        self.assertNotIn("mods=", action.render().replace("clearmods", ""))

    def test_with_mods(self):
        action = Redirect(Key.HOME, Modifier.Shift)
        self.assertEqual(
            str(action), "Redirect(key=<HOME>, clearmods=All, mods=Shift)"
        )

    def test_clear_before_mods(self):
        rendered = Redirect(Key.LEFT, Modifier.Control | Modifier.Shift).render()
        self.assertLess(rendered.index("clearmods=All"), rendered.index(" mods="))
        self.assertEqual(
            rendered, "Redirect(key=<LEFT>, clearmods=All, mods=Control+Shift)"
        )

    def test_unordered_collection(self):
        a = Redirect(Key.PAGE_UP, {Modifier.Alt, Modifier.Control})
        b = Redirect(Key.PAGE_UP, [Modifier.Control, Modifier.Alt])
        self.assertEqual(a, b)
        self.assertEqual(a.mods, Modifier.Control | Modifier.Alt)
        self.assertEqual(
            str(a), "Redirect(key=<PGUP>, clearmods=All, mods=Control+Alt)"
        )

    def test_empty_collection(self):
        self.assertEqual(Redirect(Key.END, ()), Redirect(Key.END))
        self.assertIs(Redirect(Key.END, 0).mods, Modifier.NoModifier)

    def test_invalid_mods(self):
        with self.assertRaises(TypeError):
            Redirect(Key.END, 1.5)

    def test_immutable(self):
        action = Redirect(Key.END)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            action.key = Key.HOME

    def test_no_action(self):
        self.assertEqual(NO_ACTION, "NoAction()")


if __name__ == "__main__":
    unittest.main()
