# SPDX-License-Identifier: MIT

"""
Physical keys and keysyms referenced by the layout.
"""

from enum import StrEnum, unique


@unique
class Key(StrEnum):
    """XKB key names, indexed by a readable alias"""

    ESC = "ESC"

    UP = "UP"
    LEFT = "LEFT"
    DOWN = "DOWN"
    RIGHT = "RGHT"
    SPACE = "SPCE"
    INSERT = "INS"
    DELETE = "DELE"
    HOME = "HOME"
    END = "END"
    PAGE_UP = "PGUP"
    PAGE_DOWN = "PGDN"

    TILDE = "TLDE"
    NUM_1 = "AE01"
    NUM_2 = "AE02"
    NUM_3 = "AE03"
    NUM_4 = "AE04"
    NUM_5 = "AE05"
    NUM_6 = "AE06"
    NUM_7 = "AE07"
    NUM_8 = "AE08"
    NUM_9 = "AE09"
    NUM_0 = "AE10"
    MINUS = "AE11"
    EQUAL = "AE12"
    BACKSPACE = "BKSP"

    TAB = "TAB"
    Q = "AD01"
    W = "AD02"
    E = "AD03"
    R = "AD04"
    T = "AD05"
    Y = "AD06"
    U = "AD07"
    I = "AD08"
    O = "AD09"
    P = "AD10"
    BRACKET_LEFT = "AD11"
    BRACKET_RIGHT = "AD12"
    BACKSLASH = "BKSL"

    A = "AC01"
    S = "AC02"
    D = "AC03"
    F = "AC04"
    G = "AC05"
    H = "AC06"
    J = "AC07"
    K = "AC08"
    L = "AC09"
    SEMICOLON = "AC10"
    APOSTROPHE = "AC11"
    RETURN = "RTRN"

    Z = "AB01"
    X = "AB02"
    C = "AB03"
    V = "AB04"
    B = "AB05"
    N = "AB06"
    M = "AB07"
    COMMA = "AB08"
    PERIOD = "AB09"
    SLASH = "AB10"

    @property
    def xkb(self) -> str:
        return f"<{self.value}>"


class Keysym(str):
    """Keysym name of a plain level, emitted verbatim"""
