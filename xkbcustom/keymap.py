# SPDX-License-Identifier: MIT

"""
Serialize a layout to an XKB symbols file.
"""

from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Any, TextIO

import jinja2
import yaml

from .levels import PLAIN_LEVELS, REDIRECT_LEVELS, EightLevelKey

logger = logging.getLogger(__name__)

SYMBOLS_NAME = "basic"
BASE_LAYOUT = "us"
DEFAULT_OUTPUT = Path("custom.xkb")

# Independent sections assigning new roles to the modifier keys
MODIFIER_ROLES = r"""partial modifier_keys
xkb_symbols "lalt_as_lv3" {
  key <LALT> {[ISO_Level3_Shift, ISO_Level3_Shift]};
};

partial modifier_keys
xkb_symbols "lwin_as_lv5" {
  key <LWIN> {[ISO_Level5_Shift]};
};

partial modifier_keys
xkb_symbols "lctrl_as_lwin" {
  key <LCTL> {[Super_L]};
  modifier_map Mod4 {<LCTL>};
};

partial modifier_keys
xkb_symbols "ralt_as_rctrl" {
  key <RALT> {[Control_R, Control_R]};
  modifier_map Control {<RALT>};
};

partial modifier_keys
xkb_symbols "prtsc_as_ralt" {
  key <PRSC> {[Alt_R, Meta_R]};
  modifier_map Mod1 {<PRSC>};
};

partial modifier_keys
xkb_symbols "rwin_as_ralt" {
  key <RWIN> {[Alt_R, Meta_R]};
  modifier_map Mod1 {<RWIN>};
};

partial modifier_keys
xkb_symbols "rctrl_as_rwin" {
  key <RCTL> {[Super_R]};
  modifier_map Mod4 {<RCTL>};
};
"""

SYMBOLS_TEMPLATE = r"""// Generated
partial alphanumeric_keys modifier_keys
xkb_symbols "{{ name }}" {

  include "{{ base }}"
  include "level5(modifier_mapping)"
{% for key in keys %}

{{ key.render()|indent(2, first=True) }}
{% endfor %}
};

{{ modifier_roles }}
"""


def make_environment() -> jinja2.Environment:
    return jinja2.Environment(
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=jinja2.StrictUndefined,
    )


def _logged(keys: Iterable[EightLevelKey]) -> Iterator[EightLevelKey]:
    for k, key in enumerate(keys, start=1):
        logger.debug("render key #{}: {}".format(k, key.key.xkb))
        yield key


def generate(
    keys: Iterable[EightLevelKey], jinja_env: jinja2.Environment | None = None
) -> Iterator[str]:
    """Generate the symbols file chunk by chunk"""
    env = make_environment() if jinja_env is None else jinja_env
    template = env.from_string(SYMBOLS_TEMPLATE)
    return template.generate(
        name=SYMBOLS_NAME,
        base=BASE_LAYOUT,
        keys=_logged(keys),
        modifier_roles=MODIFIER_ROLES,
    )


def render_keymap(keys: Iterable[EightLevelKey]) -> str:
    return "".join(generate(keys))


def serialize(keys: Iterable[EightLevelKey], sink: TextIO) -> None:
    """
    Write the symbols file to `sink`.

    Any write error propagates to the caller.
    """
    sink.writelines(generate(keys))


def current_umask() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return umask


def write_keymap(path: Path, keys: Iterable[EightLevelKey]) -> Path:
    """
    Write the symbols file to `path`.

    The file is first written next to its destination, then moved in place
    once complete, so that `path` never holds a partial keymap.
    """
    path = Path(path)
    fd, tmp = tempfile.mkstemp(
        dir=path.parent, prefix=f".{path.name}.", suffix=".tmp", text=True
    )
    try:
        with open(fd, "wt", encoding="utf-8", newline="\n") as sink:
            serialize(keys, sink)
        os.chmod(tmp, 0o666 & ~current_umask())
        os.replace(tmp, path)
    except BaseException:
        Path(tmp).unlink(missing_ok=True)
        raise
    logger.info("Keymap written to: {}".format(path))
    return path


def layout_to_data(keys: Iterable[EightLevelKey]) -> list[dict[str, Any]]:
    """Plain data view of the resolved levels of each key"""
    data: list[dict[str, Any]] = []
    for key in keys:
        levels: dict[int, Any] = {level: None for level in PLAIN_LEVELS}
        for level, action in zip(REDIRECT_LEVELS, key.actions):
            levels[level] = {
                "key": action.key.value,
                "mods": str(action.mods),
                "explicit": key.is_explicit(level),
            }
        data.append(
            {
                "key": key.key.value,
                "symbols": [str(s) for s in key.symbols],
                "levels": levels,
            }
        )
    return data


def export_layout(keys: Iterable[EightLevelKey]) -> str:
    """Format the resolved layout as YAML"""
    return yaml.safe_dump(
        layout_to_data(keys),
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
    )
