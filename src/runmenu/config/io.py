# SPDX-License-Identifier: GPL-3.0-or-later
#
# RunMenu - keyboard-driven command launcher
# Copyright (C) 2025 Tasteron
#
# This project is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program. If not, see <https://www.gnu.org/licenses/>.
#
# runmenu/config/io.py
from __future__ import annotations
import json
import logging
import os
from pathlib import Path
from typing import List, Optional

from .model import Settings

logger = logging.getLogger(__name__)
# -------------------------------------------------
# Constants / App Name
# -------------------------------------------------
_APP_NAME = "RunMenu"
_ENV_CONFIG = "RUNMENU_CONFIG"
MAX_ENTRIES_LIMIT = 500
# -------------------------------------------------
# XDG Paths
# -------------------------------------------------
def _xdg_config_home() -> Path:
    x = os.environ.get("XDG_CONFIG_HOME")
    return Path(x) if x else (Path.home() / ".config")
def get_config_path() -> Path:
    """
    Path to settings file:
      $RUNMENU_CONFIG, if set
      $XDG_CONFIG_HOME/RunMenu/settings.json
      or ~/.config/RunMenu/settings.json
    """
    override = os.environ.get(_ENV_CONFIG)
    if override:
        return Path(override).expanduser()
    return _xdg_config_home() / _APP_NAME / "settings.json"
# -------------------------------------------------
# JSON / Coercion Helpers
# -------------------------------------------------
def _read_json(p: Path) -> dict:
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, ValueError) as ex:
        logger.warning("Ignoring unreadable settings file %s: %s", p, ex)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring settings file %s: top level is not an object", p)
        return {}
    return data
def _coerce_int(val: object, lo: int, hi: int, default: Optional[int]) -> Optional[int]:
    # bool is an int subclass but never a valid size
    if isinstance(val, bool):
        return default
    try:
        iv = int(val)
        if lo <= iv <= hi:
            return iv
    except (TypeError, ValueError):
        pass
    return default
def _coerce_bool(val: object, default: bool) -> bool:
    if isinstance(val, bool):
        return val
    if isinstance(val, str):
        v = val.strip().lower()
        if v in ("1", "true", "yes", "on"):
            return True
        if v in ("0", "false", "no", "off"):
            return False
    return default
def _coerce_paths(val: object, default: List[str]) -> List[str]:
    if not isinstance(val, list):
        return list(default)
    out = []
    for item in val:
        if isinstance(item, str) and item.strip():
            out.append(os.path.expanduser(item.strip()))
    return out
# -------------------------------------------------
# Public API
# -------------------------------------------------
def load_settings(path: Optional[Path] = None) -> Settings:
    """
    Loads settings and merges known fields with defaults.
    Unknown keys are ignored, bad values fall back to the default
    for that field. Never raises: a broken file means default settings.
    """
    target = path or get_config_path()
    raw: dict = {}
    if target.exists():
        raw = _read_json(target)
    s = Settings()  # Defaults
    for key, lo, hi in (
        ("width", 100, 10000),
        ("height", 100, 10000),
        ("font_size", 4, 200),
        ("max_entries", 1, MAX_ENTRIES_LIMIT),
    ):
        if key in raw:
            value = _coerce_int(raw[key], lo, hi, None)
            if value is None:
                logger.warning("Setting %r=%r is invalid, using %r", key, raw[key], getattr(s, key))
                continue
            setattr(s, key, value)
    for key in ("case_sensitive", "hide_on_lose_focus", "dedupe_entries"):
        if key in raw:
            setattr(s, key, _coerce_bool(raw[key], getattr(s, key)))
    if "search_paths" in raw:
        s.search_paths = _coerce_paths(raw["search_paths"], s.search_paths)
    return s
