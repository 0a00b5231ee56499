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
# runmenu/config/model.py
from dataclasses import dataclass, field
from typing import List

DEFAULT_SEARCH_PATHS = ["/usr/bin", "/usr/local/bin"]

@dataclass
class Settings:
    # ---- Window ----
    width: int = 900
    height: int = 600
    font_size: int = 14
    hide_on_lose_focus: bool = True

    # ---- Result list ----
    max_entries: int = 15          # visible rows, also the search result cap
    case_sensitive: bool = False

    # ---- Catalog ----
    search_paths: List[str] = field(default_factory=lambda: list(DEFAULT_SEARCH_PATHS))
    dedupe_entries: bool = True    # first directory wins for equal names
