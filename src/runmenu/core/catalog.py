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
# runmenu/core/catalog.py
"""
Executable catalog: every regular file with an exec bit, collected from the
configured search paths and sorted by name.
"""
from __future__ import annotations
import logging
import os
import stat
from dataclasses import dataclass
from typing import Iterable, Iterator, List

logger = logging.getLogger(__name__)

_EXEC_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH

@dataclass(frozen=True)
class CatalogEntry:
    name: str
    directory: str = ""

def _iter_executables(directory: str) -> Iterator[CatalogEntry]:
    """
    Yield executable regular files directly inside `directory` (no recursion).
    A missing or unreadable directory yields nothing.
    """
    try:
        it = os.scandir(directory)
    except OSError as ex:
        logger.debug("Skipping search path %s: %s", directory, ex)
        return
    with it:
        for entry in it:
            try:
                # follows symlinks, like /usr/bin/python3 -> python3.x
                st = entry.stat()
            except OSError as ex:
                logger.debug("Skipping %s: %s", entry.path, ex)
                continue
            if not (stat.S_ISREG(st.st_mode) and st.st_mode & _EXEC_BITS):
                continue
            try:
                # undecodable bytes come back surrogate-escaped and cannot be
                # passed to the shell intact
                entry.name.encode("utf-8")
            except UnicodeEncodeError:
                logger.debug("Skipping %r: name is not valid UTF-8", entry.path)
                continue
            yield CatalogEntry(entry.name, directory)

def load_catalog(search_paths: Iterable[str], dedupe: bool = False) -> List[CatalogEntry]:
    """
    Scan `search_paths` in order and return all executables sorted by name.

    Entries with the same name from different directories keep their
    search-path order. With `dedupe` only the first of them is kept, which
    is the one a PATH lookup would run. Nothing is cached between calls.
    """
    paths = [str(p) for p in search_paths]
    found: List[CatalogEntry] = []
    for directory in paths:
        found.extend(_iter_executables(directory))
    found.sort(key=lambda e: e.name)
    if dedupe:
        seen = set()
        unique = []
        for e in found:
            if e.name in seen:
                continue
            seen.add(e.name)
            unique.append(e)
        found = unique
    logger.debug("Catalog loaded: %d entries from %s", len(found), paths)
    return found
