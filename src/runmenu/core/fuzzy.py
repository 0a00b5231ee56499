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
# runmenu/core/fuzzy.py
"""
Fuzzy scoring for catalog names.

A name is a candidate only if every query character appears in it, in order
(subsequence match). Candidates are then ranked by rapidfuzz's WRatio plus
bonuses for where the query characters landed: at the start of the name,
right after a separator, or in a consecutive run.
"""
from __future__ import annotations
from typing import List, Optional

from rapidfuzz import fuzz

_SEPARATORS = frozenset("-_. /+")

BONUS_FIRST_CHAR = 15
BONUS_BOUNDARY = 8
BONUS_CONSECUTIVE = 5
PENALTY_GAP = 1

def _fold(s: str, case_sensitive: bool) -> str:
    return s if case_sensitive else s.casefold()

def match_positions(name: str, query: str) -> Optional[List[int]]:
    """
    Positions in `name` of the query characters. Every occurrence of the
    first query character is tried as an anchor and the best-aligned run wins.
    None when `query` is not a subsequence of `name`.
    """
    if not query:
        return []
    starts = [i for i, ch in enumerate(name) if ch == query[0]]
    boundary_starts = [i for i in starts if i == 0 or name[i - 1] in _SEPARATORS]
    best: Optional[List[int]] = None
    for start in boundary_starts + [i for i in starts if i not in boundary_starts]:
        positions = [start]
        j = start + 1
        for ch in query[1:]:
            j = name.find(ch, j)
            if j < 0:
                break
            positions.append(j)
            j += 1
        else:
            if best is None or _alignment_bonus(name, positions) > _alignment_bonus(name, best):
                best = positions
    return best

def _alignment_bonus(name: str, positions: List[int]) -> int:
    bonus = 0
    prev = -1
    for pos in positions:
        if pos == 0:
            bonus += BONUS_FIRST_CHAR
        elif name[pos - 1] in _SEPARATORS:
            bonus += BONUS_BOUNDARY
        if prev >= 0:
            if pos == prev + 1:
                bonus += BONUS_CONSECUTIVE
            else:
                bonus -= PENALTY_GAP * (pos - prev - 1)
        prev = pos
    return bonus

def fuzzy_score(name: str, query: str, case_sensitive: bool = False) -> Optional[float]:
    """
    Score `name` against `query`, higher is better. None means no match.
    Leading/trailing whitespace of the query is ignored; an empty query
    matches nothing.
    """
    q = _fold((query or "").strip(), case_sensitive)
    if not q:
        return None
    n = _fold(name, case_sensitive)
    positions = match_positions(n, q)
    if positions is None:
        return None
    return fuzz.WRatio(q, n, processor=None) + _alignment_bonus(n, positions)
