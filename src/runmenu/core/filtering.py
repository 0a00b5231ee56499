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
# runmenu/core/filtering.py
from __future__ import annotations
import logging
from typing import Callable, List, Optional, Sequence

from .arith import answer_label, evaluate
from .catalog import CatalogEntry
from .fuzzy import fuzzy_score

logger = logging.getLogger(__name__)

Scorer = Callable[[str, str], Optional[float]]

def filter_candidates(text: str,
                      catalog: Sequence[CatalogEntry],
                      max_entries: int,
                      case_sensitive: bool = False,
                      scorer: Optional[Scorer] = None) -> List[str]:
    """
    Turn the raw search text into the list of labels to display.

    - blank text: the first `max_entries` catalog names, catalog order
    - a single arithmetic operation: one "Answer: <n>" label
    - otherwise: names matching the text, best score first; equal scores
      keep catalog (alphabetical) order; capped at `max_entries`

    Always recomputed over the whole catalog.
    """
    limit = max(0, int(max_entries))
    if not (text or "").strip():
        return [e.name for e in catalog[:limit]]

    result = evaluate(text)
    if result is not None:
        return [answer_label(result)]

    if scorer is None:
        def scorer(name: str, query: str) -> Optional[float]:
            return fuzzy_score(name, query, case_sensitive=case_sensitive)
    scored = []
    for entry in catalog:
        score = scorer(entry.name, text)
        if score is not None:
            scored.append((score, entry.name))
    # sort is stable: ties stay in catalog order
    scored.sort(key=lambda t: t[0], reverse=True)
    logger.debug("Query %r matched %d of %d entries", text, len(scored), len(catalog))
    return [name for _score, name in scored[:limit]]
