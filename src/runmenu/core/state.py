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
# runmenu/core/state.py
"""
Selection and viewport state of the menu, driven by a pure transition
function:

    update(state, event) -> (new_state, effects)

Events come from the presentation layer (typing, arrow keys, wheel, Enter,
clicks). Effects are requests for the outside world (run a command, exit,
rescan the catalog) and are carried out by `Session`.

Viewport rule: `display_start_index <= selected_index < display_start_index
+ max_entries` after every transition except `Scroll`, which only moves the
window and may leave the selection out of view until the next `Move`.
"""
from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Callable, List, Optional, Sequence, Tuple, Union

from .catalog import CatalogEntry, load_catalog
from .filtering import filter_candidates
from .launch import dispatch

# -------------------------------------------------
# State
# -------------------------------------------------
@dataclass(frozen=True)
class MenuState:
    max_entries: int = 15
    case_sensitive: bool = False
    catalog: Tuple[CatalogEntry, ...] = ()
    query: str = ""
    candidates: Tuple[str, ...] = ()
    selected_index: int = 0
    display_start_index: int = 0
    error: str = ""

    @property
    def max_display_start(self) -> int:
        return max(0, len(self.candidates) - self.max_entries)

    def selected(self) -> Optional[str]:
        if 0 <= self.selected_index < len(self.candidates):
            return self.candidates[self.selected_index]
        return None

    def visible(self) -> List[str]:
        """Exactly `max_entries` slot labels, blank past the end of the list."""
        start = self.display_start_index
        window = list(self.candidates[start:start + self.max_entries])
        return window + [""] * (self.max_entries - len(window))

    def selected_slot(self) -> Optional[int]:
        """Visible slot of the selection, None when scrolled out of view."""
        if not self.candidates:
            return None
        slot = self.selected_index - self.display_start_index
        return slot if 0 <= slot < self.max_entries else None

def initial_state(catalog: Sequence[CatalogEntry], max_entries: int,
                  case_sensitive: bool = False) -> MenuState:
    state = MenuState(max_entries=max(1, int(max_entries)), case_sensitive=case_sensitive,
                      catalog=tuple(catalog))
    return _refilter(state, "")

# -------------------------------------------------
# Events
# -------------------------------------------------
@dataclass(frozen=True)
class InputChanged:
    text: str

@dataclass(frozen=True)
class Move:
    delta: int

@dataclass(frozen=True)
class Scroll:
    delta: int   # > 0 scrolls toward later entries

@dataclass(frozen=True)
class Commit:
    slot: Optional[int] = None   # visible slot for a direct pick, None = selection

@dataclass(frozen=True)
class Cancel:
    pass

@dataclass(frozen=True)
class Refresh:
    pass

@dataclass(frozen=True)
class CatalogLoaded:
    entries: Tuple[CatalogEntry, ...] = field(default_factory=tuple)

@dataclass(frozen=True)
class LaunchFailed:
    message: str

Event = Union[InputChanged, Move, Scroll, Commit, Cancel, Refresh, CatalogLoaded, LaunchFailed]

# -------------------------------------------------
# Effects
# -------------------------------------------------
@dataclass(frozen=True)
class Execute:
    label: str

@dataclass(frozen=True)
class Terminate:
    pass

@dataclass(frozen=True)
class ReloadCatalog:
    pass

Effect = Union[Execute, Terminate, ReloadCatalog]
Effects = Tuple[Effect, ...]

# -------------------------------------------------
# Transitions
# -------------------------------------------------
def _refilter(state: MenuState, text: str) -> MenuState:
    candidates = filter_candidates(text, state.catalog, state.max_entries,
                                   case_sensitive=state.case_sensitive)
    return replace(state, query=text, candidates=tuple(candidates),
                   selected_index=0, display_start_index=0, error="")

def _move(state: MenuState, delta: int) -> MenuState:
    n = len(state.candidates)
    if n == 0 or delta == 0:
        return state
    index = state.selected_index + delta
    if index >= n:
        index = 0
    elif index < 0:
        index = n - 1
    start = state.display_start_index
    if index < start:
        start = index
    elif index >= start + state.max_entries:
        start = max(0, index - (state.max_entries - 1))
    return replace(state, selected_index=index, display_start_index=start)

def _scroll(state: MenuState, delta: int) -> MenuState:
    start = state.display_start_index + delta
    start = max(0, min(start, state.max_display_start))
    if start == state.display_start_index:
        return state
    return replace(state, display_start_index=start)

def _commit(state: MenuState, slot: Optional[int]) -> Effects:
    if slot is None:
        label = state.selected()
    elif 0 <= slot < state.max_entries:
        index = state.display_start_index + slot
        label = state.candidates[index] if index < len(state.candidates) else None
    else:
        label = None
    return (Execute(label),) if label else ()

def update(state: MenuState, event: Event) -> Tuple[MenuState, Effects]:
    if isinstance(event, InputChanged):
        return _refilter(state, event.text), ()
    if isinstance(event, Move):
        return _move(state, event.delta), ()
    if isinstance(event, Scroll):
        return _scroll(state, event.delta), ()
    if isinstance(event, Commit):
        return state, _commit(state, event.slot)
    if isinstance(event, Cancel):
        return state, (Terminate(),)
    if isinstance(event, Refresh):
        return state, (ReloadCatalog(),)
    if isinstance(event, CatalogLoaded):
        return _refilter(replace(state, catalog=tuple(event.entries)), state.query), ()
    if isinstance(event, LaunchFailed):
        return replace(state, error=event.message), ()
    raise TypeError(f"unknown event: {event!r}")

# -------------------------------------------------
# Driver
# -------------------------------------------------
class Session:
    """
    Owns the menu state on the UI thread and carries out effects.

    `on_change(state)` is called after every event, `on_terminate()` once
    the launcher is done (successful launch or cancel).
    """
    def __init__(self, search_paths: Sequence[str], max_entries: int,
                 case_sensitive: bool = False, dedupe: bool = True,
                 loader: Callable[..., List[CatalogEntry]] = load_catalog,
                 spawn: Optional[Callable[[str], None]] = None,
                 on_change: Optional[Callable[[MenuState], None]] = None,
                 on_terminate: Optional[Callable[[], None]] = None):
        self.search_paths = list(search_paths)
        self.dedupe = dedupe
        self._loader = loader
        self._spawn = spawn
        self._on_change = on_change
        self._on_terminate = on_terminate
        self.terminated = False
        self.state = initial_state(self._load(), max_entries, case_sensitive)

    @classmethod
    def from_settings(cls, settings, **kwargs) -> "Session":
        return cls(settings.search_paths, settings.max_entries,
                   case_sensitive=settings.case_sensitive,
                   dedupe=settings.dedupe_entries, **kwargs)

    def _load(self) -> List[CatalogEntry]:
        return self._loader(self.search_paths, dedupe=self.dedupe)

    def send(self, event: Event) -> MenuState:
        self.state, effects = update(self.state, event)
        pending = list(effects)
        while pending:
            effect = pending.pop(0)
            if isinstance(effect, Execute):
                result = dispatch(effect.label, spawn=self._spawn)
                if result.action == "terminate":
                    self._terminate()
                elif result.action == "error":
                    self.state, more = update(self.state, LaunchFailed(result.message))
                    pending.extend(more)
            elif isinstance(effect, ReloadCatalog):
                self.state, more = update(self.state, CatalogLoaded(tuple(self._load())))
                pending.extend(more)
            elif isinstance(effect, Terminate):
                self._terminate()
        if self._on_change:
            self._on_change(self.state)
        return self.state

    def _terminate(self) -> None:
        if self.terminated:
            return
        self.terminated = True
        if self._on_terminate:
            self._on_terminate()
