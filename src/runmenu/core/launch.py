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
# runmenu/core/launch.py
from __future__ import annotations
import logging
import os
import subprocess
from dataclasses import dataclass
from typing import Callable, Literal, Optional

from PyQt5.QtCore import QProcess

from .arith import is_answer

logger = logging.getLogger(__name__)

SHELL = "/bin/sh"

DispatchAction = Literal["ignored", "terminate", "error"]

class LaunchError(RuntimeError):
    """The command interpreter could not be started."""

@dataclass(frozen=True)
class DispatchResult:
    action: DispatchAction
    message: str = ""

def spawn_detached(command: str) -> None:
    """
    Run `command` through the system shell without waiting for it.
    QProcess first, a detached subprocess as fallback.
    """
    ok, _pid = QProcess.startDetached(SHELL, ["-c", command], "")
    if ok:
        return
    try:
        with open(os.devnull, "wb") as devnull:
            subprocess.Popen([SHELL, "-c", command], stdout=devnull, stderr=devnull,
                             stdin=devnull, start_new_session=True)
    except OSError as ex:
        raise LaunchError(f"cannot run {command!r}: {ex}") from ex

def dispatch(label: str, spawn: Optional[Callable[[str], None]] = None) -> DispatchResult:
    """
    Launch the chosen label as a shell command line.

    "Answer: ..." labels are informational and never run. After a
    successful spawn the caller should exit ("terminate"); a failed
    spawn comes back as "error" with a message for the user.
    """
    if not label or not label.strip() or is_answer(label):
        return DispatchResult("ignored")
    spawn = spawn or spawn_detached
    try:
        spawn(label)
    except LaunchError as ex:
        logger.error("Launch failed: %s", ex)
        return DispatchResult("error", str(ex))
    logger.info("Launched %r", label)
    return DispatchResult("terminate")
