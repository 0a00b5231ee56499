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
# runmenu/log.py
from __future__ import annotations
import logging
import os
from typing import Optional, Union

_ENV_LEVEL = "RUNMENU_LOG_LEVEL"
_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

def _resolve_level(level: Union[int, str, None]) -> int:
    if level is None:
        level = os.environ.get(_ENV_LEVEL, "WARNING")
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).strip().upper())
    return value if isinstance(value, int) else logging.WARNING

def configure_logging(level: Union[int, str, None] = None,
                      logger_name: Optional[str] = "runmenu") -> logging.Logger:
    """
    Attach a console handler to the `runmenu` logger.
    The level comes from `level`, else $RUNMENU_LOG_LEVEL, else WARNING.
    Calling it again only updates the level.
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(_resolve_level(level))
    if not any(getattr(h, "_runmenu", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._runmenu = True
        logger.addHandler(handler)
    return logger
