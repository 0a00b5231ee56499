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
# runmenu/core/arith.py
"""
Single binary operation calculator for the search field.

Only one of + - * / is ever applied: operators are tried in that order and
the input is split at the first occurrence of the operator. No precedence,
no parentheses, no chains.
"""
from __future__ import annotations
import re
from typing import Callable, Optional, Tuple

import numpy as np

ANSWER_PREFIX = "Answer: "

# plain decimal literal; float() alone would also take "inf", "nan" and "1_000"
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_WHITESPACE_RE = re.compile(r"\s+")

def _parse_number(s: str) -> Optional[float]:
    if not _NUMBER_RE.fullmatch(s):
        return None
    return float(s)

def _split_operands(text: str, op: str, min_pos: int = 0) -> Optional[Tuple[float, float]]:
    pos = text.find(op)
    if pos < min_pos:
        return None
    left = _parse_number(text[:pos])
    right = _parse_number(text[pos + 1:])
    if left is None or right is None:
        return None
    return left, right

def _div(a: float, b: float) -> Optional[float]:
    return a / b if b != 0 else None

# (operator, first allowed split position, operation)
# a leading "-" is a sign, so subtraction only splits after position 0
_OPERATIONS: Tuple[Tuple[str, int, Callable[[float, float], Optional[float]]], ...] = (
    ("+", 0, lambda a, b: a + b),
    ("-", 1, lambda a, b: a - b),
    ("*", 0, lambda a, b: a * b),
    ("/", 0, _div),
)

def evaluate(text: str) -> Optional[float]:
    """
    Evaluate `text` as `<number> <op> <number>`; None when it is not one.

    >>> evaluate("2 + 3")
    5.0
    >>> evaluate("-5+3")
    -2.0
    >>> evaluate("10/0") is None
    True
    """
    expr = _WHITESPACE_RE.sub("", text or "")
    for op, min_pos, fn in _OPERATIONS:
        operands = _split_operands(expr, op, min_pos)
        if operands is None:
            continue
        result = fn(*operands)
        if result is not None:
            return result
    return None

def format_number(value: float) -> str:
    """
    Positional notation, never an exponent, with the fewest digits that
    still round-trip: "5", "2.5", "0.0000001", "10000000000000000".
    """
    return np.format_float_positional(value, unique=True, trim="-")

def answer_label(value: float) -> str:
    return ANSWER_PREFIX + format_number(value)

def is_answer(label: str) -> bool:
    return label.startswith(ANSWER_PREFIX)
