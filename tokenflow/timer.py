"""Timing of compiler passes."""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import TypeVar

R = TypeVar("R")


def prefix(level: int) -> str:
    """Indentation for output nested ``level`` deep."""
    return "  " * level


def time_operation(show_timing: bool, level: int, op_name: str, op: Callable[[], R]) -> R:
    """Run ``op`` and, if asked, print how long it took in milliseconds."""
    start = time.perf_counter_ns()
    result = op()
    elapsed_us = (time.perf_counter_ns() - start) // 1000
    if show_timing:
        print(f"{prefix(level)}{op_name}: {elapsed_us // 1000}.{elapsed_us % 1000:03} ms")
    return result