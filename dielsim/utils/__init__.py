# dielsim/utils/__init__.py
from __future__ import annotations
from .constants import EPS0, EPS0_PF_PER_MM, ABS_ZERO_C

__all__ = ["EPS0", "EPS0_PF_PER_MM", "ABS_ZERO_C"]
