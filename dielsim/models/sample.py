# -*- coding: utf-8 -*-
"""
Sample / reading dataclasses.

Fields:
  - Reading:  temperature_C [°C, int], capacitance_pF [pF, > 0]
  - Sample:   spec (MaterialSpec copy) + readings sorted by temperature

A Sample lives for one simulation run; only the rendered report is kept.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable
import math

import numpy as np

from dielsim.materials.database import MaterialSpec
from dielsim.utils.constants import ABS_ZERO_C


@dataclass(frozen=True, slots=True)
class Reading:
    temperature_C: int
    capacitance_pF: float


def validate_reading(temperature_C, capacitance_pF) -> Reading:
    """
    Build a Reading, rejecting non-finite values, T < -273 °C and C <= 0
    with ValueError.
    """
    try:
        T_f = float(temperature_C)
        C = float(capacitance_pF)
    except OverflowError as exc:
        raise ValueError(f"reading out of range: {exc}") from exc
    if not (math.isfinite(T_f) and math.isfinite(C)):
        raise ValueError(f"reading must be finite, got T={temperature_C}, C={capacitance_pF}")
    T = int(T_f)
    if T_f != T:
        raise ValueError(f"temperature must be a whole number of °C, got {temperature_C}")
    if T < ABS_ZERO_C:
        raise ValueError(f"temperature {T} °C is below absolute zero ({ABS_ZERO_C} °C)")
    if not C > 0.0:
        raise ValueError(f"capacitance must be positive, got {C} pF")
    return Reading(temperature_C=T, capacitance_pF=C)


@dataclass(frozen=True, slots=True)
class Sample:
    spec: MaterialSpec
    readings: tuple[Reading, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # stable sort; equal temperatures keep entry order, no dedup
        ordered = tuple(sorted(self.readings, key=lambda r: r.temperature_C))
        object.__setattr__(self, "readings", ordered)

    @classmethod
    def from_readings(cls, spec: MaterialSpec, readings: Iterable[Reading]) -> "Sample":
        return cls(spec=spec, readings=tuple(readings))

    def __len__(self) -> int:
        return len(self.readings)

    @property
    def is_empty(self) -> bool:
        return not self.readings

    def temperatures(self) -> np.ndarray:
        return np.array([r.temperature_C for r in self.readings], dtype=np.int64)

    def capacitances(self) -> np.ndarray:
        return np.array([r.capacitance_pF for r in self.readings], dtype=np.float64)
