# dielsim/physics/dielectric.py
"""
Dielectric constant from measured capacitance.

Parallel-plate model:
    C0  = eps0 * A / t          (vacuum capacitance of the same electrodes)
    eps = C / C0                (relative permittivity, dimensionless)

Units:
    A [mm^2], t [mm], eps0 [pF/mm]  ->  C0 [pF]
    C [pF]

Example (lab pellet): A = 48 mm^2, t = 1.42 mm -> C0 ≈ 0.2992 pF,
so a 10 pF reading gives eps ≈ 33.42.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

import numpy as np

from dielsim.materials.database import MaterialSpec
from dielsim.models.sample import Reading, Sample
from dielsim.utils.constants import EPS0_PF_PER_MM

__all__ = [
    "DomainError",
    "DielectricPoint",
    "vacuum_capacitance",
    "dielectric_constant",
    "compute_all",
    "epsilon_array",
]


class DomainError(ValueError):
    """Geometry or scale outside the physical domain (t <= 0, A <= 0, C0 <= 0)."""


@dataclass(frozen=True, slots=True)
class DielectricPoint:
    temperature_C: int
    capacitance_pF: float
    epsilon: float


def vacuum_capacitance(spec: MaterialSpec) -> float:
    """C0 = eps0 * A / t in pF. Pure function of the sample geometry."""
    if not spec.thickness_mm > 0.0:
        raise DomainError(f"{spec.name}: thickness must be > 0 mm, got {spec.thickness_mm}")
    if not spec.area_mm2 > 0.0:
        raise DomainError(f"{spec.name}: area must be > 0 mm^2, got {spec.area_mm2}")
    return EPS0_PF_PER_MM * spec.area_mm2 / spec.thickness_mm


def dielectric_constant(reading: Reading, C0: float) -> float:
    """eps = C / C0."""
    if not C0 > 0.0:
        raise DomainError(f"vacuum capacitance must be > 0 pF, got {C0}")
    return reading.capacitance_pF / C0


def epsilon_array(sample: Sample, C0: float) -> np.ndarray:
    """eps for every reading of `sample`, in reading order."""
    if not C0 > 0.0:
        raise DomainError(f"vacuum capacitance must be > 0 pF, got {C0}")
    return sample.capacitances() / C0


def compute_all(sample: Sample, C0: float | None = None) -> List[DielectricPoint]:
    """
    One (T, C, eps) triple per reading, preserving the (temperature-sorted)
    input order. C0 defaults to vacuum_capacitance(sample.spec).
    """
    if C0 is None:
        C0 = vacuum_capacitance(sample.spec)
    eps = epsilon_array(sample, C0)
    return [
        DielectricPoint(r.temperature_C, r.capacitance_pF, float(e))
        for r, e in zip(sample.readings, eps)
    ]
