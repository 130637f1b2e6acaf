# -*- coding: utf-8 -*-
"""
Curie temperature estimate: temperature of the largest eps.

This is a naive peak-pick over the measured points, not a fitted inflection
(Curie-Weiss or otherwise); the estimate can only land on a measured
temperature. Ties keep the first (lowest-temperature) maximum. That rule
comes from scan order only and has no physical meaning.
"""
from __future__ import annotations
from dataclasses import dataclass

import numpy as np

from dielsim.models.sample import Sample
from dielsim.physics.dielectric import epsilon_array

__all__ = ["CurieEstimate", "MIN_POINTS", "estimate_curie"]

MIN_POINTS = 2


@dataclass(frozen=True, slots=True)
class CurieEstimate:
    estimated_C: int
    expected_C: float
    difference_C: float
    epsilon_max: float


def estimate_curie(sample: Sample, C0: float) -> CurieEstimate | None:
    """
    Return None ("insufficient data") for fewer than MIN_POINTS readings.

    Only meaningful for ferroelectric samples; callers branch on
    sample.spec.is_ferroelectric before calling.
    """
    if not sample.spec.is_ferroelectric:
        raise ValueError(f"{sample.spec.name} has no Curie point (non-ferroelectric)")
    if len(sample) < MIN_POINTS:
        return None

    eps = epsilon_array(sample, C0)
    i_max = int(np.argmax(eps))   # first occurrence on ties
    T_est = sample.readings[i_max].temperature_C
    expected = float(sample.spec.curie_temp_C)
    return CurieEstimate(
        estimated_C=T_est,
        expected_C=expected,
        difference_C=abs(T_est - expected),
        epsilon_max=float(eps[i_max]),
    )
