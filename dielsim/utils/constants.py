# dielsim/utils/constants.py
from __future__ import annotations

__all__ = ["EPS0", "EPS0_PF_PER_MM", "ABS_ZERO_C"]

# Vacuum permittivity as used on the lab sheet (SI)
EPS0 = 8.85e-12              # [F/m]

# Same value for mm geometry giving C0 in pF: 1e12 pF/F * 1e-3 m/mm
EPS0_PF_PER_MM = EPS0 * 1e12 * 1e-3   # [pF/mm] ≈ 8.85e-3

ABS_ZERO_C = -273            # lowest accepted temperature [°C]
