# -*- coding: utf-8 -*-
"""
Load temperature/capacitance readings from CSV for batch runs.

CSV schema:
  T_C [°C, integer], C_pF [pF]

Rows go through the same checks as typed input (T >= -273 °C, C > 0).
"""
from __future__ import annotations
from pathlib import Path

import pandas as pd

from dielsim.models.sample import Reading, validate_reading

REQUIRED_COLUMNS = {"T_C", "C_pF"}

def load_readings(csv_path: Path) -> list[Reading]:
    df = pd.read_csv(csv_path)
    missing = REQUIRED_COLUMNS - set(df.columns)
    if missing:
        raise ValueError(f"readings CSV must have T_C,C_pF columns (missing: {sorted(missing)})")
    readings: list[Reading] = []
    for row_no, (T, C) in enumerate(zip(df["T_C"], df["C_pF"]), start=2):
        try:
            readings.append(validate_reading(T, C))
        except (TypeError, ValueError) as exc:
            raise ValueError(f"{csv_path}: line {row_no}: {exc}") from exc
    return sorted(readings, key=lambda r: r.temperature_C)
