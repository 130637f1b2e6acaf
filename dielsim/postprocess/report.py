# -*- coding: utf-8 -*-
"""
Report rendering for a finished run:
  - format_header(): material, pellet dimensions, C0
  - format_table():  T / C / eps listing, two decimals, tab separated
  - render_chart():  ASCII bar chart of eps vs T
  - write_report():  header + table to <Name_With_Underscores>_results.txt

Everything returns lines (list[str]); printing is left to the caller.
"""
from __future__ import annotations
from pathlib import Path
from typing import Sequence

import numpy as np

from dielsim.materials.database import MaterialSpec
from dielsim.models.sample import Sample
from dielsim.physics.dielectric import DielectricPoint

__all__ = [
    "REPORT_SUFFIX",
    "CHART_WIDTH",
    "format_header",
    "format_table",
    "render_chart",
    "report_filename",
    "write_report",
]

REPORT_SUFFIX = "_results.txt"
CHART_WIDTH = 50

_RULE = "-" * 56


def format_header(spec: MaterialSpec, C0: float) -> list[str]:
    side = spec.side_mm
    return [
        f"Material: {spec.name}",
        f"Sample dimensions: {side:.2f} mm × {side:.2f} mm × {spec.thickness_mm:.2f} mm",
        f"Vacuum capacitance (C0): {C0:.4f} pF",
    ]


def format_table(points: Sequence[DielectricPoint]) -> list[str]:
    lines = [
        "Temp (°C)\tCapacitance (pF)\tDielectric Constant (ε)",
        _RULE,
    ]
    for p in points:
        lines.append(f"{p.temperature_C}\t\t{p.capacitance_pF:.2f}\t\t{p.epsilon:.2f}")
    return lines


def _bar_lengths(eps: np.ndarray, width: int) -> np.ndarray:
    eps_max = float(eps.max()) if eps.size else 0.0
    if eps_max <= 0.0:
        # unreachable for C > 0, but never divide by zero
        return np.zeros(eps.shape, dtype=int)
    return np.rint(eps * width / eps_max).astype(int).clip(min=0)


def render_chart(points: Sequence[DielectricPoint], width: int = CHART_WIDTH) -> list[str]:
    """One line per point: '  T°C | ##### (eps)'. Longest bar is `width` chars."""
    if width <= 0:
        raise ValueError("chart width must be > 0")
    if not points:
        return ["No data to display graph."]

    eps = np.array([p.epsilon for p in points], dtype=np.float64)
    bars = _bar_lengths(eps, width)

    lines = [
        "ASCII Graph: Dielectric Constant vs Temperature",
        "-" * 47,
    ]
    for p, n in zip(points, bars):
        lines.append(f"{p.temperature_C:4d}°C | {'#' * int(n)} ({p.epsilon:.2f})")
    return lines


def report_filename(name: str, suffix: str = REPORT_SUFFIX) -> str:
    """'Barium Titanate' -> 'Barium_Titanate_results.txt'."""
    return name.replace(" ", "_") + suffix


def write_report(
    sample: Sample,
    points: Sequence[DielectricPoint],
    C0: float,
    out_dir: Path | str = ".",
    *,
    suffix: str = REPORT_SUFFIX,
) -> Path:
    """
    Write header + table, overwriting any previous report of the same name.
    Raises OSError if the file cannot be created; nothing is written then.
    """
    path = Path(out_dir) / report_filename(sample.spec.name, suffix)
    lines = ["Dielectric Constant Measurement Results"]
    lines += format_header(sample.spec, C0)
    lines.append("")
    lines += format_table(points)
    with open(path, "w", encoding="utf-8") as f:
        f.write("\n".join(lines) + "\n")
    return path
