# dielsim/io/config.py
# -*- coding: utf-8 -*-
"""
YAML → RunConfig helpers. Every key is optional; no file means defaults.

Schema (example):

output:
  dir: reports
  suffix: _results.txt
chart:
  width: 50
verbose: false
materials:
  - { name: Lead Titanate, area_mm2: 48, thickness_mm: 1.0, curie_temp_C: 490 }
  - { name: Alumina, area_mm2: 48, thickness_mm: 1.42 }     # no Curie point
"""
from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any
import math

import yaml

from dielsim.materials.database import (
    MaterialRegistry, MaterialSpec, NO_CURIE_POINT, default_registry,
)
from dielsim.postprocess.report import CHART_WIDTH, REPORT_SUFFIX

_TOP_LEVEL_KEYS = {"output", "chart", "verbose", "materials"}


@dataclass(frozen=True)
class RunConfig:
    out_dir: Path = Path(".")
    report_suffix: str = REPORT_SUFFIX
    chart_width: int = CHART_WIDTH
    verbose: bool = False
    materials: tuple[MaterialSpec, ...] = ()
    path: Path | None = None

    def registry(self, base: MaterialRegistry | None = None) -> MaterialRegistry:
        base = default_registry() if base is None else base
        return base.with_materials(self.materials) if self.materials else base


def load_config(path: Path) -> RunConfig:
    try:
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ValueError(f"invalid YAML: {exc}") from exc
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("Top-level YAML must be a mapping")
    _validate_minimum(data)

    out = data.get("output") or {}
    chart = data.get("chart") or {}
    raw_width = _number(chart.get("width", CHART_WIDTH), "chart.width")
    if raw_width <= 0 or raw_width != int(raw_width):
        raise ValueError(f"chart.width must be a positive whole number, got {raw_width}")
    width = int(raw_width)

    return RunConfig(
        out_dir=Path(out.get("dir", ".")),
        report_suffix=str(out.get("suffix", REPORT_SUFFIX)),
        chart_width=width,
        verbose=bool(data.get("verbose", False)),
        materials=tuple(_parse_material(row) for row in data.get("materials") or []),
        path=Path(path),
    )


def _parse_material(row: Any) -> MaterialSpec:
    if not isinstance(row, dict):
        raise ValueError(f"materials entries must be mappings, got {row!r}")
    for key in ("name", "area_mm2", "thickness_mm"):
        if key not in row:
            raise ValueError(f"material entry {row!r} is missing '{key}'")
    name = str(row["name"])
    spec = MaterialSpec(
        name=name,
        area_mm2=_number(row["area_mm2"], f"{name}.area_mm2"),
        thickness_mm=_number(row["thickness_mm"], f"{name}.thickness_mm"),
        curie_temp_C=_number(row.get("curie_temp_C", NO_CURIE_POINT), f"{name}.curie_temp_C"),
    )
    if spec.area_mm2 <= 0 or spec.thickness_mm <= 0:
        raise ValueError(f"material '{spec.name}': area_mm2 and thickness_mm must be > 0")
    return spec


def _number(value: Any, what: str) -> float:
    """float(value), or ValueError for null, text, inf and nan."""
    try:
        x = float(value)
    except (TypeError, ValueError, OverflowError) as exc:
        raise ValueError(f"{what} must be a number, got {value!r}") from exc
    if not math.isfinite(x):
        raise ValueError(f"{what} must be finite, got {value!r}")
    return x


def _validate_minimum(cfg: dict) -> None:
    unknown = set(cfg) - _TOP_LEVEL_KEYS
    if unknown:
        raise ValueError(f"Unknown top-level key(s): {', '.join(sorted(unknown))}")
    for key in ("output", "chart"):
        if cfg.get(key) is not None and not isinstance(cfg[key], dict):
            raise ValueError(f"'{key}' must be a mapping")
