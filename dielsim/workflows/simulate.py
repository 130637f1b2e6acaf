# -*- coding: utf-8 -*-
"""
One simulation run:
  material → readings → C0, eps(T) → table → Curie estimate → chart → report

run_interactive() asks for the material and readings on the console;
run_batch() takes both as arguments (CSV mode). Both share _analyse().
"""
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from dielsim.io.config import RunConfig
from dielsim.io.console import Console
from dielsim.materials.database import MaterialRegistry, MaterialSpec
from dielsim.models.sample import Reading, Sample
from dielsim.physics.curie import CurieEstimate, estimate_curie
from dielsim.physics.dielectric import DielectricPoint, compute_all, vacuum_capacitance
from dielsim.postprocess.report import (
    format_header, format_table, render_chart, write_report,
)
from dielsim.utils import logger
from dielsim.workflows.collect import collect_readings


@dataclass(frozen=True)
class SimulationResult:
    sample: Sample
    C0_pF: float
    points: tuple[DielectricPoint, ...]
    curie: Optional[CurieEstimate]
    report_path: Optional[Path]


def select_material(registry: MaterialRegistry, console: Console) -> Optional[MaterialSpec]:
    """Numbered pick from the registry; re-asks until 1..N. None on end of input."""
    names = registry.names()
    console.show()
    console.show("Available materials:")
    for i, name in enumerate(names, start=1):
        console.show(f"{i}. {name}")

    text = f"Select a material (1-{len(names)}): "
    while True:
        raw = console.next_token(text)
        if raw is None:
            return None
        try:
            return registry.by_index(int(raw))
        except (ValueError, IndexError):
            console.discard_line()
            text = f"Invalid selection. Please enter a number between 1 and {len(names)}: "


def run_interactive(
    registry: MaterialRegistry,
    console: Console,
    config: RunConfig = RunConfig(),
) -> Optional[SimulationResult]:
    spec = select_material(registry, console)
    if spec is None:
        return None
    logger.debug(f"selected material: {spec.name}")

    readings = collect_readings(console)
    if not readings:
        console.show()
        console.show("No data entered. Returning to main menu.")
        return None
    return _analyse(Sample.from_readings(spec, readings), console, config)


def run_batch(
    registry: MaterialRegistry,
    material: str,
    readings: Iterable[Reading],
    config: RunConfig = RunConfig(),
    console: Console | None = None,
) -> Optional[SimulationResult]:
    """Same pipeline as the menu, no prompts. KeyError for an unknown material."""
    spec = registry.get(material)
    console = Console() if console is None else console
    sample = Sample.from_readings(spec, readings)
    if sample.is_empty:
        logger.warn(f"no readings for {spec.name}; nothing to analyse")
        return None
    return _analyse(sample, console, config)


def _analyse(sample: Sample, console: Console, config: RunConfig) -> SimulationResult:
    spec = sample.spec
    C0 = vacuum_capacitance(spec)
    points = tuple(compute_all(sample, C0))

    console.show()
    console.show("------ RESULTS ------")
    console.show_lines(format_header(spec, C0))
    console.show()
    console.show_lines(format_table(points))

    curie: Optional[CurieEstimate] = None
    if spec.is_ferroelectric:
        curie = estimate_curie(sample, C0)
        console.show()
        if curie is None:
            console.show("Not enough data points to estimate Curie temperature.")
        else:
            console.show(f"Estimated Curie Temperature: {curie.estimated_C}°C")
            console.show(f"Expected Curie Temperature for {spec.name}: {curie.expected_C:.2f}°C")
            console.show(f"Difference: {curie.difference_C:.2f}°C")
    else:
        console.show()
        console.show("Note: This material doesn't have a Curie temperature (non-ferroelectric).")

    console.show()
    console.show_lines(render_chart(points, width=config.chart_width))

    report_path: Optional[Path] = None
    try:
        report_path = write_report(
            sample, points, C0, config.out_dir, suffix=config.report_suffix
        )
    except OSError as exc:
        logger.error(f"could not create file for saving results: {exc}")
        console.show()
        console.show("Error: Could not create file for saving results.")
    else:
        console.show()
        console.show(f"Results saved to '{report_path}'.")

    return SimulationResult(
        sample=sample, C0_pF=C0, points=points, curie=curie, report_path=report_path
    )
