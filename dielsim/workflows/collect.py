# -*- coding: utf-8 -*-
"""
Interactive entry of (temperature, capacitance) readings.

Loop:
  Temperature (°C): <int>    -1 stops entry
  Capacitance (pF): <float>

Input is read token by token, so "25 10" on one line is a whole reading.
Bad numbers drop the rest of the line; out-of-range values are reported.
Either way the pair is asked for again and accepted readings are kept.
End of input stops like -1.
"""
from __future__ import annotations

from dielsim.io.console import Console
from dielsim.models.sample import Reading, validate_reading
from dielsim.utils import logger

STOP_SENTINEL = -1

_INTRO = "Enter temperature (°C) and capacitance (pF). Type -1 for temperature to stop."
_NOT_A_NUMBER = "Invalid input. Please enter a number."
_OUT_OF_RANGE = "Invalid values. Temperature must be above -273°C and capacitance must be positive."


def collect_readings(console: Console) -> list[Reading]:
    """Prompt until the -1 sentinel; return readings sorted by temperature (may be empty)."""
    console.show()
    console.show(_INTRO)
    readings: list[Reading] = []

    while True:
        raw_T = console.next_token("Temperature (°C): ")
        if raw_T is None:
            break
        try:
            T = int(raw_T)
        except ValueError:
            console.show(_NOT_A_NUMBER)
            console.discard_line()
            continue
        if T == STOP_SENTINEL:
            break

        raw_C = console.next_token("Capacitance (pF): ")
        if raw_C is None:
            break
        try:
            C = float(raw_C)
        except ValueError:
            console.show(_NOT_A_NUMBER)
            console.discard_line()
            continue

        try:
            readings.append(validate_reading(T, C))
        except ValueError as exc:
            logger.debug(f"rejected reading: {exc}")
            console.show(_OUT_OF_RANGE)

    readings.sort(key=lambda r: r.temperature_C)
    logger.debug(f"collected {len(readings)} reading(s)")
    return readings
