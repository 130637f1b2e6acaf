# -*- coding: utf-8 -*-
"""
Interactive readings loop: sentinel, re-prompts, sorting.
"""
import pytest

from dielsim.io.console import ScriptedConsole
from dielsim.models.sample import Reading, validate_reading
from dielsim.workflows.collect import collect_readings


def _collect(*answers):
    con = ScriptedConsole(answers=answers)
    return collect_readings(con), con


def test_immediate_sentinel_gives_empty():
    readings, con = _collect("-1")
    assert readings == []
    assert con.prompts == ["Temperature (°C): "]


def test_readings_sorted_by_temperature():
    readings, _ = _collect("150", "20.5", "25", "10", "100", "40", "-1")
    temps = [r.temperature_C for r in readings]
    assert temps == [25, 100, 150]
    assert all(a <= b for a, b in zip(temps, temps[1:]))
    assert readings[0] == Reading(25, 10.0)


def test_equal_temperatures_kept():
    readings, _ = _collect("50", "2", "50", "3", "-1")
    assert [r.capacitance_pF for r in readings] == [2.0, 3.0]


def test_non_numeric_input_reprompts_and_keeps_earlier():
    readings, con = _collect("25", "10", "abc", "30", "xyz", "30", "12", "-1")
    assert readings == [Reading(25, 10.0), Reading(30, 12.0)]
    assert con.text.count("Invalid input. Please enter a number.") == 2


def test_out_of_range_values_rejected():
    readings, con = _collect("-300", "5", "20", "0", "20", "-4", "20", "4", "-1")
    assert readings == [Reading(20, 4.0)]
    assert con.text.count("Invalid values.") == 3


def test_absolute_zero_is_accepted():
    readings, _ = _collect("-273", "1", "-1")
    assert readings == [Reading(-273, 1.0)]


def test_both_values_on_one_line():
    readings, con = _collect("25 10", "-1")
    assert readings == [Reading(25, 10.0)]
    assert con.prompts == ["Temperature (°C): ", "Temperature (°C): "]


def test_whole_session_on_one_line():
    readings, _ = _collect("120 40 25 10 -1")
    assert readings == [Reading(25, 10.0), Reading(120, 40.0)]


def test_bad_token_drops_rest_of_line():
    readings, con = _collect("abc 30 12", "25", "10", "-1")
    assert readings == [Reading(25, 10.0)]
    assert con.text.count("Invalid input. Please enter a number.") == 1


def test_blank_lines_are_skipped():
    readings, _ = _collect("", "   ", "25", "", "10", "-1")
    assert readings == [Reading(25, 10.0)]


def test_infinite_capacitance_rejected():
    readings, con = _collect("100", "inf", "100", "1e400", "25", "10", "-1")
    assert readings == [Reading(25, 10.0)]
    assert con.text.count("Invalid values.") == 2


def test_end_of_input_stops_like_sentinel():
    readings, _ = _collect("25", "10", "60")
    assert readings == [Reading(25, 10.0)]


@pytest.mark.parametrize(
    "T,C",
    [
        (-274, 1.0),
        (20, 0.0),
        (20, -1.0),
        (20.5, 1.0),
        (20, float("nan")),
        (20, float("inf")),
        (20, 1e400),
        (float("inf"), 1.0),
        (float("nan"), 1.0),
        (10**400, 1.0),
    ],
)
def test_validate_reading_rejects(T, C):
    with pytest.raises(ValueError):
        validate_reading(T, C)
