# -*- coding: utf-8 -*-
"""
Main menu of the lab simulator.

States: MAIN_MENU (start, and where every screen returns), four text screens,
SIMULATION, EXIT (terminal). next_state() is the whole transition table;
MenuController.run() performs the side effect for each state.
"""
from __future__ import annotations
from enum import Enum

from dielsim.io.config import RunConfig
from dielsim.io.console import Console
from dielsim.materials.database import MaterialRegistry
from dielsim.utils import logger
from dielsim.workflows.simulate import run_interactive

__all__ = ["MenuState", "next_state", "MenuController", "SCREENS"]


class MenuState(Enum):
    MAIN_MENU = "main"
    THEORY = "theory"
    APPARATUS = "apparatus"
    PROCEDURE = "procedure"
    PRECAUTIONS = "precautions"
    SIMULATION = "simulation"
    EXIT = "exit"


_CHOICES = {
    1: MenuState.THEORY,
    2: MenuState.APPARATUS,
    3: MenuState.PROCEDURE,
    4: MenuState.PRECAUTIONS,
    5: MenuState.SIMULATION,
    6: MenuState.EXIT,
}

MENU_LINES = (
    "",
    "===== Dielectric Constant and Curie Temperature Simulation =====",
    "1. Show Theory",
    "2. Show Apparatus",
    "3. Show Procedure",
    "4. Show Precautions",
    "5. Start Simulation",
    "6. Exit",
)

SCREENS: dict[MenuState, tuple[str, ...]] = {
    MenuState.THEORY: (
        "--- THEORY ---",
        "Dielectric materials are insulating substances where electrostatic fields persist.",
        "The dielectric constant (ε) is the ratio of capacitance with and without the dielectric.",
        "For materials like BaTiO3, ε increases as temperature increases, peaking at Curie temperature.",
        "After Curie temperature, ferroelectricity is lost, and ε decreases.",
    ),
    MenuState.APPARATUS: (
        "--- APPARATUS USED ---",
        "1. Barium Titanate (BaTiO3) Sample",
        "2. Oven with temperature controller",
        "3. Digital capacitance meter",
        "4. RTD sensor for temperature",
        "5. Probe arrangement with aluminum foil",
    ),
    MenuState.PROCEDURE: (
        "--- PROCEDURE ---",
        "1. Mount the sample with probes and aluminum foil",
        "2. Connect probes to the capacitance meter",
        "3. Heat the sample in oven",
        "4. Measure capacitance at different temperatures",
        "5. Calculate ε using ε = C / C0, where C0 = ε0*A/t",
    ),
    MenuState.PRECAUTIONS: (
        "--- PRECAUTIONS ---",
        "1. Probe should touch sample gently.",
        "2. Take small intervals near Curie temperature.",
        "3. Take reading only when oven is OFF.",
    ),
}


def next_state(raw_choice: str | None) -> MenuState:
    """
    Transition out of MAIN_MENU for one input token.
    Non-numeric or out-of-range input stays in MAIN_MENU; None (EOF) exits.
    """
    if raw_choice is None:
        return MenuState.EXIT
    try:
        choice = int(raw_choice.strip())
    except ValueError:
        return MenuState.MAIN_MENU
    return _CHOICES.get(choice, MenuState.MAIN_MENU)


class MenuController:
    def __init__(
        self,
        registry: MaterialRegistry,
        console: Console | None = None,
        config: RunConfig | None = None,
    ) -> None:
        self._registry = registry
        self._console = Console() if console is None else console
        self._config = RunConfig() if config is None else config
        self.state = MenuState.MAIN_MENU
        self.runs = 0

    def run(self) -> int:
        """REPL until choice 6 (or end of input). Returns the exit code."""
        con = self._console
        while self.state is not MenuState.EXIT:
            con.show_lines(MENU_LINES)
            raw = con.next_token("Enter your choice: ")
            self.state = next_state(raw)
            logger.debug(f"menu input {raw!r} -> {self.state.name}")

            if self.state is MenuState.MAIN_MENU:
                con.discard_line()
                if raw is not None and raw.lstrip("+-").isdigit():
                    con.show("Invalid choice. Try again.")
                else:
                    con.show("Invalid input. Please enter a number.")
            elif self.state in SCREENS:
                con.show()
                con.show_lines(SCREENS[self.state])
                con.show()
                self.state = MenuState.MAIN_MENU
            elif self.state is MenuState.SIMULATION:
                run_interactive(self._registry, con, self._config)
                self.runs += 1
                self.state = MenuState.MAIN_MENU

        con.show("Exiting program.")
        return 0
