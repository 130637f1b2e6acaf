# -*- coding: utf-8 -*-
"""
Console seam for the interactive parts (menu, material prompt, readings).

Console.prompt() returns None at end of input instead of raising EOFError,
so loops can stop cleanly when stdin is closed or piped.

next_token() reads whitespace-separated tokens, so "25 10" on one line
answers two prompts; discard_line() drops what is left after bad input.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Iterable, Iterator, Optional


@dataclass
class Console:
    read: Callable[[str], str] = input
    write: Callable[[str], None] = print
    _pending: list[str] = field(default_factory=list, init=False, repr=False)

    def prompt(self, text: str) -> Optional[str]:
        try:
            return self.read(text)
        except EOFError:
            return None

    def next_token(self, text: str) -> Optional[str]:
        """Next token of input; blank lines are skipped. None at end of input."""
        while not self._pending:
            line = self.prompt(text)
            if line is None:
                return None
            self._pending = line.split()
        return self._pending.pop(0)

    def discard_line(self) -> None:
        self._pending.clear()

    def show(self, text: str = "") -> None:
        self.write(text)

    def show_lines(self, lines: Iterable[str]) -> None:
        for line in lines:
            self.write(line)


@dataclass
class ScriptedConsole(Console):
    """Feeds canned answers and records output (tests, demos)."""
    answers: Iterable[str] = ()
    output: list[str] = field(default_factory=list)
    prompts: list[str] = field(default_factory=list)
    _it: Iterator[str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._it = iter(self.answers)
        self.read = self._next_answer
        self.write = self.output.append

    def _next_answer(self, text: str) -> str:
        self.prompts.append(text)
        try:
            return next(self._it)
        except StopIteration:
            raise EOFError from None

    @property
    def text(self) -> str:
        return "\n".join(self.output)
