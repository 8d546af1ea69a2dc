"""Interactive voting console wiring a model to a bar chart and a table view."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from .model import Model
from .views import BarChartView, TableView

INSTRUCTIONS = (
    "Press 1 to vote for 'Party A'\n"
    "Press 2 to vote for 'Party B'\n"
    "Press 3 to vote for 'Party C'\n"
    "Press 9 to clear all votes \n"
)
PROMPT = "Please vote: "
VALID_CHOICES = frozenset({1, 2, 3, 9})


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def _parse_choice(token: str) -> int | None:
    try:
        return int(token)
    except ValueError:
        return None


def run(stdin: TextIO | None = None, stdout: TextIO | None = None) -> Model:
    """Read votes until the input ends, redrawing both views after each change."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout

    model = Model()
    BarChartView(model, stdout)
    table_view = TableView(model, stdout)
    controller = table_view.controller

    stdout.write(INSTRUCTIONS)
    tokens = _tokens(stdin)
    while True:
        stdout.write(PROMPT)
        stdout.flush()
        token = next(tokens, None)
        if token is None:
            stdout.write("\n")
            break
        choice = _parse_choice(token)
        if choice in VALID_CHOICES:
            controller.handle_event(choice)
        else:
            stdout.write("Invalid user input!\n")
    return model


def main(argv: list[str] | None = None) -> int:
    """Start the voting console on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="patterndemos-voting",
        description="Cast votes and watch two views of the tally update.",
    )
    parser.parse_args(argv)
    try:
        run(sys.stdin, sys.stdout)
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    raise SystemExit(main())