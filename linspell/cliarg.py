# Copyright 2015, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from .argx import arg
from .speller import Verbosity
from typing import Callable

import argparse


def bounded_int(minimum: int) -> Callable[[str], int]:
    def convert(value: str) -> int:
        try:
            number = int(value)
        except ValueError as ex:
            raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from ex
        if number < minimum:
            raise argparse.ArgumentTypeError(f"expected an integer >= {minimum}, got {value!r}")
        return number

    return convert


arg.csv = arg("--csv", help="CSV output", action="store_true", default=False)
arg.format = arg("--format", help="Format string for output, e.g. '{term} {frequency}'")
arg.json = arg("--json", help="Raw json output", action="store_true", default=False)
arg.max_distance = arg(
    "-d",
    "--max-distance",
    type=bounded_int(0),
    help="Maximum edit distance of suggestions (default: 2)",
)
arg.top = arg(
    "-n",
    "--top",
    dest="top_results_limit",
    type=bounded_int(1),
    help="Number of suggestions to show with '--verbosity top' (default: 3)",
)
arg.verbosity = arg(
    "-V",
    "--verbosity",
    choices=[v.value for v in Verbosity],
    help="top: best suggestions of the smallest distance, closest: all of the smallest distance, "
    "all: everything within the maximum distance (default: top)",
)
