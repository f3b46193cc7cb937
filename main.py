#!/usr/bin/env python3
"""
Numero — Command-Line Entry Point
=================================

Converts every input between number and numeral, whichever way applies.

Usage:
    python main.py 1,234                         # → one thousand two hundred thirty-four
    python main.py "twelve million" -s long      # long scale naming
    python main.py -T . 1.000.000                # German style separators
    cat inputs.txt | python main.py -o bare -j 4 # batch from stdin

Defaults can be set with NUMERO_* environment variables or a .env file.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from concurrent.futures import ThreadPoolExecutor
from typing import TextIO

from dotenv import load_dotenv
from pydantic import ValidationError

from numero.config import load_options
from numero.converter import NumeralConverter
from numero.exceptions import NumeroError
from numero.models import Conversion, NamingSystem

# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[31m"
_BLUE = "\033[34m"
_YELLOW = "\033[33m"
_GRAY = "\033[37m"
_RESET = "\033[0m"

# ─── Output Modes ───────────────────────────────────────────────────

_OUTPUT_MODES: dict[str, str] = {
    "descriptive": "descriptive",
    "d": "descriptive",
    "associative": "associative",
    "a": "associative",
    "bare": "bare",
    "b": "bare",
    "suppress": "suppress",
    "s": "suppress",
}

_SCALE_LABELS: dict[NamingSystem, str] = {
    NamingSystem.SHORT_SCALE: "short scale",
    NamingSystem.LONG_SCALE: "long scale",
}

# Fewer inputs per worker than this are not worth a thread
_INPUTS_PER_JOB = 10


# ─── Conversion ─────────────────────────────────────────────────────


def convert_input(converter: NumeralConverter, text: str) -> Conversion:
    """Convert one input, capturing failures as error entries."""
    input_is_number = converter.is_number(text)

    if not input_is_number and not converter.is_numeral(text):
        return Conversion(
            input=text,
            input_is_number=False,
            result=f'"{text}" is neither number nor numeral.',
            error=True,
        )

    try:
        result = converter.convert(text)
    except NumeroError as e:
        return Conversion(input=text, input_is_number=input_is_number, result=str(e), error=True)

    return Conversion(input=text, input_is_number=input_is_number, result=result)


def convert_all(converter: NumeralConverter, inputs: list[str], jobs: int = 1) -> list[Conversion]:
    """Convert all inputs, in parallel for large batches. Order is preserved."""
    workers = max(1, min(len(inputs) // _INPUTS_PER_JOB, jobs))
    if workers == 1:
        return [convert_input(converter, text) for text in inputs]

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(lambda text: convert_input(converter, text), inputs))


# ─── Pretty Printer ─────────────────────────────────────────────────


def print_conversion(conversion: Conversion, mode: str, scale_label: str) -> None:
    """Print one conversion in the chosen output mode."""
    if mode == "suppress":
        return

    if mode == "descriptive":
        if conversion.input_is_number:
            print(f"Number:  {_BLUE}{conversion.input}{_RESET}")
        else:
            print(f"Numeral: {_BLUE}{conversion.input} {_GRAY}({scale_label}){_RESET}")

        if conversion.error:
            print(f"{_RED}Error: {conversion.result}{_RESET}", file=sys.stderr)
        elif conversion.input_is_number:
            print(f"Numeral: {_YELLOW}{conversion.result} {_GRAY}({scale_label}){_RESET}")
        else:
            print(f"Number:  {_YELLOW}{conversion.result}{_RESET}")
        print()

    elif mode == "associative":
        if conversion.error:
            print(
                f"{_BLUE}{conversion.input}{_RESET} = {_RED}Error: {conversion.result}{_RESET}",
                file=sys.stderr,
            )
        else:
            print(f"{_BLUE}{conversion.input}{_RESET} = {_YELLOW}{conversion.result}{_RESET}")

    elif conversion.error:
        print(f"{_RED}Error: {conversion.result}{_RESET}", file=sys.stderr)
    else:
        print(f"{_YELLOW}{conversion.result}{_RESET}")


# ─── Argument Parsing ───────────────────────────────────────────────


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="numero",
        description="Convert between numbers and English numerals.",
    )
    parser.add_argument("inputs", nargs="*", help="Input values (numbers or numerals)")
    parser.add_argument(
        "-s", "--naming-system",
        help="Number naming system; either 'short-scale' ('SS') or 'long-scale' ('LS')",
    )
    parser.add_argument(
        "-o", "--output-mode", choices=sorted(_OUTPUT_MODES),
        help="Either 'descriptive', 'associative', 'bare' or 'suppress'",
    )
    parser.add_argument(
        "-j", "--jobs", type=int, default=1,
        help="Maximum number of parallel jobs for conversion",
    )
    parser.add_argument(
        "-t", "--thousands-separators", action=argparse.BooleanOptionalAction, default=None,
        help="Use thousands separators in conversion to numbers",
    )
    parser.add_argument(
        "-z", "--force-leading-zero", action=argparse.BooleanOptionalAction, default=None,
        help="Say 'zero' before 'point' when the integral part is zero",
    )
    parser.add_argument(
        "--scientific", action=argparse.BooleanOptionalAction, default=None,
        help="Use scientific notation in conversion to numbers where it is shorter",
    )
    parser.add_argument("-T", "--thousands-separator-symbol", help="Thousands separator symbol")
    parser.add_argument("-D", "--decimal-separator-symbol", help="Decimal separator symbol")
    parser.add_argument("--debug-output", action="store_true", help=argparse.SUPPRESS)
    return parser


def _read_stdin_inputs(stream: TextIO) -> list[str]:
    """Read one input per line up to the first empty line."""
    inputs: list[str] = []
    for line in stream:
        line = line.rstrip("\n")
        if not line.strip():
            break
        inputs.append(line)
    return inputs


# ─── Main ────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Run the CLI. Returns the number of failed conversions (capped at 255)."""
    load_dotenv()

    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug_output else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        options = load_options(
            naming_system=args.naming_system,
            thousands_separator_symbol=args.thousands_separator_symbol,
            decimal_separator_symbol=args.decimal_separator_symbol,
            use_thousands_separators=args.thousands_separators,
            force_leading_zero=args.force_leading_zero,
            use_scientific_notation=args.scientific,
        )
    except ValidationError as e:
        for error in e.errors():
            print(f"{_RED}Error: {error['msg']}{_RESET}\n", file=sys.stderr)
        return 1

    from_stdin = not args.inputs
    inputs = _read_stdin_inputs(sys.stdin) if from_stdin else args.inputs
    if not inputs:
        parser.print_usage()
        return 1

    if args.output_mode:
        mode = _OUTPUT_MODES[args.output_mode]
    else:
        mode = "associative" if from_stdin else "descriptive"

    jobs = max(1, min(args.jobs, os.cpu_count() or 1))
    converter = NumeralConverter(options)
    conversions = convert_all(converter, inputs, jobs)

    scale_label = _SCALE_LABELS[options.naming_system]
    for conversion in conversions:
        print_conversion(conversion, mode, scale_label)

    failures = sum(1 for c in conversions if c.error)
    return min(failures, 255)


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
