#!/usr/bin/env python3
from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional, TextIO
from bounds import root_bound
from coeff_parser import parse_coefficients, parse_line
from errors import PolynomialError
from formatting import OutputMode, format_polynomial, format_report
from polynomial import Polynomial
from solver import find_roots

EXIT_COMMAND = "exit"


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="Real roots of a polynomial",
        epilog="Coefficients go from the highest to the lowest degree. "
        "Put -- before them when the first one starts with '-'.",
    )
    p.add_argument("coefficients", nargs="*", help="Coefficients, e.g. 1 0 -1 for x^2-1")
    mode = p.add_mutually_exclusive_group()
    mode.add_argument("--machine", action="store_true", help="Print value:multiplicity pairs")
    mode.add_argument("--interactive", action="store_true", help="Print human-readable roots")
    p.add_argument("-v", "--verbose", action="store_true", help="Log solver decisions")
    return p


def describe(p: Polynomial, mode: OutputMode) -> str:
    report = find_roots(p)
    if mode is OutputMode.MACHINE:
        return format_report(report, mode)
    lines = [
        f"Polynomial: {format_polynomial(p)}",
        f"Derivative: {format_polynomial(p.derivative())}",
    ]
    bound = root_bound(p)
    if bound is not None:
        lines.append(f"Root bound: {bound:g}")
    lines.append(format_report(report, mode))
    return "\n".join(lines)


def prompt_loop(stdin: TextIO, stdout: TextIO, stderr: TextIO) -> int:
    print("Welcome to the polynomial roots calculator!", file=stdout)
    print(
        "Please type in the coefficients, from the highest to the lowest monomial. "
        f"Type '{EXIT_COMMAND}' to quit.",
        file=stdout,
    )
    while True:
        print("> ", end="", file=stdout, flush=True)
        line = stdin.readline()
        if not line or line.strip() == EXIT_COMMAND:
            return 0
        if not line.strip():
            continue
        try:
            print(describe(parse_line(line), OutputMode.INTERACTIVE), file=stdout)
        except PolynomialError as e:
            print(f"Error: {e}", file=stderr)


def main(
    argv: Optional[List[str]] = None,
    stdin: TextIO = sys.stdin,
    stdout: TextIO = sys.stdout,
    stderr: TextIO = sys.stderr,
) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=stderr,
    )
    tty = stdin.isatty() and stdout.isatty()
    if args.machine:
        mode = OutputMode.MACHINE
    elif args.interactive:
        mode = OutputMode.INTERACTIVE
    else:
        mode = OutputMode.INTERACTIVE if stdout.isatty() else OutputMode.MACHINE

    try:
        if args.coefficients:
            p = parse_coefficients(args.coefficients)
        elif tty:
            return prompt_loop(stdin, stdout, stderr)
        else:
            p = parse_line(stdin.read())
        print(describe(p, mode), file=stdout)
    except PolynomialError as e:
        print(f"Error: {e}", file=stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
