from __future__ import annotations
from enum import Enum
from typing import List
from polynomial import Polynomial
from solver import ReportKind, RootReport
from floats import format_number

ALL_SENTINEL = "ALL"
NONE_SENTINEL = "NONE"
UNSUPPORTED_SENTINEL = "UNSUPPORTED"


class OutputMode(Enum):
    INTERACTIVE = "interactive"
    MACHINE = "machine"


def format_polynomial(p: Polynomial) -> str:
    return p.to_string()


def format_report(report: RootReport, mode: OutputMode = OutputMode.INTERACTIVE) -> str:
    """Render a root report.

    Interactive mode prints one root per line with a "(mul. N)" suffix for
    repeated roots. Machine mode prints space-separated value:multiplicity
    pairs, or a single sentinel token.
    """
    if mode is OutputMode.MACHINE:
        return _format_machine(report)
    if report.kind is ReportKind.ALL_REALS:
        return "All real numbers are roots"
    if report.kind is ReportKind.UNSUPPORTED:
        return f"Roots could not be determined: {report.reason}"
    if report.kind is ReportKind.NO_ROOTS or not report.roots:
        return "No real roots"
    lines: List[str] = [f"x = {r}" for r in report.roots]
    return "\n".join(lines)


def _format_machine(report: RootReport) -> str:
    if report.kind is ReportKind.ALL_REALS:
        return ALL_SENTINEL
    if report.kind is ReportKind.UNSUPPORTED:
        return UNSUPPORTED_SENTINEL
    if not report.roots:
        return NONE_SENTINEL
    return " ".join(f"{format_number(r.value)}:{r.multiplicity}" for r in report.roots)
