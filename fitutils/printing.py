"""
Terminal output helpers for activity summaries.

Missing values print as a placeholder; nothing here raises on odd input.
"""
from typing import Any

import click

from .const import UNKNOWN
from .processors.coerce import is_missing

LABEL_WIDTH = 27
NUMBER_PLACEHOLDER = f"{'-':>9}"


def format_value(value: Any, spec: str = "", placeholder: str = UNKNOWN) -> str:
    if is_missing(value):
        return placeholder
    if spec:
        try:
            return format(value, spec)
        except (TypeError, ValueError):
            return str(value)
    return str(value)


def echo_line(label: str, value: Any, spec: str = "", placeholder: str = UNKNOWN) -> None:
    click.echo(f"{label + ':':<{LABEL_WIDTH}}{format_value(value, spec, placeholder)}")


def echo_number(label: str, value: Any, spec: str = ">9.2f") -> None:
    echo_line(label, value, spec, placeholder=NUMBER_PLACEHOLDER)


def echo_count(label: str, value: Any) -> None:
    echo_number(label, value, ">9")
