"""Validated console input helpers."""

from __future__ import annotations

import click


def read_line(prompt: str) -> str:
    """Prompt once and return the trimmed line (may be empty)."""
    value = click.prompt(prompt, default="", show_default=False, prompt_suffix="")
    return value.strip()


def read_int(prompt: str) -> int:
    """Prompt until the user enters something that parses as an integer."""
    while True:
        raw = read_line(prompt)
        try:
            return int(raw)
        except ValueError:
            click.echo("Please enter a valid integer.")
