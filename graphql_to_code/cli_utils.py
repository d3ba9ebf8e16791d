"""
CLI utilities for header parsing and command line reconstruction.
"""

from __future__ import annotations

from pathlib import Path

import click

PROG_NAME = "graphql_to_code"

# Options whose values may carry credentials
MASKED_OPTIONS = {"headers"}


def parse_headers(headers: tuple[str, ...] | list[str]) -> dict[str, str]:
    """
    Parse "Key: Value" strings into a header mapping.

    Only the first colon separates key from value, so values may contain
    colons. A repeated key keeps its last value.

    Raises:
        click.BadParameter: If a header has no colon or an empty key
    """
    parsed: dict[str, str] = {}
    for header in headers:
        key, sep, value = header.partition(":")
        key = key.strip()
        if not sep or not key:
            raise click.BadParameter(f"Header must be of the form 'Key: Value', got {header!r}", param_hint="--headers")
        parsed[key] = value.strip()
    return parsed


def _format_value(value) -> str:
    if isinstance(value, (str, Path)):
        path_obj = Path(str(value))
        return path_obj.name if path_obj.exists() else str(value)
    return str(value)


def reconstruct_command_line(click_command: click.Command) -> str:
    """
    Reconstruct command line from current Click context using introspection.

    Header values are masked.

    Args:
        click_command: Click command object for introspection

    Returns:
        Reconstructed command line string
    """
    try:
        ctx = click.get_current_context()
        cli_args = ctx.params
    except RuntimeError:
        return PROG_NAME

    if not cli_args:
        return PROG_NAME

    options = []

    for param in click_command.params:
        param_name = param.name
        if param_name not in cli_args:
            continue

        value = cli_args[param_name]
        if not value or not isinstance(param, click.Option):
            continue

        if value == param.default:
            continue

        flag = param.opts[0] if param.opts else f"--{param_name}"
        values = value if isinstance(value, (tuple, list)) else [value]
        for item in values:
            if param_name in MASKED_OPTIONS:
                key = str(item).partition(":")[0].strip()
                formatted = f'"{key}: ***"'
            else:
                formatted = _format_value(item)
            options.extend([flag, formatted])

    return " ".join([PROG_NAME, *options])
