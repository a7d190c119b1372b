"""Render a :class:`ResolvedConfiguration` for the user.

The conversion itself happens elsewhere; this shows what it will be
asked to do.  Rich table when available, plain columns otherwise.
"""

from __future__ import annotations

from seedconv.cli.console import escape_markup, output
from seedconv.core.models import FormatIdentity, ResolvedConfiguration


def _describe_format(fmt: FormatIdentity) -> str:
    if fmt.ints is not None:
        return f"{fmt.name} [{fmt.ints.low}-{fmt.ints.high}]"
    if fmt.slip39 is not None:
        groups = ", ".join(str(g) for g in fmt.slip39.groups)
        return f"{fmt.name} ({fmt.slip39.groups_threshold} of: {groups})"
    return fmt.name


def summary_rows(resolved: ResolvedConfiguration) -> list[tuple[str, str]]:
    """Return (label, value) rows describing *resolved*."""
    rows = [
        ("Input", _describe_format(resolved.input_format)),
        ("Output", _describe_format(resolved.output_format)),
        ("Count", str(resolved.count)),
        ("Random", resolved.rng_mode.kind),
        ("Arguments", str(len(resolved.input))),
    ]
    if resolved.is_ur_input:
        rows.append(("UR input", resolved.ur_input_type or "unknown"))
    if resolved.is_ur_output:
        rows.append(("UR output", f"max part length {resolved.max_part_length}"))
    return rows


def _print_plain_summary(rows: list[tuple[str, str]]) -> None:
    for label, value in rows:
        output.print(f"{label:<10} {value}")


def render_summary(resolved: ResolvedConfiguration) -> None:
    rows = summary_rows(resolved)

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_summary(rows)
        return

    table = Table(
        title="seedconv configuration",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Setting", style="bold", min_width=10)
    table.add_column("Value", min_width=20)
    for label, value in rows:
        table.add_row(label, escape_markup(value))
    output.print(table)
