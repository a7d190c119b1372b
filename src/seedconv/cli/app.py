"""CLI application entry point for seedconv.

This module is the **sole error boundary** for the entire application.
It catches :class:`~seedconv.exceptions.SeedconvError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Architecture notes
------------------
* No validation logic lives here — parsing produces a
  :class:`~seedconv.core.models.RawParameters` and the core pipeline
  decides everything else.
* This module is the only place that wires infra adapters into the
  core and translates between the domain world and the OS exit code.
"""

from __future__ import annotations

import argparse
import sys

from seedconv.cli import exit_codes
from seedconv.cli.console import configure_logging, console, escape_markup
from seedconv.cli.options import OPTION_TABLE, OptionSpec
from seedconv.core.models import RawParameters
from seedconv.core.pipeline import ValidationPipeline
from seedconv.exceptions import SeedconvError, ValidationError
from seedconv.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _add_option(container: argparse._ActionsContainer, spec: OptionSpec) -> None:
    if spec.repeatable:
        container.add_argument(
            *spec.flags, dest=spec.dest, metavar=spec.metavar, help=spec.help,
            action="append", default=[],
        )
    elif spec.optional_value:
        # Presence only; an attached value is split out by _split_attached_values.
        container.add_argument(
            *spec.flags, dest=spec.dest, help=spec.help,
            action="store_const", const="", default=None,
        )
    else:
        container.add_argument(
            *spec.flags, dest=spec.dest, metavar=spec.metavar, help=spec.help,
        )


def _attached_value(token: str, flags: tuple[str, ...]) -> str | None:
    for flag in flags:
        if flag.startswith("--"):
            if token.startswith(flag + "="):
                return token[len(flag) + 1:]
        elif len(flag) == 2 and token.startswith(flag) and len(token) > 2:
            return token[2:]
    return None


def _split_attached_values(argv: list[str]) -> tuple[list[str], dict[str, str]]:
    """Pull ``--flag=VALUE`` / ``-fVALUE`` forms of optional-value flags out of *argv*.

    An optional value is only bound in its attached form; ``--ur 100``
    leaves ``100`` as positional input.  Returns the argv to hand to
    argparse (with each attached form replaced by the bare flag) and the
    extracted values keyed by ``dest``.  Scanning stops at ``--``.
    """
    specs = [spec for spec in OPTION_TABLE if spec.optional_value]
    remaining: list[str] = []
    values: dict[str, str] = {}
    tokens = iter(argv)
    for token in tokens:
        if token == "--":
            remaining.append(token)
            remaining.extend(tokens)
            break
        for spec in specs:
            value = _attached_value(token, spec.flags)
            if value is not None:
                values[spec.dest] = value
                remaining.append(spec.flags[-1])
                break
        else:
            remaining.append(token)
    return remaining, values


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse *argv* (default ``sys.argv[1:]``), honouring attached optional values."""
    if argv is None:
        argv = sys.argv[1:]
    remaining, values = _split_attached_values(list(argv))
    args = _build_parser().parse_args(remaining)
    for dest, value in values.items():
        setattr(args, dest, value)
    return args


def _build_parser() -> argparse.ArgumentParser:
    """Construct the argument parser from :data:`OPTION_TABLE`."""
    parser = argparse.ArgumentParser(
        prog="seedconv",
        description="Converts cryptographic seeds between various forms.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log each validation step to stderr.",
    )

    sections: dict[str, argparse._ArgumentGroup] = {}
    for spec in OPTION_TABLE:
        if spec.section is None:
            _add_option(parser, spec)
            continue
        if spec.section not in sections:
            sections[spec.section] = parser.add_argument_group(spec.section)
        _add_option(sections[spec.section], spec)

    parser.add_argument(
        "input",
        nargs="*",
        metavar="INPUT",
        help="The input to convert. Read from standard input when omitted "
        "(except for random input, which takes none).",
    )
    return parser


def _raw_parameters(args: argparse.Namespace) -> RawParameters:
    """Freeze the parsed namespace without interpreting any value."""
    return RawParameters(
        count=args.count,
        input_format_name=args.input_format,
        output_format_name=args.output_format,
        ints_low=args.low,
        ints_high=args.high,
        group_specs=tuple(args.groups),
        groups_threshold=args.group_threshold,
        deterministic_seed=args.deterministic,
        is_ur_output=args.ur is not None,
        max_part_length=args.ur or None,
        positional_args=tuple(args.input),
    )


def _build_pipeline() -> ValidationPipeline:
    """Wire the infra adapters into the core pipeline."""
    from seedconv.infra.rng import make_random
    from seedconv.infra.stdin_reader import read_lines
    from seedconv.infra.ur_codec import FoundationURCodec

    return ValidationPipeline(
        ur_codec=FoundationURCodec(),
        input_reader=read_lines,
        random_factory=make_random,
    )


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the seedconv CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    SeedconvError
        When validation fails; :func:`cli` renders it.
    """
    from seedconv.cli.summary import render_summary

    args = _parse_args(argv)
    configure_logging(args.verbose)

    resolved = _build_pipeline().run(_raw_parameters(args))
    render_summary(resolved)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except SeedconvError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape_markup(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape_markup(exc.hint)}")
        if isinstance(exc, ValidationError):
            sys.exit(exit_codes.VALIDATION_ERROR)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape_markup(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
