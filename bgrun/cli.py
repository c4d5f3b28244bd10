from __future__ import annotations

from typing import Optional, Sequence

import click

from . import __version__
from .config import NotifierConfig
from .errors import DetachError
from .launcher import launch
from .logging_config import configure_logging

EXAMPLES = (
    "sleep 10",
    "wget https://example.com/file.zip",
    "make -j4",
)


def print_usage(program_name: str) -> None:
    lines = [
        f"Usage: {program_name} <command> [args...]",
        "",
        "Description:",
        "  Execute a command in the background without blocking the terminal.",
        "  A notification will appear when the command completes.",
        "",
        "Examples:",
    ]
    lines.extend(f"  {program_name} {example}" for example in EXAMPLES)
    click.echo("\n".join(lines), err=True)


@click.command(
    context_settings={
        "ignore_unknown_options": True,
        "allow_interspersed_args": False,
        "help_option_names": ["-h", "--help"],
    }
)
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr")
@click.option("--no-color", is_flag=True, help="Monochrome notification popup")
@click.option("--no-detach", is_flag=True, hidden=True, help="Run in the foreground")
@click.version_option(__version__, prog_name="bgrun")
@click.argument("command", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, no_color: bool, no_detach: bool, command: tuple) -> int:
    """Execute a command in the background without blocking the terminal.

    A notification popup appears in the terminal when the command completes.
    The command is run by the system shell exactly as typed; it is not escaped.
    """
    if not command:
        print_usage(ctx.info_name or "bgrun")
        return 1

    configure_logging(verbose)
    config = NotifierConfig(use_color=not no_color)
    try:
        return launch(list(command), config, detach=not no_detach, verbose=verbose)
    except DetachError as e:
        click.echo(f"Error: Failed to fork process: {e}", err=True)
        return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        rv = cli.main(args=argv, standalone_mode=False)
    except click.ClickException as e:
        e.show()
        return e.exit_code
    except SystemExit as e:
        return int(e.code or 0)
    return rv if isinstance(rv, int) else 0


if __name__ == "__main__":
    raise SystemExit(main())
