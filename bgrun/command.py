from __future__ import annotations

from typing import Sequence


def quote_arg(arg: str) -> str:
    # Only spaces are handled; other shell metacharacters pass through.
    if " " in arg:
        return f'"{arg}"'
    return arg


def build_command(args: Sequence[str]) -> str:
    """Join CLI arguments into one command line for the system shell.

    Tokens containing a space are wrapped in double quotes, everything else is
    inserted verbatim. This is a shell passthrough: globs, pipes and variable
    expansion in the arguments are interpreted by the shell, and nothing is
    escaped beyond the quoting above.
    """
    if not args:
        raise ValueError("at least one argument is required to build a command")
    return " ".join(quote_arg(a) for a in args)
