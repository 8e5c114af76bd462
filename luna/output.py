"""Writing rendered markup to the standard streams."""

from __future__ import annotations

import sys

from luna.markup import render_ansi


def print_stdout(content: str) -> None:
    """Render markup and write it to standard output without a newline."""
    if not content:
        return
    sys.stdout.write(render_ansi(content))
    sys.stdout.flush()


def print_stderr(content: str) -> None:
    """Render markup and write it to standard error without a newline."""
    if not content:
        return
    sys.stderr.write(render_ansi(content))
    sys.stderr.flush()


def println_stdout(content: str) -> None:
    """Render markup and write it to standard output, ending with a newline."""
    rendered = render_ansi(content)
    if not rendered.endswith("\n"):
        rendered += "\n"
    sys.stdout.write(rendered)
    sys.stdout.flush()