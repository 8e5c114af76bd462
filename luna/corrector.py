"""Building "did you mean" corrections for a command line."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from luna.config import LunaConfig
from luna.utils import suggest_commands

OPERATORS = ("|", "&&", "||", ";")


@dataclass(frozen=True)
class MenuOption:
    """One entry of the correction menu; ``command`` is None for cancel."""

    label: str
    command: Optional[str] = None


def split_segments(line: str) -> list[str]:
    """Split a line into trimmed command segments and operator segments."""
    segments: list[str] = []
    current: list[str] = []

    def flush() -> None:
        text = "".join(current).strip()
        if text:
            segments.append(text)
        current.clear()

    pos = 0
    while pos < len(line):
        op = next((o for o in OPERATORS if line.startswith(o, pos)), None)
        if op is None:
            current.append(line[pos])
            pos += 1
        else:
            flush()
            segments.append(op)
            pos += len(op)
    flush()
    return segments


def _char_limit(num_ops: int) -> int:
    if num_ops == 0:
        return 32
    if num_ops == 1:
        return 16
    if num_ops < 5:
        return 8
    return 0


def _split_command(segment: str) -> tuple[str, str]:
    parts = segment.split()
    if len(parts) > 1:
        return parts[0], segment[len(parts[0]):].strip()
    return parts[0], ""


def _label_args(args: str, limit: int) -> str:
    if limit == 0:
        return ""
    if len(args) > limit:
        return f"{args[:limit]}..."
    return args


def build_correction_options(
    line: str,
    config: LunaConfig,
    builtins: Iterable[str],
    aliases: Iterable[str],
    command_exists: Callable[[str], bool],
) -> list[MenuOption]:
    """Return menu options correcting the first unknown command in ``line``.

    The first option cancels. An empty list means there is nothing to offer.
    """
    if not config.corrector_enabled():
        return []

    segments = split_segments(line)
    builtins = list(builtins)
    aliases = list(aliases)

    errors: list[tuple[int, list[str]]] = []
    for index, segment in enumerate(segments):
        if segment in OPERATORS:
            continue
        name = segment.split()[0]
        if command_exists(name):
            continue
        if not config.corrector_min_length() <= len(name) <= config.corrector_max_length():
            continue
        suggestions = suggest_commands(
            name, builtins, aliases, config.corrector_builtins(), config.corrector_system()
        )
        if suggestions:
            errors.append((index, suggestions))

    if not errors:
        return []

    num_ops = sum(1 for segment in segments if segment in OPERATORS)
    char_limit = _char_limit(num_ops)
    err_index, suggestions = errors[0]

    options = [MenuOption("Cancel")]
    for suggested in suggestions:
        labels: list[str] = []
        commands: list[str] = []
        for index, segment in enumerate(segments):
            if segment in OPERATORS:
                labels.append(f"<#E5E510>{segment}</#E5E510>")
                commands.append(segment)
            elif index == err_index:
                _, args = _split_command(segment)
                shown = _label_args(args, char_limit * 2)
                labels.append(
                    f"<color_primary>{suggested}</color_primary> <#888888>{shown}</#888888>"
                )
                commands.append(f"{suggested} {args}" if args else suggested)
            else:
                name, args = _split_command(segment)
                shown = _label_args(args, char_limit)
                labels.append(
                    f"<color_secondary>{name}</color_secondary> <#888888>{shown}</#888888>"
                )
                commands.append(segment)
        options.append(MenuOption(" ".join(labels), " ".join(commands)))
    return options