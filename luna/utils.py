"""Command-line helpers: alias expansion, command suggestions and globbing."""

from __future__ import annotations

import glob
import os
from pathlib import PurePath
from typing import Iterable, Iterator, Mapping

MAX_SUGGESTION_DISTANCE = 2
MAX_SUGGESTIONS = 3
_GLOB_CHARS = ("*", "?", "[")


def expand_aliases(line: str, aliases: Mapping[str, str]) -> str:
    """Replace the first space-separated word of a line when it is an alias."""
    first, sep, rest = line.partition(" ")
    replacement = aliases.get(first)
    if replacement is None:
        return line
    return f"{replacement} {rest}" if sep else replacement


def damerau_levenshtein(a: str, b: str) -> int:
    """Return the (unrestricted) Damerau-Levenshtein distance between two strings."""
    a_len, b_len = len(a), len(b)
    if not a_len:
        return b_len
    if not b_len:
        return a_len

    max_dist = a_len + b_len
    dist = [[0] * (b_len + 2) for _ in range(a_len + 2)]
    dist[0][0] = max_dist
    for i in range(a_len + 1):
        dist[i + 1][0] = max_dist
        dist[i + 1][1] = i
    for j in range(b_len + 1):
        dist[0][j + 1] = max_dist
        dist[1][j + 1] = j

    last_row: dict[str, int] = {}
    for i, a_char in enumerate(a, start=1):
        last_match_col = 0
        for j, b_char in enumerate(b, start=1):
            k = last_row.get(b_char, 0)
            col = last_match_col
            cost = 1
            if a_char == b_char:
                cost = 0
                last_match_col = j
            dist[i + 1][j + 1] = min(
                dist[i][j] + cost,
                dist[i + 1][j] + 1,
                dist[i][j + 1] + 1,
                dist[k][col] + (i - k - 1) + 1 + (j - col - 1),
            )
        last_row[a_char] = i
    return dist[a_len + 1][b_len + 1]


def _path_executables() -> Iterator[str]:
    for directory in os.environ.get("PATH", "").split(":"):
        try:
            with os.scandir(directory) as entries:
                for entry in entries:
                    yield entry.name
        except OSError:
            continue


def suggest_commands(
    name: str,
    builtins: Iterable[str],
    aliases: Iterable[str],
    include_builtins: bool,
    include_system: bool,
) -> list[str]:
    """Return up to three known commands within edit distance 2 of ``name``.

    Results are ordered by distance, then alphabetically.
    """
    possible: set[str] = set()
    if include_builtins:
        possible.update(builtins)
        possible.update(aliases)
    if include_system:
        possible.update(_path_executables())

    scored = sorted(
        (distance, command)
        for command in possible
        if (distance := damerau_levenshtein(name, command)) <= MAX_SUGGESTION_DISTANCE
    )
    return [command for _, command in scored[:MAX_SUGGESTIONS]]


def expand_braces(text: str) -> list[str]:
    """Expand the first ``{a,b}`` group (recursively) into every alternative."""
    start = text.find("{")
    if start < 0:
        return [text]
    depth = 0
    for offset, char in enumerate(text[start:]):
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                end = start + offset
                prefix, inside, suffix = text[:start], text[start + 1 : end], text[end + 1 :]
                return [
                    expanded
                    for part in inside.split(",")
                    for expanded in expand_braces(f"{prefix}{part}{suffix}")
                ]
    return [text]


def _expand_glob(item: str, cwd: str) -> list[str]:
    pattern = item if os.path.isabs(item) else f"{cwd}/{item}"
    matches = sorted(glob.glob(pattern, recursive=True, include_hidden=True))
    if not matches:
        return [item]
    if not item.startswith("./"):
        return matches
    base = PurePath(cwd)
    results = []
    for match in matches:
        path = PurePath(match)
        if path.is_relative_to(base):
            results.append(f"./{path.relative_to(base).as_posix()}")
        else:
            results.append(match)
    return results


def expand_paths(args: Iterable[str], cwd: str) -> list[str]:
    """Expand braces and glob patterns in arguments, relative to ``cwd``.

    Patterns that match nothing are kept as written; patterns starting with
    ``./`` keep their results relative.
    """
    expanded: list[str] = []
    for arg in args:
        for item in expand_braces(arg):
            if any(char in item for char in _GLOB_CHARS):
                expanded.extend(_expand_glob(item, cwd))
            else:
                expanded.append(item)
    return expanded