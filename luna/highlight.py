"""Syntax highlighting of the command line as it is typed."""

from __future__ import annotations

import os
import shutil
from typing import Mapping, Optional, Protocol, Sequence

from luna.config import LunaConfig

C_CMD = "\x1b[1;36m"
C_FLAG = "\x1b[38;5;208m"
C_STR = "\x1b[32m"
C_NUM = "\x1b[33m"
C_BOOL = "\x1b[35m"
C_OP = "\x1b[1;33m"
C_ERR = "\x1b[31m"
C_RESET = "\x1b[0m"

OPERATORS = ("&&", "||", "|", ";", ">>", ">", "<")
_QUOTES = ('"', "'")


class _Flag(Protocol):
    name: str
    short: Optional[str]


def _operator_at(line: str, pos: int) -> Optional[str]:
    return next((op for op in OPERATORS if line.startswith(op, pos)), None)


class SyntaxHighlighter:
    """Colours commands, flags, strings, numbers, booleans and operators.

    ``commands`` maps each built-in command name to its flags; each flag has
    a long ``name`` and an optional single-character ``short``.
    """

    def __init__(
        self,
        commands: Mapping[str, Sequence[_Flag]],
        config: Optional[LunaConfig] = None,
        aliases: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.commands = dict(commands)
        self.config = config if config is not None else LunaConfig()
        self.aliases = dict(aliases or {})

    def command_exists(self, name: str) -> bool:
        """Tell whether a name is a built-in, an alias, a path or on PATH."""
        if name in self.commands or name in self.aliases:
            return True
        if name.startswith(("./", "/")):
            return os.path.exists(name)
        return bool(name) and shutil.which(name) is not None

    def _flag_is_invalid(self, line: str, end: int, word: str) -> bool:
        command = next(
            (
                w
                for w in reversed(line[:end].split())
                if self.command_exists(w) and not w.startswith("-")
            ),
            None,
        )
        if command is None or command not in self.commands:
            return False
        flags = self.commands[command]
        if word.startswith("--"):
            return not any(f.name == word[2:] for f in flags)
        return any(not any(f.short == c for f in flags) for c in word[1:])

    def highlight(self, line: str) -> str:
        """Return the line with ANSI colours applied."""
        config = self.config
        if not line or not config.linter_commands_enabled():
            return line

        strings_on = config.linter_commands_strings()
        out: list[str] = []
        first_word = True
        pos = 0
        length = len(line)

        while pos < length:
            char = line[pos]
            if char.isspace():
                out.append(char)
                pos += 1
                continue

            op = _operator_at(line, pos)
            if op is not None:
                out.append(f"{C_OP}{op}{C_RESET}")
                pos += len(op)
                first_word = True
                continue

            if strings_on and char in _QUOTES:
                close = line.find(char, pos + 1)
                if close >= 0:
                    out.append(f"{C_STR}{line[pos:close + 1]}{C_RESET}")
                    pos = close + 1
                else:
                    out.append(f"{C_ERR}{line[pos:]}{C_RESET}")
                    pos = length
                first_word = False
                continue

            start = pos
            while (
                pos < length
                and not line[pos].isspace()
                and _operator_at(line, pos) is None
                and not (strings_on and line[pos] in _QUOTES)
            ):
                pos += 1
            if pos == start:
                pos += 1
            word = line[start:pos]

            if first_word:
                if config.linter_commands_commands():
                    exists = not word or self.command_exists(word)
                    out.append(C_CMD if exists else C_ERR)
                out.append(word + C_RESET)
                first_word = False
            elif config.linter_commands_flags() and word.startswith("-"):
                colour = C_ERR if self._flag_is_invalid(line, pos, word) else C_FLAG
                out.append(f"{colour}{word}{C_RESET}")
            elif config.linter_commands_boolean() and word in ("true", "false"):
                out.append(f"{C_BOOL}{word}{C_RESET}")
            elif config.linter_commands_number() and all(
                c.isascii() and (c.isdigit() or c == ".") for c in word
            ):
                out.append(f"{C_NUM}{word}{C_RESET}")
            else:
                out.append(word)

        return "".join(out)