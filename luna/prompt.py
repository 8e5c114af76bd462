"""Prompt and error rendering through an optional theme."""

from __future__ import annotations

from typing import Any, Optional, Protocol

from luna.markup import render_ansi

NO_THEME_PROMPT = "\x1b[33m[no theme]\x1b[0m > "
THEME_ERROR_PROMPT = "\x1b[33m[theme error]\x1b[0m > "


class PromptTheme(Protocol):
    def render_prompt(self, context: Any) -> Optional[str]: ...

    def render_error(self, context: Any, message: str) -> Optional[str]: ...


def render_prompt(theme: Optional[PromptTheme], context: Any) -> str:
    """Render the prompt with the theme, or a fallback prompt."""
    if theme is None:
        return NO_THEME_PROMPT
    rendered = theme.render_prompt(context)
    if rendered is None:
        return THEME_ERROR_PROMPT
    return render_ansi(rendered)


def render_error(theme: Optional[PromptTheme], context: Any, err: str) -> str:
    """Render an error message, ending with a newline."""
    if theme is not None:
        rendered = theme.render_error(context, err)
        if rendered is not None:
            ansi = render_ansi(rendered)
            return ansi if ansi.endswith("\n") else ansi + "\n"
    return f"\x1b[31merror:\x1b[0m {err}\n"