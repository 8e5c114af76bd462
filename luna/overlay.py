"""Overlay components drawn below or beside the input line."""

from __future__ import annotations

import shutil
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol

from luna.markup import render_ansi


@dataclass
class OverlayContext:
    """Terminal geometry available to overlay components."""

    term_width: int = 80
    term_height: int = 23
    cursor_x: int = 0
    cursor_y: int = 0
    prompt_height: int = 1

    @classmethod
    def for_line(cls, line: str) -> "OverlayContext":
        """Build a context from the current terminal size and the given line."""
        size = shutil.get_terminal_size(fallback=(80, 23))
        return cls(
            term_width=size.columns,
            term_height=size.lines,
            prompt_height=line.count("\n") + 1,
        )


class OverlayPosition(Enum):
    INLINE = auto()
    BLOCK = auto()


class OverlayComponent(Protocol):
    @property
    def position(self) -> OverlayPosition: ...

    def render(self, ctx: OverlayContext) -> str: ...


@dataclass
class SuggestionBox:
    """A bordered box listing suggestions below the input line."""

    items: list[str] = field(default_factory=list)

    @property
    def position(self) -> OverlayPosition:
        return OverlayPosition.BLOCK

    def render(self, ctx: OverlayContext) -> str:
        if not self.items:
            return ""

        max_box_width = max(0, ctx.term_width - 4)
        limit = max(0, max_box_width - 6)
        keep = max(0, max_box_width - 9)
        items = [item[:keep] + "..." if len(item) > limit else item for item in self.items]

        width = max(len(item) for item in items) + 4
        lines = [f"<color_border>┌{'─' * width}┐</color_border>"]
        for item in items:
            padding = max(0, width - len(item) - 1)
            lines.append(
                "<color_border>│</color_border> "
                f"<color_secondary>{item}</color_secondary>"
                f"{' ' * padding}<color_border>│</color_border>"
            )
        lines.append(f"<color_border>└{'─' * width}┘</color_border>")

        return "\r\n" + render_ansi("\r\n".join(lines))


@dataclass
class Tip:
    """A dimmed parenthesised hint shown after the input."""

    text: str
    color_tag: str

    @property
    def position(self) -> OverlayPosition:
        return OverlayPosition.INLINE

    def render(self, ctx: OverlayContext) -> str:
        if not self.text:
            return ""
        body = render_ansi(f"<{self.color_tag}>({self.text})</{self.color_tag}>")
        return f"   \x1b[2m{body}\x1b[0m"


@dataclass
class OverlayManager:
    """Collects components and renders them for one input line."""

    components: list[OverlayComponent] = field(default_factory=list)

    def add(self, component: OverlayComponent) -> None:
        self.components.append(component)

    def render_all(self, line: str) -> str:
        ctx = OverlayContext.for_line(line)
        inline = "".join(
            c.render(ctx) for c in self.components if c.position is OverlayPosition.INLINE
        )
        block = "".join(
            c.render(ctx) for c in self.components if c.position is OverlayPosition.BLOCK
        )
        # Save the cursor, clear below, draw blocks, restore: avoids stale hints.
        return f"{inline}\x1b[s\x1b[J{block}\x1b[u"