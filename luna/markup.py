"""Rich-text markup for terminal output.

Supported syntax::

    <red>text</red>            named foreground colour
    <#ff4444>text</#ff4444>    hex foreground colour
    <#ff4444>text</color>      </color> pops the last foreground colour
    <bg:red>text</bg:red>      named background colour
    <bg:#ff4444>text</bg>      hex background colour
    <reset>                    full reset
    <bold>, <italic>, <underline>, <strike>
    <gradient from=#rrggbb to=#rrggbb>text</gradient>

Tags that are not recognised are kept as literal text.  Colour names that
are not in the palette are looked up in the theme variables first, both as
given and with a ``color_`` prefix.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Mapping, Optional

RGB = tuple[int, int, int]

ANSI_RESET = "\x1b[0m"
ANSI_BOLD = "\x1b[1m"
ANSI_ITALIC = "\x1b[3m"
ANSI_UNDERLINE = "\x1b[4m"
ANSI_STRIKE = "\x1b[9m"
ANSI_BOLD_OFF = "\x1b[22m"
ANSI_ITALIC_OFF = "\x1b[23m"
ANSI_UNDERLINE_OFF = "\x1b[24m"
ANSI_STRIKE_OFF = "\x1b[29m"
ANSI_DEFAULT_FG = "\x1b[39m"
ANSI_DEFAULT_BG = "\x1b[49m"

_PALETTE: dict[str, RGB] = {
    "black": (0, 0, 0),
    "red": (205, 49, 49),
    "green": (13, 188, 121),
    "yellow": (229, 229, 16),
    "blue": (36, 114, 200),
    "magenta": (188, 63, 188),
    "cyan": (17, 168, 205),
    "white": (229, 229, 229),
    "orange": (255, 165, 0),
    "pink": (255, 105, 180),
    "purple": (148, 0, 211),
    "gray": (128, 128, 128),
    "grey": (128, 128, 128),
    "brightred": (241, 76, 76),
    "brightgreen": (35, 209, 139),
    "brightyellow": (245, 245, 67),
    "brightblue": (59, 142, 234),
    "brightmagenta": (214, 112, 214),
    "brightcyan": (41, 184, 219),
    "brightwhite": (255, 255, 255),
}

_STRIKE_NAMES = frozenset({"strike", "strikethrough", "stroke"})
_HEX_BYTE = re.compile(r"\+?[0-9a-fA-F]+")

_theme_vars: dict[str, str] = {}


def _fg(color: RGB) -> str:
    r, g, b = color
    return f"\x1b[38;2;{r};{g};{b}m"


def _bg(color: RGB) -> str:
    r, g, b = color
    return f"\x1b[48;2;{r};{g};{b}m"


def named_color(name: str) -> Optional[RGB]:
    """Return the RGB value of a palette colour name, case-insensitively."""
    return _PALETTE.get(_ascii_lower(name))


def _ascii_lower(text: str) -> str:
    return "".join(c.lower() if c.isascii() else c for c in text)


def _hex_byte(text: str) -> Optional[int]:
    if not _HEX_BYTE.fullmatch(text):
        return None
    value = int(text, 16)
    return value if value <= 255 else None


def parse_hex_color(text: str) -> Optional[RGB]:
    """Parse ``#rrggbb`` or ``#rgb`` (leading ``#`` optional) into RGB."""
    digits = text.lstrip("#")
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    if len(digits) != 6:
        return None
    parts = [_hex_byte(digits[i : i + 2]) for i in (0, 2, 4)]
    if any(p is None for p in parts):
        return None
    return (parts[0], parts[1], parts[2])  # type: ignore[return-value]


def update_theme_vars(variables: Mapping[str, str]) -> None:
    """Replace the theme variables used to resolve colour names."""
    global _theme_vars
    _theme_vars = dict(variables)


def _color_from_value(value: str) -> Optional[RGB]:
    return parse_hex_color(value) or named_color(value)


def _resolve_color(text: str) -> Optional[RGB]:
    if text.startswith("#"):
        return parse_hex_color(text)
    value = _theme_vars.get(text)
    if value is not None:
        color = _color_from_value(value)
        if color is not None:
            return color
    if not text.startswith("color_"):
        value = _theme_vars.get(f"color_{text}")
        if value is not None:
            color = _color_from_value(value)
            if color is not None:
                return color
    return named_color(text)


# ─── Tokens ──────────────────────────────────────────────────────────────────


class _TagKind(Enum):
    FG = auto()
    BG = auto()
    RESET = auto()
    BOLD = auto()
    ITALIC = auto()
    UNDERLINE = auto()
    STRIKE = auto()
    GRADIENT = auto()


class _CloseKind(Enum):
    NAMED = auto()
    COLOR = auto()
    BG = auto()


@dataclass(frozen=True)
class _Text:
    text: str


@dataclass(frozen=True)
class _Open:
    kind: _TagKind
    color: Optional[RGB] = None
    end: Optional[RGB] = None


@dataclass(frozen=True)
class _Close:
    kind: _CloseKind
    name: str = ""


_Token = _Text | _Open | _Close

_SIMPLE_TAGS = {
    "bold": _TagKind.BOLD,
    "italic": _TagKind.ITALIC,
    "underline": _TagKind.UNDERLINE,
    **{name: _TagKind.STRIKE for name in _STRIKE_NAMES},
}


def _extract_attr(attrs: str, key: str) -> Optional[str]:
    pattern = f"{key}="
    pos = _ascii_lower(attrs).find(pattern)
    if pos < 0:
        return None
    rest = attrs[pos + len(pattern) :]
    match = re.match(r"\S*", rest)
    return match.group(0) if match else ""


def _parse_tag(raw: str) -> Optional[_Token]:
    inner = raw.strip()

    if inner.startswith("/"):
        name = inner[1:].strip()
        lowered = _ascii_lower(name)
        if lowered in ("color", "colour"):
            return _Close(_CloseKind.COLOR)
        if name.startswith(("bg:", "bg/")) or lowered == "bg":
            return _Close(_CloseKind.BG)
        return _Close(_CloseKind.NAMED, name)

    lowered = _ascii_lower(inner)
    if lowered == "reset":
        return _Open(_TagKind.RESET)
    if lowered in _SIMPLE_TAGS:
        return _Open(_SIMPLE_TAGS[lowered])

    if lowered.startswith("gradient"):
        attrs = inner[len("gradient") :].strip()
        start_text = _extract_attr(attrs, "from")
        end_text = _extract_attr(attrs, "to")
        if start_text is None or end_text is None:
            return None
        start = _resolve_color(start_text)
        end = _resolve_color(end_text)
        if start is None or end is None:
            return None
        return _Open(_TagKind.GRADIENT, start, end)

    if lowered.startswith(("bg:", "bg/")):
        color = _resolve_color(inner[3:].strip())
        return None if color is None else _Open(_TagKind.BG, color)

    color = _resolve_color(inner)
    return None if color is None else _Open(_TagKind.FG, color)


def _tokenise(text: str) -> list[_Token]:
    tokens: list[_Token] = []
    buf = ""
    pos = 0
    while pos < len(text):
        lt = text.find("<", pos)
        gt = text.find(">", lt) if lt >= 0 else -1
        if gt < 0:
            buf += text[pos:]
            break
        buf += text[pos:lt]
        inner = text[lt + 1 : gt]
        if buf:
            tokens.append(_Text(buf))
            buf = ""
        token = _parse_tag(inner)
        if token is None:
            buf = f"<{inner}>"
        else:
            tokens.append(token)
        pos = gt + 1
    if buf:
        tokens.append(_Text(buf))
    return tokens


# ─── Rendering ───────────────────────────────────────────────────────────────


def _lerp(start: RGB, end: RGB, t: float) -> RGB:
    def channel(a: int, b: int) -> int:
        value = math.floor(a + (b - a) * t + 0.5)
        return max(0, min(255, value))

    return (
        channel(start[0], end[0]),
        channel(start[1], end[1]),
        channel(start[2], end[2]),
    )


def _render_gradient(text: str, start: RGB, end: RGB) -> str:
    steps = max(len(text), 1)
    pieces = []
    for index, char in enumerate(text):
        t = 0.0 if steps == 1 else index / (steps - 1)
        pieces.append(_fg(_lerp(start, end, t)) + char)
    return "".join(pieces)


@dataclass
class _RenderState:
    fg_stack: list[RGB] = field(default_factory=list)
    bg_stack: list[RGB] = field(default_factory=list)
    gradient: Optional[tuple[RGB, RGB]] = None
    grad_buf: str = ""

    def reapply_fg(self) -> str:
        return _fg(self.fg_stack[-1]) if self.fg_stack else ANSI_DEFAULT_FG

    def reapply_bg(self) -> str:
        return _bg(self.bg_stack[-1]) if self.bg_stack else ANSI_DEFAULT_BG

    def flush_gradient(self) -> str:
        if self.gradient is None:
            return ""
        start, end = self.gradient
        rendered = _render_gradient(self.grad_buf, start, end)
        self.gradient = None
        self.grad_buf = ""
        return rendered


_OPEN_CODES = {
    _TagKind.BOLD: ANSI_BOLD,
    _TagKind.ITALIC: ANSI_ITALIC,
    _TagKind.UNDERLINE: ANSI_UNDERLINE,
    _TagKind.STRIKE: ANSI_STRIKE,
}

_CLOSE_CODES = {
    "bold": ANSI_BOLD_OFF,
    "italic": ANSI_ITALIC_OFF,
    "underline": ANSI_UNDERLINE_OFF,
    **{name: ANSI_STRIKE_OFF for name in _STRIKE_NAMES},
}


def _render_open(tag: _Open, st: _RenderState) -> str:
    if tag.kind is _TagKind.RESET:
        out = st.flush_gradient() + ANSI_RESET
        st.fg_stack.clear()
        st.bg_stack.clear()
        return out
    if tag.kind is _TagKind.FG:
        st.fg_stack.append(tag.color)  # type: ignore[arg-type]
        return _fg(tag.color)  # type: ignore[arg-type]
    if tag.kind is _TagKind.BG:
        st.bg_stack.append(tag.color)  # type: ignore[arg-type]
        return _bg(tag.color)  # type: ignore[arg-type]
    if tag.kind is _TagKind.GRADIENT:
        st.gradient = (tag.color, tag.end)  # type: ignore[assignment]
        st.grad_buf = ""
        return ""
    return _OPEN_CODES[tag.kind]


def _render_close(tag: _Close, st: _RenderState) -> str:
    if tag.kind is _CloseKind.COLOR:
        if st.fg_stack:
            st.fg_stack.pop()
        return st.reapply_fg()
    if tag.kind is _CloseKind.BG:
        if st.bg_stack:
            st.bg_stack.pop()
        return st.reapply_bg()

    lowered = _ascii_lower(tag.name)
    if lowered in _CLOSE_CODES:
        return _CLOSE_CODES[lowered]
    if lowered == "gradient":
        if st.gradient is None:
            return ""
        return st.flush_gradient() + st.reapply_fg()
    # Any other closing name closes the innermost foreground colour.
    if st.fg_stack:
        st.fg_stack.pop()
    return st.reapply_fg()


def render_ansi(text: str) -> str:
    """Convert markup to ANSI escape sequences."""
    st = _RenderState()
    out: list[str] = []
    for token in _tokenise(text):
        if isinstance(token, _Text):
            if st.gradient is not None:
                st.grad_buf += token.text
            else:
                out.append(token.text)
        elif isinstance(token, _Open):
            out.append(_render_open(token, st))
        else:
            out.append(_render_close(token, st))
    out.append(st.flush_gradient())
    return "".join(out)


def strip_ansi(text: str) -> str:
    """Remove all markup tags and return the plain text."""
    out: list[str] = []
    in_gradient = False
    grad_buf = ""
    for token in _tokenise(text):
        if isinstance(token, _Text):
            if in_gradient:
                grad_buf += token.text
            else:
                out.append(token.text)
        elif isinstance(token, _Open) and token.kind is _TagKind.GRADIENT:
            in_gradient = True
            grad_buf = ""
        elif (
            isinstance(token, _Close)
            and token.kind is _CloseKind.NAMED
            and _ascii_lower(token.name) == "gradient"
        ):
            in_gradient = False
            out.append(grad_buf)
            grad_buf = ""
    if in_gradient:
        out.append(grad_buf)
    return "".join(out)