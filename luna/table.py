"""Plain column-aligned tables whose cells may hold markup."""

from __future__ import annotations

from dataclasses import dataclass, field

from luna.markup import strip_ansi

_SEPARATOR = "  "
_ALT_ROW_OPEN = "<bg:#1e1e2e>"
_ALT_ROW_CLOSE = "</bg>"


@dataclass
class Table:
    """A table rendered to markup, aligned on the visible width of each cell."""

    headers: list[str] = field(default_factory=list)
    rows: list[list[str]] = field(default_factory=list)
    alternating_rows: bool = False

    def add_row(self, row: list[str]) -> None:
        """Append a row of cells."""
        self.rows.append(list(row))

    def _column_count(self) -> int:
        if self.headers:
            return len(self.headers)
        return len(self.rows[0]) if self.rows else 0

    def _widths(self, num_cols: int) -> list[int]:
        widths = [0] * num_cols
        for cells in ([self.headers] if self.headers else []) + self.rows:
            for i, cell in enumerate(cells[:num_cols]):
                widths[i] = max(widths[i], len(strip_ansi(cell)))
        return widths

    @staticmethod
    def _render_line(cells: list[str], widths: list[int]) -> str:
        num_cols = len(widths)
        parts = []
        for i, cell in enumerate(cells[:num_cols]):
            padding = widths[i] - len(strip_ansi(cell))
            piece = cell + " " * padding
            if i < num_cols - 1:
                piece += _SEPARATOR
            parts.append(piece)
        return "".join(parts)

    def render(self) -> str:
        """Render the table as markup, one line per row."""
        if not self.headers and not self.rows:
            return ""

        num_cols = self._column_count()
        widths = self._widths(num_cols)
        lines = []

        if self.headers:
            lines.append(self._render_line(self.headers, widths))
            rules = [f"<color_border>{'─' * w}</color_border>" for w in widths]
            lines.append(_SEPARATOR.join(rules))

        for index, row in enumerate(self.rows):
            line = self._render_line(row, widths)
            if self.alternating_rows and index % 2 == 1:
                line = f"{_ALT_ROW_OPEN}{line}{_ALT_ROW_CLOSE}"
            lines.append(line)

        return "".join(line + "\n" for line in lines)