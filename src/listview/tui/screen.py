"""
In-memory cell surface.

Widgets draw into a :class:`Screen`; the renderer turns it into styled
text lines.  Cells outside the surface are silently clipped.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from listview.tui.ansi import style as ansi_style


@dataclass(frozen=True)
class CellStyle:
    """Colours and attributes of a single cell."""

    fg: str | None = None
    bg: str | None = None
    bold: bool = False
    dim: bool = False
    italic: bool = False
    underline: bool = False
    reverse: bool = False

    def with_(self, **changes: object) -> CellStyle:
        return replace(self, **changes)


DEFAULT_STYLE = CellStyle()


@dataclass
class Cell:
    char: str = " "
    style: CellStyle = field(default=DEFAULT_STYLE)


class Screen:
    """
    A fixed-size grid of :class:`Cell`.

    Wide characters occupy their first cell; the following cell holds an
    empty string so that joined rows keep their column alignment.
    """

    def __init__(self, width: int, height: int) -> None:
        self._width = max(0, width)
        self._height = max(0, height)
        self._cells: list[list[Cell]] = []
        self.clear()

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def size(self) -> tuple[int, int]:
        return self._width, self._height

    def clear(self) -> None:
        self._cells = [[Cell() for _ in range(self._width)] for _ in range(self._height)]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def set_content(self, x: int, y: int, char: str, cell_style: CellStyle | None = None) -> None:
        if not self.in_bounds(x, y):
            return
        self._cells[y][x] = Cell(char=char, style=cell_style or DEFAULT_STYLE)

    def get_content(self, x: int, y: int) -> tuple[str, CellStyle]:
        """Return ``(char, style)`` at ``(x, y)``; blank default outside."""
        if not self.in_bounds(x, y):
            return " ", DEFAULT_STYLE
        cell = self._cells[y][x]
        return cell.char, cell.style

    def plain_lines(self) -> list[str]:
        """Rows as unstyled text with trailing blanks stripped."""
        return ["".join(c.char for c in row).rstrip() for row in self._cells]

    def to_lines(self) -> list[str]:
        """Rows as text with ANSI styling, one escape run per style change."""
        lines: list[str] = []
        for row in self._cells:
            parts: list[str] = []
            run: list[str] = []
            run_style = DEFAULT_STYLE
            for cell in row:
                if cell.style != run_style and run:
                    parts.append(_styled("".join(run), run_style))
                    run = []
                run_style = cell.style
                run.append(cell.char)
            if run:
                parts.append(_styled("".join(run), run_style))
            lines.append("".join(parts))
        return lines


def _styled(text: str, cell_style: CellStyle) -> str:
    return ansi_style(
        text,
        fg=cell_style.fg,
        bg=cell_style.bg,
        bold=cell_style.bold,
        dim=cell_style.dim,
        italic=cell_style.italic,
        underline=cell_style.underline,
        reverse=cell_style.reverse,
    )
