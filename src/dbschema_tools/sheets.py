"""Column-oriented spreadsheet writer on top of openpyxl.

Columns are declared once per sheet with an id and a header label. Rows are
then added as dicts keyed by those ids, so callers never deal with cell
coordinates.
"""

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

MAX_TITLE_LENGTH = 31
INVALID_TITLE_CHARS = re.compile(r"[\\*?:/\[\]]")

HEADER_FONT = Font(name="Calibri", bold=True, size=11, color="FFFFFF")
HEADER_FILL = PatternFill(start_color="2F5496", end_color="2F5496", fill_type="solid")
HEADER_ALIGN = Alignment(horizontal="center", vertical="center", wrap_text=True)
CELL_ALIGN = Alignment(vertical="top", wrap_text=True)


class SheetSink(Protocol):
    """Destination for sheets built by the schema exporter."""

    def set_active_sheet(self, sheet: int | str) -> Any: ...

    def freeze_pane(self, cell: str) -> None: ...

    def add_column(self, column_id: str, label: str, width: float | None = None) -> None: ...

    def add_row(self, values: dict[str, Any]) -> None: ...

    def save(self, path: str | Path) -> None: ...


def legalize_title(title: str) -> str:
    """Make a string usable as an Excel sheet title."""
    return INVALID_TITLE_CHARS.sub("_", title)[:MAX_TITLE_LENGTH]


@dataclass
class _SheetLayout:
    columns: list[str] = field(default_factory=list)
    next_row: int = 2


class WorkbookWriter:
    """openpyxl implementation of :class:`SheetSink`."""

    def __init__(self) -> None:
        self.workbook = Workbook()
        self._layouts: dict[int, _SheetLayout] = {}
        self._sheet: Worksheet = self.workbook.active

    @property
    def sheet(self) -> Worksheet:
        """The sheet that receives columns and rows."""
        return self._sheet

    def set_active_sheet(self, sheet: int | str) -> Worksheet:
        """Select a sheet by index, or create a new one when given a title."""
        if isinstance(sheet, int):
            ws = self.workbook.worksheets[sheet]
        else:
            ws = self.workbook.create_sheet(title=self._unique_title(sheet))
        # Excel groups every tab that is marked selected
        for other in self.workbook.worksheets:
            other.sheet_view.tabSelected = other is ws
        self.workbook.active = self.workbook.worksheets.index(ws)
        self._sheet = ws
        return ws

    def _unique_title(self, title: str) -> str:
        """Legalize a title and number it when another sheet already uses it.

        Excel compares sheet titles case-insensitively, and the number has to
        fit inside the 31-character limit.
        """
        base = legalize_title(title)
        taken = {name.lower() for name in self.workbook.sheetnames}
        candidate = base
        n = 0
        while candidate.lower() in taken:
            n += 1
            suffix = str(n)
            candidate = base[: MAX_TITLE_LENGTH - len(suffix)] + suffix
        return candidate

    def _layout(self) -> _SheetLayout:
        return self._layouts.setdefault(id(self._sheet), _SheetLayout())

    def freeze_pane(self, cell: str) -> None:
        self._sheet.freeze_panes = cell

    def add_column(self, column_id: str, label: str, width: float | None = None) -> None:
        layout = self._layout()
        if column_id in layout.columns:
            raise ValueError(f"Column {column_id!r} already declared on sheet {self._sheet.title!r}")
        layout.columns.append(column_id)
        col_idx = len(layout.columns)

        cell = self._sheet.cell(row=1, column=col_idx, value=label)
        cell.font = HEADER_FONT
        cell.fill = HEADER_FILL
        cell.alignment = HEADER_ALIGN
        if width is not None:
            self._sheet.column_dimensions[get_column_letter(col_idx)].width = width

    def add_row(self, values: dict[str, Any]) -> None:
        """Append one row. Keys must be declared column ids; missing ones stay blank."""
        layout = self._layout()
        unknown = [key for key in values if key not in layout.columns]
        if unknown:
            raise KeyError(f"Undeclared columns on sheet {self._sheet.title!r}: {', '.join(unknown)}")

        for col_idx, column_id in enumerate(layout.columns, 1):
            if column_id in values:
                cell = self._sheet.cell(row=layout.next_row, column=col_idx, value=values[column_id])
                cell.alignment = CELL_ALIGN
        layout.next_row += 1

    def save(self, path: str | Path) -> None:
        self.workbook.save(path)
