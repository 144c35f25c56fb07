"""
Sortable record table.

Holds the view state for a list page: which column is sorted and in which
direction, and which row's action menu is open. Pages configure it with
columns; each column may bring its own renderer.
"""

from dataclasses import dataclass
from functools import cmp_to_key
from typing import Any, Callable, List, Optional

ASC = "asc"
DESC = "desc"

Renderer = Callable[[Any, dict], str]


def default_render(value: Any, row: dict) -> str:
    return "" if value is None else str(value)


@dataclass
class Column:
    key: str
    label: str
    sortable: bool = True
    render: Optional[Renderer] = None

    def cell(self, row: dict) -> str:
        return (self.render or default_render)(row.get(self.key), row)


class SortableTable:
    """
    Usage:
        table = SortableTable([Column("name", "Skill"), Column("proficiency", "Level")])
        table.handle_sort("name")
        table.render(rows)
    """

    def __init__(self, columns: List[Column], empty_message: str = "No data found",
                 on_edit: Callable[[dict], None] = None, on_delete: Callable[[dict], None] = None):
        self.columns = columns
        self.empty_message = empty_message
        self.on_edit = on_edit
        self.on_delete = on_delete
        self.sort_key: Optional[str] = None
        self.direction = ASC
        self.active_menu: Optional[int] = None

    def _column(self, key: str) -> Optional[Column]:
        return next((c for c in self.columns if c.key == key), None)

    def handle_sort(self, key: str) -> None:
        """Same column flips direction; a different column starts ascending."""
        column = self._column(key)
        if column is None or not column.sortable:
            return
        if self.sort_key == key and self.direction == ASC:
            self.direction = DESC
        else:
            self.direction = ASC
        self.sort_key = key

    def sorted_rows(self, rows: List[dict]) -> List[dict]:
        """
        Rows ordered by the raw values of the sort column.
        Rows without a value go last in either direction; equal (or
        incomparable) values keep their original order.
        """
        if self.sort_key is None:
            return list(rows)
        key = self.sort_key
        descending = self.direction == DESC
        present = [row for row in rows if row.get(key) is not None]
        missing = [row for row in rows if row.get(key) is None]

        def compare(a: dict, b: dict) -> int:
            av, bv = a.get(key), b.get(key)
            try:
                if av < bv:
                    return 1 if descending else -1
                if av > bv:
                    return -1 if descending else 1
            except TypeError:
                pass
            return 0

        return sorted(present, key=cmp_to_key(compare)) + missing

    # ---------------- row action menu ----------------

    def toggle_menu(self, row_index: int) -> None:
        self.active_menu = None if self.active_menu == row_index else row_index

    def edit(self, row: dict) -> None:
        if self.on_edit:
            self.on_edit(row)
        self.active_menu = None

    def delete(self, row: dict) -> None:
        if self.on_delete:
            self.on_delete(row)
        self.active_menu = None

    # ---------------- rendering ----------------

    def header(self) -> List[str]:
        labels = []
        for column in self.columns:
            label = column.label
            if column.key == self.sort_key:
                label += " ▲" if self.direction == ASC else " ▼"
            labels.append(label)
        return labels

    def render(self, rows: List[dict]) -> List[List[str]]:
        """Cell strings for each row in display order (header excluded)."""
        return [[column.cell(row) for column in self.columns] for row in self.sorted_rows(rows)]

    def render_text(self, rows: List[dict]) -> str:
        if not rows:
            return self.empty_message
        lines = [" | ".join(self.header())]
        lines.extend(" | ".join(cells) for cells in self.render(rows))
        return "\n".join(lines)
