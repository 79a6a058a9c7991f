"""
DogListView
-----------
UI-only Tkinter view listing the visible dogs.

Features:
- Table (Treeview) with a favorite star and the dog name.
- Row actions: Favorite toggle and Delete, via buttons, double-click and the
  Delete key.
- Placeholder text when the list is empty.
"""
from __future__ import annotations
import tkinter as tk
from tkinter import ttk
from typing import Callable, Iterable, Optional

from ...viewmodels.dog_list_vm import DogRow
from ...viewmodels.list_format import favorite_mark
from .view_utils import safe_call


class DogListView(ttk.Frame):
    """Scrollable list of dogs with per-row favorite/delete actions."""

    OnName = Optional[Callable[[str], None]]

    def __init__(
        self,
        parent: tk.Widget,
        *,
        on_toggle_favorite: OnName = None,
        on_delete: OnName = None,
    ) -> None:
        super().__init__(parent)
        self._on_toggle_favorite = on_toggle_favorite
        self._on_delete = on_delete

        self.rowconfigure(1, weight=1)
        self.columnconfigure(0, weight=1)

        self._build_toolbar()
        self._build_table()

    # ------------------------------------------------------------------
    def _build_toolbar(self) -> None:
        bar = ttk.Frame(self)
        bar.grid(row=0, column=0, columnspan=2, sticky="ew", pady=(0, 4))
        ttk.Button(bar, text="Favorite", command=self._toggle_selected).pack(side="left")
        ttk.Button(bar, text="Delete", command=self._delete_selected).pack(side="left", padx=6)
        self.empty_lbl = ttk.Label(bar, text="", foreground="gray")
        self.empty_lbl.pack(side="right")

    def _build_table(self) -> None:
        columns = ("fav", "name")
        self.table = ttk.Treeview(self, columns=columns, show="headings", selectmode="browse")
        self.table.heading("fav", text="")
        self.table.heading("name", text="Dog")
        self.table.column("fav", width=32, anchor="center", stretch=False)
        self.table.column("name", width=260, anchor="w")

        vsb = ttk.Scrollbar(self, orient="vertical", command=self.table.yview)
        self.table.configure(yscrollcommand=vsb.set)
        self.table.grid(row=1, column=0, sticky="nsew")
        vsb.grid(row=1, column=1, sticky="ns")

        self.table.bind("<Double-1>", lambda e: self._toggle_selected())
        self.table.bind("<Delete>", lambda e: self._delete_selected())

    # ------------------------------------------------------------------
    # Public API used by the bootstrap
    # ------------------------------------------------------------------
    def set_rows(self, rows: Iterable[DogRow]) -> None:
        """Replace the table content; row iids are the dog names."""
        self.table.delete(*self.table.get_children())
        for name, is_favorite in rows:
            self.table.insert("", "end", iid=name, values=(favorite_mark(is_favorite), name))

    def set_empty_text(self, text: str) -> None:
        self.empty_lbl.configure(text=text)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _selected_name(self) -> Optional[str]:
        selection = self.table.selection()
        return selection[0] if selection else None

    def _toggle_selected(self) -> None:
        name = self._selected_name()
        if name is not None:
            safe_call(self._on_toggle_favorite, name)

    def _delete_selected(self) -> None:
        name = self._selected_name()
        if name is not None:
            safe_call(self._on_delete, name)


if __name__ == "__main__":
    root = tk.Tk()
    view = DogListView(root, on_toggle_favorite=print, on_delete=print)
    view.pack(fill="both", expand=True)
    view.set_rows([("Rex", True), ("Fido", False)])
    root.mainloop()
