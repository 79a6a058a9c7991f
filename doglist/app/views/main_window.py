"""
MainWindowView
---------------
Tkinter main window for My Dog List following MVVM.
This file contains **only View code**, no registry logic. It exposes
callback hooks that are expected to be connected to ``DogListVM``.

The window provides:
  * Input row: name entry, Search, Add and Clear buttons
  * Error line under the input (hidden when empty)
  * Counter row: total dogs and favorites
  * Host frame for DogListView
"""
from __future__ import annotations
import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

from .view_utils import safe_call


class MainWindowView(tk.Tk):
    """Top-level application window.

    UI-only: defines layout containers and forwards UI events to callbacks
    provided by the bootstrap. The list view is created and mounted later.
    """

    # ---- Callback type aliases ----
    OnVoid = Optional[Callable[[], None]]
    OnText = Optional[Callable[[str], None]]

    def __init__(
        self,
        *,
        on_name_changed: OnText = None,
        on_search: OnVoid = None,
        on_add: OnVoid = None,
        on_clear_search: OnVoid = None,
    ) -> None:
        super().__init__()

        self.title("My Dog List")
        self.geometry("420x640")
        self.minsize(360, 420)

        self._on_name_changed = on_name_changed
        self._on_search = on_search
        self._on_add = on_add
        self._on_clear_search = on_clear_search

        # Suppresses the entry trace while the VM writes the field back
        self._syncing_input = False

        # ---- Rows: input, error, counters, list ----
        self.rowconfigure(3, weight=1)
        self.columnconfigure(0, weight=1)

        self._build_input_row(self)
        self._build_error_line(self)
        self._build_counters(self)
        self._build_list_host(self)

        self.bind("<Return>", lambda e: safe_call(self._on_add))
        self.bind("<Control-f>", lambda e: safe_call(self._on_search))
        self.bind("<Escape>", lambda e: safe_call(self._on_clear_search))

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------
    def _build_input_row(self, parent: tk.Widget) -> None:
        row = ttk.Frame(parent)
        row.grid(row=0, column=0, sticky="ew", padx=16, pady=(16, 4))
        row.columnconfigure(0, weight=1)

        ttk.Label(row, text="Search or add a dog").grid(row=0, column=0, columnspan=4, sticky="w")

        self.name_var = tk.StringVar(value="")
        self.name_var.trace_add("write", self._on_name_var_write)
        self.entry = ttk.Entry(row, textvariable=self.name_var)
        self.entry.grid(row=1, column=0, sticky="ew", padx=(0, 8))
        self.entry.focus_set()

        self.btn_search = ttk.Button(row, text="Search", command=lambda: safe_call(self._on_search))
        self.btn_search.grid(row=1, column=1, padx=(0, 4))
        self.btn_add = ttk.Button(row, text="Add", command=lambda: safe_call(self._on_add))
        self.btn_add.grid(row=1, column=2, padx=(0, 4))
        ttk.Button(row, text="Clear", command=lambda: safe_call(self._on_clear_search)).grid(
            row=1, column=3
        )
        self.set_actions_enabled(False)

    def _build_error_line(self, parent: tk.Widget) -> None:
        self.error_lbl = ttk.Label(parent, text="", foreground="red")
        self.error_lbl.grid(row=1, column=0, sticky="w", padx=16, pady=(0, 4))

    def _build_counters(self, parent: tk.Widget) -> None:
        self.counts_lbl = ttk.Label(parent, text="", font=("TkDefaultFont", 11, "bold"))
        self.counts_lbl.grid(row=2, column=0, sticky="w", padx=16, pady=8)

    def _build_list_host(self, parent: tk.Widget) -> None:
        self.list_host = ttk.Frame(parent)
        self.list_host.grid(row=3, column=0, sticky="nsew", padx=16, pady=(0, 16))
        self.list_host.rowconfigure(0, weight=1)
        self.list_host.columnconfigure(0, weight=1)

    def mount_list(self, view: tk.Widget) -> None:
        view.grid(in_=self.list_host, row=0, column=0, sticky="nsew")

    # ------------------------------------------------------------------
    # Public API used by the bootstrap
    # ------------------------------------------------------------------
    def set_input_text(self, text: str) -> None:
        self._syncing_input = True
        try:
            self.name_var.set(text)
        finally:
            self._syncing_input = False

    def set_error(self, message: str) -> None:
        self.error_lbl.configure(text=message or "")

    def set_counts(self, label: str) -> None:
        self.counts_lbl.configure(text=label)

    def set_actions_enabled(self, enabled: bool) -> None:
        state = ["!disabled"] if enabled else ["disabled"]
        self.btn_search.state(state)
        self.btn_add.state(state)

    # ------------------------------------------------------------------
    def _on_name_var_write(self, *_args) -> None:
        if self._syncing_input:
            return
        safe_call(self._on_name_changed, self.name_var.get())
