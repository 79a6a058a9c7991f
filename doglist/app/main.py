# doglist/app/main.py
from __future__ import annotations
import logging
from typing import List

# ---- Views (UI-only) ----
from .views.main_window import MainWindowView
from .views.dog_list_view import DogListView

# ---- ViewModels ----
from ..viewmodels.dog_list_vm import DogListVM, DogRow
from ..utils import logging as logging_utils


class App:
    """Bootstrap: wire Views <-> DogListVM and push state back to the widgets."""

    def __init__(self) -> None:
        self._log = logging.getLogger(__name__)
        self.vm = DogListVM(
            on_list_changed=self._apply_rows,
            on_counts_changed=self._apply_counts,
            on_error_changed=self._apply_error,
            on_input_changed=self._apply_input,
        )

        self.win = MainWindowView(
            on_name_changed=self._on_name_changed,
            on_search=self.vm.cmd_search,
            on_add=self.vm.cmd_add,
            on_clear_search=self.vm.cmd_clear_search,
        )
        self.dog_list = DogListView(
            self.win.list_host,
            on_toggle_favorite=self.vm.cmd_toggle_favorite,
            on_delete=self.vm.cmd_delete,
        )
        self.win.mount_list(self.dog_list)

        self.vm.refresh()
        self._log.debug("Dog list window ready")

    # ------------------------------------------------------------------
    # View -> VM
    # ------------------------------------------------------------------
    def _on_name_changed(self, text: str) -> None:
        self.vm.set_name_input(text)
        self.win.set_actions_enabled(self.vm.can_submit)

    # ------------------------------------------------------------------
    # VM -> View
    # ------------------------------------------------------------------
    def _apply_rows(self, rows: List[DogRow]) -> None:
        self.dog_list.set_rows(rows)
        self.dog_list.set_empty_text("" if rows else self.vm.empty_label())

    def _apply_counts(self, total: int, favorites: int) -> None:
        self.win.set_counts(self.vm.counts_label())

    def _apply_error(self, message: str) -> None:
        self.win.set_error(message)

    def _apply_input(self, text: str) -> None:
        self.win.set_input_text(text)
        self.win.set_actions_enabled(self.vm.can_submit)


def main() -> None:
    logging_utils.configure_root()
    app = App()
    app.win.mainloop()


if __name__ == "__main__":
    main()
