"""NiceGUI entrypoint for the My Dog List web runtime."""

from __future__ import annotations

import argparse
import logging

from nicegui import ui

from doglist.utils import logging as logging_utils
from doglist.viewmodels.dog_list_vm import DogListVM
from doglist.web_ui.viewmodels import web_counters, web_rows

log = logging.getLogger(__name__)


def _install_theme() -> None:
    """Install global CSS tokens for the web runtime."""
    ui.add_head_html(
        """
<style>
:root {
  --doglist-grad-a: #eeb6e9;
  --doglist-grad-b: #65558f;
}
.doglist-page { max-width: 560px; margin: 0 auto; padding: 16px; }
.doglist-avatar {
  background: linear-gradient(135deg, var(--doglist-grad-a), var(--doglist-grad-b));
  border-radius: 8px;
  color: white;
  padding: 8px;
}
</style>
"""
    )


def _build_ui() -> None:
    """Register the single page; every browser client gets its own registry."""

    @ui.page("/")
    def index() -> None:
        _install_theme()
        vm = DogListVM()

        @ui.refreshable
        def render_counters() -> None:
            counters = web_counters(vm)
            with ui.row().classes("items-center q-gutter-md"):
                with ui.row().classes("items-center q-gutter-xs"):
                    ui.icon("pets", color="grey")
                    ui.label(counters.total_text).classes("text-bold")
                with ui.row().classes("items-center q-gutter-xs"):
                    ui.icon("favorite", color="red")
                    ui.label(counters.favorites_text).classes("text-bold")

        @ui.refreshable
        def render_list() -> None:
            rows = web_rows(vm)
            if not rows:
                ui.label(vm.empty_label()).classes("text-grey q-pa-md")
                return
            for row in rows:
                with ui.row().classes("w-full items-center no-wrap q-py-sm"):
                    ui.icon("pets").classes("doglist-avatar")
                    ui.label(row.name).classes("text-bold col")
                    ui.button(
                        icon=row.favorite_icon,
                        on_click=lambda _, n=row.name: vm.cmd_toggle_favorite(n),
                    ).props(f"flat round color={row.favorite_color}").tooltip(row.favorite_tooltip)
                    ui.button(
                        icon="delete",
                        on_click=lambda _, n=row.name: vm.cmd_delete(n),
                    ).props("flat round color=black").tooltip("Delete")

        def on_input(value: str) -> None:
            vm.set_name_input(value)
            search_btn.set_enabled(vm.can_submit)
            add_btn.set_enabled(vm.can_submit)

        def apply_error(message: str) -> None:
            error_lbl.set_text(message)
            error_lbl.set_visibility(bool(message))

        with ui.column().classes("doglist-page w-full"):
            with ui.row().classes("w-full items-center no-wrap"):
                name_field = ui.input(
                    "Search or add a dog",
                    on_change=lambda e: on_input(str(e.value or "")),
                ).classes("col")
                search_btn = ui.button(icon="search", on_click=vm.cmd_search).props("flat round")
                add_btn = ui.button(icon="add", on_click=vm.cmd_add).props("flat round")
                ui.button(icon="clear", on_click=vm.cmd_clear_search).props("flat round").tooltip(
                    "Clear search"
                )
            error_lbl = ui.label("").classes("text-negative text-caption")
            error_lbl.set_visibility(False)
            render_counters()
            render_list()

        name_field.on("keydown.enter", lambda _: vm.cmd_add())
        search_btn.set_enabled(False)
        add_btn.set_enabled(False)

        vm.on_list_changed = lambda _rows: render_list.refresh()
        vm.on_counts_changed = lambda _total, _fav: render_counters.refresh()
        vm.on_error_changed = apply_error
        vm.on_input_changed = name_field.set_value


def _parse_args() -> argparse.Namespace:
    """Parse CLI args for web runtime startup."""
    parser = argparse.ArgumentParser(description="Run the My Dog List NiceGUI web UI.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8080)
    parser.add_argument("--reload", action="store_true")
    parser.add_argument("--smoke-test", action="store_true")
    return parser.parse_args()


def main() -> None:
    """CLI entrypoint for the NiceGUI runtime."""
    args = _parse_args()
    logging_utils.configure_root()
    if args.smoke_test:
        vm = DogListVM()
        vm.set_name_input("Rex")
        vm.cmd_add()
        print("web-smoke-ok", vm.total_count)
        return
    _build_ui()
    log.info("Starting web UI on %s:%d", args.host, args.port)
    ui.run(
        host=args.host,
        port=args.port,
        title="My Dog List",
        reload=args.reload,
        show=False,
    )


if __name__ in {"__main__", "__mp_main__"}:
    main()
