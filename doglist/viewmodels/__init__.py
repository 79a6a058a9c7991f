"""ViewModel package for UI state and command surfaces.

Call context:
    ``doglist/app/main.py`` and ``doglist/web_ui/main.py`` import concrete
    viewmodels from this package to bind view callbacks to state transitions.

Dependencies:
    Modules in this package depend on domain types, use cases and lightweight
    formatting helpers only. Widget toolkits stay outside.

Responsibilities:
    - Expose mutable screen state and command intent callbacks.
    - Transform registry snapshots into view-facing rows and labels.
"""
