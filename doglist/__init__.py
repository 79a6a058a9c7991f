"""My Dog List: single-screen dog registry with Tkinter and NiceGUI frontends."""

__version__ = "0.1.0"
