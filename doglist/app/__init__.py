"""Desktop (Tkinter) application package: views plus the App bootstrap."""
