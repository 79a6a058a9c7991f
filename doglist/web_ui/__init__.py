"""NiceGUI web runtime bound to the same ``DogListVM`` as the desktop app."""
