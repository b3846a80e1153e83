"""An on-screen piano played from the keyboard or mouse, with built-in songs."""

__version__ = "0.1.0"