"""Building blocks for terminal emulators: color math, color pair caching,
color mapping, mouse report encoding, cooperative threads and a timer."""

__version__ = "0.1.0"