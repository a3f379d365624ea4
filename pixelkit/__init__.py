"""Colors, geometry, vertex batches, palettes, PNG I/O, history and command parsing for a pixel editor."""

__version__ = "0.1.0"