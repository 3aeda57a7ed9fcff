"""Loading and validation of .cub raycaster maps, and reading of XPM textures."""

__version__ = "0.1.0"
__all__ = ["colornames", "pixelformat", "wordtab", "xpm", "mapfile", "validate", "game"]