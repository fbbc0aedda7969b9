"""Wire-frame viewer for height-map files: map reading, projection, line drawing and the interactive window."""

__version__ = "0.1.0"
__all__ = ["color", "mapfile", "projection", "raster", "viewer"]