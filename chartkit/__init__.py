"""Chart layout: boxes, ranges, series, colour palettes and chart geometry."""

__version__ = "0.1.0"