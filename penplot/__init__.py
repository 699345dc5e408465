"""Pen-plotter drawings: lines, shapes, clipping, trimming, path sorting and G-code output."""

__version__ = "0.1.0"