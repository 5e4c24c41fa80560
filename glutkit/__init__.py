"""Timing, trace profiling, ANSI colour parsing, text wrapping and window placement helpers."""

__version__ = "0.1.0"
__all__ = ["ansi", "helpers", "instrumentor", "layout", "stopwatch", "text_layout"]