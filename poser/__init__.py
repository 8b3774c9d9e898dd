"""Mutable strings, placeholder formatting, console output, file opening, system and threading helpers."""

__version__ = "0.1.0"