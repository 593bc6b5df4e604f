"""Helpers for characters, numbers, buffers, strings, linked lists, output and line reading."""

__version__ = "0.1.0"

__all__ = ["chars", "numbers", "memory", "strings", "linkedlist", "output", "lines"]