"""Character, memory, string, output, linked-list, printf and line-reading utilities."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "strings", "output", "linked", "printf", "line_reader"]