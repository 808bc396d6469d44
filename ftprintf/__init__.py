"""C-library style character, byte-buffer, string and linked-list helpers."""

__version__ = "1.0.0"
__all__ = ["chars", "linked_list", "memory", "strings"]