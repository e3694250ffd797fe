"""Solutions to classic coding-interview exercises on lists, trees, numbers and strings."""

__version__ = "0.1.0"

__all__ = ["counting", "linked_list", "numbers", "rearrange", "searching", "strings", "trees"]