"""Front matter helpers for markdown task lists: metadata flags and merging."""

__version__ = "0.1.0"
__all__ = ["frontmatter"]