"""A rank-addressed integer vector stored in a size-augmented AVL tree, with an interactive shell."""

__version__ = "0.1.0"
__all__ = ["node", "vector", "cli"]