"""Concrete implementations of infrastructure interfaces."""

from .local_storage import LocalFileStorage

__all__ = ["LocalFileStorage"]
