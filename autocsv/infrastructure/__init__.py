"""Infrastructure adapters: CSV row I/O, DataFrame interop and logging."""

from .container import DependencyContainer

__all__ = ["DependencyContainer"]
