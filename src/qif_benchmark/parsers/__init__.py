"""Parser adapters."""

from .base import BaseParser
from .quiffen_parser import QuiffenParser

__all__ = [
    "BaseParser",
    "QuiffenParser",
]
