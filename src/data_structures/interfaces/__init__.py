"""Protocol definitions shared by the components."""

from .collection import Collection
from .queue import FIFOQueue
from .stack import LIFOStack

__all__ = ["Collection", "FIFOQueue", "LIFOStack"]
