"""
Reservation contract shared by every vendor adapter and by the Itinerary.

A reservation is priceable (``get_cost``), printable (``get_details``) and
cloneable (``clone``). Containers hold reservations through this interface
only, so copies must go through ``clone`` rather than a concrete type.
"""
import io
from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional, TextIO

def format_cost(amount: float) -> str:
    return f"{amount:.2f}"

class Brand(str, Enum):
    """Vendor tag carried by search results and used to pick the adapter."""
    CANADA = "Canada"
    TURKISH = "Turkish"
    HILTON = "Hilton"
    MARRIOTT = "Marriott"

    @classmethod
    def lookup(cls, tag: str) -> Optional["Brand"]:
        try:
            return cls(tag)
        except ValueError:
            return None

class Reservation(ABC):

    @abstractmethod
    def get_cost(self) -> float:
        ...

    @abstractmethod
    def get_details(self, sink: TextIO) -> None:
        """Write a multi-line description of the reservation to ``sink``."""
        ...

    @abstractmethod
    def clone(self) -> "Reservation":
        """Return an independent deep copy with the same observable state."""
        ...

    def details(self) -> str:
        buf = io.StringIO()
        self.get_details(buf)
        return buf.getvalue()

    def __str__(self) -> str:
        return self.details()

    def __copy__(self):
        return self.clone()

    def __deepcopy__(self, memo):
        return self.clone()
