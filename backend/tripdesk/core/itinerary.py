"""
Itinerary: a reservation made of reservations.

Every item is cloned on the way in, so the itinerary never shares state with
whoever built the item. Costs are summed on each call, never cached.
"""
from typing import Iterable, Iterator, List, TextIO

from tripdesk.core.reservation import Reservation, format_cost

SEPARATOR = "-" * 34

class Itinerary(Reservation):

    def __init__(self, reservations: Iterable[Reservation] = ()):
        self._reservations: List[Reservation] = []
        for reservation in reservations:
            self.add_reservation(reservation)

    def add_reservation(self, reservation: Reservation) -> None:
        self._reservations.append(reservation.clone())

    def clear(self) -> None:
        self._reservations.clear()

    def is_empty(self) -> bool:
        return not self._reservations

    def __len__(self) -> int:
        return len(self._reservations)

    def __iter__(self) -> Iterator[Reservation]:
        return iter(self._reservations)

    def get_cost(self) -> float:
        return sum((r.get_cost() for r in self._reservations), 0.0)

    def get_details(self, sink: TextIO) -> None:
        sink.write(f"Itinerary of {len(self._reservations)} sub-reservations:\n")
        for reservation in self._reservations:
            reservation.get_details(sink)
            sink.write("\n")
        sink.write(f"Itinerary Cost: {format_cost(self.get_cost())}\n")
        sink.write(f"{SEPARATOR}\n")

    def clone(self) -> "Itinerary":
        return Itinerary(self._reservations)
