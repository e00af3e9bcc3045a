import logging
from typing import Callable, List, Optional

from tripdesk.core.itinerary import Itinerary
from tripdesk.core.make_reservation import MakeReservation
from tripdesk.core.reservation import Reservation
from tripdesk.models import CustomerInfo, FoundFlightInfo, FoundRoomInfo, PassengerInfo

logger = logging.getLogger(__name__)

class ItineraryBuilder:
    """Working itinerary for the signed-in user, filled one reservation at a time."""

    def __init__(self, reserve: Optional[MakeReservation] = None):
        self.itinerary = Itinerary()
        self.reserve = reserve or MakeReservation()

    def _book(self, reservation: Optional[Reservation]) -> Optional[Reservation]:
        if reservation is None:
            return None
        # Only vendor-confirmed bookings join the itinerary
        if not reservation.make_reservation():
            logger.warning(f"{type(reservation).__name__} was not confirmed by the vendor")
            return None
        self.itinerary.add_reservation(reservation)
        logger.info(f"Itinerary now holds {len(self.itinerary)} reservations ({self.itinerary.get_cost():.2f})")
        return reservation

    def add_flight(self, criteria: PassengerInfo,
                   choose: Callable[[List[FoundFlightInfo]], int]) -> Optional[Reservation]:
        return self._book(self.reserve.reserving_flight(criteria, choose))

    def add_hotel(self, criteria: CustomerInfo,
                  choose: Callable[[List[FoundRoomInfo]], int]) -> Optional[Reservation]:
        return self._book(self.reserve.reserving_room(criteria, choose))

    def clear_itinerary(self) -> None:
        """Drop the working itinerary once it has been paid for; bookings stay held."""
        self.itinerary.clear()

    def cancel_itinerary(self) -> int:
        """Release every booking held by the working itinerary, then clear it.

        Returns the number of bookings the vendors refused to release.
        """
        refused = 0
        for reservation in self.itinerary:
            if not reservation.cancel_reservation():
                refused += 1
        if refused:
            logger.warning(f"{refused} of {len(self.itinerary)} bookings could not be released")
        self.itinerary.clear()
        return refused

    def check_itinerary(self) -> bool:
        """True when there is nothing to save."""
        return self.itinerary.is_empty()

    def get_itinerary(self) -> Itinerary:
        return self.itinerary
