"""
Reservation workflow: search every registered vendor, let the caller pick an
offer, then build the adapter that owns that offer.

Offers carry their vendor's brand tag; the factory maps the tag back to the
adapter class. An unknown tag or an invalid pick yields ``None``.
"""
import logging
from typing import Callable, Dict, List, Optional, Sequence, Type, Union

from tripdesk.config import Settings, settings as default_settings
from tripdesk.core.airlines import CanadaFlightReservation, FlightReservation, TurkishFlightReservation
from tripdesk.core.hotels import HiltonHotelReservation, HotelReservation, MarriottHotelReservation
from tripdesk.core.reservation import Brand, Reservation
from tripdesk.models import CustomerInfo, FoundFlightInfo, FoundRoomInfo, PassengerInfo

logger = logging.getLogger(__name__)

FLIGHT_ADAPTERS: Dict[Brand, Type[FlightReservation]] = {
    Brand.CANADA: CanadaFlightReservation,
    Brand.TURKISH: TurkishFlightReservation,
}

HOTEL_ADAPTERS: Dict[Brand, Type[HotelReservation]] = {
    Brand.HILTON: HiltonHotelReservation,
    Brand.MARRIOTT: MarriottHotelReservation,
}

class ReservationFactory:

    @staticmethod
    def create(tag: str,
               criteria: Union[PassengerInfo, CustomerInfo],
               chosen: Union[FoundFlightInfo, FoundRoomInfo]) -> Optional[Reservation]:
        brand = Brand.lookup(tag)
        if brand is None:
            logger.warning(f"No adapter registered for brand '{tag}'")
            return None

        # Flight criteria only dispatch to flight adapters, hotel criteria to hotels
        table = FLIGHT_ADAPTERS if isinstance(criteria, PassengerInfo) else HOTEL_ADAPTERS
        adapter_cls = table.get(brand)
        if adapter_cls is None:
            logger.warning(f"Brand '{tag}' does not match a {type(criteria).__name__} adapter")
            return None

        logger.info(f"Creating {adapter_cls.__name__}")
        return adapter_cls(criteria, chosen)

def _valid_choice(choice: int, count: int) -> bool:
    return 1 <= choice <= count

class MakeReservation:
    """Holds one instance of every registered vendor adapter for searching."""

    def __init__(self, settings: Settings = default_settings):
        self.cancel_choice = settings.CANCEL_CHOICE
        self.airlines: List[FlightReservation] = self._register(settings.FLIGHT_VENDORS, FLIGHT_ADAPTERS)
        self.hotels: List[HotelReservation] = self._register(settings.HOTEL_VENDORS, HOTEL_ADAPTERS)

    @staticmethod
    def _register(names: Sequence[str], table: Dict[Brand, type]) -> list:
        adapters = []
        for name in names:
            adapter_cls = table.get(Brand.lookup(name))
            if adapter_cls is None:
                logger.warning(f"Skipping unknown vendor '{name}'")
                continue
            adapters.append(adapter_cls())
        return adapters

    # --- Flights ---

    def search_flights(self, criteria: PassengerInfo) -> List[FoundFlightInfo]:
        logger.info(f"Searching flights: {criteria.origin}->{criteria.destination} on {criteria.from_date}")
        offers: List[FoundFlightInfo] = []
        for airline in self.airlines:
            airline.set_customer_info(criteria)
            offers.extend(airline.get_available_flights())
        logger.info(f"Total flight offers: {len(offers)}")
        return offers

    def select_flight(self, criteria: PassengerInfo, offers: Sequence[FoundFlightInfo],
                      choice: int) -> Optional[Reservation]:
        if not _valid_choice(choice, len(offers)):
            if choice == self.cancel_choice:
                logger.info("Flight selection cancelled")
            else:
                logger.warning(f"Flight choice {choice} out of range (1-{len(offers)})")
            return None
        chosen = offers[choice - 1]
        return ReservationFactory.create(chosen.airline, criteria, chosen)

    def reserving_flight(self, criteria: PassengerInfo,
                         choose: Callable[[List[FoundFlightInfo]], int]) -> Optional[Reservation]:
        offers = self.search_flights(criteria)
        if not offers:
            logger.warning("No flights available")
            return None
        return self.select_flight(criteria, offers, choose(offers))

    # --- Hotels ---

    def search_rooms(self, criteria: CustomerInfo) -> List[FoundRoomInfo]:
        logger.info(f"Searching rooms: {criteria.city}, {criteria.country} for {criteria.number_of_nights} nights")
        offers: List[FoundRoomInfo] = []
        for hotel in self.hotels:
            hotel.set_customer_info(criteria)
            offers.extend(hotel.get_available_rooms())
        logger.info(f"Total room offers: {len(offers)}")
        return offers

    def select_room(self, criteria: CustomerInfo, offers: Sequence[FoundRoomInfo],
                    choice: int) -> Optional[Reservation]:
        if not _valid_choice(choice, len(offers)):
            if choice == self.cancel_choice:
                logger.info("Room selection cancelled")
            else:
                logger.warning(f"Room choice {choice} out of range (1-{len(offers)})")
            return None
        chosen = offers[choice - 1]
        return ReservationFactory.create(chosen.hotel, criteria, chosen)

    def reserving_room(self, criteria: CustomerInfo,
                       choose: Callable[[List[FoundRoomInfo]], int]) -> Optional[Reservation]:
        offers = self.search_rooms(criteria)
        if not offers:
            logger.warning("No rooms available")
            return None
        return self.select_room(criteria, offers, choose(offers))
