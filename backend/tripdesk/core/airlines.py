"""
Flight reservation adapters
Each adapter keeps the search criteria and the chosen flight in its vendor's
own record shape and translates to/from the normalized models.
"""
import logging
from abc import abstractmethod
from typing import List, Optional, TextIO

from tripdesk.core.reservation import Brand, Reservation, format_cost
from tripdesk.models import FoundFlightInfo, PassengerInfo
from tripdesk.vendors import air_canada, turkish
from tripdesk.vendors.air_canada import AirCanadaCustomerInfo, AirCanadaFlight
from tripdesk.vendors.turkish import TurkishCustomerInfo, TurkishFlight

logger = logging.getLogger(__name__)

def _write_flight_details(sink: TextIO, airline: str, origin: str, from_date: str,
                          destination: str, to_date: str, adults: int, children: int,
                          infants: int, cost: float) -> None:
    sink.write(f"Airline Reservation / {airline} Airline:\n")
    sink.write(f"From: {origin}  on: {from_date}  To: {destination}  on: {to_date}\n")
    sink.write(f"\t\tAdults: {adults}  -  Children: {children}  -  Infants: {infants}\n")
    sink.write(f"\t\tFlight Cost: {format_cost(cost)}\n")

class FlightReservation(Reservation):
    brand: Brand

    @abstractmethod
    def set_customer_info(self, info: PassengerInfo) -> None:
        ...

    @abstractmethod
    def set_chosen_flight(self, info: FoundFlightInfo) -> None:
        ...

    @abstractmethod
    def get_available_flights(self) -> List[FoundFlightInfo]:
        """Query the vendor and return its offers tagged with ``brand``."""
        ...

    @abstractmethod
    def make_reservation(self) -> bool:
        ...

    @abstractmethod
    def cancel_reservation(self) -> bool:
        ...

class CanadaFlightReservation(FlightReservation):
    brand = Brand.CANADA

    def __init__(self, customer_info: Optional[PassengerInfo] = None,
                 chosen_flight: Optional[FoundFlightInfo] = None):
        self.customer_info = AirCanadaCustomerInfo()
        self.chosen_flight = AirCanadaFlight()
        if customer_info is not None:
            self.set_customer_info(customer_info)
        if chosen_flight is not None:
            self.set_chosen_flight(chosen_flight)

    def set_customer_info(self, info: PassengerInfo) -> None:
        self.customer_info = AirCanadaCustomerInfo(
            from_city=info.origin,
            to_city=info.destination,
            date_time_from=info.from_date,
            date_time_to=info.to_date,
            adults=info.adults,
            children=info.children,
            infants=info.infants,
        )
        air_canada.set_customer_info(self.customer_info)

    def set_chosen_flight(self, info: FoundFlightInfo) -> None:
        self.chosen_flight = AirCanadaFlight(
            price=info.price,
            date_time_from=info.from_date,
            date_time_to=info.to_date,
        )

    def get_available_flights(self) -> List[FoundFlightInfo]:
        return [
            FoundFlightInfo(airline=self.brand.value, price=f.price, from_date=f.date_time_from, to_date=f.date_time_to)
            for f in air_canada.get_flights()
        ]

    def get_cost(self) -> float:
        info = self.customer_info
        return self.chosen_flight.price * (info.adults + info.children + info.infants)

    def get_details(self, sink: TextIO) -> None:
        info = self.customer_info
        _write_flight_details(
            sink, "AirCanada", info.from_city, info.date_time_from, info.to_city,
            info.date_time_to, info.adults, info.children, info.infants, self.get_cost(),
        )

    def clone(self) -> "CanadaFlightReservation":
        copy = CanadaFlightReservation()
        copy.customer_info = self.customer_info.model_copy(deep=True)
        copy.chosen_flight = self.chosen_flight.model_copy(deep=True)
        return copy

    def make_reservation(self) -> bool:
        ok = air_canada.reserve_flight(self.chosen_flight, self.customer_info)
        if not ok:
            logger.warning(f"Air Canada refused reservation {self.customer_info.from_city}->{self.customer_info.to_city}")
        return ok

    def cancel_reservation(self) -> bool:
        ok = air_canada.cancel_reserve_flight(self.chosen_flight, self.customer_info)
        if not ok:
            logger.warning(f"Air Canada refused cancellation {self.customer_info.from_city}->{self.customer_info.to_city}")
        return ok

class TurkishFlightReservation(FlightReservation):
    brand = Brand.TURKISH

    def __init__(self, customer_info: Optional[PassengerInfo] = None,
                 chosen_flight: Optional[FoundFlightInfo] = None):
        self.customer_info = TurkishCustomerInfo()
        self.chosen_flight = TurkishFlight()
        if customer_info is not None:
            self.set_customer_info(customer_info)
        if chosen_flight is not None:
            self.set_chosen_flight(chosen_flight)

    def set_customer_info(self, info: PassengerInfo) -> None:
        self.customer_info = TurkishCustomerInfo(
            departure_city=info.origin,
            arrival_city=info.destination,
            datetime_from=info.from_date,
            datetime_to=info.to_date,
            adults=info.adults,
            children=info.children,
            infants=info.infants,
        )
        # Turkish splits route and passenger registration
        turkish.set_from_to_info(self.customer_info)
        turkish.set_passenger_info(self.customer_info)

    def set_chosen_flight(self, info: FoundFlightInfo) -> None:
        self.chosen_flight = TurkishFlight(
            cost=info.price,
            datetime_from=info.from_date,
            datetime_to=info.to_date,
        )

    def get_available_flights(self) -> List[FoundFlightInfo]:
        return [
            FoundFlightInfo(airline=self.brand.value, price=f.cost, from_date=f.datetime_from, to_date=f.datetime_to)
            for f in turkish.get_available_flights()
        ]

    def get_cost(self) -> float:
        info = self.customer_info
        return self.chosen_flight.cost * (info.adults + info.children + info.infants)

    def get_details(self, sink: TextIO) -> None:
        info = self.customer_info
        _write_flight_details(
            sink, "Turkish", info.departure_city, info.datetime_from, info.arrival_city,
            info.datetime_to, info.adults, info.children, info.infants, self.get_cost(),
        )

    def clone(self) -> "TurkishFlightReservation":
        copy = TurkishFlightReservation()
        copy.customer_info = self.customer_info.model_copy(deep=True)
        copy.chosen_flight = self.chosen_flight.model_copy(deep=True)
        return copy

    def make_reservation(self) -> bool:
        ok = turkish.reserve_flight(self.customer_info, self.chosen_flight)
        if not ok:
            logger.warning(f"Turkish refused reservation {self.customer_info.departure_city}->{self.customer_info.arrival_city}")
        return ok

    def cancel_reservation(self) -> bool:
        ok = turkish.cancel_reserved_flight(self.customer_info, self.chosen_flight)
        if not ok:
            logger.warning(f"Turkish refused cancellation {self.customer_info.departure_city}->{self.customer_info.arrival_city}")
        return ok
