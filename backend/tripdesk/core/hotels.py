"""
Hotel reservation adapters
Hotels bill per room-night: price_per_night * number_of_nights * needed_rooms.
"""
import logging
from abc import abstractmethod
from typing import List, Optional, TextIO

from tripdesk.core.reservation import Brand, Reservation, format_cost
from tripdesk.models import CustomerInfo, FoundRoomInfo
from tripdesk.vendors import hilton, marriott
from tripdesk.vendors.hilton import HiltonCustomerInfo, HiltonRoom
from tripdesk.vendors.marriott import MarriottCustomerInfo, MarriottFoundRoom

logger = logging.getLogger(__name__)

def _write_hotel_details(sink: TextIO, hotel: str, country: str, city: str, date_from: str,
                         date_to: str, nights: int, room_type: str, rooms: int,
                         adults: int, children: int, cost: float) -> None:
    sink.write(f"Hotel Reservation / {hotel} Hotel: {country} @ {city}  from {date_from}  to {date_to} ({nights} nights)\n")
    sink.write(f"\t\tRoom: {room_type} x {rooms}\n")
    sink.write(f"\t\tAdults: {adults}  -  Children: {children}\n")
    sink.write(f"\t\tRoom Cost For All Nights: {format_cost(cost)}\n")

class HotelReservation(Reservation):
    brand: Brand

    @abstractmethod
    def set_customer_info(self, info: CustomerInfo) -> None:
        ...

    @abstractmethod
    def set_chosen_room_info(self, info: FoundRoomInfo) -> None:
        ...

    @abstractmethod
    def get_available_rooms(self) -> List[FoundRoomInfo]:
        """Query the vendor and return its rooms tagged with ``brand``."""
        ...

    @abstractmethod
    def make_reservation(self) -> bool:
        ...

    @abstractmethod
    def cancel_reservation(self) -> bool:
        ...

class HiltonHotelReservation(HotelReservation):
    brand = Brand.HILTON

    def __init__(self, customer_info: Optional[CustomerInfo] = None,
                 chosen_room: Optional[FoundRoomInfo] = None):
        self.customer_info = HiltonCustomerInfo()
        self.chosen_room = HiltonRoom()
        if customer_info is not None:
            self.set_customer_info(customer_info)
        if chosen_room is not None:
            self.set_chosen_room_info(chosen_room)

    def set_customer_info(self, info: CustomerInfo) -> None:
        self.customer_info = HiltonCustomerInfo(
            country=info.country,
            city=info.city,
            date_from=info.from_date,
            date_to=info.to_date,
            needed_rooms=info.needed_rooms,
            adults=info.adults,
            children=info.children,
            number_of_nights=info.number_of_nights,
        )
        hilton.set_customer_info(self.customer_info)

    def set_chosen_room_info(self, info: FoundRoomInfo) -> None:
        self.chosen_room = HiltonRoom(
            room_type=info.view_type,
            available_number=info.how_many,
            price_per_night=info.price_for_night,
            from_date=info.from_date,
            to_date=info.to_date,
        )

    def get_available_rooms(self) -> List[FoundRoomInfo]:
        return [
            FoundRoomInfo(
                hotel=self.brand.value,
                from_date=r.from_date,
                to_date=r.to_date,
                view_type=r.room_type,
                how_many=r.available_number,
                price_for_night=r.price_per_night,
            )
            for r in hilton.search_rooms(self.customer_info)
        ]

    def get_cost(self) -> float:
        info = self.customer_info
        return self.chosen_room.price_per_night * info.number_of_nights * info.needed_rooms

    def get_details(self, sink: TextIO) -> None:
        info = self.customer_info
        _write_hotel_details(
            sink, "Hilton", info.country, info.city, info.date_from, info.date_to,
            info.number_of_nights, self.chosen_room.room_type, info.needed_rooms,
            info.adults, info.children, self.get_cost(),
        )

    def clone(self) -> "HiltonHotelReservation":
        copy = HiltonHotelReservation()
        copy.customer_info = self.customer_info.model_copy(deep=True)
        copy.chosen_room = self.chosen_room.model_copy(deep=True)
        return copy

    def make_reservation(self) -> bool:
        ok = hilton.reserve_room(self.customer_info, self.chosen_room)
        if not ok:
            logger.warning(f"Hilton refused reservation of {self.chosen_room.room_type} in {self.customer_info.city}")
        return ok

    def cancel_reservation(self) -> bool:
        ok = hilton.cancel_reservation(self.customer_info, self.chosen_room)
        if not ok:
            logger.warning(f"Hilton refused cancellation of {self.chosen_room.room_type} in {self.customer_info.city}")
        return ok

class MarriottHotelReservation(HotelReservation):
    brand = Brand.MARRIOTT

    def __init__(self, customer_info: Optional[CustomerInfo] = None,
                 chosen_room: Optional[FoundRoomInfo] = None):
        self.customer_info = MarriottCustomerInfo()
        self.chosen_room = MarriottFoundRoom()
        if customer_info is not None:
            self.set_customer_info(customer_info)
        if chosen_room is not None:
            self.set_chosen_room_info(chosen_room)

    def set_customer_info(self, info: CustomerInfo) -> None:
        self.customer_info = MarriottCustomerInfo(
            country=info.country,
            city=info.city,
            date_from=info.from_date,
            date_to=info.to_date,
            needed_rooms=info.needed_rooms,
            adults=info.adults,
            children=info.children,
            number_of_nights=info.number_of_nights,
        )
        marriott.set_customer_info(self.customer_info)

    def set_chosen_room_info(self, info: FoundRoomInfo) -> None:
        self.chosen_room = MarriottFoundRoom(
            room_type=info.view_type,
            available_number=info.how_many,
            price_per_night=info.price_for_night,
            date_from=info.from_date,
            date_to=info.to_date,
        )

    def get_available_rooms(self) -> List[FoundRoomInfo]:
        return [
            FoundRoomInfo(
                hotel=self.brand.value,
                from_date=r.date_from,
                to_date=r.date_to,
                view_type=r.room_type,
                how_many=r.available_number,
                price_for_night=r.price_per_night,
            )
            for r in marriott.find_rooms(self.customer_info)
        ]

    def get_cost(self) -> float:
        info = self.customer_info
        return self.chosen_room.price_per_night * info.number_of_nights * info.needed_rooms

    def get_details(self, sink: TextIO) -> None:
        info = self.customer_info
        _write_hotel_details(
            sink, "Marriott", info.country, info.city, info.date_from, info.date_to,
            info.number_of_nights, self.chosen_room.room_type, info.needed_rooms,
            info.adults, info.children, self.get_cost(),
        )

    def clone(self) -> "MarriottHotelReservation":
        copy = MarriottHotelReservation()
        copy.customer_info = self.customer_info.model_copy(deep=True)
        copy.chosen_room = self.chosen_room.model_copy(deep=True)
        return copy

    def make_reservation(self) -> bool:
        ok = marriott.reserve_room(self.chosen_room, self.customer_info)
        if not ok:
            logger.warning(f"Marriott refused reservation of {self.chosen_room.room_type} in {self.customer_info.city}")
        return ok

    def cancel_reservation(self) -> bool:
        ok = marriott.cancel_reservation(self.chosen_room, self.customer_info)
        if not ok:
            logger.warning(f"Marriott refused cancellation of {self.chosen_room.room_type} in {self.customer_info.city}")
        return ok
