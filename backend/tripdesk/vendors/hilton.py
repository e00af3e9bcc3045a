"""
Hilton hotel API (stub)
"""
import logging
from typing import List

from pydantic import BaseModel

logger = logging.getLogger(__name__)

class HiltonCustomerInfo(BaseModel):
    country: str = ""
    city: str = ""
    date_from: str = ""
    date_to: str = ""
    needed_rooms: int = 0
    adults: int = 0
    children: int = 0
    number_of_nights: int = 0

class HiltonRoom(BaseModel):
    room_type: str = ""
    available_number: int = 0
    price_per_night: float = 0.0
    from_date: str = ""
    to_date: str = ""

def set_customer_info(info: HiltonCustomerInfo) -> None:
    logger.debug(f"[HILTON] Customer info set: {info.city}, {info.country}")

def search_rooms(info: HiltonCustomerInfo) -> List[HiltonRoom]:
    rooms = [
        HiltonRoom(room_type="Interior View", available_number=6, price_per_night=200, from_date="2025-01-29", to_date="2025-02-10"),
        HiltonRoom(room_type="City View", available_number=3, price_per_night=300, from_date="2025-01-29", to_date="2025-02-10"),
        HiltonRoom(room_type="Deluxe View", available_number=8, price_per_night=500, from_date="2025-01-29", to_date="2025-02-10"),
    ]
    logger.info(f"[HILTON] Found {len(rooms)} room types in {info.city or 'any city'}")
    return rooms

def reserve_room(info: HiltonCustomerInfo, room: HiltonRoom) -> bool:
    logger.info(f"[HILTON] Reserving {info.needed_rooms} x {room.room_type} for {info.number_of_nights} nights")
    return True

def cancel_reservation(info: HiltonCustomerInfo, room: HiltonRoom) -> bool:
    logger.info(f"[HILTON] Cancelling {room.room_type} in {info.city}")
    return True
