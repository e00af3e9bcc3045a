"""
Marriott hotel API (stub)
"""
import logging
from typing import List

from pydantic import BaseModel

logger = logging.getLogger(__name__)

class MarriottCustomerInfo(BaseModel):
    country: str = ""
    city: str = ""
    date_from: str = ""
    date_to: str = ""
    needed_rooms: int = 0
    adults: int = 0
    children: int = 0
    number_of_nights: int = 0

class MarriottFoundRoom(BaseModel):
    room_type: str = ""
    available_number: int = 0
    price_per_night: float = 0.0
    date_from: str = ""
    date_to: str = ""

def set_customer_info(info: MarriottCustomerInfo) -> None:
    logger.debug(f"[MARRIOTT] Customer info set: {info.city}, {info.country}")

def find_rooms(info: MarriottCustomerInfo) -> List[MarriottFoundRoom]:
    rooms = [
        MarriottFoundRoom(room_type="City View", available_number=8, price_per_night=320, date_from="2025-01-29", date_to="2025-02-10"),
        MarriottFoundRoom(room_type="Interior View", available_number=8, price_per_night=220, date_from="2025-01-29", date_to="2025-02-10"),
        MarriottFoundRoom(room_type="Private View", available_number=5, price_per_night=600, date_from="2025-01-29", date_to="2025-02-10"),
    ]
    logger.info(f"[MARRIOTT] Found {len(rooms)} room types in {info.city or 'any city'}")
    return rooms

# Marriott takes the room first
def reserve_room(room: MarriottFoundRoom, info: MarriottCustomerInfo) -> bool:
    logger.info(f"[MARRIOTT] Reserving {info.needed_rooms} x {room.room_type} for {info.number_of_nights} nights")
    return True

def cancel_reservation(room: MarriottFoundRoom, info: MarriottCustomerInfo) -> bool:
    logger.info(f"[MARRIOTT] Cancelling {room.room_type} in {info.city}")
    return True
