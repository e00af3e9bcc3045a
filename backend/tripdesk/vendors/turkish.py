"""
Turkish Airlines online API (stub)
"""
import logging
from typing import List

from pydantic import BaseModel

logger = logging.getLogger(__name__)

class TurkishCustomerInfo(BaseModel):
    departure_city: str = ""
    arrival_city: str = ""
    datetime_from: str = ""
    datetime_to: str = ""
    adults: int = 0
    children: int = 0
    infants: int = 0

class TurkishFlight(BaseModel):
    cost: float = 0.0
    datetime_from: str = ""
    datetime_to: str = ""

def set_from_to_info(info: TurkishCustomerInfo) -> None:
    logger.debug(f"[TURKISH] Route set: {info.departure_city}->{info.arrival_city}")

def set_passenger_info(info: TurkishCustomerInfo) -> None:
    logger.debug(f"[TURKISH] Passengers set: {info.adults}/{info.children}/{info.infants}")

def get_available_flights() -> List[TurkishFlight]:
    flights = [
        TurkishFlight(cost=200, datetime_from="2025-01-25", datetime_to="2025-02-10"),
        TurkishFlight(cost=250, datetime_from="2025-01-29", datetime_to="2025-02-10"),
    ]
    logger.info(f"[TURKISH] Found {len(flights)} flights")
    return flights

def reserve_flight(info: TurkishCustomerInfo, flight: TurkishFlight) -> bool:
    logger.info(f"[TURKISH] Reserving {info.departure_city}->{info.arrival_city} at {flight.cost}")
    return True

def cancel_reserved_flight(info: TurkishCustomerInfo, flight: TurkishFlight) -> bool:
    logger.info(f"[TURKISH] Cancel requested for {info.departure_city}->{info.arrival_city}")
    return False
