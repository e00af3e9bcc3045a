"""
Air Canada online API (stub)
Returns canned offers; no request ever leaves the process.
"""
import logging
from typing import List

from pydantic import BaseModel

logger = logging.getLogger(__name__)

class AirCanadaCustomerInfo(BaseModel):
    from_city: str = ""
    to_city: str = ""
    date_time_from: str = ""
    date_time_to: str = ""
    adults: int = 0
    children: int = 0
    infants: int = 0

class AirCanadaFlight(BaseModel):
    price: float = 0.0
    date_time_from: str = ""
    date_time_to: str = ""

def set_customer_info(info: AirCanadaCustomerInfo) -> None:
    logger.debug(f"[AIR CANADA] Customer info set: {info.from_city}->{info.to_city}")

def get_flights() -> List[AirCanadaFlight]:
    flights = [
        AirCanadaFlight(price=200, date_time_from="2025-01-25", date_time_to="2025-02-10"),
        AirCanadaFlight(price=250, date_time_from="2025-01-29", date_time_to="2025-02-10"),
    ]
    logger.info(f"[AIR CANADA] Found {len(flights)} flights")
    return flights

def reserve_flight(flight: AirCanadaFlight, info: AirCanadaCustomerInfo) -> bool:
    logger.info(f"[AIR CANADA] Reserving {info.from_city}->{info.to_city} at {flight.price}")
    return True

def cancel_reserve_flight(flight: AirCanadaFlight, info: AirCanadaCustomerInfo) -> bool:
    # The vendor does not support cancellation through the online API
    logger.info(f"[AIR CANADA] Cancel requested for {info.from_city}->{info.to_city}")
    return False
