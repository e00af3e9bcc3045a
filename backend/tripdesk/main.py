from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from tripdesk.config import settings
from tripdesk.core.itinerary import Itinerary
from tripdesk.core.make_reservation import MakeReservation
from tripdesk.models import CustomerInfo, PassengerInfo
from pydantic import BaseModel
from typing import List
import logging
import time

# Setup Logging
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="tripdesk", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

reserve = MakeReservation()

@app.post("/flights/search")
def search_flights(criteria: PassengerInfo):
    start_time = time.time()
    offers = reserve.search_flights(criteria)
    elapsed = time.time() - start_time
    return {"offers": offers, "latency_seconds": round(elapsed, 3)}

@app.post("/hotels/search")
def search_hotels(criteria: CustomerInfo):
    start_time = time.time()
    offers = reserve.search_rooms(criteria)
    elapsed = time.time() - start_time
    return {"offers": offers, "latency_seconds": round(elapsed, 3)}

class FlightPick(BaseModel):
    criteria: PassengerInfo
    choice: int  # 1-based index into /flights/search offers

class RoomPick(BaseModel):
    criteria: CustomerInfo
    choice: int

class QuoteRequest(BaseModel):
    flights: List[FlightPick] = []
    hotels: List[RoomPick] = []

@app.post("/itinerary/quote")
def quote_itinerary(request: QuoteRequest):
    """
    Price a whole itinerary without booking it.
    Each pick is re-searched and resolved the same way the console does.
    """
    itinerary = Itinerary()

    for i, pick in enumerate(request.flights):
        offers = reserve.search_flights(pick.criteria)
        reservation = reserve.select_flight(pick.criteria, offers, pick.choice)
        if reservation is None:
            raise HTTPException(status_code=422, detail=f"flights[{i}]: choice {pick.choice} matches no offer")
        itinerary.add_reservation(reservation)

    for i, pick in enumerate(request.hotels):
        offers = reserve.search_rooms(pick.criteria)
        reservation = reserve.select_room(pick.criteria, offers, pick.choice)
        if reservation is None:
            raise HTTPException(status_code=422, detail=f"hotels[{i}]: choice {pick.choice} matches no offer")
        itinerary.add_reservation(reservation)

    logger.info(f"Quoted itinerary of {len(itinerary)} reservations: {itinerary.get_cost():.2f}")
    return {"count": len(itinerary), "cost": itinerary.get_cost(), "details": itinerary.details()}

@app.get("/health")
def health_check():
    return {"status": "ok", "env": settings.ENV}
