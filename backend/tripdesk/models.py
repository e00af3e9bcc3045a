from pydantic import BaseModel, Field

class PassengerInfo(BaseModel):
    """Flight search criteria entered by the traveller."""
    origin: str = ""
    destination: str = ""
    from_date: str = ""
    to_date: str = ""
    adults: int = Field(default=0, ge=0)
    children: int = Field(default=0, ge=0)
    infants: int = Field(default=0, ge=0)

    model_config = {"frozen": True}

class FoundFlightInfo(BaseModel):
    airline: str = ""  # brand tag, e.g. "Canada"
    price: float = Field(default=0.0, ge=0)
    from_date: str = ""
    to_date: str = ""

class CustomerInfo(BaseModel):
    """Hotel search criteria entered by the guest."""
    country: str = ""
    city: str = ""
    from_date: str = ""
    to_date: str = ""
    adults: int = Field(default=0, ge=0)
    children: int = Field(default=0, ge=0)
    needed_rooms: int = Field(default=1, ge=1)
    number_of_nights: int = Field(default=0, ge=0)

    model_config = {"frozen": True}

class FoundRoomInfo(BaseModel):
    hotel: str = ""  # brand tag, e.g. "Hilton"
    from_date: str = ""
    to_date: str = ""
    view_type: str = ""
    how_many: int = Field(default=0, ge=0)  # rooms the vendor has left
    price_for_night: float = Field(default=0.0, ge=0)

class TransactionInfo(BaseModel):
    method: str = ""  # 'paypal', 'stripe' or 'square'
    name: str = ""
    address: str = ""
    card_id: str = ""
    expire_date: str = ""
    ccv: int = 0
    money: float = Field(default=0.0, ge=0)
