from datetime import date, datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from banquet_booking.models.enums import EventTiming, PaymentStatus


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BookingItem(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid", allow_inf_nan=False)

    name: Optional[str] = None
    price: float = Field(..., ge=0)
    quantity: int = Field(..., ge=0)


class BookingCreate(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid", allow_inf_nan=False)

    customer_name: str = Field(..., min_length=1)
    customer_number: str = Field(..., min_length=1)
    start_date: date
    end_date: date
    event_type: str
    event_timing: EventTiming
    hall_charges: float = Field(0, ge=0)
    items: List[BookingItem] = []
    # checked against the thali table by the service, after the date checks
    selected_thali: str
    number_of_people: int = Field(0, ge=0)
    discount: float = Field(0, ge=0, le=100)
    payment_status: PaymentStatus = PaymentStatus.PENDING


class PaymentStatusUpdate(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid", allow_inf_nan=False)

    payment_status: str


class BookingOut(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: str
    customer_name: str
    customer_number: str
    event_date: List[date]
    event_timing: str
    event_type: str

    hall_charges: float
    selected_thali: str
    thali_price: float
    number_of_people: int
    items: List[BookingItem] = []
    catering_total: float
    item_total: float
    total_price: float
    discount: float
    discount_amount: float
    final_price: float

    payment_status: str
    created_at: datetime
    updated_at: datetime


class BookingEnvelope(BaseModel):
    message: str
    booking: BookingOut


class MessageOut(BaseModel):
    message: str


class BookingCalendar(CamelModel):
    month: str
    booked_dates: Dict[str, List[date]]
