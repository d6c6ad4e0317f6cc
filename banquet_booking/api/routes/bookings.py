from typing import List

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from banquet_booking.core.redis import BookingCache
from banquet_booking.db.repository import SqlBookingStore
from banquet_booking.schemas.booking import (
    BookingCalendar,
    BookingCreate,
    BookingEnvelope,
    BookingOut,
    MessageOut,
    PaymentStatusUpdate,
)
from banquet_booking.services.booking_service import BookingService

router = APIRouter(prefix="/bookings", tags=["Bookings"])


# ---------------------------------------------------------------------
# DB SESSION
# ---------------------------------------------------------------------
def get_db(request: Request):
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()


def get_booking_service(request: Request, db: Session = Depends(get_db)) -> BookingService:
    cache = getattr(request.app.state, "cache", None) or BookingCache()
    return BookingService(SqlBookingStore(db), cache)


# ---------------------------------------------------------------------
# LIST BOOKINGS
# ---------------------------------------------------------------------
@router.get("", response_model=List[BookingOut])
@router.get("/", response_model=List[BookingOut], include_in_schema=False)
def list_bookings(service: BookingService = Depends(get_booking_service)):
    return service.list_bookings()


# ---------------------------------------------------------------------
# CREATE BOOKING
# ---------------------------------------------------------------------
@router.post("/create-booking", response_model=BookingEnvelope, status_code=201)
def create_booking(data: BookingCreate, service: BookingService = Depends(get_booking_service)):
    booking = service.create_booking(data)
    return BookingEnvelope(message="Booking successfully created!", booking=booking)


# ---------------------------------------------------------------------
# BOOKED DATES FOR A MONTH
# ---------------------------------------------------------------------
@router.get("/calendar", response_model=BookingCalendar)
def booking_calendar(month: str, service: BookingService = Depends(get_booking_service)):
    return service.booked_dates(month)


# ---------------------------------------------------------------------
# GET ONE
# ---------------------------------------------------------------------
@router.get("/{booking_id}", response_model=BookingOut)
def get_booking(booking_id: str, service: BookingService = Depends(get_booking_service)):
    return service.get_booking(booking_id)


# ---------------------------------------------------------------------
# UPDATE PAYMENT STATUS
# ---------------------------------------------------------------------
@router.put("/update/{booking_id}", response_model=BookingEnvelope)
def update_booking(
    booking_id: str,
    data: PaymentStatusUpdate,
    service: BookingService = Depends(get_booking_service),
):
    booking = service.update_payment_status(booking_id, data.payment_status)
    return BookingEnvelope(message="Payment status updated successfully!", booking=booking)


# ---------------------------------------------------------------------
# DELETE BOOKING
# ---------------------------------------------------------------------
@router.delete("/{booking_id}", response_model=MessageOut)
def delete_booking(booking_id: str, service: BookingService = Depends(get_booking_service)):
    service.delete_booking(booking_id)
    return MessageOut(message="Booking deleted successfully!")
