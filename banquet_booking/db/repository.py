from abc import ABC, abstractmethod
from datetime import timedelta

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from banquet_booking.models.booking import Booking, BookingSlot


class SlotTaken(Exception):
    """A concurrent insert already reserved one of the requested slots."""


class BookingStore(ABC):
    """Persistence operations the booking service relies on."""

    @abstractmethod
    def insert(self, booking: Booking) -> Booking:
        ...

    @abstractmethod
    def find_all(self):
        ...

    @abstractmethod
    def find_by_id(self, booking_id: str):
        ...

    @abstractmethod
    def find_conflicting(self, start_date, end_date, event_timing):
        ...

    @abstractmethod
    def find_in_range(self, start_date, end_date):
        ...

    @abstractmethod
    def update(self, booking: Booking, **fields) -> Booking:
        ...

    @abstractmethod
    def delete(self, booking: Booking):
        ...


def days_between(start_date, end_date):
    for offset in range((end_date - start_date).days + 1):
        yield start_date + timedelta(days=offset)


class SqlBookingStore(BookingStore):
    """SQLAlchemy store bound to one session (one request)."""

    def __init__(self, db: Session):
        self.db = db

    def insert(self, booking: Booking) -> Booking:
        start_date, end_date, timing = booking.start_date, booking.end_date, booking.event_timing

        # booking row and its slot rows commit together or not at all
        booking.slots = [
            BookingSlot(day=d, event_timing=timing)
            for d in days_between(start_date, end_date)
        ]
        self.db.add(booking)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            if self.slot_taken(start_date, end_date, timing):
                raise SlotTaken(str(e.orig)) from e
            raise
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(booking)
        return booking

    def slot_taken(self, start_date, end_date, event_timing) -> bool:
        return self.db.query(BookingSlot.id).filter(
            BookingSlot.event_timing == event_timing,
            BookingSlot.day >= start_date,
            BookingSlot.day <= end_date,
        ).first() is not None

    def find_all(self):
        return (
            self.db.query(Booking)
            .order_by(Booking.created_at.asc(), Booking.id.asc())
            .all()
        )

    def find_by_id(self, booking_id: str):
        return self.db.query(Booking).filter(Booking.id == booking_id).first()

    def find_conflicting(self, start_date, end_date, event_timing):
        return self.db.query(Booking).filter(
            Booking.event_timing == event_timing,
            Booking.start_date <= end_date,
            Booking.end_date >= start_date,
        ).first()

    def find_in_range(self, start_date, end_date):
        return (
            self.db.query(Booking)
            .filter(
                Booking.start_date <= end_date,
                Booking.end_date >= start_date,
            )
            .order_by(Booking.start_date.asc())
            .all()
        )

    def update(self, booking: Booking, **fields) -> Booking:
        for name, value in fields.items():
            setattr(booking, name, value)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(booking)
        return booking

    def delete(self, booking: Booking):
        self.db.delete(booking)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
