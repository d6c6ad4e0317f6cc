import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, Date, DateTime, Float, ForeignKey, JSON, UniqueConstraint
from sqlalchemy.orm import relationship
from banquet_booking.db.session import Base


def _new_id():
    return uuid.uuid4().hex


def _utcnow():
    return datetime.now(timezone.utc)


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(String(32), primary_key=True, default=_new_id)

    customer_name = Column(String, nullable=False)
    customer_number = Column(String, nullable=False)

    start_date = Column(Date, nullable=False, index=True)
    end_date = Column(Date, nullable=False, index=True)
    event_timing = Column(String, nullable=False, index=True)
    event_type = Column(String, nullable=False)

    # PRICING (computed once at creation)
    hall_charges = Column(Float, nullable=False, default=0.0)
    selected_thali = Column(String, nullable=False)
    thali_price = Column(Float, nullable=False)
    number_of_people = Column(Integer, nullable=False, default=0)
    items = Column(JSON, nullable=False, default=list)
    catering_total = Column(Float, nullable=False)
    item_total = Column(Float, nullable=False)
    total_price = Column(Float, nullable=False)
    discount = Column(Float, nullable=False, default=0.0)
    discount_amount = Column(Float, nullable=False)
    final_price = Column(Float, nullable=False)

    payment_status = Column(String, nullable=False, default="Pending")

    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)

    slots = relationship(
        "BookingSlot",
        back_populates="booking",
        cascade="all, delete-orphan",
    )

    @property
    def event_date(self):
        return [self.start_date, self.end_date]


class BookingSlot(Base):
    """One reserved (day, timing) pair; the unique constraint rejects double booking."""

    __tablename__ = "booking_slots"

    id = Column(Integer, primary_key=True, index=True)
    booking_id = Column(String(32), ForeignKey("bookings.id", ondelete="CASCADE"), nullable=False)
    day = Column(Date, nullable=False)
    event_timing = Column(String, nullable=False)

    booking = relationship("Booking", back_populates="slots")

    __table_args__ = (UniqueConstraint("day", "event_timing", name="uq_booking_slot_day_timing"),)
