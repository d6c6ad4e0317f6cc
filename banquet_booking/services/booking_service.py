import calendar
from contextlib import contextmanager
from datetime import date

from sqlalchemy.exc import SQLAlchemyError

from banquet_booking.core.errors import Conflict, InvalidInput, NotFound, StoreFailure
from banquet_booking.core.logging_config import get_logger
from banquet_booking.core.redis import BOOKINGS_KEY, BookingCache, booking_key
from banquet_booking.db.repository import BookingStore, SlotTaken, days_between
from banquet_booking.models.booking import Booking
from banquet_booking.models.enums import EventTiming, PaymentStatus
from banquet_booking.schemas.booking import BookingCalendar, BookingCreate, BookingOut
from banquet_booking.utils.pricing import calculate_booking_price, thali_price

logger = get_logger()

# longest booking, in calendar days, inclusive of both ends
MAX_BOOKING_DAYS = 31


@contextmanager
def store_errors(message: str):
    """Turn database errors raised inside the block into StoreFailure."""
    try:
        yield
    except SQLAlchemyError as e:
        logger.error(f"{message} -> {e}")
        raise StoreFailure(message, str(e)) from e


def month_bounds(month: str):
    try:
        year, month_num = map(int, month.split("-"))
        start_date = date(year, month_num, 1)
        end_date = start_date.replace(day=calendar.monthrange(year, month_num)[1])
    except ValueError:
        raise InvalidInput("Invalid month format, expected YYYY-MM")
    return start_date, end_date


class BookingService:
    def __init__(self, store: BookingStore, cache: BookingCache = None):
        self.store = store
        self.cache = cache or BookingCache()

    # ------------------------------------------------------------------
    # CREATE
    # ------------------------------------------------------------------
    def create_booking(self, data: BookingCreate) -> BookingOut:
        # date format is enforced by the BookingCreate schema
        if data.end_date < data.start_date:
            raise InvalidInput("End date must be after or equal to the start date.")

        if (data.end_date - data.start_date).days + 1 > MAX_BOOKING_DAYS:
            raise InvalidInput(f"A booking cannot span more than {MAX_BOOKING_DAYS} days.")

        thali_price(data.selected_thali)

        timing = data.event_timing.value

        with store_errors("Failed to create booking."):
            existing = self.store.find_conflicting(data.start_date, data.end_date, timing)
        if existing:
            logger.bind(log_type="booking").info(
                f"Booking Conflict | {timing} | {data.start_date}..{data.end_date} | Existing={existing.id}"
            )
            raise Conflict(f"A booking already exists for the selected {timing} slot on these dates.")

        prices = calculate_booking_price(
            data.hall_charges,
            data.items,
            data.selected_thali,
            data.number_of_people,
            data.discount,
        )

        booking = Booking(
            customer_name=data.customer_name,
            customer_number=data.customer_number,
            start_date=data.start_date,
            end_date=data.end_date,
            event_type=data.event_type,
            event_timing=timing,
            hall_charges=data.hall_charges,
            selected_thali=data.selected_thali,
            number_of_people=data.number_of_people,
            items=[item.model_dump() for item in data.items],
            discount=data.discount,
            payment_status=data.payment_status.value,
            **prices,
        )

        try:
            with store_errors("Failed to create booking."):
                booking = self.store.insert(booking)
        except SlotTaken:
            logger.bind(log_type="booking").info(
                f"Booking Conflict (concurrent) | {timing} | {data.start_date}..{data.end_date}"
            )
            raise Conflict(f"A booking already exists for the selected {timing} slot on these dates.")

        self.cache.delete(BOOKINGS_KEY)

        logger.bind(log_type="booking").info(
            f"Booking Created | Id={booking.id} | Customer={booking.customer_name} "
            f"| {timing} | {booking.start_date}..{booking.end_date} | Final={booking.final_price}"
        )
        return BookingOut.model_validate(booking)

    # ------------------------------------------------------------------
    # READ
    # ------------------------------------------------------------------
    def list_bookings(self):
        cached = self.cache.get(BOOKINGS_KEY)
        if cached is not None:
            return [BookingOut.model_validate(b) for b in cached]

        with store_errors("Failed to fetch bookings."):
            bookings = [BookingOut.model_validate(b) for b in self.store.find_all()]

        self.cache.set(BOOKINGS_KEY, [b.model_dump(mode="json", by_alias=True) for b in bookings])
        return bookings

    def get_booking(self, booking_id: str) -> BookingOut:
        cached = self.cache.get(booking_key(booking_id))
        if cached is not None:
            return BookingOut.model_validate(cached)

        with store_errors("Failed to fetch booking."):
            booking = self.store.find_by_id(booking_id)
        if not booking:
            raise NotFound("Booking not found.")

        out = BookingOut.model_validate(booking)
        self.cache.set(booking_key(booking_id), out.model_dump(mode="json", by_alias=True))
        return out

    # ------------------------------------------------------------------
    # UPDATE (payment status only)
    # ------------------------------------------------------------------
    def update_payment_status(self, booking_id: str, status: str) -> BookingOut:
        allowed = [s.value for s in PaymentStatus]
        if status not in allowed:
            raise InvalidInput("Invalid payment status. It must be 'Pending' or 'Successful'.")

        with store_errors("Failed to update booking."):
            booking = self.store.find_by_id(booking_id)
            if not booking:
                raise NotFound("Booking not found.")

            previous = booking.payment_status
            booking = self.store.update(booking, payment_status=status)

        self.cache.delete(BOOKINGS_KEY, booking_key(booking_id))

        logger.bind(log_type="payment").info(
            f"Payment Status | Id={booking_id} | {previous} -> {status}"
        )
        return BookingOut.model_validate(booking)

    # ------------------------------------------------------------------
    # DELETE
    # ------------------------------------------------------------------
    def delete_booking(self, booking_id: str):
        with store_errors("Failed to delete booking."):
            booking = self.store.find_by_id(booking_id)
            if not booking:
                raise NotFound("Booking not found.")
            self.store.delete(booking)

        self.cache.delete(BOOKINGS_KEY, booking_key(booking_id))

        logger.bind(log_type="booking").info(f"Booking Deleted | Id={booking_id}")

    # ------------------------------------------------------------------
    # CALENDAR
    # ------------------------------------------------------------------
    def booked_dates(self, month: str) -> BookingCalendar:
        start_date, end_date = month_bounds(month)

        with store_errors("Failed to fetch bookings."):
            bookings = self.store.find_in_range(start_date, end_date)

        booked = {timing.value: set() for timing in EventTiming}
        for b in bookings:
            days = booked.setdefault(b.event_timing, set())
            for d in days_between(max(b.start_date, start_date), min(b.end_date, end_date)):
                days.add(d)

        return BookingCalendar(
            month=month,
            booked_dates={timing: sorted(days) for timing, days in booked.items()},
        )
