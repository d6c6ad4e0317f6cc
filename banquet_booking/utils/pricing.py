import math

from banquet_booking.core.errors import InvalidInput
from banquet_booking.models.enums import ThaliType

THALI_PRICES = {
    ThaliType.NORMAL.value: 200,
    ThaliType.SUPREME.value: 500,
    ThaliType.DELUXE.value: 800,
}


def thali_price(selected_thali: str) -> int:
    try:
        return THALI_PRICES[selected_thali]
    except KeyError:
        raise InvalidInput("unknown thali type")


def calculate_booking_price(hall_charges, items, selected_thali, number_of_people, discount):
    """
    Derive every price field of a booking.

    items is a sequence of objects/dicts with price and quantity.
    Returns a dict keyed by the model's column names.
    """
    unit_price = thali_price(selected_thali)

    catering_total = unit_price * number_of_people

    try:
        item_total = 0
        for item in items:
            price = item["price"] if isinstance(item, dict) else item.price
            quantity = item["quantity"] if isinstance(item, dict) else item.quantity
            item_total += (price or 0) * (quantity or 0)

        total = hall_charges + item_total + catering_total

        # multiply before dividing so whole-number inputs stay exact
        discount_amount = round(total * discount / 100, 2)

        prices = {
            "thali_price": unit_price,
            "catering_total": round(catering_total, 2),
            "item_total": round(item_total, 2),
            "total_price": round(total, 2),
            "discount_amount": discount_amount,
            "final_price": round(total - discount_amount, 2),
        }
        finite = all(math.isfinite(value) for value in prices.values())
    except OverflowError:
        finite = False

    if not finite:
        raise InvalidInput("Booking amounts are too large")
    return prices
