import pytest

from banquet_booking.core.errors import InvalidInput
from banquet_booking.schemas.booking import BookingItem
from banquet_booking.utils.pricing import THALI_PRICES, calculate_booking_price, thali_price


def test_thali_table():
    assert THALI_PRICES == {"Normal": 200, "Supreme": 500, "Deluxe": 800}


def test_unknown_thali_is_invalid_input():
    with pytest.raises(InvalidInput):
        thali_price("Royal")


def test_worked_example():
    prices = calculate_booking_price(
        hall_charges=1000,
        items=[{"price": 50, "quantity": 4}],
        selected_thali="Supreme",
        number_of_people=10,
        discount=10,
    )

    assert prices == {
        "thali_price": 500,
        "catering_total": 5000,
        "item_total": 200,
        "total_price": 6200,
        "discount_amount": 620,
        "final_price": 5580,
    }


def test_items_as_schema_objects():
    items = [BookingItem(name="Stage", price=1500, quantity=1), BookingItem(price=25.5, quantity=2)]

    prices = calculate_booking_price(0, items, "Normal", 0, 0)

    assert prices["item_total"] == pytest.approx(1551)
    assert prices["catering_total"] == 0
    assert prices["final_price"] == pytest.approx(1551)


@pytest.mark.parametrize(
    "hall, items, thali, people, discount",
    [
        (0, [], "Normal", 0, 0),
        (2500, [], "Deluxe", 150, 5),
        (12000, [{"price": 300, "quantity": 3}, {"price": 99.99, "quantity": 7}], "Supreme", 75, 12.5),
        (500, [{"price": 10, "quantity": 1}], "Normal", 1, 100),
    ],
)
def test_final_price_formula(hall, items, thali, people, discount):
    prices = calculate_booking_price(hall, items, thali, people, discount)

    expected_total = hall + sum(i["price"] * i["quantity"] for i in items) + THALI_PRICES[thali] * people
    assert prices["total_price"] == pytest.approx(expected_total)
    assert prices["final_price"] == pytest.approx(expected_total * (1 - discount / 100), abs=0.01)


def test_full_discount_is_free():
    prices = calculate_booking_price(500, [], "Deluxe", 2, 100)

    assert prices["total_price"] == 2100
    assert prices["final_price"] == 0


@pytest.mark.parametrize(
    "hall, items, people, discount",
    [
        (1.7e308, [{"price": 1.7e308, "quantity": 1}], 0, 0),
        (1.7e308, [], 0, 100),
        (0, [], 10 ** 400, 0),
    ],
)
def test_non_finite_amounts_are_invalid_input(hall, items, people, discount):
    with pytest.raises(InvalidInput, match="too large"):
        calculate_booking_price(hall, items, "Normal", people, discount)


def test_huge_item_quantity_is_invalid_input():
    with pytest.raises(InvalidInput):
        calculate_booking_price(0, [{"price": 1.5, "quantity": 10 ** 400}], "Normal", 0, 0)
