'''
Demonstration driver for the hotel booking workflow.

Builds a small hotel with four rooms, books a stay for one customer
starting today and checks the customer in. Configuration comes from the
environment (see settings.py).

Usage:
    python main.py

Exit status is 0 on success and 1 when the booking or check-in fails.
'''

import logging
import sys
from datetime import date, timedelta
from decimal import Decimal

from Hotels.errors import HotelError
from Hotels.hotel import Hotel
from Hotels.structure import Room, RoomType
from settings import Settings, load_settings
from Users.records import Address, CreditCard, Name
from Users.user import Customer
from utils import validate_stay

logger = logging.getLogger(__name__)

DEMO_ROOMS = [
    (101, RoomType.SINGLE, Decimal("100.00")),
    (102, RoomType.DOUBLE, Decimal("150.00")),
    (201, RoomType.SUITE, Decimal("200.00")),
    (301, RoomType.DELUXE, Decimal("250.00")),
]


def build_demo_hotel(settings: Settings) -> Hotel:
    hotel = Hotel(name=settings.hotel_name)
    for number, room_type, price in DEMO_ROOMS:
        hotel.add_room(Room(number=number, room_type=room_type, price=price, currency=settings.currency))
    return hotel


def build_demo_customer() -> Customer:
    return Customer(
        name=Name(first_name="John", last_name="Doe"),
        address=Address(street="123 Main St", city="Springfield", zip_code="12345"),
        payment=CreditCard(card_number="4111-1111-1111-1111", expiry_date="12/30"),
    )


def run(settings: Settings, today: date) -> int:
    """Book and check in one demo stay.

    Args:
        settings: Demo configuration.
        today: First day of the stay.

    Returns:
        Process exit code.
    """

    check_out = today + timedelta(days=settings.stay_nights)

    try:
        hotel = build_demo_hotel(settings)
        customer = build_demo_customer()
        validate_stay(today, check_out)
        reservation = hotel.make_reservation(customer, today, check_out, settings.room_type)
    except (HotelError, ValueError) as exc:
        logger.error("Booking failed: %s", exc)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    customer.add_reservation(reservation)

    print(f"Reservation made: {reservation.id}")
    print(f"Room: {reservation.room.number} ({reservation.room.room_type.value}), {reservation.room.rate} per night")
    print(f"Total cost: {reservation.calculate_total_cost()}")

    if not hotel.check_in(reservation):
        logger.error("Check-in refused for reservation %s", reservation.id)
        print(f"Error: check-in failed for reservation {reservation.id}", file=sys.stderr)
        return 1
    print(f"Checked in: {customer.name.full_name}")
    return 0


def main() -> None:
    """Entry point that loads configuration and runs the demo."""

    try:
        settings = load_settings()
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(message)s")
    sys.exit(run(settings, date.today()))


if __name__ == "__main__":
    main()
