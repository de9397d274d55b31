'''
Errors raised by the booking workflow.
'''
from datetime import date


class HotelError(Exception):
    """Base class for booking workflow errors."""


class NoAvailableRoomError(HotelError):
    """No room of the requested type is free over the requested stay."""

    def __init__(self, room_type, check_in: date, check_out: date):
        self.room_type = room_type
        self.check_in = check_in
        self.check_out = check_out
        super().__init__(f"No available rooms of type {room_type.name}")
