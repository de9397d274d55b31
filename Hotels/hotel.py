'''
Hotel: room inventory, reservation ledger and the booking workflow.
'''
import logging
from datetime import date
from typing import Optional
from pydantic import BaseModel, Field, field_validator
from Hotels.booking import Reservation
from Hotels.errors import NoAvailableRoomError
from Hotels.structure import Room, RoomType
from Users.user import Customer
from utils import IdGenerator, short_id

logger = logging.getLogger(__name__)


class Hotel(BaseModel):

    name : str = Field(frozen=True)
    rooms : list[Room] = Field(default_factory=list, repr=False)
    reservations : list[Reservation] = Field(default_factory=list, repr=False)
    id_generator : IdGenerator = Field(default=short_id, repr=False, exclude=True)

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("Hotel name cannot be empty.")
        return stripped

    def add_room(self, room: Room) -> None:
        ''' Add a room to the inventory. Room numbers are not checked for duplicates. '''
        self.rooms.append(room)
        logger.debug("Room %s added to %s", room.number, self.name)

    def get_room(self, number: int) -> Optional[Room]:
        return next((room for room in self.rooms if room.number == number), None)

    def get_reservation(self, reservation_id: str) -> Optional[Reservation]:
        return next((r for r in self.reservations if r.id == reservation_id), None)

    def available_rooms(
        self,
        check_in: date,
        check_out: date,
        room_type: Optional[RoomType | str] = None,
    ) -> list[Room]:
        """
        List every room free over the given stay, in insertion order.

        Args:
            check_in: First day of the stay.
            check_out: Last day of the stay.
            room_type: Restrict to this room type when given.

        Returns:
            list[Room]: Matching rooms with no overlapping reservation.
        """
        wanted = RoomType(room_type) if room_type is not None else None
        return [
            room for room in self.rooms
            if (wanted is None or room.room_type == wanted) and room.is_available(check_in, check_out)
        ]

    def find_available_room(
        self,
        check_in: date,
        check_out: date,
        room_type: RoomType | str,
    ) -> Optional[Room]:
        ''' First room of the given type free over the stay, or None. '''
        wanted = RoomType(room_type)
        for room in self.rooms:
            if room.room_type == wanted and room.is_available(check_in, check_out):
                return room
        return None

    def make_reservation(
        self,
        customer: Customer,
        check_in: date,
        check_out: date,
        room_type: RoomType | str,
    ) -> Reservation:
        """
        Book the first free room of the requested type.

        The reservation is recorded in the hotel ledger and in the chosen
        room's own list, so later overlapping requests see it. It is not
        added to the customer; callers use Customer.add_reservation.
        Recording it on the room is deliberate: the room list is the single
        source of truth for availability.

        Args:
            customer: Customer the room is booked for.
            check_in: First day of the stay.
            check_out: Last day of the stay. Ordering is not enforced.
            room_type: Requested room type.

        Returns:
            Reservation: The new reservation, not yet checked in.

        Raises:
            NoAvailableRoomError: When no room of that type is free over the stay.
        """
        wanted = RoomType(room_type)
        room = self.find_available_room(check_in, check_out, wanted)
        if room is None:
            logger.warning(
                "No available room",
                extra={"room_type": wanted.value, "check_in": check_in.isoformat()},
            )
            raise NoAvailableRoomError(wanted, check_in, check_out)

        reservation = Reservation(
            id=self.id_generator(),
            customer=customer,
            room=room,
            check_in_date=check_in,
            check_out_date=check_out,
        )
        room.add_reservation(reservation)
        self.reservations.append(reservation)
        logger.info(
            "Reservation created",
            extra={"reservation_id": reservation.id, "room_number": room.number},
        )
        return reservation

    def check_in(self, reservation: Reservation) -> bool:
        return reservation.check_in()

    def check_out(self, room: Room) -> None:
        room.check_out()
