'''
Structure class implementation for Hotels module.
'''
import logging
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from Users.records import Guest
from utils import are_overlapping

if TYPE_CHECKING:
    from Hotels.booking import Reservation
else:
    Reservation = Any

logger = logging.getLogger(__name__)


class RoomType(str, Enum):
    SINGLE = "single"
    DOUBLE = "double"
    SUITE = "suite"
    DELUXE = "deluxe"

    @classmethod
    def _missing_(cls, value):
        # accept "DELUXE", "Deluxe", ...
        if isinstance(value, str):
            for member in cls:
                if member.value == value.lower():
                    return member
        return None


class Money(BaseModel):
    model_config = ConfigDict(frozen=True)

    amount : Decimal
    currency : str = "USD"

    def __str__(self) -> str:
        return f"{self.amount:.2f} {self.currency}"


class Room(BaseModel):

    number : int = Field(frozen=True)
    room_type : RoomType = Field(frozen=True)
    price : Decimal = Field(frozen=True)
    currency : str = Field(default="USD", frozen=True)
    occupant : Optional[Guest] = None
    reservations : list[Reservation] = Field(default_factory=list, repr=False)

    @field_validator("room_type", mode="before")
    @classmethod
    def normalize_room_type(cls, value):
        if isinstance(value, str) and not isinstance(value, RoomType):
            return RoomType(value)
        return value

    @model_validator(mode="after")
    def validate_structure(self):
        # enforce non-negative price
        if self.price < 0:
            raise ValueError("Room price must be a non-negative amount.")
        return self

    @property
    def is_occupied(self) -> bool:
        return self.occupant is not None

    @property
    def rate(self) -> Money:
        return Money(amount=self.price, currency=self.currency)

    def add_reservation(self, reservation: Reservation) -> None:
        ''' Record a reservation against this room. '''
        self.reservations.append(reservation)

    def is_available(self, check_in: date, check_out: date) -> bool:
        """
        Tell whether no reservation of this room overlaps the given stay.

        Args:
            check_in: First day of the requested stay.
            check_out: Last day of the requested stay.

        Returns:
            True when the room's own reservations leave the range free.
        """
        return not any(
            are_overlapping(reservation.check_in_date, reservation.check_out_date, check_in, check_out)
            for reservation in self.reservations
        )

    def check_in(self, guest: Guest) -> bool:
        ''' Occupy the room. Refused (False) when someone is already in. '''
        if self.occupant is not None:
            logger.debug("Room %s already occupied", self.number)
            return False
        self.occupant = guest
        return True

    def check_out(self) -> None:
        self.occupant = None

    def to_dict(self) -> dict[str, str | int | None]:
        """
        Serialize the room into a dictionary.

        Returns:
            dict[str, str | int | None]: Mapping with stringified amounts.
        """
        return {
            "number": self.number,
            "room_type": self.room_type.value,
            "price": f"{self.price:.2f}",
            "currency": self.currency,
            "occupant": self.occupant.name.full_name if self.occupant else None,
        }
