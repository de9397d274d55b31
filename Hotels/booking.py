import logging
from datetime import date
from pydantic import BaseModel, Field
from Hotels.structure import Money, Room
from Users.user import Customer
from utils import are_overlapping, short_id

logger = logging.getLogger(__name__)


class Reservation(BaseModel):

    id : str = Field(default_factory=short_id, frozen=True)
    customer : Customer = Field(frozen=True, repr=False)
    room : Room = Field(frozen=True, repr=False)
    check_in_date : date = Field(frozen=True)
    check_out_date : date = Field(frozen=True)
    checked_in : bool = False

    @property
    def nights(self) -> int:
        ''' Whole nights between check-in and check-out. Zero or negative is allowed. '''
        return (self.check_out_date - self.check_in_date).days

    def overlaps(self, start: date, end: date) -> bool:
        ''' Check whether this reservation shares at least one day with [start, end]. '''
        return are_overlapping(self.check_in_date, self.check_out_date, start, end)

    def check_in(self) -> bool:
        """
        Check the customer into the reserved room.

        Availability is not re-validated here. If the room already has an
        occupant the room refuses and the reservation stays not checked in.

        Returns:
            bool: True on the first successful check-in, False otherwise.
        """
        if self.checked_in:
            logger.debug("Reservation %s already checked in", self.id)
            return False
        self.checked_in = self.room.check_in(self.customer.get_guest_info())
        return self.checked_in

    def calculate_total_cost(self) -> Money:
        ''' Nights times the room's nightly rate. '''
        return Money(amount=self.nights * self.room.price, currency=self.room.currency)

    def to_dict(self) -> dict[str, str | int | bool]:
        """
        Serialize the reservation into a dictionary.

        Returns:
            dict[str, str | int | bool]: Mapping with ISO dates and references by id.
        """
        return {
            "id": self.id,
            "customer_id": self.customer.id.id,
            "room_number": self.room.number,
            "check_in": self.check_in_date.isoformat(),
            "check_out": self.check_out_date.isoformat(),
            "nights": self.nights,
            "total_cost": f"{self.calculate_total_cost().amount:.2f}",
            "checked_in": self.checked_in,
        }
