"""Customer model with reservation bookkeeping."""
from pathlib import Path
import sys

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from typing import TYPE_CHECKING, Any                               # noqa: E402
from pydantic import BaseModel, Field                               # noqa: E402
from Users.records import Address, CreditCard, CustomerId, Guest, Name  # noqa: E402
from utils import short_id                                          # noqa: E402

if TYPE_CHECKING:
    from Hotels.booking import Reservation
else:
    Reservation = Any


class Customer(BaseModel):
    """Person holding reservations, with contact and payment details."""

    id: CustomerId = Field(
        default_factory=lambda: CustomerId(id=short_id(), id_type="internal"),
        frozen=True,
    )
    name: Name
    address: Address
    payment: CreditCard
    reservations: list[Reservation] = Field(default_factory=list, repr=False)

    def add_reservation(self, reservation: Reservation) -> None:
        """
        Record a reservation against this customer.

        Hotel.make_reservation does not call this; the caller must do it
        after a reservation is made. No effect on hotel or room state.

        Args:
            reservation: Reservation made on behalf of this customer.
        """
        self.reservations.append(reservation)

    def get_guest_info(self) -> Guest:
        ''' Fresh guest snapshot of the current name and address. '''
        return Guest(name=self.name, address=self.address)

    def to_dict(self) -> dict:
        return {
            "id": self.id.id,
            "id_type": self.id.id_type,
            "name": self.name.full_name,
            "city": self.address.city,
            "card": self.payment.masked(),
            "reservations": [reservation.id for reservation in self.reservations],
        }
