"""Immutable value records describing people: names, addresses, payment and guests."""
from pydantic import BaseModel, ConfigDict, field_validator


class Name(BaseModel):
    model_config = ConfigDict(frozen=True)

    first_name : str
    last_name : str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class Address(BaseModel):
    model_config = ConfigDict(frozen=True)

    street : str
    city : str
    zip_code : str


class CreditCard(BaseModel):
    """Payment method on file for a customer. Never charged here."""

    model_config = ConfigDict(frozen=True)

    card_number : str
    expiry_date : str

    @field_validator("card_number")
    @classmethod
    def strip_separators(cls, value: str) -> str:
        """
        Drop spaces and dashes from the card number.

        Args:
            value: Raw card number.

        Returns:
            The card number without separators.

        Raises:
            ValueError: If the remaining characters are not all digits.
        """
        digits = value.replace(" ", "").replace("-", "")
        if not digits.isdigit():
            raise ValueError("Card number must contain only digits.")
        return digits

    def masked(self) -> str:
        ''' Card number with all but the last four digits hidden. '''
        return "*" * (len(self.card_number) - 4) + self.card_number[-4:]


class CustomerId(BaseModel):
    model_config = ConfigDict(frozen=True)

    id : str
    id_type : str


class Guest(BaseModel):
    """Name and address snapshot used to mark a room as occupied."""

    model_config = ConfigDict(frozen=True)

    name : Name
    address : Address
