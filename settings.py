'''
Runtime configuration for the booking demo, read from the environment (.env supported).
'''
import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from Hotels.structure import RoomType


class Settings(BaseModel):
    """Demo configuration."""

    hotel_name : str = "Grand Palace"
    currency : str = "USD"
    stay_nights : int = Field(default=3, ge=0)
    room_type : RoomType = RoomType.DELUXE
    log_level : str = "INFO"

    @field_validator("room_type", mode="before")
    @classmethod
    def normalize_room_type(cls, value):
        if isinstance(value, str) and not isinstance(value, RoomType):
            return RoomType(value)
        return value

    @field_validator("hotel_name")
    @classmethod
    def hotel_name_not_blank(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("Hotel name cannot be empty.")
        return stripped

    @field_validator("log_level")
    @classmethod
    def known_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level {value!r}.")
        return level


def load_settings() -> Settings:
    """Build the demo settings from environment variables.

    The .env file may define:
    - HOTEL_NAME
    - HOTEL_CURRENCY
    - HOTEL_STAY_NIGHTS
    - HOTEL_ROOM_TYPE
    - LOG_LEVEL

    Returns:
        Settings with defaults for every variable left unset.

    Raises:
        ValueError: If any variable holds an invalid value.
    """

    load_dotenv()
    env = {
        "hotel_name": os.getenv("HOTEL_NAME"),
        "currency": os.getenv("HOTEL_CURRENCY"),
        "stay_nights": os.getenv("HOTEL_STAY_NIGHTS"),
        "room_type": os.getenv("HOTEL_ROOM_TYPE"),
        "log_level": os.getenv("LOG_LEVEL"),
    }
    try:
        return Settings(**{key: value for key, value in env.items() if value is not None})
    except ValidationError as exc:
        raise ValueError(f"Invalid configuration: {exc}") from exc
