"""Trip direction domain model."""

from enum import Enum


class TripDirection(Enum):
    """Direction of travel relative to the office."""

    TO_OFFICE = "to-office"
    FROM_OFFICE = "from-office"

    @classmethod
    def from_flag(cls, to_office: bool) -> "TripDirection":
        return cls.TO_OFFICE if to_office else cls.FROM_OFFICE
