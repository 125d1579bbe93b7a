"""
models/reservation.py
---------------------
Domain model for a guest's reservation as shown on their trips page.
"""

from dataclasses import dataclass
from datetime import date

from models.property import Property


@dataclass
class ReservationListing:
    """
    A reservation joined with the reserved property.

    Attributes:
        start_date: First night.
        end_date: Check-out date.
        property: The reserved property.
        average_rating: Average review rating of the property.
    """
    start_date: date
    end_date: date
    property: Property
    average_rating: float

    @property
    def nights(self) -> int:
        return (self.end_date - self.start_date).days
