"""
models/property.py
------------------
Domain models for rental properties and search results.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Property:
    """
    A property offered for rent.

    Attributes:
        owner_id: Id of the owning user.
        cost_per_night: Nightly price in cents.
        id: Database primary key (None for new records).
    """
    owner_id: int
    title: str
    description: Optional[str]
    thumbnail_photo_url: str
    cover_photo_url: str
    cost_per_night: int
    street: str
    city: str
    province: str
    post_code: str
    country: str
    parking_spaces: int = 0
    number_of_bathrooms: int = 0
    number_of_bedrooms: int = 0
    active: bool = True
    id: Optional[int] = None

    @classmethod
    def from_row(cls, row: dict) -> "Property":
        """Build a Property from a row carrying the properties columns."""
        return cls(
            id=row["id"],
            owner_id=row["owner_id"],
            title=row["title"],
            description=row.get("description"),
            thumbnail_photo_url=row["thumbnail_photo_url"],
            cover_photo_url=row["cover_photo_url"],
            cost_per_night=row["cost_per_night"],
            street=row["street"],
            city=row["city"],
            province=row["province"],
            post_code=row["post_code"],
            country=row["country"],
            parking_spaces=row.get("parking_spaces", 0),
            number_of_bathrooms=row.get("number_of_bathrooms", 0),
            number_of_bedrooms=row.get("number_of_bedrooms", 0),
            active=row.get("active", True),
        )

    @property
    def price_per_night(self) -> float:
        """Nightly price in major currency units."""
        return self.cost_per_night / 100

    def __str__(self) -> str:
        return f"{self.title} ({self.city}) - {self.price_per_night:.2f}/night"


@dataclass
class PropertyListing:
    """A property together with the average rating of its reviews."""
    property: Property
    average_rating: float

    @classmethod
    def from_row(cls, row: dict) -> "PropertyListing":
        return cls(
            property=Property.from_row(row),
            average_rating=float(row["average_rating"]),
        )

    def __str__(self) -> str:
        return f"{self.property} ★{self.average_rating:.1f}"
