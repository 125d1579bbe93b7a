"""
models/filters.py
-----------------
Search criteria for property listings.
"""

from dataclasses import dataclass, fields
from decimal import Decimal
from typing import Any, Mapping, Optional, Union

Amount = Union[int, float, Decimal, str]


@dataclass
class FilterCriteria:
    """
    Optional filters for a property search. A field left as None means
    "do not filter on this dimension".

    Attributes:
        city: Case-insensitive substring of the city name.
        owner_id: Only properties of this owner.
        minimum_price_per_night: Lower price bound in major units.
        maximum_price_per_night: Upper price bound in major units.
            The price range applies only when both bounds are given.
        minimum_rating: Inclusive lower bound on the average review rating.
    """
    city: Optional[str] = None
    owner_id: Optional[int] = None
    minimum_price_per_night: Optional[Amount] = None
    maximum_price_per_night: Optional[Amount] = None
    minimum_rating: Optional[Amount] = None

    @property
    def has_price_range(self) -> bool:
        return (
            self.minimum_price_per_night is not None
            and self.maximum_price_per_night is not None
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "FilterCriteria":
        """
        Build criteria from a form or query-string style mapping.
        Unknown keys are ignored and empty strings count as absent.
        """
        known = {f.name for f in fields(cls)}
        values = {
            key: value
            for key, value in data.items()
            if key in known and value is not None and value != ""
        }
        return cls(**values)
