"""
repositories/property_repo.py
------------------------------
Data access layer for properties: the filtered listing search and
property creation.
"""

from typing import Optional

from config import DEFAULT_RESULT_LIMIT
from db.connection import DataStore
from db.query_builder import SelectQuery
from models.filters import FilterCriteria
from models.property import Property, PropertyListing
from utils.logger import get_logger
from utils.money import to_minor_units

logger = get_logger(__name__)

LISTING_SELECT = """
    SELECT properties.*, AVG(property_reviews.rating) AS average_rating
    FROM properties
    JOIN property_reviews ON properties.id = property_reviews.property_id
"""

INSERT_COLUMNS = (
    "owner_id", "title", "description", "thumbnail_photo_url",
    "cover_photo_url", "cost_per_night", "street", "city", "province",
    "post_code", "country", "parking_spaces", "number_of_bathrooms",
    "number_of_bedrooms",
)


def build_search_query(
    criteria: FilterCriteria, limit: Optional[int] = DEFAULT_RESULT_LIMIT
) -> SelectQuery:
    """
    Assemble the listing search for `criteria`.

    Properties without reviews drop out through the inner join. A price
    range needs both bounds; a single bound is ignored. A limit of None
    means DEFAULT_RESULT_LIMIT.

    Raises:
        decimal.InvalidOperation: If a price bound is not numeric.
    """
    query = SelectQuery(LISTING_SELECT)
    if criteria.city:
        query.where("properties.city ILIKE {}", f"%{criteria.city}%")
    if criteria.owner_id is not None:
        query.where("properties.owner_id = {}", criteria.owner_id)
    if criteria.has_price_range:
        query.where(
            "properties.cost_per_night BETWEEN {} AND {}",
            to_minor_units(criteria.minimum_price_per_night),
            to_minor_units(criteria.maximum_price_per_night),
        )
    query.group("properties.id")
    if criteria.minimum_rating is not None:
        query.having("AVG(property_reviews.rating) >= {}", criteria.minimum_rating)
    query.order("properties.cost_per_night")
    query.limit_to(limit if limit is not None else DEFAULT_RESULT_LIMIT)
    return query


class PropertyRepository:
    """Search and inserts on the properties table."""

    def __init__(self, store: Optional[DataStore] = None):
        self.store = store if store is not None else DataStore()

    # ── READ ──────────────────────────────────────────────

    def get_all_properties(
        self,
        criteria: Optional[FilterCriteria] = None,
        limit: Optional[int] = DEFAULT_RESULT_LIMIT,
    ) -> list[PropertyListing]:
        """
        Search reviewed properties, cheapest first.

        Args:
            criteria: Filters to apply; None or an empty FilterCriteria
                returns the unfiltered listing set.
            limit: Maximum number of listings; None means
                DEFAULT_RESULT_LIMIT.

        Returns:
            Matching listings ordered by ascending nightly price.

        Raises:
            decimal.InvalidOperation: If a price bound is not numeric.
                Bounds are converted to cents before the statement runs,
                so this is raised locally rather than by the database.
            psycopg2.Error: Propagated unchanged from the store.
        """
        query = build_search_query(criteria or FilterCriteria(), limit)
        sql, params = query.render(self.store.paramstyle)
        logger.debug(f"Property search: {sql} {params}")
        return [PropertyListing.from_row(r) for r in self.store.execute(sql, params)]

    search = get_all_properties

    # ── CREATE ────────────────────────────────────────────

    def add_property(self, prop: Property) -> Property:
        """
        Insert a new property. `cost_per_night` is stored as given, in cents.

        Returns:
            The stored Property with its `id` populated.
        """
        sql = f"""
            INSERT INTO properties ({", ".join(INSERT_COLUMNS)})
            VALUES ({", ".join(["%s"] * len(INSERT_COLUMNS))})
            RETURNING *;
        """
        params = tuple(getattr(prop, column) for column in INSERT_COLUMNS)
        rows = self.store.execute(sql, params, commit=True)
        stored = Property.from_row(rows[0])
        logger.info(f"Added property #{stored.id} for owner {stored.owner_id}")
        return stored
