"""
repositories/reservation_repo.py
---------------------------------
Data access layer for a guest's reservations.
"""

from typing import Optional

from config import DEFAULT_RESULT_LIMIT
from db.connection import DataStore
from models.property import Property
from models.reservation import ReservationListing


class ReservationRepository:
    """Read access to the reservations table."""

    def __init__(self, store: Optional[DataStore] = None):
        self.store = store if store is not None else DataStore()

    def get_all_reservations(
        self, guest_id: int, limit: Optional[int] = DEFAULT_RESULT_LIMIT
    ) -> list[ReservationListing]:
        """
        Fetch a guest's reservations, earliest stay first.

        Reservations on properties that have no reviews are not returned.

        Args:
            guest_id: Id of the guest.
            limit: Maximum number of reservations; None means
                DEFAULT_RESULT_LIMIT.
        """
        sql = """
            SELECT reservations.start_date, reservations.end_date,
                   properties.*, AVG(property_reviews.rating) AS average_rating
            FROM reservations
            JOIN properties ON reservations.property_id = properties.id
            JOIN property_reviews ON properties.id = property_reviews.property_id
            WHERE reservations.guest_id = %s
            GROUP BY properties.id, reservations.id
            ORDER BY reservations.start_date
            LIMIT %s;
        """
        if limit is None:
            limit = DEFAULT_RESULT_LIMIT
        rows = self.store.execute(sql, (guest_id, limit))
        return [
            ReservationListing(
                start_date=r["start_date"],
                end_date=r["end_date"],
                property=Property.from_row(r),
                average_rating=float(r["average_rating"]),
            )
            for r in rows
        ]
