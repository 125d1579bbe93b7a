import pytest


class FakeDataStore:
    """Records every statement and replays canned rows."""

    def __init__(self, paramstyle="format"):
        self.paramstyle = paramstyle
        self.calls = []
        self.rows = []
        self.error = None

    def execute(self, statement, params=(), commit=False):
        self.calls.append((statement, list(params), commit))
        if self.error is not None:
            raise self.error
        return self.rows

    @property
    def last_sql(self):
        return self.calls[-1][0]

    @property
    def last_params(self):
        return self.calls[-1][1]


def property_row(**overrides):
    row = {
        "id": 1,
        "owner_id": 7,
        "title": "Speed lamp",
        "description": "description",
        "thumbnail_photo_url": "https://example.com/thumb.jpg",
        "cover_photo_url": "https://example.com/cover.jpg",
        "cost_per_night": 9300,
        "parking_spaces": 6,
        "number_of_bathrooms": 4,
        "number_of_bedrooms": 8,
        "country": "Canada",
        "street": "536 Namsub Highway",
        "city": "Sotboske",
        "province": "Quebec",
        "post_code": "28142",
        "active": True,
        "average_rating": 4,
    }
    row.update(overrides)
    return row


@pytest.fixture
def store():
    return FakeDataStore()
