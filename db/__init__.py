"""
db/ - Database Layer
====================
PostgreSQL connection pool, the `DataStore` query-execution primitive,
the property search statement builder and schema initialization.
Nothing here depends on the repositories or models.
"""
