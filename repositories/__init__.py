"""
repositories/ - Data Access Layer
==================================
Each repository holds the SQL for one LightBnB entity. Repositories run
their statements through an injected `DataStore` and return domain model
objects built from the rows.
"""
