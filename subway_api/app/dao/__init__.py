"""
Data access objects.

Each DAO is a thin pass-through over one table: it turns rows into
domain objects and domain objects into parameterised statements.  No
business rules live here; uniqueness and existence checks belong to
the service layer.
"""
