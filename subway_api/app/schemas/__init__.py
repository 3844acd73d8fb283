"""
Pydantic schema definitions for API payloads.

Schemas are separated from the domain objects in ``domain`` to
decouple the API representation from persistence.
"""
