"""
Service layer abstraction.

Each service encapsulates the business rules for a domain on top of
the DAOs so API handlers never touch SQL directly.
"""
