"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Domain objects live in ``domain``, persistence access in
``dao``, business rules in ``services`` and HTTP routing in
``api/v1/endpoints``.  Versioning is handled by grouping routers under
the ``api/<version>/`` hierarchy.
"""

from .main import app  # noqa: F401
