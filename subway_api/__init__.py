"""
Top‑level package for the Subway Line API.

This file makes ``subway_api`` a Python package so that modules within
``app`` can be imported using fully qualified names like
``subway_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
