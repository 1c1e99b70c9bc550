"""
FastAPI dependencies shared by the endpoints.

Tests replace these through ``app.dependency_overrides`` to run the
API against a temporary data file and a fixed date.
"""

from datetime import date

from ..core.datastore import DataStore, get_datastore

__all__ = ["DataStore", "get_datastore", "get_today"]


def get_today() -> date:
    """Reference date used to compute ages."""
    return date.today()
