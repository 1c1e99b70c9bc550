"""
Pydantic schema for fire station coverage.

Each entry maps one address to the number of the station that covers
it.  The address is the natural key.
"""

from pydantic import Field

from .base import CamelModel


class FireStation(CamelModel):
    """Coverage entry: ``address`` is served by station ``station``."""

    address: str = Field("", examples=["1509 Culver St"])
    station: int = Field(0, examples=[3], description="Station number; numeric strings are accepted")
