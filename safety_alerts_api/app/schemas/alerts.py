"""
Response models for the alert views.

These models describe derived, read-only results.  Ages are whole
years; ``-1`` means the age is unknown (no medical record or an
unparsable birthdate).
"""

from typing import List

from pydantic import Field

from .base import CamelModel


class ChildResponse(CamelModel):
    """A minor living at the requested address."""

    first_name: str
    last_name: str
    age: int
    family: List[str] = Field(default_factory=list, description="Adults at the same address")


class FireInfo(CamelModel):
    """Resident of an address, with medical details."""

    last_name: str
    phone: str
    age: int
    medications: List[str] = Field(default_factory=list)
    allergies: List[str] = Field(default_factory=list)


class FireResponse(CamelModel):
    """Residents of an address and the station covering it (``-1`` if none)."""

    fire_infos: List[FireInfo] = Field(default_factory=list)
    station: int


class PersonInfo(CamelModel):
    """Contact details of a person covered by a station."""

    first_name: str
    last_name: str
    address: str
    phone: str


class FirestationResponse(CamelModel):
    """Persons covered by a station with adult and child counts."""

    persons: List[PersonInfo] = Field(default_factory=list)
    adult_count: int
    child_count: int


class FloodResponse(CamelModel):
    """Member of a household covered by the requested stations."""

    first_name: str
    last_name: str
    phone: str
    age: int
    medications: List[str] = Field(default_factory=list)
    allergies: List[str] = Field(default_factory=list)


class PersonInfoLastNameResponse(CamelModel):
    """Person details returned by the last-name lookup."""

    last_name: str
    address: str
    age: int
    email: str
    medications: List[str] = Field(default_factory=list)
    allergies: List[str] = Field(default_factory=list)
