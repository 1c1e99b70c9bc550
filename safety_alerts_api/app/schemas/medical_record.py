"""
Pydantic schema for medical records.

Records are joined to persons by the exact ``(firstName, lastName)``
pair.  ``birthdate`` uses the ``MM/dd/yyyy`` format; a record with an
unparsable birthdate is kept and reported with an unknown age.
"""

from typing import List

from pydantic import Field

from .base import CamelModel


class MedicalRecord(CamelModel):
    """Medical history of one person."""

    first_name: str = Field("", examples=["John"])
    last_name: str = Field("", examples=["Boyd"])
    birthdate: str = Field("", examples=["03/06/1984"], description="MM/dd/yyyy")
    medications: List[str] = Field(default_factory=list, examples=[["aznol:350mg", "hydrapermazol:100mg"]])
    allergies: List[str] = Field(default_factory=list, examples=[["nillacilan"]])

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
