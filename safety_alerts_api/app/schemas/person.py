"""
Pydantic schema for persons.

A person is identified by the pair ``(firstName, lastName)``.  Fields
default to blank values so that incomplete bodies reach the service
layer, which reports every missing field as a bad request.
"""

from pydantic import Field

from .base import CamelModel


class Person(CamelModel):
    """A resident as stored in the data file."""

    first_name: str = Field("", examples=["John"])
    last_name: str = Field("", examples=["Boyd"])
    address: str = Field("", examples=["1509 Culver St"])
    city: str = Field("", examples=["Culver"])
    zip: int = Field(0, examples=[97451], description="Postal code; numeric strings are accepted")
    phone: str = Field("", examples=["841-874-6512"])
    email: str = Field("", examples=["jaboyd@email.com"])

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
