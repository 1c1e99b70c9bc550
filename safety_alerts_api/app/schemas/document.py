"""
Schema of the persisted JSON document.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from .fire_station import FireStation
from .medical_record import MedicalRecord
from .person import Person


class DataDocument(BaseModel):
    """The three collections exactly as they appear in the data file.

    All three keys are required; a document missing one of them is
    rejected as a whole.
    """

    model_config = ConfigDict(populate_by_name=True)

    persons: List[Person]
    fire_stations: List[FireStation] = Field(alias="firestations")
    medical_records: List[MedicalRecord] = Field(alias="medicalrecords")
