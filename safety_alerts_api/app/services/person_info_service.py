"""
Person info: details and medical history of everyone with a last name.
"""

import logging
from datetime import date
from typing import List, Optional

from ..core.datastore import DataStore
from ..schemas.alerts import PersonInfoLastNameResponse
from .age_service import calculate_age
from .data_service import DataService

logger = logging.getLogger(__name__)


class PersonInfoService:

    @classmethod
    def get_person_info_by_last_name(
        cls, store: DataStore, last_name: str, today: Optional[date] = None
    ) -> List[PersonInfoLastNameResponse]:
        """Persons named ``last_name`` that have a medical record.

        Persons without a matching record are dropped; an empty list
        means nothing was found.
        """
        logger.info("Received request to get person information for last name: %s", last_name)
        with store.lock:
            persons = DataService.get_persons_by_last_name(store, last_name)
            if not persons:
                logger.warning("No persons found for last name: %s", last_name)
                return []
            records = DataService.index_medical_records_by_name(
                DataService.get_medical_records_by_persons(store, persons)
            )
            responses = []
            for person in persons:
                record = records.get((person.first_name, person.last_name))
                if record is None:
                    continue
                responses.append(
                    PersonInfoLastNameResponse(
                        last_name=person.last_name,
                        address=person.address,
                        age=calculate_age(record.birthdate, today),
                        email=person.email,
                        medications=list(record.medications),
                        allergies=list(record.allergies),
                    )
                )
        logger.info("Found %d person(s) with last name: %s", len(responses), last_name)
        return responses
