"""
Child alert: minors living at an address and the adults they live with.
"""

import logging
from datetime import date
from typing import List, Optional, Tuple

from ..core.datastore import DataStore
from ..schemas.alerts import ChildResponse
from ..schemas.medical_record import MedicalRecord
from .age_service import UNKNOWN_AGE, calculate_age, is_adult
from .data_service import DataService

logger = logging.getLogger(__name__)


class ChildAlertService:
    """Builds the child alert for an address."""

    @classmethod
    def get_children_by_address(
        cls, store: DataStore, address: str, today: Optional[date] = None
    ) -> List[ChildResponse]:
        """Return every minor at ``address`` with the list of adults there.

        All medical records of the residents are partitioned first; the
        family list is therefore complete for every child, whatever the
        order of the records.  Each child receives its own copy of the
        list.  Records with an unknown age belong to neither group.
        An empty list means no resident or no minor was found.
        """
        logger.info("Searching for children at address: %s", address)
        with store.lock:
            persons = DataService.get_persons_by_address(store, address)
            if not persons:
                logger.warning("No person found at address: %s", address)
                return []
            records = DataService.get_medical_records_by_persons(store, persons)

            adults: List[str] = []
            minors: List[Tuple[MedicalRecord, int]] = []
            for record in records:
                age = calculate_age(record.birthdate, today)
                if age == UNKNOWN_AGE:
                    logger.warning("Skipping %s: unknown age", record.full_name)
                elif is_adult(age):
                    adults.append(record.full_name)
                else:
                    minors.append((record, age))

            children = [
                ChildResponse(
                    first_name=record.first_name,
                    last_name=record.last_name,
                    age=age,
                    family=list(adults),
                )
                for record, age in minors
            ]
        if not children:
            logger.warning("No children found at address: %s", address)
        return children
