"""
Fire view: residents of an address with their medical details, plus
the number of the station covering it.
"""

import logging
from datetime import date
from typing import List, Optional

from ..core.datastore import DataStore
from ..schemas.alerts import FireInfo, FireResponse
from .age_service import calculate_age
from .data_service import DataService

logger = logging.getLogger(__name__)


class FireService:

    @classmethod
    def get_fire_info(cls, store: DataStore, address: str, today: Optional[date] = None) -> FireResponse:
        """Residents of ``address`` that have a medical record, and the station.

        Residents without a record are left out.  An uncovered address
        still yields a response, with ``station`` set to ``-1``.
        """
        logger.info("Request received for address: %s", address)
        with store.lock:
            persons = DataService.get_persons_by_address(store, address)
            records = DataService.index_medical_records_by_name(
                DataService.get_medical_records_by_persons(store, persons)
            )
            station = DataService.get_station_by_address(store, address)

            fire_infos: List[FireInfo] = []
            for person in persons:
                record = records.get((person.first_name, person.last_name))
                if record is None:
                    logger.debug("No medical record for %s", person.full_name)
                    continue
                fire_infos.append(
                    FireInfo(
                        last_name=person.last_name,
                        phone=person.phone,
                        age=calculate_age(record.birthdate, today),
                        medications=list(record.medications),
                        allergies=list(record.allergies),
                    )
                )
        return FireResponse(fire_infos=fire_infos, station=station)
