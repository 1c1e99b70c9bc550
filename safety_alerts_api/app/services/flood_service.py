"""
Flood view: households covered by a set of stations.

Service for retrieving every household covered by the requested fire
stations, grouped by address.  Each resident is listed with phone,
age and medical details taken from their medical record.  Residents
without a record are still listed, with an age of ``-1`` and empty
medication and allergy lists.
"""

import logging
from datetime import date
from typing import Dict, Iterable, List, Optional, Set

from ..core.datastore import DataStore
from ..schemas.alerts import FloodResponse
from .age_service import UNKNOWN_AGE, calculate_age
from .data_service import DataService, name_key

logger = logging.getLogger(__name__)


class FloodService:
    """Builds the flood view for a list of station numbers."""

    @classmethod
    def get_households(
        cls,
        store: DataStore,
        station_numbers: Iterable[int],
        today: Optional[date] = None,
    ) -> Dict[str, List[FloodResponse]]:
        """Return a map from address to the residents living there.

        Addresses covered by several of the requested stations appear
        once.  Medical records are matched on the lowercased full name.
        Addresses are sorted.  An empty map means that no address or no
        resident was found.
        """
        station_numbers = list(station_numbers)
        logger.info("Request received for fire stations: %s", station_numbers)
        with store.lock:
            addresses: Set[str] = set()
            for station_number in station_numbers:
                addresses |= DataService.get_addresses_by_station_number(store, station_number)
            if not addresses:
                logger.warning("No addresses found for fire stations: %s", station_numbers)
                return {}

            households: Dict[str, List[FloodResponse]] = {}
            residents = []
            for address in sorted(addresses):
                residents.extend(DataService.get_persons_by_address(store, address))
            if not residents:
                logger.warning("No people found at addresses: %s", sorted(addresses))
                return {}

            records = DataService.index_medical_records(
                DataService.get_medical_records_by_persons(store, residents), lowercase=True
            )
            for person in residents:
                record = records.get(name_key(person.first_name, person.last_name, lowercase=True))
                if record is not None:
                    age = calculate_age(record.birthdate, today)
                    medications = list(record.medications)
                    allergies = list(record.allergies)
                else:
                    age, medications, allergies = UNKNOWN_AGE, [], []
                households.setdefault(person.address, []).append(
                    FloodResponse(
                        first_name=person.first_name,
                        last_name=person.last_name,
                        phone=person.phone,
                        age=age,
                        medications=medications,
                        allergies=allergies,
                    )
                )
        return households
