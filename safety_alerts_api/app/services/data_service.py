"""
Lookups joining persons, fire stations and medical records.

``DataService`` holds the side-effect-free queries every view is built
from.  Matching rules:

* persons and medical records join on the exact ``(firstName,
  lastName)`` pair, case sensitive;
* persons and fire stations join on the exact address;
* empty lookup keys match nothing.

Each query takes the store lock, so it is safe to call on its own or
from a view that already holds it.
"""

import logging
from typing import Any, Dict, Iterable, List, Set, Tuple

from ..core.datastore import DataStore
from ..schemas.medical_record import MedicalRecord
from ..schemas.person import Person

logger = logging.getLogger(__name__)

UNKNOWN_STATION = -1


def is_blank(value: Any) -> bool:
    """``True`` for ``None``, empty/whitespace strings and ``0``."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, int):
        return value == 0
    return False


def name_key(first_name: str, last_name: str, lowercase: bool = False) -> str:
    key = f"{first_name} {last_name}"
    return key.strip().lower() if lowercase else key


class DataService:
    """Key-based queries over the store."""

    @staticmethod
    def get_persons_by_address(store: DataStore, address: str) -> List[Person]:
        """Persons whose address equals ``address`` exactly."""
        logger.debug("Retrieving persons living at address: %s", address)
        if not address:
            logger.warning("The address is empty. No persons will be searched.")
            return []
        with store.lock:
            return [person for person in store.persons if person.address == address]

    @staticmethod
    def get_addresses_by_station_number(store: DataStore, station_number: int) -> Set[str]:
        """Addresses covered by ``station_number``.

        Station ``0`` and a number without coverage both give an empty set.
        """
        logger.debug("Retrieving addresses for fire station number: %s", station_number)
        if station_number == 0:
            logger.warning("No station exists with number 0.")
            return set()
        with store.lock:
            addresses = {
                station.address
                for station in store.fire_stations
                if station.station == station_number
            }
        if not addresses:
            logger.warning("No addresses found for station number: %s", station_number)
        return addresses

    @classmethod
    def get_persons_by_station_number(cls, store: DataStore, station_number: int) -> List[Person]:
        """Persons living at an address covered by ``station_number``, in store order."""
        logger.debug("Retrieving persons for fire station number: %s", station_number)
        with store.lock:
            addresses = cls.get_addresses_by_station_number(store, station_number)
            return [person for person in store.persons if person.address in addresses]

    @staticmethod
    def get_medical_records_by_persons(store: DataStore, persons: Iterable[Person]) -> List[MedicalRecord]:
        """Records whose name pair matches any of ``persons``, in store order."""
        keys: Set[Tuple[str, str]] = {(person.first_name, person.last_name) for person in persons}
        if not keys:
            logger.warning("No persons given. No medical records will be searched.")
            return []
        with store.lock:
            return [
                record
                for record in store.medical_records
                if (record.first_name, record.last_name) in keys
            ]

    @staticmethod
    def get_station_by_address(store: DataStore, address: str) -> int:
        """Number of the first station covering ``address``, else ``UNKNOWN_STATION``."""
        logger.debug("Retrieving station number for address: %s", address)
        if not address:
            logger.warning("The address is empty. No station will be searched.")
            return UNKNOWN_STATION
        with store.lock:
            for station in store.fire_stations:
                if station.address == address:
                    return station.station
        return UNKNOWN_STATION

    @staticmethod
    def get_persons_by_last_name(store: DataStore, last_name: str) -> List[Person]:
        logger.debug("Retrieving persons with last name: %s", last_name)
        if not last_name:
            logger.warning("The last name is empty. No persons will be searched.")
            return []
        with store.lock:
            return [person for person in store.persons if person.last_name == last_name]

    @staticmethod
    def index_medical_records_by_name(
        records: Iterable[MedicalRecord],
    ) -> Dict[Tuple[str, str], MedicalRecord]:
        """Map the exact ``(firstName, lastName)`` pair to its record; the first record wins."""
        index: Dict[Tuple[str, str], MedicalRecord] = {}
        for record in records:
            index.setdefault((record.first_name, record.last_name), record)
        return index

    @staticmethod
    def index_medical_records(
        records: Iterable[MedicalRecord], lowercase: bool = False
    ) -> Dict[str, MedicalRecord]:
        """Map ``"firstName lastName"`` to its record; the first record wins."""
        index: Dict[str, MedicalRecord] = {}
        for record in records:
            index.setdefault(name_key(record.first_name, record.last_name, lowercase), record)
        return index
