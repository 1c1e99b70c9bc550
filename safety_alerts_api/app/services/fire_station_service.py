"""
Service layer for fire stations.

Two concerns live here:

* the coverage view, listing everyone covered by a station number
  together with adult and child counts;
* CRUD operations on the address to station mapping.  The address is
  the natural key and may appear only once.  Every successful mutation
  rewrites the data file.
"""

import logging
from datetime import date
from typing import Optional

from ..core.datastore import DataStore
from ..core.exceptions import ConflictError, NotFoundError, PersistenceError, ValidationError
from ..schemas.alerts import FirestationResponse, PersonInfo
from ..schemas.fire_station import FireStation
from .age_service import calculate_age, is_adult, is_minor
from .data_service import DataService, is_blank

logger = logging.getLogger(__name__)


class FireStationService:
    """Coverage queries and CRUD operations on fire stations."""

    @classmethod
    def get_coverage(
        cls, store: DataStore, station_number: int, today: Optional[date] = None
    ) -> Optional[FirestationResponse]:
        """Persons covered by ``station_number`` with adult and child counts.

        Returns ``None`` when nobody is covered, and also when none of
        the covered persons has a medical record.  The person list holds
        every covered person; only the counts depend on medical records,
        and records with an unknown age are not counted.  Earlier
        releases counted an unknown age (``-1``) as a child.
        """
        logger.info("Request received for fire station number: %s", station_number)
        with store.lock:
            persons = DataService.get_persons_by_station_number(store, station_number)
            if not persons:
                logger.warning("No person covered by fire station number: %s", station_number)
                return None
            records = DataService.get_medical_records_by_persons(store, persons)
            if not records:
                logger.warning("No medical record for persons covered by station: %s", station_number)
                return None
            ages = [calculate_age(record.birthdate, today) for record in records]
            return FirestationResponse(
                persons=[
                    PersonInfo(
                        first_name=person.first_name,
                        last_name=person.last_name,
                        address=person.address,
                        phone=person.phone,
                    )
                    for person in persons
                ],
                adult_count=sum(1 for age in ages if is_adult(age)),
                child_count=sum(1 for age in ages if is_minor(age)),
            )

    @classmethod
    def create_fire_station(cls, store: DataStore, data: FireStation) -> FireStation:
        """Add a coverage entry; ``ConflictError`` if the address is already mapped."""
        cls._validate(data)
        with store.lock:
            if any(station.address == data.address for station in store.fire_stations):
                raise ConflictError(f"Address {data.address} is already covered")
            station = data.model_copy()
            store.fire_stations.append(station)
            cls._persist(store)
        logger.info("Fire station %s added for %s", station.station, station.address)
        return station

    @classmethod
    def update_fire_station(cls, store: DataStore, data: FireStation) -> FireStation:
        """Change the station number covering ``data.address``.

        Raises ``ConflictError`` if the address is already covered by
        that station and ``NotFoundError`` if the address is unknown.
        """
        cls._validate(data)
        with store.lock:
            for station in store.fire_stations:
                if station.address == data.address:
                    if station.station == data.station:
                        raise ConflictError(
                            f"Address {data.address} is already covered by station {data.station}"
                        )
                    station.station = data.station
                    cls._persist(store)
                    logger.info("Fire station for %s updated to %s", station.address, station.station)
                    return station
        raise NotFoundError(f"Fire station address {data.address} not found")

    @classmethod
    def delete_fire_station(cls, store: DataStore, address: str) -> int:
        if is_blank(address):
            raise ValidationError("address is required")
        with store.lock:
            kept = [station for station in store.fire_stations if station.address != address]
            removed = len(store.fire_stations) - len(kept)
            if not removed:
                raise NotFoundError(f"Address {address} not found")
            store.fire_stations[:] = kept
            cls._persist(store)
        logger.info("Fire station for %s deleted", address)
        return removed

    @staticmethod
    def _validate(data: FireStation) -> None:
        missing = [field for field in ("address", "station") if is_blank(getattr(data, field))]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")

    @staticmethod
    def _persist(store: DataStore) -> None:
        if not store.persist():
            raise PersistenceError("Fire stations changed but the data file could not be written")
