"""
Phone alert: phone numbers of the residents covered by a station.
"""

import logging
from typing import List

from ..core.datastore import DataStore
from .data_service import DataService

logger = logging.getLogger(__name__)


class PhoneAlertService:

    @classmethod
    def get_phone_numbers(cls, store: DataStore, station_number: int) -> List[str]:
        logger.info("Request received for fire station number: %s", station_number)
        persons = DataService.get_persons_by_station_number(store, station_number)
        if not persons:
            logger.warning("No person found for fire station number: %s", station_number)
        return [person.phone for person in persons]
