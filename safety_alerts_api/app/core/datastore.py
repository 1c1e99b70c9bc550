"""
In-memory dataset and JSON snapshot persistence.

This module owns the three collections (persons, fire stations and
medical records).  ``DataStore`` loads them from a JSON document,
exposes the live lists and writes the whole snapshot back after every
mutation.  ``get_datastore`` is the FastAPI dependency returning the
process-wide store; ``init_datastore`` loads it on application start.

All access goes through ``DataStore.lock``, a re-entrant lock held by
the services for the duration of a query or a mutation.  Saving uses
a temporary file in the target directory followed by ``os.replace``
so that a crash mid-write never leaves a truncated document behind.
"""

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError as SchemaError

from .config import settings
from ..schemas.document import DataDocument
from ..schemas.fire_station import FireStation
from ..schemas.medical_record import MedicalRecord
from ..schemas.person import Person

logger = logging.getLogger(__name__)


def resolve_data_path(path: str) -> str:
    """Resolve ``path`` against the ``safety_alerts_api`` package directory.

    Absolute paths are returned unchanged.
    """
    if os.path.isabs(path):
        return path
    base_dir = Path(__file__).resolve().parent.parent.parent  # safety_alerts_api/
    return str((base_dir / path).resolve())


class DataStore:
    """Owner of the persons, fire stations and medical records.

    The accessors return the live lists; callers that iterate or mutate
    them must hold ``lock``.
    """

    def __init__(self, output_path: Optional[str] = None):
        self._persons: List[Person] = []
        self._fire_stations: List[FireStation] = []
        self._medical_records: List[MedicalRecord] = []
        self.output_path = output_path
        self.lock = threading.RLock()

    @property
    def persons(self) -> List[Person]:
        return self._persons

    @property
    def fire_stations(self) -> List[FireStation]:
        return self._fire_stations

    @property
    def medical_records(self) -> List[MedicalRecord]:
        return self._medical_records

    def load(self, path: str) -> bool:
        """Replace the collections with the content of the document at ``path``.

        Returns ``False`` and keeps the current collections if the file
        cannot be read, is not valid JSON or does not match the schema.
        """
        logger.info("Reading data file %s", path)
        try:
            with open(path, "r", encoding="utf-8") as handle:
                raw = json.load(handle)
            document = DataDocument.model_validate(raw)
        except (OSError, ValueError, SchemaError) as exc:
            # json.JSONDecodeError is a ValueError
            logger.error("Failed to read data from %s: %s", path, exc)
            return False
        with self.lock:
            self._persons = list(document.persons)
            self._fire_stations = list(document.fire_stations)
            self._medical_records = list(document.medical_records)
        logger.info(
            "Loaded %d persons, %d fire stations and %d medical records",
            len(document.persons),
            len(document.fire_stations),
            len(document.medical_records),
        )
        return True

    def save(self, path: str) -> bool:
        """Write the full snapshot to ``path``.

        Collections are written in insertion order with their camelCase
        keys.  Returns ``False`` if the file cannot be written; the
        previous document is then left untouched.
        """
        logger.info("Saving data to %s", path)
        with self.lock:
            document = DataDocument(
                persons=self._persons,
                fire_stations=self._fire_stations,
                medical_records=self._medical_records,
            )
            payload = document.model_dump(by_alias=True)
        tmp_path = None
        try:
            directory = os.path.dirname(os.path.abspath(path))
            fd, tmp_path = tempfile.mkstemp(prefix=".data-", suffix=".json", dir=directory)
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(payload, handle, indent=2, ensure_ascii=False)
            os.replace(tmp_path, path)
        except OSError as exc:
            logger.error("Failed to save data to %s: %s", path, exc)
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)
            return False
        logger.info("Data successfully saved")
        return True

    def persist(self) -> bool:
        """Save the snapshot to ``output_path``."""
        if not self.output_path:
            logger.error("No output path configured; data not saved")
            return False
        return self.save(self.output_path)


def _build_datastore() -> DataStore:
    output = settings.data_output_file or settings.data_file
    return DataStore(output_path=resolve_data_path(output))


_datastore = _build_datastore()


def get_datastore() -> DataStore:
    """FastAPI dependency returning the process-wide store."""
    return _datastore


def init_datastore() -> bool:
    """Load the configured data file into the process-wide store.

    A failure is logged and the service starts with empty collections.
    """
    path = resolve_data_path(settings.data_file)
    loaded = _datastore.load(path)
    if not loaded:
        logger.error("Starting with an empty dataset; %s could not be loaded", path)
    return loaded
