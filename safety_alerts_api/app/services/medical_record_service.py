"""
Service layer for medical records.

A medical record is identified by ``(firstName, lastName)``; at most
one record per name can be created.  ``birthdate``, ``medications``
and ``allergies`` are the mutable fields.  Every successful mutation
rewrites the data file.
"""

import logging

from ..core.datastore import DataStore
from ..core.exceptions import ConflictError, NotFoundError, PersistenceError, ValidationError
from ..schemas.medical_record import MedicalRecord
from .data_service import is_blank

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("first_name", "last_name", "birthdate")
MUTABLE_FIELDS = ("birthdate", "medications", "allergies")


class MedicalRecordService:
    """CRUD operations on medical records."""

    @classmethod
    def create_medical_record(cls, store: DataStore, data: MedicalRecord) -> MedicalRecord:
        cls._validate(data)
        with store.lock:
            if cls._find(store, data.first_name, data.last_name) is not None:
                raise ConflictError(f"Medical record of {data.full_name} already exists")
            record = data.model_copy(deep=True)
            store.medical_records.append(record)
            cls._persist(store)
        logger.info("Medical record of %s added", record.full_name)
        return record

    @classmethod
    def update_medical_record(cls, store: DataStore, data: MedicalRecord) -> MedicalRecord:
        """Replace birthdate, medications and allergies of an existing record.

        Raises ``ConflictError`` when the stored record already holds
        the same values and ``NotFoundError`` when no record has the name.
        """
        cls._validate(data)
        with store.lock:
            record = cls._find(store, data.first_name, data.last_name)
            if record is None:
                raise NotFoundError(f"Medical record of {data.full_name} not found")
            if all(getattr(record, field) == getattr(data, field) for field in MUTABLE_FIELDS):
                raise ConflictError(f"Medical record of {data.full_name} already has these values")
            record.birthdate = data.birthdate
            record.medications = list(data.medications)
            record.allergies = list(data.allergies)
            cls._persist(store)
        logger.info("Medical record of %s updated", record.full_name)
        return record

    @classmethod
    def delete_medical_record(cls, store: DataStore, first_name: str, last_name: str) -> int:
        if is_blank(first_name) or is_blank(last_name):
            raise ValidationError("firstName and lastName are required")
        with store.lock:
            kept = [
                record
                for record in store.medical_records
                if not (record.first_name == first_name and record.last_name == last_name)
            ]
            removed = len(store.medical_records) - len(kept)
            if not removed:
                raise NotFoundError(f"Medical record of {first_name} {last_name} not found")
            store.medical_records[:] = kept
            cls._persist(store)
        logger.info("Medical record of %s %s deleted", first_name, last_name)
        return removed

    @staticmethod
    def _find(store: DataStore, first_name: str, last_name: str):
        for record in store.medical_records:
            if record.first_name == first_name and record.last_name == last_name:
                return record
        return None

    @staticmethod
    def _validate(data: MedicalRecord) -> None:
        missing = [field for field in REQUIRED_FIELDS if is_blank(getattr(data, field))]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")

    @staticmethod
    def _persist(store: DataStore) -> None:
        if not store.persist():
            raise PersistenceError("Medical records changed but the data file could not be written")
