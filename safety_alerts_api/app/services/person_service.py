"""
Service layer for persons.

Persons are added, updated and removed in the in-memory store; every
successful mutation rewrites the data file.  A person is located by
its ``(firstName, lastName)`` pair.  Creation is rejected only when a
person with identical values in every field already exists, so two
homonyms may live at different addresses.  When homonyms exist,
updates apply to the first one and deletion removes all of them.
"""

import logging
from typing import List

from ..core.datastore import DataStore
from ..core.exceptions import ConflictError, NotFoundError, PersistenceError, ValidationError
from ..schemas.person import Person
from .data_service import is_blank

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("first_name", "last_name", "address", "city", "zip", "phone", "email")
MUTABLE_FIELDS = ("address", "city", "zip", "phone", "email")


class PersonService:
    """CRUD operations on persons."""

    @classmethod
    def create_person(cls, store: DataStore, data: Person) -> Person:
        """Append ``data`` and persist.

        Raises ``ValidationError`` on a blank field and ``ConflictError``
        if an identical person already exists.
        """
        cls._validate(data)
        with store.lock:
            if any(person.model_dump() == data.model_dump() for person in store.persons):
                raise ConflictError(f"Person {data.full_name} already exists")
            person = data.model_copy(deep=True)
            store.persons.append(person)
            cls._persist(store)
        logger.info("Person %s added", person.full_name)
        return person

    @classmethod
    def update_person(cls, store: DataStore, data: Person) -> Person:
        """Overwrite the contact fields of the person named like ``data``.

        An update that would change nothing is rejected with
        ``ConflictError``; an unknown name raises ``NotFoundError``.
        """
        cls._validate(data)
        with store.lock:
            for person in store.persons:
                if person.first_name == data.first_name and person.last_name == data.last_name:
                    if all(getattr(person, field) == getattr(data, field) for field in MUTABLE_FIELDS):
                        raise ConflictError(f"Person {data.full_name} already has these values")
                    for field in MUTABLE_FIELDS:
                        setattr(person, field, getattr(data, field))
                    cls._persist(store)
                    logger.info("Person %s updated", person.full_name)
                    return person
        raise NotFoundError(f"Person {data.full_name} not found")

    @classmethod
    def delete_person(cls, store: DataStore, first_name: str, last_name: str) -> int:
        """Remove every person with the given names; return how many were removed."""
        if is_blank(first_name) or is_blank(last_name):
            raise ValidationError("firstName and lastName are required")
        with store.lock:
            kept: List[Person] = [
                person
                for person in store.persons
                if not (person.first_name == first_name and person.last_name == last_name)
            ]
            removed = len(store.persons) - len(kept)
            if not removed:
                raise NotFoundError(f"Person {first_name} {last_name} not found")
            store.persons[:] = kept
            cls._persist(store)
        logger.info("Deleted %d person(s) named %s %s", removed, first_name, last_name)
        return removed

    @staticmethod
    def _validate(data: Person) -> None:
        missing = [field for field in REQUIRED_FIELDS if is_blank(getattr(data, field))]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")

    @staticmethod
    def _persist(store: DataStore) -> None:
        if not store.persist():
            raise PersistenceError("Persons changed but the data file could not be written")
