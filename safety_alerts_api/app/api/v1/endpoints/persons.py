"""
Person endpoints for API v1.

These routes add, update and delete persons.  A person is addressed by
``firstName`` and ``lastName``.
"""

from fastapi import APIRouter, Depends, Query, status

from safety_alerts_api.app.api.deps import DataStore, get_datastore
from safety_alerts_api.app.schemas.person import Person
from safety_alerts_api.app.services.person_service import PersonService

router = APIRouter()


@router.post("", response_model=Person, status_code=status.HTTP_201_CREATED)
async def create_person(
    person_in: Person,
    store: DataStore = Depends(get_datastore),
) -> Person:
    """Add a person.  Every field is required."""
    return PersonService.create_person(store, person_in)


@router.put("", response_model=Person)
async def update_person(
    person_in: Person,
    store: DataStore = Depends(get_datastore),
) -> Person:
    """Update address, city, zip, phone and e‑mail of an existing person."""
    return PersonService.update_person(store, person_in)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def delete_person(
    first_name: str = Query(..., alias="firstName"),
    last_name: str = Query(..., alias="lastName"),
    store: DataStore = Depends(get_datastore),
) -> None:
    PersonService.delete_person(store, first_name, last_name)
    return None
