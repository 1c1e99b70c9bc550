"""
Person info endpoint for API v1.
"""

from datetime import date
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from safety_alerts_api.app.api.deps import DataStore, get_datastore, get_today
from safety_alerts_api.app.schemas.alerts import PersonInfoLastNameResponse
from safety_alerts_api.app.services.person_info_service import PersonInfoService

router = APIRouter()


@router.get("/{last_name}", response_model=List[PersonInfoLastNameResponse])
async def get_person_info_by_last_name(
    last_name: str,
    store: DataStore = Depends(get_datastore),
    today: date = Depends(get_today),
) -> List[PersonInfoLastNameResponse]:
    """Return address, age, e‑mail and medical history of everyone named ``last_name``.

    Persons without a medical record are not listed; HTTP 404 is
    returned when nobody remains.
    """
    if not last_name.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Last name must not be blank")
    infos = PersonInfoService.get_person_info_by_last_name(store, last_name, today)
    if not infos:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No person found with this last name")
    return infos
