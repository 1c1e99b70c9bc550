"""
Phone alert endpoint for API v1.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status

from safety_alerts_api.app.api.deps import DataStore, get_datastore
from safety_alerts_api.app.services.phone_alert_service import PhoneAlertService

router = APIRouter()


@router.get("", response_model=List[str])
async def get_phone_alert(
    firestation: int = Query(..., description="Fire station number"),
    store: DataStore = Depends(get_datastore),
) -> List[str]:
    """Return the phone numbers of the residents covered by a station."""
    phones = PhoneAlertService.get_phone_numbers(store, firestation)
    if not phones:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No resident covered by this station")
    return phones
