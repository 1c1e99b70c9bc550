"""
Fire endpoint for API v1.

Returns the residents of an address with their medical details and the
station covering it.  The response is always HTTP 200, even when the
address is unknown: firefighters still need the (empty) answer.
"""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, status

from safety_alerts_api.app.api.deps import DataStore, get_datastore, get_today
from safety_alerts_api.app.schemas.alerts import FireResponse
from safety_alerts_api.app.services.fire_service import FireService

router = APIRouter()


@router.get("", response_model=FireResponse)
async def get_fire_info(
    address: str = Query(..., description="Exact address"),
    store: DataStore = Depends(get_datastore),
    today: date = Depends(get_today),
) -> FireResponse:
    if not address.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Address must not be blank")
    return FireService.get_fire_info(store, address, today)
