"""
Child alert endpoint for API v1.

Lists the children living at an address together with the adults of
the household.
"""

from datetime import date
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status

from safety_alerts_api.app.api.deps import DataStore, get_datastore, get_today
from safety_alerts_api.app.schemas.alerts import ChildResponse
from safety_alerts_api.app.services.child_alert_service import ChildAlertService

router = APIRouter()


@router.get("", response_model=List[ChildResponse])
async def get_child_alert(
    address: str = Query(..., description="Exact address of the household"),
    store: DataStore = Depends(get_datastore),
    today: date = Depends(get_today),
) -> List[ChildResponse]:
    """Return the minors at ``address``.

    Returns HTTP 404 when nobody lives there or when no child does.
    """
    if not address.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Address must not be blank")
    children = ChildAlertService.get_children_by_address(store, address, today)
    if not children:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No child found at this address")
    return children
