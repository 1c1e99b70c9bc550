"""
Community email endpoint for API v1.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status

from safety_alerts_api.app.api.deps import DataStore, get_datastore
from safety_alerts_api.app.services.community_email_service import CommunityEmailService

router = APIRouter()


@router.get("", response_model=List[str])
async def get_community_email(
    city: str = Query(..., description="City name, matched without regard to case"),
    store: DataStore = Depends(get_datastore),
) -> List[str]:
    """Return the e‑mail addresses of every resident of ``city``."""
    if not city.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="City must not be blank")
    emails = CommunityEmailService.get_emails_by_city(store, city)
    if not emails:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No resident found in this city")
    return emails
