"""
Fire station endpoints for API v1.

``GET`` returns the persons covered by a station number with adult and
child counts.  ``POST``, ``PUT`` and ``DELETE`` manage the mapping
from addresses to station numbers; validation, conflict and not‑found
errors raised by the service are turned into HTTP 400, 409 and 404 by
the application's exception handler.
"""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, status

from safety_alerts_api.app.api.deps import DataStore, get_datastore, get_today
from safety_alerts_api.app.schemas.alerts import FirestationResponse
from safety_alerts_api.app.schemas.fire_station import FireStation
from safety_alerts_api.app.services.fire_station_service import FireStationService

router = APIRouter()


@router.get("", response_model=FirestationResponse)
async def get_persons_covered_by_station(
    station_number: int = Query(..., alias="stationNumber", description="Fire station number"),
    store: DataStore = Depends(get_datastore),
    today: date = Depends(get_today),
) -> FirestationResponse:
    """Return everyone covered by ``stationNumber``.

    Returns HTTP 404 when nobody is covered or when none of the covered
    persons has a medical record.
    """
    coverage = FireStationService.get_coverage(store, station_number, today)
    if coverage is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No coverage data for this station")
    return coverage


@router.post("", response_model=FireStation, status_code=status.HTTP_201_CREATED)
async def create_fire_station(
    station_in: FireStation,
    store: DataStore = Depends(get_datastore),
) -> FireStation:
    """Map a new address to a station."""
    return FireStationService.create_fire_station(store, station_in)


@router.put("", response_model=FireStation)
async def update_fire_station(
    station_in: FireStation,
    store: DataStore = Depends(get_datastore),
) -> FireStation:
    """Change the station covering an existing address."""
    return FireStationService.update_fire_station(store, station_in)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def delete_fire_station(
    address: str = Query(...),
    store: DataStore = Depends(get_datastore),
) -> None:
    """Remove the mapping of ``address``."""
    FireStationService.delete_fire_station(store, address)
    return None
