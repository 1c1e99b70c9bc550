"""
Flood endpoint for API v1.

``GET /flood/stations?stations=1,2`` returns the households covered by
stations 1 and 2, grouped by address.  Station numbers may be given
comma separated, as repeated parameters, or both.
"""

from datetime import date
from typing import Dict, List

from fastapi import APIRouter, Depends, HTTPException, Query, status

from safety_alerts_api.app.api.deps import DataStore, get_datastore, get_today
from safety_alerts_api.app.schemas.alerts import FloodResponse
from safety_alerts_api.app.services.flood_service import FloodService

router = APIRouter()


def parse_station_numbers(values: List[str]) -> List[int]:
    """Split comma separated values into station numbers.

    Raises HTTP 400 when no number is given or one is not an integer.
    """
    tokens = [token.strip() for value in values for token in value.split(",")]
    tokens = [token for token in tokens if token]
    if not tokens:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="At least one station number is required")
    try:
        return [int(token) for token in tokens]
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Station numbers must be integers",
        )


@router.get("/stations", response_model=Dict[str, List[FloodResponse]])
async def get_households_by_stations(
    stations: List[str] = Query(..., description="Station numbers, e.g. 1,2"),
    store: DataStore = Depends(get_datastore),
    today: date = Depends(get_today),
) -> Dict[str, List[FloodResponse]]:
    """Return the households covered by the requested stations.

    Returns HTTP 404 when the stations cover no inhabited address.
    """
    station_numbers = parse_station_numbers(stations)
    households = FloodService.get_households(store, station_numbers, today)
    if not households:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No household found for these stations")
    return households
