import re
from typing import List
from fastapi import APIRouter, Depends, Request
from features.common.exceptions.station_exceptions import (
    InvalidStationIdError,
    NoDataAvailableError,
    UpstreamFailureError,
)
from features.common.models.station_types import Station
from features.observations.models.observation_types import (
    FetchFailure,
    FetchFailureKind,
    Observation,
)
from features.observations.services.observation_service import ObservationService
from features.stations.services.station_registry import list_stations
import logging

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/api",
    tags=["Stations"]
)

STATION_ID_PATTERN = re.compile(r"[A-Z0-9]{5,8}", re.IGNORECASE | re.ASCII)

def get_observation_service(request: Request) -> ObservationService:
    """Dependency to get the ObservationService instance."""
    return request.app.state.observation_service

@router.get(
    "/stations",
    response_model=List[Station],
    summary="Get all monitored stations",
    description="Returns the fixed list of Gulf of Maine NDBC stations with their coordinates"
)
async def get_stations():
    """Get all monitored stations."""
    return list_stations()

@router.get(
    "/station/{station_id}/data",
    response_model=Observation,
    response_model_by_alias=True,
    summary="Get latest station observation",
    description="Fetches the station's NDBC realtime report and returns its most recent record, with missing readings as null"
)
async def get_station_data(
    station_id: str,
    service: ObservationService = Depends(get_observation_service)
):
    """Get the latest parsed observation for a station."""
    if not STATION_ID_PATTERN.fullmatch(station_id):
        raise InvalidStationIdError()

    result = await service.get_station_observation(station_id)

    if result is None:
        raise NoDataAvailableError()
    if isinstance(result, FetchFailure):
        if result.kind == FetchFailureKind.NOT_FOUND:
            raise NoDataAvailableError()
        raise UpstreamFailureError(result.message)
    return result
