import logging
from typing import Optional, Union

from features.observations.models.observation_types import FetchFailure, Observation
from features.observations.services.ndbc_realtime_client import NDBCRealtimeClient
from features.observations.services.report_parser import parse_report

logger = logging.getLogger(__name__)

class ObservationService:
    def __init__(self, client: NDBCRealtimeClient):
        self.client = client

    async def get_station_observation(
        self,
        station_id: str
    ) -> Union[Observation, FetchFailure, None]:
        """Latest observation for a station.

        Returns the parsed Observation, the FetchFailure when NDBC could not be
        reached or refused the request, or None when the report held no
        usable data row.
        """
        result = await self.client.fetch_report(station_id)
        if isinstance(result, FetchFailure):
            return result

        observation = parse_report(result.body, station_id)
        if observation is None:
            logger.info(f"No usable data row in report for station {station_id}")
        return observation

    async def close(self):
        await self.client.close()
