import asyncio
import logging
from typing import Optional

import aiohttp

from core.config import settings
from features.observations.models.observation_types import (
    FetchFailure,
    FetchFailureKind,
    FetchResult,
    FetchSuccess,
)

logger = logging.getLogger(__name__)

class NDBCRealtimeClient:
    """Fetches NDBC realtime2 standard meteorological reports.

    Each call makes exactly one request; network problems come back as a
    FetchFailure instead of being raised.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        user_agent: Optional[str] = None
    ):
        self.base_url = base_url or settings.ndbc_base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout or settings.request_timeout)
        self.user_agent = user_agent or settings.ndbc_user_agent
        self._session: Optional[aiohttp.ClientSession] = None

    async def _init_session(self) -> aiohttp.ClientSession:
        if not self._session:
            self._session = aiohttp.ClientSession(
                timeout=self.timeout,
                headers={"User-Agent": self.user_agent}
            )
        return self._session

    async def close(self):
        if self._session:
            await self._session.close()
            self._session = None

    def report_url(self, station_id: str) -> str:
        # NDBC file names are upper case
        return f"{self.base_url}{station_id.upper()}.{settings.ndbc_report_suffix}"

    async def fetch_report(self, station_id: str) -> FetchResult:
        """Fetch the raw realtime report for a station.

        Args:
            station_id: NDBC station identifier, already validated by the caller

        Returns:
            FetchSuccess with the report text, or FetchFailure describing
            a 404, another non-200 status, a timeout or a transport error
        """
        url = self.report_url(station_id)
        try:
            session = await self._init_session()
            async with session.get(url) as response:
                if response.status == 404:
                    logger.info(f"NDBC has no report for station {station_id}")
                    return FetchFailure(
                        kind=FetchFailureKind.NOT_FOUND,
                        message="Station not found",
                        status=404
                    )
                if response.status != 200:
                    logger.warning(f"NDBC returned HTTP {response.status} for station {station_id}")
                    return FetchFailure(
                        kind=FetchFailureKind.UPSTREAM_ERROR,
                        message=f"HTTP {response.status}",
                        status=response.status
                    )
                body = await response.text(errors="replace")
                return FetchSuccess(body=body)

        except asyncio.TimeoutError:
            logger.warning(f"Request for station {station_id} timed out after {self.timeout.total}s")
            return FetchFailure(
                kind=FetchFailureKind.TIMED_OUT,
                message="Request timed out"
            )
        except aiohttp.ClientError as e:
            logger.error(f"Error fetching report for station {station_id}: {str(e)}")
            return FetchFailure(
                kind=FetchFailureKind.TRANSPORT_ERROR,
                message=str(e) or e.__class__.__name__
            )
