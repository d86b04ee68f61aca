from datetime import datetime
from enum import Enum
from typing import Optional, Union
from pydantic import BaseModel, ConfigDict, field_serializer
from pydantic.alias_generators import to_camel

class Observation(BaseModel):
    """Most recent normalized record from an NDBC realtime report.

    Every measurement is either a finite value in the unit noted beside it or
    None when NDBC reported it missing.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    station_id: str
    timestamp: Optional[datetime] = None  # UTC
    wind_dir: Optional[float] = None  # degrees true
    wind_speed: Optional[float] = None  # m/s
    gust_speed: Optional[float] = None  # m/s
    wave_height: Optional[float] = None  # meters
    dom_period: Optional[float] = None  # seconds, dominant
    avg_period: Optional[float] = None  # seconds, average
    wave_dir: Optional[float] = None  # degrees true
    pressure: Optional[float] = None  # hPa
    air_temp: Optional[float] = None  # Celsius
    water_temp: Optional[float] = None  # Celsius
    dew_point: Optional[float] = None  # Celsius

    @field_serializer("timestamp")
    def serialize_timestamp(self, value: Optional[datetime]) -> Optional[str]:
        if value is None:
            return None
        return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"

class FetchFailureKind(str, Enum):
    NOT_FOUND = "not_found"
    UPSTREAM_ERROR = "upstream_error"
    TIMED_OUT = "timed_out"
    TRANSPORT_ERROR = "transport_error"

class FetchSuccess(BaseModel):
    """Raw realtime report text as served by NDBC."""
    body: str

class FetchFailure(BaseModel):
    """Why a realtime report could not be retrieved."""
    kind: FetchFailureKind
    message: str
    status: Optional[int] = None  # upstream HTTP status, when there was one

FetchResult = Union[FetchSuccess, FetchFailure]
