from pydantic import BaseModel, ConfigDict

class Station(BaseModel):
    """Fixed NDBC buoy or C-MAN platform."""
    model_config = ConfigDict(frozen=True)

    id: str  # NDBC station code, e.g. "44007" or "MDRM1"
    name: str
    lat: float  # decimal degrees, south negative
    lon: float  # decimal degrees, west negative
