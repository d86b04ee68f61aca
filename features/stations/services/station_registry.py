from typing import List, Tuple

from features.common.models.station_types import Station

# Gulf of Maine NDBC stations, all active realtime2 reporters
STATIONS: Tuple[Station, ...] = (
    Station(id="44007", name="Portland Approach", lat=43.525, lon=-70.140),
    Station(id="44011", name="Georges Bank", lat=41.088, lon=-66.546),
    Station(id="44013", name="Boston Offshore", lat=42.346, lon=-70.651),
    Station(id="44020", name="Nantucket Sound", lat=41.497, lon=-70.283),
    Station(id="44027", name="Jonesport, ME", lat=44.284, lon=-67.301),
    Station(id="44029", name="SE of Cape Ann", lat=42.523, lon=-70.566),
    Station(id="44030", name="Biddeford Pool", lat=43.179, lon=-70.426),
    Station(id="44034", name="Frenchman Bay", lat=44.103, lon=-68.112),
    Station(id="44098", name="Jeffrey's Ledge", lat=42.800, lon=-70.169),
    Station(id="MDRM1", name="Mt. Desert Rock", lat=43.969, lon=-68.128),
    Station(id="MISM1", name="Matinicus Rock", lat=43.784, lon=-68.855),
)

def list_stations() -> List[Station]:
    """Return every registered station in registry order."""
    return list(STATIONS)
