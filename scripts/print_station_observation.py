import argparse
import asyncio
import sys
from pathlib import Path
sys.path.append(str(Path(__file__).parent.parent))

from features.observations.models.observation_types import FetchFailure
from features.observations.services.ndbc_realtime_client import NDBCRealtimeClient
from features.observations.services.observation_service import ObservationService
from features.stations.services.station_registry import list_stations

async def main(station_ids):
    service = ObservationService(NDBCRealtimeClient())
    names = {station.id: station.name for station in list_stations()}

    try:
        for station_id in station_ids:
            result = await service.get_station_observation(station_id)
            print(f"\nStation: {station_id} - {names.get(station_id.upper(), 'unregistered')}")

            if result is None:
                print("  No data available")
                continue
            if isinstance(result, FetchFailure):
                print(f"  Error: {result.message}")
                continue

            for key, value in result.model_dump(mode="json", by_alias=True).items():
                if key != "stationId":
                    print(f"  {key}: {value if value is not None else '-'}")
    finally:
        await service.close()

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Print the latest NDBC observation for stations")
    parser.add_argument("station_ids", nargs="*", help="Station identifiers (default: all registered)")
    args = parser.parse_args()

    asyncio.run(main(args.station_ids or [station.id for station in list_stations()]))
