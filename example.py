"""Example: a ground station subscribing satellites and broadcasting to them (no network)."""

# .env (searched from the working directory up) must be loaded before satcom
# creates its loggers, which read SATCOM_LOG_LEVEL once.
from dotenv import find_dotenv, load_dotenv
load_dotenv(find_dotenv(usecwd=True))

import sys
from typing import Iterable, List, TextIO, Tuple

from satcom import GroundStation, Satellite, SubscriptionError
from satcom.config import Settings
from satcom.ground_station import DEFAULT_STATION_ID


def run(
    satellite_ids: Iterable[int],
    messages: Iterable[str],
    station_id: str = DEFAULT_STATION_ID,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> Tuple[GroundStation, List[SubscriptionError]]:
    """Subscribe a Satellite per id (reporting, not aborting on, errors), then broadcast each message."""
    err = err if err is not None else sys.stderr
    station = GroundStation(station_id)
    errors: List[SubscriptionError] = []

    for sat_id in satellite_ids:
        satellite = Satellite(sat_id, stream=out)
        try:
            station.subscribe(satellite)
        except SubscriptionError as e:
            errors.append(e)
            err.write(f"[ERROR]: {e!r}\n")

    for message in messages:
        station.notify(message)

    return station, errors


def main() -> int:
    settings = Settings.from_env()
    run(settings.satellite_ids, settings.messages, station_id=settings.station_id)
    return 0


if __name__ == "__main__":
    sys.exit(main())
