import random
from datetime import datetime, timedelta
from typing import Callable, Optional, Sequence

from wanderguide.models import RouteInfo
from wanderguide.providers.base import PoiSets, T, TransitProvider
from wanderguide.providers.catalogue import MARKETS, RESTAURANTS, SHOPS, TRANSIT_HUBS

SLOT_MINUTES = 30
DEPARTURE_COUNT = 3


def next_half_hour(now: datetime) -> datetime:
    """
    Next half-hour boundary at or after `now` (minute precision).
    """
    base = now.replace(second=0, microsecond=0)
    remainder = base.minute % SLOT_MINUTES
    if remainder == 0:
        return base
    return base + timedelta(minutes=SLOT_MINUTES - remainder)


def format_12h(moment: datetime) -> str:
    hour = moment.hour % 12 or 12
    period = "PM" if moment.hour >= 12 else "AM"
    return f"{hour}:{moment.minute:02d} {period}"


def departures_after(now: datetime, count: int = DEPARTURE_COUNT) -> list[str]:
    first = next_half_hour(now)
    return [format_12h(first + timedelta(minutes=SLOT_MINUTES * i)) for i in range(count)]


class RandomTransitProvider(TransitProvider):
    """
    Synthesizes plausible bus routes and points of interest.

    Pass a seeded random.Random and a fixed clock to get repeatable output.
    """

    def __init__(self, rng: Optional[random.Random] = None, clock: Optional[Callable[[], datetime]] = None):
        self.rng = rng or random.Random()
        self.clock = clock or datetime.now

    def randint(self, low: int, high: int) -> int:
        return self.rng.randint(low, high)

    def pick(self, items: Sequence[T]) -> T:
        return self.rng.choice(items)

    def next_departures(self) -> list[str]:
        return departures_after(self.clock())

    def bus_info(self, origin: str, destination: str) -> RouteInfo:
        bus_number = self.randint(10, 99)
        ride_stops = self.randint(3, 8)
        per_stop = self.randint(3, 5)
        walk_to_stop = self.randint(3, 8)
        walk_from_stop = self.randint(2, 5)
        ride_minutes = ride_stops * per_stop

        return RouteInfo(
            bus_number=bus_number,
            ride_stops=ride_stops,
            per_stop_minutes=per_stop,
            ride_minutes=ride_minutes,
            walk_to_stop=walk_to_stop,
            walk_from_stop=walk_from_stop,
            total_minutes=walk_to_stop + ride_minutes + walk_from_stop,
            transit_hub=self.pick(TRANSIT_HUBS),
            next_departures=self.next_departures(),
            origin=origin,
            destination=destination,
        )

    def random_pois(self) -> PoiSets:
        return PoiSets(
            restaurants=list(self.pick(RESTAURANTS)),
            shops=list(self.pick(SHOPS)),
            markets=list(self.pick(MARKETS)),
        )
