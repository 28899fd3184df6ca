from abc import ABC, abstractmethod
from typing import NamedTuple, Sequence, TypeVar

from wanderguide.models import RouteInfo

T = TypeVar("T")


class PoiSets(NamedTuple):
    restaurants: list[str]
    shops: list[str]
    markets: list[str]


class TransitProvider(ABC):
    @abstractmethod
    def bus_info(self, origin: str, destination: str) -> RouteInfo:
        ...

    @abstractmethod
    def next_departures(self) -> list[str]:
        ...

    @abstractmethod
    def random_pois(self) -> PoiSets:
        ...

    @abstractmethod
    def pick(self, items: Sequence[T]) -> T:
        ...

    @abstractmethod
    def randint(self, low: int, high: int) -> int:
        ...
