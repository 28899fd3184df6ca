import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Optional


class Role(str, Enum):
    BOT = "bot"
    USER = "user"


def _new_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Message:
    role: Role
    text: str
    id: str = field(default_factory=_new_id)
    timestamp: datetime = field(default_factory=datetime.now)

    def display_time(self) -> str:
        return self.timestamp.strftime("%H:%M")

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "role": self.role.value,
            "text": self.text,
            "timestamp": self.timestamp.isoformat(),
        }


@dataclass(frozen=True)
class TravelContext:
    """
    Last known route of the session.
    Never mutated: every turn produces a new instance.
    """
    origin: Optional[str] = None
    destination: Optional[str] = None

    @property
    def is_complete(self) -> bool:
        return bool(self.origin and self.destination)

    def with_origin(self, origin: str) -> "TravelContext":
        return replace(self, origin=origin)

    def with_destination(self, destination: str) -> "TravelContext":
        return replace(self, destination=destination)

    def to_dict(self) -> dict:
        return {"from": self.origin, "to": self.destination}


EMPTY_CONTEXT = TravelContext()


@dataclass(frozen=True)
class RouteInfo:
    bus_number: int
    ride_stops: int
    per_stop_minutes: int
    ride_minutes: int
    walk_to_stop: int
    walk_from_stop: int
    total_minutes: int
    transit_hub: str
    next_departures: list[str]
    origin: str
    destination: str

    def departures_text(self) -> str:
        return ", ".join(self.next_departures)
