import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, NamedTuple, Optional

from wanderguide.graph.slots import extract_slots
from wanderguide.knowledge.places import lookup_place
from wanderguide.models import TravelContext

logger = logging.getLogger(__name__)


class IntentKind(str, Enum):
    GREETING = "greeting"
    HELP = "help"
    KNOWLEDGE_LOOKUP = "knowledge_lookup"
    DISTRICT_OVERVIEW = "district_overview"
    DURATION_FOLLOW_UP = "duration_follow_up"
    BUS_FOLLOW_UP = "bus_follow_up"
    RESTAURANT_FOLLOW_UP = "restaurant_follow_up"
    SAFETY_FOLLOW_UP = "safety_follow_up"
    HOURS_FOLLOW_UP = "hours_follow_up"
    SHOPPING_FOLLOW_UP = "shopping_follow_up"
    ROUTE_REQUEST = "route_request"
    ORIGIN_ONLY = "origin_only"
    DESTINATION_ONLY = "destination_only"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class Intent:
    kind: IntentKind
    key: Optional[str] = None          # knowledge lookup
    origin: Optional[str] = None
    destination: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "key": self.key,
            "from": self.origin,
            "to": self.destination,
        }


class Classification(NamedTuple):
    intent: Intent
    context: TravelContext


Rule = Callable[[str, TravelContext], Optional[Classification]]


GREETING_RE = re.compile(r"^(?:hi|hello|hey|howdy|good\s+morning|good\s+afternoon|good\s+evening|yo)\b")
DISTRICT_RE = re.compile(
    r"dantewada.*district|about.*dantewada|what.*dantewada|tell.*dantewada"
    r"|villages.*dantewada|cities.*dantewada|towns.*dantewada"
)
HELP_RE = re.compile(r"\bhelp\b")
DURATION_RE = re.compile(r"\b(?:how long|travel time|duration|how much time)")
BUS_RE = re.compile(r"\b(?:which bus|what bus|bus number|bus route|bus schedule)")
RESTAURANT_RE = re.compile(r"(?:restaurant|food|eat|dining|cafe|lunch|dinner|breakfast)")
SAFETY_RE = re.compile(r"(?:safe|safety|secure|danger)")
HOURS_RE = re.compile(r"(?:open|hours|what time|opening|close|closing)")
SHOPPING_RE = re.compile(r"(?:shop|market|buy|purchase|souvenir|mall|bazaar)")

MIN_PLACE_LEN = 2
MAX_PLACE_LEN = 50


def _normalize(text: str) -> str:
    return (text or "").strip().lower()


def _keyword_rule(pattern: re.Pattern, kind: IntentKind) -> Rule:
    def rule(text: str, context: TravelContext) -> Optional[Classification]:
        if pattern.search(_normalize(text)):
            return Classification(Intent(kind), context)
        return None

    return rule


def knowledge_rule(text: str, context: TravelContext) -> Optional[Classification]:
    key = lookup_place(_normalize(text))
    if key is None:
        return None
    return Classification(Intent(IntentKind.KNOWLEDGE_LOOKUP, key=key), context)


def slot_rule(text: str, context: TravelContext) -> Optional[Classification]:
    origin, destination = extract_slots(text)

    if origin and destination:
        return Classification(
            Intent(IntentKind.ROUTE_REQUEST, origin=origin, destination=destination),
            TravelContext(origin=origin, destination=destination),
        )

    if destination:
        return Classification(
            Intent(IntentKind.DESTINATION_ONLY, origin=context.origin, destination=destination),
            context.with_destination(destination),
        )

    if origin:
        return Classification(
            Intent(IntentKind.ORIGIN_ONLY, origin=origin, destination=context.destination),
            context.with_origin(origin),
        )

    return None


def bare_place_rule(text: str, context: TravelContext) -> Optional[Classification]:
    """
    A short reply with no other signal is taken as a place name
    for whichever slot is still empty (origin first).
    """
    place = (text or "").strip()
    if not (MIN_PLACE_LEN < len(place) < MAX_PLACE_LEN):
        return None

    if not context.origin:
        return Classification(
            Intent(IntentKind.ORIGIN_ONLY, origin=place, destination=context.destination),
            context.with_origin(place),
        )

    if not context.destination:
        return Classification(
            Intent(IntentKind.ROUTE_REQUEST, origin=context.origin, destination=place),
            context.with_destination(place),
        )

    return None


# Precedence matters: generic route extraction is over-broad and must stay
# below every keyword rule.
RULES: list[tuple[str, Rule]] = [
    ("greeting", _keyword_rule(GREETING_RE, IntentKind.GREETING)),
    ("knowledge", knowledge_rule),
    ("district", _keyword_rule(DISTRICT_RE, IntentKind.DISTRICT_OVERVIEW)),
    ("help", _keyword_rule(HELP_RE, IntentKind.HELP)),
    ("duration", _keyword_rule(DURATION_RE, IntentKind.DURATION_FOLLOW_UP)),
    ("bus", _keyword_rule(BUS_RE, IntentKind.BUS_FOLLOW_UP)),
    ("restaurant", _keyword_rule(RESTAURANT_RE, IntentKind.RESTAURANT_FOLLOW_UP)),
    ("safety", _keyword_rule(SAFETY_RE, IntentKind.SAFETY_FOLLOW_UP)),
    ("hours", _keyword_rule(HOURS_RE, IntentKind.HOURS_FOLLOW_UP)),
    ("shopping", _keyword_rule(SHOPPING_RE, IntentKind.SHOPPING_FOLLOW_UP)),
    ("slots", slot_rule),
    ("bare_place", bare_place_rule),
]


def classify(text: str, context: Optional[TravelContext] = None) -> Classification:
    context = context or TravelContext()
    for name, rule in RULES:
        result = rule(text, context)
        if result is not None:
            logger.debug("Rule %r matched: %s", name, result.intent.kind.value)
            return result
    return Classification(Intent(IntentKind.FALLBACK), context)
