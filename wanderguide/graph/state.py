from typing import TypedDict, Optional

from wanderguide.graph.intent import Intent
from wanderguide.models import RouteInfo, TravelContext


class TurnState(TypedDict, total=False):
    user_input: str

    # context carried in from the previous turn
    convo_context: TravelContext

    # classification
    intent: Intent
    classified_context: TravelContext   # eager slot-filling update

    # outputs
    reply: str
    route: Optional[RouteInfo]
    trace: list[dict]

    # context for the next turn
    updated_context: TravelContext
