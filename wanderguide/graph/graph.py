import logging
from typing import Optional

from langgraph.graph import StateGraph, END

from wanderguide.graph.intent import IntentKind, classify
from wanderguide.graph.responses import synthesize
from wanderguide.graph.state import TurnState
from wanderguide.models import TravelContext
from wanderguide.providers.base import TransitProvider
from wanderguide.providers.random_transit import RandomTransitProvider

logger = logging.getLogger(__name__)

# Replies that never consult the transit provider.
STATIC_INTENTS = {
    IntentKind.GREETING,
    IntentKind.HELP,
    IntentKind.KNOWLEDGE_LOOKUP,
    IntentKind.DISTRICT_OVERVIEW,
    IntentKind.SAFETY_FOLLOW_UP,
    IntentKind.FALLBACK,
}


# ---------------------------
# Utilities
# ---------------------------
def add_trace(state: TurnState, node: str, detail: dict):
    state.setdefault("trace", [])
    state["trace"].append({"node": node, "detail": detail})


# ---------------------------
# Classifier Node
# ---------------------------
def node_classify(state: TurnState) -> TurnState:
    user_text = (state.get("user_input") or "").strip()
    ctx = state.get("convo_context") or TravelContext()

    intent, classified_ctx = classify(user_text, ctx)
    state["intent"] = intent
    state["classified_context"] = classified_ctx
    add_trace(state, "classify", intent.to_dict())

    logger.info("Classified %r as %s", user_text, intent.kind.value)
    return state


def node_route(state: TurnState) -> str:
    intent = state.get("intent")
    if intent is None or intent.kind in STATIC_INTENTS:
        return "static"
    return "transit"


# ---------------------------
# Build graph
# ---------------------------
def build_graph(provider: Optional[TransitProvider] = None):
    provider = provider or RandomTransitProvider()

    def _respond(state: TurnState, node: str) -> TurnState:
        ctx = state.get("classified_context") or state.get("convo_context") or TravelContext()
        response = synthesize(state["intent"], ctx, provider)

        state["reply"] = response.text
        state["route"] = response.route
        state["updated_context"] = response.context

        detail = {"context": response.context.to_dict()}
        if response.route is not None:
            detail["bus_number"] = response.route.bus_number
            detail["total_minutes"] = response.route.total_minutes
        add_trace(state, node, detail)
        return state

    def node_static(state: TurnState) -> TurnState:
        return _respond(state, "static_reply")

    def node_transit(state: TurnState) -> TurnState:
        return _respond(state, "transit_reply")

    g = StateGraph(TurnState)

    g.add_node("classify", node_classify)
    g.add_node("static", node_static)
    g.add_node("transit", node_transit)

    g.set_entry_point("classify")

    g.add_conditional_edges("classify", node_route, {
        "static": "static",
        "transit": "transit",
    })

    g.add_edge("static", END)
    g.add_edge("transit", END)

    return g.compile()


def run_turn(graph, user_text: str, context: Optional[TravelContext] = None) -> TurnState:
    return graph.invoke({
        "user_input": user_text,
        "convo_context": context or TravelContext(),
        "trace": [],
    })
