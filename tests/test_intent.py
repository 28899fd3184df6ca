import pytest

from wanderguide.graph.intent import (
    RULES,
    IntentKind,
    bare_place_rule,
    classify,
    knowledge_rule,
    slot_rule,
)
from wanderguide.models import TravelContext

EMPTY = TravelContext()
ROUTE = TravelContext(origin="Central Station", destination="Old Museum")


def test_rule_order():
    assert [name for name, _ in RULES] == [
        "greeting",
        "knowledge",
        "district",
        "help",
        "duration",
        "bus",
        "restaurant",
        "safety",
        "hours",
        "shopping",
        "slots",
        "bare_place",
    ]


@pytest.mark.parametrize("text,kind", [
    ("hello", IntentKind.GREETING),
    ("Hey there!", IntentKind.GREETING),
    ("Good morning", IntentKind.GREETING),
    ("can you help me", IntentKind.HELP),
    ("how long will it take", IntentKind.DURATION_FOLLOW_UP),
    ("which bus should I take", IntentKind.BUS_FOLLOW_UP),
    ("where can I eat", IntentKind.RESTAURANT_FOLLOW_UP),
    ("is it safe at night", IntentKind.SAFETY_FOLLOW_UP),
    ("what time does it open", IntentKind.HOURS_FOLLOW_UP),
    ("where can I buy souvenirs", IntentKind.SHOPPING_FOLLOW_UP),
])
def test_keyword_intents(text, kind):
    intent, _ = classify(text, ROUTE)
    assert intent.kind == kind


@pytest.mark.parametrize("text,kind", [
    ("Is it unsafe to travel at night?", IntentKind.SAFETY_FOLLOW_UP),
    ("any seafood nearby", IntentKind.RESTAURANT_FOLLOW_UP),
    ("when does it reopen", IntentKind.HOURS_FOLLOW_UP),
    ("is there a supermarket", IntentKind.SHOPPING_FOLLOW_UP),
])
def test_keywords_match_inside_words(text, kind):
    intent, ctx = classify(text, ROUTE)
    assert intent.kind == kind
    assert ctx == ROUTE


def test_greeting_keeps_context():
    _, ctx = classify("hello", ROUTE)
    assert ctx == ROUTE


def test_knowledge_lookup():
    intent, ctx = classify("Tell me about Danteshwari Temple", EMPTY)
    assert intent.kind == IntentKind.KNOWLEDGE_LOOKUP
    assert intent.key == "danteshwari temple"
    assert ctx == EMPTY


def test_knowledge_outranks_district_overview():
    intent, _ = classify("Villages in Dantewada district", EMPTY)
    assert intent.kind == IntentKind.KNOWLEDGE_LOOKUP
    assert intent.key == "dantewada"


def test_district_overview_when_fact_card_is_suppressed():
    intent, _ = classify("which towns to visit around dantewada", EMPTY)
    assert intent.kind == IntentKind.DISTRICT_OVERVIEW


def test_routing_question_is_not_a_fact_card():
    intent, ctx = classify("How to get to Danteshwari Temple", EMPTY)
    assert intent.kind == IntentKind.DESTINATION_ONLY
    assert intent.destination == "Danteshwari Temple"
    assert ctx == TravelContext(destination="Danteshwari Temple")


def test_route_request_replaces_context():
    intent, ctx = classify("How to reach Kirandul from Dantewada?", ROUTE)
    assert intent.kind == IntentKind.ROUTE_REQUEST
    assert (intent.origin, intent.destination) == ("Dantewada", "Kirandul")
    assert ctx == TravelContext(origin="Dantewada", destination="Kirandul")


def test_destination_only_merges_known_origin():
    intent, ctx = classify("take me to the Grand Palace", TravelContext(origin="Park"))
    assert intent.kind == IntentKind.DESTINATION_ONLY
    assert intent.origin == "Park"
    assert ctx == TravelContext(origin="Park", destination="the Grand Palace")


def test_origin_only_keeps_known_destination():
    intent, ctx = classify("I'm at Old Town", TravelContext(destination="Lakeside"))
    assert intent.kind == IntentKind.ORIGIN_ONLY
    assert (intent.origin, intent.destination) == ("Old Town", "Lakeside")
    assert ctx == TravelContext(origin="Old Town", destination="Lakeside")


def test_bare_place_fills_origin_first():
    intent, ctx = classify("Museum", EMPTY)
    assert intent.kind == IntentKind.ORIGIN_ONLY
    assert ctx == TravelContext(origin="Museum")


def test_bare_place_completes_route():
    intent, ctx = classify("Museum", TravelContext(origin="Park"))
    assert intent.kind == IntentKind.ROUTE_REQUEST
    assert ctx == TravelContext(origin="Park", destination="Museum")


def test_bare_place_length_bounds():
    assert bare_place_rule("ok", EMPTY) is None
    assert bare_place_rule("x" * 50, EMPTY) is None
    assert bare_place_rule("abc", EMPTY) is not None


def test_fallback_when_context_is_full():
    intent, ctx = classify("Museum", ROUTE)
    assert intent.kind == IntentKind.FALLBACK
    assert ctx == ROUTE


def test_fallback_for_short_text():
    intent, _ = classify("ok", EMPTY)
    assert intent.kind == IntentKind.FALLBACK


def test_rules_in_isolation():
    assert knowledge_rule("route to barsur", EMPTY) is None
    assert knowledge_rule("barsur", EMPTY).intent.key == "barsur"
    assert slot_rule("Museum", EMPTY) is None
    assert slot_rule("Geedam to Barsur", EMPTY).intent.kind == IntentKind.ROUTE_REQUEST
