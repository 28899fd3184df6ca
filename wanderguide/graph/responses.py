"""
Renders a classified intent into the bot's reply text.

Texts use the chat widget's markup: **bold** spans and newline-separated lines.
"""
from typing import Callable, NamedTuple, Optional

from wanderguide.graph.intent import Intent, IntentKind
from wanderguide.knowledge.categories import destination_info
from wanderguide.knowledge.places import place_info
from wanderguide.models import RouteInfo, TravelContext
from wanderguide.providers.base import PoiSets, TransitProvider

MIN_DURATION_MINUTES = 20
MAX_DURATION_MINUTES = 65


class Response(NamedTuple):
    text: str
    context: TravelContext
    route: Optional[RouteInfo] = None


WELCOME_TEXT = (
    "Hello! 👋 I'm your **WanderGuide AI** for **Dantewada District**, Chhattisgarh.\n\n"
    "I can help you:\n"
    "• Find cities, towns and villages in Dantewada district\n"
    "• Get directions to temples, waterfalls, and landmarks\n"
    "• Discover local restaurants and stay options\n"
    "• Plan your route with bus timings\n\n"
    "Try asking:\n"
    "• *\"Tell me about Danteshwari Temple\"*\n"
    "• *\"How to reach Kirandul from Dantewada?\"*\n"
    "• *\"Villages in Dantewada district\"*"
)

GREETING_TEXT = (
    "Hello! 👋 Welcome to **WanderGuide AI** — your personal travel assistant!\n\n"
    "I can help you:\n"
    "• Get step-by-step directions to any destination\n"
    "• Find the right bus and departure times\n"
    "• Discover restaurants, shops & markets along the way\n"
    "• Learn about your destination\n\n"
    "Just tell me where you are and where you'd like to go.\n"
    "For example: *\"I am at City Center and want to go to the Beach\"*"
)

HELP_TEXT = (
    "🤖 **How to use WanderGuide AI**\n\n"
    "Tell me your starting point and destination in any of these ways:\n"
    "• *\"From Central Station to Heritage Museum\"*\n"
    "• *\"I'm at the hotel and want to go to the beach\"*\n"
    "• *\"City Park to Old Museum\"*\n\n"
    "I'll give you:\n"
    "✅ Step-by-step bus directions\n"
    "✅ Live departure times\n"
    "✅ Restaurants & shops on the route\n"
    "✅ Washrooms & markets\n"
    "✅ What to expect at your destination"
)

DISTRICT_TEXT = (
    "🗺️ **Dantewada District — Complete Guide**\n\n"
    "📍 **Cities & Towns:**\n"
    "• Dantewada (District HQ)\n• Geedam\n• Katekalyan\n• Kuakonda\n• Barsur\n• Bacheli\n• Kirandul\n\n"
    "🏘️ **Villages:**\n"
    "• Pharasgaon, Chitalnar, Tongpal, Haldi\n"
    "• Darbha, Makdi, Nakulnar, Dornapal\n"
    "• Kistaram, Bhairamgarh, Aranpur\n"
    "• Hiroli, Pamed, Bhopalpatnam\n\n"
    "🛕 **Famous Landmarks:**\n"
    "• Danteshwari Temple (Shakti Peeth)\n"
    "• Barsur Ancient Temples\n"
    "• Bailadila Iron Ore Mine\n"
    "• Indravati National Park\n\n"
    "🚌 **How to reach Dantewada:**\n"
    "• From Raipur: ~480 km via NH30, ~9 hrs\n"
    "• From Jagdalpur: ~80 km, ~2 hrs bus\n"
    "• Train: Kirandul–Visakhapatnam line\n\n"
    "Ask me about any specific place for detailed directions!"
)

SAFETY_TEXT = (
    "🛡️ **Safety Tips for Tourists**\n\n"
    "• Keep your belongings secure in crowded areas\n"
    "• Use official taxi services or rideshare apps\n"
    "• Keep a copy of your ID separate from the original\n"
    "• Stay on well-lit streets at night\n"
    "• Share your itinerary with someone you trust\n"
    "• Save the local emergency number: 112 (international standard)\n"
    "• Visit the local tourist information centre for area-specific advice"
)

FALLBACK_TEXT = (
    "I'd love to help you navigate! 🗺️\n\n"
    "Please tell me:\n"
    "• Where you **currently are** (starting point)\n"
    "• Where you **want to go** (destination)\n\n"
    "Example: *\"I'm at Central Station and want to go to the Old Museum\"*"
)

DURATION_PROMPT = (
    "To estimate travel time, I'll need your starting point and destination. "
    "Please tell me where you are and where you're headed!"
)

BUS_PROMPT = "Please share your starting location and destination so I can find the right bus for you!"


def _bullets(items) -> str:
    return "\n".join(f"• {item}" for item in items)


def build_travel_response(provider: TransitProvider, origin: str, destination: str) -> tuple[str, RouteInfo]:
    info = provider.bus_info(origin, destination)
    pois: PoiSets = provider.random_pois()
    washroom_shop = provider.pick(pois.shops)

    text = (
        f"Great! Here's how to get from **{origin}** to **{destination}**:\n\n"
        "🗺️ DIRECTIONS\n"
        f"1. Start from {origin} heading towards the main road\n"
        f"2. Walk ~{info.walk_to_stop} minutes to the nearest bus stop\n"
        f"3. Board **Bus {info.bus_number}** towards {info.transit_hub}\n"
        "   ↳ Runs every 30 minutes\n"
        f"   ↳ Next departures: {info.departures_text()}\n"
        f"4. Ride for ~{info.ride_stops} stops (about {info.ride_minutes} min)\n"
        f"5. Alight at \"{destination} Stop\" and walk ~{info.walk_from_stop} min to your destination\n\n"
        f"⏱️ TOTAL TRAVEL TIME: ~{info.total_minutes} minutes\n\n"
        "🍽️ RESTAURANTS ON THE WAY\n"
        f"{_bullets(pois.restaurants)}\n\n"
        "🛍️ SHOPS NEARBY\n"
        f"{_bullets(pois.shops)}\n\n"
        "🚻 WASHROOMS\n"
        f"• Main bus terminal at {info.transit_hub}\n"
        f"• At the entrance of {destination}\n"
        f"• {washroom_shop} shopping area\n\n"
        "🛒 MARKETS\n"
        f"{_bullets(pois.markets)}\n\n"
        f"📌 AT YOUR DESTINATION ({destination})\n"
        f"{destination_info(destination)}\n\n"
        "Safe travels! 🌍 Ask me anything else about your trip."
    )
    return text, info


def _route(intent: Intent, context: TravelContext, provider: TransitProvider) -> Response:
    new_ctx = TravelContext(origin=intent.origin, destination=intent.destination)
    text, info = build_travel_response(provider, intent.origin, intent.destination)
    return Response(text, new_ctx, info)


def _destination_only(intent: Intent, context: TravelContext, provider: TransitProvider) -> Response:
    if intent.origin:
        return _route(intent, context, provider)
    text = (
        f"Got it — you want to visit **{intent.destination}**! 📍\n\n"
        "Where are you starting from? Just tell me your current location or landmark "
        "and I'll map out the full route for you."
    )
    return Response(text, context.with_destination(intent.destination))


def _origin_only(intent: Intent, context: TravelContext, provider: TransitProvider) -> Response:
    if intent.destination:
        return _route(intent, context, provider)
    text = (
        f"Got it — you're starting from **{intent.origin}**. 🚩\n\n"
        "Where would you like to go? Tell me your destination and I'll plan the route!"
    )
    return Response(text, context.with_origin(intent.origin))


def _duration(intent: Intent, context: TravelContext, provider: TransitProvider) -> Response:
    if not context.is_complete:
        return Response(DURATION_PROMPT, context)
    mins = provider.randint(MIN_DURATION_MINUTES, MAX_DURATION_MINUTES)
    text = (
        f"⏱️ The journey from **{context.origin}** to **{context.destination}** takes approximately "
        f"**{mins} minutes** in total, including walking time to the bus stop and from the drop-off point."
    )
    return Response(text, context)


def _bus(intent: Intent, context: TravelContext, provider: TransitProvider) -> Response:
    if not context.is_complete:
        return Response(BUS_PROMPT, context)
    num = provider.randint(10, 99)
    deps = ", ".join(provider.next_departures())
    text = (
        f"🚌 **Bus {num}** runs between **{context.origin}** and **{context.destination}**.\n"
        f"Next departures: **{deps}**\n"
        "Frequency: Every 30 minutes.\n"
        "Tip: Validate your ticket before boarding."
    )
    return Response(text, context)


def _restaurants(intent: Intent, context: TravelContext, provider: TransitProvider) -> Response:
    first, second, third = provider.random_pois().restaurants
    area = context.destination or "the area"
    text = (
        f"🍽️ **Restaurants near {area}**:\n"
        f"• {first} — local favourites, open 11 AM – 10 PM\n"
        f"• {second} — great for a quick bite, outdoor seating available\n"
        f"• {third} — popular with tourists, set menus available\n\n"
        "Most open until late evening. Reservations recommended on weekends!"
    )
    return Response(text, context)


def _hours(intent: Intent, context: TravelContext, provider: TransitProvider) -> Response:
    dest = context.destination or "most tourist attractions"
    text = (
        f"🕐 **General opening hours for {dest}**:\n"
        f"{destination_info(context.destination or '')}\n\n"
        "For the most accurate timings, I recommend checking the official website "
        "or calling ahead — especially on public holidays!"
    )
    return Response(text, context)


def _shopping(intent: Intent, context: TravelContext, provider: TransitProvider) -> Response:
    pois = provider.random_pois()
    text = (
        "🛍️ **Shops & Markets nearby**:\n\n"
        "Shops:\n"
        f"{_bullets(pois.shops)}\n\n"
        "Markets:\n"
        f"• {pois.markets[0]} — open mornings, great for local produce\n"
        f"• {pois.markets[1]} — evening market, handmade crafts & souvenirs\n\n"
        "Tip: Bargaining is welcomed at the market stalls!"
    )
    return Response(text, context)


def _static(text: str) -> Callable[[Intent, TravelContext, TransitProvider], Response]:
    def render(intent: Intent, context: TravelContext, provider: TransitProvider) -> Response:
        return Response(text, context)

    return render


def _knowledge(intent: Intent, context: TravelContext, provider: TransitProvider) -> Response:
    return Response(place_info(intent.key), context)


RENDERERS: dict[IntentKind, Callable[[Intent, TravelContext, TransitProvider], Response]] = {
    IntentKind.GREETING: _static(GREETING_TEXT),
    IntentKind.HELP: _static(HELP_TEXT),
    IntentKind.KNOWLEDGE_LOOKUP: _knowledge,
    IntentKind.DISTRICT_OVERVIEW: _static(DISTRICT_TEXT),
    IntentKind.DURATION_FOLLOW_UP: _duration,
    IntentKind.BUS_FOLLOW_UP: _bus,
    IntentKind.RESTAURANT_FOLLOW_UP: _restaurants,
    IntentKind.SAFETY_FOLLOW_UP: _static(SAFETY_TEXT),
    IntentKind.HOURS_FOLLOW_UP: _hours,
    IntentKind.SHOPPING_FOLLOW_UP: _shopping,
    IntentKind.ROUTE_REQUEST: _route,
    IntentKind.ORIGIN_ONLY: _origin_only,
    IntentKind.DESTINATION_ONLY: _destination_only,
    IntentKind.FALLBACK: _static(FALLBACK_TEXT),
}


def synthesize(intent: Intent, context: TravelContext, provider: TransitProvider) -> Response:
    return RENDERERS[intent.kind](intent, context, provider)
