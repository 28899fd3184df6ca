# (keywords, advisory); checked in order, first family wins
CATEGORY_ADVISORIES: list[tuple[tuple[str, ...], str]] = [
    (
        ("beach", "coast", "shore"),
        "🏖️ Best time to visit: Early morning (7–10 AM) or late afternoon (4–7 PM) to avoid peak heat.\n"
        "Bring sunscreen, water, and a hat. Lifeguards are on duty from 8 AM – 6 PM.\n"
        "Beach equipment rental is available at the main entrance. "
        "Nearby changing rooms and showers are open 7 AM – 8 PM.",
    ),
    (
        ("museum", "gallery", "exhibit"),
        "🏛️ Opening hours: Tue–Sun, 9 AM – 5 PM (last entry 4:30 PM). Closed Mondays.\n"
        "Current featured exhibit is running until end of the season.\n"
        "Student & senior discounts available. Audio guides available at reception for a small fee.",
    ),
    (
        ("park", "garden", "reserve"),
        "🌳 Open daily: Sunrise to sunset. Free entry to main grounds.\n"
        "Weekend nature walks led by local guides depart at 9 AM from the main gate.\n"
        "Picnic areas and BBQ grills available — book in advance on weekends.",
    ),
    (
        ("market", "bazaar"),
        "🛒 Open: Mon–Sat, 8 AM – 7 PM. Sunday 9 AM – 3 PM.\n"
        "Best deals in the morning. Bring cash — many stalls don't accept cards.\n"
        "Look out for the local spice section and handmade crafts near the south entrance.",
    ),
    (
        ("restaurant", "cafe", "diner"),
        "🍽️ Typically open 11 AM – 10 PM. Reservations recommended on weekends.\n"
        "Most restaurants offer set lunch menus from 12–2 PM at reduced rates.\n"
        "Local specialties are highly recommended — ask the staff for the dish of the day.",
    ),
    (
        ("hotel", "resort", "inn"),
        "🏨 Check-in usually from 2 PM, check-out by 11 AM. Early check-in subject to availability.\n"
        "The hotel concierge can arrange local tours and transport.\n"
        "Amenities typically include restaurant, pool, and business centre.",
    ),
    (
        ("landmark", "monument", "tower"),
        "🗼 Open daily, typically 9 AM – 6 PM (extended hours in summer).\n"
        "Guided tours available at 10 AM and 2 PM.\n"
        "Photography permitted in most areas — check signs for restricted zones.",
    ),
]

GENERIC_ADVISORY = (
    "📍 Typically open to visitors during daylight hours.\n"
    "Check locally for current events or seasonal activities.\n"
    "It's recommended to arrive early, especially on weekends and public holidays."
)


def destination_info(name: str) -> str:
    lower = (name or "").lower()
    for keywords, advisory in CATEGORY_ADVISORIES:
        if any(k in lower for k in keywords):
            return advisory
    return GENERIC_ADVISORY
