import re
from typing import NamedTuple, Optional


class Slots(NamedTuple):
    origin: Optional[str] = None
    destination: Optional[str] = None


_FLAGS = re.IGNORECASE

# Checked top to bottom, first match wins. The generic "<A> to <B>" pattern
# matches almost any sentence with " to " in it, so everything more specific
# must come before it.
SLOT_PATTERNS: list[re.Pattern] = [
    # from <A> to <B>
    re.compile(r"from\s+(?P<origin>.+?)\s+to\s+(?P<destination>.+)", _FLAGS),
    # at <A> and want to go to <B>
    re.compile(
        r"\bat\s+(?P<origin>.+?)\s+(?:and\s+)?(?:want\s+to\s+go|going)\s+to\s+(?P<destination>.+)",
        _FLAGS,
    ),
    # I'm in <A> going to <B>
    re.compile(
        r"i(?:'m|\s+am)\s+(?:at|in)\s+(?P<origin>.+?)\s+(?:and\s+)?(?:want\s+to\s+go|going)\s+to\s+(?P<destination>.+)",
        _FLAGS,
    ),
    # reach <B> from <A>
    re.compile(
        r"\b(?:reach|get\s+to|go\s+to|travel\s+to)\s+(?P<destination>.+?)\s+from\s+(?P<origin>.+)",
        _FLAGS,
    ),
    # destination only
    re.compile(
        r"^how\s+(?:do\s+i\s+|can\s+i\s+|should\s+i\s+|to\s+)?(?:get|go|reach|travel)\s+(?:to\s+)?(?P<destination>.+)",
        _FLAGS,
    ),
    re.compile(
        r"^(?:please\s+)?(?:take\s+me|i\s+want\s+to\s+go|i'd\s+like\s+to\s+go|i\s+would\s+like\s+to\s+go"
        r"|going|heading|directions)\s+to\s+(?P<destination>.+)",
        _FLAGS,
    ),
    re.compile(r"^(?:reach|visit)\s+(?P<destination>.+)", _FLAGS),
    # generic <A> to <B>
    re.compile(r"(?P<origin>.+?)\s+to\s+(?P<destination>.+)", _FLAGS),
    # origin only
    re.compile(r"^i(?:'m|\s+am)\s+(?:at|in)\s+(?P<origin>.+)", _FLAGS),
    re.compile(r"^(?:starting|leaving)\s+from\s+(?P<origin>.+)", _FLAGS),
    re.compile(r"^from\s+(?P<origin>.+)", _FLAGS),
]

_TRAILING_PUNCT = re.compile(r"[?.!,]+$")


def clean_slot(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    v = _TRAILING_PUNCT.sub("", value.strip()).strip()
    return v or None


def extract_slots(text: str) -> Slots:
    t = (text or "").strip()
    for pattern in SLOT_PATTERNS:
        m = pattern.search(t)
        if not m:
            continue
        groups = m.groupdict()
        return Slots(
            origin=clean_slot(groups.get("origin")),
            destination=clean_slot(groups.get("destination")),
        )
    return Slots()
