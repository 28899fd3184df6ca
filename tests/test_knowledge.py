from wanderguide.knowledge.categories import GENERIC_ADVISORY, destination_info
from wanderguide.knowledge.places import DANTEWADA_PLACES, find_place_key, lookup_place, place_info


def test_no_key_overlaps_another():
    keys = list(DANTEWADA_PLACES)
    for a in keys:
        for b in keys:
            if a != b:
                assert a not in b, f"{a!r} is contained in {b!r}"


def test_lookup_by_substring():
    assert lookup_place("tell me about barsur please") == "barsur"
    assert lookup_place("chitrakoot waterfall") == "chitrakoot"
    assert place_info("barsur").startswith("🏛️ Barsur")


def test_routing_words_suppress_lookup():
    assert lookup_place("route to barsur") is None
    assert lookup_place("directions for geedam") is None
    assert lookup_place("from geedam") is None
    assert lookup_place("how do i get there, kirandul") is None
    # the key is still found, only the fact card is suppressed
    assert find_place_key("route to barsur") == "barsur"


def test_to_is_matched_as_a_word():
    assert lookup_place("history of barsur") == "barsur"


def test_no_match():
    assert lookup_place("the beach") is None


def test_category_priority():
    assert destination_info("Sunny Beach").startswith("🏖️")
    # beach family outranks museum
    assert destination_info("Beach Museum").startswith("🏖️")
    assert destination_info("Grand Bazaar").startswith("🛒")
    assert destination_info("Riverside Inn").startswith("🏨")
    assert destination_info("Clock Tower").startswith("🗼")


def test_destination_info_templates():
    assert "Closed Mondays" in destination_info("Heritage Museum")
    assert "Sunrise to sunset" in destination_info("City Park")
    assert destination_info("Old Town") == GENERIC_ADVISORY
    assert destination_info("") == GENERIC_ADVISORY
