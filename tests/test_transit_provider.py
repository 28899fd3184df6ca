import random
from datetime import datetime

from wanderguide.providers.catalogue import MARKETS, RESTAURANTS, SHOPS, TRANSIT_HUBS
from wanderguide.providers.random_transit import (
    RandomTransitProvider,
    departures_after,
    format_12h,
    next_half_hour,
)


def test_next_half_hour_rounds_up():
    assert next_half_hour(datetime(2024, 1, 1, 9, 10)) == datetime(2024, 1, 1, 9, 30)
    assert next_half_hour(datetime(2024, 1, 1, 9, 45)) == datetime(2024, 1, 1, 10, 0)


def test_next_half_hour_keeps_exact_boundary():
    assert next_half_hour(datetime(2024, 1, 1, 9, 30)) == datetime(2024, 1, 1, 9, 30)
    assert next_half_hour(datetime(2024, 1, 1, 14, 0)) == datetime(2024, 1, 1, 14, 0)


def test_format_12h():
    assert format_12h(datetime(2024, 1, 1, 0, 0)) == "12:00 AM"
    assert format_12h(datetime(2024, 1, 1, 9, 30)) == "9:30 AM"
    assert format_12h(datetime(2024, 1, 1, 12, 0)) == "12:00 PM"
    assert format_12h(datetime(2024, 1, 1, 23, 30)) == "11:30 PM"


def test_departures_are_three_consecutive_slots():
    assert departures_after(datetime(2024, 1, 1, 9, 10)) == ["9:30 AM", "10:00 AM", "10:30 AM"]
    assert departures_after(datetime(2024, 1, 1, 11, 50)) == ["12:00 PM", "12:30 PM", "1:00 PM"]


def test_departures_wrap_past_midnight():
    assert departures_after(datetime(2024, 1, 1, 23, 40)) == ["12:00 AM", "12:30 AM", "1:00 AM"]


def test_bus_info_invariants():
    for seed in range(200):
        p = RandomTransitProvider(rng=random.Random(seed), clock=lambda: datetime(2024, 1, 1, 8, 5))
        info = p.bus_info("Park", "Museum")
        assert 10 <= info.bus_number <= 99
        assert 3 <= info.ride_stops <= 8
        assert 3 <= info.per_stop_minutes <= 5
        assert 3 <= info.walk_to_stop <= 8
        assert 2 <= info.walk_from_stop <= 5
        assert info.ride_minutes == info.ride_stops * info.per_stop_minutes
        assert info.total_minutes == info.walk_to_stop + info.ride_minutes + info.walk_from_stop
        assert info.transit_hub in TRANSIT_HUBS
        assert info.next_departures == ["8:30 AM", "9:00 AM", "9:30 AM"]
        assert (info.origin, info.destination) == ("Park", "Museum")


def test_seeded_provider_is_repeatable():
    a = RandomTransitProvider(rng=random.Random(42), clock=lambda: datetime(2024, 1, 1, 8, 0))
    b = RandomTransitProvider(rng=random.Random(42), clock=lambda: datetime(2024, 1, 1, 8, 0))
    assert a.bus_info("A", "B") == b.bus_info("A", "B")
    assert a.random_pois() == b.random_pois()


def test_poi_sets_are_drawn_whole(provider):
    for _ in range(20):
        pois = provider.random_pois()
        assert pois.restaurants in RESTAURANTS
        assert pois.shops in SHOPS
        assert pois.markets in MARKETS
