from datetime import date

from ..core.schemas import DayPlan, TourEstimates
from ..services.itinerary import build_itinerary, calculate_estimates
from ..services.transport import estimate_travel
from ..utils.geo import format_clock
from .factories import ORIGIN, east_of, place

START = date(2026, 3, 30)


def test_empty_input_gives_empty_itinerary():
    days = build_itinerary([], ORIGIN, START)
    assert days == []
    assert calculate_estimates(days) == TourEstimates(total_cost=0, total_hours=0, total_places=0, total_days=0)


def test_single_place_at_user_location():
    days = build_itinerary([place("solo", minutes=60)], ORIGIN, START)

    assert len(days) == 1
    day = days[0]
    assert day.day_number == 1
    assert day.date == "2026-03-30"
    assert len(day.places) == 1
    stop = day.places[0]
    assert stop.planned_time == "09:00"
    assert stop.transport_mode == "walk"
    assert stop.transport_duration == 0
    assert stop.transport_cost == 0
    assert day.total_duration == 60
    assert day.total_cost == 0


def test_two_nearby_places_same_day():
    first = place("first", coords=ORIGIN)
    second = place("second", coords=east_of(ORIGIN, 0.5))
    days = build_itinerary([second, first], ORIGIN, START)

    assert len(days) == 1
    stops = days[0].places
    assert [s.place_id for s in stops] == ["first", "second"]

    walk = estimate_travel(first.coordinates, second.coordinates)
    assert walk.mode == "walk"
    assert stops[0].planned_time == "09:00"
    assert stops[1].planned_time == format_clock(540 + 60 + walk.duration_min)
    assert stops[1].transport_duration == walk.duration_min
    assert days[0].total_duration == 120 + walk.duration_min


def test_wards_over_daily_cap_split_into_days():
    big = [
        place("b1", "Big", east_of(ORIGIN, 4.9), minutes=150, fee=500),
        place("b2", "Big", east_of(ORIGIN, 5.2), minutes=150),
    ]
    small = [place("s", "Small", east_of(ORIGIN, 20), minutes=280, fee=1000)]
    days = build_itinerary(small + big, ORIGIN, START)

    assert [d.day_number for d in days] == [1, 2]
    assert [[s.place_id for s in d.places] for d in days] == [["b1", "b2"], ["s"]]
    assert days[0].notes == "Big"
    assert days[1].notes == "Small"
    assert days[1].date == "2026-03-31"

    # day 1 starts with a metro ride from the user location
    first = days[0].places[0]
    assert first.transport_mode == "metro"
    assert first.planned_time == "09:25"  # ceil(4.9 * 3 + 10)
    assert days[0].total_cost == 200 + 500

    # later days start at their first stop
    day2_first = days[1].places[0]
    assert day2_first.transport_mode == "walk"
    assert day2_first.transport_duration == 0
    assert day2_first.planned_time == "09:00"
    assert days[1].total_cost == 1000
    assert days[1].total_duration == 280


def test_lunch_gap_snaps_once_mid_day():
    places = [place("a", minutes=250), place("b", minutes=60), place("c", minutes=60)]
    days = build_itinerary(places, ORIGIN, START)

    stops = days[0].places
    assert [s.planned_time for s in stops] == ["09:00", "14:00", "15:00"]
    assert days[0].total_duration == 420


def test_lunch_gap_skipped_after_last_stop():
    days = build_itinerary([place("a", minutes=200), place("b", minutes=60)], ORIGIN, START)
    assert days[0].places[1].planned_time == "12:20"
    # ends at 13:20, no snap
    assert days[0].total_duration == 260


def test_lunch_gap_boundaries_are_exclusive():
    days = build_itinerary([place("a", minutes=240), place("b", minutes=60)], ORIGIN, START)
    assert days[0].places[1].planned_time == "13:00"
    assert days[0].total_duration == 300


def test_notes_list_distinct_wards_in_visit_order():
    places = [
        place("a", "Taito", east_of(ORIGIN, 0.1), minutes=60),
        place("b", "Sumida", east_of(ORIGIN, 0.2), minutes=60),
        place("c", "Taito", east_of(ORIGIN, 0.3), minutes=60),
    ]
    days = build_itinerary(places, ORIGIN, START)
    assert len(days) == 1
    assert days[0].notes == "Taito, Sumida"


def test_dates_roll_over_month_end():
    places = [place("a", "A", minutes=400), place("b", "B", minutes=400)]
    days = build_itinerary(places, ORIGIN, date(2026, 1, 31))
    assert [d.date for d in days] == ["2026-01-31", "2026-02-01"]


def test_default_visit_duration_and_fee():
    days = build_itinerary([place("a")], ORIGIN, START)
    assert days[0].places[0].visit_duration == 60
    assert days[0].total_cost == 0


def test_every_place_planned_exactly_once():
    places = [
        place(f"p{i}", ward=f"W{i % 4}", coords=east_of(ORIGIN, i * 0.7), minutes=45 + 15 * (i % 5))
        for i in range(20)
    ]
    days = build_itinerary(places, ORIGIN, START)
    planned = [s.place_id for d in days for s in d.places]
    assert sorted(planned) == sorted(p.id for p in places)
    assert [d.day_number for d in days] == list(range(1, len(days) + 1))


def test_same_input_same_output():
    places = [
        place(f"p{i}", ward=f"W{i % 3}", coords=east_of(ORIGIN, (i * 37) % 11), minutes=90)
        for i in range(9)
    ]
    first = build_itinerary(places, ORIGIN, START)
    second = build_itinerary(places, ORIGIN, START)
    assert [d.model_dump_json() for d in first] == [d.model_dump_json() for d in second]


def test_estimates_aggregate_days():
    days = [
        DayPlan(day_number=1, date="2026-03-30", total_cost=1200, total_duration=390),
        DayPlan(day_number=2, date="2026-03-31", total_cost=300, total_duration=120),
    ]
    estimates = calculate_estimates(days)
    assert estimates.total_cost == 1500
    # 510 min = 8.5 h, half rounds up
    assert estimates.total_hours == 9
    assert estimates.total_places == 0
    assert estimates.total_days == 2
