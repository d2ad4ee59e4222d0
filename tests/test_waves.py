"""Tests for delivery wave scheduling."""

from datetime import datetime, timedelta

import pytest

from rsvpizza.catalog import find_style
from rsvpizza.models import Guest, PartySettings
from rsvpizza.recommender import recommend_pizzas
from rsvpizza.waves import calculate_waves, recommend_waves

START = datetime(2026, 6, 1, 18, 0)


def _guests() -> list[Guest]:
    return [
        Guest("A", liked_toppings=("pepperoni",), liked_beverages=("soda",)),
        Guest("B", liked_toppings=("pepperoni",)),
        Guest("C", liked_toppings=("mushrooms",), disliked_toppings=("pepperoni",)),
        Guest("D", dietary_restrictions=("Vegan",), liked_toppings=("spinach",)),
    ]


class TestCalculateWaves:
    def test_short_party_single_wave(self):
        waves = calculate_waves(START, 1.0, 25)
        assert len(waves) == 1
        wave = waves[0]
        assert wave.arrival_time == START - timedelta(minutes=5)
        assert wave.guest_allocation == 25
        assert wave.weight == 1.0
        assert wave.label == "Single Wave"

    def test_three_hour_party(self):
        waves = calculate_waves(START, 3, 40)
        # 140-minute window at ~52.5 minutes -> 4 waves
        assert len(waves) == 4
        assert [w.guest_allocation for w in waves] == [12, 9, 9, 10]
        assert sum(w.guest_allocation for w in waves) == 40
        assert waves[0].guest_allocation > waves[1].guest_allocation
        assert waves[0].guest_allocation > waves[2].guest_allocation
        assert [w.weight for w in waves] == [1.25, 1.0, 1.0, 1.0]
        assert waves[0].label == "Wave 1 (Party Start)"
        assert waves[3].label == "Wave 4"
        assert [w.id for w in waves] == ["wave-1", "wave-2", "wave-3", "wave-4"]

    def test_arrival_times(self):
        waves = calculate_waves(START, 3, 40)
        assert waves[0].arrival_time == START - timedelta(minutes=5)
        last_expected = START + timedelta(hours=3) - timedelta(minutes=45)
        assert abs((waves[-1].arrival_time - last_expected).total_seconds()) < 1
        gaps = [
            (b.arrival_time - a.arrival_time).total_seconds() / 60 for a, b in zip(waves, waves[1:])
        ]
        assert all(gap >= 45 for gap in gaps)

    def test_threshold_party_gets_two_waves(self):
        waves = calculate_waves(START, 1.5, 10)
        assert len(waves) == 2
        assert [w.guest_allocation for w in waves] == [6, 4]

    def test_zero_guests(self):
        waves = calculate_waves(START, 4, 0)
        assert all(w.guest_allocation == 0 for w in waves)

    @pytest.mark.parametrize("duration", [1.5, 2, 2.5, 3, 4, 5.5, 8])
    @pytest.mark.parametrize("total", [0, 1, 7, 13, 40, 101])
    def test_allocations_sum_to_total(self, duration, total):
        waves = calculate_waves(START, duration, total)
        assert len(waves) >= 2
        assert sum(w.guest_allocation for w in waves) == total
        assert all(w.guest_allocation >= 0 for w in waves)

    @pytest.mark.parametrize("duration", [1.0, 3, 8])
    @pytest.mark.parametrize("total", [-1, -5, -40])
    def test_negative_total_treated_as_zero(self, duration, total):
        waves = calculate_waves(START, duration, total)
        assert [w.guest_allocation for w in waves] == [0] * len(waves)

    def test_rounding_overshoot_taken_from_last_waves(self):
        # 9 waves each round up to one guest, but only 7 are expected
        waves = calculate_waves(START, 8, 7)
        assert len(waves) == 9
        assert [w.guest_allocation for w in waves] == [1, 1, 1, 1, 1, 1, 1, 0, 0]


class TestRecommendWaves:
    def test_without_schedule_single_wave(self):
        party = PartySettings(style_id="new-york", expected_guests=10)
        recs = recommend_waves(_guests(), party)
        assert len(recs) == 1
        assert recs[0].wave.label == "All Pizzas"
        assert recs[0].wave.guest_allocation == 10
        assert recs[0].pizzas == recommend_pizzas(_guests(), find_style("new-york"), 10)

    def test_one_pipeline_run_per_wave(self):
        party = PartySettings(
            style_id="new-york",
            start=START,
            duration_hours=3,
            expected_guests=40,
            available_beverages=("water", "soda"),
        )
        recs = recommend_waves(_guests(), party)
        assert len(recs) == 4
        assert sum(r.wave.guest_allocation for r in recs) == 40
        for rec in recs:
            expected = recommend_pizzas(_guests(), find_style("new-york"), rec.wave.guest_allocation)
            assert rec.pizzas == expected
            assert rec.total_pizzas == sum(p.quantity for p in rec.pizzas)
            assert rec.total_beverages == sum(b.quantity for b in rec.beverages)
            assert rec.beverages

    def test_expected_override(self):
        party = PartySettings(start=START, duration_hours=1, expected_guests=40)
        recs = recommend_waves(_guests(), party, expected_guests=12)
        assert recs[0].wave.guest_allocation == 12

    def test_negative_expected_count(self):
        party = PartySettings(start=START, duration_hours=3)
        recs = recommend_waves(_guests(), party, expected_guests=-5)
        assert len(recs) == 4
        assert all(rec.wave.guest_allocation == 0 for rec in recs)
        assert not any(p.is_for_non_respondents for rec in recs for p in rec.pizzas)

    def test_no_beverages_offered(self):
        party = PartySettings(start=START, duration_hours=2, expected_guests=8)
        assert all(rec.beverages == [] for rec in recommend_waves(_guests(), party))

    def test_allowed_toppings_applied(self):
        party = PartySettings(allowed_toppings=("mushrooms", "spinach"))
        recs = recommend_waves(_guests(), party)
        for pizza in recs[0].pizzas:
            assert {t.id for t in pizza.toppings} <= {"mushrooms", "spinach"}
