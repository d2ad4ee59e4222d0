"""Tests for beverage recommendations."""

from rsvpizza.beverages import default_beverages, recommend_beverages
from rsvpizza.models import Guest


def _quantities(recs) -> dict[str, int]:
    return {r.beverage.id: r.quantity for r in recs}


class TestRecommendBeverages:
    def test_nothing_offered(self):
        assert recommend_beverages([Guest("A", liked_beverages=("beer",))], []) == []

    def test_water_always_stocked(self):
        guests = [Guest(f"G{i}") for i in range(9)] + [Guest("W", liked_beverages=("water",))]
        assert _quantities(recommend_beverages(guests, ["water"])) == {"water": 7}

    def test_liked_beverage_minimum_four(self):
        guests = [Guest("A", liked_beverages=("soda",))]
        assert _quantities(recommend_beverages(guests, ["soda"])) == {"soda": 4}

    def test_liked_beverage_two_per_fan(self):
        guests = [Guest(name, liked_beverages=("soda",)) for name in "ABC"]
        recs = recommend_beverages(guests, ["soda"])
        assert _quantities(recs) == {"soda": 6}
        assert recs[0].guest_count == 3

    def test_unliked_beverage_skipped(self):
        guests = [Guest("A", disliked_beverages=("beer",)), Guest("B")]
        assert recommend_beverages(guests, ["beer"]) == []

    def test_unknown_ids_filtered(self):
        guests = [Guest("A", liked_beverages=("moonshine", "soda"))]
        assert _quantities(recommend_beverages(guests, ["moonshine", "soda"])) == {"soda": 4}

    def test_non_respondents_merged(self):
        guests = [Guest(name, liked_beverages=("soda",)) for name in "AB"]
        recs = recommend_beverages(guests, ["water", "soda"], expected_guest_count=6)
        # responded: water ceil(6/2)=3, soda 4; defaults for 4 missing guests add 5 and 4
        assert [(r.beverage.id, r.quantity) for r in recs] == [("water", 8), ("soda", 8)]
        assert {r.beverage.id: r.guest_count for r in recs} == {"water": 4, "soda": 6}

    def test_sorted_by_quantity(self):
        guests = [Guest(name, liked_beverages=("beer",)) for name in "ABCDEF"]
        recs = recommend_beverages(guests, ["water", "beer"])
        assert [r.beverage.id for r in recs] == ["beer", "water"]


class TestDefaultBeverages:
    def test_no_shortfall(self):
        assert default_beverages(0, ["water"]) == []

    def test_water_weighted(self):
        recs = default_beverages(10, ["water", "soda", "beer"])
        # 20 drinks, weights 1.5/1/1
        assert _quantities(recs) == {"water": 9, "soda": 6, "beer": 6}
        assert all(r.is_for_non_respondents for r in recs)

    def test_defaults_only_when_nobody_responded(self):
        recs = recommend_beverages([], ["beer"], expected_guest_count=3)
        assert _quantities(recs) == {"beer": 6}
        assert recs[0].is_for_non_respondents
