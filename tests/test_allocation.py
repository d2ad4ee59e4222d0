"""Tests for default pizzas covering non-respondents."""

import math

import pytest

from rsvpizza.allocation import default_pizzas, round_half_up
from rsvpizza.catalog import PIZZA_SIZES, find_style

NEW_YORK = find_style("new-york")
NEAPOLITAN = find_style("neapolitan")

REGULAR_LABELS = {"Cheese", "Pepperoni", "Mushroom", "Veggie"}


def _quantities(pizzas) -> dict[str, int]:
    return {p.label: p.quantity for p in pizzas}


class TestRoundHalfUp:
    @pytest.mark.parametrize("value,expected", [(0.5, 1), (1.4, 1), (2.5, 3), (0.2, 0), (6.8, 7)])
    def test_rounding(self, value, expected):
        assert round_half_up(value) == expected


class TestDefaultPizzas:
    @pytest.mark.parametrize("style", [NEW_YORK, NEAPOLITAN])
    def test_no_shortfall(self, style):
        assert default_pizzas(0, style) == []
        assert default_pizzas(-3, style) == []

    def test_twenty_expected_four_responded(self):
        pizzas = default_pizzas(16, NEW_YORK)
        assert _quantities(pizzas) == {
            "Cheese": 1,
            "Pepperoni": 1,
            "Vegan": 1,
            "Gluten-Free Cheese": 1,
        }
        assert sum(p.guest_count for p in pizzas) == 16

    def test_large_shortfall_split(self):
        pizzas = default_pizzas(100, NEW_YORK)
        assert _quantities(pizzas) == {
            "Cheese": 6,
            "Pepperoni": 6,
            "Mushroom": 2,
            "Veggie": 2,
            "Vegan": 2,
            "Gluten-Free Cheese": 2,
        }

    def test_neapolitan_small_shortfall(self):
        pizzas = default_pizzas(3, NEAPOLITAN)
        assert _quantities(pizzas) == {"Vegan": 1, "Gluten-Free Cheese": 1}
        assert all(p.size == PIZZA_SIZES[0] for p in pizzas)

    def test_fixed_profiles(self):
        by_label = {p.label: p for p in default_pizzas(100, NEW_YORK)}
        assert [t.id for t in by_label["Cheese"].toppings] == ["extra-cheese"]
        assert [t.id for t in by_label["Pepperoni"].toppings] == ["pepperoni", "extra-cheese"]
        assert by_label["Vegan"].dietary_restrictions == ("Vegan",)
        assert "extra-cheese" not in {t.id for t in by_label["Vegan"].toppings}
        assert by_label["Gluten-Free Cheese"].dietary_restrictions == ("Gluten-Free",)

    def test_entries_are_marked_and_empty(self):
        for pizza in default_pizzas(37, NEW_YORK):
            assert pizza.is_for_non_respondents
            assert pizza.guests == ()
            assert pizza.quantity > 0
            assert pizza.style == NEW_YORK

    @pytest.mark.parametrize("style", [NEW_YORK, NEAPOLITAN])
    @pytest.mark.parametrize("shortfall", range(1, 61))
    def test_regular_buckets_add_up(self, style, shortfall):
        per_pizza = 1.5 if style is NEAPOLITAN else 5
        needed = math.ceil(shortfall / per_pizza)
        special = math.ceil(math.ceil(shortfall / 10) / per_pizza)
        regular = max(0, needed - 2 * special)

        pizzas = default_pizzas(shortfall, style)
        assert sum(p.quantity for p in pizzas if p.label in REGULAR_LABELS) == regular
        assert sum(p.guest_count for p in pizzas) == shortfall
