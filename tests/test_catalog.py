"""Tests for the catalog lookups."""

from rsvpizza.catalog import (
    DIETARY_EXCLUSIONS,
    DIETARY_OPTIONS,
    PIZZA_SIZES,
    find_beverage,
    find_style,
    find_topping,
    known_restrictions,
)


def test_find_topping():
    assert find_topping("pepperoni").name == "Pepperoni"
    assert find_topping("unicorn") is None


def test_find_beverage():
    assert find_beverage("water").type == "water"
    assert find_beverage("moonshine") is None


def test_find_style():
    assert find_style("neapolitan").personal_size_only
    generic = find_style("deep-dish")
    assert generic.name == "Deep Dish"
    assert generic.max_guests_per_pizza == 5


def test_known_restrictions():
    assert known_restrictions(("None", "Vegan", "Keto")) == ["Vegan"]


def test_every_option_has_exclusions():
    assert set(DIETARY_OPTIONS) == set(DIETARY_EXCLUSIONS)
    assert DIETARY_EXCLUSIONS["Vegetarian"] < DIETARY_EXCLUSIONS["Vegan"]


def test_sizes_ascending():
    servings = [s.servings for s in PIZZA_SIZES]
    assert servings == sorted(servings)
