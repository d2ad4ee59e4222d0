"""Pizza recommendation pipeline for rsvpizza."""

import logging
from collections.abc import Collection
from dataclasses import replace

from rsvpizza.allocation import default_pizzas
from rsvpizza.compatibility import group_guests
from rsvpizza.models import Guest, PizzaRecommendation, PizzaStyle
from rsvpizza.sizing import optimal_size
from rsvpizza.toppings import combined_restrictions, evaluate_half_and_half, select_toppings

logger = logging.getLogger(__name__)


def _pizza_for_group(
    group: list[Guest],
    style: PizzaStyle,
    allowed_toppings: Collection[str] | None,
) -> PizzaRecommendation:
    """Build the recommendation for one group of guests."""
    restrictions = combined_restrictions(group)
    size = optimal_size(len(group), style)

    halves = evaluate_half_and_half(group, allowed_toppings)
    if halves is not None:
        left, right = halves
        # Legacy consumers only look at .toppings: give them both halves, left first
        toppings = tuple(dict.fromkeys(left.toppings + right.toppings))
        return PizzaRecommendation(
            id="",
            toppings=toppings,
            guest_count=len(group),
            guests=tuple(group),
            dietary_restrictions=restrictions,
            size=size,
            style=style,
            is_half_and_half=True,
            left_half=left,
            right_half=right,
        )

    return PizzaRecommendation(
        id="",
        toppings=tuple(select_toppings(group, allowed_toppings)),
        guest_count=len(group),
        guests=tuple(group),
        dietary_restrictions=restrictions,
        size=size,
        style=style,
    )


def _aggregation_key(pizza: PizzaRecommendation) -> tuple[tuple[str, ...], tuple[str, ...], int]:
    return (
        tuple(sorted(t.id for t in pizza.toppings)),
        tuple(sorted(pizza.dietary_restrictions)),
        pizza.size.diameter,
    )


def aggregate_pizzas(pizzas: list[PizzaRecommendation]) -> list[PizzaRecommendation]:
    """
    Merge identical ordinary pizzas into quantity-counted lines.

    Pizzas with the same toppings, dietary restrictions and size are merged:
    quantities and guest counts are summed and guest lists concatenated.
    Half-and-half and non-respondent pizzas are passed through as-is.
    """
    grouped: list[PizzaRecommendation] = []
    seen: dict[tuple[tuple[str, ...], tuple[str, ...], int], int] = {}  # key -> index in grouped

    for pizza in pizzas:
        if pizza.is_half_and_half or pizza.is_for_non_respondents:
            grouped.append(pizza)
            continue

        key = _aggregation_key(pizza)
        if key in seen:
            idx = seen[key]
            existing = grouped[idx]
            grouped[idx] = replace(
                existing,
                quantity=existing.quantity + pizza.quantity,
                guest_count=existing.guest_count + pizza.guest_count,
                guests=existing.guests + pizza.guests,
            )
        else:
            seen[key] = len(grouped)
            grouped.append(pizza)

    return grouped


def recommend_pizzas(
    guests: list[Guest],
    style: PizzaStyle,
    expected_guest_count: int | None = None,
    allowed_toppings: Collection[str] | None = None,
) -> list[PizzaRecommendation]:
    """
    Recommend the pizzas to order for a party.

    Guests are grouped onto pizzas, each group gets its toppings (or two
    halves), identical pizzas are merged, and default pizzas are appended
    for the gap between expected_guest_count and the guests who responded.
    Returned pizzas are numbered pizza-1, pizza-2, ... in order.
    """
    groups = group_guests(guests, style)
    pizzas = [_pizza_for_group(group, style, allowed_toppings) for group in groups]
    pizzas = aggregate_pizzas(pizzas)

    if expected_guest_count is not None and expected_guest_count > len(guests):
        pizzas.extend(default_pizzas(expected_guest_count - len(guests), style))

    logger.debug(
        "%d guests (%s expected) -> %d pizza lines",
        len(guests),
        expected_guest_count,
        len(pizzas),
    )
    return [replace(pizza, id=f"pizza-{idx}") for idx, pizza in enumerate(pizzas, start=1)]
