"""Default pizzas for guests who have not responded."""

import logging
import math
from dataclasses import dataclass

from rsvpizza.catalog import find_topping
from rsvpizza.models import PizzaRecommendation, PizzaStyle
from rsvpizza.sizing import optimal_size, servings_per_pizza

logger = logging.getLogger(__name__)

# One vegan and one gluten-free serving per this many missing guests
SPECIAL_DIET_GUESTS_PER_SERVING = 10

CHEESE_SHARE = 0.4
PEPPERONI_SHARE = 0.4
MUSHROOM_SHARE = 0.1


@dataclass(frozen=True)
class DefaultPizzaType:
    """A fixed crowd-pleaser profile ordered for non-respondents."""

    label: str
    topping_ids: tuple[str, ...]
    dietary_restrictions: tuple[str, ...] = ()


CHEESE = DefaultPizzaType("Cheese", ("extra-cheese",))
PEPPERONI = DefaultPizzaType("Pepperoni", ("pepperoni", "extra-cheese"))
MUSHROOM = DefaultPizzaType("Mushroom", ("mushrooms", "extra-cheese"), ("Vegetarian",))
VEGGIE = DefaultPizzaType("Veggie", ("mushrooms", "bell-peppers", "onions"), ("Vegetarian",))
VEGAN = DefaultPizzaType("Vegan", ("mushrooms", "bell-peppers", "onions"), ("Vegan",))
GLUTEN_FREE = DefaultPizzaType("Gluten-Free Cheese", ("extra-cheese",), ("Gluten-Free",))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 going up (not to the nearest even)."""
    return math.floor(value + 0.5)


def default_pizzas(non_respondents: int, style: PizzaStyle) -> list[PizzaRecommendation]:
    """
    Build the default order that covers guests who have not responded.

    A vegan and a gluten-free serving are set aside for every ten missing
    guests; the rest of the order is roughly 40% cheese, 40% pepperoni and
    10% mushroom, with veggie taking whatever is left so the counts add up.
    """
    if non_respondents <= 0:
        return []

    per_pizza = servings_per_pizza(style)
    pizzas_needed = math.ceil(non_respondents / per_pizza)

    special_servings = math.ceil(non_respondents / SPECIAL_DIET_GUESTS_PER_SERVING)
    vegan_pizzas = max(0, math.ceil(special_servings / per_pizza))
    gluten_free_pizzas = max(0, math.ceil(special_servings / per_pizza))
    regular_pizzas = max(0, pizzas_needed - vegan_pizzas - gluten_free_pizzas)

    cheese_pizzas = min(round_half_up(regular_pizzas * CHEESE_SHARE), regular_pizzas)
    remaining = regular_pizzas - cheese_pizzas
    pepperoni_pizzas = min(round_half_up(regular_pizzas * PEPPERONI_SHARE), remaining)
    remaining -= pepperoni_pizzas
    mushroom_pizzas = min(round_half_up(regular_pizzas * MUSHROOM_SHARE), remaining)
    veggie_pizzas = remaining - mushroom_pizzas

    distribution = [
        (CHEESE, cheese_pizzas),
        (PEPPERONI, pepperoni_pizzas),
        (MUSHROOM, mushroom_pizzas),
        (VEGGIE, veggie_pizzas),
        (VEGAN, vegan_pizzas),
        (GLUTEN_FREE, gluten_free_pizzas),
    ]
    logger.debug(
        "%d non-respondents -> %d pizzas needed: %s",
        non_respondents,
        pizzas_needed,
        ", ".join(f"{kind.label}={count}" for kind, count in distribution),
    )

    pizzas: list[PizzaRecommendation] = []
    guests_assigned = 0
    for kind, count in distribution:
        if count <= 0:
            continue

        guests_for_type = min(math.ceil(count * per_pizza), non_respondents - guests_assigned)
        guests_per_pizza = math.ceil(guests_for_type / count)
        toppings = tuple(filter(None, map(find_topping, kind.topping_ids)))

        pizzas.append(
            PizzaRecommendation(
                id=f"default-{kind.label.lower().replace(' ', '-')}",
                toppings=toppings,
                guest_count=guests_for_type,
                guests=(),
                dietary_restrictions=kind.dietary_restrictions,
                size=optimal_size(guests_per_pizza, style),
                style=style,
                quantity=count,
                is_for_non_respondents=True,
                label=kind.label,
            )
        )
        guests_assigned += guests_for_type

    return pizzas
