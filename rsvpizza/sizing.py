"""Pizza size selection for rsvpizza."""

from rsvpizza.catalog import PIZZA_SIZES
from rsvpizza.models import PizzaSize, PizzaStyle


def optimal_size(guest_count: float, style: PizzaStyle | None = None) -> PizzaSize:
    """
    Pick the smallest pizza size that feeds guest_count.

    Personal-size-only styles always get the smallest size. When no size is
    big enough, the largest one is used.
    """
    if style is not None and style.personal_size_only:
        return PIZZA_SIZES[0]

    for size in PIZZA_SIZES:
        if size.servings >= guest_count:
            return size
    return PIZZA_SIZES[-1]


def servings_per_pizza(style: PizzaStyle) -> float:
    """How many guests one pizza of this style is assumed to feed."""
    if style.servings_per_pizza is not None:
        return style.servings_per_pizza
    return style.max_guests_per_pizza
