"""Fixed catalogs of toppings, beverages, pizza styles and sizes."""

from rsvpizza.models import Beverage, PizzaSize, PizzaStyle, Topping

DIETARY_OPTIONS: tuple[str, ...] = ("Vegetarian", "Vegan", "Gluten-Free", "Dairy-Free")

TOPPINGS: list[Topping] = [
    Topping("pepperoni", "Pepperoni", "meat"),
    Topping("sausage", "Sausage", "meat"),
    Topping("bacon", "Bacon", "meat"),
    Topping("ham", "Ham", "meat"),
    Topping("chicken", "Chicken", "meat"),
    Topping("mushrooms", "Mushrooms", "vegetable"),
    Topping("onions", "Onions", "vegetable"),
    Topping("bell-peppers", "Bell Peppers", "vegetable"),
    Topping("olives", "Olives", "vegetable"),
    Topping("spinach", "Spinach", "vegetable"),
    Topping("jalapenos", "Jalapeños", "vegetable"),
    Topping("tomatoes", "Tomatoes", "vegetable"),
    Topping("pineapple", "Pineapple", "fruit"),
    Topping("extra-cheese", "Extra Cheese", "cheese"),
    Topping("feta", "Feta", "cheese"),
    Topping("anchovies", "Anchovies", "meat"),
]

BEVERAGES: list[Beverage] = [
    Beverage("water", "Water", "water"),
    Beverage("beer", "Beer", "alcohol"),
    Beverage("soda", "Soda", "soda"),
    Beverage("wine", "Wine", "alcohol"),
    Beverage("cocktail", "Cocktail", "alcohol"),
    Beverage("juice", "Juice", "juice"),
]

PIZZA_STYLES: list[PizzaStyle] = [
    PizzaStyle(
        "neapolitan",
        "Neapolitan",
        "Thin crust, wood-fired, authentic Italian style",
        max_guests_per_pizza=2,
        servings_per_pizza=1.5,
        personal_size_only=True,
    ),
    PizzaStyle("new-york", "New York", "Large, thin crust, foldable slices"),
    PizzaStyle("detroit", "Detroit", "Square, thick crust, crispy edges"),
]

# Ascending by servings. 18" feeds 4; other sizes scale with surface area.
PIZZA_SIZES: list[PizzaSize] = [
    PizzaSize(10, "Personal", 1.2),
    PizzaSize(12, "Small", 1.8),
    PizzaSize(14, "Medium", 2.4),
    PizzaSize(16, "Large", 3.2),
    PizzaSize(18, "Extra Large", 4.0),
    PizzaSize(20, "Family", 4.9),
]

# Topping ids each dietary restriction rules out. Gluten-free is a crust choice.
_MEATS = ("pepperoni", "sausage", "bacon", "ham", "chicken", "anchovies")
_DAIRY = ("extra-cheese", "feta")
DIETARY_EXCLUSIONS: dict[str, frozenset[str]] = {
    "Vegetarian": frozenset(_MEATS),
    "Vegan": frozenset(_MEATS + _DAIRY),
    "Dairy-Free": frozenset(_DAIRY),
    "Gluten-Free": frozenset(),
}

TOPPINGS_BY_ID: dict[str, Topping] = {t.id: t for t in TOPPINGS}
BEVERAGES_BY_ID: dict[str, Beverage] = {b.id: b for b in BEVERAGES}
STYLES_BY_ID: dict[str, PizzaStyle] = {s.id: s for s in PIZZA_STYLES}


def find_topping(topping_id: str) -> Topping | None:
    """Look up a topping by id; unknown ids return None."""
    return TOPPINGS_BY_ID.get(topping_id)


def find_beverage(beverage_id: str) -> Beverage | None:
    """Look up a beverage by id; unknown ids return None."""
    return BEVERAGES_BY_ID.get(beverage_id)


def find_style(style_id: str) -> PizzaStyle:
    """
    Look up a pizza style by id.

    Unknown ids get a generic style that shares a pizza among up to five
    guests and sizes pizzas from the size table.
    """
    style = STYLES_BY_ID.get(style_id)
    if style is None:
        style = PizzaStyle(style_id, style_id.replace("-", " ").title())
    return style


def known_restrictions(restrictions: tuple[str, ...]) -> list[str]:
    """Return the known dietary restrictions, dropping "None" and unknown values."""
    return [r for r in restrictions if r in DIETARY_EXCLUSIONS]
