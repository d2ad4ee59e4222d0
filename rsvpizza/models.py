"""Data models for rsvpizza."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal

DietaryRestriction = Literal["Vegetarian", "Vegan", "Gluten-Free", "Dairy-Free", "None"]
ToppingCategory = Literal["meat", "vegetable", "cheese", "fruit"]
BeverageType = Literal["water", "soda", "juice", "alcohol", "other"]


@dataclass(frozen=True)
class Guest:
    """A guest who submitted an RSVP with food and drink preferences."""

    name: str
    id: str | None = None
    dietary_restrictions: tuple[str, ...] = ()
    liked_toppings: tuple[str, ...] = ()
    disliked_toppings: tuple[str, ...] = ()
    liked_beverages: tuple[str, ...] = ()
    disliked_beverages: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable (or None) for the preference fields
        for name in (
            "dietary_restrictions",
            "liked_toppings",
            "disliked_toppings",
            "liked_beverages",
            "disliked_beverages",
        ):
            value = getattr(self, name)
            object.__setattr__(self, name, tuple(value) if value else ())


@dataclass(frozen=True)
class Topping:
    """A pizza topping from the catalog."""

    id: str
    name: str
    category: ToppingCategory


@dataclass(frozen=True)
class Beverage:
    """A beverage category the host can offer."""

    id: str
    name: str
    type: BeverageType


@dataclass(frozen=True)
class PizzaStyle:
    """A pizza style and the serving rules that come with it."""

    id: str
    name: str
    description: str = ""
    max_guests_per_pizza: int = 5
    servings_per_pizza: float | None = None  # None = use the size table
    personal_size_only: bool = False


@dataclass(frozen=True)
class PizzaSize:
    """A physical pizza size and how many guests it feeds."""

    diameter: int
    name: str
    servings: float


@dataclass(frozen=True)
class PizzaHalf:
    """One half of a half-and-half pizza."""

    toppings: tuple[Topping, ...]
    guests: tuple[Guest, ...]
    dietary_restrictions: tuple[str, ...] = ()


@dataclass(frozen=True)
class PizzaRecommendation:
    """A recommended pizza (or a line of identical pizzas)."""

    id: str
    toppings: tuple[Topping, ...]
    guest_count: int
    guests: tuple[Guest, ...]
    dietary_restrictions: tuple[str, ...]
    size: PizzaSize
    style: PizzaStyle
    quantity: int = 1
    is_half_and_half: bool = False
    left_half: PizzaHalf | None = None
    right_half: PizzaHalf | None = None
    is_for_non_respondents: bool = False
    label: str | None = None  # e.g. "Cheese", "Vegan"


@dataclass(frozen=True)
class BeverageRecommendation:
    """A recommended quantity of one beverage."""

    id: str
    beverage: Beverage
    quantity: int
    guest_count: int
    is_for_non_respondents: bool = False
    label: str | None = None


@dataclass(frozen=True)
class Wave:
    """A scheduled delivery batch during the party."""

    id: str
    arrival_time: datetime | None  # None when the party has no schedule
    guest_allocation: int
    weight: float
    label: str


@dataclass(frozen=True)
class WaveRecommendation:
    """The pizzas and beverages to order for one wave."""

    wave: Wave
    pizzas: list[PizzaRecommendation]
    beverages: list[BeverageRecommendation]
    total_pizzas: int
    total_beverages: int


@dataclass(frozen=True)
class PartySettings:
    """Host-controlled party settings that feed the engine."""

    name: str = "Pizza Party"
    style_id: str = "new-york"
    start: datetime | None = None
    duration_hours: float | None = None
    expected_guests: int | None = None
    allowed_toppings: tuple[str, ...] | None = None  # None = every topping allowed
    available_beverages: tuple[str, ...] = field(default_factory=tuple)
