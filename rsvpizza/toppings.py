"""Topping selection and half-and-half evaluation for rsvpizza."""

import logging
import math
from collections.abc import Collection

from rsvpizza.catalog import DIETARY_EXCLUSIONS, TOPPINGS_BY_ID, known_restrictions
from rsvpizza.compatibility import compatibility_matrix
from rsvpizza.models import Guest, PizzaHalf, Topping

logger = logging.getLogger(__name__)

MAX_TOPPINGS_PER_PIZZA = 3

# A split has to beat a single pizza by this factor to be worth it
SPLIT_SATISFACTION_FACTOR = 1.2
LIKED_TOPPING_SCORE = 1
DISLIKED_TOPPING_SCORE = -2


def combined_restrictions(guests: list[Guest]) -> tuple[str, ...]:
    """Union of the guests' known dietary restrictions, in first-seen order."""
    restrictions: dict[str, None] = {}
    for guest in guests:
        for restriction in known_restrictions(guest.dietary_restrictions):
            restrictions[restriction] = None
    return tuple(restrictions)


def excluded_toppings(guests: list[Guest]) -> set[str]:
    """Topping ids ruled out by any guest's dietary restrictions."""
    excluded: set[str] = set()
    for restriction in combined_restrictions(guests):
        excluded |= DIETARY_EXCLUSIONS[restriction]
    return excluded


def select_toppings(
    guests: list[Guest],
    allowed_toppings: Collection[str] | None = None,
) -> list[Topping]:
    """
    Choose up to three toppings for a group of guests.

    Toppings are ranked by how many guests like them. A topping is dropped if
    anyone in the group dislikes it, if the group's dietary restrictions
    exclude it, or if the host has not allowed it; an empty or missing
    allow-list allows every topping. Ties keep the order in which the
    toppings were first liked. No filler topping is added when fewer than
    three survive.
    """
    counts: dict[str, int] = {}
    for guest in guests:
        for topping_id in dict.fromkeys(guest.liked_toppings):
            counts[topping_id] = counts.get(topping_id, 0) + 1

    for guest in guests:
        for topping_id in guest.disliked_toppings:
            counts.pop(topping_id, None)

    for topping_id in excluded_toppings(guests):
        counts.pop(topping_id, None)

    candidates = [
        (topping_id, count)
        for topping_id, count in counts.items()
        if topping_id in TOPPINGS_BY_ID
        and (not allowed_toppings or topping_id in allowed_toppings)
    ]
    candidates.sort(key=lambda item: -item[1])

    return [TOPPINGS_BY_ID[topping_id] for topping_id, _ in candidates[:MAX_TOPPINGS_PER_PIZZA]]


def conflict_score(guests: list[Guest]) -> int:
    """
    Count like/dislike clashes inside a group.

    For every topping, each (guest who likes it, other guest who dislikes it)
    pair counts once. This is the pair count on purpose, not
    min(likers, dislikers): two fans and one hater must score 2 so the
    group still qualifies for a split.
    """
    score = 0
    toppings = {
        t for guest in guests for t in guest.liked_toppings + guest.disliked_toppings
    } & set(TOPPINGS_BY_ID)
    for topping_id in toppings:
        likers = [g_idx for g_idx, g in enumerate(guests) if topping_id in g.liked_toppings]
        dislikers = [g_idx for g_idx, g in enumerate(guests) if topping_id in g.disliked_toppings]
        score += sum(1 for i in likers for j in dislikers if i != j)
    return score


def satisfaction(guests: list[Guest], toppings: list[Topping]) -> int:
    """Satisfaction of guests with a topping set: +1 per liked, -2 per disliked topping."""
    topping_ids = {t.id for t in toppings}
    total = 0
    for guest in guests:
        total += LIKED_TOPPING_SCORE * len(topping_ids & set(guest.liked_toppings))
        total += DISLIKED_TOPPING_SCORE * len(topping_ids & set(guest.disliked_toppings))
    return total


def bisect_group(guests: list[Guest]) -> tuple[list[Guest], list[Guest]]:
    """
    Split a group in two around its least compatible pair.

    The two guests who get along worst seed the halves. Everyone else joins
    the half whose current members they are, on average, more compatible
    with; ties go to the left half.
    """
    scores = compatibility_matrix(guests)
    n = len(guests)

    seed_pair = (0, 1)
    worst = scores[0, 1]
    for i in range(n):
        for j in range(i + 1, n):
            if scores[i, j] < worst:
                worst = scores[i, j]
                seed_pair = (i, j)

    left, right = [seed_pair[0]], [seed_pair[1]]
    for k in range(n):
        if k in seed_pair:
            continue
        left_avg = scores[k, left].mean()
        right_avg = scores[k, right].mean()
        if left_avg >= right_avg:
            left.append(k)
        else:
            right.append(k)

    return [guests[i] for i in sorted(left)], [guests[i] for i in sorted(right)]


def evaluate_half_and_half(
    guests: list[Guest],
    allowed_toppings: Collection[str] | None = None,
) -> tuple[PizzaHalf, PizzaHalf] | None:
    """
    Decide whether a group is better served by a half-and-half pizza.

    Returns the two halves when splitting wins, otherwise None. Groups of
    fewer than two guests, and groups without enough topping conflicts, are
    never split.
    """
    if len(guests) < 2:
        return None

    conflicts = conflict_score(guests)
    if conflicts < math.ceil(len(guests) / 2):
        return None

    single = select_toppings(guests, allowed_toppings)
    single_satisfaction = satisfaction(guests, single)

    left_guests, right_guests = bisect_group(guests)
    left_toppings = select_toppings(left_guests, allowed_toppings)
    right_toppings = select_toppings(right_guests, allowed_toppings)
    split_satisfaction = satisfaction(left_guests, left_toppings) + satisfaction(
        right_guests, right_toppings
    )

    use_split = (
        split_satisfaction > SPLIT_SATISFACTION_FACTOR * single_satisfaction
        or single_satisfaction < 0
    )
    logger.debug(
        "Group of %d: conflicts=%d single=%d split=%d -> %s",
        len(guests),
        conflicts,
        single_satisfaction,
        split_satisfaction,
        "half-and-half" if use_split else "single",
    )
    if not use_split:
        return None

    return (
        PizzaHalf(
            toppings=tuple(left_toppings),
            guests=tuple(left_guests),
            dietary_restrictions=combined_restrictions(left_guests),
        ),
        PizzaHalf(
            toppings=tuple(right_toppings),
            guests=tuple(right_guests),
            dietary_restrictions=combined_restrictions(right_guests),
        ),
    )
