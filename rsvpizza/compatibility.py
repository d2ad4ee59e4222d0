"""Guest compatibility scoring and grouping for rsvpizza."""

import logging

import numpy as np

from rsvpizza.catalog import TOPPINGS_BY_ID, known_restrictions
from rsvpizza.models import Guest, PizzaStyle

logger = logging.getLogger(__name__)


def _known_toppings(topping_ids: tuple[str, ...]) -> set[str]:
    return {t for t in topping_ids if t in TOPPINGS_BY_ID}


def compatibility_score(a: Guest, b: Guest) -> int:
    """
    Score how well two guests would share a pizza.

    Each shared liked topping is worth +2; each topping one guest likes and
    the other dislikes costs -1.
    """
    a_likes, a_dislikes = _known_toppings(a.liked_toppings), _known_toppings(a.disliked_toppings)
    b_likes, b_dislikes = _known_toppings(b.liked_toppings), _known_toppings(b.disliked_toppings)

    shared = len(a_likes & b_likes)
    conflicts = len(a_likes & b_dislikes) + len(b_likes & a_dislikes)
    return 2 * shared - conflicts


def compatibility_matrix(guests: list[Guest]) -> np.ndarray:
    """
    Build the symmetric pairwise compatibility matrix for a list of guests.

    Uses like/dislike incidence matrices so the whole thing is two matrix
    products; cost is still O(n^2) in the number of guests.
    """
    n = len(guests)
    vocabulary: dict[str, int] = {}
    for guest in guests:
        for topping_id in guest.liked_toppings + guest.disliked_toppings:
            if topping_id in TOPPINGS_BY_ID and topping_id not in vocabulary:
                vocabulary[topping_id] = len(vocabulary)

    likes = np.zeros((n, len(vocabulary)), dtype=np.int64)
    dislikes = np.zeros((n, len(vocabulary)), dtype=np.int64)
    for g_idx, guest in enumerate(guests):
        for topping_id in _known_toppings(guest.liked_toppings):
            likes[g_idx, vocabulary[topping_id]] = 1
        for topping_id in _known_toppings(guest.disliked_toppings):
            dislikes[g_idx, vocabulary[topping_id]] = 1

    shared = likes @ likes.T
    # conflicts[i, j] = |likes_i & dislikes_j| + |likes_j & dislikes_i|
    one_way = likes @ dislikes.T
    scores = 2 * shared - (one_way + one_way.T)
    np.fill_diagonal(scores, 0)
    return scores


def dietary_key(guest: Guest) -> str:
    """Canonical bucket key for a guest's dietary restrictions."""
    return ",".join(sorted(set(known_restrictions(guest.dietary_restrictions)))) or "none"


def _split_by_compatibility(guests: list[Guest], max_per_pizza: int) -> list[list[Guest]]:
    """Greedily cut a dietary bucket into groups of at most max_per_pizza."""
    scores = compatibility_matrix(guests)
    unassigned = list(range(len(guests)))
    groups: list[list[Guest]] = []

    while unassigned:
        members = [unassigned.pop(0)]
        while len(members) < max_per_pizza and unassigned:
            # Summed affinity of each candidate to everyone already in the group;
            # argmax picks the earliest candidate on ties
            totals = scores[np.ix_(members, unassigned)].sum(axis=0)
            members.append(unassigned.pop(int(np.argmax(totals))))
        groups.append([guests[i] for i in members])

    return groups


def group_guests(guests: list[Guest], style: PizzaStyle) -> list[list[Guest]]:
    """
    Partition guests into pizza-sized groups.

    Guests with different dietary restriction combinations never share a
    pizza. Buckets that fit on one pizza are kept as-is; larger buckets are
    split greedily by pairwise compatibility.
    """
    if not guests:
        return []

    max_per_pizza = max(1, style.max_guests_per_pizza)

    buckets: dict[str, list[Guest]] = {}
    for guest in guests:
        buckets.setdefault(dietary_key(guest), []).append(guest)

    groups: list[list[Guest]] = []
    for key, bucket in buckets.items():
        if len(bucket) <= max_per_pizza:
            groups.append(bucket)
        else:
            split = _split_by_compatibility(bucket, max_per_pizza)
            logger.debug(
                "Split %d guests with restrictions %r into %d groups", len(bucket), key, len(split)
            )
            groups.extend(split)

    return groups
