"""Beverage recommendations for rsvpizza."""

import logging
import math
from collections.abc import Sequence
from dataclasses import replace

from rsvpizza.catalog import find_beverage
from rsvpizza.models import Beverage, BeverageRecommendation, Guest

logger = logging.getLogger(__name__)

BEVERAGES_PER_PERSON = 2
MIN_LIKED_QUANTITY = 4  # a six-pack minus a buffer
WATER_GUESTS_PER_UNIT = 2
WATER_DEFAULT_WEIGHT = 1.5


def _available(beverage_ids: Sequence[str]) -> list[Beverage]:
    """Known beverages in host order; unknown ids and repeats are dropped."""
    return list(filter(None, map(find_beverage, dict.fromkeys(beverage_ids))))


def default_beverages(
    non_respondents: int,
    available_beverage_ids: Sequence[str],
) -> list[BeverageRecommendation]:
    """Spread two drinks per missing guest over the available beverages, water weighted 1.5x."""
    beverages = _available(available_beverage_ids)
    if non_respondents <= 0 or not beverages:
        return []

    needed = non_respondents * BEVERAGES_PER_PERSON
    weights = {b.id: WATER_DEFAULT_WEIGHT if b.type == "water" else 1.0 for b in beverages}
    total_weight = sum(weights.values())

    recommendations: list[BeverageRecommendation] = []
    for beverage in beverages:
        quantity = math.ceil(weights[beverage.id] / total_weight * needed)
        if quantity > 0:
            recommendations.append(
                BeverageRecommendation(
                    id=f"bev-default-{beverage.id}",
                    beverage=beverage,
                    quantity=quantity,
                    guest_count=non_respondents,
                    is_for_non_respondents=True,
                    label=beverage.name,
                )
            )
    return recommendations


def recommend_beverages(
    guests: list[Guest],
    available_beverage_ids: Sequence[str],
    expected_guest_count: int | None = None,
) -> list[BeverageRecommendation]:
    """
    Recommend beverage quantities from what guests asked for.

    Water is always stocked at one unit per two guests, plus two per guest
    who asked for it. Any other beverage somebody likes gets two units per
    fan, at least four; beverages nobody likes are skipped. Drinks for
    non-respondents are merged in, and the result is sorted by quantity.
    """
    beverages = _available(available_beverage_ids)
    if not beverages:
        return []

    total_guests = expected_guest_count or len(guests)

    likes = {b.id: 0 for b in beverages}
    for guest in guests:
        for beverage_id in dict.fromkeys(guest.liked_beverages):
            if beverage_id in likes:
                likes[beverage_id] += 1

    recommendations: list[BeverageRecommendation] = []
    for beverage in beverages:
        if beverage.type == "water":
            quantity = math.ceil(total_guests / WATER_GUESTS_PER_UNIT)
            quantity += likes[beverage.id] * BEVERAGES_PER_PERSON
        elif likes[beverage.id] > 0:
            quantity = max(MIN_LIKED_QUANTITY, likes[beverage.id] * BEVERAGES_PER_PERSON)
        else:
            continue

        if quantity > 0:
            recommendations.append(
                BeverageRecommendation(
                    id=f"bev-{beverage.id}",
                    beverage=beverage,
                    quantity=quantity,
                    guest_count=likes[beverage.id],
                    label=beverage.name,
                )
            )

    if expected_guest_count is not None and expected_guest_count > len(guests):
        by_id = {rec.beverage.id: idx for idx, rec in enumerate(recommendations)}
        for extra in default_beverages(expected_guest_count - len(guests), available_beverage_ids):
            if extra.beverage.id in by_id:
                idx = by_id[extra.beverage.id]
                existing = recommendations[idx]
                recommendations[idx] = replace(
                    existing,
                    quantity=existing.quantity + extra.quantity,
                    guest_count=existing.guest_count + extra.guest_count,
                )
            else:
                by_id[extra.beverage.id] = len(recommendations)
                recommendations.append(extra)

    logger.debug("%d beverage lines for %d guests", len(recommendations), total_guests)
    return sorted(recommendations, key=lambda rec: -rec.quantity)
