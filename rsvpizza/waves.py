"""Delivery wave scheduling for multi-hour parties."""

import logging
import math
from collections.abc import Collection
from dataclasses import replace
from datetime import datetime, timedelta

from rsvpizza.allocation import round_half_up
from rsvpizza.beverages import recommend_beverages
from rsvpizza.catalog import find_style
from rsvpizza.models import Guest, PartySettings, Wave, WaveRecommendation
from rsvpizza.recommender import recommend_pizzas

logger = logging.getLogger(__name__)

FIRST_WAVE_OFFSET = timedelta(minutes=-5)  # arrive just before the party starts
FIRST_WAVE_WEIGHT = 1.25  # 25% more pizza in the first wave
MIN_TIME_BEFORE_END = timedelta(minutes=45)  # no pizza in the last 45 minutes
WAVE_SPACING_MIN_MINUTES = 45
WAVE_SPACING_MAX_MINUTES = 60
SHORT_PARTY_THRESHOLD_HOURS = 1.5


def calculate_waves(start: datetime, duration_hours: float, total_guests: int) -> list[Wave]:
    """
    Work out when pizza should arrive and how many guests each wave feeds.

    Parties shorter than 1.5 hours get a single wave five minutes before the
    start. Longer parties get waves spaced 45-60 minutes apart between five
    minutes before the start and 45 minutes before the end. The first wave
    is weighted 1.25x. Rounding leftovers are settled on the last waves, so
    the allocations always add up to total_guests and never go negative.
    A negative total is treated as zero.
    """
    total_guests = max(0, total_guests)
    first_wave_time = start + FIRST_WAVE_OFFSET

    if duration_hours < SHORT_PARTY_THRESHOLD_HOURS:
        return [
            Wave(
                id="wave-1",
                arrival_time=first_wave_time,
                guest_allocation=total_guests,
                weight=1.0,
                label="Single Wave",
            )
        ]

    party_end = start + timedelta(hours=duration_hours)
    last_possible_wave_time = party_end - MIN_TIME_BEFORE_END
    window_minutes = (last_possible_wave_time - first_wave_time).total_seconds() / 60

    optimal_spacing = (WAVE_SPACING_MIN_MINUTES + WAVE_SPACING_MAX_MINUTES) / 2
    max_waves = math.floor(window_minutes / WAVE_SPACING_MIN_MINUTES) + 1
    optimal_waves = round_half_up(window_minutes / optimal_spacing) + 1
    wave_count = max(1, min(max_waves, max(2, optimal_waves)))

    spacing_minutes = window_minutes / (wave_count - 1) if wave_count > 1 else 0.0

    weights = [FIRST_WAVE_WEIGHT if i == 0 else 1.0 for i in range(wave_count)]
    total_weight = sum(weights)

    waves: list[Wave] = []
    for i, weight in enumerate(weights):
        waves.append(
            Wave(
                id=f"wave-{i + 1}",
                arrival_time=first_wave_time + timedelta(minutes=i * spacing_minutes),
                guest_allocation=round_half_up(weight / total_weight * total_guests),
                weight=weight,
                label="Wave 1 (Party Start)" if i == 0 else f"Wave {i + 1}",
            )
        )

    remainder = total_guests - sum(w.guest_allocation for w in waves)
    if remainder >= 0:
        waves[-1] = replace(waves[-1], guest_allocation=waves[-1].guest_allocation + remainder)
    else:
        # Rounding overshot; take the excess back from the latest waves first
        for i in reversed(range(wave_count)):
            take = min(-remainder, max(0, waves[i].guest_allocation))
            waves[i] = replace(waves[i], guest_allocation=waves[i].guest_allocation - take)
            remainder += take
            if remainder == 0:
                break

    logger.debug(
        "%.1fh party, %d guests -> %d waves %.1f min apart: %s",
        duration_hours,
        total_guests,
        wave_count,
        spacing_minutes,
        [w.guest_allocation for w in waves],
    )
    return waves


def _wave_recommendation(
    wave: Wave,
    guests: list[Guest],
    party: PartySettings,
    allowed_toppings: Collection[str] | None,
) -> WaveRecommendation:
    style = find_style(party.style_id)
    pizzas = recommend_pizzas(guests, style, wave.guest_allocation, allowed_toppings)
    beverages = recommend_beverages(guests, party.available_beverages, wave.guest_allocation)
    return WaveRecommendation(
        wave=wave,
        pizzas=pizzas,
        beverages=beverages,
        total_pizzas=sum(p.quantity for p in pizzas),
        total_beverages=sum(b.quantity for b in beverages),
    )


def recommend_waves(
    guests: list[Guest],
    party: PartySettings,
    expected_guests: int | None = None,
) -> list[WaveRecommendation]:
    """
    Recommend an order per delivery wave.

    expected_guests overrides the party's expected guest count. Parties
    without a start time or duration get a single "All Pizzas" wave.
    """
    total_guests = max(0, expected_guests or party.expected_guests or len(guests))
    allowed = party.allowed_toppings

    if party.start is None or not party.duration_hours:
        wave = Wave(
            id="wave-1",
            arrival_time=party.start,
            guest_allocation=total_guests,
            weight=1.0,
            label="All Pizzas",
        )
        return [_wave_recommendation(wave, guests, party, allowed)]

    waves = calculate_waves(party.start, party.duration_hours, total_guests)
    return [_wave_recommendation(wave, guests, party, allowed) for wave in waves]
