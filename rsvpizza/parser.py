"""CSV and YAML parsing for rsvpizza."""

import csv
import re
from datetime import datetime
from pathlib import Path

import yaml

from rsvpizza.catalog import BEVERAGES, DIETARY_OPTIONS, PIZZA_STYLES, TOPPINGS
from rsvpizza.models import Guest, PartySettings

# RSVP export column -> Guest field
GUEST_COLUMNS: dict[str, str] = {
    "Dietary Restrictions": "dietary_restrictions",
    "Liked Toppings": "liked_toppings",
    "Disliked Toppings": "disliked_toppings",
    "Liked Beverages": "liked_beverages",
    "Disliked Beverages": "disliked_beverages",
}

_LIST_SEPARATOR = re.compile(r"[;,]")


def _split_list(cell: str | None) -> tuple[str, ...]:
    """Split a "a; b, c" cell into its non-empty, stripped items."""
    if not cell:
        return ()
    return tuple(item.strip() for item in _LIST_SEPARATOR.split(cell) if item.strip())


def parse_guests_csv(csv_path: Path) -> list[Guest]:
    """
    Parse the RSVP export CSV file.

    Expects a "Name" column plus any of the preference columns in
    GUEST_COLUMNS. Rows without a name are skipped. Ids are not validated
    here; the engine ignores ids it does not know.
    """
    guests: list[Guest] = []

    with csv_path.open(newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        fieldnames = reader.fieldnames or []
        if "Name" not in fieldnames:
            raise ValueError(f"missing 'Name' column (found: {', '.join(fieldnames)})")

        for row in reader:
            name = (row.get("Name") or "").strip()
            if not name:
                continue

            preferences = {
                field: _split_list(row.get(column)) for column, field in GUEST_COLUMNS.items()
            }
            guest_id = (row.get("Id") or "").strip() or None
            guests.append(Guest(name=name, id=guest_id, **preferences))

    return guests


def _parse_start(value) -> datetime | None:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value))


def _optional_ids(value) -> tuple[str, ...] | None:
    """Id list from a YAML list or "a, b" string; empty means not set."""
    if value is None:
        return None
    if isinstance(value, str):
        ids = _split_list(value)
    else:
        ids = tuple(str(v) for v in value)
    return ids or None


def parse_party_yaml(yaml_path: Path) -> PartySettings:
    """Parse the party settings YAML file."""
    with yaml_path.open(encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not data or "party" not in data:
        return PartySettings()

    entry = data["party"] or {}
    expected = entry.get("expected_guests")
    duration = entry.get("duration_hours")

    return PartySettings(
        name=entry.get("name", "Pizza Party"),
        style_id=str(entry.get("style", "new-york")).lower(),
        start=_parse_start(entry.get("start")),
        duration_hours=float(duration) if duration is not None else None,
        expected_guests=int(expected) if expected is not None else None,
        allowed_toppings=_optional_ids(entry.get("allowed_toppings")),
        available_beverages=_optional_ids(entry.get("available_beverages")) or (),
    )


def create_party_template(output_path: Path, guests: list[Guest]):
    """Create a party settings template YAML file."""
    template = {
        "party": {
            "name": "Pizza Party",
            "style": "new-york",
            "start": "2026-01-01T18:00:00",
            "duration_hours": 3,
            "expected_guests": max(len(guests), 1),
            "available_beverages": ["water", "soda"],
        }
    }

    # Add a comment header
    header = f"""\
# Party settings file for rsvpizza
# Edit these settings, then run again with --party.
#
# Pizza styles: {", ".join(s.id for s in PIZZA_STYLES)}
# Toppings: {", ".join(t.id for t in TOPPINGS)}
# Beverages: {", ".join(b.id for b in BEVERAGES)}
# Dietary restrictions: {", ".join(DIETARY_OPTIONS)}
#
# Optional keys:
#   allowed_toppings: [pepperoni, mushrooms]   # limit toppings to this list
#   duration_hours: leave out for a single delivery
#
# Parties of 1.5 hours or more get several delivery waves.

"""

    with output_path.open("w", encoding="utf-8") as f:
        f.write(header)
        yaml.dump(template, f, default_flow_style=False, sort_keys=False)
