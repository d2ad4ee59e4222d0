"""Command-line interface for rsvpizza."""

import argparse
import csv
import logging
import sys
from dataclasses import replace
from datetime import datetime
from pathlib import Path

import yaml

from rsvpizza.catalog import find_style
from rsvpizza.models import PartySettings
from rsvpizza.output import format_order_text, format_pizzas_csv, format_results
from rsvpizza.parser import create_party_template, parse_guests_csv, parse_party_yaml
from rsvpizza.waves import recommend_waves


def main(argv: list[str] | None = None) -> int:
    """Main entry point for rsvpizza CLI."""
    parser = argparse.ArgumentParser(
        description="Recommend a pizza and beverage order from party RSVPs.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
  rsvpizza guests.csv --style new-york --expected 20
  rsvpizza guests.csv --party party.yaml
  rsvpizza guests.csv --party party.yaml --start 2026-06-01T18:00 --duration 3
""",
    )
    parser.add_argument(
        "guests_csv",
        type=Path,
        help="Path to the CSV file with guest RSVPs",
    )
    parser.add_argument(
        "--party",
        type=Path,
        help="Path to the party settings YAML file",
    )
    parser.add_argument(
        "--style",
        help="Pizza style: neapolitan, new-york or detroit (overrides the party file)",
    )
    parser.add_argument(
        "--expected",
        type=int,
        help="Expected guest count, including guests who have not responded",
    )
    parser.add_argument(
        "--start",
        type=datetime.fromisoformat,
        help="Party start time in ISO format (e.g., 2026-06-01T18:00)",
    )
    parser.add_argument(
        "--duration",
        type=float,
        help="Party duration in hours; 1.5 or more schedules several waves",
    )
    parser.add_argument(
        "--beverages",
        nargs="+",
        help="Beverage ids the host will offer (e.g., water soda beer)",
    )
    parser.add_argument(
        "--output-template",
        type=Path,
        help="Path for party template (default: party_template.yaml)",
    )
    parser.add_argument(
        "--csv",
        action="store_true",
        help="Print the pizza order as CSV instead of a summary",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log how guests were grouped and waves scheduled",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Validate guests CSV exists
    if not args.guests_csv.exists():
        print(f"Error: Guests file not found: {args.guests_csv}", file=sys.stderr)
        return 1

    # Parse guests
    try:
        guests = parse_guests_csv(args.guests_csv)
    except (OSError, csv.Error, ValueError) as e:
        print(f"Error parsing guests CSV: {e}", file=sys.stderr)
        return 1

    print(f"Loaded {len(guests)} guests")

    # Parse or create party settings
    party = PartySettings()
    if args.party:
        if not args.party.exists():
            print(f"Error: Party file not found: {args.party}", file=sys.stderr)
            return 1
        try:
            party = parse_party_yaml(args.party)
        except (OSError, yaml.YAMLError, ValueError, TypeError) as e:
            print(f"Error parsing party YAML: {e}", file=sys.stderr)
            return 1
    else:
        template_path = args.output_template or Path("party_template.yaml")
        create_party_template(template_path, guests)
        print(f"\nNo party file provided. Created template at: {template_path}")
        print("Edit this file to set the style, time and drinks, then run again.\n")

    # Command-line options win over the party file
    overrides = {}
    if args.style:
        overrides["style_id"] = args.style.lower()
    if args.expected is not None:
        overrides["expected_guests"] = args.expected
    if args.start is not None:
        overrides["start"] = args.start
    if args.duration is not None:
        overrides["duration_hours"] = args.duration
    if args.beverages:
        overrides["available_beverages"] = tuple(args.beverages)
    party = replace(party, **overrides)

    print(f"Style: {find_style(party.style_id).name}")

    waves = recommend_waves(guests, party)
    expected = party.expected_guests or len(guests)

    print()
    if args.csv:
        print(format_pizzas_csv(waves))
        return 0

    print(format_results(waves, len(guests), expected))
    if len(waves) == 1 and waves[0].pizzas:
        print()
        print(format_order_text(waves[0].pizzas, len(guests), expected))
    else:
        # One order per delivery wave
        for rec in waves:
            if not rec.pizzas:
                continue
            title = rec.wave.label
            if rec.wave.arrival_time:
                title += f" at {rec.wave.arrival_time:%H:%M}"
            print()
            print(format_order_text(rec.pizzas, len(guests), rec.wave.guest_allocation, title))

    return 0


if __name__ == "__main__":
    sys.exit(main())
