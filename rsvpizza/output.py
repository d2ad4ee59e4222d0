"""Output formatting for rsvpizza."""

from rsvpizza.models import PizzaHalf, PizzaRecommendation, WaveRecommendation


def _topping_names(toppings) -> str:
    return ", ".join(t.name for t in toppings) or "Plain cheese"


def describe_pizza(pizza: PizzaRecommendation) -> str:
    """Short human-readable description of a pizza's toppings."""
    if pizza.label:
        return pizza.label
    if pizza.is_half_and_half and pizza.left_half and pizza.right_half:
        return (
            f"Half {_topping_names(pizza.left_half.toppings)} / "
            f"Half {_topping_names(pizza.right_half.toppings)}"
        )
    return _topping_names(pizza.toppings)


def _order_line(pizza: PizzaRecommendation, restrictions: str = "") -> str:
    return (
        f'{pizza.quantity}x {describe_pizza(pizza)} ({pizza.size.diameter}" {pizza.style.name})'
        f"{restrictions} - serves {pizza.guest_count}"
    )


def _half_guests(half: PizzaHalf) -> str:
    return ", ".join(g.name for g in half.guests)


def format_results(
    waves: list[WaveRecommendation],
    responded_guests: int,
    expected_guests: int,
) -> str:
    """Format wave recommendations for display."""
    lines: list[str] = []

    if not waves or all(not w.pizzas for w in waves):
        lines.append("No recommendations could be made.")
        lines.append("Add guests or an expected guest count and run again.")
        return "\n".join(lines)

    lines.append("=== Pizza Order ===")
    lines.append(f"Expected guests: {expected_guests}")
    lines.append(f"Responded: {responded_guests}")
    if expected_guests > responded_guests:
        lines.append(f"Pending: {expected_guests - responded_guests}")
    lines.append(f"Waves: {len(waves)}")
    lines.append("")

    for rec in waves:
        wave = rec.wave
        when = f" at {wave.arrival_time:%H:%M}" if wave.arrival_time else ""
        lines.append(f"--- {wave.label}{when} ({wave.guest_allocation} guests) ---")
        for pizza in rec.pizzas:
            restrictions = ""
            if pizza.dietary_restrictions:
                restrictions = f" [{', '.join(pizza.dietary_restrictions)}]"
            lines.append(f"  {_order_line(pizza, restrictions)}")
            if pizza.is_half_and_half and pizza.left_half and pizza.right_half:
                lines.append(f"      left half: {_half_guests(pizza.left_half)}")
                lines.append(f"      right half: {_half_guests(pizza.right_half)}")
            elif pizza.guests:
                lines.append(f"      for: {', '.join(g.name for g in pizza.guests)}")
        for bev in rec.beverages:
            lines.append(f"  {bev.quantity}x {bev.label or bev.beverage.name}")
        lines.append(f"  Total: {rec.total_pizzas} pizzas, {rec.total_beverages} beverages")
        lines.append("")

    return "\n".join(lines).rstrip()


def format_order_text(
    pizzas: list[PizzaRecommendation],
    responded_guests: int,
    expected_guests: int,
    title: str | None = None,
) -> str:
    """
    Format a plain-text order to paste into a pizzeria's order form.

    title names the delivery (e.g. a wave label and time) when a party
    places more than one order.
    """
    if not pizzas:
        return ""

    total_pizzas = sum(p.quantity for p in pizzas)
    order_lines = [_order_line(p) for p in pizzas]
    header = [
        f"PIZZA PARTY ORDER - {title}" if title else "PIZZA PARTY ORDER",
        "",
        f"Expected guests: {expected_guests}",
        f"Responded: {responded_guests}",
        f"Total pizzas: {total_pizzas}",
        "",
    ]
    return "\n".join(header + order_lines)


def format_pizzas_csv(waves: list[WaveRecommendation]) -> str:
    """Format pizzas from every wave as CSV for export."""
    lines: list[str] = ["wave,quantity,pizza,size,style,guest_count,dietary_restrictions"]

    for rec in waves:
        for pizza in rec.pizzas:
            description = describe_pizza(pizza).replace('"', '""')
            restrictions = ";".join(pizza.dietary_restrictions)
            lines.append(
                f'{rec.wave.id},{pizza.quantity},"{description}",{pizza.size.diameter},'
                f"{pizza.style.id},{pizza.guest_count},{restrictions}"
            )

    return "\n".join(lines)
