"""Plain-text rendering of a dashboard snapshot."""
from portfolio_dashboard.models import DashboardSnapshot, ExtendedHolding, SheetLayout


def format_money(value: float, decimals: int = 2) -> str:
    """Format as dollars with thousands separators ("-$1,234.50")."""
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.{decimals}f}"


def format_signed_money(value: float) -> str:
    return ("+" if value >= 0 else "") + format_money(value)


def format_signed_pct(value: float) -> str:
    return f"{'+' if value >= 0 else ''}{value:.2f}%"


def format_quantity(value: float) -> str:
    return f"{value:g}"


def _cards(snapshot: DashboardSnapshot) -> list[tuple[str, str, str]]:
    m = snapshot.metrics
    gain_card = ("Total Gain/Loss", format_money(m.total_gain_loss), format_signed_pct(m.overall_return_pct))
    positions_card = (
        "Active Positions",
        str(snapshot.position_count),
        f"Market Value: {format_money(m.total_market_value, 0)}",
    )

    if snapshot.layout is SheetLayout.EXTENDED and snapshot.info is not None:
        info = snapshot.info
        return [
            ("Current Portfolio", format_money(info.current_size), f"Started: {format_money(info.starting_size, 0)}"),
            gain_card,
            ("Monthly P/L", format_money(info.monthly_pl), format_signed_pct(info.monthly_pl_percent)),
            positions_card,
        ]

    return [
        ("Market Value", format_money(m.total_market_value), f"Invested: {format_money(m.total_invested)}"),
        gain_card,
        positions_card,
    ]


def _table(snapshot: DashboardSnapshot) -> list[str]:
    header = f"{'Symbol':<8}{'Quantity':>10}{'Price':>12}{'Market Value':>16}{'Weight':>9}{'Gain/Loss $':>15}{'Gain/Loss %':>13}"
    lines = [header, "-" * len(header)]

    if not snapshot.rows:
        lines.append("No active holdings.")
        return lines

    for row in snapshot.rows:
        h = row.holding
        if isinstance(h, ExtendedHolding):
            quantity, price = h.quantity, h.curr_price
            gain, gain_pct = h.gain_loss_dollar, h.gain_loss_percent
        else:
            quantity, price = h.shares, h.current_price
            gain, gain_pct = h.gain_loss, h.return_pct

        lines.append(
            f"{h.symbol:<8}"
            f"{format_quantity(quantity):>10}"
            f"{format_money(price):>12}"
            f"{format_money(h.market_value):>16}"
            f"{row.display_weight:>8.1f}%"
            f"{format_signed_money(gain):>15}"
            f"{format_signed_pct(gain_pct):>13}"
        )
    return lines


def render_report(snapshot: DashboardSnapshot, top_allocations: int = 5) -> str:
    """Render a snapshot as a plain-text dashboard."""
    lines = ["Investment Portfolio"]

    if snapshot.refreshed_at is not None:
        lines.append(f"Last updated: {snapshot.refreshed_at:%H:%M:%S}")
    else:
        lines.append("Last updated: never")

    if snapshot.info is not None and snapshot.info.current_month:
        lines.append(f"Current Period: {snapshot.info.current_month}")

    if snapshot.error is not None:
        lines.append("")
        lines.append(f"WARNING: Showing demo data. {snapshot.error.message}")
        for failure in snapshot.error.failures:
            lines.append(f"  {failure.url}: {failure.reason}")

    lines.append("")
    for title, value, subtitle in _cards(snapshot):
        lines.append(f"{title:<18}{value:>18}  {subtitle}")

    lines.append("")
    lines.append("Portfolio Allocation")
    if not snapshot.allocation:
        lines.append("  No data")
    for item in snapshot.allocation[:top_allocations]:
        lines.append(f"  {item.symbol:<8}{item.weight_pct:>6.1f}%")

    lines.append("")
    lines.append("Active Holdings")
    lines.extend(_table(snapshot))

    return "\n".join(lines)
