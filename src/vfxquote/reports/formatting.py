"""Plain-text formatting for reports and amounts."""

from decimal import ROUND_HALF_UP, Decimal

from .builder import LineKind, Report


def format_money(amount: float, symbol: str = "MMK") -> str:
    """Format an amount rounded to whole currency units, e.g. ``50,000 MMK``.

    Halves round away from zero, so 902.5 shows as ``903``.
    """
    whole = int(Decimal(amount).quantize(Decimal(1), rounding=ROUND_HALF_UP))
    return f"{whole:,} {symbol}"


def render_text(report: Report, width: int = 64) -> str:
    """Render a report as plain text suitable for writing to a file."""
    rule = "-" * width
    lines = [report.title, "=" * width]
    for section in report.sections:
        lines.append(section.title)
        if section.description:
            lines.append(f"  {section.description}")
        lines.append(rule)
        for item in section.items:
            if item.kind in (LineKind.SUBTOTAL, LineKind.TOTAL):
                lines.append(rule)
            label = f"{item.label} ({item.selection})" if item.selection else item.label
            amount = format_money(item.amount, report.currency)
            lines.append(f"{label:<{width - 22}}{amount:>22}")
        lines.append("")
    lines.append("=" * width)
    total = format_money(report.total, report.currency)
    lines.append(f"{'GRAND TOTAL':<{width - 22}}{total:>22}")
    for note in report.notes:
        lines.append(note)
    return "\n".join(lines) + "\n"
