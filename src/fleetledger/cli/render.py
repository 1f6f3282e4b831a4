"""Plain-text rendering of invoices and amounts."""

from decimal import Decimal

from fleetledger.domain.entities import Invoice

STATEMENT_WIDTH = 93


def format_amount(amount: Decimal) -> str:
    return f"${amount:,.2f}"


def render_statement(invoice: Invoice) -> str:
    """Lay out an invoice as a printable statement."""
    lines = [
        invoice.client.upper().center(STATEMENT_WIDTH).rstrip(),
        invoice.month_label.center(STATEMENT_WIDTH).rstrip(),
        "",
        f"{'Date':<10}  {'Vehicle':<12}  {'Order Type':<14}  {'Location':<14}  "
        f"{'Price':>11}  {'Payment':<9}  {'Balance':>11}",
        "-" * STATEMENT_WIDTH,
    ]
    for item in invoice.line_items:
        lines.append(
            f"{item.date.isoformat():<10}  {item.vehicle[:12]:<12}  {item.order_type[:14]:<14}  "
            f"{item.location[:14]:<14}  {format_amount(item.price):>11}  "
            f"{item.payment_method.value:<9}  {format_amount(item.balance):>11}"
        )
    lines.extend(
        [
            "-" * STATEMENT_WIDTH,
            f"{'Total Unpaid Amount:':>80}  {format_amount(invoice.total_unpaid):>11}",
            "",
            "Amount Paid (Total/Partial/None): _________________________________",
            "Balance Carried Forward to Next Month: _________________________________",
        ]
    )
    return "\n".join(lines) + "\n"
