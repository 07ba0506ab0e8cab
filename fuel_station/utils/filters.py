"""Number formatting helpers for the console report."""


def fmt_litres(value: float) -> str:
    """Litre quantities are always shown with two decimals, e.g. 40 -> '40.00'."""
    return f"{float(value):.2f}"


def fmt_cost(value: float, currency: str = "$") -> str:
    """Costs carry a currency symbol: 62 -> '$62.00'."""
    return f"{currency}{float(value):.2f}"
