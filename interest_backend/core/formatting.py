"""Rupiah display helpers."""

from decimal import ROUND_HALF_UP, Decimal


def format_rupiah(amount: float) -> str:
    """Render ``amount`` as whole rupiah, e.g. ``Rp 1.104.941``."""
    rounded = int(Decimal(repr(float(amount))).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    digits = f"{abs(rounded):,}".replace(",", ".")
    sign = "-" if rounded < 0 else ""
    return f"{sign}Rp {digits}"
