"""Shipping fee calculation.

Fees are fixed-point Decimals in cents. A bundle's base fee is split evenly
across its members; cents that do not divide evenly go to the earliest
members, so the shares always add up to the base fee exactly.
"""

from decimal import ROUND_HALF_UP, Decimal

from shipping.catalog.port import BundleOrder, Order, SimpleOrder

CENT = Decimal("0.01")


def split_fee(base: Decimal, member_count: int) -> tuple[Decimal, ...]:
    """Split `base` into `member_count` shares that sum to `base`."""
    if member_count < 1:
        raise ValueError(f"Cannot split a fee across {member_count} orders")

    total_cents = int((base / CENT).to_integral_value(rounding=ROUND_HALF_UP))
    share, remainder = divmod(total_cents, member_count)
    return tuple(Decimal(share + (1 if index < remainder else 0)) * CENT for index in range(member_count))


def calculate_shipping_fees(order: Order, base: Decimal) -> tuple[Decimal, ...]:
    """Return the fee owed by each paying order, in the order's stored sequence.

    A simple order owes the whole base fee. A bundle owes one share per member.
    """
    if isinstance(order, SimpleOrder):
        return split_fee(base, 1)
    if isinstance(order, BundleOrder):
        return split_fee(base, order.member_count)
    raise TypeError(f"Unsupported order type: {type(order).__name__}")
