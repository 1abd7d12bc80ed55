"""Runtime settings for the Shipping domain.

Values come from environment variables and are read on every call, so tests
and operators can change them without re-importing the domain.
"""

import os
from datetime import timedelta
from decimal import Decimal, InvalidOperation

DEFAULT_BASE_FEE = Decimal("50.00")
DEFAULT_CANCELLATION_WINDOW_SECONDS = 180


def base_fee() -> Decimal:
    """Return the base shipping fee charged per shipped order."""
    raw = os.environ.get("SHIPPING_BASE_FEE")
    if raw is None:
        return DEFAULT_BASE_FEE
    try:
        fee = Decimal(raw)
    except InvalidOperation as exc:
        raise ValueError(f"SHIPPING_BASE_FEE must be a decimal amount, got {raw!r}") from exc
    if not fee.is_finite() or fee < 0:
        raise ValueError(f"SHIPPING_BASE_FEE must be a non-negative amount, got {raw!r}")
    return fee


def cancellation_window() -> timedelta:
    """Return how long after creation a shipment may still be cancelled."""
    raw = os.environ.get("SHIPPING_CANCELLATION_WINDOW_SECONDS")
    if raw is None:
        return timedelta(seconds=DEFAULT_CANCELLATION_WINDOW_SECONDS)
    try:
        seconds = int(raw)
    except ValueError as exc:
        raise ValueError(f"SHIPPING_CANCELLATION_WINDOW_SECONDS must be an integer, got {raw!r}") from exc
    if seconds < 0:
        raise ValueError(f"SHIPPING_CANCELLATION_WINDOW_SECONDS must be non-negative, got {raw!r}")
    return timedelta(seconds=seconds)
