"""Tests for the shipment cancellation window."""

from datetime import UTC, datetime, timedelta

from shipping.shipment.shipment import within_window

T0 = datetime(2024, 3, 1, 12, 0, 0, tzinfo=UTC)
WINDOW = timedelta(minutes=3)


class TestWithinWindow:
    def test_just_before_threshold_is_inside(self):
        assert within_window(T0, T0 + timedelta(minutes=2, seconds=59), WINDOW) is True

    def test_exactly_at_threshold_is_outside(self):
        assert within_window(T0, T0 + WINDOW, WINDOW) is False

    def test_after_threshold_is_outside(self):
        assert within_window(T0, T0 + timedelta(minutes=3, seconds=1), WINDOW) is False

    def test_zero_elapsed_is_inside(self):
        assert within_window(T0, T0, WINDOW) is True

    def test_clock_skew_is_inside(self):
        assert within_window(T0, T0 - timedelta(seconds=30), WINDOW) is True

    def test_long_after_creation_is_outside(self):
        # Reversed operands would make this pass; elapsed time must be now - created_at
        assert within_window(T0, T0 + timedelta(days=2), WINDOW) is False

    def test_naive_timestamps_treated_as_utc(self):
        naive = datetime(2024, 3, 1, 12, 0, 0)
        assert within_window(naive, T0 + timedelta(minutes=1), WINDOW) is True
        assert within_window(naive, T0 + timedelta(minutes=5), WINDOW) is False

    def test_zero_window_never_cancellable(self):
        assert within_window(T0, T0, timedelta(0)) is False
