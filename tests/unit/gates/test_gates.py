"""
Tests for the three gate policies.

Tests:
- FixedDelayGate pacing and drift-corrected re-arming
- IntervalGate absolute schedule and tick coalescing
- CountGate proceed/stop boundary and absorbing stop
- Configuration validation and exclusive ownership
"""

from datetime import timedelta

import pytest

from throttled_stream.exceptions import (
    GateAlreadyOwnedError,
    InvalidGateConfigError,
)
from throttled_stream.gates import (
    CountGate,
    FixedDelayGate,
    GateSignal,
    IntervalGate,
)

from tests.unit.mocks import ManualClock


class TestFixedDelayGate:
    """Test FixedDelayGate pacing."""

    @pytest.mark.asyncio
    async def test_first_poll_waits_full_duration(self, manual_clock: ManualClock) -> None:
        gate = FixedDelayGate(2.0, clock=manual_clock)

        assert gate.deadline == 2.0

        signal = await gate.poll()

        assert signal == GateSignal.PROCEED
        assert manual_clock.now() == 2.0
        assert gate.polls == 1

    @pytest.mark.asyncio
    async def test_rearms_from_scheduled_deadline(self, manual_clock: ManualClock) -> None:
        """Work done after resolution does not delay the next deadline."""
        gate = FixedDelayGate(1.0, clock=manual_clock)

        await gate.poll()
        assert gate.deadline == 2.0

        # Consumer spends 0.4s before polling again
        manual_clock.advance(0.4)
        await gate.poll()

        assert manual_clock.now() == 2.0
        assert gate.deadline == 3.0

    @pytest.mark.asyncio
    async def test_slow_consumer_gets_single_immediate_resolution(
        self,
        manual_clock: ManualClock,
    ) -> None:
        """Missing several deadlines does not produce a catch-up burst."""
        gate = FixedDelayGate(1.0, clock=manual_clock)
        await gate.poll()

        manual_clock.advance(3.5)

        await gate.poll()
        assert manual_clock.now() == 4.5
        assert manual_clock.sleeps == [1.0]

        # Next deadline stays on the original grid: 1.0 + k * 1.0
        assert gate.deadline == 5.0

        await gate.poll()
        assert manual_clock.now() == 5.0

    @pytest.mark.asyncio
    async def test_gate_is_awaitable(self, manual_clock: ManualClock) -> None:
        gate = FixedDelayGate(0.5, clock=manual_clock)

        assert await gate == GateSignal.PROCEED
        assert manual_clock.now() == 0.5

    def test_accepts_duration_strings_and_timedeltas(self, manual_clock: ManualClock) -> None:
        assert FixedDelayGate("250ms", clock=manual_clock).duration == pytest.approx(0.25)
        assert FixedDelayGate("1m30s", clock=manual_clock).duration == 90.0
        assert FixedDelayGate(timedelta(seconds=3), clock=manual_clock).duration == 3.0

    def test_zero_duration_is_allowed(self, manual_clock: ManualClock) -> None:
        gate = FixedDelayGate(0, clock=manual_clock)
        assert gate.duration == 0.0

    @pytest.mark.parametrize("duration", [-1, "soon", None, True, float("nan")])
    def test_invalid_duration_rejected(self, duration, manual_clock: ManualClock) -> None:
        with pytest.raises(InvalidGateConfigError):
            FixedDelayGate(duration, clock=manual_clock)


class TestIntervalGate:
    """Test IntervalGate scheduling."""

    @pytest.mark.asyncio
    async def test_resolves_on_absolute_schedule(self, manual_clock: ManualClock) -> None:
        gate = IntervalGate(1.0, clock=manual_clock)

        resolved_at = []
        for _ in range(3):
            await gate.poll()
            resolved_at.append(manual_clock.now())

        assert resolved_at == [0.0, 1.0, 2.0]

    @pytest.mark.asyncio
    async def test_consumer_latency_does_not_shift_schedule(
        self,
        manual_clock: ManualClock,
    ) -> None:
        gate = IntervalGate(1.0, clock=manual_clock)

        resolved_at = []
        for _ in range(4):
            await gate.poll()
            resolved_at.append(manual_clock.now())
            manual_clock.advance(0.3)

        assert resolved_at == [0.0, 1.0, 2.0, 3.0]

    @pytest.mark.asyncio
    async def test_blocked_for_three_periods_resolves_once(
        self,
        manual_clock: ManualClock,
    ) -> None:
        """After a 3P stall exactly one resolution is immediate."""
        gate = IntervalGate(1.0, clock=manual_clock)
        await gate.poll()

        manual_clock.advance(3.0)

        await gate.poll()
        assert manual_clock.now() == 3.0
        assert gate.missed_ticks == 2

        await gate.poll()
        assert manual_clock.now() == 4.0
        assert gate.polls == 3

    @pytest.mark.parametrize("period", [0, -0.5, "0s"])
    def test_non_positive_period_rejected(self, period, manual_clock: ManualClock) -> None:
        with pytest.raises(InvalidGateConfigError):
            IntervalGate(period, clock=manual_clock)


class TestCountGate:
    """Test CountGate limits."""

    @pytest.mark.asyncio
    async def test_proceeds_up_to_max_then_stops(self) -> None:
        gate = CountGate(3)

        signals = [await gate.poll() for _ in range(5)]

        assert signals == [
            GateSignal.PROCEED,
            GateSignal.PROCEED,
            GateSignal.PROCEED,
            GateSignal.STOP,
            GateSignal.STOP,
        ]
        assert gate.polls == 5
        assert gate.exhausted is True

    @pytest.mark.asyncio
    async def test_zero_max_stops_immediately(self) -> None:
        gate = CountGate(0)

        assert await gate.poll() == GateSignal.STOP

    @pytest.mark.asyncio
    async def test_remaining(self) -> None:
        gate = CountGate(2)
        assert gate.remaining == 2

        await gate.poll()
        assert gate.remaining == 1

        await gate.poll()
        await gate.poll()
        assert gate.remaining == 0

    @pytest.mark.parametrize("max_count", [-1, 1.5, "3", True])
    def test_invalid_max_count_rejected(self, max_count) -> None:
        with pytest.raises(InvalidGateConfigError):
            CountGate(max_count)


class TestGateOwnership:
    """Test exclusive ownership of gates."""

    def test_gate_cannot_have_two_owners(self) -> None:
        gate = CountGate(1)
        first, second = object(), object()

        gate.attach(first)
        gate.attach(first)

        assert gate.owner is first

        with pytest.raises(GateAlreadyOwnedError):
            gate.attach(second)
