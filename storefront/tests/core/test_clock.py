"""Unit tests for the process-wide clock and its scoped override."""

from collections.abc import Iterator
from datetime import UTC, datetime, timedelta

import pytest

from storefront.core.clock import SystemClock, current_clock, to_reference_time, use_clock
from storefront.core.opening_hours import OpeningHours
from storefront.core.pricing import PricingService
from storefront.tests.fakes import FakeClock, FakeExchangeRatePort


@pytest.fixture
def frozen_clock() -> Iterator[FakeClock]:
    """Install a FakeClock for the duration of one test."""
    clock = FakeClock(datetime(2024, 12, 25, 9, 30, tzinfo=UTC))
    with use_clock(clock):
        yield clock


def test_default_clock_is_system_clock() -> None:
    assert isinstance(current_clock(), SystemClock)


def test_system_clock_returns_aware_utc_time() -> None:
    before = datetime.now(UTC)
    reading = SystemClock().now()
    after = datetime.now(UTC)

    assert reading.tzinfo is not None
    assert before <= reading <= after


def test_use_clock_installs_and_restores() -> None:
    original = current_clock()
    fake = FakeClock()

    with use_clock(fake) as installed:
        assert installed is fake
        assert current_clock() is fake

    assert current_clock() is original


def test_use_clock_restores_after_error() -> None:
    original = current_clock()

    with pytest.raises(RuntimeError):
        with use_clock(FakeClock()):
            raise RuntimeError("boom")

    assert current_clock() is original


def test_use_clock_nests() -> None:
    outer = FakeClock()
    inner = FakeClock()

    with use_clock(outer):
        with use_clock(inner):
            assert current_clock() is inner
        assert current_clock() is outer


def test_all_services_observe_the_same_override(frozen_clock: FakeClock) -> None:
    pricing = PricingService(exchange_rates=FakeExchangeRatePort())
    hours = OpeningHours()

    assert pricing.get_discount() == 0.2
    assert hours.is_online() is True

    frozen_clock.advance(timedelta(hours=15))

    assert pricing.get_discount() == 0
    assert hours.is_online() is False


def test_override_does_not_leak_between_tests() -> None:
    assert isinstance(current_clock(), SystemClock)


def test_to_reference_time_treats_naive_as_local() -> None:
    naive = datetime(2024, 1, 1, 12, 0)

    assert to_reference_time(naive, UTC) == datetime(2024, 1, 1, 12, 0, tzinfo=UTC)
