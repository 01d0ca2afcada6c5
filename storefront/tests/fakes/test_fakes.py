"""Unit tests for fake port implementations.

These tests verify that the fakes behave correctly as test doubles and
can be used confidently in tests of the core business functions.
"""

from datetime import UTC, datetime, timedelta

import pytest

from storefront.core.errors import EmailDeliveryError, PaymentError
from storefront.core.models import OneTimeCode, PaymentMethod, ShippingQuote
from storefront.tests.fakes import (
    FakeAnalyticsPort,
    FakeClock,
    FakeCodeGeneratorPort,
    FakeEmailPort,
    FakeExchangeRatePort,
    FakePaymentPort,
    FakeShippingQuotePort,
)


class TestFakeExchangeRatePort:
    def test_records_calls(self) -> None:
        rates = FakeExchangeRatePort(rate=2.0)

        assert rates.get_rate("USD", "AUD") == 2.0
        assert rates.calls == [("USD", "AUD")]
        assert rates.call_count == 1


class TestFakeShippingQuotePort:
    def test_defaults_to_no_quote(self) -> None:
        assert FakeShippingQuotePort().get_quote("London") is None

    def test_returns_configured_quote(self) -> None:
        quote = ShippingQuote(cost=10, estimated_days=2)
        quotes = FakeShippingQuotePort(quote)

        assert quotes.get_quote("London") is quote
        assert quotes.destinations == ["London"]


class TestFakeAnalyticsPort:
    def test_captures_and_resets(self) -> None:
        analytics = FakeAnalyticsPort()
        analytics.track_page_view("/home")

        assert analytics.tracked_paths == ["/home"]

        analytics.reset()
        assert analytics.call_count == 0


class TestFakePaymentPort:
    @pytest.mark.asyncio
    async def test_returns_configured_status(self) -> None:
        payments = FakePaymentPort(status="failed")
        card = PaymentMethod(card_number="1234")

        result = await payments.charge(card, 10)

        assert result.status == "failed"
        assert payments.charges == [(card, 10)]

    @pytest.mark.asyncio
    async def test_records_attempts_that_raise(self) -> None:
        payments = FakePaymentPort()
        payments.set_should_fail(PaymentError("down"))

        with pytest.raises(PaymentError):
            await payments.charge(PaymentMethod(card_number="1234"), 10)

        assert payments.call_count == 1


class TestFakeEmailPort:
    @pytest.mark.asyncio
    async def test_captures_messages(self) -> None:
        email = FakeEmailPort()

        await email.send("a@b.com", "hi")
        await email.send("c@d.com", "hello")

        assert email.send_call_count == 2
        assert [m.body for m in email.get_messages_for("a@b.com")] == ["hi"]
        assert email.get_last_message().recipient == "c@d.com"  # type: ignore[union-attr]

    @pytest.mark.asyncio
    async def test_failure_counts_attempt_but_captures_nothing(self) -> None:
        email = FakeEmailPort()
        email.set_should_fail(True, "nope")

        with pytest.raises(EmailDeliveryError, match="nope"):
            await email.send("a@b.com", "hi")

        assert email.send_call_count == 1
        assert email.sent == []

        email.reset()
        assert email.should_fail is False


class TestFakeCodeGeneratorPort:
    def test_follows_script_then_counts_up(self) -> None:
        codes = FakeCodeGeneratorPort(codes=[5, 9])

        values = [codes.generate_code().value for _ in range(4)]

        assert values == [5, 9, 10, 11]
        assert codes.generated[0] == OneTimeCode(5)


class TestFakeClock:
    def test_default_time(self) -> None:
        assert FakeClock().now() == datetime(2024, 1, 1, tzinfo=UTC)

    def test_set_time_from_string(self) -> None:
        clock = FakeClock()
        clock.set_time("2024-12-25 23:59")

        assert clock.now() == datetime(2024, 12, 25, 23, 59, tzinfo=UTC)

    def test_advance(self) -> None:
        clock = FakeClock()
        clock.advance(timedelta(hours=8))

        assert clock.now().hour == 8
        assert clock.read_count == 1
