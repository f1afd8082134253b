import asyncio
from decimal import Decimal

import pytest

from currency_converter.catalog import Currency
from currency_converter.exchange.base import BaseExchangeClient, Failed, Succeeded
from currency_converter.state import (
    ConverterSession,
    Pending,
    Phase,
    SelectFrom,
    SetAmount,
    SubmitConversion,
)
from currency_converter.utils.errors import FailureReason


class FakeClient(BaseExchangeClient):
    NAME = "fake"

    def __init__(self, result=None):
        self.result = result or Succeeded(
            requested_amount=Decimal("100"),
            from_currency=Currency.RUB,
            to_currency=Currency.USD,
            converted_amount=Decimal("1.35"),
        )
        self.requests = []

    async def convert(self, from_code, to_code, amount):
        self.requests.append((from_code, to_code, amount))
        await asyncio.sleep(0)
        return self.result


class GatedClient(BaseExchangeClient):
    """Each call waits until the test releases it."""

    NAME = "gated"

    def __init__(self):
        self.gates = []

    async def convert(self, from_code, to_code, amount):
        gate = asyncio.get_running_loop().create_future()
        self.gates.append((amount, gate))
        return await gate


class ExplodingClient(BaseExchangeClient):
    NAME = "exploding"

    async def convert(self, from_code, to_code, amount):
        raise RuntimeError("boom")


@pytest.mark.asyncio
async def test_submit_and_receive_success():
    client = FakeClient()
    session = ConverterSession(client)

    session.dispatch(SetAmount("100"))
    session.dispatch(SubmitConversion())
    state = await session.run_until_idle()

    assert client.requests == [("RUB", "USD", "100")]
    assert state.phase == Phase.IDLE
    assert state.outcome == client.result


@pytest.mark.asyncio
async def test_remote_rejection_returns_to_idle():
    client = FakeClient(result=Failed(reason=FailureReason.REMOTE_REJECTED, detail="nope"))
    session = ConverterSession(client)

    session.dispatch(SubmitConversion())
    state = await session.run_until_idle()

    assert state.phase == Phase.IDLE
    assert state.outcome.reason == FailureReason.REMOTE_REJECTED


@pytest.mark.asyncio
async def test_listener_sees_pending_before_result():
    session = ConverterSession(FakeClient())
    seen = []
    session.subscribe(lambda state, event: seen.append(state.outcome))

    session.dispatch(SubmitConversion())
    await session.run_until_idle()

    assert seen[0] == Pending()
    assert isinstance(seen[-1], Succeeded)


@pytest.mark.asyncio
async def test_failing_listener_does_not_break_session():
    session = ConverterSession(FakeClient())

    def broken(state, event):
        raise ValueError("render failed")

    session.subscribe(broken)
    session.dispatch(SubmitConversion())
    state = await session.run_until_idle()

    assert isinstance(state.outcome, Succeeded)


@pytest.mark.asyncio
async def test_client_exception_becomes_transport_failure():
    session = ConverterSession(ExplodingClient())

    session.dispatch(SubmitConversion())
    state = await session.run_until_idle()

    assert state.phase == Phase.IDLE
    assert state.outcome.reason == FailureReason.TRANSPORT_FAILURE
    assert "boom" in state.outcome.detail


@pytest.mark.asyncio
async def test_overlapping_requests_last_arrival_wins():
    client = GatedClient()
    session = ConverterSession(client)
    runner = asyncio.create_task(session.run())

    session.dispatch(SetAmount("1"))
    session.dispatch(SubmitConversion())
    session.dispatch(SetAmount("2"))
    session.dispatch(SubmitConversion())
    while len(client.gates) < 2:
        await asyncio.sleep(0)

    (_, first_gate), (_, second_gate) = client.gates
    first = Succeeded(Decimal("1"), Currency.RUB, Currency.USD, Decimal("0.01"))
    second = Succeeded(Decimal("2"), Currency.RUB, Currency.USD, Decimal("0.02"))

    # Second request answers first; the first request's late answer overwrites it
    second_gate.set_result(second)
    await asyncio.sleep(0.01)
    assert session.state.outcome == second
    assert session.state.phase == Phase.IDLE

    first_gate.set_result(first)
    await asyncio.sleep(0.01)
    assert session.state.outcome == first

    session.stop()
    await runner
    await session.aclose()


@pytest.mark.asyncio
async def test_edits_while_pending_do_not_issue_requests():
    client = GatedClient()
    session = ConverterSession(client)
    runner = asyncio.create_task(session.run())

    session.dispatch(SubmitConversion())
    while not client.gates:
        await asyncio.sleep(0)
    session.dispatch(SetAmount("7"))
    session.dispatch(SelectFrom(Currency.EUR))
    await asyncio.sleep(0.01)

    assert len(client.gates) == 1
    assert session.state.phase == Phase.PENDING
    assert session.state.form.amount == "7"

    client.gates[0][1].set_result(Failed(reason=FailureReason.TRANSPORT_FAILURE))
    await asyncio.sleep(0.01)
    assert session.state.phase == Phase.IDLE

    session.stop()
    await runner


@pytest.mark.asyncio
async def test_listener_receives_the_applied_event():
    session = ConverterSession(FakeClient())
    seen = []
    session.subscribe(lambda state, event: seen.append((event, state.form.amount)))

    session.dispatch(SetAmount("42"))
    session.dispatch(SetAmount("4x"))
    await session.run_until_idle()

    assert seen == [(SetAmount("42"), "42"), (SetAmount("4x"), "42")]
