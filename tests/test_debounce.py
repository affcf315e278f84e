"""Tests for the asyncio Debouncer."""

import asyncio

import pytest

from reply_studio.utils.debounce import Debouncer


class Recorder:
    def __init__(self):
        self.calls = []

    async def __call__(self, *args):
        self.calls.append(args)


@pytest.mark.asyncio
async def test_only_last_trigger_fires():
    recorder = Recorder()
    debouncer = Debouncer(0.05, recorder)

    debouncer.trigger("a")
    debouncer.trigger("ab")
    debouncer.trigger("abc")
    assert debouncer.pending
    await debouncer.wait()

    assert recorder.calls == [("abc",)]
    assert not debouncer.pending


@pytest.mark.asyncio
async def test_cancel_prevents_call():
    recorder = Recorder()
    debouncer = Debouncer(0.02, recorder)

    debouncer.trigger("text")
    debouncer.cancel()
    await asyncio.sleep(0.05)

    assert recorder.calls == []
    assert not debouncer.pending


@pytest.mark.asyncio
async def test_retrigger_restarts_delay():
    recorder = Recorder()
    debouncer = Debouncer(0.2, recorder)

    debouncer.trigger(1)
    await asyncio.sleep(0.1)
    debouncer.trigger(2)
    await asyncio.sleep(0.1)
    assert recorder.calls == []

    await debouncer.wait()
    assert recorder.calls == [(2,)]


@pytest.mark.asyncio
async def test_wait_without_trigger_returns():
    await Debouncer(1.0, Recorder()).wait()
