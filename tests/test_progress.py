"""Tests for the rotating progress ticker."""

from __future__ import annotations

import asyncio

import pytest

from conftest import run
from logo_animator.progress import ProgressTicker


def test_emits_first_message_on_start():
    seen = []

    async def scenario():
        ticker = ProgressTicker(seen.append, messages=["a", "b"], interval=10)
        ticker.start()
        assert ticker.running
        ticker.stop()
        assert not ticker.running

    run(scenario())
    assert seen == ["a"]


def test_wraps_around():
    seen = []

    async def scenario():
        ticker = ProgressTicker(seen.append, messages=["a", "b", "c"], interval=0.01)
        ticker.start()
        while len(seen) < 5:
            await asyncio.sleep(0.005)
        ticker.stop()

    run(scenario())
    assert seen[:5] == ["a", "b", "c", "a", "b"]


def test_no_ticks_after_stop():
    seen = []

    async def scenario():
        ticker = ProgressTicker(seen.append, messages=["a", "b"], interval=0.01)
        ticker.start()
        await asyncio.sleep(0.025)
        ticker.stop()
        count = len(seen)
        await asyncio.sleep(0.05)
        return count

    count = run(scenario())
    assert count == len(seen)


def test_restart_resets_to_first_message():
    seen = []

    async def scenario():
        ticker = ProgressTicker(seen.append, messages=["a", "b", "c"], interval=0.01)
        ticker.start()
        while len(seen) < 3:
            await asyncio.sleep(0.005)
        ticker.start()
        assert ticker.current == "a"
        ticker.stop()

    run(scenario())
    assert seen[-1] == "a"


def test_failing_listener_keeps_rotating():
    seen = []

    def listener(message):
        seen.append(message)
        if len(seen) == 2:
            raise RuntimeError("listener broke")

    async def scenario():
        ticker = ProgressTicker(listener, messages=["a", "b", "c"], interval=0.01)
        ticker.start()
        for _ in range(100):
            if len(seen) >= 4:
                break
            await asyncio.sleep(0.005)
        assert ticker.running
        ticker.stop()

    run(scenario())
    assert seen[:4] == ["a", "b", "c", "a"]


def test_requires_messages():
    with pytest.raises(ValueError):
        ProgressTicker(lambda m: None, messages=[])
