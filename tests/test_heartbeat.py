"""
Unit tests for the keep-alive heartbeat.
"""

import asyncio

import pytest

from ghl_mcp.heartbeat import PING_EVENT, Heartbeat

INTERVAL = 0.05


class TestHeartbeat:

    @pytest.mark.asyncio
    async def test_emits_pings(self):
        heartbeat = Heartbeat(interval=INTERVAL)
        stream = heartbeat.events()

        assert await stream.__anext__() == PING_EVENT
        assert await stream.__anext__() == PING_EVENT

        await stream.aclose()

    @pytest.mark.asyncio
    async def test_close_stops_timer_exactly_once(self):
        heartbeat = Heartbeat(interval=INTERVAL)
        stream = heartbeat.events()
        await stream.__anext__()

        await stream.aclose()
        queued = heartbeat._queue.qsize()

        # wait well past the interval: nothing more may be produced
        await asyncio.sleep(INTERVAL * 4)

        assert heartbeat.cancellations == 1
        assert not heartbeat.running
        assert heartbeat._queue.qsize() == queued

    @pytest.mark.asyncio
    async def test_stop_is_idempotent(self):
        heartbeat = Heartbeat(interval=INTERVAL)
        heartbeat.start()

        assert heartbeat.stop() is True
        assert heartbeat.stop() is False
        await asyncio.sleep(0)
        assert heartbeat.stop() is False
        assert heartbeat.cancellations == 1

    @pytest.mark.asyncio
    async def test_stop_before_start(self):
        heartbeat = Heartbeat(interval=INTERVAL)
        assert heartbeat.stop() is False
        assert heartbeat.cancellations == 0

    def test_ping_event_format(self):
        assert PING_EVENT == "event: ping\ndata: {}\n\n"
