"""Tests for the Server-Sent Events breaking news stream."""

import json

import pytest

from conftest import make_article, NOW
from newsdesk.models.news import NewsResponse
from newsdesk.services.stream_service import BreakingNewsStream, format_event

pytestmark = pytest.mark.anyio


class FakePipeline:
    def __init__(self, articles=None, error=None):
        self.articles = articles or []
        self.error = error
        self.calls = []

    async def run(self, query="", category="all", region="all", now=None):
        self.calls.append((query, category, region))
        if self.error:
            raise self.error
        return NewsResponse(articles=self.articles, updated_at=NOW)


def fast_stream(pipeline, **overrides):
    settings = dict(heartbeat_interval=0.05, check_interval=0.02, max_lifetime=0.2, poll_interval=0.01)
    settings.update(overrides)
    return BreakingNewsStream(pipeline, **settings)


async def collect(stream, **kwargs):
    return [json.loads(frame[len("data: "):]) async for frame in stream.events(**kwargs)]


def test_format_event():
    assert format_event({"type": "ready"}) == 'data: {"type": "ready"}\n\n'


async def test_ready_event_comes_first():
    events = await collect(fast_stream(FakePipeline()))
    assert events[0] == {"type": "ready"}


async def test_breaking_article_is_sent_once():
    pipeline = FakePipeline(articles=[
        make_article(title="Flood warning", link="https://e.com/flood", is_breaking=True),
        make_article(title="Old news", link="https://e.com/old", is_breaking=False),
    ])

    events = await collect(fast_stream(pipeline))

    breaking = [e for e in events if e["type"] == "breaking"]
    assert len(breaking) == 1
    assert breaking[0]["article"]["title"] == "Flood warning"
    assert breaking[0]["article"]["isBreaking"] is True
    assert len(pipeline.calls) > 1


async def test_filters_are_passed_to_pipeline():
    pipeline = FakePipeline()
    await collect(fast_stream(pipeline), query="rain", category="politics", region="TN")
    assert pipeline.calls[0] == ("rain", "politics", "TN")


async def test_heartbeats_carry_timestamp():
    events = await collect(fast_stream(FakePipeline()))
    heartbeats = [e for e in events if e["type"] == "heartbeat"]
    assert heartbeats
    assert all(isinstance(e["ts"], int) for e in heartbeats)


async def test_pipeline_errors_do_not_end_the_stream():
    pipeline = FakePipeline(error=RuntimeError("feeds down"))

    events = await collect(fast_stream(pipeline))

    assert not [e for e in events if e["type"] == "breaking"]
    assert [e for e in events if e["type"] == "heartbeat"]
    assert len(pipeline.calls) > 1


async def test_disconnect_stops_the_stream():
    pipeline = FakePipeline(articles=[
        make_article(title="Flood warning", link="https://e.com/flood", is_breaking=True),
    ])

    async def disconnected():
        return True

    events = await collect(fast_stream(pipeline, max_lifetime=5), is_disconnected=disconnected)

    assert events == [{"type": "ready"}]
    assert pipeline.calls == []
