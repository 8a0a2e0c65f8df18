"""Tests for feed download, parsing and normalisation."""

import asyncio
import threading
from datetime import timedelta

import feedparser
import pytest

from conftest import NOW, rss_feed
from newsdesk.ai_pipeline import ingestion
from newsdesk.ai_pipeline.ingestion import (
    FeedError,
    FeedFetcher,
    extract_image_from_entry,
    normalize_entry,
)
from newsdesk.models.news import FeedSource

pytestmark = pytest.mark.anyio

SOURCE = FeedSource(name="Example News", url="https://example.com/rss", category="sports")


def parse_entries(items):
    return feedparser.parse(rss_feed(items).encode("utf-8")).entries


class TestNormalizeEntry:
    def test_basic_fields(self):
        published = NOW - timedelta(minutes=5)
        (entry,) = parse_entries([{
            "title": "Cricket World Cup Final Today",
            "link": "https://example.com/cricket",
            "description": "<p>India meet Australia in the <b>final</b>.</p>",
            "published": published,
        }])

        item = normalize_entry(entry, SOURCE)

        assert item.title == "Cricket World Cup Final Today"
        assert item.link == "https://example.com/cricket"
        assert item.snippet_text.startswith("India meet Australia in the")
        assert "final" in item.snippet_text
        assert item.source_name == "Example News"
        assert item.published_at == published

    def test_snippet_is_plain_text(self):
        (entry,) = parse_entries([{
            "title": "Budget",
            "link": "https://example.com/budget",
            "description": "<div>Tax   cuts <i>announced</i></div>",
        }])
        item = normalize_entry(entry, SOURCE)
        assert "<" not in item.snippet_text
        assert "  " not in item.snippet_text

    def test_full_text_prefers_encoded_content(self):
        (entry,) = parse_entries([{
            "title": "Budget",
            "link": "https://example.com/budget",
            "description": "Short teaser",
            "content": "<p>The complete article body with every detail.</p>",
        }])
        item = normalize_entry(entry, SOURCE)
        assert item.snippet_text == "Short teaser"
        assert "complete article body" in item.full_text

    def test_missing_date_is_none(self):
        (entry,) = parse_entries([{"title": "Undated", "link": "https://example.com/u"}])
        item = normalize_entry(entry, SOURCE)
        assert item.published_at is None
        assert item.snippet_text == ""

    def test_entry_without_link_is_skipped(self):
        assert normalize_entry({"title": "No link"}, SOURCE) is None

    def test_entry_without_title_is_skipped(self):
        assert normalize_entry({"title": "  ", "link": "https://example.com/x"}, SOURCE) is None

    def test_media_content_image(self):
        (entry,) = parse_entries([{
            "title": "Pictured",
            "link": "https://example.com/p",
            "image": "https://cdn.example.com/p.jpg",
        }])
        assert normalize_entry(entry, SOURCE).image_url == "https://cdn.example.com/p.jpg"


class TestExtractImage:
    def test_media_content_wins(self):
        entry = {
            "media_content": [{"url": "https://cdn.example.com/a.jpg"}],
            "media_thumbnail": [{"url": "https://cdn.example.com/thumb.jpg"}],
        }
        assert extract_image_from_entry(entry, "https://example.com/a") == "https://cdn.example.com/a.jpg"

    def test_image_enclosure(self):
        entry = {"enclosures": [
            {"type": "audio/mpeg", "href": "https://cdn.example.com/a.mp3"},
            {"type": "image/png", "href": "https://cdn.example.com/a.png"},
        ]}
        assert extract_image_from_entry(entry, "https://example.com/a") == "https://cdn.example.com/a.png"

    def test_thumbnail(self):
        entry = {"media_thumbnail": [{"url": "https://cdn.example.com/t.jpg"}]}
        assert extract_image_from_entry(entry, "https://example.com/a") == "https://cdn.example.com/t.jpg"

    def test_first_img_in_content(self):
        entry = {"content": [{"value": '<p>Text</p><img src="https://cdn.example.com/c.jpg">'}]}
        assert extract_image_from_entry(entry, "https://example.com/a") == "https://cdn.example.com/c.jpg"

    def test_data_uri_is_ignored(self):
        entry = {"summary": '<img src="data:image/gif;base64,R0lGOD"><img src="https://cdn.example.com/s.jpg">'}
        assert extract_image_from_entry(entry, "https://example.com/a") == "https://cdn.example.com/s.jpg"

    def test_protocol_relative_url(self):
        entry = {"media_thumbnail": [{"url": "//cdn.example.com/t.jpg"}]}
        assert extract_image_from_entry(entry, "https://example.com/a") == "https://cdn.example.com/t.jpg"

    def test_root_relative_url(self):
        entry = {"media_thumbnail": [{"url": "/images/t.jpg"}]}
        assert extract_image_from_entry(entry, "https://example.com/story/1") == "https://example.com/images/t.jpg"

    def test_no_image(self):
        assert extract_image_from_entry({"summary": "plain text"}, "https://example.com/a") is None


def fetcher_with_bodies(bodies, delays=None, **kwargs):
    """FeedFetcher whose downloads come from a url -> body (or exception) mapping"""
    fetcher = FeedFetcher(**kwargs)
    delays = delays or {}

    async def fake_download(session, url):
        await asyncio.sleep(delays.get(url, 0))
        body = bodies[url]
        if isinstance(body, Exception):
            raise body
        return body

    fetcher._download = fake_download
    return fetcher


def feed_body(prefix, count=1):
    return rss_feed([
        {"title": f"{prefix} story {i}", "link": f"https://example.com/{prefix}/{i}"}
        for i in range(count)
    ]).encode("utf-8")


class TestFetchAll:
    async def test_all_sources_succeed_in_order(self):
        sources = [
            FeedSource(name="A", url="https://a.example/rss"),
            FeedSource(name="B", url="https://b.example/rss"),
        ]
        fetcher = fetcher_with_bodies({
            "https://a.example/rss": feed_body("a"),
            "https://b.example/rss": feed_body("b"),
        })

        fetched = await fetcher.fetch_all(sources)

        assert [f.source.name for f in fetched] == ["A", "B"]
        assert fetched[0].items[0].title == "a story 0"

    async def test_failing_source_is_dropped(self):
        sources = [
            FeedSource(name="Broken", url="https://broken.example/rss"),
            FeedSource(name="Good", url="https://good.example/rss"),
        ]
        fetcher = fetcher_with_bodies({
            "https://broken.example/rss": FeedError("HTTP 503 for https://broken.example/rss"),
            "https://good.example/rss": feed_body("good", count=2),
        })

        fetched = await fetcher.fetch_all(sources)

        assert [f.source.name for f in fetched] == ["Good"]
        assert len(fetched[0].items) == 2

    async def test_slow_source_times_out(self):
        sources = [
            FeedSource(name="Slow", url="https://slow.example/rss"),
            FeedSource(name="Fast", url="https://fast.example/rss"),
        ]
        fetcher = fetcher_with_bodies(
            {
                "https://slow.example/rss": feed_body("slow"),
                "https://fast.example/rss": feed_body("fast"),
            },
            delays={"https://slow.example/rss": 1.0},
            timeout=0.05,
        )

        fetched = await fetcher.fetch_all(sources)

        assert [f.source.name for f in fetched] == ["Fast"]

    async def test_malformed_feed_is_dropped(self):
        sources = [FeedSource(name="Garbage", url="https://garbage.example/rss")]
        fetcher = fetcher_with_bodies({"https://garbage.example/rss": b"this is not xml <<<"})

        assert await fetcher.fetch_all(sources) == []

    async def test_items_are_capped_per_feed(self):
        sources = [FeedSource(name="Busy", url="https://busy.example/rss")]
        fetcher = fetcher_with_bodies({"https://busy.example/rss": feed_body("busy", count=30)})

        fetched = await fetcher.fetch_all(sources)

        assert len(fetched[0].items) == 20
        assert fetched[0].items[-1].title == "busy story 19"

    async def test_cap_is_configurable(self):
        sources = [FeedSource(name="Busy", url="https://busy.example/rss")]
        fetcher = fetcher_with_bodies(
            {"https://busy.example/rss": feed_body("busy", count=10)},
            max_items=3,
        )

        fetched = await fetcher.fetch_all(sources)

        assert [i.title for i in fetched[0].items] == ["busy story 0", "busy story 1", "busy story 2"]

    async def test_parsing_runs_off_the_event_loop(self, monkeypatch):
        loop_thread = threading.get_ident()
        parse_threads = []
        real_parse = feedparser.parse

        def recording_parse(body, *args, **kwargs):
            parse_threads.append(threading.get_ident())
            return real_parse(body, *args, **kwargs)

        monkeypatch.setattr(ingestion.feedparser, "parse", recording_parse)
        sources = [FeedSource(name="A", url="https://a.example/rss")]
        fetcher = fetcher_with_bodies({"https://a.example/rss": feed_body("a")})

        fetched = await fetcher.fetch_all(sources)

        assert fetched[0].items[0].title == "a story 0"
        assert parse_threads
        assert loop_thread not in parse_threads

    async def test_no_sources(self):
        assert await FeedFetcher().fetch_all([]) == []
