"""Shared fixtures and builders for the newsdesk tests."""

import re
from datetime import datetime, timedelta, timezone
from email.utils import format_datetime
from typing import Dict, List, Optional

import pytest

from newsdesk.ai_pipeline.annotator import ArticleAnnotator, LexiconSentimentScorer
from newsdesk.models.news import Article, Sentiment, SentimentLabel

NOW = datetime(2025, 3, 14, 12, 0, tzinfo=timezone.utc)

SAMPLE_LEXICON = {
    "good": 3,
    "great": 3,
    "win": 4,
    "bad": -3,
    "terrible": -3,
    "killed": -3,
}


class WordListAnalyzer:
    """Stands in for Afinn with a fixed word list"""

    def __init__(self, words=None):
        self.words = SAMPLE_LEXICON if words is None else words

    def score(self, text):
        return sum(self.words.get(w, 0) for w in re.findall(r"[a-z0-9']+", text.lower()))


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def annotator() -> ArticleAnnotator:
    return ArticleAnnotator(scorer=LexiconSentimentScorer(WordListAnalyzer()))


def make_article(
    title: str = "Headline",
    link: str = "https://example.com/a",
    snippet_text: str = "",
    published_at: Optional[datetime] = None,
    categories: Optional[List[str]] = None,
    is_breaking: bool = False,
    region_code: Optional[str] = None,
    source_name: str = "Example News",
) -> Article:
    return Article(
        title=title,
        link=link,
        snippet_text=snippet_text,
        published_at=published_at,
        source_name=source_name,
        categories=categories or [],
        sentiment=Sentiment(score=0, comparative=0, label=SentimentLabel.NEUTRAL),
        summary="",
        is_breaking=is_breaking,
        region_code=region_code,
    )


def rss_feed(items: List[Dict], title: str = "Example Feed") -> str:
    """Build an RSS 2.0 document; item keys: title, link, description, published, content, image"""
    parts = []
    for item in items:
        fields = []
        if item.get("title") is not None:
            fields.append(f"<title>{item['title']}</title>")
        if item.get("link") is not None:
            fields.append(f"<link>{item['link']}</link>")
        if item.get("description") is not None:
            fields.append(f"<description><![CDATA[{item['description']}]]></description>")
        if item.get("content") is not None:
            fields.append(f"<content:encoded><![CDATA[{item['content']}]]></content:encoded>")
        if item.get("published") is not None:
            fields.append(f"<pubDate>{format_datetime(item['published'])}</pubDate>")
        if item.get("image") is not None:
            fields.append(f'<media:content url="{item["image"]}" medium="image" />')
        parts.append("<item>" + "".join(fields) + "</item>")

    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<rss version="2.0" xmlns:content="http://purl.org/rss/1.0/modules/content/" '
        'xmlns:media="http://search.yahoo.com/mrss/">'
        f"<channel><title>{title}</title><link>https://example.com</link>"
        "<description>Test feed</description>"
        + "".join(parts)
        + "</channel></rss>"
    )


def minutes_ago(minutes: float, now: datetime = NOW) -> datetime:
    return now - timedelta(minutes=minutes)
