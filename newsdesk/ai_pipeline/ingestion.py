"""
Newsdesk Feed Ingestion Module
Fetches every configured RSS feed concurrently and normalises the entries.
A slow or broken feed only ever removes itself from the result.
"""
import asyncio
import logging
import ssl
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List, Optional
from urllib.parse import urlparse

import aiohttp
import certifi
import feedparser
from bs4 import BeautifulSoup

from newsdesk.ai_pipeline.feed_config import FEED_TIMEOUT_SECONDS, MAX_ITEMS_PER_FEED
from newsdesk.ai_pipeline.text import clean_html
from newsdesk.config import FEED_USER_AGENT
from newsdesk.models.news import FeedSource, RawFeedItem

logger = logging.getLogger(__name__)


class FeedError(Exception):
    """A single feed could not be downloaded or parsed"""


@dataclass
class FetchedFeed:
    source: FeedSource
    items: List[RawFeedItem] = field(default_factory=list)


class FeedFetcher:
    def __init__(
        self,
        timeout: float = FEED_TIMEOUT_SECONDS,
        max_items: int = MAX_ITEMS_PER_FEED,
        user_agent: str = FEED_USER_AGENT,
    ):
        self.timeout = timeout
        self.max_items = max_items
        self.user_agent = user_agent

    async def fetch_all(self, sources: List[FeedSource]) -> List[FetchedFeed]:
        """
        Fetch all sources in parallel and keep the ones that succeeded.

        Every fetch has its own timeout and failure boundary, and the join waits
        for all of them to settle, so partial success is the normal outcome.

        Args:
            sources: Feeds to fetch, in registry order

        Returns:
            FetchedFeed per successful source, in the same order
        """
        if not sources:
            return []

        ssl_context = ssl.create_default_context(cafile=certifi.where())
        connector = aiohttp.TCPConnector(ssl=ssl_context)

        async with aiohttp.ClientSession(
            connector=connector,
            headers={"User-Agent": self.user_agent},
        ) as session:
            results = await asyncio.gather(
                *(self._fetch_with_timeout(session, src) for src in sources),
                return_exceptions=True,
            )

        fetched = []
        for source, result in zip(sources, results):
            if isinstance(result, asyncio.TimeoutError):
                logger.warning(f"Timed out fetching {source.name} after {self.timeout}s")
                continue
            if isinstance(result, Exception):
                logger.warning(f"Failed to fetch RSS from {source.name}: {result}")
                continue
            fetched.append(result)

        logger.info(f"Fetched {len(fetched)}/{len(sources)} feeds")
        return fetched

    async def _fetch_with_timeout(self, session: aiohttp.ClientSession, source: FeedSource) -> FetchedFeed:
        return await asyncio.wait_for(self.fetch_feed(session, source), timeout=self.timeout)

    async def fetch_feed(self, session: aiohttp.ClientSession, source: FeedSource) -> FetchedFeed:
        """Download, parse and normalise one feed (first max_items entries only)"""
        body = await self._download(session, source.url)

        # feedparser and BeautifulSoup are sync, keep them off the event loop
        items = await asyncio.to_thread(self._parse_feed_sync, body, source)

        logger.info(f"  {source.name}: {len(items)} items")
        return FetchedFeed(source=source, items=items)

    def _parse_feed_sync(self, body: bytes, source: FeedSource) -> List[RawFeedItem]:
        feed = feedparser.parse(body)
        if feed.bozo and not feed.entries:
            raise FeedError(f"Malformed feed: {feed.get('bozo_exception')}")

        items = []
        for entry in feed.entries[: self.max_items]:
            item = normalize_entry(entry, source)
            if item:
                items.append(item)
        return items

    async def _download(self, session: aiohttp.ClientSession, url: str) -> bytes:
        async with session.get(url) as response:
            if response.status != 200:
                raise FeedError(f"HTTP {response.status} for {url}")
            return await response.read()


def normalize_entry(entry: Dict, source: FeedSource) -> Optional[RawFeedItem]:
    """Turn a feedparser entry into a RawFeedItem, None when title or link is missing"""
    title = (entry.get("title") or "").strip()
    link = (entry.get("link") or "").strip()
    if not title or not link:
        return None

    raw_summary = entry.get("summary") or entry.get("description") or ""

    # content:encoded ends up in entry.content
    full_html = ""
    content = entry.get("content") or []
    if content:
        full_html = content[0].get("value", "") or ""

    snippet = clean_html(raw_summary) or clean_html(full_html)

    return RawFeedItem(
        title=title,
        link=link,
        published_at=_parse_published(entry),
        snippet_text=snippet,
        full_text=full_html or raw_summary,
        source_name=source.name,
        image_url=extract_image_from_entry(entry, link),
    )


def _parse_published(entry: Dict) -> Optional[datetime]:
    # feedparser normalises both fields to UTC struct_time
    for key in ("published_parsed", "updated_parsed"):
        parsed = entry.get(key)
        if not parsed:
            continue
        try:
            return datetime(*parsed[:6], tzinfo=timezone.utc)
        except (TypeError, ValueError):
            continue
    return None


def extract_image_from_entry(entry: Dict, url: str) -> Optional[str]:
    """
    Pick an image for the entry.

    Prioritizes:
    1. media:content
    2. image enclosures
    3. media:thumbnail
    4. first <img> in the content, then in the summary
    """
    image_url = None

    for media in entry.get("media_content") or []:
        if media.get("url"):
            image_url = media["url"]
            break

    if not image_url:
        for enclosure in entry.get("enclosures") or []:
            if enclosure.get("type", "").startswith("image/"):
                image_url = enclosure.get("href") or enclosure.get("url")
                if image_url:
                    break

    if not image_url:
        for thumb in entry.get("media_thumbnail") or []:
            if thumb.get("url"):
                image_url = thumb["url"]
                break

    if not image_url:
        content = entry.get("content") or []
        html = content[0].get("value", "") if content else ""
        image_url = _first_image_in_html(html) or _first_image_in_html(entry.get("summary", ""))

    if not image_url:
        return None

    if image_url.startswith("//"):
        image_url = "https:" + image_url
    elif image_url.startswith("/") and url:
        parsed = urlparse(url)
        image_url = f"{parsed.scheme}://{parsed.netloc}{image_url}"

    return image_url


def _first_image_in_html(html: str) -> Optional[str]:
    if not html or "<img" not in html:
        return None
    soup = BeautifulSoup(html, "html.parser")
    for img in soup.find_all("img"):
        src = img.get("src") or img.get("data-src")
        if src and not src.lower().startswith("data:"):
            return src
    return None
