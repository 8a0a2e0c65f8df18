# newsdesk/services/stream_service.py
"""
Server-Sent Events stream of breaking articles.
One cooperative loop per client; it ends when the client disconnects or the
maximum lifetime is reached.
"""
import asyncio
import json
import logging
import time
from typing import AsyncIterator, Awaitable, Callable, List, Optional, Set

from newsdesk.models.news import Article

logger = logging.getLogger(__name__)

HEARTBEAT_INTERVAL_SECONDS = 15
CHECK_INTERVAL_SECONDS = 30
MAX_LIFETIME_SECONDS = 5 * 60


def format_event(payload: dict) -> str:
    return f"data: {json.dumps(payload)}\n\n"


class BreakingNewsStream:
    def __init__(
        self,
        pipeline,
        heartbeat_interval: float = HEARTBEAT_INTERVAL_SECONDS,
        check_interval: float = CHECK_INTERVAL_SECONDS,
        max_lifetime: float = MAX_LIFETIME_SECONDS,
        poll_interval: float = 1.0,
    ):
        self.pipeline = pipeline
        self.heartbeat_interval = heartbeat_interval
        self.check_interval = check_interval
        self.max_lifetime = max_lifetime
        self.poll_interval = poll_interval

    async def _new_breaking(self, query: str, category: str, region: str, sent: Set[str]) -> List[Article]:
        try:
            response = await self.pipeline.run(query=query, category=category, region=region)
        except Exception as e:
            logger.warning(f"Breaking news check failed: {e}")
            return []

        fresh = []
        for article in response.articles:
            if article.is_breaking and article.link not in sent:
                sent.add(article.link)
                fresh.append(article)
        return fresh

    async def events(
        self,
        query: str = "",
        category: str = "all",
        region: str = "all",
        is_disconnected: Optional[Callable[[], Awaitable[bool]]] = None,
    ) -> AsyncIterator[str]:
        """
        Yield SSE frames: ready, periodic heartbeats, and each breaking
        article once per connection.
        """
        yield format_event({"type": "ready"})

        loop = asyncio.get_running_loop()
        start = loop.time()
        deadline = start + self.max_lifetime
        next_heartbeat = start + self.heartbeat_interval
        next_check = start + self.check_interval
        sent: Set[str] = set()

        while loop.time() < deadline:
            if is_disconnected is not None and await is_disconnected():
                logger.info("Stream client disconnected")
                return

            now = loop.time()
            if now >= next_check:
                next_check = now + self.check_interval
                for article in await self._new_breaking(query, category, region, sent):
                    yield format_event({
                        "type": "breaking",
                        "article": article.model_dump(mode="json", by_alias=True),
                    })

            if now >= next_heartbeat:
                next_heartbeat = now + self.heartbeat_interval
                yield format_event({"type": "heartbeat", "ts": int(time.time() * 1000)})

            wake = min(next_check, next_heartbeat, deadline, loop.time() + self.poll_interval)
            await asyncio.sleep(max(0.0, wake - loop.time()))

        logger.info("Stream reached its maximum lifetime")
