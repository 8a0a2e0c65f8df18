"""
Newsdesk News Pipeline
Registry -> parallel fetch -> classify/annotate -> filter and sort -> optional AI summaries
Stateless: every call rebuilds the article list from the feeds.
"""
import asyncio
import logging
from datetime import datetime, timezone
from typing import Dict, List, Optional

from newsdesk.ai_pipeline.annotator import ArticleAnnotator
from newsdesk.ai_pipeline.assembler import ResultAssembler
from newsdesk.ai_pipeline.classifier import ArticleClassifier
from newsdesk.ai_pipeline.feed_config import ALL_CATEGORIES, ALL_REGIONS
from newsdesk.ai_pipeline.ingestion import FeedFetcher
from newsdesk.ai_pipeline.registry import SourceRegistry
from newsdesk.models.news import Article, FeedSource, NewsResponse, RawFeedItem

logger = logging.getLogger(__name__)


class NewsPipeline:
    def __init__(
        self,
        registry: Optional[SourceRegistry] = None,
        fetcher: Optional[FeedFetcher] = None,
        classifier: Optional[ArticleClassifier] = None,
        annotator: Optional[ArticleAnnotator] = None,
        assembler: Optional[ResultAssembler] = None,
        summarizer=None,
        summary_limit: int = 0,
    ):
        self.registry = registry or SourceRegistry.default()
        self.fetcher = fetcher or FeedFetcher()
        self.classifier = classifier or ArticleClassifier()
        self.annotator = annotator or ArticleAnnotator()
        self.assembler = assembler or ResultAssembler()
        # Anything with `async summarize(title, content, source) -> (text, is_fallback)`
        self.summarizer = summarizer
        self.summary_limit = summary_limit

    def build_article(self, item: RawFeedItem, source: FeedSource, now: datetime) -> Article:
        categories = self.classifier.classify(item.title, item.snippet_text, source.category)
        annotation = self.annotator.annotate(
            item.title,
            item.snippet_text,
            item.full_text,
            item.published_at,
            now,
        )
        return Article(
            title=item.title,
            link=item.link,
            snippet_text=item.snippet_text,
            published_at=item.published_at,
            source_name=item.source_name,
            image_url=item.image_url,
            categories=categories,
            sentiment=annotation.sentiment,
            summary=annotation.summary,
            is_breaking=annotation.is_breaking,
            region_code=source.region_code,
        )

    async def run(
        self,
        query: str = "",
        category: str = ALL_CATEGORIES,
        region: str = ALL_REGIONS,
        now: Optional[datetime] = None,
    ) -> NewsResponse:
        """
        Build the article list for one request.

        Args:
            query: Free-text filter on title and snippet
            category: Category name or 'all'
            region: Region code or 'all'; unknown codes behave like 'all'
            now: Reference time for the breaking flag (defaults to current UTC)

        Returns:
            NewsResponse, possibly with no articles if every feed failed
        """
        query = (query or "").strip().lower()
        category = (category or "").strip().lower() or ALL_CATEGORIES
        region = (region or "").strip() or ALL_REGIONS
        now = now or datetime.now(timezone.utc)

        sources = self.registry.get_sources(region)
        profile = self.registry.get_profile(region)

        feeds = await self.fetcher.fetch_all(sources)

        articles: List[Article] = []
        full_texts: Dict[str, str] = {}
        for feed in feeds:
            for item in feed.items:
                articles.append(self.build_article(item, feed.source, now))
                full_texts.setdefault(item.link, item.full_text or item.snippet_text)

        results = self.assembler.assemble(articles, query, category, region, profile)

        if self.summarizer is not None and self.summary_limit > 0:
            await self._enrich_summaries(results[: self.summary_limit], full_texts)

        logger.info(
            f"News request q='{query}' category={category} region={region}: "
            f"{len(results)}/{len(articles)} articles from {len(feeds)}/{len(sources)} feeds"
        )
        return NewsResponse(articles=results, updated_at=now)

    async def _enrich_summaries(self, articles: List[Article], full_texts: Dict[str, str]) -> None:
        """Replace extractive summaries with generated ones where the summariser succeeds"""
        results = await asyncio.gather(
            *(
                self.summarizer.summarize(
                    article.title,
                    full_texts.get(article.link, article.snippet_text),
                    article.source_name,
                )
                for article in articles
            ),
            return_exceptions=True,
        )

        for article, result in zip(articles, results):
            if isinstance(result, Exception):
                logger.warning(f"Summariser error for {article.link}: {result}")
                continue
            summary, is_fallback = result
            if summary and not is_fallback:
                article.summary = summary
                article.summary_is_fallback = False
