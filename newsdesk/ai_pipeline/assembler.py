# newsdesk/ai_pipeline/assembler.py
from datetime import datetime, timezone
from typing import List, Optional

from newsdesk.ai_pipeline.feed_config import ALL_CATEGORIES
from newsdesk.ai_pipeline.region_filter import RegionFilter
from newsdesk.models.news import Article, RegionProfile

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def matches_query(article: Article, query: str) -> bool:
    if not query:
        return True
    query = query.lower()
    return query in article.title.lower() or query in article.snippet_text.lower()


def matches_category(article: Article, category: str) -> bool:
    if not category or category == ALL_CATEGORIES:
        return True
    return category in article.categories


def _sort_key(article: Article) -> datetime:
    published = article.published_at
    if published is None:
        return EPOCH
    if published.tzinfo is None:
        return published.replace(tzinfo=timezone.utc)
    return published


class ResultAssembler:
    def __init__(self, region_filter: Optional[RegionFilter] = None):
        self.region_filter = region_filter or RegionFilter()

    def assemble(
        self,
        articles: List[Article],
        query: str,
        category: str,
        region_code: str,
        profile: Optional[RegionProfile],
    ) -> List[Article]:
        """Apply query, category and region filters (all must pass), newest first"""
        kept = [
            article
            for article in articles
            if matches_query(article, query)
            and matches_category(article, category)
            and self.region_filter.is_relevant(article, region_code, profile)
        ]
        kept.sort(key=_sort_key, reverse=True)
        return kept
