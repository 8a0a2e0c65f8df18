# newsdesk/controllers/news_controller.py
from typing import List

from newsdesk.ai_pipeline.annotator import ArticleAnnotator, LexiconSentimentScorer
from newsdesk.ai_pipeline.pipeline import NewsPipeline
from newsdesk.ai_pipeline.registry import SourceRegistry
from newsdesk.config import ENABLE_AI_SUMMARIES, GENERATIVE_SUMMARY_LIMIT
from newsdesk.models.news import NewsResponse, RegionSummary
from newsdesk.services.stream_service import BreakingNewsStream
from newsdesk.services.summary_service import GeminiSummarizer

# Built once at startup, shared by every request
registry = SourceRegistry.default()
sentiment_scorer = LexiconSentimentScorer.load()
summarizer = GeminiSummarizer() if ENABLE_AI_SUMMARIES else None
news_pipeline = NewsPipeline(
    registry=registry,
    annotator=ArticleAnnotator(scorer=sentiment_scorer),
    summarizer=summarizer,
    summary_limit=GENERATIVE_SUMMARY_LIMIT if summarizer else 0,
)


async def get_news(q: str, category: str, state: str) -> NewsResponse:
    """Aggregate, classify and filter articles for one request"""
    return await news_pipeline.run(query=q, category=category, region=state)


def list_regions() -> List[RegionSummary]:
    return [
        RegionSummary(code=p.code, name=p.display_name, source_count=len(p.sources))
        for p in registry.list_regions()
    ]


def create_breaking_stream() -> BreakingNewsStream:
    return BreakingNewsStream(news_pipeline)
