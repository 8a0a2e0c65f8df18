# newsdesk/models/news.py
from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Serialises with camelCase keys, accepts either spelling on input"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FeedSource(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    name: str
    url: str
    category: Optional[str] = None  # weak prior for the classifier
    region_code: Optional[str] = None


class RegionProfile(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    code: str
    display_name: str
    keywords: List[str] = Field(default_factory=list)
    city_names: List[str] = Field(default_factory=list)
    sources: List[FeedSource] = Field(default_factory=list)


class RawFeedItem(BaseModel):
    """Normalised feed entry, discarded once the article is built"""
    title: str
    link: str
    published_at: Optional[datetime] = None
    snippet_text: str = ""
    full_text: str = ""
    source_name: str
    image_url: Optional[str] = None


class SentimentLabel(str, Enum):
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


class Sentiment(CamelModel):
    score: float
    comparative: float
    label: SentimentLabel


class Article(CamelModel):
    title: str
    link: str
    snippet_text: str = ""
    published_at: Optional[datetime] = None
    source_name: str
    image_url: Optional[str] = None
    categories: List[str] = Field(default_factory=list)
    sentiment: Sentiment
    summary: str = ""
    summary_is_fallback: bool = True
    is_breaking: bool = False
    region_code: Optional[str] = None


class NewsResponse(CamelModel):
    articles: List[Article]
    updated_at: datetime


class RegionSummary(CamelModel):
    code: str
    name: str
    source_count: int
