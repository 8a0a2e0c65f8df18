# newsdesk/ai_pipeline/annotator.py
"""
Per-article annotations: lexicon sentiment, extractive summary, breaking flag
"""
import logging
import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from afinn import Afinn

from newsdesk.ai_pipeline.feed_config import (
    BREAKING_WINDOW_MINUTES,
    NEGATIVE_THRESHOLD,
    POSITIVE_THRESHOLD,
    SUMMARY_MAX_SENTENCES,
    SUMMARY_MIN_SENTENCE_LENGTH,
)
from newsdesk.ai_pipeline.text import clean_html
from newsdesk.models.news import Sentiment, SentimentLabel

logger = logging.getLogger(__name__)

_TOKEN = re.compile(r"[a-z0-9']+")
_SENTENCE_SPLIT = re.compile(r"(?<=[.?!])\s+")


def load_afinn() -> Optional[Afinn]:
    """AFINN word list scorer, None when the word list cannot be loaded"""
    try:
        analyzer = Afinn(language="en")
        logger.info("AFINN sentiment lexicon loaded")
        return analyzer
    except (OSError, ValueError) as e:
        logger.warning(f"AFINN lexicon unavailable, sentiment will be neutral: {e}")
        return None


class LexiconSentimentScorer:
    """
    AFINN polarity: score is the summed word valence, comparative is score per token.

    The analyzer is loaded once when the scorer is built. Without one every
    text scores 0 (neutral).
    """

    def __init__(self, analyzer=None):
        # Anything with `score(text) -> float`
        self.analyzer = analyzer

    @classmethod
    def load(cls) -> "LexiconSentimentScorer":
        return cls(load_afinn())

    def score(self, text: str) -> Sentiment:
        tokens = _TOKEN.findall(text.lower())

        total = 0.0
        if self.analyzer is not None and tokens:
            total = float(self.analyzer.score(text))

        comparative = total / len(tokens) if tokens else 0.0
        return Sentiment(
            score=round(total, 4),
            comparative=round(comparative, 4),
            label=label_sentiment(total),
        )


def label_sentiment(score: float) -> SentimentLabel:
    if score > POSITIVE_THRESHOLD:
        return SentimentLabel.POSITIVE
    if score < NEGATIVE_THRESHOLD:
        return SentimentLabel.NEGATIVE
    return SentimentLabel.NEUTRAL


def summarize(
    text: str,
    max_sentences: int = SUMMARY_MAX_SENTENCES,
    min_sentence_length: int = SUMMARY_MIN_SENTENCE_LENGTH,
) -> str:
    """First few informative sentences of the text, verbatim"""
    clean = clean_html(text)
    if not clean:
        return ""
    sentences = [s for s in _SENTENCE_SPLIT.split(clean) if len(s) > min_sentence_length]
    return " ".join(sentences[:max_sentences])


def is_breaking(
    published_at: Optional[datetime],
    now: datetime,
    window_minutes: float = BREAKING_WINDOW_MINUTES,
) -> bool:
    if published_at is None:
        return False
    if published_at.tzinfo is None:
        published_at = published_at.replace(tzinfo=timezone.utc)
    return now - published_at < timedelta(minutes=window_minutes)


@dataclass
class Annotation:
    sentiment: Sentiment
    summary: str
    is_breaking: bool


class ArticleAnnotator:
    def __init__(
        self,
        scorer: Optional[LexiconSentimentScorer] = None,
        breaking_window_minutes: float = BREAKING_WINDOW_MINUTES,
    ):
        self.scorer = scorer or LexiconSentimentScorer.load()
        self.breaking_window_minutes = breaking_window_minutes

    def annotate(
        self,
        title: str,
        body_text: str,
        full_text: str = "",
        published_at: Optional[datetime] = None,
        now: Optional[datetime] = None,
    ) -> Annotation:
        now = now or datetime.now(timezone.utc)
        return Annotation(
            sentiment=self.scorer.score(f"{title}. {body_text}"),
            summary=summarize(full_text or body_text),
            is_breaking=is_breaking(published_at, now, self.breaking_window_minutes),
        )
