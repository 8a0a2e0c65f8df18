# newsdesk/ai_pipeline/classifier.py
"""
Keyword-based article categorisation.

Primary pass counts distinct keyword phrases per category in title + body.
A category needs MIN_KEYWORD_MATCHES hits, or a single hit on a phrase longer
than STRONG_KEYWORD_LENGTH characters. When nothing qualifies a title-only
regex pass with broad terms is used instead.
"""
import re
from typing import Dict, List, Optional, Tuple

from newsdesk.ai_pipeline.feed_config import (
    CATEGORY_KEYWORDS,
    MAX_CATEGORIES,
    MIN_KEYWORD_MATCHES,
    STRONG_KEYWORD_LENGTH,
    TITLE_FALLBACK_PATTERNS,
)
from newsdesk.ai_pipeline.text import keyword_pattern


class ArticleClassifier:
    def __init__(
        self,
        category_keywords: Dict[str, List[str]] = None,
        fallback_patterns: Dict[str, str] = None,
        min_matches: int = MIN_KEYWORD_MATCHES,
        strong_keyword_length: int = STRONG_KEYWORD_LENGTH,
        max_categories: int = MAX_CATEGORIES,
    ):
        self.min_matches = min_matches
        self.strong_keyword_length = strong_keyword_length
        self.max_categories = max_categories

        keywords = category_keywords if category_keywords is not None else CATEGORY_KEYWORDS
        patterns = fallback_patterns if fallback_patterns is not None else TITLE_FALLBACK_PATTERNS

        # Compiled once; duplicate phrases within a category count once
        self._keyword_patterns: Dict[str, List[Tuple[str, re.Pattern]]] = {}
        for category, phrases in keywords.items():
            unique = list(dict.fromkeys(p.lower() for p in phrases))
            self._keyword_patterns[category] = [(p, keyword_pattern(p)) for p in unique]

        self._fallback_patterns = {
            category: re.compile(pattern, re.IGNORECASE)
            for category, pattern in patterns.items()
        }

    def keyword_matches(self, text: str) -> Dict[str, List[str]]:
        """Matched keyword phrases per category"""
        return {
            category: [phrase for phrase, pattern in compiled if pattern.search(text)]
            for category, compiled in self._keyword_patterns.items()
        }

    def is_accepted(self, matches: List[str]) -> bool:
        if len(matches) >= self.min_matches:
            return True
        return len(matches) == 1 and len(matches[0]) > self.strong_keyword_length

    def classify(self, title: str, body_text: str, source_category: Optional[str] = None) -> List[str]:
        """
        Categories for an article, most relevant first.

        Args:
            title: Article headline
            body_text: Snippet or body text
            source_category: Category declared for the feed, used as a weak prior

        Returns:
            Up to max_categories category names
        """
        content = f"{title} {body_text}"

        scores: Dict[str, int] = {}
        if source_category:
            scores[source_category] = 1

        for category, matches in self.keyword_matches(content).items():
            if self.is_accepted(matches):
                scores[category] = scores.get(category, 0) + len(matches)

        # sorted() is stable: ties keep seed first, then table order
        ranked = sorted(scores.items(), key=lambda kv: kv[1], reverse=True)
        categories = [category for category, _ in ranked[: self.max_categories]]

        if not categories:
            categories = self.fallback_categories(title)

        return categories

    def fallback_categories(self, title: str) -> List[str]:
        return [
            category
            for category, pattern in self._fallback_patterns.items()
            if pattern.search(title)
        ]
