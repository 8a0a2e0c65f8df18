# newsdesk/ai_pipeline/region_filter.py
import re
from typing import Dict, List, Optional

from newsdesk.ai_pipeline.feed_config import ALL_REGIONS
from newsdesk.ai_pipeline.text import keyword_pattern
from newsdesk.models.news import Article, RegionProfile


class RegionFilter:
    """Decides whether an article belongs to the selected region"""

    def __init__(self):
        # Patterns per profile code, built on first use
        self._pattern_cache: Dict[str, List[re.Pattern]] = {}

    def _patterns(self, profile: RegionProfile) -> List[re.Pattern]:
        if profile.code not in self._pattern_cache:
            terms = list(profile.keywords) + list(profile.city_names)
            self._pattern_cache[profile.code] = [keyword_pattern(term) for term in terms]
        return self._pattern_cache[profile.code]

    def is_relevant(self, article: Article, region_code: Optional[str], profile: Optional[RegionProfile]) -> bool:
        """
        Relevance of an article to a region.

        Articles from the region's own feeds always pass. National articles pass
        when the region name, one of its keywords, or one of its cities appears
        in the title or snippet.
        """
        if not region_code or region_code.lower() == ALL_REGIONS or profile is None:
            return True

        if article.region_code and article.region_code.upper() == profile.code:
            return True

        content = f"{article.title} {article.snippet_text}".lower()

        if profile.display_name.lower() in content:
            return True

        return any(pattern.search(content) for pattern in self._patterns(profile))
