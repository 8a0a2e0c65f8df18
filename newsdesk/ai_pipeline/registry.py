# newsdesk/ai_pipeline/registry.py
"""
Feed source registry: national feeds plus per-state profiles.
Built once at startup and never mutated afterwards.
"""
import logging
from typing import Dict, List, Optional

from newsdesk.ai_pipeline.feed_config import ALL_REGIONS, NATIONAL_FEEDS
from newsdesk.ai_pipeline.region_config import REGION_PROFILES
from newsdesk.models.news import FeedSource, RegionProfile

logger = logging.getLogger(__name__)


class RegistryError(ValueError):
    """Static feed configuration is inconsistent"""


class SourceRegistry:
    def __init__(self, national_feeds: List[Dict], region_profiles: List[Dict]):
        self._national = tuple(FeedSource(**feed) for feed in national_feeds)
        self._profiles: Dict[str, RegionProfile] = {}

        for raw in region_profiles:
            code = raw.get("code", "").strip().upper()
            if not code:
                raise RegistryError(f"Region profile without a code: {raw.get('name')}")
            if code.lower() == ALL_REGIONS:
                raise RegistryError(f"Region code '{ALL_REGIONS}' is reserved")
            if code in self._profiles:
                raise RegistryError(f"Duplicate region code: {code}")

            # State sources carry the region code but no forced category
            sources = [
                FeedSource(name=src["name"], url=src["url"], region_code=code)
                for src in raw.get("sources", [])
            ]
            self._profiles[code] = RegionProfile(
                code=code,
                display_name=raw["name"],
                keywords=list(raw.get("keywords", [])),
                city_names=list(raw.get("cities", [])),
                sources=sources,
            )

        logger.info(
            f"Source registry ready: {len(self._national)} national feeds, "
            f"{len(self._profiles)} regions"
        )

    @classmethod
    def default(cls) -> "SourceRegistry":
        return cls(NATIONAL_FEEDS, REGION_PROFILES)

    @property
    def national_sources(self) -> List[FeedSource]:
        return list(self._national)

    def get_profile(self, region_code: Optional[str]) -> Optional[RegionProfile]:
        """Profile for a region code, None for 'all' or unknown codes"""
        if not region_code:
            return None
        code = region_code.strip().upper()
        if code.lower() == ALL_REGIONS:
            return None
        return self._profiles.get(code)

    def get_sources(self, region_code: Optional[str]) -> List[FeedSource]:
        """
        Sources to fetch for a region selection.

        A known region puts its own feeds first, followed by the national list.
        'all' and unrecognised codes both fall back to the national list.
        """
        profile = self.get_profile(region_code)
        if profile is None:
            if region_code and region_code.strip().lower() != ALL_REGIONS:
                logger.info(f"Unknown region '{region_code}', using national sources")
            return list(self._national)
        return list(profile.sources) + list(self._national)

    def list_regions(self) -> List[RegionProfile]:
        return list(self._profiles.values())
