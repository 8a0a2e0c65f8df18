# newsdesk/services/summary_service.py
"""
Best-effort generative summaries using Gemini.
Any failure falls back to a plain sentence extract; callers never see an error.
"""
import asyncio
import logging
import re
from typing import Optional, Tuple

from google import genai
from google.genai import types

from newsdesk.config import GEMINI_API_KEY, GEMINI_MODEL, SUMMARY_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)

_FRAGMENT_SPLIT = re.compile(r"[.!?]+")


def generate_fallback_summary(title: str, content: str) -> str:
    """First few sentences of the content, trimmed to about 200 characters"""
    fragments = [s.strip() for s in _FRAGMENT_SPLIT.split(content or "") if len(s.strip()) > 20]
    fallback = ". ".join(fragments[:3]).strip()

    if len(fallback) > 100:
        return fallback[:200] + "..."

    if len(fallback) < 50:
        return (
            f"{title} - This article provides important information about current events. "
            "Please read the full article for complete details and context."
        )

    return fallback


class GeminiSummarizer:
    """Summarises articles with Gemini"""

    def __init__(
        self,
        api_key: Optional[str] = GEMINI_API_KEY,
        model: str = GEMINI_MODEL,
        timeout: float = SUMMARY_TIMEOUT_SECONDS,
    ):
        self.timeout = timeout
        if api_key:
            self.client = genai.Client(api_key=api_key)
            self.model = model
        else:
            self.client = None
            self.model = None
            logger.warning("GEMINI_API_KEY not set. Generative summaries will use the fallback.")

    def _build_prompt(self, title: str, content: str, source: str) -> str:
        return f"""Please provide a concise 1-minute summary of this news article. Focus on the key facts, main points, and essential information that someone could read in about 60 seconds.

Title: {title}
Source: {source or 'News Article'}

Article Content:
{content}

Guidelines for summary:
- Keep it to 3-4 sentences maximum (150-200 words)
- Focus on who, what, when, where, why, and how
- Include the most important facts and outcomes
- Maintain neutral, journalistic tone
- Start with the most important information
- Only return the summary text, no additional commentary

Summary:"""

    async def summarize(self, title: str, content: str, source: str = "") -> Tuple[str, bool]:
        """
        Summarise an article.

        Args:
            title: Article headline
            content: Article text
            source: Feed name, included in the prompt

        Returns:
            (summary, is_fallback)
        """
        if not self.client:
            return generate_fallback_summary(title, content), True

        try:
            response = await asyncio.wait_for(
                asyncio.to_thread(
                    self.client.models.generate_content,
                    model=self.model,
                    contents=self._build_prompt(title, content, source),
                    config=types.GenerateContentConfig(
                        temperature=0.3,
                        top_k=40,
                        top_p=0.95,
                        max_output_tokens=300,
                    ),
                ),
                timeout=self.timeout,
            )
            summary = (response.text or "").strip()
        except asyncio.TimeoutError:
            logger.warning(f"Summary timed out for: {title[:50]}")
            return generate_fallback_summary(title, content), True
        except Exception as e:
            logger.warning(f"Summary generation failed for '{title[:50]}': {e}")
            return generate_fallback_summary(title, content), True

        if not summary:
            logger.warning("No summary generated, using fallback")
            return generate_fallback_summary(title, content), True

        return summary, False
