# newsdesk/ai_pipeline/text.py
import re

from bs4 import BeautifulSoup

_WHITESPACE = re.compile(r"\s+")


def clean_html(text: str) -> str:
    """Strip tags and collapse whitespace"""
    if not text:
        return ""
    if "<" in text:
        text = BeautifulSoup(text, "html.parser").get_text(separator=" ")
    return _WHITESPACE.sub(" ", text).strip()


def keyword_pattern(keyword: str) -> re.Pattern:
    """Case-insensitive, word-boundary anchored pattern for a literal phrase"""
    return re.compile(rf"\b{re.escape(keyword.lower())}\b", re.IGNORECASE)
