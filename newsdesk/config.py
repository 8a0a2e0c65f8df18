# newsdesk/config.py
import os

# Environment variables are set directly by the host
# No need for python-dotenv
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Generative summaries (optional, the extractive summary is always available)
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
ENABLE_AI_SUMMARIES = os.getenv("ENABLE_AI_SUMMARIES", "false").lower() == "true"
GENERATIVE_SUMMARY_LIMIT = int(os.getenv("GENERATIVE_SUMMARY_LIMIT", "5"))
SUMMARY_TIMEOUT_SECONDS = float(os.getenv("SUMMARY_TIMEOUT_SECONDS", "15"))

FEED_USER_AGENT = os.getenv(
    "FEED_USER_AGENT",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 Newsdesk/1.0",
)

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

# Verify they're usable
if GENERATIVE_SUMMARY_LIMIT < 0:
    raise ValueError("GENERATIVE_SUMMARY_LIMIT must not be negative!")
