"""Configuration and environment for the Finviz quote scraper."""
import os
from pathlib import Path

from dotenv import load_dotenv
_root = Path(__file__).resolve().parent.parent
load_dotenv(_root / ".env")

def _get(key: str, default: str = "") -> str:
    return (os.getenv(key) or default).strip()


# Quote page queried for every ticker (?t=TICKER is appended)
QUOTE_URL = _get("FINVIZ_QUOTE_URL", "https://finviz.com/quote.ashx")

# Finviz rejects the default python-requests agent
USER_AGENT = _get(
    "FINVIZ_USER_AGENT",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/124.0.0.0 Safari/537.36",
)

# Seconds to wait for the quote page
REQUEST_TIMEOUT = float(_get("FINVIZ_TIMEOUT", "30"))

LOG_LEVEL = _get("FINWIZ_LOG_LEVEL", "WARNING").upper()
