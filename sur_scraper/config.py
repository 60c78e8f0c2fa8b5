# sur_scraper/config.py
import os
from dotenv import load_dotenv
load_dotenv()

def parse_timeout(raw):
    """Seconds from SCRAPER_TIMEOUT; unset, zero, negative or non-numeric -> None (library default)."""
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError:
        print(f"[config] ignoring non-numeric SCRAPER_TIMEOUT={raw!r}", flush=True)
        return None
    return value if value > 0 else None

# Fixed targets; never taken from the request so the endpoint can't act as an open proxy
SUR_URL  = "https://www.canada.ca/en/health-canada/services/drug-health-product-review-approval/submissions-under-review.html"
GSUR_URL = "https://www.canada.ca/en/health-canada/services/drug-health-product-review-approval/generic-submissions-under-review.html"

USER_AGENT = os.getenv("SCRAPER_USER_AGENT", "Mozilla/5.0 (compatible; VantageBot/1.0; +https://vantage.app)")
ACCEPT     = "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"
TIMEOUT    = parse_timeout(os.getenv("SCRAPER_TIMEOUT"))

CACHE_MAX_AGE = int(os.getenv("SCRAPER_CACHE_MAX_AGE", "3600"))
SERVER_HOST   = os.getenv("SCRAPER_HOST", "127.0.0.1")
SERVER_PORT   = int(os.getenv("SCRAPER_PORT", "8000"))
ARTIFACT_DIR  = os.getenv("ARTIFACT_DIR", "artifacts")
DEBUG         = os.getenv("SCRAPER_DEBUG", "1") == "1"
