"""Page fetcher: download a target URL and its robots.txt.

The page fetch is strict (non-2xx and network failures are errors); the
robots.txt fetch never raises.
"""

import logging
import os
import time
from urllib.parse import urlparse

import requests

from errors import UpstreamError, ValidationError
from models import FetchedPage, RobotsTxtResult

logger = logging.getLogger(__name__)

PAGE_FETCH_TIMEOUT_SECONDS = float(os.getenv("PAGE_FETCH_TIMEOUT_SECONDS", "10"))

_REQUEST_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/122.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.5",
    "Accept-Encoding": "gzip, deflate",
    "Connection": "keep-alive",
}

_ROBOTS_HEADERS = {"User-Agent": "SEOscope-Bot/1.0"}


def validate_url(url: object) -> str:
    """Return the normalized URL or raise ValidationError."""
    if not url or not isinstance(url, str):
        raise ValidationError("Please provide a valid URL to analyze")

    candidate = url.strip()
    try:
        parsed = urlparse(candidate)
    except ValueError:
        parsed = None
    if parsed is None or parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValidationError(
            "The provided URL format appears to be invalid. Please check and try again."
        )
    return parsed.geturl()


def origin_of(url: str) -> str:
    parsed = urlparse(url)
    return f"{parsed.scheme}://{parsed.netloc}"


def _decode_body(response: requests.Response) -> str:
    # requests assumes ISO-8859-1 for text/* without a charset
    if "charset=" in response.headers.get("Content-Type", "").lower():
        return response.text
    try:
        return response.content.decode("utf-8")
    except UnicodeDecodeError:
        response.encoding = response.apparent_encoding or "utf-8"
        return response.text


def fetch_page(url: str) -> FetchedPage:
    """
    GET `url` and return its HTML with the measured latency.

    Latency covers sending the request through reading the full body.
    """
    start = time.perf_counter()
    try:
        response = requests.get(url, timeout=PAGE_FETCH_TIMEOUT_SECONDS, headers=_REQUEST_HEADERS)
    except requests.RequestException as e:
        logger.warning("Page fetch failed for %s: %s", url, e)
        raise UpstreamError(
            "We couldn't reach that URL. Please verify it is accessible and try again.",
            details=str(e),
            status_code=400,
        ) from e
    response_time_ms = int((time.perf_counter() - start) * 1000)

    if not response.ok:
        logger.info("Page fetch for %s returned %s", url, response.status_code)
        raise UpstreamError(
            f"We encountered an issue accessing the URL: {response.status_code} {response.reason}. "
            "Please verify the URL is accessible and try again.",
            status_code=400,
        )

    return {
        "url": url,
        "html": _decode_body(response),
        "status_code": response.status_code,
        "response_time_ms": response_time_ms,
    }


def check_robots_txt(origin: str) -> RobotsTxtResult:
    """Look for `{origin}/robots.txt`. Any failure means "not found"."""
    try:
        response = requests.get(
            f"{origin}/robots.txt",
            timeout=PAGE_FETCH_TIMEOUT_SECONDS,
            headers=_ROBOTS_HEADERS,
        )
    except requests.RequestException as e:
        logger.info("robots.txt fetch failed for %s: %s", origin, e)
        return {"found": False}

    if not response.ok:
        return {"found": False}
    return {"found": True, "content": response.text}
