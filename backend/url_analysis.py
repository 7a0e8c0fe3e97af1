"""URL pipeline: fetch -> robots.txt -> technical checks -> performance -> score."""

import logging

from performance import analyze_performance
from recommendations import url_recommendations
from scoring import calculate_url_score
from scraper import check_robots_txt, fetch_page, origin_of, validate_url
from technical_seo import analyze_technical_seo

logger = logging.getLogger(__name__)


def analyze_url(url: object) -> dict:
    """
    Fetch `url` and build the technical/performance report.

    A failed page fetch raises before any analysis runs.
    """
    valid_url = validate_url(url)
    page = fetch_page(valid_url)
    robots = check_robots_txt(origin_of(valid_url))

    technical = analyze_technical_seo(page["html"], robots)
    performance = analyze_performance(page["html"], page["response_time_ms"])
    score = calculate_url_score(technical, performance)

    logger.info("Analyzed %s: score=%d in %dms", valid_url, score, page["response_time_ms"])
    return {
        "url": valid_url,
        "technical_seo": technical,
        "performance": performance,
        "seo_score": score,
        "recommendations": url_recommendations(technical, performance),
    }
