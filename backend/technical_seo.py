"""Technical SEO checks over a fetched HTML document.

Each check is independent and reports `found` plus a human-readable message.
"""

import json
import re

from bs4 import BeautifulSoup

from models import RobotsTxtResult, TechnicalFinding, TechnicalSeoReport

REQUIRED_OG_TAGS = ("og:title", "og:type", "og:image", "og:url")


def _has_rel(tag, rel: str) -> bool:
    # bs4 parses rel as a multi-valued attribute
    values = tag.get("rel") or []
    if isinstance(values, str):
        values = values.split()
    return rel in (v.lower() for v in values)


def check_canonical(soup: BeautifulSoup) -> TechnicalFinding:
    tag = soup.find(lambda t: t.name == "link" and _has_rel(t, "canonical"))
    if tag is None:
        return {
            "found": False,
            "message": "Consider adding a canonical link tag to help prevent duplicate content issues.",
            "url": None,
        }
    href = tag.get("href")
    return {
        "found": True,
        "message": f"Perfect! Your canonical tag is properly set and points to: {href}",
        "url": href,
    }


def check_noindex(soup: BeautifulSoup) -> TechnicalFinding:
    noindex = any(
        "noindex" in (tag.get("content") or "").lower()
        for tag in soup.find_all("meta", attrs={"name": re.compile(r"^robots$", re.I)})
    )
    return {
        "found": noindex,
        "message": (
            "Note: This page has a noindex directive, so it won't appear in search engine results."
            if noindex
            else "Good! Your page is set to be indexed by search engines."
        ),
    }


def check_open_graph(soup: BeautifulSoup) -> TechnicalFinding:
    tags: dict[str, str] = {}
    for meta in soup.find_all("meta", attrs={"property": re.compile(r"^og:")}):
        prop = meta.get("property")
        content = meta.get("content")
        if prop and content:
            tags[prop] = content

    missing = [name for name in REQUIRED_OG_TAGS if not tags.get(name)]
    return {
        "found": not missing,
        "missing": missing,
        "message": (
            "Excellent! All essential Open Graph meta tags are present for social media sharing."
            if not missing
            else f"To improve social media sharing, consider adding these Open Graph tags: {', '.join(missing)}"
        ),
        "tags": tags,
    }


def check_schema_markup(soup: BeautifulSoup) -> TechnicalFinding:
    scripts = soup.find_all("script", attrs={"type": "application/ld+json"})
    types: list[str] = []
    for script in scripts:
        try:
            data = json.loads(script.string or "")
        except ValueError:
            # invalid JSON-LD is skipped
            continue
        items = data if isinstance(data, list) else [data]
        for item in items:
            if not isinstance(item, dict):
                continue
            schema_type = item.get("@type")
            if isinstance(schema_type, list):
                types.extend(str(t) for t in schema_type if t)
            elif schema_type:
                types.append(str(schema_type))

    found = len(scripts) > 0
    return {
        "found": found,
        "message": (
            f"Great! We found Schema.org markup for: {', '.join(types)}. "
            "This helps search engines understand your content better."
            if found
            else "Adding Schema.org structured data could help search engines better understand your content."
        ),
        "types": types,
    }


def check_meta_description(soup: BeautifulSoup) -> TechnicalFinding:
    tag = soup.find("meta", attrs={"name": re.compile(r"^description$", re.I)})
    content = (tag.get("content") or "") if tag is not None else ""
    length = len(content)

    if tag is None:
        message = "Adding a meta description would help improve your search result snippets and click-through rates."
    elif 120 <= length <= 160:
        message = f"Perfect! Your meta description is {length} characters, which is in the optimal range."
    elif length < 120:
        message = (
            f"Your meta description is {length} characters. "
            "Consider expanding it to 120-160 characters for better search results."
        )
    else:
        message = (
            f"Your meta description is {length} characters. "
            "Consider shortening it to 120-160 characters for optimal display."
        )
    return {"found": tag is not None, "message": message, "content": content, "length": length}


def check_title(soup: BeautifulSoup) -> TechnicalFinding:
    tag = soup.find("title")
    content = tag.get_text() if tag is not None else ""
    length = len(content)

    if tag is None:
        message = "Adding a title tag would significantly improve your search engine visibility."
    elif 30 <= length <= 60:
        message = f"Excellent! Your title tag is {length} characters, which is perfectly optimized."
    elif length < 30:
        message = (
            f"Your title tag is {length} characters. "
            "Consider expanding it to 30-60 characters for better SEO impact."
        )
    else:
        message = (
            f"Your title tag is {length} characters. "
            "For optimal results, consider keeping it between 30-60 characters."
        )
    return {"found": tag is not None, "message": message, "content": content, "length": length}


def robots_txt_finding(robots: RobotsTxtResult) -> TechnicalFinding:
    if robots.get("found"):
        return {
            "found": True,
            "message": "Great! Your robots.txt file is accessible and properly configured.",
            "content": robots.get("content", ""),
        }
    return {
        "found": False,
        "message": "Consider adding a robots.txt file to help guide search engine crawlers.",
    }


def analyze_technical_seo(html: str, robots: RobotsTxtResult | None = None) -> TechnicalSeoReport:
    soup = BeautifulSoup(html, "html.parser")
    return {
        "canonical_tag": check_canonical(soup),
        "noindex_tag": check_noindex(soup),
        "www_redirect": {
            "found": True,
            "message": (
                "We recommend testing both www and non-www versions of your URL "
                "to ensure proper redirects are in place."
            ),
        },
        "robots_txt": robots_txt_finding(robots or {"found": False}),
        "open_graph": check_open_graph(soup),
        "schema_markup": check_schema_markup(soup),
        "meta_description": check_meta_description(soup),
        "title_tag": check_title(soup),
    }
