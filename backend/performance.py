"""Performance proxies derived from the HTML alone (no network waterfall)."""

from bs4 import BeautifulSoup

from models import PerformanceFinding, PerformanceReport

AVERAGE_HTML_KB = 33


def _is_stylesheet(tag) -> bool:
    rel = tag.get("rel") or []
    if isinstance(rel, str):
        rel = rel.split()
    return "stylesheet" in (r.lower() for r in rel)


def _request_count_message(total: int) -> str:
    if total <= 30:
        return f"Your page makes {total} requests, which is quite efficient!"
    if total <= 50:
        return f"Your page makes {total} requests, which is reasonable but could potentially be optimized."
    return f"Your page makes {total} requests. Consider combining resources to reduce this number."


def _response_time_message(ms: int) -> str:
    if ms < 200:
        return f"Fantastic! Your response time of {ms}ms is excellent."
    if ms < 500:
        return f"Good work! Your response time of {ms}ms is solid."
    if ms < 1000:
        return f"Your response time of {ms}ms is acceptable, though there's room for improvement."
    return f"Your response time of {ms}ms could benefit from optimization."


def _html_size_finding(html: str) -> PerformanceFinding:
    html_bytes = len(html.encode("utf-8"))
    size_kb = round(html_bytes / 1024, 1)
    if size_kb < AVERAGE_HTML_KB:
        message = f"Your HTML document is {size_kb} KB, which is nicely under the average of 33 KB!"
    else:
        message = (
            f"Your HTML document is {size_kb} KB. While this is above the 33 KB average, "
            "it's not necessarily problematic depending on your content."
        )
    return {"size": f"{size_kb} KB", "message": message, "bytes": html_bytes}


def analyze_performance(html: str, response_time_ms: int) -> PerformanceReport:
    soup = BeautifulSoup(html, "html.parser")

    scripts = soup.find_all("script", src=True)
    stylesheets = [link for link in soup.find_all("link") if _is_stylesheet(link)]
    images = soup.find_all("img")
    total_requests = len(scripts) + len(stylesheets) + len(images) + 1

    js_minified = any(".min." in (s.get("src") or "") for s in scripts)
    css_minified = any(".min." in (link.get("href") or "") for link in stylesheets)

    missing_alt = sum(1 for img in images if not (img.get("alt") or "").strip())
    images_optimized = missing_alt == 0 and len(images) > 0

    if images_optimized:
        image_message = "Well done! Your images are properly optimized with alt tags for accessibility."
    elif not images:
        image_message = "No images detected on this page."
    else:
        image_message = f"{missing_alt} of your images could benefit from alt tags for better accessibility and SEO."

    return {
        "expires_headers": {
            "found": False,
            "message": (
                "We're unable to check expires headers from client-side analysis, "
                "but this is a common optimization opportunity."
            ),
        },
        "js_minified": {
            "found": js_minified,
            "message": (
                "Great! Your JavaScript files appear to be minified, which helps with loading speed."
                if js_minified
                else "Consider minifying your JavaScript files to improve loading performance."
            ),
            "count": len(scripts),
        },
        "css_minified": {
            "found": css_minified,
            "message": (
                "Excellent! Your CSS files appear to be minified for optimal performance."
                if css_minified
                else "You might want to consider minifying your CSS files for better performance."
            ),
            "count": len(stylesheets),
        },
        "request_count": {"count": total_requests, "message": _request_count_message(total_requests)},
        "html_size": _html_size_finding(html),
        "response_time": {
            "time": f"{response_time_ms}ms",
            "message": _response_time_message(response_time_ms),
            "ms": response_time_ms,
        },
        "image_optimization": {
            "optimized": images_optimized,
            "message": image_message,
            "count": len(images),
        },
    }
