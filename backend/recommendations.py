"""Fixed-order rule lists that turn scores into advice.

Rules are evaluated top to bottom and the output is truncated, so earlier
rules always win a slot over later ones.
"""

from models import CategoryScore, PerformanceReport, TechnicalSeoReport

MAX_TEXT_RECOMMENDATIONS = 6
MAX_URL_RECOMMENDATIONS = 8


def text_recommendations(
    breakdown: dict[str, CategoryScore],
    word_count: int,
    readability_score: float,
    keyword_count: int,
) -> list[str]:
    recommendations: list[str] = []

    if word_count < 300:
        recommendations.append("Add more content - aim for at least 300 words for better SEO performance")
    elif word_count < 600:
        recommendations.append("Consider expanding your content to 600+ words for improved search rankings")

    if readability_score < 40:
        recommendations.append("Improve readability by using shorter sentences and simpler words")
    elif readability_score < 60:
        recommendations.append(
            "Good readability, but could be improved with shorter paragraphs and clearer language"
        )

    organization = breakdown["Content Organization"]["score"]
    if organization < 15:
        recommendations.append("Add more headings (H1, H2, H3) to better structure your content")
        recommendations.append("Use bullet points or numbered lists to break up text")

    if keyword_count < 5:
        recommendations.append("Include more relevant keywords naturally throughout your content")

    if breakdown["Readability"]["score"] >= 15:
        recommendations.append("✓ Excellent readability - your content is easy to understand")

    if organization >= 15:
        recommendations.append("✓ Good content structure with proper headings and formatting")

    return recommendations[:MAX_TEXT_RECOMMENDATIONS]


def url_recommendations(technical: TechnicalSeoReport, performance: PerformanceReport) -> list[str]:
    recommendations: list[str] = []

    if not technical["canonical_tag"]["found"]:
        recommendations.append(
            "Consider adding a canonical link tag to help search engines understand your preferred URL version"
        )

    title = technical["title_tag"]
    if not title["found"]:
        recommendations.append("Adding a title tag would significantly boost your search engine visibility")
    elif not 30 <= title.get("length", 0) <= 60:
        recommendations.append("Fine-tune your title tag length to 30-60 characters for optimal search results")

    description = technical["meta_description"]
    if not description["found"]:
        recommendations.append(
            "A meta description would help improve your search result snippets and click-through rates"
        )
    elif not 120 <= description.get("length", 0) <= 160:
        recommendations.append(
            "Optimize your meta description to 120-160 characters for the best search result display"
        )

    missing_og = technical["open_graph"].get("missing", [])
    if missing_og:
        recommendations.append(
            f"Enhance social media sharing by adding these Open Graph tags: {', '.join(missing_og)}"
        )

    if not technical["schema_markup"]["found"]:
        recommendations.append(
            "Consider implementing Schema.org structured data to help search engines better understand your content"
        )

    if not technical["robots_txt"]["found"]:
        recommendations.append("Adding a robots.txt file would help guide search engine crawlers")

    if performance["response_time"]["ms"] > 500:
        recommendations.append(
            "Improving server response time would enhance user experience (currently over 500ms)"
        )

    js = performance["js_minified"]
    if not js["found"] and js.get("count", 0) > 0:
        recommendations.append("Minifying JavaScript files could help reduce loading times")

    css = performance["css_minified"]
    if not css["found"] and css.get("count", 0) > 0:
        recommendations.append("Minifying CSS files would help optimize your page loading speed")

    images = performance["image_optimization"]
    if not images["optimized"] and images.get("count", 0) > 0:
        recommendations.append("Adding alt tags to images would improve accessibility and SEO")

    if performance["request_count"]["count"] > 50:
        recommendations.append("Reducing HTTP requests could help improve your page loading speed")

    return recommendations[:MAX_URL_RECOMMENDATIONS]
