"""Weighted rubrics for the text and URL pipelines."""

from models import CategoryScore, PerformanceReport, ScoreResult, TechnicalSeoReport

# Category maximums sum to 110; the total is clamped to 100 afterwards.
TEXT_CATEGORY_MAX = {
    "Content Length": 20,
    "Readability": 20,
    "Sentence Structure": 15,
    "Content Organization": 20,
    "Keyword Usage": 15,
    "Multimedia & Links": 10,
    "Content Quality": 10,
}

GRADE_THRESHOLDS = ((80, "A"), (70, "B"), (60, "C"), (50, "D"))


def grade_for(raw_score: float) -> str:
    for threshold, grade in GRADE_THRESHOLDS:
        if raw_score >= threshold:
            return grade
    return "F"


def _category(name: str, score: int, reason: str) -> CategoryScore:
    return {"score": score, "max_score": TEXT_CATEGORY_MAX[name], "reason": reason}


def calculate_text_score(
    word_count: int,
    sentence_count: int,
    paragraph_count: int,
    avg_words_per_sentence: float,
    readability_score: float,
    keyword_count: int,
    heading_count: int,
    list_count: int,
    link_count: int,
    image_count: int,
    keyword_density: float,
    sentiment_score: float,
) -> ScoreResult:
    """
    Score text content out of 100 across seven categories.

    The grade is taken from the raw sum before the total is clamped.
    """
    breakdown: dict[str, CategoryScore] = {}

    length_score = 0
    if word_count >= 300:
        length_score += 8
    if word_count >= 600:
        length_score += 6
    if word_count >= 1200:
        length_score += 6
    breakdown["Content Length"] = _category(
        "Content Length", length_score, f"{word_count} words (300+ recommended for SEO)"
    )

    readability_points = 0
    if readability_score >= 40:
        readability_points += 10
    if readability_score >= 60:
        readability_points += 10
    breakdown["Readability"] = _category(
        "Readability", readability_points, f"Flesch score: {readability_score} (60+ is ideal)"
    )

    structure_score = 0
    if avg_words_per_sentence <= 20:
        structure_score += 8
    if avg_words_per_sentence <= 15:
        structure_score += 4
    if sentence_count >= 5:
        structure_score += 3
    breakdown["Sentence Structure"] = _category(
        "Sentence Structure",
        structure_score,
        f"Avg {avg_words_per_sentence:.1f} words/sentence (15-20 ideal)",
    )

    organization_score = 0
    if paragraph_count > 2:
        organization_score += 5
    if heading_count > 0:
        organization_score += 10
    if list_count > 0:
        organization_score += 3
    if paragraph_count > 5:
        organization_score += 2
    breakdown["Content Organization"] = _category(
        "Content Organization",
        organization_score,
        f"{heading_count} headings, {list_count} lists, {paragraph_count} paragraphs",
    )

    keyword_score = 0
    if keyword_count >= 5:
        keyword_score += 5
    if 1 <= keyword_density <= 3:
        keyword_score += 8
    elif 0.5 < keyword_density < 5:
        keyword_score += 5
    if keyword_count >= 10:
        keyword_score += 2
    breakdown["Keyword Usage"] = _category(
        "Keyword Usage",
        keyword_score,
        f"{keyword_count} keywords, {keyword_density:.1f}% density (1-3% ideal)",
    )

    media_score = 0
    if link_count > 0:
        media_score += 3
    if image_count > 0:
        media_score += 4
    if link_count > 2:
        media_score += 2
    if image_count > 1:
        media_score += 1
    breakdown["Multimedia & Links"] = _category(
        "Multimedia & Links", media_score, f"{link_count} links, {image_count} images"
    )

    quality_score = 0
    if -0.2 < sentiment_score < 0.8:
        quality_score += 3
    if word_count > 500 and avg_words_per_sentence < 25:
        quality_score += 4
    if keyword_count > 8 and keyword_density < 4:
        quality_score += 3
    breakdown["Content Quality"] = _category(
        "Content Quality", quality_score, "Based on sentiment, depth, and keyword balance"
    )

    raw_score = sum(category["score"] for category in breakdown.values())
    return {
        "total_score": min(100, round(raw_score)),
        "grade": grade_for(raw_score),
        "breakdown": breakdown,
    }


def calculate_url_score(technical: TechnicalSeoReport, performance: PerformanceReport) -> int:
    """Score a fetched page: 60 technical points plus 40 performance points."""
    score = 0

    title = technical["title_tag"]
    description = technical["meta_description"]
    if technical["canonical_tag"]["found"]:
        score += 10
    if title["found"] and 30 <= title.get("length", 0) <= 60:
        score += 10
    if description["found"] and 120 <= description.get("length", 0) <= 160:
        score += 10
    if technical["open_graph"]["found"]:
        score += 10
    if technical["schema_markup"]["found"]:
        score += 10
    if technical["robots_txt"]["found"]:
        score += 5
    if not technical["noindex_tag"]["found"]:
        score += 5

    response_ms = performance["response_time"]["ms"]
    if response_ms < 200:
        score += 15
    elif response_ms < 500:
        score += 10
    elif response_ms < 1000:
        score += 5

    if performance["html_size"]["bytes"] < 33000:
        score += 10
    if performance["js_minified"]["found"]:
        score += 5
    if performance["css_minified"]["found"]:
        score += 5
    if performance["image_optimization"]["optimized"]:
        score += 5

    return min(100, score)
