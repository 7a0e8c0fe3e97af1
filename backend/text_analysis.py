"""Text pipeline: validate -> annotate -> metrics -> keywords -> score -> advice."""

import logging
import time
from datetime import datetime

from errors import ValidationError
from keywords import (
    alphabetic_tokens,
    analyze_target_keyword,
    extract_keywords,
    keyword_density_table,
    meta_description_suggestion,
    title_suggestions,
    top_keyword_density,
)
from nlp_service import annotate_text
from recommendations import text_recommendations
from scoring import calculate_text_score
from text_metrics import MAX_TEXT_LENGTH, MIN_TEXT_LENGTH, compute_text_metrics

logger = logging.getLogger(__name__)


def validate_text(text: object) -> str:
    if not text or not isinstance(text, str):
        raise ValidationError("Text content is required")
    if len(text) < MIN_TEXT_LENGTH:
        raise ValidationError(f"Text must be at least {MIN_TEXT_LENGTH} characters long")
    if len(text) > MAX_TEXT_LENGTH:
        raise ValidationError("Text is too long (max 50,000 characters)")
    return text


def analyze_text(text: object, target_keyword: str | None = None) -> dict:
    """
    Run the full text analysis.

    Input is validated before TextRazor is called, so rejected text never
    costs an upstream request.
    """
    text = validate_text(text)
    document = annotate_text(text)
    words = document.words
    sentiment = document.sentiment

    metrics = compute_text_metrics(text)
    keywords = extract_keywords(text, document.entities, words)

    total_words = len(alphabetic_tokens(" ".join(text.split())))
    density = top_keyword_density(keywords, total_words)

    score = calculate_text_score(
        word_count=metrics["word_count"],
        sentence_count=metrics["sentence_count"],
        paragraph_count=metrics["paragraph_count"],
        avg_words_per_sentence=metrics["avg_words_per_sentence"],
        readability_score=metrics["flesch_score"],
        keyword_count=len(keywords),
        heading_count=metrics["heading_count"],
        list_count=metrics["list_count"],
        link_count=metrics["link_count"],
        image_count=metrics["image_count"],
        keyword_density=density,
        sentiment_score=sentiment.score,
    )

    target_analysis = None
    if target_keyword:
        target_analysis = analyze_target_keyword(
            text, target_keyword, metrics["word_count"], metrics["paragraphs"]
        )

    top_keywords = [k["text"] for k in keywords[:5]]
    logger.info(
        "Analyzed %d words: score=%s grade=%s keywords=%d",
        metrics["word_count"],
        score["total_score"],
        score["grade"],
        len(keywords),
    )

    return {
        "word_count": metrics["word_count"],
        "sentence_count": metrics["sentence_count"],
        "paragraph_count": metrics["paragraph_count"],
        "avg_words_per_sentence": round(metrics["avg_words_per_sentence"], 1),
        "avg_sentences_per_paragraph": round(metrics["avg_sentences_per_paragraph"], 1),
        "readability": {
            "flesch_score": metrics["flesch_score"],
            "flesch_grade": metrics["flesch_grade"],
            "readability_level": metrics["readability_level"],
        },
        "keywords": keywords[:15],
        "keyword_density": keyword_density_table(keywords, total_words),
        "target_keyword_analysis": target_analysis,
        "entities": [
            {
                "text": entity.matched_text or "Unknown",
                "type": entity.primary_type,
                "relevance_score": round(entity.relevance_score, 2),
                "confidence": round(entity.confidence_score, 2),
            }
            for entity in document.entities[:10]
        ],
        "topics": [
            {
                "label": topic.label or topic.id or "Unknown Topic",
                "score": round(topic.score, 2),
                "wiki_link": topic.wiki_link,
            }
            for topic in document.topics[:10]
        ],
        "sentiment": {
            "score": round(sentiment.score, 2),
            "label": sentiment.label or "neutral",
            "confidence": round(sentiment.confidence, 2),
        },
        "content_structure": {
            "has_headings": metrics["heading_count"] > 0,
            "heading_count": metrics["heading_count"],
            "list_count": metrics["list_count"],
            "link_count": metrics["link_count"],
            "image_count": metrics["image_count"],
            "has_paragraphs": metrics["paragraph_count"] > 1,
        },
        "seo_analysis": {
            "score": score["total_score"],
            "grade": score["grade"],
            "breakdown": score["breakdown"],
            "title_suggestions": title_suggestions(top_keywords, datetime.now().year),
            "meta_description_suggestion": meta_description_suggestion(text, top_keywords),
            "recommendations": text_recommendations(
                score["breakdown"],
                metrics["word_count"],
                metrics["flesch_score"],
                len(keywords),
            ),
        },
        "processing_info": {
            "textrazor_entities": len(document.entities),
            "textrazor_topics": len(document.topics),
            "textrazor_words": len(words),
            "processing_time": int(time.time() * 1000),
        },
    }
