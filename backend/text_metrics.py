"""Word/sentence/paragraph counts, structure counts and Flesch readability."""

import re

from models import TextMetrics

MIN_TEXT_LENGTH = 10
MAX_TEXT_LENGTH = 50_000

READABILITY_LEVELS = (
    (90, "Very Easy"),
    (80, "Easy"),
    (70, "Fairly Easy"),
    (60, "Standard"),
    (50, "Fairly Difficult"),
    (30, "Difficult"),
)

_VOWEL_RUN = re.compile(r"[aeiouy]+", re.I)
_SENTENCE_SPLIT = re.compile(r"[.!?]+")
_PARAGRAPH_SPLIT = re.compile(r"\n\s*\n")

# Markdown and HTML notations are counted independently and summed.
_MD_HEADING = re.compile(r"^#{1,6}\s", re.M)
_HTML_HEADING = re.compile(r"<h[1-6][^>]*>", re.I)
_MD_LIST_ITEM = re.compile(r"^\s*[-*+]\s", re.M)
_HTML_LIST = re.compile(r"<[uo]l[^>]*>", re.I)
_MD_LINK = re.compile(r"\[.*?\]\(.*?\)")
_HTML_LINK = re.compile(r"<a\s[^>]*>", re.I)
_MD_IMAGE = re.compile(r"!\[.*?\]\(.*?\)")
_HTML_IMAGE = re.compile(r"<img\s[^>]*>", re.I)


def count_words(text: str) -> int:
    return len(text.split())


def split_paragraphs(text: str) -> list[str]:
    return [p for p in _PARAGRAPH_SPLIT.split(text) if p.strip()]


def count_sentences(text: str) -> int:
    return len([s for s in _SENTENCE_SPLIT.split(text) if s.strip()])


def readability_level(flesch_score: float) -> str:
    for threshold, label in READABILITY_LEVELS:
        if flesch_score >= threshold:
            return label
    return "Very Difficult"


def calculate_readability(text: str, avg_words_per_sentence: float) -> dict:
    """
    Approximate Flesch Reading Ease and Flesch-Kincaid grade.

    Syllables are vowel runs over the whole text, so this is a heuristic,
    not a syllabifier. The ease score is clamped to [0, 100].
    """
    syllable_count = len(_VOWEL_RUN.findall(text))
    avg_syllables_per_word = syllable_count / max(count_words(text), 1)

    flesch_score = 206.835 - 1.015 * avg_words_per_sentence - 84.6 * avg_syllables_per_word
    flesch_score = max(0.0, min(100.0, flesch_score))
    flesch_grade = 0.39 * avg_words_per_sentence + 11.8 * avg_syllables_per_word - 15.59

    return {
        "flesch_score": round(flesch_score),
        "flesch_grade": round(flesch_grade, 1),
        "readability_level": readability_level(flesch_score),
    }


def compute_text_metrics(text: str) -> TextMetrics:
    """Compute counts, averages, readability and structure for raw text."""
    paragraphs = split_paragraphs(text)
    clean_text = " ".join(text.split())
    word_count = count_words(clean_text)
    sentence_count = count_sentences(text)
    paragraph_count = max(len(paragraphs), 1)

    avg_words_per_sentence = word_count / max(sentence_count, 1)
    avg_sentences_per_paragraph = sentence_count / paragraph_count

    readability = calculate_readability(text, avg_words_per_sentence)

    return {
        "word_count": word_count,
        "sentence_count": sentence_count,
        "paragraph_count": paragraph_count,
        "paragraphs": paragraphs,
        "avg_words_per_sentence": avg_words_per_sentence,
        "avg_sentences_per_paragraph": avg_sentences_per_paragraph,
        "flesch_score": readability["flesch_score"],
        "flesch_grade": readability["flesch_grade"],
        "readability_level": readability["readability_level"],
        "heading_count": len(_MD_HEADING.findall(text)) + len(_HTML_HEADING.findall(text)),
        "list_count": len(_MD_LIST_ITEM.findall(text)) + len(_HTML_LIST.findall(text)),
        "link_count": len(_MD_LINK.findall(text)) + len(_HTML_LINK.findall(text)),
        "image_count": len(_MD_IMAGE.findall(text)) + len(_HTML_IMAGE.findall(text)),
    }
