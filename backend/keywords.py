"""Keyword extraction: TextRazor entities and word tags merged with raw frequency.

Precedence is entity > noun/adjective > frequent; the first source to claim a
normalized (lower-cased) text keeps it.
"""

import re
from collections import Counter

from models import KeywordCandidate, TextRazorEntity, TextRazorWord

MAX_KEYWORDS = 20
MIN_CANDIDATES_BEFORE_BACKFILL = 8
FREQUENT_POOL_SIZE = 15

STOP_WORDS = frozenset(
    {
        "a", "an", "and", "are", "as", "at", "be", "by", "for", "from", "has", "he",
        "in", "is", "it", "its", "of", "on", "that", "the", "to", "was", "were",
        "will", "with", "would", "you", "your", "this", "they", "them", "their",
        "have", "had", "having", "do", "does", "did", "doing", "can", "could",
        "should", "may", "might", "must", "shall", "am", "been", "being", "me",
        "my", "myself", "we", "our", "ours", "ourselves", "yours", "yourself",
        "yourselves", "him", "his", "himself", "she", "her", "hers", "herself",
        "itself", "theirs", "themselves", "what", "which", "who", "whom", "these",
        "those", "i",
    }
)

_ALPHA_TOKEN = re.compile(r"\b[a-z]+\b", re.ASCII)
_PUNCTUATION = re.compile(r"[^\w\s]")


def alphabetic_tokens(text: str) -> list[str]:
    """Lower-cased runs of ASCII letters, punctuation treated as whitespace."""
    return _ALPHA_TOKEN.findall(_PUNCTUATION.sub(" ", text.lower()))


def word_frequencies(tokens: list[str]) -> Counter:
    return Counter(t for t in tokens if len(t) > 3 and t not in STOP_WORDS)


def extract_keywords(
    text: str,
    entities: list[TextRazorEntity],
    words: list[TextRazorWord],
) -> list[KeywordCandidate]:
    """Return at most 20 keyword candidates, highest relevance first."""
    tokens = alphabetic_tokens(text)
    frequencies = word_frequencies(tokens)
    seen: set[str] = set()
    candidates: list[KeywordCandidate] = []

    for entity in entities:
        matched = entity.matched_text
        if len(matched) <= 2:
            continue
        normalized = matched.lower()
        if normalized in seen:
            continue
        seen.add(normalized)
        candidates.append(
            {
                "text": matched,
                "relevance_score": entity.relevance_score or 0.8,
                "confidence": entity.confidence_score or 0.8,
                "frequency": frequencies.get(normalized) or 1,
                "positions": [entity.starting_pos],
                "type": "entity",
            }
        )

    for word in words:
        lemma = word.lemma
        if len(lemma) <= 4:
            continue
        normalized = lemma.lower()
        if normalized in seen:
            continue
        pos = word.part_of_speech
        if "NN" in pos:
            kind, score = "noun", 0.6
        elif "JJ" in pos:
            kind, score = "adjective", 0.5
        else:
            continue
        seen.add(normalized)
        candidates.append(
            {
                "text": lemma,
                "relevance_score": score,
                "confidence": score,
                "frequency": frequencies.get(normalized) or 1,
                "positions": [word.starting_pos],
                "type": kind,
            }
        )

    if len(candidates) < MIN_CANDIDATES_BEFORE_BACKFILL:
        total_tokens = max(len(tokens), 1)
        for token, frequency in frequencies.most_common(FREQUENT_POOL_SIZE):
            if token in seen or frequency <= 2:
                continue
            seen.add(token)
            candidates.append(
                {
                    "text": token,
                    "relevance_score": min(0.7, frequency / total_tokens * 20),
                    "confidence": 0.5,
                    "frequency": frequency,
                    "positions": [],
                    "type": "frequent",
                }
            )

    candidates.sort(key=lambda c: c["relevance_score"], reverse=True)
    return candidates[:MAX_KEYWORDS]


def top_keyword_density(keywords: list[KeywordCandidate], total_words: int) -> float:
    if not keywords:
        return 0.0
    return keywords[0]["frequency"] / max(total_words, 1) * 100


def keyword_density_table(keywords: list[KeywordCandidate], total_words: int) -> list[dict]:
    return [
        {
            "keyword": keyword["text"],
            "density": keyword["frequency"] / max(total_words, 1) * 100,
            "count": keyword["frequency"],
            "type": keyword["type"],
        }
        for keyword in keywords[:10]
    ]


def analyze_target_keyword(text: str, keyword: str, word_count: int, paragraphs: list[str]) -> dict:
    """Frequency, density and placement of a user-supplied keyword."""
    needle = keyword.lower()
    matches = re.findall(re.escape(needle), text, flags=re.I)
    density = len(matches) / max(word_count, 1) * 100
    return {
        "keyword": keyword,
        "frequency": len(matches),
        "density": round(density, 2),
        "in_title": needle in text.lower(),
        "first_paragraph": bool(paragraphs) and needle in paragraphs[0].lower(),
        "distribution": len(matches) / max(len(paragraphs), 1),
    }


def title_suggestions(top_keywords: list[str], year: int) -> list[str]:
    first = top_keywords[0] if top_keywords else None
    second = top_keywords[1] if len(top_keywords) > 1 else None
    return [
        f"{first or 'Complete'} Guide: {second or 'Everything You Need to Know'}",
        f"How to Master {first or 'Your Topic'} in {year}",
        f"{first or 'Essential'} Tips for {second or 'Success'} | Expert Guide",
        f"The Ultimate {first or 'Resource'} for {second or 'Professionals'}",
        f"{first or 'Advanced'} Strategies for {second or 'Growth'}",
    ]


def meta_description_suggestion(text: str, top_keywords: list[str]) -> str:
    first_sentences = ". ".join(re.split(r"[.!?]", text)[:3]).strip()
    if len(first_sentences) > 160:
        description = first_sentences[:157] + "..."
    else:
        description = first_sentences

    if len(description) < 120 and top_keywords:
        description += f" Learn about {' and '.join(top_keywords[:2])}."
    return description
