"""Insert a keyword into text, or emphasise it where it already appears."""

import random
import re
from typing import Callable, Sequence

INSERTION_TEMPLATES = (
    "This relates to {keyword}, which",
    "When considering {keyword},",
    "The concept of {keyword}",
    "In terms of {keyword},",
)

_SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+")


def insert_keyword(
    text: str,
    keyword: str,
    choose: Callable[[Sequence[str]], str] = random.choice,
) -> str:
    """
    Return `text` with `keyword` woven in.

    If the keyword is missing, a phrase is prepended to the middle sentence
    (or a sentence is appended to single-sentence text). If it is present,
    every case-insensitive occurrence is wrapped in `**`.
    """
    pattern = re.compile(re.escape(keyword), re.I)
    if pattern.search(text):
        return pattern.sub(lambda m: f"**{m.group(0)}**", text)

    sentences = _SENTENCE_BOUNDARY.split(text)
    if len(sentences) <= 1:
        return f"{text} This is related to {keyword}."

    middle = len(sentences) // 2
    phrase = choose(INSERTION_TEMPLATES).format(keyword=keyword)
    sentences[middle] = f"{phrase} {sentences[middle].lower()}"
    return " ".join(sentences)
