"""
TextRazor API key must be defined in a .env file in the backend root:

TEXTRAZOR_API_KEY=your_real_key_here

One request extracts entities, topics, words and sentiment. HTTP 429 is
retried twice with a linear backoff; a transport error is retried once.
"""

import logging
import os
import time
from pathlib import Path
from typing import Callable

import requests
from dotenv import load_dotenv
from pydantic import ValidationError as PayloadError

from errors import ConfigurationError, UpstreamError
from models import AnnotatedDocument

load_dotenv(dotenv_path=Path(__file__).resolve().parent / ".env")

logger = logging.getLogger(__name__)

TEXTRAZOR_URL = os.getenv("TEXTRAZOR_URL", "https://api.textrazor.com/")
TEXTRAZOR_TIMEOUT_SECONDS = float(os.getenv("TEXTRAZOR_TIMEOUT_SECONDS", "15"))
MAX_RATE_LIMIT_RETRIES = 2
BACKOFF_SECONDS = 1.0

_DBPEDIA_FILTER = "Person,Place,Organisation,Company,Work,Event"


def _request_form(text: str) -> dict[str, str]:
    return {
        "text": text,
        "extractors": "entities,topics,words,phrases,dependency-trees,sentiment,relations",
        "entities.filterDbpediaTypes": _DBPEDIA_FILTER,
        "topics.filterDbpediaTypes": _DBPEDIA_FILTER,
        "cleanup": "true",
        "cleanup.mode": "cleanHTML",
        "cleanup.returnCleaned": "false",
        "entities.enrichmentQueries": "dbpedia_types,freebase_types",
    }


def _post(api_key: str, text: str) -> requests.Response:
    return requests.post(
        TEXTRAZOR_URL,
        headers={"X-TextRazor-Key": api_key},
        data=_request_form(text),
        timeout=TEXTRAZOR_TIMEOUT_SECONDS,
    )


def annotate_text(text: str, sleep: Callable[[float], None] = time.sleep) -> AnnotatedDocument:
    """
    Send `text` to TextRazor and return the parsed annotation.

    Raises ConfigurationError when no key is configured and UpstreamError
    when the service keeps failing.
    """
    api_key = os.getenv("TEXTRAZOR_API_KEY")
    if not api_key:
        raise ConfigurationError("TextRazor API key not configured")

    rate_limit_retries = 0
    transport_retried = False

    while True:
        try:
            response = _post(api_key, text)
        except requests.RequestException as e:
            if transport_retried:
                raise UpstreamError("Failed to analyze text", details=str(e)) from e
            transport_retried = True
            logger.warning("TextRazor request failed, retrying once: %s", e)
            sleep(BACKOFF_SECONDS)
            continue

        if response.ok:
            break

        logger.error(
            "TextRazor API error (attempt %d): %s %s",
            rate_limit_retries + 1,
            response.status_code,
            response.text[:300],
        )
        if response.status_code == 429 and rate_limit_retries < MAX_RATE_LIMIT_RETRIES:
            rate_limit_retries += 1
            sleep(BACKOFF_SECONDS * rate_limit_retries)
            continue

        raise UpstreamError(
            "Failed to analyze text",
            details=f"TextRazor API error: {response.status_code} - {response.text[:300]}",
        )

    try:
        payload = response.json()
    except ValueError as e:
        raise UpstreamError("Failed to analyze text", details="TextRazor returned invalid JSON") from e

    try:
        document = AnnotatedDocument.from_api_payload(payload)
    except PayloadError as e:
        raise UpstreamError("Failed to analyze text", details="Unexpected TextRazor response shape") from e

    logger.info(
        "TextRazor response received: %d entities, %d topics, %d words",
        len(document.entities),
        len(document.topics),
        len(document.words),
    )
    return document
