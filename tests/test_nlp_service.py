"""Tests for the TextRazor wrapper: retry policy and payload parsing."""

import os
import sys
import unittest
from pathlib import Path
from unittest import mock

import requests

BACKEND_DIR = Path(__file__).resolve().parent.parent / "backend"
sys.path.insert(0, str(BACKEND_DIR))

import nlp_service  # noqa: E402
from errors import ConfigurationError, UpstreamError  # noqa: E402
from keywords import extract_keywords  # noqa: E402
from models import AnnotatedDocument  # noqa: E402


def fake_response(status_code, payload=None, text=""):
    response = mock.Mock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.text = text
    response.json.return_value = payload or {}
    return response


def payload_with_entity(name):
    return {"response": {"entities": [{"matchedText": name, "relevanceScore": 0.9}]}}


class TestAnnotateText(unittest.TestCase):
    def setUp(self):
        env = mock.patch.dict(os.environ, {"TEXTRAZOR_API_KEY": "test-key"})
        env.start()
        self.addCleanup(env.stop)
        self.sleep = mock.Mock()

    def test_missing_key(self):
        with mock.patch.dict(os.environ, {"TEXTRAZOR_API_KEY": ""}):
            with mock.patch("nlp_service.requests.post") as post:
                with self.assertRaises(ConfigurationError):
                    nlp_service.annotate_text("some text here")
                post.assert_not_called()

    def test_rate_limited_twice_then_ok(self):
        responses = [
            fake_response(429, payload_with_entity("First"), "slow down"),
            fake_response(429, payload_with_entity("Second"), "slow down"),
            fake_response(200, payload_with_entity("Third")),
        ]
        with mock.patch("nlp_service.requests.post", side_effect=responses) as post:
            document = nlp_service.annotate_text("some text here", sleep=self.sleep)

        self.assertEqual(post.call_count, 3)
        self.assertEqual(self.sleep.call_args_list, [mock.call(1.0), mock.call(2.0)])
        self.assertEqual(document.entities[0].matched_text, "Third")

    def test_rate_limited_three_times_fails(self):
        responses = [fake_response(429, text="slow down") for _ in range(3)]
        with mock.patch("nlp_service.requests.post", side_effect=responses) as post:
            with self.assertRaises(UpstreamError) as ctx:
                nlp_service.annotate_text("some text here", sleep=self.sleep)
        self.assertEqual(post.call_count, 3)
        self.assertIn("429", ctx.exception.details)
        self.assertEqual(ctx.exception.status_code, 500)

    def test_other_error_is_terminal(self):
        with mock.patch("nlp_service.requests.post", return_value=fake_response(500, text="boom")) as post:
            with self.assertRaises(UpstreamError):
                nlp_service.annotate_text("some text here", sleep=self.sleep)
        self.assertEqual(post.call_count, 1)
        self.sleep.assert_not_called()

    def test_transport_error_retried_once(self):
        side_effect = [requests.ConnectionError("reset"), fake_response(200, payload_with_entity("Ok"))]
        with mock.patch("nlp_service.requests.post", side_effect=side_effect) as post:
            document = nlp_service.annotate_text("some text here", sleep=self.sleep)
        self.assertEqual(post.call_count, 2)
        self.sleep.assert_called_once_with(1.0)
        self.assertEqual(document.entities[0].matched_text, "Ok")

    def test_transport_error_twice_propagates(self):
        side_effect = [requests.Timeout("slow"), requests.Timeout("slow")]
        with mock.patch("nlp_service.requests.post", side_effect=side_effect) as post:
            with self.assertRaises(UpstreamError):
                nlp_service.annotate_text("some text here", sleep=self.sleep)
        self.assertEqual(post.call_count, 2)

    def test_request_shape(self):
        with mock.patch("nlp_service.requests.post", return_value=fake_response(200, {})) as post:
            nlp_service.annotate_text("some text here", sleep=self.sleep)
        kwargs = post.call_args.kwargs
        self.assertEqual(kwargs["headers"], {"X-TextRazor-Key": "test-key"})
        self.assertEqual(kwargs["data"]["text"], "some text here")
        self.assertIn("sentiment", kwargs["data"]["extractors"])
        self.assertEqual(kwargs["timeout"], nlp_service.TEXTRAZOR_TIMEOUT_SECONDS)


class TestAnnotatedDocument(unittest.TestCase):
    def test_defaults_for_missing_fields(self):
        document = AnnotatedDocument.from_api_payload({"response": {}})
        self.assertEqual(document.entities, [])
        self.assertEqual(document.words, [])
        self.assertEqual(document.sentiment.score, 0)
        self.assertEqual(document.sentiment.label, "neutral")
        self.assertEqual(document.sentiment.confidence, 0.5)

    def test_null_collections(self):
        document = AnnotatedDocument.from_api_payload(
            {"response": {"entities": None, "topics": None, "sentences": None, "sentiment": None}}
        )
        self.assertEqual(document.topics, [])
        self.assertEqual(document.sentiment.label, "neutral")

    def test_null_fields_take_defaults(self):
        document = AnnotatedDocument.from_api_payload(
            {
                "response": {
                    "entities": [{"matchedText": "Paris", "relevanceScore": None, "dbpediaTypes": None}],
                    "sentences": [{"words": None}, {"words": [{"token": None, "lemma": "city"}]}],
                    "sentiment": {"score": None, "label": None},
                }
            }
        )
        entity = document.entities[0]
        self.assertEqual(entity.relevance_score, 0.0)
        self.assertEqual(entity.dbpedia_types, [])
        self.assertEqual([w.lemma for w in document.words], ["city"])
        self.assertEqual(document.words[0].token, "")
        self.assertEqual(document.sentiment.score, 0.0)
        self.assertEqual(document.sentiment.label, "neutral")

        keywords = extract_keywords("Paris is a lovely city.", document.entities, document.words)
        self.assertEqual(keywords[0]["text"], "Paris")
        self.assertEqual(keywords[0]["relevance_score"], 0.8)

    def test_words_flattened_across_sentences(self):
        document = AnnotatedDocument.from_api_payload(
            {
                "response": {
                    "sentences": [
                        {"words": [{"token": "Hello", "lemma": "hello", "partOfSpeech": "UH"}]},
                        {"words": [{"token": "World", "lemma": "world", "partOfSpeech": "NN"}]},
                        {},
                    ]
                }
            }
        )
        self.assertEqual([w.lemma for w in document.words], ["hello", "world"])
        self.assertEqual(document.words[1].part_of_speech, "NN")

    def test_entity_primary_type(self):
        document = AnnotatedDocument.from_api_payload(
            {"response": {"entities": [{"matchedText": "Paris", "type": ["Place"], "freebaseTypes": ["/location"]}]}}
        )
        self.assertEqual(document.entities[0].primary_type, "/location")

    def test_non_dict_payload(self):
        self.assertEqual(AnnotatedDocument.from_api_payload(None).entities, [])


if __name__ == "__main__":
    unittest.main()
