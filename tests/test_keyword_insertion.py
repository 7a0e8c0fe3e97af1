"""Tests for keyword insertion and emphasis."""

import sys
import unittest
from pathlib import Path

BACKEND_DIR = Path(__file__).resolve().parent.parent / "backend"
sys.path.insert(0, str(BACKEND_DIR))

from keyword_insertion import INSERTION_TEMPLATES, insert_keyword  # noqa: E402


def pick(index):
    return lambda options: options[index]


class TestInsertKeyword(unittest.TestCase):
    def test_existing_keyword_is_emphasised(self):
        text = "Coffee is great. I drink COFFEE daily, coffee!"
        result = insert_keyword(text, "coffee")
        self.assertEqual(result, "**Coffee** is great. I drink **COFFEE** daily, **coffee**!")
        self.assertEqual(result.replace("**", ""), text)

    def test_keyword_with_regex_characters(self):
        result = insert_keyword("Learn C++ today.", "c++")
        self.assertEqual(result, "Learn **C++** today.")

    def test_presence_uses_same_matching_as_emphasis(self):
        # "İ".lower() is "i" plus a combining dot, which re.I never matches
        keyword = "i\u0307stanbul"
        result = insert_keyword("İstanbul is big. It is old.", keyword, choose=pick(0))
        self.assertEqual(result, f"İstanbul is big. This relates to {keyword}, which it is old.")

    def test_inserted_into_middle_sentence(self):
        text = "First sentence. Second Sentence here. Third one."
        result = insert_keyword(text, "espresso", choose=pick(1))
        self.assertEqual(
            result,
            "First sentence. When considering espresso, second sentence here. Third one.",
        )

    def test_each_template_can_be_pinned(self):
        text = "One. Two."
        for index, template in enumerate(INSERTION_TEMPLATES):
            result = insert_keyword(text, "tea", choose=pick(index))
            self.assertEqual(result, f"One. {template.format(keyword='tea')} two.")

    def test_single_sentence_gets_appended_sentence(self):
        result = insert_keyword("Just one sentence here", "latte", choose=pick(0))
        self.assertEqual(result, "Just one sentence here This is related to latte.")

    def test_default_chooser_uses_a_template(self):
        result = insert_keyword("One. Two.", "mocha")
        self.assertTrue(any(t.format(keyword="mocha") in result for t in INSERTION_TEMPLATES))


if __name__ == "__main__":
    unittest.main()
