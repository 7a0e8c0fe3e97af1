"""Tests for the HTML technical-SEO checks and performance heuristics."""

import sys
import unittest
from pathlib import Path

BACKEND_DIR = Path(__file__).resolve().parent.parent / "backend"
sys.path.insert(0, str(BACKEND_DIR))

from performance import analyze_performance  # noqa: E402
from technical_seo import analyze_technical_seo  # noqa: E402

FULL_PAGE = """<!doctype html>
<html>
<head>
  <title>Fresh Roasted Coffee Beans Delivered Weekly</title>
  <meta name="description" content="{description}">
  <link rel="canonical" href="https://x.test/">
  <meta property="og:title" content="Coffee">
  <meta property="og:type" content="website">
  <meta property="og:image" content="https://x.test/cover.png">
  <meta property="og:url" content="https://x.test/">
  <script type="application/ld+json">{{"@context": "https://schema.org", "@type": "Organization"}}</script>
  <script type="application/ld+json">{{ not valid json </script>
  <link rel="stylesheet" href="/static/site.min.css">
  <script src="/static/app.min.js"></script>
</head>
<body>
  <img src="a.png" alt="A cup of coffee">
  <img src="b.png" alt="Beans">
</body>
</html>
""".format(description="x" * 140)


class TestTechnicalSeo(unittest.TestCase):
    def test_canonical_found_with_url(self):
        report = analyze_technical_seo('<html><head><link rel="canonical" href="https://x.test/"></head></html>')
        self.assertTrue(report["canonical_tag"]["found"])
        self.assertEqual(report["canonical_tag"]["url"], "https://x.test/")

    def test_full_page(self):
        report = analyze_technical_seo(FULL_PAGE, {"found": True, "content": "User-agent: *"})
        self.assertFalse(report["noindex_tag"]["found"])
        self.assertTrue(report["open_graph"]["found"])
        self.assertEqual(report["open_graph"]["missing"], [])
        self.assertEqual(report["open_graph"]["tags"]["og:type"], "website")
        self.assertTrue(report["schema_markup"]["found"])
        self.assertEqual(report["schema_markup"]["types"], ["Organization"])
        self.assertEqual(report["meta_description"]["length"], 140)
        self.assertIn("optimal range", report["meta_description"]["message"])
        self.assertEqual(report["title_tag"]["content"], "Fresh Roasted Coffee Beans Delivered Weekly")
        self.assertEqual(report["title_tag"]["length"], 43)
        self.assertTrue(report["robots_txt"]["found"])
        self.assertEqual(report["robots_txt"]["content"], "User-agent: *")
        self.assertTrue(report["www_redirect"]["found"])

    def test_empty_page(self):
        report = analyze_technical_seo("<html><body><p>hi</p></body></html>")
        self.assertFalse(report["canonical_tag"]["found"])
        self.assertIsNone(report["canonical_tag"]["url"])
        self.assertFalse(report["open_graph"]["found"])
        self.assertEqual(report["open_graph"]["missing"], ["og:title", "og:type", "og:image", "og:url"])
        self.assertFalse(report["schema_markup"]["found"])
        self.assertFalse(report["meta_description"]["found"])
        self.assertFalse(report["title_tag"]["found"])
        self.assertFalse(report["robots_txt"]["found"])

    def test_noindex_detected(self):
        html = '<html><head><meta name="robots" content="noindex, nofollow"></head></html>'
        self.assertTrue(analyze_technical_seo(html)["noindex_tag"]["found"])

    def test_invalid_schema_is_skipped(self):
        html = '<script type="application/ld+json">{broken</script>'
        finding = analyze_technical_seo(html)["schema_markup"]
        self.assertTrue(finding["found"])
        self.assertEqual(finding["types"], [])

    def test_schema_type_lists(self):
        html = '<script type="application/ld+json">[{"@type": ["Product", "Offer"]}, {"name": "x"}]</script>'
        self.assertEqual(analyze_technical_seo(html)["schema_markup"]["types"], ["Product", "Offer"])

    def test_og_missing_reported(self):
        html = '<meta property="og:title" content="T"><meta property="og:url" content="">'
        finding = analyze_technical_seo(html)["open_graph"]
        self.assertEqual(finding["missing"], ["og:type", "og:image", "og:url"])
        self.assertIn("og:type, og:image, og:url", finding["message"])

    def test_title_length_messages(self):
        short = analyze_technical_seo("<title>Short</title>")["title_tag"]
        self.assertIn("Consider expanding", short["message"])
        long = analyze_technical_seo(f"<title>{'t' * 70}</title>")["title_tag"]
        self.assertIn("between 30-60", long["message"])


class TestPerformance(unittest.TestCase):
    def test_full_page(self):
        report = analyze_performance(FULL_PAGE, 120)
        self.assertTrue(report["js_minified"]["found"])
        self.assertTrue(report["css_minified"]["found"])
        self.assertEqual(report["js_minified"]["count"], 1)
        self.assertEqual(report["css_minified"]["count"], 1)
        self.assertEqual(report["request_count"]["count"], 5)
        self.assertTrue(report["image_optimization"]["optimized"])
        self.assertEqual(report["html_size"]["bytes"], len(FULL_PAGE.encode("utf-8")))
        self.assertEqual(report["response_time"]["time"], "120ms")
        self.assertIn("Fantastic", report["response_time"]["message"])
        self.assertFalse(report["expires_headers"]["found"])

    def test_unminified_assets(self):
        html = '<script src="/app.js"></script><link rel="stylesheet" href="/site.css"><script>inline()</script>'
        report = analyze_performance(html, 600)
        self.assertFalse(report["js_minified"]["found"])
        self.assertFalse(report["css_minified"]["found"])
        self.assertEqual(report["js_minified"]["count"], 1)
        self.assertEqual(report["request_count"]["count"], 3)
        self.assertIn("acceptable", report["response_time"]["message"])

    def test_images_need_non_empty_alt(self):
        html = '<img src="a.png" alt="ok"><img src="b.png" alt=" "><img src="c.png">'
        finding = analyze_performance(html, 100)["image_optimization"]
        self.assertFalse(finding["optimized"])
        self.assertEqual(finding["count"], 3)
        self.assertTrue(finding["message"].startswith("2 of your images"))

    def test_no_images_is_not_optimized(self):
        finding = analyze_performance("<p>text</p>", 100)["image_optimization"]
        self.assertFalse(finding["optimized"])
        self.assertEqual(finding["message"], "No images detected on this page.")

    def test_html_size_in_kb(self):
        html = "a" * 40960
        finding = analyze_performance(html, 100)["html_size"]
        self.assertEqual(finding["size"], "40.0 KB")
        self.assertIn("above the 33 KB average", finding["message"])

    def test_request_count_messages(self):
        html = "<img src='x.png' alt='x'>" * 60
        finding = analyze_performance(html, 100)["request_count"]
        self.assertEqual(finding["count"], 61)
        self.assertIn("Consider combining resources", finding["message"])


if __name__ == "__main__":
    unittest.main()
