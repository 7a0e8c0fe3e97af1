"""
Claude API key must be defined in a .env file in the backend root:

ANTHROPIC_API_KEY=your_real_key_here

The app loads environment variables automatically using python-dotenv.
"""

from datetime import datetime, timezone
import logging
import os
from pathlib import Path

from anthropic import Anthropic, AnthropicError
from dotenv import load_dotenv

from errors import ConfigurationError, UpstreamError, ValidationError

load_dotenv(dotenv_path=Path(__file__).resolve().parent / ".env")

logger = logging.getLogger(__name__)

MODEL = os.getenv("CLAUDE_MODEL", "").strip() or "claude-3-5-sonnet-latest"
TEMPERATURE = 0.7
MAX_TOKENS = int(os.getenv("CLAUDE_MAX_TOKENS", "1500"))
REQUEST_TIMEOUT_SECONDS = float(os.getenv("CLAUDE_TIMEOUT_SECONDS", "60"))

OPTIMIZATION_TYPES = ("keywords", "content", "meta", "structure", "default")

SYSTEM_MESSAGE = "You are an expert SEO content optimizer. Provide actionable, specific recommendations."

KEYWORDS_TEMPLATE = """Analyze this content and suggest 10-15 high-value SEO keywords that should be naturally integrated. Focus on long-tail keywords and semantic variations.

Content: "{text}"
{target_line}

Provide keywords in this format:
- Primary keywords (3-5): [list]
- Long-tail keywords (5-7): [list]
- Semantic variations (3-5): [list]

Also suggest where each keyword type should be placed (title, headings, body, meta description)."""

CONTENT_TEMPLATE = """Optimize this content for SEO while maintaining readability and value. Focus on:
1. Natural keyword integration
2. Improved structure with headings
3. Better readability
4. Enhanced user engagement

Original content: "{text}"
{target_line}

Provide the optimized version with clear improvements marked."""

META_TEMPLATE = """Create SEO-optimized meta elements for this content:

Content: "{text}"
{target_line}

Provide:
1. 3 compelling title options (50-60 characters)
2. 2 meta descriptions (150-160 characters)
3. 5-8 relevant meta keywords
4. Suggested URL slug
5. Open Graph title and description"""

STRUCTURE_TEMPLATE = """Analyze and improve the content structure for better SEO:

Content: "{text}"

Provide:
1. Suggested heading hierarchy (H1, H2, H3)
2. Content sections that should be added
3. Internal linking opportunities
4. Call-to-action placements
5. FAQ section suggestions
6. Schema markup recommendations"""

DEFAULT_TEMPLATE = """Provide comprehensive SEO optimization suggestions for this content:

Content: "{text}"
{target_line}

Include:
1. Keyword optimization opportunities
2. Content structure improvements
3. Readability enhancements
4. Meta tag suggestions
5. Technical SEO recommendations"""

PROMPT_TEMPLATES = {
    "keywords": KEYWORDS_TEMPLATE,
    "content": CONTENT_TEMPLATE,
    "meta": META_TEMPLATE,
    "structure": STRUCTURE_TEMPLATE,
}


def build_prompt(text: str, target_keyword: str | None, optimization_type: str | None) -> str:
    template = PROMPT_TEMPLATES.get(optimization_type or "", DEFAULT_TEMPLATE)
    target_line = f'Target keyword: "{target_keyword}"' if target_keyword else ""
    return template.format(text=text, target_line=target_line)


def _extract_response_text(response: object) -> str:
    content = ""
    for block in getattr(response, "content", []) or []:
        text = getattr(block, "text", None)
        if text:
            content += text
    return content.strip()


def optimize_content(
    text: str,
    target_keyword: str | None = None,
    optimization_type: str | None = None,
    client: Anthropic | None = None,
) -> dict:
    """
    Ask Claude for optimization suggestions of the requested type.

    Raises ConfigurationError without an API key and UpstreamError when the
    call fails or returns no text. No retries.
    """
    if not text:
        raise ValidationError("Text content is required")

    if client is None:
        api_key = os.getenv("ANTHROPIC_API_KEY")
        if not api_key:
            raise ConfigurationError("Anthropic API key not configured")
        client = Anthropic(api_key=api_key, timeout=REQUEST_TIMEOUT_SECONDS, max_retries=0)

    prompt = build_prompt(text, target_keyword, optimization_type)
    try:
        response = client.messages.create(
            model=MODEL,
            max_tokens=MAX_TOKENS,
            system=SYSTEM_MESSAGE,
            messages=[{"role": "user", "content": prompt}],
            temperature=TEMPERATURE,
        )
    except AnthropicError as e:
        logger.error("Claude optimization failed: %s", e)
        raise UpstreamError("Failed to generate AI optimization", details=str(e)) from e

    content = _extract_response_text(response)
    if getattr(response, "stop_reason", None) == "max_tokens":
        logger.warning("Claude output hit max_tokens for model=%s", MODEL)
    if not content:
        raise UpstreamError("Failed to generate AI optimization", details="Empty Claude response content.")

    return {
        "optimization": content,
        "type": optimization_type,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
