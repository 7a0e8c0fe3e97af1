"""Pydantic schemas for API request/response.

Fields are snake_case in Python and camelCase on the wire.
"""

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- Requests ---
# Required fields are optional here so that missing values surface as the
# 400 messages of the error taxonomy rather than as schema errors.


class AnalyzeTextRequest(CamelModel):
    """Request body for POST /api/analyze."""

    text: str | None = None
    target_keyword: str | None = None
    url: str | None = None

    @field_validator("target_keyword", mode="before")
    @classmethod
    def normalize_keyword(cls, value: object) -> str | None:
        cleaned = str(value or "").strip()
        return cleaned or None


class OptimizeRequest(CamelModel):
    """Request body for POST /api/ai-optimize."""

    text: str | None = None
    target_keyword: str | None = None
    optimization_type: str | None = "default"
    email: str | None = None


class AnalyzeUrlRequest(CamelModel):
    url: str | None = None


class InsertKeywordRequest(CamelModel):
    text: str | None = None
    keyword: str | None = None


class VerifyEmailRequest(CamelModel):
    email: str | None = None


# --- Text analysis ---


class Readability(CamelModel):
    flesch_score: int
    flesch_grade: float
    readability_level: str


class Keyword(CamelModel):
    text: str
    relevance_score: float
    confidence: float
    frequency: int
    positions: list[int]
    type: str


class KeywordDensity(CamelModel):
    keyword: str
    density: float
    count: int
    type: str


class TargetKeywordAnalysis(CamelModel):
    keyword: str
    frequency: int
    density: float
    in_title: bool
    first_paragraph: bool
    distribution: float


class EntityItem(CamelModel):
    text: str
    type: str
    relevance_score: float
    confidence: float


class TopicItem(CamelModel):
    label: str
    score: float
    wiki_link: str | None = None


class Sentiment(CamelModel):
    score: float
    label: str
    confidence: float


class ContentStructure(CamelModel):
    has_headings: bool
    heading_count: int
    list_count: int
    link_count: int
    image_count: int
    has_paragraphs: bool


class CategoryScore(CamelModel):
    score: int
    max_score: int
    reason: str


class SeoAnalysis(CamelModel):
    score: int
    grade: str
    breakdown: dict[str, CategoryScore]
    title_suggestions: list[str]
    meta_description_suggestion: str
    recommendations: list[str]


class ProcessingInfo(CamelModel):
    textrazor_entities: int
    textrazor_topics: int
    textrazor_words: int
    processing_time: int


class TextAnalysisResponse(CamelModel):
    """Full result of POST /api/analyze."""

    word_count: int
    sentence_count: int
    paragraph_count: int
    avg_words_per_sentence: float
    avg_sentences_per_paragraph: float
    readability: Readability
    keywords: list[Keyword]
    keyword_density: list[KeywordDensity]
    target_keyword_analysis: TargetKeywordAnalysis | None = None
    entities: list[EntityItem]
    topics: list[TopicItem]
    sentiment: Sentiment
    content_structure: ContentStructure
    seo_analysis: SeoAnalysis
    processing_info: ProcessingInfo


# --- URL analysis ---


class TechnicalFinding(CamelModel):
    found: bool
    message: str
    url: str | None = None
    content: str | None = None
    length: int | None = None
    missing: list[str] | None = None
    tags: dict[str, str] | None = None
    types: list[str] | None = None


class TechnicalSeo(CamelModel):
    canonical_tag: TechnicalFinding
    noindex_tag: TechnicalFinding
    www_redirect: TechnicalFinding
    robots_txt: TechnicalFinding
    open_graph: TechnicalFinding
    schema_markup: TechnicalFinding
    meta_description: TechnicalFinding
    title_tag: TechnicalFinding


class PerformanceFinding(CamelModel):
    message: str
    found: bool | None = None
    optimized: bool | None = None
    count: int | None = None
    size: str | None = None
    bytes: int | None = None
    time: str | None = None
    ms: int | None = None


class Performance(CamelModel):
    expires_headers: PerformanceFinding
    js_minified: PerformanceFinding
    css_minified: PerformanceFinding
    request_count: PerformanceFinding
    html_size: PerformanceFinding
    response_time: PerformanceFinding
    image_optimization: PerformanceFinding


class UrlAnalysisResponse(CamelModel):
    """Full result of POST /api/analyze-url."""

    url: str
    technical_seo: TechnicalSeo
    performance: Performance
    seo_score: int
    recommendations: list[str]


# --- Misc ---


class OptimizeResponse(CamelModel):
    optimization: str
    type: str | None = None
    timestamp: str


class InsertKeywordResponse(CamelModel):
    updated_text: str


class VerifyEmailResponse(CamelModel):
    is_valid: bool
