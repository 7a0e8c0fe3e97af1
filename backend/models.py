"""Data models and types used across the backend.

TextRazor payload models are pydantic so every optional field is defaulted
at the parse boundary. Pipeline intermediates are TypedDicts.
"""

from typing import Literal, TypedDict

from pydantic import BaseModel, ConfigDict, Field, model_validator


class _Payload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def nulls_as_defaults(cls, data: object) -> object:
        # explicit nulls fall back to the field default
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class TextRazorEntity(_Payload):
    matched_text: str = Field(default="", alias="matchedText")
    type: list[str] = Field(default_factory=list)
    freebase_types: list[str] = Field(default_factory=list, alias="freebaseTypes")
    dbpedia_types: list[str] = Field(default_factory=list, alias="dbpediaTypes")
    relevance_score: float = Field(default=0.0, alias="relevanceScore")
    confidence_score: float = Field(default=0.0, alias="confidenceScore")
    starting_pos: int = Field(default=0, alias="startingPos")
    ending_pos: int = Field(default=0, alias="endingPos")

    @property
    def primary_type(self) -> str:
        for types in (self.dbpedia_types, self.freebase_types, self.type):
            if types:
                return types[0]
        return "Unknown"


class TextRazorTopic(_Payload):
    id: str = ""
    label: str = ""
    score: float = 0.0
    wiki_link: str | None = Field(default=None, alias="wikiLink")


class TextRazorWord(_Payload):
    token: str = ""
    lemma: str = ""
    part_of_speech: str = Field(default="", alias="partOfSpeech")
    starting_pos: int = Field(default=0, alias="startingPos")
    ending_pos: int = Field(default=0, alias="endingPos")


class TextRazorSentence(_Payload):
    words: list[TextRazorWord] = Field(default_factory=list)


class TextRazorSentiment(_Payload):
    score: float = 0.0
    label: str = "neutral"
    confidence: float = 0.5


class AnnotatedDocument(_Payload):
    """The `response` object of a TextRazor analysis call."""

    entities: list[TextRazorEntity] = Field(default_factory=list)
    topics: list[TextRazorTopic] = Field(default_factory=list)
    sentences: list[TextRazorSentence] = Field(default_factory=list)
    sentiment: TextRazorSentiment = Field(default_factory=TextRazorSentiment)

    @property
    def words(self) -> list[TextRazorWord]:
        return [word for sentence in self.sentences for word in sentence.words]

    @classmethod
    def from_api_payload(cls, payload: object) -> "AnnotatedDocument":
        body = payload.get("response") if isinstance(payload, dict) else None
        return cls.model_validate(body if isinstance(body, dict) else {})


KeywordType = Literal["entity", "noun", "adjective", "frequent"]


class KeywordCandidate(TypedDict):
    text: str
    relevance_score: float
    confidence: float
    frequency: int
    positions: list[int]
    type: KeywordType


class TextMetrics(TypedDict):
    """Counts and readability derived from raw text."""

    word_count: int
    sentence_count: int
    paragraph_count: int
    paragraphs: list[str]
    avg_words_per_sentence: float
    avg_sentences_per_paragraph: float
    flesch_score: int
    flesch_grade: float
    readability_level: str
    heading_count: int
    list_count: int
    link_count: int
    image_count: int


class CategoryScore(TypedDict):
    score: int
    max_score: int
    reason: str


class ScoreResult(TypedDict):
    total_score: int
    grade: str
    breakdown: dict[str, CategoryScore]


class FetchedPage(TypedDict):
    url: str
    html: str
    status_code: int
    response_time_ms: int


class RobotsTxtResult(TypedDict, total=False):
    found: bool
    content: str


class TechnicalFinding(TypedDict, total=False):
    found: bool
    message: str
    url: str | None
    content: str
    length: int
    missing: list[str]
    tags: dict[str, str]
    types: list[str]


class TechnicalSeoReport(TypedDict):
    canonical_tag: TechnicalFinding
    noindex_tag: TechnicalFinding
    www_redirect: TechnicalFinding
    robots_txt: TechnicalFinding
    open_graph: TechnicalFinding
    schema_markup: TechnicalFinding
    meta_description: TechnicalFinding
    title_tag: TechnicalFinding


class PerformanceFinding(TypedDict, total=False):
    found: bool
    optimized: bool
    message: str
    count: int
    size: str
    bytes: int
    time: str
    ms: int


class PerformanceReport(TypedDict):
    expires_headers: PerformanceFinding
    js_minified: PerformanceFinding
    css_minified: PerformanceFinding
    request_count: PerformanceFinding
    html_size: PerformanceFinding
    response_time: PerformanceFinding
    image_optimization: PerformanceFinding
