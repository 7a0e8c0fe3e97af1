"""SEOscope API – FastAPI app and endpoints."""

from datetime import datetime, timezone
import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

load_dotenv(dotenv_path=Path(__file__).resolve().parent / ".env")

from access import is_authorized_for_optimization, verify_email
from ai_service import optimize_content
from errors import AuthorizationError, SEOscopeError, ValidationError
from keyword_insertion import insert_keyword
from schemas import (
    AnalyzeTextRequest,
    AnalyzeUrlRequest,
    InsertKeywordRequest,
    InsertKeywordResponse,
    OptimizeRequest,
    OptimizeResponse,
    TextAnalysisResponse,
    UrlAnalysisResponse,
    VerifyEmailRequest,
    VerifyEmailResponse,
)
from text_analysis import analyze_text
from url_analysis import analyze_url

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("seoscope")

app = FastAPI(
    title="SEOscope API",
    description="SEO content scoring, keyword extraction and page audits",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",") if o.strip()],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error_body(error: str, details: str | None = None) -> dict:
    body = {"error": error, "timestamp": datetime.now(timezone.utc).isoformat()}
    if details:
        body["details"] = details
    return body


@app.exception_handler(SEOscopeError)
async def handle_seoscope_error(request: Request, exc: SEOscopeError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s (%s)", request.method, request.url.path, exc.message, exc.details)
    return JSONResponse(status_code=exc.status_code, content=_error_body(exc.message, exc.details))


@app.exception_handler(RequestValidationError)
async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    first = exc.errors()[0] if exc.errors() else {}
    return JSONResponse(
        status_code=400,
        content=_error_body("Invalid request body", str(first.get("msg", "")) or None),
    )


@app.exception_handler(Exception)
async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content=_error_body("Internal server error", str(exc)))


@app.post("/api/analyze", response_model=TextAnalysisResponse)
def analyze(body: AnalyzeTextRequest) -> TextAnalysisResponse:
    """
    Pipeline: validate -> TextRazor -> metrics -> keywords -> score -> recommendations.
    """
    result = analyze_text(body.text, target_keyword=body.target_keyword)
    return TextAnalysisResponse.model_validate(result)


@app.post("/api/ai-optimize", response_model=OptimizeResponse)
def ai_optimize(body: OptimizeRequest) -> OptimizeResponse:
    """Generate optimization suggestions with Claude for an authorized email."""
    if not body.text:
        raise ValidationError("Text content is required")
    if not is_authorized_for_optimization(body.email):
        raise AuthorizationError("Invalid email provided")

    result = optimize_content(
        text=body.text,
        target_keyword=body.target_keyword,
        optimization_type=body.optimization_type,
    )
    return OptimizeResponse.model_validate(result)


@app.post("/api/analyze-url", response_model=UrlAnalysisResponse, response_model_exclude_none=True)
def analyze_page(body: AnalyzeUrlRequest) -> UrlAnalysisResponse:
    """Fetch a live page and report technical SEO and performance signals."""
    result = analyze_url(body.url)
    return UrlAnalysisResponse.model_validate(result)


@app.post("/api/insert-keyword", response_model=InsertKeywordResponse)
def insert_keyword_route(body: InsertKeywordRequest) -> InsertKeywordResponse:
    if not body.text or not body.keyword:
        raise ValidationError("Text and keyword are required")
    return InsertKeywordResponse(updated_text=insert_keyword(body.text, body.keyword))


@app.post("/api/verify-email", response_model=VerifyEmailResponse)
def verify_email_route(body: VerifyEmailRequest) -> VerifyEmailResponse:
    return VerifyEmailResponse(is_valid=verify_email(body.email))


@app.get("/health")
def health() -> dict:
    """Health check for deployment."""
    return {"status": "ok"}
