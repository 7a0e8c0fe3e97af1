"""Error taxonomy shared by both analysis pipelines.

Every error carries the HTTP status it maps to; main.py renders them as
`{"error": ..., "details": ..., "timestamp": ...}`.
"""


class SEOscopeError(Exception):
    status_code = 500

    def __init__(self, message: str, details: str | None = None, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details
        if status_code is not None:
            self.status_code = status_code


class ValidationError(SEOscopeError):
    """Malformed or out-of-range input."""

    status_code = 400


class AuthorizationError(SEOscopeError):
    """Email not on the allowlist."""

    status_code = 400


class UpstreamError(SEOscopeError):
    """Annotation, LLM or page-fetch failure.

    Defaults to 500; fetch-target failures (non-2xx page, unreachable host)
    are raised with status_code=400.
    """

    status_code = 500


class ConfigurationError(SEOscopeError):
    """A required server secret is missing."""

    status_code = 500
