"""Email gating for the AI optimizer.

ACCEPTED_EMAIL is the single configured address; AUTHORIZED_EMAILS may add a
comma-separated allowlist.
"""

import hmac
import os

from errors import ConfigurationError


def _configured_emails() -> list[str]:
    emails = [os.getenv("ACCEPTED_EMAIL", "").strip()]
    emails.extend(e.strip() for e in os.getenv("AUTHORIZED_EMAILS", "").split(","))
    return [e for e in emails if e]


def verify_email(email: object) -> bool:
    """Trimmed, case-insensitive match against ACCEPTED_EMAIL."""
    accepted = os.getenv("ACCEPTED_EMAIL", "").strip()
    if not accepted:
        raise ConfigurationError("Server configuration error")
    if not isinstance(email, str):
        return False
    return email.strip().lower() == accepted.lower()


def is_authorized_for_optimization(email: object) -> bool:
    """Exact, case-sensitive match against any configured address."""
    if not isinstance(email, str) or not email:
        return False
    candidate = email.encode("utf-8")
    # no short-circuit
    matches = [hmac.compare_digest(candidate, allowed.encode("utf-8")) for allowed in _configured_emails()]
    return any(matches)
