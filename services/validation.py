# services/validation.py

from typing import Optional

from services.errors import ValidationError


def require_url(url: Optional[str]) -> str:
    """Reject a missing or blank URL before any network access."""
    if not url or not url.strip():
        raise ValidationError("URL is required")
    return url.strip()
