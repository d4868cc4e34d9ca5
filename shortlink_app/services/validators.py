"""
Pure validation helpers for target URLs and short codes.
"""

import re
from typing import Annotated

from pydantic import AnyUrl, TypeAdapter, UrlConstraints
from pydantic import ValidationError as PydanticValidationError

CODE_PATTERN = re.compile(r"^[A-Za-z0-9]{6,8}$")
SCHEME_PATTERN = re.compile(r"^https?://", re.IGNORECASE)
DEFAULT_SCHEME = "https://"

# No length cap, unlike HttpUrl (2083 chars)
_http_url = TypeAdapter(
    Annotated[AnyUrl, UrlConstraints(allowed_schemes=["http", "https"], host_required=True)]
)


def normalize_url(url: str) -> str:
    """
    Return the URL with an http(s) scheme.

    URLs that already start with http:// or https:// are returned
    unchanged, anything else gets https:// prepended. Idempotent.
    """
    if SCHEME_PATTERN.match(url):
        return url
    return f"{DEFAULT_SCHEME}{url}"


def is_valid_url(url: str) -> bool:
    """Check that the URL, once given a scheme, parses as an absolute URL."""
    if not isinstance(url, str) or not url.strip():
        return False
    try:
        _http_url.validate_python(normalize_url(url))
    except PydanticValidationError:
        return False
    return True


def is_valid_code(code: str) -> bool:
    """6 to 8 ASCII letters or digits, nothing else."""
    return isinstance(code, str) and CODE_PATTERN.fullmatch(code) is not None
