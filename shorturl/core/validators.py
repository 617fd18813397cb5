"""
Input Validators

This module provides validation functions for user inputs.

Accepted origin URLs are the two URI shapes an HTTP client can use as a
target: absolute URIs in any scheme (``https://host/path``,
``ftp://host/file``, ``urn:isbn:0451450523``) and authority-form
``host[:port]``. The input is never rewritten; callers store it verbatim.

Security Considerations:
- Whitespace, control characters and non-ASCII text are rejected, so a
  stored URL is always safe to place in a Location header
- Length limits prevent DoS attacks
"""

import re
from urllib.parse import urlsplit

MAX_URL_LENGTH = 2048  # RFC 7230 practical limit

# RFC 3986: scheme = ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )
_SCHEME_RE = re.compile(r"^([A-Za-z][A-Za-z0-9+.\-]*):(.*)$", re.DOTALL)

# host (reg-name, IPv4 or bracketed IP literal) with an optional port
_AUTHORITY_RE = re.compile(
    r"^(?:\[[0-9A-Fa-f:.]+\]|[A-Za-z0-9\-._~!$&'()*+,;=%]+)(?::\d*)?$"
)


def validate_url_length(url: str, max_length: int = MAX_URL_LENGTH) -> bool:
    """
    Validate URL length to prevent DoS attacks.

    Args:
        url: The URL to validate
        max_length: Maximum allowed length (default: 2048 per RFC 7230)

    Returns:
        True if URL length is valid, False otherwise
    """
    return bool(url) and len(url) <= max_length


def has_forbidden_characters(url: str) -> bool:
    """Return True if the URL contains whitespace, control, DEL or non-ASCII characters."""
    return any(ord(char) <= 0x20 or ord(char) >= 0x7F for char in url)


def _is_valid_hierarchical(url: str) -> bool:
    """Check ``scheme://authority...``: the authority must be present and well-formed."""
    try:
        result = urlsplit(url)
        # Accessing port validates it (raises on non-numeric or out of range)
        result.port
    except ValueError:
        return False

    if not result.netloc:
        return False

    authority = result.netloc.rpartition("@")[2]
    return bool(_AUTHORITY_RE.match(authority))


def is_valid_url(url: str) -> bool:
    """
    Check that a string is a well-formed URI usable as a redirect target.

    The URL must:
    - be a non-empty string within MAX_URL_LENGTH
    - contain only printable ASCII without spaces
    - be an absolute URI (any scheme; ``scheme://`` forms need an authority)
      or an authority ``host[:port]``

    Args:
        url: The URL string to validate

    Returns:
        True if valid, False otherwise
    """
    if not isinstance(url, str) or not validate_url_length(url):
        return False

    if has_forbidden_characters(url):
        return False

    match = _SCHEME_RE.match(url)
    if match is None:
        return bool(_AUTHORITY_RE.match(url))

    rest = match.group(2)
    if rest.startswith("//"):
        return _is_valid_hierarchical(url)

    return True
