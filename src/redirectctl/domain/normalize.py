"""Domain-string normalization for the subdomain heuristic.

Reduces a URL-like string to a bare host. Only the advisory check uses
these helpers; duplicate and cycle checks compare raw strings.

NOTE: ``strip_protocol`` splits on the first ``//`` anywhere in the input,
not only after a scheme colon, so ``a.com/x//y`` normalizes to ``y``.
"""

from __future__ import annotations

_PROTOCOL_MARKER = "//"
_PATH_SEPARATOR = "/"


def strip_protocol(text: str) -> str:
    """Return everything after the first ``//``, or *text* unchanged.

    Examples:
        >>> strip_protocol("http://example.com/path")
        'example.com/path'
        >>> strip_protocol("example.com")
        'example.com'
    """
    _, marker, rest = text.partition(_PROTOCOL_MARKER)
    if not marker:
        return text
    return rest


def strip_path(text: str) -> str:
    """Return everything before the first ``/``, or *text* unchanged."""
    head, _, _ = text.partition(_PATH_SEPARATOR)
    return head


def get_domain(text: str) -> str:
    """Bare domain of a URL-like string (protocol and path removed)."""
    return strip_path(strip_protocol(text))
